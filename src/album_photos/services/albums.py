"""Album assembly on top of the upstream photo API."""

import logging
from dataclasses import dataclass

from album_photos.adapters.photo_client import PhotoClient, PhotoServiceError
from album_photos.domain.albums import Album

_logger = logging.getLogger(__name__)


@dataclass
class AlbumService:
    """Builds albums from upstream photo lists."""

    photo_client: PhotoClient

    async def get_album(self, album_id: int) -> Album:
        """Fetch the photos of an album and wrap them with its id."""
        try:
            photos = await self.photo_client.fetch_photos(album_id)
        except PhotoServiceError as exc:
            _logger.warning("Album %s lookup failed: %s", album_id, exc)
            raise
        _logger.info("Album %s fetched: photos=%s", album_id, len(photos))
        return Album(album_id=album_id, photos=tuple(photos))
