"""Photo API client for the upstream album service."""

from dataclasses import dataclass
from json import JSONDecodeError
from typing import Protocol

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from album_photos.domain.albums import Photo


class PhotoServiceError(Exception):
    """Base error for failed upstream photo lookups."""


class TransportError(PhotoServiceError):
    """The upstream call could not be completed."""


class UpstreamError(PhotoServiceError):
    """The upstream answered with an error status or an unusable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AlbumNotFoundError(UpstreamError):
    """The upstream does not know the requested album."""


class PhotoClient(Protocol):
    """Interface for fetching album photos."""

    async def fetch_photos(self, album_id: int) -> list[Photo]:
        """Fetch the photos of an album in upstream order."""


@dataclass
class HttpxPhotoClient(PhotoClient):
    """HTTPX-backed photo client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxPhotoClient":
        """Create a photo client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def fetch_photos(self, album_id: int) -> list[Photo]:
        """Fetch photos for an album."""
        url = f"{self.base_url.rstrip('/')}/albums/{album_id}/photos"
        try:
            response = await self.http_client.get(
                url, headers={"Accept": "application/json"}
            )
        except httpx.TransportError as exc:
            raise TransportError(f"Photo service unreachable: {exc}") from exc
        except httpx.DecodingError as exc:
            raise UpstreamError("Photo service returned an undecodable body") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise AlbumNotFoundError(
                f"Album {album_id} not found", status_code=response.status_code
            )
        if not response.is_success:
            raise UpstreamError(
                f"Photo service returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except (JSONDecodeError, UnicodeDecodeError) as exc:
            raise UpstreamError(
                "Photo service returned malformed JSON",
                status_code=response.status_code,
            ) from exc
        return _parse_photos(payload)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


class UpstreamPhoto(BaseModel):
    """Photo object as returned by the upstream service."""

    model_config = ConfigDict(extra="ignore")

    id: StrictInt
    title: StrictStr
    url: StrictStr
    thumbnail_url: StrictStr = Field(alias="thumbnailUrl")


_UPSTREAM_PHOTOS = TypeAdapter(list[UpstreamPhoto])


def _parse_photos(payload: object) -> list[Photo]:
    """Convert the upstream JSON array into photos."""
    try:
        photos = _UPSTREAM_PHOTOS.validate_python(payload)
    except ValidationError as exc:
        raise UpstreamError(
            f"Photo service returned an unexpected payload: {exc.error_count()} errors"
        ) from exc
    return [
        Photo(
            id=photo.id,
            title=photo.title,
            url=photo.url,
            thumbnail_url=photo.thumbnail_url,
        )
        for photo in photos
    ]
