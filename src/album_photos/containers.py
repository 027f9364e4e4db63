"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from album_photos.adapters.photo_client import HttpxPhotoClient, PhotoClient
from album_photos.config import Settings
from album_photos.services.albums import AlbumService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photo_client: PhotoClient
    album_service: AlbumService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    photo_client = HttpxPhotoClient.create(resolved_settings.photo_service_base_url)
    album_service = AlbumService(photo_client)

    async def close_resources() -> None:
        await photo_client.close()

    return AppContainer(
        settings=resolved_settings,
        photo_client=photo_client,
        album_service=album_service,
        close_resources=close_resources,
    )
