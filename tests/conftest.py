"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import httpx
import pytest

from album_photos.adapters.photo_client import (
    HttpxPhotoClient,
    PhotoClient,
    PhotoServiceError,
)
from album_photos.config import Settings
from album_photos.containers import AppContainer
from album_photos.domain.albums import Photo
from album_photos.services.albums import AlbumService
from album_photos.testing.client import MockServerClient
from album_photos.testing.process import MockServerProcess


@dataclass
class FakePhotoClient(PhotoClient):
    """Fake photo client with in-memory responses."""

    photos: list[Photo] = field(
        default_factory=lambda: [
            Photo(id=51, title="t1", url="u1", thumbnail_url="tu1"),
            Photo(id=52, title="t2", url="u2", thumbnail_url="tu2"),
        ]
    )
    error: PhotoServiceError | None = None
    calls: list[int] = field(default_factory=list)

    async def fetch_photos(self, album_id: int) -> list[Photo]:
        self.calls.append(album_id)
        if self.error is not None:
            raise self.error
        return list(self.photos)


@pytest.fixture
def settings() -> Settings:
    return Settings(photo_service_base_url="https://photos.test")


@pytest.fixture
def photo_client() -> FakePhotoClient:
    return FakePhotoClient()


@pytest.fixture
def container(settings: Settings, photo_client: FakePhotoClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        photo_client=photo_client,
        album_service=AlbumService(photo_client),
        close_resources=close_resources,
    )


@pytest.fixture(scope="session")
def mock_server_process() -> Iterator[MockServerProcess]:
    with MockServerProcess() as process:
        yield process


@pytest.fixture
def mock_server(mock_server_process: MockServerProcess) -> Iterator[MockServerClient]:
    """Mock server client, reset before each test."""
    client = mock_server_process.client()
    client.reset()
    yield client
    client.close()


@pytest.fixture
def live_container(mock_server_process: MockServerProcess) -> AppContainer:
    """Container whose photo client talks to the mock server."""
    settings = Settings(photo_service_base_url=mock_server_process.base_url)
    photo_client = HttpxPhotoClient(
        base_url=settings.photo_service_base_url,
        http_client=httpx.AsyncClient(trust_env=False),
    )

    async def close_resources() -> None:
        await photo_client.close()

    return AppContainer(
        settings=settings,
        photo_client=photo_client,
        album_service=AlbumService(photo_client),
        close_resources=close_resources,
    )
