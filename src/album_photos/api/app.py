"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from album_photos.adapters.photo_client import (
    AlbumNotFoundError,
    TransportError,
    UpstreamError,
)
from album_photos.api.models import AlbumResponse
from album_photos.app_logging import configure_logging
from album_photos.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Photo service base URL: %s", container.settings.photo_service_base_url
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(AlbumNotFoundError)
    async def album_not_found(request: Request, exc: AlbumNotFoundError) -> JSONResponse:
        logger.warning("Album not found on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(UpstreamError)
    async def upstream_failed(request: Request, exc: UpstreamError) -> JSONResponse:
        logger.warning("Upstream error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)}
        )

    @app.exception_handler(TransportError)
    async def upstream_unreachable(
        request: Request, exc: TransportError
    ) -> JSONResponse:
        logger.warning("Transport error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/albums/{album_id}")
    async def get_album(album_id: int, request: Request) -> AlbumResponse:
        """Return an album with the photos reported by the photo service."""
        state_container: AppContainer = request.app.state.container
        album = await state_container.album_service.get_album(album_id)
        return AlbumResponse.from_domain(album)

    return app
