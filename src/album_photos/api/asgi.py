"""ASGI entrypoint for the album photos API."""

from album_photos.api.app import create_app
from album_photos.containers import build_container

app = create_app(build_container())
