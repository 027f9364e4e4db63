"""Album domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Photo:
    """A single photo belonging to an album."""

    id: int
    title: str
    url: str
    thumbnail_url: str


@dataclass(frozen=True)
class Album:
    """An album and its photos, in upstream order."""

    album_id: int
    photos: tuple[Photo, ...]
