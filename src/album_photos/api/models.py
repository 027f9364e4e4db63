"""Pydantic models for album API responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from album_photos.domain.albums import Album, Photo


class PhotoResponse(BaseModel):
    """Photo payload."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    url: str
    thumbnail_url: str

    @classmethod
    def from_domain(cls, photo: Photo) -> "PhotoResponse":
        return cls(
            id=photo.id,
            title=photo.title,
            url=photo.url,
            thumbnail_url=photo.thumbnail_url,
        )


class AlbumResponse(BaseModel):
    """Album payload with its photos."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    album_id: int
    photos: list[PhotoResponse]

    @classmethod
    def from_domain(cls, album: Album) -> "AlbumResponse":
        return cls(
            album_id=album.album_id,
            photos=[PhotoResponse.from_domain(photo) for photo in album.photos],
        )
