"""
Domain Entities: Image, Artist, Tag, ImageReport

Immutable records built from normalized (camelCase) API payloads.
Attributes follow Python naming; ``from_dict`` reads the payload keys.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FavoriteStatus(str, Enum):
    """Outcome of a favorites mutation."""

    INSERTED = "INSERTED"
    DELETED = "DELETED"


@dataclass(frozen=True)
class Tag:
    """A tag attached to images."""

    tag_id: int
    name: str
    description: str = ""
    is_nsfw: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tag:
        return cls(
            tag_id=data["tagId"],
            name=data["name"],
            description=data.get("description") or "",
            is_nsfw=bool(data.get("isNsfw", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class Artist:
    """An artist, including their social links (any of which may be missing)."""

    artist_id: int
    name: str
    patreon: str | None = None
    pixiv: str | None = None
    twitter: str | None = None
    deviant_art: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Artist:
        return cls(
            artist_id=data["artistId"],
            name=data["name"],
            patreon=data.get("patreon"),
            pixiv=data.get("pixiv"),
            twitter=data.get("twitter"),
            deviant_art=data.get("deviantArt"),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class Image:
    """
    An image returned by the search and favorites endpoints.

    Timestamps are kept as the ISO-8601 strings sent by the server.
    """

    image_id: int
    url: str
    preview_url: str = ""
    signature: str = ""
    extension: str = ""
    dominant_color: str = ""
    width: int = 0
    height: int = 0
    byte_size: int = 0
    is_nsfw: bool = False
    favorites: int = 0
    uploaded_at: str = ""
    liked_at: str | None = None
    source: str | None = None
    artist: Artist | None = None
    tags: tuple[Tag, ...] = field(default_factory=tuple)

    @property
    def is_gif(self) -> bool:
        """Whether the file is an animated GIF."""
        return self.extension.lower() == ".gif"

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Image:
        artist = data.get("artist")
        return cls(
            image_id=data["imageId"],
            url=data["url"],
            preview_url=data.get("previewUrl") or "",
            signature=data.get("signature") or "",
            extension=data.get("extension") or "",
            dominant_color=data.get("dominantColor") or "",
            width=data.get("width", 0),
            height=data.get("height", 0),
            byte_size=data.get("byteSize", 0),
            is_nsfw=bool(data.get("isNsfw", False)),
            favorites=data.get("favorites", 0),
            uploaded_at=data.get("uploadedAt") or "",
            liked_at=data.get("likedAt"),
            source=data.get("source"),
            artist=Artist.from_dict(artist) if artist else None,
            tags=tuple(Tag.from_dict(tag) for tag in data.get("tags", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (auto-tracks new fields)."""
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class Tags(Generic[T]):
    """
    Available tags split by audience.

    ``T`` is ``str`` (tag names) or :class:`Tag` (full records), depending on
    whether full tag information was requested.
    """

    versatile: tuple[T, ...] = ()
    nsfw: tuple[T, ...] = ()

    @staticmethod
    def names_from_dict(data: dict[str, Any]) -> Tags[str]:
        return Tags(
            versatile=tuple(str(name) for name in data.get("versatile", [])),
            nsfw=tuple(str(name) for name in data.get("nsfw", [])),
        )

    @staticmethod
    def records_from_dict(data: dict[str, Any]) -> Tags[Tag]:
        return Tags(
            versatile=tuple(Tag.from_dict(tag) for tag in data.get("versatile", [])),
            nsfw=tuple(Tag.from_dict(tag) for tag in data.get("nsfw", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class ImageReport:
    """
    Result of reporting an image.

    ``author_id`` is a 64-bit integer on the server side. It is kept as a Python
    ``int`` (arbitrary precision), never a float.
    """

    author_id: int
    image_id: int
    description: str = ""
    existed: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ImageReport:
        return cls(
            author_id=int(data["authorId"]),
            image_id=data["imageId"],
            description=data.get("description") or "",
            existed=bool(data.get("existed", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)
