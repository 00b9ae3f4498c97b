"""
Domain Entity: SearchQuery

Structured search options shared by the search and favorites endpoints.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class ImageOrder(str, Enum):
    """Image ordering criteria."""

    FAVORITES = "FAVORITES"
    UPLOADED_AT = "UPLOADED_AT"
    LIKED_AT = "LIKED_AT"
    RANDOM = "RANDOM"


class ImageOrientation(str, Enum):
    """Image orientations."""

    RANDOM = "RANDOM"
    LANDSCAPE = "LANDSCAPE"
    PORTRAIT = "PORTRAIT"


@dataclass(frozen=True)
class SearchQuery:
    """
    Query options used for searching.

    Every field is optional; ``None`` means "not sent". For the boolean
    fields ``False`` is sent explicitly and is not the same as ``None``.

    Attributes:
        included_tags: Images must carry at least all of these tags.
        excluded_tags: Images must carry none of these tags.
        included_files: Only these file IDs or signatures. Integer image
            IDs are accepted alone or in a sequence.
        excluded_files: Never these file IDs or signatures.
        is_nsfw: Force or exclude lewd files.
        gif: Force or prevent .gif files.
        order_by: Ordering criteria.
        orientation: Orientation criteria.
        limit: Number of images to return. Above 30 needs admin permissions.
        full: Return the full result without any limit (admins only).
        width: Width filter with an operator, e.g. ``">=2000"``.
            Accepted operators: <=, >=, >, <, !=, =
        height: Height filter with an operator.
        byte_size: Byte size filter with an operator.
    """

    included_tags: str | Sequence[str] | None = None
    excluded_tags: str | Sequence[str] | None = None
    included_files: str | int | Sequence[str | int] | None = None
    excluded_files: str | int | Sequence[str | int] | None = None
    is_nsfw: bool | None = None
    gif: bool | None = None
    order_by: ImageOrder | str | None = None
    orientation: ImageOrientation | str | None = None
    limit: int | None = None
    full: bool | None = None
    width: str | None = None
    height: str | None = None
    byte_size: str | None = None
