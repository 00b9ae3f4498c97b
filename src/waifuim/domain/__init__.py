"""
Domain Layer - Core Value Objects

Contains:
- entities: Image, Artist, Tag, ImageReport, SearchQuery
"""

from .entities import (
    Artist,
    FavoriteStatus,
    Image,
    ImageOrder,
    ImageOrientation,
    ImageReport,
    SearchQuery,
    Tag,
    Tags,
)

__all__ = [
    "Artist",
    "FavoriteStatus",
    "Image",
    "ImageOrder",
    "ImageOrientation",
    "ImageReport",
    "SearchQuery",
    "Tag",
    "Tags",
]
