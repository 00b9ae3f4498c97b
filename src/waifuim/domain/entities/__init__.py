"""
Domain Entities

Core value objects returned by and sent to the Waifu.im API.
"""

from __future__ import annotations

from .image import Artist, FavoriteStatus, Image, ImageReport, Tag, Tags
from .query import ImageOrder, ImageOrientation, SearchQuery

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
