"""
waifuim - Async client for the Waifu.im API

Search anime images by tag, list available tags, manage a user's favorites
and report images.

Usage:
    from waifuim import WaifuClient, SearchQuery, ImageOrientation

    async with WaifuClient(token="...") as client:
        images = await client.search(
            SearchQuery(included_tags=["maid"], orientation=ImageOrientation.PORTRAIT)
        )
        for image in images:
            print(f"{image.image_id}: {image.url}")

Features:
    - Typed SearchQuery with tri-state filters
    - Immutable Image / Tag / Artist / ImageReport entities
    - Local validation of token-only endpoints and admin-only options
    - ApiError carrying status code, status text and server detail
"""

from .application.search import format_query
from .client import WaifuClient
from .config import ClientOptions, __version__
from .domain import (
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
from .infrastructure.http import camelize_keys
from .shared import (
    AdminTokenRequiredError,
    ApiError,
    ConfigurationError,
    NetworkError,
    ParseError,
    TokenRequiredError,
    ValidationError,
    WaifuError,
)

__all__ = [
    # Client
    "WaifuClient",
    "ClientOptions",
    # Entities
    "Artist",
    "FavoriteStatus",
    "Image",
    "ImageOrder",
    "ImageOrientation",
    "ImageReport",
    "SearchQuery",
    "Tag",
    "Tags",
    # Helpers
    "camelize_keys",
    "format_query",
    # Errors
    "AdminTokenRequiredError",
    "ApiError",
    "ConfigurationError",
    "NetworkError",
    "ParseError",
    "TokenRequiredError",
    "ValidationError",
    "WaifuError",
]
