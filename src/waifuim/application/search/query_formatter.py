"""
Query Formatter - SearchQuery to URL query string.

Parameters are emitted in a fixed order so that the same query always
produces the same string:

    user_id, included_tags, excluded_tags, included_files, excluded_files,
    order_by, orientation, width, height, byte_size, is_nsfw, gif, limit, full

Filter expressions (width/height/byte_size) are passed through verbatim;
the operator they carry is validated by the server, not here.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import urlencode

if TYPE_CHECKING:
    from waifuim.domain.entities.query import SearchQuery

# Attribute names double as wire keys.
_LIST_FIELDS = ("included_tags", "excluded_tags", "included_files", "excluded_files")
_STRING_FIELDS = ("order_by", "orientation", "width", "height", "byte_size")
_FLAG_FIELDS = ("is_nsfw", "gif")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _append_maybe_list(
    params: list[tuple[str, str]],
    key: str,
    value: str | int | Sequence[str | int],
) -> None:
    """Append one pair per element for sequences, a single pair for a string or int."""
    if isinstance(value, (str, int)):
        params.append((key, str(value)))
        return
    for item in value:
        params.append((key, str(item)))


def build_query_params(query: SearchQuery, user_id: int | None = None) -> list[tuple[str, str]]:
    """
    Build the ordered list of (key, value) pairs for a query.

    Args:
        query: Search options
        user_id: Optional user whose data is requested (favorites endpoint)

    Returns:
        Ordered list of wire-format pairs
    """
    params: list[tuple[str, str]] = []

    if user_id is not None:
        params.append(("user_id", str(user_id)))

    for key in _LIST_FIELDS:
        value = getattr(query, key)
        if value is not None and value != "":
            _append_maybe_list(params, key, value)

    for key in _STRING_FIELDS:
        value = getattr(query, key)
        if isinstance(value, Enum):
            value = value.value
        if value:
            params.append((key, str(value)))

    for key in _FLAG_FIELDS:
        value = getattr(query, key)
        if value is not None:
            params.append((key, _format_bool(value)))

    if query.limit is not None:
        params.append(("limit", str(int(query.limit))))

    if query.full is not None:
        params.append(("full", _format_bool(query.full)))

    return params


def format_query(query: SearchQuery, user_id: int | None = None) -> str:
    """
    Convert a SearchQuery into a URL-encoded query string (no leading ``?``).

    Example:
        >>> format_query(SearchQuery(included_tags=["maid", "uniform"], is_nsfw=False))
        'included_tags=maid&included_tags=uniform&is_nsfw=false'
    """
    return urlencode(build_query_params(query, user_id))
