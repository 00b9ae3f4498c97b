"""
Search Application Layer

Turns structured search options into wire-format query strings.
"""

from .query_formatter import build_query_params, format_query

__all__ = [
    "build_query_params",
    "format_query",
]
