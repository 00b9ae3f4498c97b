"""
Key Normalizer - snake_case response keys to camelCase.

Walks an arbitrary JSON-decoded value. Object keys are rewritten, every
other value (including string contents) is left as-is.
"""

from __future__ import annotations

from typing import Any


def to_camel_case(key: str) -> str:
    """
    Convert a single snake_case key to camelCase.

    Leading underscores are kept; keys without underscores are returned
    unchanged, so already-camelCase keys pass through.

    Example:
        >>> to_camel_case("dominant_color")
        'dominantColor'
    """
    if "_" not in key:
        return key

    stripped = key.lstrip("_")
    prefix = key[: len(key) - len(stripped)]
    head, *rest = stripped.split("_")
    if not head and not rest:
        return key
    return prefix + head + "".join(part[:1].upper() + part[1:] for part in rest if part)


def camelize_keys(value: Any) -> Any:
    """
    Recursively convert mapping keys from snake_case to camelCase.

    Lists are normalized element by element; scalars are returned untouched.
    """
    if isinstance(value, dict):
        return {
            (to_camel_case(k) if isinstance(k, str) else k): camelize_keys(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [camelize_keys(item) for item in value]
    return value
