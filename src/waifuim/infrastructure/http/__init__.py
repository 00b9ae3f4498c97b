"""
HTTP infrastructure: response normalization.
"""

from .key_normalizer import camelize_keys, to_camel_case

__all__ = ["camelize_keys", "to_camel_case"]
