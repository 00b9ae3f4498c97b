"""
Shared module for the Waifu.im client.

Provides:
- Unified exception hierarchy
"""

from .exceptions import (
    # Remote errors
    ApiError,
    ConfigurationError,
    # Base
    ErrorCategory,
    NetworkError,
    ParseError,
    WaifuError,
    # Validation errors
    AdminTokenRequiredError,
    TokenRequiredError,
    ValidationError,
)

__all__ = [
    "AdminTokenRequiredError",
    "ApiError",
    "ConfigurationError",
    "ErrorCategory",
    "NetworkError",
    "ParseError",
    "TokenRequiredError",
    "ValidationError",
    "WaifuError",
]
