"""
Unified Exception Hierarchy for the Waifu.im client.

Two disjoint families:
- Local validation errors, raised before any request is sent
- Remote errors, raised after the server (or the transport) answered badly

Exception Hierarchy:
    WaifuError (base)
    ├── ApiError            (non-2xx response, carries status + detail)
    ├── NetworkError        (transport failure)
    ├── ParseError          (undecodable response body)
    ├── ConfigurationError
    └── ValidationError
        ├── TokenRequiredError
        └── AdminTokenRequiredError
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class ErrorCategory(Enum):
    """Categories for error classification."""

    API = "api"
    VALIDATION = "validation"
    DATA = "data"
    CONFIGURATION = "config"
    NETWORK = "network"


class WaifuError(Exception):
    """
    Base exception for all Waifu.im client errors.

    Provides:
    - Category classification
    - Retry guidance (informational only, the client never retries)
    """

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.API,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": str(self),
            "category": self.category.value,
            "retryable": self.retryable,
        }


# =============================================================================
# Remote Errors
# =============================================================================


class ApiError(WaifuError):
    """
    Raised when the API answers with a non-success status.

    The message is the ``detail`` string from the server's error body.
    """

    def __init__(self, response: httpx.Response, detail: str) -> None:
        status = response.status_code
        super().__init__(
            detail,
            category=ErrorCategory.API,
            retryable=status == 429 or status >= 500,
        )
        self.response = response
        self.detail = detail

    @property
    def status(self) -> int:
        """HTTP status code of the failed response."""
        return self.response.status_code

    @property
    def status_text(self) -> str:
        """HTTP reason phrase of the failed response."""
        return self.response.reason_phrase

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status"] = self.status
        result["status_text"] = self.status_text
        return result


class NetworkError(WaifuError):
    """Raised when the request could not be completed by the transport."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.NETWORK, retryable=True)


class ParseError(WaifuError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        full_msg = f"Parse error: {message}"
        if status is not None:
            full_msg = f"Parse error (HTTP {status}): {message}"
        super().__init__(full_msg, category=ErrorCategory.DATA)
        self.status = status


class ConfigurationError(WaifuError):
    """Raised for invalid client configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.CONFIGURATION)


# =============================================================================
# Local Validation Errors
# =============================================================================


class ValidationError(WaifuError):
    """Base class for errors raised before contacting the API."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.VALIDATION, retryable=False)


class TokenRequiredError(ValidationError):
    """Raised when an endpoint needs a token and none is configured."""

    def __init__(self, endpoint: str | None = None) -> None:
        msg = "token required for this endpoint"
        if endpoint:
            msg = f"token required for this endpoint: {endpoint}"
        super().__init__(msg)
        self.endpoint = endpoint


class AdminTokenRequiredError(ValidationError):
    """Raised when a query option needs admin permissions and no token is configured."""

    def __init__(self, option: str, message: str) -> None:
        super().__init__(message)
        self.option = option
