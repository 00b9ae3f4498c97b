"""
Client configuration.

Settings are fixed once a client is built. ``ClientOptions.from_env`` is the
only place in the package that reads environment variables:

    WAIFUIM_TOKEN       Bearer token (optional)
    WAIFUIM_USER_AGENT  User-Agent override
    WAIFUIM_BASE_URL    API host override (tests, proxies)
    WAIFUIM_TIMEOUT     Request timeout in seconds
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from waifuim.shared.exceptions import ConfigurationError

__version__ = "0.1.0"

DEFAULT_BASE_URL = "https://api.waifu.im"
DEFAULT_USER_AGENT = f"waifuim-python/{__version__}"
DEFAULT_TIMEOUT = 30.0
API_VERSION = "v6"


@dataclass(frozen=True)
class ClientOptions:
    """Options for instantiating a client."""

    token: str | None = None
    user_agent: str = DEFAULT_USER_AGENT
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> ClientOptions:
        """
        Build options from ``WAIFUIM_*`` environment variables.

        Unset or blank variables fall back to the defaults.

        Raises:
            ConfigurationError: If WAIFUIM_TIMEOUT is not a positive number
        """
        token = os.environ.get("WAIFUIM_TOKEN", "").strip() or None
        user_agent = os.environ.get("WAIFUIM_USER_AGENT", "").strip() or DEFAULT_USER_AGENT
        base_url = os.environ.get("WAIFUIM_BASE_URL", "").strip() or DEFAULT_BASE_URL

        raw_timeout = os.environ.get("WAIFUIM_TIMEOUT", "").strip()
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(f"WAIFUIM_TIMEOUT must be a number, got {raw_timeout!r}") from e
            if timeout <= 0:
                raise ConfigurationError(f"WAIFUIM_TIMEOUT must be positive, got {raw_timeout!r}")

        return cls(token=token, user_agent=user_agent, base_url=base_url, timeout=timeout)
