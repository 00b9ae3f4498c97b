"""
Waifu.im Client - async wrapper for the Waifu.im API.

Every public method issues at most one HTTP request:
- Preconditions (token, admin-only options) are checked first and raise
  a ValidationError without touching the network
- Non-2xx responses raise ApiError with the server's ``detail`` message
- Successful bodies are key-normalized (snake_case -> camelCase) and mapped
  to immutable domain entities

There is no retry, caching or rate limiting; the server signals throttling
with an error status and the caller decides what to do.

Usage:
    async with WaifuClient(token="...") as client:
        images = await client.search(SearchQuery(included_tags=["maid"]))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Literal, overload

import httpx
from typing_extensions import Self

from waifuim.application.search.query_formatter import format_query
from waifuim.config import API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from waifuim.domain.entities.image import FavoriteStatus, Image, ImageReport, Tag, Tags
from waifuim.domain.entities.query import SearchQuery
from waifuim.infrastructure.http.key_normalizer import camelize_keys
from waifuim.shared.exceptions import (
    AdminTokenRequiredError,
    ApiError,
    NetworkError,
    ParseError,
    TokenRequiredError,
)

if TYPE_CHECKING:
    from waifuim.config import ClientOptions

logger = logging.getLogger(__name__)

# Above this many images per search, an admin token is needed.
MAX_PUBLIC_LIMIT = 30


class WaifuClient:
    """
    Main entry point to the Waifu.im API.

    The token and user agent are fixed at construction, so one instance can
    be shared by concurrent tasks without locking.

    Example:
        >>> async with WaifuClient() as client:
        ...     tags = await client.get_tags()
        ...     print(tags.versatile)
    """

    _service_name: str = "Waifu.im"

    def __init__(
        self,
        token: str | None = None,
        user_agent: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Optional token used for authentication
            user_agent: Optional User-Agent override so the server can
                identify your application. Defaults to the library's own.
            base_url: API host
            timeout: Request timeout in seconds (ignored with http_client)
            http_client: Pre-built httpx.AsyncClient. The caller keeps
                ownership; ``close()`` will not close it.
        """
        self._token = token or None
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_options(
        cls,
        options: ClientOptions,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> Self:
        """Create a client from a ClientOptions instance."""
        return cls(
            token=options.token,
            user_agent=options.user_agent,
            base_url=options.base_url,
            timeout=options.timeout,
            http_client=http_client,
        )

    @property
    def token(self) -> str | None:
        """The token used for authentication, if provided."""
        return self._token

    @property
    def user_agent(self) -> str:
        """The User-Agent sent with every request."""
        return self._user_agent

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r}, has_token={self._token is not None})"

    # =========================================================================
    # Request dispatch
    # =========================================================================

    def _build_url(self, endpoint: str, query_string: str = "") -> str:
        url = f"{self._base_url}/{endpoint}"
        if query_string:
            url = f"{url}?{query_string}"
        return url

    def _build_headers(self, *, has_body: bool) -> dict[str, str]:
        headers = {
            "User-Agent": self._user_agent,
            "Accept-Version": API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _require_token(self, endpoint: str) -> None:
        if not self._token:
            raise TokenRequiredError(endpoint)

    async def _execute_request(
        self,
        url: str,
        *,
        method: str,
        headers: dict[str, str],
        body: dict[str, Any] | None,
    ) -> httpx.Response:
        """Execute the actual HTTP request."""
        try:
            return await self._client.request(method, url, headers=headers, json=body)
        except httpx.RequestError as e:
            logger.warning(f"{self._service_name} {method} {url} failed: {e}")
            raise NetworkError(f"Request to {url} failed: {e}") from e

    def _parse_response(self, response: httpx.Response) -> Any:
        """
        Decode a response, raising ApiError for non-2xx statuses.

        The error body is read for its ``detail`` only and is not normalized.
        """
        try:
            data = response.json()
        except ValueError as e:
            raise ParseError("Invalid JSON response", status=response.status_code) from e

        if not response.is_success:
            detail = data.get("detail") if isinstance(data, dict) else None
            if detail is None:
                detail = response.reason_phrase
            raise ApiError(response, detail if isinstance(detail, str) else str(detail))

        return camelize_keys(data)

    async def _request(
        self,
        endpoint: str,
        *,
        query_string: str = "",
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send one request and return the normalized JSON body.

        POST when a body is given, GET otherwise.
        """
        url = self._build_url(endpoint, query_string)
        method = "POST" if body is not None else "GET"
        headers = self._build_headers(has_body=body is not None)

        logger.debug(f"{self._service_name}: {method} {endpoint}")
        response = await self._execute_request(url, method=method, headers=headers, body=body)
        logger.debug(f"{self._service_name}: {method} {endpoint} -> {response.status_code}")

        return self._parse_response(response)

    # =========================================================================
    # Endpoints
    # =========================================================================

    async def search(self, query: SearchQuery | None = None) -> list[Image]:
        """
        Search images.

        Retrieves images randomly or by tag based on the search criteria.

        Args:
            query: Search query options

        Returns:
            List of images

        Raises:
            AdminTokenRequiredError: ``full`` or ``limit > 30`` without a token
        """
        if query is not None and not self._token:
            if query.full:
                raise AdminTokenRequiredError("full", "Option 'full' requires admin token")
            if query.limit is not None and query.limit > MAX_PUBLIC_LIMIT:
                raise AdminTokenRequiredError(
                    "limit",
                    f"Option 'limit' cannot exceed {MAX_PUBLIC_LIMIT} without admin token",
                )

        query_string = format_query(query) if query is not None else ""
        data = await self._request("search", query_string=query_string)
        return [Image.from_dict(item) for item in data["images"]]

    @overload
    async def get_tags(self, full: Literal[True]) -> Tags[Tag]: ...

    @overload
    async def get_tags(self, full: Literal[False] = ...) -> Tags[str]: ...

    @overload
    async def get_tags(self, full: bool) -> Tags[str] | Tags[Tag]: ...

    async def get_tags(self, full: bool = False) -> Tags[str] | Tags[Tag]:
        """
        Get the available tags.

        Args:
            full: Return full Tag records instead of tag names

        Returns:
            ``Tags[Tag]`` when full is True, ``Tags[str]`` otherwise
        """
        data = await self._request("tags", query_string="full=true" if full else "")
        if full:
            return Tags.records_from_dict(data)
        return Tags.names_from_dict(data)

    async def get_favorites(
        self,
        query: SearchQuery | None = None,
        user_id: int | None = None,
    ) -> list[Image]:
        """
        Get favorites.

        Returns every image in the user's favorites, lewd ones included,
        unless the query filters them out.

        Args:
            query: Search query options
            user_id: User whose favorites to list. Defaults to the token's owner.

        Returns:
            List of images
        """
        self._require_token("fav")
        query_string = format_query(query or SearchQuery(), user_id)
        data = await self._request("fav", query_string=query_string)
        return [Image.from_dict(item) for item in data["images"]]

    async def _edit_favorite(self, action: str, image_id: int, user_id: int | None) -> FavoriteStatus:
        endpoint = f"fav/{action}"
        self._require_token(endpoint)
        body: dict[str, Any] = {"image_id": image_id}
        if user_id is not None:
            body["user_id"] = user_id
        data = await self._request(endpoint, body=body)
        return FavoriteStatus(data["state"])

    async def insert_favorite(self, image_id: int, user_id: int | None = None) -> FavoriteStatus:
        """
        Insert an image into the user's favorites.

        Args:
            image_id: The ID of the image to insert
            user_id: The user whose favorites to edit. Defaults to the token's owner.
        """
        return await self._edit_favorite("insert", image_id, user_id)

    async def delete_favorite(self, image_id: int, user_id: int | None = None) -> FavoriteStatus:
        """
        Remove an image from the user's favorites.

        Args:
            image_id: The ID of the image to remove
            user_id: The user whose favorites to edit. Defaults to the token's owner.
        """
        return await self._edit_favorite("delete", image_id, user_id)

    async def toggle_favorite(self, image_id: int, user_id: int | None = None) -> FavoriteStatus:
        """
        Toggle an image in the user's favorites.

        Args:
            image_id: The ID of the image to toggle
            user_id: The user whose favorites to edit. Defaults to the token's owner.
        """
        return await self._edit_favorite("toggle", image_id, user_id)

    async def report_image(self, image_id: int, description: str) -> ImageReport:
        """
        Report an image.

        Used to report inappropriate, offensive or wrongly labelled images.
        Requires report permission.

        Args:
            image_id: The ID of the image to report
            description: Short explanation of the issue (up to 200 characters)
        """
        self._require_token("report")
        data = await self._request("report", body={"image_id": image_id, "description": description})
        return ImageReport.from_dict(data)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
