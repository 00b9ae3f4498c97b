"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from waifuim import WaifuClient

TEST_BASE_URL = "https://api.waifu.im"


# ============================================================
# Mock API Responses (wire format, snake_case)
# ============================================================


@pytest.fixture
def tag_payload():
    """A single tag as sent by the API."""
    return {
        "tag_id": 12,
        "name": "waifu",
        "description": "A female anime/manga character.",
        "is_nsfw": False,
    }


@pytest.fixture
def image_payload(tag_payload):
    """A single image as sent by the API."""
    return {
        "signature": "58e6f0372364abda",
        "extension": ".png",
        "image_id": 8108,
        "favorites": 1,
        "dominant_color": "#bbb7b2",
        "source": "https://www.patreon.com/posts/persephone-78224476",
        "artist": {
            "artist_id": 1,
            "name": "fourthwallzart",
            "patreon": "https://www.patreon.com/FourthWallzArt",
            "pixiv": None,
            "twitter": "https://twitter.com/FWallzArt",
            "deviant_art": "https://www.deviantart.com/fourthwallzart",
        },
        "uploaded_at": "2023-05-03T18:40:04.381354+02:00",
        "liked_at": None,
        "is_nsfw": False,
        "width": 2892,
        "height": 4096,
        "byte_size": 3991669,
        "url": "https://cdn.waifu.im/8108.png",
        "preview_url": "https://www.waifu.im/preview/8108/",
        "tags": [tag_payload],
    }


@pytest.fixture
def images_payload(image_payload):
    return {"images": [image_payload]}


# ============================================================
# Transport Stubs
# ============================================================


class RecordingTransport(httpx.MockTransport):
    """
    MockTransport that replies with a fixed status/body and keeps every
    request it receives.
    """

    def __init__(self, status_code: int = 200, body: Any = None, *, raw: bytes | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._body = body if body is not None else {}
        self._raw = raw
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._raw is not None:
            return httpx.Response(self._status_code, content=self._raw)
        return httpx.Response(self._status_code, json=self._body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def make_client():
    """
    Factory building a WaifuClient backed by a RecordingTransport.

    Returns (client, transport).
    """

    def _make(
        status_code: int = 200,
        body: Any = None,
        *,
        token: str | None = None,
        user_agent: str | None = None,
        raw: bytes | None = None,
    ) -> tuple[WaifuClient, RecordingTransport]:
        transport = RecordingTransport(status_code, body, raw=raw)
        http_client = httpx.AsyncClient(transport=transport)
        client = WaifuClient(
            token=token,
            user_agent=user_agent,
            base_url=TEST_BASE_URL,
            http_client=http_client,
        )
        return client, transport

    return _make
