"""Fakes shared by resolver, service and web tests."""

from __future__ import annotations

import json
from collections import Counter
from typing import Any, Callable

import httpx

from quotesys.models import BackgroundPhoto, PhotoOrigin, ProviderName, QuoteOrigin, Quotation

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """Mock transport that counts requests per host."""

    def __init__(self, handler: Handler) -> None:
        self.hosts: Counter[str] = Counter()

        def _record(request: httpx.Request) -> httpx.Response:
            self.hosts[request.url.host] += 1
            return handler(request)

        super().__init__(_record)


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode(), headers={"content-type": "application/json"})


def unsplash_payload(photo_id: str = "abc123") -> dict[str, Any]:
    return {
        "id": photo_id,
        "urls": {"raw": f"https://images.unsplash.com/photo-{photo_id}?ixid=xyz"},
        "user": {"name": "Ada Lovelace", "links": {"html": "https://unsplash.com/@ada"}},
        "links": {
            "html": f"https://unsplash.com/photos/{photo_id}",
            "download_location": f"https://api.unsplash.com/photos/{photo_id}/download",
        },
    }


def pexels_payload(photo_id: int = 42) -> dict[str, Any]:
    return {
        "photos": [
            {
                "id": photo_id,
                "url": f"https://www.pexels.com/photo/{photo_id}/",
                "photographer": "Grace Hopper",
                "photographer_url": "https://www.pexels.com/@grace",
                "src": {"landscape": f"https://images.pexels.com/photos/{photo_id}/landscape.jpeg"},
            }
        ]
    }


class FakeQuoteClient:
    def __init__(self, result: Quotation | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls = 0

    async def fetch_random(self) -> Quotation:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


class FakeImageProvider:
    def __init__(
        self,
        name: ProviderName,
        *,
        configured: bool = True,
        error: Exception | None = None,
    ) -> None:
        self.name = name
        self.configured = configured
        self.error = error
        self.terms: list[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def fetch_one(self, term: str) -> BackgroundPhoto:
        self.terms.append(term)
        if self.error is not None:
            raise self.error
        return BackgroundPhoto(
            id=f"{self.name.value}-1",
            url=f"https://img.example/{self.name.value}.jpg",
            attribution_name="Someone",
            attribution_profile_url="https://example.com/someone",
            source_page_url="https://example.com/photo",
            origin=PhotoOrigin.for_provider(self.name),
        )


def live_quote(text: str = "Stay hungry.", author: str = "Stewart Brand") -> Quotation:
    return Quotation(text=text, author=author, origin=QuoteOrigin.LIVE)
