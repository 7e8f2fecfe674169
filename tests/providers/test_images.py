from __future__ import annotations

import asyncio
import random

import httpx
import pytest

from quotesys.config import PexelsConfig, UnsplashConfig
from quotesys.models import PhotoOrigin
from quotesys.providers import PexelsClient, ProviderError, UnsplashClient
from quotesys.providers.pexels import parse_search
from quotesys.providers.unsplash import parse_photo
from tests.utils import json_response, pexels_payload, unsplash_payload


def test_parse_photo_sizes_url_and_adds_referral_links() -> None:
    photo = parse_photo(unsplash_payload("xyz"), "quotemaker")

    assert photo.id == "xyz"
    assert photo.url == "https://images.unsplash.com/photo-xyz?ixid=xyz&w=1920&q=80"
    assert photo.attribution_name == "Ada Lovelace"
    assert photo.attribution_profile_url == "https://unsplash.com/@ada?utm_source=quotemaker&utm_medium=referral"
    assert photo.source_page_url.endswith("?utm_source=quotemaker&utm_medium=referral")
    assert photo.download_location == "https://api.unsplash.com/photos/xyz/download"
    assert photo.origin is PhotoOrigin.UNSPLASH


def test_parse_photo_accepts_list_payloads() -> None:
    photo = parse_photo([{"id": "bad"}, unsplash_payload("good")], "quotemaker", random.Random(0))
    assert photo.id == "good"


def test_parse_photo_without_direct_url_fails() -> None:
    with pytest.raises(ProviderError):
        parse_photo({"id": "x", "urls": {}}, "quotemaker")


def test_parse_search_prefers_landscape_rendition() -> None:
    payload = pexels_payload(7)
    payload["photos"][0]["src"]["original"] = "https://images.pexels.com/photos/7/original.jpeg"

    photo = parse_search(payload)

    assert photo.url == "https://images.pexels.com/photos/7/landscape.jpeg"
    assert photo.attribution_name == "Grace Hopper"
    assert photo.attribution_profile_url == "https://www.pexels.com/@grace"
    assert photo.source_page_url == "https://www.pexels.com/photo/7/"
    assert photo.origin is PhotoOrigin.PEXELS


@pytest.mark.parametrize("payload", [{"photos": []}, {"photos": [{"id": 1, "src": {}}]}, [], {}])
def test_parse_search_without_usable_photo_fails(payload: object) -> None:
    with pytest.raises(ProviderError):
        parse_search(payload)


def test_placeholder_credentials_are_not_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "your_unsplash_access_key_here")
    monkeypatch.setenv("PEXELS_API_KEY", "your_pexels_api_key_here")

    async def run() -> tuple[bool, bool]:
        async with httpx.AsyncClient() as client:
            return UnsplashClient(client).is_configured, PexelsClient(client).is_configured

    assert asyncio.run(run()) == (False, False)


def test_unsplash_fetch_one_sends_client_id_and_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(unsplash_payload())

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            provider = UnsplashClient(client, UnsplashConfig(access_key="real-key"))
            assert provider.is_configured
            return await provider.fetch_one("cosmic")

    photo = asyncio.run(run())

    request = seen[0]
    assert request.url.path == "/photos/random"
    assert request.url.params["query"] == "cosmic"
    assert request.url.params["orientation"] == "landscape"
    assert request.headers["Authorization"] == "Client-ID real-key"
    assert photo.origin is PhotoOrigin.UNSPLASH


def test_pexels_fetch_one_sends_api_key() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(pexels_payload())

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await PexelsClient(client, PexelsConfig(api_key="pexels-key", per_page=5)).fetch_one("abstract")

    photo = asyncio.run(run())

    request = seen[0]
    assert request.url.path == "/v1/search"
    assert request.url.params["per_page"] == "5"
    assert request.headers["Authorization"] == "pexels-key"
    assert photo.id == "42"


def test_unsplash_error_status_raises_provider_error() -> None:
    async def run():
        transport = httpx.MockTransport(lambda request: json_response({"errors": ["nope"]}, status_code=401))
        async with httpx.AsyncClient(transport=transport) as client:
            await UnsplashClient(client, UnsplashConfig(access_key="k")).fetch_one("abstract")

    with pytest.raises(ProviderError):
        asyncio.run(run())


def test_track_download_is_best_effort() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        if "broken" in request.url.path:
            return httpx.Response(500)
        return json_response({"url": "https://images.unsplash.com/x"})

    async def run() -> tuple[bool, bool, bool]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            provider = UnsplashClient(client, UnsplashConfig(access_key="k"))
            ok = await provider.track_download("https://api.unsplash.com/photos/a/download")
            failed = await provider.track_download("https://api.unsplash.com/photos/broken/download")
            skipped = await provider.track_download("")
            return ok, failed, skipped

    assert asyncio.run(run()) == (True, False, False)
    assert len(calls) == 2


@pytest.mark.parametrize("urls", ["https://images.unsplash.com/raw", ["raw"], None])
def test_parse_photo_with_non_object_urls_fails(urls: object) -> None:
    with pytest.raises(ProviderError):
        parse_photo({"id": "x", "urls": urls}, "quotemaker")


def test_parse_photo_tolerates_non_object_attribution() -> None:
    payload = unsplash_payload("odd")
    payload["user"] = "Ada"
    payload["links"] = ["not", "an", "object"]

    photo = parse_photo(payload, "quotemaker")

    assert photo.attribution_name == "Unsplash"
    assert photo.source_page_url == "https://unsplash.com?utm_source=quotemaker&utm_medium=referral"
    assert photo.download_location == ""


@pytest.mark.parametrize("src", ["https://images.pexels.com/1.jpeg", ["landscape"], 7])
def test_parse_search_with_non_object_src_fails(src: object) -> None:
    with pytest.raises(ProviderError):
        parse_search({"photos": [{"id": 1, "src": src}]})
