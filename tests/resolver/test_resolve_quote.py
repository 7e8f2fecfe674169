from __future__ import annotations

import asyncio
import random

import httpx
import pytest

from quotesys.fallback import STATIC_QUOTES
from quotesys.models import QuoteOrigin
from quotesys.providers import ProviderError, ZenQuotesClient
from quotesys.resolver import ContentResolver
from quotesys.store import QuoteStore, StoreError
from tests.utils import FakeQuoteClient, live_quote


def _resolver(quote_client, store, **kwargs) -> ContentResolver:
    return ContentResolver(quote_client, store, {}, rng=random.Random(7), **kwargs)


async def _resolve_and_drain(resolver: ContentResolver):
    quote = await resolver.resolve_quote()
    await resolver.drain()
    return quote


class BrokenStore:
    """Store whose every operation fails."""

    def __init__(self) -> None:
        self.inserts = 0

    def read_all(self):
        raise StoreError("database is locked")

    def insert_if_absent(self, text: str, author: str) -> bool:
        self.inserts += 1
        raise StoreError("disk I/O error")


def test_live_quote_is_returned_and_persisted(quote_store: QuoteStore) -> None:
    resolver = _resolver(FakeQuoteClient(result=live_quote()), quote_store)

    quote = asyncio.run(_resolve_and_drain(resolver))

    assert quote.origin is QuoteOrigin.LIVE
    assert quote.text == "Stay hungry."
    assert [(q.text, q.author) for q in quote_store.read_all()] == [("Stay hungry.", "Stewart Brand")]


def test_repeated_live_quote_is_stored_once(quote_store: QuoteStore) -> None:
    resolver = _resolver(FakeQuoteClient(result=live_quote()), quote_store)

    async def run() -> None:
        await asyncio.gather(*(resolver.resolve_quote() for _ in range(4)))
        await resolver.drain()

    asyncio.run(run())

    assert quote_store.count() == 1


def test_malformed_live_payload_falls_back_to_store(quote_store: QuoteStore) -> None:
    for index in range(3):
        quote_store.insert_if_absent(f"Stored {index}", f"Author {index}")
    stored_ids = {quote.id for quote in quote_store.read_all()}

    async def run():
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"{not json"))
        async with httpx.AsyncClient(transport=transport) as client:
            return await _resolve_and_drain(_resolver(ZenQuotesClient(client), quote_store))

    quote = asyncio.run(run())

    assert quote.origin is QuoteOrigin.CACHED
    assert quote.id in stored_ids
    assert quote_store.count() == 3


def test_empty_store_falls_back_to_static_quotes(quote_store: QuoteStore) -> None:
    resolver = _resolver(FakeQuoteClient(error=ProviderError("offline")), quote_store)

    quote = asyncio.run(_resolve_and_drain(resolver))

    assert quote.origin is QuoteOrigin.STATIC
    assert (quote.text, quote.author) in STATIC_QUOTES


def test_failing_store_falls_back_to_static_quotes() -> None:
    resolver = _resolver(FakeQuoteClient(error=httpx.ConnectError("refused")), BrokenStore())

    quote = asyncio.run(_resolve_and_drain(resolver))

    assert quote.origin is QuoteOrigin.STATIC


def test_write_failure_does_not_affect_live_result() -> None:
    store = BrokenStore()
    resolver = _resolver(FakeQuoteClient(result=live_quote("Onward.", "Someone")), store)

    quote = asyncio.run(_resolve_and_drain(resolver))

    assert quote.origin is QuoteOrigin.LIVE
    assert quote.text == "Onward."
    assert store.inserts == 1


def test_slow_live_provider_times_out_to_next_tier(quote_store: QuoteStore) -> None:
    quote_store.insert_if_absent("Patience.", "Anon")

    class SlowClient:
        async def fetch_random(self):
            await asyncio.sleep(5)
            return live_quote()

    resolver = _resolver(SlowClient(), quote_store, provider_timeout=0.01)

    quote = asyncio.run(_resolve_and_drain(resolver))

    assert quote.origin is QuoteOrigin.CACHED
    assert quote.text == "Patience."


@pytest.mark.parametrize("error", [ProviderError("bad payload"), ValueError(""), RuntimeError("boom")])
def test_any_live_failure_is_absorbed(quote_store: QuoteStore, error: Exception) -> None:
    resolver = _resolver(FakeQuoteClient(error=error), quote_store)

    quote = asyncio.run(_resolve_and_drain(resolver))

    assert quote.origin is QuoteOrigin.STATIC
