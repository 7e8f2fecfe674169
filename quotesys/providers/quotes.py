"""Live quotation provider client (ZenQuotes)."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from quotesys.config.providers import QuoteProviderConfig
from quotesys.models import QuoteOrigin, Quotation

from .base import USER_AGENT, ProviderError, decode_json, non_empty_str


def parse_quotes(payload: Any) -> Quotation:
    """Return the first entry of a ZenQuotes payload with both text and author.

    ZenQuotes answers with a list of ``{"q": text, "a": author}`` objects.
    """

    if not isinstance(payload, list) or not payload:
        raise ProviderError("Quote payload is not a non-empty list")

    for entry in payload:
        if not isinstance(entry, dict):
            continue
        text = non_empty_str(entry.get("q"))
        author = non_empty_str(entry.get("a"))
        if text and author:
            return Quotation(text=text, author=author, origin=QuoteOrigin.LIVE)
    raise ProviderError("Quote payload has no entry with text and author")


class ZenQuotesClient:
    """Performs one request for a random quotation."""

    def __init__(self, client: httpx.AsyncClient, config: QuoteProviderConfig | None = None) -> None:
        self.client = client
        self.config = config or QuoteProviderConfig()

    async def fetch_random(self) -> Quotation:
        response = await self.client.get(
            self.config.url,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            timeout=self.config.timeout,
        )
        quote = parse_quotes(decode_json(response))
        logger.debug("Live quote received from {}", self.config.url)
        return quote


__all__ = ["ZenQuotesClient", "parse_quotes"]
