"""Tiered resolution of quotations and background photos.

Quotations: live provider, then the quote store, then the embedded set.
Backgrounds: enabled image providers in priority order, then the embedded set.
Neither entry point raises; the ``origin`` of the result records which tier
served it.
"""

from __future__ import annotations

import asyncio
import dataclasses
import random
from typing import Iterable, Mapping, Sequence

import httpx
from loguru import logger

from quotesys.config.app import AppConfig
from quotesys.config.backgrounds import DEFAULT_SEARCH_TERMS, ProviderConfig
from quotesys.fallback import static_background, static_quote
from quotesys.models import BackgroundPhoto, PhotoOrigin, ProviderName, QuoteOrigin, Quotation
from quotesys.policy import enabled_in_order
from quotesys.providers.base import ImageProvider
from quotesys.providers.pexels import PexelsClient
from quotesys.providers.quotes import ZenQuotesClient
from quotesys.providers.unsplash import UnsplashClient
from quotesys.store.repository import QuoteStore


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class ContentResolver:
    """Resolves quotations and backgrounds across providers, store and fallbacks."""

    def __init__(
        self,
        quote_client: ZenQuotesClient,
        store: QuoteStore,
        image_providers: Mapping[ProviderName, ImageProvider],
        *,
        provider_timeout: float = 5.0,
        app_name: str = "quotemaker",
        rng: random.Random | None = None,
    ) -> None:
        self.quote_client = quote_client
        self.store = store
        self.image_providers = dict(image_providers)
        self.provider_timeout = provider_timeout
        self.app_name = app_name
        self.rng = rng or random.Random()
        self._pending: set[asyncio.Task[None]] = set()

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        client: httpx.AsyncClient,
        store: QuoteStore,
        *,
        rng: random.Random | None = None,
    ) -> "ContentResolver":
        providers: dict[ProviderName, ImageProvider] = {
            ProviderName.UNSPLASH: UnsplashClient(client, config.unsplash, rng=rng),
            ProviderName.PEXELS: PexelsClient(client, config.pexels, rng=rng),
        }
        return cls(
            ZenQuotesClient(client, config.quote_provider),
            store,
            providers,
            provider_timeout=config.resolver.provider_timeout,
            app_name=config.unsplash.app_name,
            rng=rng,
        )

    # ------------------------------------------------------------------
    # Quotations

    async def resolve_quote(self) -> Quotation:
        quote = await self._live_quote()
        if quote is not None:
            self._persist_in_background(quote)
            return quote

        cached = await self._cached_quote()
        if cached is not None:
            logger.info("Using quote from database")
            return cached

        logger.info("Using hardcoded fallback quote")
        return static_quote(self.rng)

    async def _live_quote(self) -> Quotation | None:
        try:
            quote = await asyncio.wait_for(self.quote_client.fetch_random(), self.provider_timeout)
        except Exception as exc:  # noqa: BLE001 - any failure moves to the next tier
            logger.warning("Live quote provider failed, trying local quotes: {}", _describe(exc))
            return None
        return quote.with_origin(QuoteOrigin.LIVE)

    async def _cached_quote(self) -> Quotation | None:
        try:
            quotes = await asyncio.to_thread(self.store.read_all)
        except Exception as exc:  # noqa: BLE001 - an unreadable store counts as empty
            logger.error("Failed to get quote from database: {}", _describe(exc))
            return None
        if not quotes:
            return None
        return self.rng.choice(quotes).with_origin(QuoteOrigin.CACHED)

    def _persist_in_background(self, quote: Quotation) -> None:
        """Schedule a best-effort write of ``quote`` without waiting for it."""

        task = asyncio.get_running_loop().create_task(self._persist(quote))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _persist(self, quote: Quotation) -> None:
        try:
            await asyncio.to_thread(self.store.insert_if_absent, quote.text, quote.author)
        except Exception as exc:  # noqa: BLE001 - write-behind must never surface
            logger.error("Failed to save quote: {}", exc)

    async def drain(self) -> None:
        """Wait for write-behind tasks still in flight."""

        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    # ------------------------------------------------------------------
    # Backgrounds

    async def resolve_background(
        self,
        provider_configs: Iterable[ProviderConfig],
        search_terms: Sequence[str] | None = None,
    ) -> BackgroundPhoto:
        terms = [term for term in (search_terms or ()) if term and term.strip()]
        if not terms:
            terms = list(DEFAULT_SEARCH_TERMS)

        for config in enabled_in_order(provider_configs):
            provider = self.image_providers.get(config.name)
            if provider is None or not provider.is_configured:
                logger.debug("Skipping unconfigured image provider '{}'", config.name.value)
                continue

            term = self.rng.choice(terms)
            try:
                photo = await asyncio.wait_for(provider.fetch_one(term), self.provider_timeout)
            except Exception as exc:  # noqa: BLE001 - any failure moves to the next provider
                logger.warning(
                    "Image provider '{}' failed for '{}': {}",
                    config.name.value,
                    term,
                    _describe(exc),
                )
                continue
            logger.debug("Background served by '{}' for '{}'", config.name.value, term)
            return dataclasses.replace(photo, origin=PhotoOrigin.for_provider(config.name))

        logger.info("Using static fallback background")
        return static_background(self.app_name, self.rng)


__all__ = ["ContentResolver"]
