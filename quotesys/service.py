"""Application service shared by the HTTP API and the CLI."""

from __future__ import annotations

import asyncio
import random

import httpx
from loguru import logger

from quotesys.config.app import AppConfig
from quotesys.config.backgrounds import BackgroundSettings
from quotesys.models import BackgroundPhoto, ProviderName, Quotation, SavedQuote
from quotesys.pagination import Page, clamp_limit
from quotesys.providers.base import USER_AGENT, ProviderError
from quotesys.providers.unsplash import UnsplashClient
from quotesys.resolver import ContentResolver
from quotesys.store import Database, QuoteStore, SavedQuoteStore, StoreError

DEFAULT_IMAGE_CONTENT_TYPE = "image/jpeg"


class QuoteService:
    """Owns the HTTP client, the database and the resolver for one process."""

    def __init__(
        self,
        config: AppConfig,
        *,
        client: httpx.AsyncClient | None = None,
        database: Database | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.client = client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            timeout=config.resolver.provider_timeout,
        )
        self.database = database or Database(config.store)
        self.quotes = QuoteStore(self.database)
        self.saved = SavedQuoteStore(self.database)
        self.resolver = ContentResolver.from_config(config, self.client, self.quotes, rng=rng)

    def startup(self) -> None:
        self.database.create_all()
        logger.info("Quote service ready (store: {})", self.database.url.render_as_string(hide_password=True))

    async def aclose(self) -> None:
        await self.resolver.drain()
        await self.client.aclose()
        self.database.dispose()

    # ------------------------------------------------------------------
    async def random_quote(self) -> Quotation:
        return await self.resolver.resolve_quote()

    async def random_background(self, settings: BackgroundSettings | None = None) -> BackgroundPhoto:
        settings = settings or self.config.backgrounds
        return await self.resolver.resolve_background(settings.providers, settings.search_terms)

    async def library_page(self, cursor: int | None, limit: int | None) -> Page[Quotation]:
        """Return one page of cached quotations; an unreadable store yields an empty page."""

        size = clamp_limit(
            limit,
            default=self.config.web.default_page_size,
            maximum=self.config.web.max_page_size,
        )
        try:
            return await asyncio.to_thread(self.quotes.read_page_after, cursor, size)
        except StoreError as exc:
            logger.error("Failed to read quote library: {}", exc)
            return Page()

    async def quote_count(self) -> int:
        try:
            return await asyncio.to_thread(self.quotes.count)
        except StoreError as exc:
            logger.error("Failed to count quotes: {}", exc)
            return 0

    async def track_download(self, download_location: str) -> bool:
        unsplash = self.resolver.image_providers.get(ProviderName.UNSPLASH)
        if not isinstance(unsplash, UnsplashClient):
            return False
        return await unsplash.track_download(download_location)

    async def fetch_image(self, url: str) -> tuple[bytes, str]:
        """Download ``url`` and return its bytes and content type."""

        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ProviderError(f"Failed to fetch image: {exc}") from exc
        content_type = response.headers.get("content-type") or DEFAULT_IMAGE_CONTENT_TYPE
        return response.content, content_type

    # ------------------------------------------------------------------
    async def list_saved(self) -> list[SavedQuote]:
        return await asyncio.to_thread(self.saved.list_all)

    async def save_quote(
        self,
        *,
        quote_text: str,
        quote_author: str,
        background_url: str,
        font_family: str,
    ) -> SavedQuote:
        return await asyncio.to_thread(
            lambda: self.saved.create(
                quote_text=quote_text,
                quote_author=quote_author,
                background_url=background_url,
                font_family=font_family,
            )
        )

    async def update_saved(
        self,
        saved_id: int,
        *,
        background_url: str | None = None,
        font_family: str | None = None,
    ) -> SavedQuote | None:
        return await asyncio.to_thread(
            lambda: self.saved.update(saved_id, background_url=background_url, font_family=font_family)
        )

    async def delete_saved(self, saved_id: int) -> bool:
        return await asyncio.to_thread(self.saved.delete, saved_id)


__all__ = ["QuoteService"]
