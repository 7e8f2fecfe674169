"""FastAPI application factory and routing definitions."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException, Query, Response, status
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from quotesys.config.app import AppConfig
from quotesys.config.backgrounds import BackgroundSettings
from quotesys.providers.base import ProviderError
from quotesys.service import QuoteService
from quotesys.web.schemas import (
    BackgroundOut,
    CountOut,
    QuoteOut,
    QuotePageOut,
    SavedQuoteIn,
    SavedQuoteOut,
    SavedQuotePatch,
    TrackDownloadIn,
)


def create_app(service: QuoteService, config: AppConfig | None = None) -> FastAPI:
    """Creates and configures the FastAPI application around ``service``."""
    config = config or service.config
    web_config = config.web

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Application startup...")
        service.startup()
        yield
        logger.info("Application shutdown...")
        await service.aclose()

    app = FastAPI(
        title=web_config.title,
        description="Quotations and background photos with provider fallback.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=web_config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", summary="Health Check", tags=["Monitoring"])
    async def health_check() -> dict[str, str]:
        """Check if the API is running."""
        return {"status": "ok"}

    @app.get("/quotes/random", response_model=list[QuoteOut], tags=["Quotes"])
    async def random_quote() -> list[QuoteOut]:
        """Resolve one quotation; the ``origin`` field tells which tier served it."""
        quote = await service.random_quote()
        return [QuoteOut.model_validate(quote)]

    @app.get("/quotes/count", response_model=CountOut, tags=["Quotes"])
    async def quote_count() -> CountOut:
        return CountOut(count=await service.quote_count())

    @app.get("/quotes", response_model=QuotePageOut, tags=["Quotes"])
    async def list_quotes(
        cursor: int | None = Query(None, description="Id of the last quote of the previous page"),
        limit: int | None = Query(None, description="Page size, clamped to the configured maximum"),
    ) -> QuotePageOut:
        """Browse cached quotations in ascending id order."""
        page = await service.library_page(cursor, limit)
        return QuotePageOut(
            quotes=[QuoteOut.model_validate(quote) for quote in page.items],
            next_cursor=page.next_cursor,
            has_more=page.has_more,
        )

    @app.get("/backgrounds/random", response_model=BackgroundOut, tags=["Backgrounds"])
    async def random_background() -> BackgroundOut:
        """Resolve a background with the configured provider order and search terms."""
        photo = await service.random_background()
        return BackgroundOut.model_validate(photo)

    @app.post("/backgrounds/random", response_model=BackgroundOut, tags=["Backgrounds"])
    async def random_background_with_settings(settings: BackgroundSettings) -> BackgroundOut:
        """Resolve a background with caller-supplied provider order and search terms."""
        photo = await service.random_background(settings)
        return BackgroundOut.model_validate(photo)

    @app.post("/backgrounds/track-download", tags=["Backgrounds"])
    async def track_download(body: TrackDownloadIn) -> dict[str, bool]:
        return {"tracked": await service.track_download(body.download_location)}

    @app.get("/proxy-image", tags=["Backgrounds"])
    async def proxy_image(url: str | None = None) -> Response:
        """Relay image bytes so the browser can render them without CORS issues."""
        if not url:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing url param")
        try:
            content, content_type = await service.fetch_image(url)
        except ProviderError as exc:
            logger.error("Image proxy error: {}", exc)
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to proxy image") from exc
        return Response(content=content, media_type=content_type)

    @app.get("/saved-quotes", response_model=list[SavedQuoteOut], tags=["Saved quotes"])
    async def list_saved_quotes() -> list[SavedQuoteOut]:
        return [SavedQuoteOut.model_validate(saved) for saved in await service.list_saved()]

    @app.post(
        "/saved-quotes",
        response_model=SavedQuoteOut,
        status_code=status.HTTP_201_CREATED,
        tags=["Saved quotes"],
    )
    async def create_saved_quote(body: SavedQuoteIn) -> SavedQuoteOut:
        saved = await service.save_quote(
            quote_text=body.quote_text,
            quote_author=body.quote_author,
            background_url=body.background_url,
            font_family=body.font_family,
        )
        return SavedQuoteOut.model_validate(saved)

    @app.patch("/saved-quotes/{saved_id}", response_model=SavedQuoteOut, tags=["Saved quotes"])
    async def update_saved_quote(saved_id: int, body: SavedQuotePatch) -> SavedQuoteOut:
        saved = await service.update_saved(
            saved_id,
            background_url=body.background_url,
            font_family=body.font_family,
        )
        if saved is None:
            raise HTTPException(status_code=404, detail=f"Saved quote '{saved_id}' not found.")
        return SavedQuoteOut.model_validate(saved)

    @app.delete("/saved-quotes/{saved_id}", tags=["Saved quotes"])
    async def delete_saved_quote(saved_id: int) -> dict[str, bool]:
        if not await service.delete_saved(saved_id):
            raise HTTPException(status_code=404, detail=f"Saved quote '{saved_id}' not found.")
        return {"success": True}

    return app


__all__ = ["create_app"]
