"""Application-level configuration models."""

from __future__ import annotations

from pydantic import Field

from quotesys.config.backgrounds import BackgroundSettings
from quotesys.config.base import BaseConfig
from quotesys.config.providers import (
    PexelsConfig,
    QuoteProviderConfig,
    ResolverConfig,
    UnsplashConfig,
)
from quotesys.config.store import StoreConfig
from quotesys.config.web import WebConfig


class AppConfig(BaseConfig):
    """Top-level runtime configuration for the entire application."""

    logging_level: str = Field("INFO", description="Log level: DEBUG, INFO, WARNING, ERROR")

    store: StoreConfig = Field(default_factory=StoreConfig, description="Quote store configuration")
    quote_provider: QuoteProviderConfig = Field(
        default_factory=QuoteProviderConfig, description="Live quotation provider",
    )
    unsplash: UnsplashConfig = Field(default_factory=UnsplashConfig, description="Unsplash image provider")
    pexels: PexelsConfig = Field(default_factory=PexelsConfig, description="Pexels image provider")
    resolver: ResolverConfig = Field(default_factory=ResolverConfig, description="Resolver bounds")
    backgrounds: BackgroundSettings = Field(
        default_factory=BackgroundSettings,
        description="Default provider order and search terms for background requests",
    )
    web: WebConfig = Field(default_factory=WebConfig, description="HTTP API configuration")


__all__ = ["AppConfig"]
