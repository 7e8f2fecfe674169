"""Configuration namespace for quotesys."""

from __future__ import annotations

from .app import AppConfig
from .backgrounds import DEFAULT_SEARCH_TERMS, BackgroundSettings, ProviderConfig
from .base import BaseConfig, load_config
from .providers import PexelsConfig, QuoteProviderConfig, ResolverConfig, UnsplashConfig
from .store import StoreConfig
from .utils import is_usable_credential, resolve_env_reference
from .web import WebConfig

__all__ = [
    "BaseConfig",
    "AppConfig",
    "load_config",
    "DEFAULT_SEARCH_TERMS",
    "BackgroundSettings",
    "ProviderConfig",
    "PexelsConfig",
    "QuoteProviderConfig",
    "ResolverConfig",
    "UnsplashConfig",
    "StoreConfig",
    "WebConfig",
    "is_usable_credential",
    "resolve_env_reference",
]
