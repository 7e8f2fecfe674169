"""Clients for the external quote and image providers."""

from quotesys.providers.base import ImageProvider, ProviderError
from quotesys.providers.pexels import PexelsClient
from quotesys.providers.quotes import ZenQuotesClient
from quotesys.providers.unsplash import UnsplashClient

__all__ = ["ImageProvider", "PexelsClient", "ProviderError", "UnsplashClient", "ZenQuotesClient"]
