"""Configuration models for the external quote and image providers."""

from __future__ import annotations

from pydantic import Field

from quotesys.config.base import BaseConfig
from quotesys.config.utils import resolve_env_reference


class QuoteProviderConfig(BaseConfig):
    """Live quotation source."""

    url: str = Field("https://zenquotes.io/api/random", description="Random quote endpoint")
    timeout: float = Field(5.0, gt=0, description="Request timeout in seconds")


class UnsplashConfig(BaseConfig):
    """Unsplash random photo API."""

    access_key: str | None = Field(
        "env:UNSPLASH_ACCESS_KEY",
        description="Client-ID access key, can use 'env:VAR_NAME' format",
    )
    api_url: str = Field("https://api.unsplash.com", description="API base URL")
    app_name: str = Field("quotemaker", description="Application name used in referral links")
    timeout: float = Field(5.0, gt=0, description="Request timeout in seconds")

    @property
    def access_key_secret(self) -> str | None:
        """Return the resolved access key or ``None`` when it is not set."""

        return resolve_env_reference(self.access_key, required=False)


class PexelsConfig(BaseConfig):
    """Pexels photo search API."""

    api_key: str | None = Field(
        "env:PEXELS_API_KEY",
        description="API key, can use 'env:VAR_NAME' format",
    )
    api_url: str = Field("https://api.pexels.com/v1", description="API base URL")
    per_page: int = Field(15, ge=1, le=80, description="Candidates requested per search")
    timeout: float = Field(5.0, gt=0, description="Request timeout in seconds")

    @property
    def api_key_secret(self) -> str | None:
        """Return the resolved API key or ``None`` when it is not set."""

        return resolve_env_reference(self.api_key, required=False)


class ResolverConfig(BaseConfig):
    """Bounds applied by the content resolver around each provider attempt."""

    provider_timeout: float = Field(
        5.0,
        gt=0,
        description="Upper bound in seconds for a single provider attempt",
    )


__all__ = ["PexelsConfig", "QuoteProviderConfig", "ResolverConfig", "UnsplashConfig"]
