"""Background provider selection settings."""

from __future__ import annotations

from pydantic import Field, model_validator

from quotesys.config.base import BaseConfig
from quotesys.models import ProviderName

DEFAULT_SEARCH_TERMS: tuple[str, ...] = (
    "abstract",
    "gradient",
    "dark wallpaper",
    "nature minimal",
    "cosmic",
)


class ProviderConfig(BaseConfig):
    """Enablement and priority of a single image provider."""

    name: ProviderName = Field(..., description="Provider identifier")
    enabled: bool = Field(True, description="Whether the provider may be attempted")
    priority: int = Field(1, ge=1, description="Attempt order; lower values are tried first")


def _default_providers() -> list[ProviderConfig]:
    return [
        ProviderConfig(name=ProviderName.UNSPLASH, enabled=True, priority=1),
        ProviderConfig(name=ProviderName.PEXELS, enabled=True, priority=2),
    ]


class BackgroundSettings(BaseConfig):
    """Caller-supplied settings threaded into background resolution."""

    providers: list[ProviderConfig] = Field(
        default_factory=_default_providers,
        description="Per-provider enablement and priority",
    )
    search_terms: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEARCH_TERMS),
        description="Topics used to diversify background imagery",
    )

    @model_validator(mode="after")
    def _ensure_unique_providers(self) -> "BackgroundSettings":
        names = [provider.name for provider in self.providers]
        if len(names) != len(set(names)):
            raise ValueError("Each image provider may only be configured once.")
        return self

    def provider(self, name: ProviderName) -> ProviderConfig | None:
        for provider in self.providers:
            if provider.name == name:
                return provider
        return None


__all__ = ["DEFAULT_SEARCH_TERMS", "BackgroundSettings", "ProviderConfig"]
