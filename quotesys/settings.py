"""Operations on user-editable background settings.

Every function returns a new :class:`BackgroundSettings` and leaves its input
untouched, so callers can keep settings as plain values.
"""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from quotesys.config.backgrounds import BackgroundSettings, ProviderConfig
from quotesys.models import ProviderName
from quotesys.policy import assign_priorities


def default_settings() -> BackgroundSettings:
    return BackgroundSettings()


def update_provider(
    settings: BackgroundSettings,
    name: ProviderName | str,
    *,
    enabled: bool | None = None,
    priority: int | None = None,
) -> BackgroundSettings:
    """Change the enablement or priority of one provider, adding it if absent."""

    provider_name = ProviderName(name)
    updates: dict[str, object] = {}
    if enabled is not None:
        updates["enabled"] = enabled
    if priority is not None:
        updates["priority"] = priority

    providers: list[ProviderConfig] = []
    found = False
    for provider in settings.providers:
        if provider.name == provider_name:
            found = True
            provider = ProviderConfig.model_validate({**provider.model_dump(), **updates})
        providers.append(provider)
    if not found:
        providers.append(ProviderConfig.model_validate({"name": provider_name, **updates}))

    return settings.model_copy(update={"providers": providers})


def reorder_providers(settings: BackgroundSettings, names: Sequence[ProviderName | str]) -> BackgroundSettings:
    ordered = [ProviderName(name) for name in names]
    providers = assign_priorities(settings.providers, ordered)
    logger.debug("Provider order set to {}", [provider.name.value for provider in providers])
    return settings.model_copy(update={"providers": providers})


def add_search_term(settings: BackgroundSettings, term: str) -> BackgroundSettings:
    """Add ``term`` trimmed and lower-cased; blank or already present terms are ignored."""

    normalized = term.strip().lower()
    if not normalized or normalized in settings.search_terms:
        return settings
    return settings.model_copy(update={"search_terms": [*settings.search_terms, normalized]})


def remove_search_term(settings: BackgroundSettings, term: str) -> BackgroundSettings:
    remaining = [existing for existing in settings.search_terms if existing != term]
    return settings.model_copy(update={"search_terms": remaining})


__all__ = [
    "add_search_term",
    "default_settings",
    "remove_search_term",
    "reorder_providers",
    "update_provider",
]
