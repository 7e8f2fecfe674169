"""Ordering of image providers by priority."""

from __future__ import annotations

from typing import Iterable, Sequence

from quotesys.config.backgrounds import ProviderConfig
from quotesys.models import ProviderName

_CANONICAL_RANK = {name: rank for rank, name in enumerate(ProviderName)}


def order_providers(configs: Iterable[ProviderConfig]) -> list[ProviderConfig]:
    """Sort ``configs`` by ascending priority, breaking ties by canonical provider order."""

    return sorted(configs, key=lambda config: (config.priority, _CANONICAL_RANK[config.name]))


def enabled_in_order(configs: Iterable[ProviderConfig]) -> list[ProviderConfig]:
    return order_providers(config for config in configs if config.enabled)


def assign_priorities(
    configs: Iterable[ProviderConfig],
    names: Sequence[ProviderName],
) -> list[ProviderConfig]:
    """Give the providers in ``names`` the priorities ``1..N`` in that order.

    Providers not listed in ``names`` keep their relative order and are placed
    after the listed ones.
    """

    if len(set(names)) != len(names):
        raise ValueError("Provider order must not repeat a provider")

    by_name = {config.name: config for config in configs}
    unknown = [name for name in names if name not in by_name]
    if unknown:
        raise ValueError(f"Unknown providers in order: {', '.join(str(name.value) for name in unknown)}")

    remaining = [config for config in order_providers(by_name.values()) if config.name not in names]
    sequence = [by_name[name] for name in names] + remaining
    return [
        config.model_copy(update={"priority": index})
        for index, config in enumerate(sequence, start=1)
    ]


__all__ = ["assign_priorities", "enabled_in_order", "order_providers"]
