"""Shared pieces of the provider clients."""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from quotesys.models import BackgroundPhoto, ProviderName

USER_AGENT = "quotesys/0.1"


class ProviderError(RuntimeError):
    """Raised when a provider answers with an unusable payload."""


class ImageProvider(Protocol):
    """A background source the resolver can attempt."""

    name: ProviderName

    @property
    def is_configured(self) -> bool:
        """Whether the provider has a real credential and may be attempted."""

    async def fetch_one(self, term: str) -> BackgroundPhoto:
        """Fetch one photo matching ``term`` or raise."""


def decode_json(response: httpx.Response) -> Any:
    """Raise for non-success statuses and decode the JSON body.

    Status and decoding failures are reported as :class:`ProviderError`.
    """

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise ProviderError(f"{response.request.url.host} answered {response.status_code}") from exc
    try:
        return response.json()
    except ValueError as exc:
        raise ProviderError(f"{response.request.url.host} returned malformed JSON") from exc


def as_dict(value: Any) -> dict[str, Any]:
    """Return ``value`` when it is a JSON object, otherwise an empty dict."""

    return value if isinstance(value, dict) else {}


def non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


__all__ = ["USER_AGENT", "ImageProvider", "ProviderError", "as_dict", "decode_json", "non_empty_str"]
