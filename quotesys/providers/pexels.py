"""Pexels photo search client."""

from __future__ import annotations

import random
from typing import Any

import httpx

from quotesys.config.providers import PexelsConfig
from quotesys.config.utils import is_usable_credential
from quotesys.models import BackgroundPhoto, PhotoOrigin, ProviderName

from .base import USER_AGENT, ProviderError, as_dict, decode_json, non_empty_str

# Preferred renditions, widest landscape first.
_SRC_KEYS = ("landscape", "large2x", "original")


def _direct_url(photo: dict[str, Any]) -> str | None:
    src = as_dict(photo.get("src"))
    for key in _SRC_KEYS:
        url = non_empty_str(src.get(key))
        if url:
            return url
    return None


def parse_search(payload: Any, rng: random.Random | None = None) -> BackgroundPhoto:
    """Pick one photo with a direct URL from a ``/search`` response."""

    photos = payload.get("photos") if isinstance(payload, dict) else None
    if not isinstance(photos, list):
        raise ProviderError("Pexels response has no photo list")

    usable = [photo for photo in photos if isinstance(photo, dict) and _direct_url(photo)]
    if not usable:
        raise ProviderError("Pexels response has no photo with a direct URL")

    photo = (rng or random).choice(usable)
    return BackgroundPhoto(
        id=str(photo.get("id") or ""),
        url=_direct_url(photo) or "",
        attribution_name=non_empty_str(photo.get("photographer")) or "Pexels",
        attribution_profile_url=non_empty_str(photo.get("photographer_url")) or "https://www.pexels.com",
        source_page_url=non_empty_str(photo.get("url")) or "https://www.pexels.com",
        origin=PhotoOrigin.PEXELS,
    )


class PexelsClient:
    name = ProviderName.PEXELS

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: PexelsConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.client = client
        self.config = config or PexelsConfig()
        self.api_key = self.config.api_key_secret
        self.rng = rng

    @property
    def is_configured(self) -> bool:
        return is_usable_credential(self.api_key)

    async def fetch_one(self, term: str) -> BackgroundPhoto:
        response = await self.client.get(
            f"{self.config.api_url.rstrip('/')}/search",
            params={"query": term, "orientation": "landscape", "per_page": self.config.per_page},
            headers={"Authorization": self.api_key or "", "User-Agent": USER_AGENT},
            timeout=self.config.timeout,
        )
        return parse_search(decode_json(response), self.rng)


__all__ = ["PexelsClient", "parse_search"]
