"""Unsplash random photo client."""

from __future__ import annotations

import random
from typing import Any

import httpx
from loguru import logger

from quotesys.config.providers import UnsplashConfig
from quotesys.config.utils import is_usable_credential
from quotesys.fallback import referral_url
from quotesys.models import BackgroundPhoto, PhotoOrigin, ProviderName

from .base import USER_AGENT, ProviderError, as_dict, decode_json, non_empty_str

IMAGE_PARAMS = "w=1920&q=80"


def _sized_url(raw: str) -> str:
    separator = "&" if "?" in raw else "?"
    return f"{raw}{separator}{IMAGE_PARAMS}"


def parse_photo(payload: Any, app_name: str, rng: random.Random | None = None) -> BackgroundPhoto:
    """Map a ``/photos/random`` response (one object or a list) to a :class:`BackgroundPhoto`."""

    candidates = payload if isinstance(payload, list) else [payload]
    usable = [
        item
        for item in candidates
        if isinstance(item, dict) and non_empty_str(as_dict(item.get("urls")).get("raw"))
    ]
    if not usable:
        raise ProviderError("Unsplash response has no photo with a direct URL")

    photo = (rng or random).choice(usable)
    user = as_dict(photo.get("user"))
    user_links = as_dict(user.get("links"))
    links = as_dict(photo.get("links"))
    profile = non_empty_str(user_links.get("html")) or "https://unsplash.com"
    page = non_empty_str(links.get("html")) or "https://unsplash.com"

    return BackgroundPhoto(
        id=str(photo.get("id") or ""),
        url=_sized_url(photo["urls"]["raw"].strip()),
        attribution_name=non_empty_str(user.get("name")) or "Unsplash",
        attribution_profile_url=referral_url(profile, app_name),
        source_page_url=referral_url(page, app_name),
        origin=PhotoOrigin.UNSPLASH,
        download_location=non_empty_str(links.get("download_location")) or "",
    )


class UnsplashClient:
    name = ProviderName.UNSPLASH

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: UnsplashConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.client = client
        self.config = config or UnsplashConfig()
        self.access_key = self.config.access_key_secret
        self.rng = rng

    @property
    def is_configured(self) -> bool:
        return is_usable_credential(self.access_key)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Client-ID {self.access_key}",
            "Accept-Version": "v1",
            "User-Agent": USER_AGENT,
        }

    async def fetch_one(self, term: str) -> BackgroundPhoto:
        response = await self.client.get(
            f"{self.config.api_url.rstrip('/')}/photos/random",
            params={"query": term, "orientation": "landscape", "content_filter": "high"},
            headers=self._headers(),
            timeout=self.config.timeout,
        )
        return parse_photo(decode_json(response), self.config.app_name, self.rng)

    async def track_download(self, download_location: str) -> bool:
        """Notify Unsplash that a photo was used, as its API guidelines require.

        Best-effort: failures are logged and reported as ``False``.
        """

        if not download_location or not self.is_configured:
            return False
        try:
            response = await self.client.get(
                download_location,
                headers=self._headers(),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Failed to trigger Unsplash download endpoint: {}", exc)
            return False
        return True


__all__ = ["UnsplashClient", "parse_photo"]
