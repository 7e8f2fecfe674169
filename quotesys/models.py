"""Domain records produced by the resolver."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class QuoteOrigin(str, Enum):
    """Tier that produced a quotation."""

    LIVE = "live"
    CACHED = "cached"
    STATIC = "static"


class ProviderName(str, Enum):
    """Image providers known to the resolver.

    Declaration order is the canonical tie-break order used by the priority policy.
    """

    PEXELS = "pexels"
    UNSPLASH = "unsplash"


class PhotoOrigin(str, Enum):
    """Tier that produced a background photo."""

    PEXELS = "pexels"
    UNSPLASH = "unsplash"
    STATIC = "static"

    @classmethod
    def for_provider(cls, name: ProviderName) -> "PhotoOrigin":
        return cls(name.value)


@dataclass(frozen=True, slots=True)
class Quotation:
    """A quotation and the tier it was served from.

    ``id`` is only populated for rows read back from the quote store.
    """

    text: str
    author: str
    origin: QuoteOrigin
    id: int | None = None

    def with_origin(self, origin: QuoteOrigin) -> "Quotation":
        return Quotation(text=self.text, author=self.author, origin=origin, id=self.id)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["origin"] = self.origin.value
        return payload


@dataclass(frozen=True, slots=True)
class BackgroundPhoto:
    """A background image plus the attribution the UI must display."""

    id: str
    url: str
    attribution_name: str
    attribution_profile_url: str
    source_page_url: str
    origin: PhotoOrigin
    download_location: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["origin"] = self.origin.value
        return payload


@dataclass(frozen=True, slots=True)
class SavedQuote:
    """A quotation the user kept together with its background and font."""

    id: int
    quote_text: str
    quote_author: str
    background_url: str
    font_family: str
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["created_at"] = self.created_at.isoformat() if self.created_at else None
        return payload


__all__ = ["BackgroundPhoto", "PhotoOrigin", "ProviderName", "QuoteOrigin", "Quotation", "SavedQuote"]
