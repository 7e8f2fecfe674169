"""Embedded content served when every live source and the quote store fail."""

from __future__ import annotations

import random

from quotesys.models import BackgroundPhoto, PhotoOrigin, QuoteOrigin, Quotation

STATIC_QUOTES: tuple[tuple[str, str], ...] = (
    ("The only way to do great work is to love what you do.", "Steve Jobs"),
    ("In the middle of difficulty lies opportunity.", "Albert Einstein"),
    ("Simplicity is the ultimate sophistication.", "Leonardo da Vinci"),
    ("The future belongs to those who believe in the beauty of their dreams.", "Eleanor Roosevelt"),
    ("Who dares wins", "Sir David Stirling"),
    (
        "If I have seen further than others, it is by standing on the shoulders of giants.",
        "Isaac Newton",
    ),
    (
        "There is nothing noble in being superior to some other man. "
        "The true nobility is in being superior to your former self.",
        "Ernest Hemingway",
    ),
)

STATIC_BACKGROUND_URLS: tuple[str, ...] = (
    "https://images.unsplash.com/photo-1557683316-973673baf926?w=1920&q=80",
    "https://images.unsplash.com/photo-1579546929518-9e396f3cc809?w=1920&q=80",
    "https://images.unsplash.com/photo-1558591710-4b4a1ae0f04d?w=1920&q=80",
    "https://images.unsplash.com/photo-1419242902214-272b3f66ee7a?w=1920&q=80",
    "https://images.unsplash.com/photo-1507400492013-162706c8c05e?w=1920&q=80",
)

FALLBACK_PHOTO_ID = "fallback"


def referral_url(url: str, app_name: str) -> str:
    """Append the referral parameters image providers require on attribution links."""

    separator = "&" if "?" in url else "?"
    return f"{url}{separator}utm_source={app_name}&utm_medium=referral"


def static_quote(rng: random.Random | None = None) -> Quotation:
    text, author = (rng or random).choice(STATIC_QUOTES)
    return Quotation(text=text, author=author, origin=QuoteOrigin.STATIC)


def static_background(app_name: str, rng: random.Random | None = None) -> BackgroundPhoto:
    url = (rng or random).choice(STATIC_BACKGROUND_URLS)
    attribution = referral_url("https://unsplash.com", app_name)
    return BackgroundPhoto(
        id=FALLBACK_PHOTO_ID,
        url=url,
        attribution_name="Unsplash",
        attribution_profile_url=attribution,
        source_page_url=attribution,
        origin=PhotoOrigin.STATIC,
    )


__all__ = [
    "FALLBACK_PHOTO_ID",
    "STATIC_BACKGROUND_URLS",
    "STATIC_QUOTES",
    "referral_url",
    "static_background",
    "static_quote",
]
