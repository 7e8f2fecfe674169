"""Request and response bodies of the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quotesys.models import PhotoOrigin, QuoteOrigin


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class QuoteOut(ApiModel):
    id: int | None = None
    text: str
    author: str
    origin: QuoteOrigin


class QuotePageOut(ApiModel):
    quotes: list[QuoteOut]
    next_cursor: int | None
    has_more: bool


class CountOut(ApiModel):
    count: int


class BackgroundOut(ApiModel):
    id: str
    url: str
    attribution_name: str
    attribution_profile_url: str
    source_page_url: str
    origin: PhotoOrigin
    download_location: str = ""


class TrackDownloadIn(ApiModel):
    download_location: str = Field(..., min_length=1)


class SavedQuoteIn(ApiModel):
    quote_text: str = Field(..., min_length=1)
    quote_author: str = Field(..., min_length=1)
    background_url: str = Field(..., min_length=1)
    font_family: str = Field(..., min_length=1)


class SavedQuotePatch(ApiModel):
    background_url: str | None = None
    font_family: str | None = None


class SavedQuoteOut(ApiModel):
    id: int
    quote_text: str
    quote_author: str
    background_url: str
    font_family: str
    created_at: datetime | None = None


__all__ = [
    "BackgroundOut",
    "CountOut",
    "QuoteOut",
    "QuotePageOut",
    "SavedQuoteIn",
    "SavedQuoteOut",
    "SavedQuotePatch",
    "TrackDownloadIn",
]
