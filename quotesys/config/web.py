"""HTTP API configuration models."""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from quotesys.config.base import BaseConfig
from quotesys.pagination import MAX_PAGE_SIZE


class WebConfig(BaseConfig):
    """Top-level settings for the FastAPI service."""

    title: str = Field(
        "Quotesys API",
        description="Title shown in the generated API documentation.",
        min_length=1,
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )
    default_page_size: int = Field(
        20, ge=1, le=MAX_PAGE_SIZE, description="Page size used when a library request omits 'limit'.",
    )
    max_page_size: int = Field(
        MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Largest page size a library request may ask for.",
    )

    @field_validator("cors_origins")
    @classmethod
    def _strip_origins(cls, origins: list[str]) -> list[str]:
        return [origin.strip() for origin in origins if origin.strip()]

    @model_validator(mode="after")
    def _ensure_page_bounds(self) -> "WebConfig":
        if self.default_page_size > self.max_page_size:
            msg = "'default_page_size' must not exceed 'max_page_size'."
            raise ValueError(msg)
        return self


__all__ = ["WebConfig"]
