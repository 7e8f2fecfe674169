"""Quote store configuration."""

from __future__ import annotations

from pydantic import Field, field_validator
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from quotesys.config.base import BaseConfig

SUPPORTED_BACKENDS = ("sqlite", "postgresql")


class StoreConfig(BaseConfig):
    """Database holding cached quotations and saved selections (SQLite or PostgreSQL)."""

    database_url: str = Field(
        "sqlite:///./data/quotes.db",
        description="SQLAlchemy database URL; sqlite and postgresql backends are supported",
        min_length=1,
    )
    echo: bool = Field(False, description="Log emitted SQL statements")

    @field_validator("database_url")
    @classmethod
    def _ensure_supported_backend(cls, value: str) -> str:
        try:
            backend = make_url(value).get_backend_name()
        except ArgumentError as exc:
            raise ValueError(f"Invalid database URL: {value!r}") from exc
        if backend not in SUPPORTED_BACKENDS:
            msg = f"Unsupported database backend '{backend}'; expected one of {', '.join(SUPPORTED_BACKENDS)}."
            raise ValueError(msg)
        return value


__all__ = ["SUPPORTED_BACKENDS", "StoreConfig"]
