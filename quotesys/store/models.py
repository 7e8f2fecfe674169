"""ORM tables backing the quote store."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class QuoteRecord(Base):
    __tablename__ = "quotes"
    __table_args__ = (
        UniqueConstraint("quote_text", "quote_author", name="uq_quotes_text_author"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    quote_text: Mapped[str] = mapped_column(Text, nullable=False)
    quote_author: Mapped[str] = mapped_column(Text, nullable=False)
    saved_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)


class SavedQuoteRecord(Base):
    __tablename__ = "saved_quotes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    quote_text: Mapped[str] = mapped_column(Text, nullable=False)
    quote_author: Mapped[str] = mapped_column(Text, nullable=False)
    background_url: Mapped[str] = mapped_column(Text, nullable=False)
    font_family: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)


__all__ = ["Base", "QuoteRecord", "SavedQuoteRecord", "utcnow"]
