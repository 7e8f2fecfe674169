"""Repositories for cached quotations and saved selections."""

from __future__ import annotations

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.sql.dml import Insert

from quotesys.models import QuoteOrigin, Quotation, SavedQuote
from quotesys.pagination import MAX_PAGE_SIZE, Page, paginate

from .database import Database, StoreError
from .models import QuoteRecord, SavedQuoteRecord, utcnow


# Dialects whose INSERT supports ON CONFLICT DO NOTHING.
_CONFLICT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def insert_ignoring_duplicates(dialect_name: str, text: str, author: str) -> Insert:
    """Build an INSERT of one quotation that does nothing if the pair is already stored."""

    try:
        insert = _CONFLICT_INSERTS[dialect_name]
    except KeyError:
        raise StoreError(f"Unsupported database backend: {dialect_name}") from None
    return (
        insert(QuoteRecord)
        .values(quote_text=text, quote_author=author, saved_at=utcnow())
        .on_conflict_do_nothing(index_elements=["quote_text", "quote_author"])
    )


def _to_quotation(record: QuoteRecord) -> Quotation:
    return Quotation(
        id=record.id,
        text=record.quote_text,
        author=record.quote_author,
        origin=QuoteOrigin.CACHED,
    )


def _to_saved(record: SavedQuoteRecord) -> SavedQuote:
    return SavedQuote(
        id=record.id,
        quote_text=record.quote_text,
        quote_author=record.quote_author,
        background_url=record.background_url,
        font_family=record.font_family,
        created_at=record.created_at,
    )


class QuoteStore:
    """Append-only store of quotations, unique per ``(text, author)``.

    Every method raises :class:`~quotesys.store.database.StoreError` on failure.
    Methods are synchronous; async callers dispatch them to a worker thread.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    def insert_if_absent(self, text: str, author: str) -> bool:
        """Insert the pair unless it is already stored; return whether a row was written.

        The existence check and the insert are a single ``INSERT ... ON CONFLICT
        DO NOTHING`` statement, so concurrent duplicates cannot create two rows.
        """

        with self.database.transaction() as session:
            stmt = insert_ignoring_duplicates(session.get_bind().dialect.name, text, author)
            inserted = bool(session.execute(stmt).rowcount)
        if inserted:
            logger.info("Saved new quote: {}...", text[:40])
        return inserted

    def read_all(self) -> list[Quotation]:
        with self.database.transaction() as session:
            records = session.scalars(select(QuoteRecord).order_by(QuoteRecord.id)).all()
            return [_to_quotation(record) for record in records]

    def read_page_after(self, cursor: int | None, limit: int) -> Page[Quotation]:
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValueError(f"limit must be between 1 and {MAX_PAGE_SIZE}, got {limit}")

        stmt = select(QuoteRecord).order_by(QuoteRecord.id).limit(limit + 1)
        if cursor is not None:
            stmt = stmt.where(QuoteRecord.id > cursor)
        with self.database.transaction() as session:
            window = [_to_quotation(record) for record in session.scalars(stmt).all()]
        # The window already starts after the cursor.
        return paginate(window, None, limit)

    def count(self) -> int:
        with self.database.transaction() as session:
            return int(session.scalar(select(func.count()).select_from(QuoteRecord)) or 0)


class SavedQuoteStore:
    """CRUD access to saved quote selections."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def list_all(self) -> list[SavedQuote]:
        stmt = select(SavedQuoteRecord).order_by(SavedQuoteRecord.created_at, SavedQuoteRecord.id)
        with self.database.transaction() as session:
            return [_to_saved(record) for record in session.scalars(stmt).all()]

    def create(
        self,
        *,
        quote_text: str,
        quote_author: str,
        background_url: str,
        font_family: str,
    ) -> SavedQuote:
        record = SavedQuoteRecord(
            quote_text=quote_text,
            quote_author=quote_author,
            background_url=background_url,
            font_family=font_family,
            created_at=utcnow(),
        )
        with self.database.transaction() as session:
            session.add(record)
            session.flush()
            return _to_saved(record)

    def update(
        self,
        saved_id: int,
        *,
        background_url: str | None = None,
        font_family: str | None = None,
    ) -> SavedQuote | None:
        with self.database.transaction() as session:
            record = session.get(SavedQuoteRecord, saved_id)
            if record is None:
                return None
            if background_url:
                record.background_url = background_url
            if font_family:
                record.font_family = font_family
            session.flush()
            return _to_saved(record)

    def delete(self, saved_id: int) -> bool:
        with self.database.transaction() as session:
            record = session.get(SavedQuoteRecord, saved_id)
            if record is None:
                return False
            session.delete(record)
            return True


__all__ = ["QuoteStore", "SavedQuoteStore", "insert_ignoring_duplicates"]
