"""SQLAlchemy engine/session initialization for the quote store."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from quotesys.config.store import StoreConfig

from .models import Base


class StoreError(RuntimeError):
    """Raised when the quote store cannot complete an operation."""


class Database:
    """Owns the engine and session factory for one database URL."""

    def __init__(self, config: StoreConfig) -> None:
        self.url = make_url(config.database_url)
        engine_kwargs: dict[str, object] = {"echo": config.echo}
        if self.url.drivername.startswith("sqlite"):
            # Store calls run on worker threads.
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self._is_memory_sqlite():
                engine_kwargs["poolclass"] = StaticPool
            else:
                self._ensure_parent_dir()

        self.engine = create_engine(self.url, **engine_kwargs)
        self.Session = sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False)

    def _is_memory_sqlite(self) -> bool:
        return self.url.database in (None, "", ":memory:")

    def _ensure_parent_dir(self) -> None:
        if self.url.database:
            Path(self.url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)

    def create_all(self) -> None:
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to initialise schema: {exc}") from exc
        logger.debug("Quote store schema ready at {}", self.url.render_as_string(hide_password=True))

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Yield a session inside a transaction, translating driver errors to :class:`StoreError`."""

        try:
            with self.Session() as session, session.begin():
                yield session
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc


__all__ = ["Database", "StoreError"]
