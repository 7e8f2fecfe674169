"""Pytest helpers for path configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from quotesys.config import StoreConfig  # noqa: E402
from quotesys.store import Database, QuoteStore, SavedQuoteStore  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_provider_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials from the developer's shell out of the tests."""
    monkeypatch.delenv("UNSPLASH_ACCESS_KEY", raising=False)
    monkeypatch.delenv("PEXELS_API_KEY", raising=False)


@pytest.fixture()
def store_config(tmp_path: Path) -> StoreConfig:
    return StoreConfig(database_url=f"sqlite:///{tmp_path / 'quotes.db'}")


@pytest.fixture()
def database(store_config: StoreConfig) -> Iterator[Database]:
    db = Database(store_config)
    db.create_all()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture()
def quote_store(database: Database) -> QuoteStore:
    return QuoteStore(database)


@pytest.fixture()
def saved_store(database: Database) -> SavedQuoteStore:
    return SavedQuoteStore(database)
