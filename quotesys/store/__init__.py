"""Persistent storage for cached quotations and saved selections."""

from quotesys.store.database import Database, StoreError
from quotesys.store.repository import QuoteStore, SavedQuoteStore

__all__ = ["Database", "QuoteStore", "SavedQuoteStore", "StoreError"]
