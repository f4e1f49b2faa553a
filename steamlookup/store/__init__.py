"""Identifier store implementations."""

from steamlookup.store.base import IdentifierStore
from steamlookup.store.sqlite_store import SQLiteIdentifierStore
from steamlookup.store.memory_store import MemoryIdentifierStore

__all__ = ["IdentifierStore", "SQLiteIdentifierStore", "MemoryIdentifierStore"]
