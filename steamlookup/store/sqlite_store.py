"""SQLite-backed identifier store."""

import json
from pathlib import Path

import aiosqlite

from steamlookup.store.base import IdentifierStore

IDS_KEY = "saved_steam_ids"
# Written by earlier releases; only ever deleted
LEGACY_KEYS = ("steam_ids",)


class SQLiteIdentifierStore(IdentifierStore):
    """Identifier store persisted as a single key in a SQLite key/value table."""

    def __init__(self, db_path: str = ".steamlookup.db"):
        """
        Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file
        """
        super().__init__()
        self.db_path = Path(db_path)
        self._db: aiosqlite.Connection | None = None

    async def _ensure_db(self) -> aiosqlite.Connection:
        """Ensure database connection and schema exist."""
        if self._db is None:
            self._db = await aiosqlite.connect(self.db_path)
            await self._db.execute("""
                CREATE TABLE IF NOT EXISTS preferences (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            await self._db.commit()
        return self._db

    async def _read(self) -> list[str]:
        db = await self._ensure_db()
        async with db.execute(
            "SELECT value FROM preferences WHERE key = ?", (IDS_KEY,)
        ) as cursor:
            row = await cursor.fetchone()

        if row is None:
            return []
        return [str(i) for i in json.loads(row[0])]

    async def _write(self, identifiers: list[str]) -> None:
        db = await self._ensure_db()
        await db.execute(
            "INSERT OR REPLACE INTO preferences (key, value) VALUES (?, ?)",
            (IDS_KEY, json.dumps(identifiers)),
        )
        await db.commit()

    async def _erase(self) -> None:
        db = await self._ensure_db()
        keys = (IDS_KEY, *LEGACY_KEYS)
        await db.execute(
            f"DELETE FROM preferences WHERE key IN ({', '.join('?' * len(keys))})",
            keys,
        )
        await db.commit()

    async def close(self) -> None:
        """Close database connection."""
        if self._db is not None:
            await self._db.close()
            self._db = None
