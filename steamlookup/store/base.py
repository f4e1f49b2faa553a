"""Abstract identifier store interface."""

from abc import ABC, abstractmethod

from steamlookup.exceptions import StoreError


class IdentifierStore(ABC):
    """
    Set of remembered profile identifiers.

    The store owns a single insertion-ordered set. Suggestions are a
    read-only view of it, so they always equal the persisted state once
    a mutation returns. Backends only implement loading and persisting.
    """

    def __init__(self):
        self._ids: dict[str, None] = {}
        self._loaded = False

    @abstractmethod
    async def _read(self) -> list[str]:
        """Read persisted identifiers."""
        ...

    @abstractmethod
    async def _write(self, identifiers: list[str]) -> None:
        """Persist the full identifier set."""
        ...

    @abstractmethod
    async def _erase(self) -> None:
        """Remove persisted identifiers, including legacy keys."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Cleanup connections and resources."""
        ...

    async def load(self) -> "IdentifierStore":
        """Load persisted identifiers into memory."""
        self._ids = dict.fromkeys(await self._read())
        self._loaded = True
        return self

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise StoreError("Identifier store used before load()")

    async def contains(self, identifier: str) -> bool:
        """Check whether an identifier is remembered."""
        self._ensure_loaded()
        return identifier in self._ids

    async def add(self, identifier: str) -> bool:
        """
        Remember an identifier and persist immediately.

        Args:
            identifier: Profile identifier

        Returns:
            True if it was added, False if it was already present
        """
        self._ensure_loaded()
        if identifier in self._ids:
            return False
        updated = {**self._ids, identifier: None}
        await self._write(list(updated))
        self._ids = updated
        return True

    async def clear(self) -> None:
        """Forget every identifier and persist the empty state."""
        self._ensure_loaded()
        await self._erase()
        self._ids = {}

    async def all(self) -> set[str]:
        """All remembered identifiers."""
        self._ensure_loaded()
        return set(self._ids)

    @property
    def suggestions(self) -> tuple[str, ...]:
        """Remembered identifiers in insertion order, for autocomplete."""
        return tuple(self._ids)

    def suggest(self, prefix: str = "", limit: int | None = None) -> list[str]:
        """
        Autocomplete suggestions matching a prefix (case-insensitive).

        Args:
            prefix: Typed prefix, empty matches everything
            limit: Maximum number of suggestions
        """
        prefix = prefix.casefold()
        matches = [i for i in self._ids if i.casefold().startswith(prefix)]
        return matches[:limit] if limit is not None else matches

    def __len__(self) -> int:
        return len(self._ids)

    async def __aenter__(self) -> "IdentifierStore":
        """Async context manager entry - load persisted state."""
        return await self.load()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup."""
        await self.close()
