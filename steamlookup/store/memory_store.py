"""In-process identifier store with no persistence."""

from steamlookup.store.base import IdentifierStore


class MemoryIdentifierStore(IdentifierStore):
    """Keeps identifiers for the lifetime of the process only."""

    def __init__(self, initial: list[str] | None = None):
        super().__init__()
        self._initial = list(initial or [])

    async def _read(self) -> list[str]:
        return self._initial

    async def _write(self, identifiers: list[str]) -> None:
        self._initial = list(identifiers)

    async def _erase(self) -> None:
        self._initial = []

    async def close(self) -> None:
        pass
