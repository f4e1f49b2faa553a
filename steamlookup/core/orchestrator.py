"""Lookup orchestrator - coordinates fetching, classifying, remembering."""

from dataclasses import dataclass
from typing import Callable

import httpx

from steamlookup.config import AppConfig, StoreBackend
from steamlookup.store.base import IdentifierStore
from steamlookup.store.memory_store import MemoryIdentifierStore
from steamlookup.store.sqlite_store import SQLiteIdentifierStore
from steamlookup.logging import get_logger, configure_logging
from steamlookup.core.fetcher import create_client, fetch_profile_page
from steamlookup.core.parser import parse_page
from steamlookup.core.classifier import classify
from steamlookup.models.snapshot import FetchFailed, ProfileSnapshot
from steamlookup.exceptions import SteamLookupError


@dataclass(frozen=True)
class LookupOutcome:
    """Snapshot of one lookup plus whether its identifier was remembered."""

    snapshot: ProfileSnapshot
    remembered: bool


class ProfileLookup:
    """
    High-level lookup interface with a remembered-identifier store.

    Example:
        async with ProfileLookup() as lookup:
            outcome = await lookup.lookup("76561197960287930", confirm=lambda _: True)
            print(outcome.snapshot.variant)
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        store: IdentifierStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize with optional configuration.

        Args:
            config: AppConfig instance, uses defaults if None
            store: Identifier store override, built from config if None.
                A store passed in is loaded but left open on exit.
            transport: Optional httpx transport override
        """
        self.config = config or AppConfig()
        self._store = store
        self._owns_store = store is None
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._log = get_logger("lookup")

    async def __aenter__(self) -> "ProfileLookup":
        """Async context manager entry - initialize resources."""
        configure_logging(self.config)
        self._log = get_logger("lookup")

        if self._store is None:
            if self.config.store_backend == StoreBackend.SQLITE:
                self._store = SQLiteIdentifierStore(self.config.sqlite_path)
            else:
                self._store = MemoryIdentifierStore()
        await self._store.load()
        self._log.debug("store_loaded", count=len(self._store))

        self._client = create_client(self.config, transport=self._transport)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
        if self._owns_store and self._store is not None:
            await self._store.close()
            self._store = None

    @property
    def store(self) -> IdentifierStore:
        if self._store is None:
            raise SteamLookupError("ProfileLookup used outside its context manager")
        return self._store

    async def fetch(self, identifier: str) -> ProfileSnapshot:
        """
        Fetch and classify a single profile.

        Network and parse failures are not raised; they produce the same
        FetchFailed snapshot as a page with no recognizable profile.

        Args:
            identifier: Profile identifier (opaque, not validated)

        Returns:
            ProfileSnapshot variant
        """
        if self._client is None:
            raise SteamLookupError("ProfileLookup used outside its context manager")

        url = self.config.profile_url(identifier)
        self._log.info("fetch_start", identifier=identifier, url=url)

        try:
            fetch_result = await fetch_profile_page(self._client, url)
            fields = parse_page(fetch_result.html)
        except SteamLookupError as e:
            self._log.error("fetch_failed", identifier=identifier, error=str(e))
            return FetchFailed(identifier=identifier, source_url=url)

        snapshot = classify(fields, identifier, url)
        self._log.info(
            "profile_classified",
            identifier=identifier,
            variant=snapshot.variant,
        )
        return snapshot

    async def lookup(
        self,
        identifier: str,
        confirm: Callable[[str], bool],
    ) -> LookupOutcome:
        """
        Full lookup workflow.

        Unknown identifiers are offered to confirm() before fetching. The
        fetch always runs; a "yes" is persisted only once it completes.

        Args:
            identifier: Profile identifier
            confirm: Asked whether to remember an unknown identifier

        Returns:
            LookupOutcome with the snapshot and the remember decision
        """
        self._log.info("lookup_start", identifier=identifier)

        known = await self.store.contains(identifier)
        save = False if known else bool(confirm(identifier))

        snapshot = await self.fetch(identifier)

        if save:
            await self.remember(identifier)

        return LookupOutcome(snapshot=snapshot, remembered=known or save)

    async def remember(self, identifier: str) -> bool:
        """Add an identifier to the store."""
        added = await self.store.add(identifier)
        if added:
            self._log.info("identifier_remembered", identifier=identifier)
        return added

    async def forget_all(self) -> None:
        """Clear every remembered identifier."""
        await self.store.clear()
        self._log.info("identifiers_cleared")

    async def known_ids(self) -> set[str]:
        return await self.store.all()

    def suggest(self, prefix: str = "", limit: int | None = None) -> list[str]:
        return self.store.suggest(prefix, limit)
