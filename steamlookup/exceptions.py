"""Custom exception hierarchy for steamlookup."""


class SteamLookupError(Exception):
    """Base exception for all steamlookup errors."""


class FetchError(SteamLookupError):
    """Failed to fetch profile page."""


class ParseError(SteamLookupError):
    """Failed to parse page content."""


class StoreError(SteamLookupError):
    """Identifier store used incorrectly."""
