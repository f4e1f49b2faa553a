"""Pydantic models for steamlookup."""

from steamlookup.models.snapshot import (
    UNDISCLOSED,
    HIDDEN_PROFILE_MARKER,
    FullyVisible,
    PartiallyHidden,
    HiddenProfile,
    FetchFailed,
    ProfileSnapshot,
    snapshot_adapter,
    is_success,
)

__all__ = [
    "UNDISCLOSED",
    "HIDDEN_PROFILE_MARKER",
    "FullyVisible",
    "PartiallyHidden",
    "HiddenProfile",
    "FetchFailed",
    "ProfileSnapshot",
    "snapshot_adapter",
    "is_success",
]
