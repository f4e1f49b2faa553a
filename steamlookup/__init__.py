"""steamlookup - Steam Community profile lookup."""

from steamlookup.models.snapshot import (
    UNDISCLOSED,
    FullyVisible,
    PartiallyHidden,
    HiddenProfile,
    FetchFailed,
    ProfileSnapshot,
)
from steamlookup.config import AppConfig
from steamlookup.core.orchestrator import ProfileLookup, LookupOutcome
from steamlookup.core.classifier import classify
from steamlookup.core.exporter import to_json, to_dict, save_json, load_json

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ProfileLookup",
    "LookupOutcome",
    "AppConfig",
    "classify",
    # Models
    "UNDISCLOSED",
    "FullyVisible",
    "PartiallyHidden",
    "HiddenProfile",
    "FetchFailed",
    "ProfileSnapshot",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "load_json",
    "__version__",
]
