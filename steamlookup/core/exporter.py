"""Export utilities for profile snapshots."""

from pathlib import Path

from steamlookup.models.snapshot import ProfileSnapshot, snapshot_adapter


def to_json(snapshot: ProfileSnapshot, indent: int = 2) -> str:
    """
    Convert a snapshot to a JSON string.

    Args:
        snapshot: ProfileSnapshot to serialize
        indent: JSON indentation level
    """
    return snapshot.model_dump_json(indent=indent)


def to_dict(snapshot: ProfileSnapshot) -> dict:
    """Convert a snapshot to a JSON-compatible dictionary."""
    return snapshot.model_dump(mode="json")


def save_json(snapshot: ProfileSnapshot, filepath: str | Path, indent: int = 2) -> Path:
    """
    Save a snapshot to a JSON file.

    Args:
        snapshot: ProfileSnapshot to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(snapshot, indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> ProfileSnapshot:
    """
    Load a snapshot from a JSON file, restoring its variant.

    Args:
        filepath: Path to JSON file
    """
    path = Path(filepath)
    return snapshot_adapter.validate_json(path.read_text(encoding="utf-8"))
