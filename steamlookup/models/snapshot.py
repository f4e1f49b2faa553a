"""Profile snapshot variants."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# Placeholder for fields the profile's privacy settings hide
UNDISCLOSED = "hidden"
HIDDEN_PROFILE_MARKER = "(hidden profile)"

Undisclosed = Literal["hidden"]


class _Snapshot(BaseModel):
    """Fields shared by every variant."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    source_url: str


class FullyVisible(_Snapshot):
    """Public profile - every field as scraped."""

    variant: Literal["fully_visible"] = "fully_visible"
    display_name: str
    friends_count: str
    level: str
    avatar_url: str
    games_count: str
    groups_count: str
    badges_count: str


class PartiallyHidden(_Snapshot):
    """Public profile with a hidden friends list."""

    variant: Literal["partially_hidden"] = "partially_hidden"
    display_name: str
    friends_count: Undisclosed = UNDISCLOSED
    level: str
    avatar_url: str
    games_count: str
    groups_count: str
    badges_count: str


class HiddenProfile(_Snapshot):
    """Private profile - only name and avatar are disclosed."""

    variant: Literal["hidden_profile"] = "hidden_profile"
    display_name: str
    avatar_url: str
    friends_count: Undisclosed = UNDISCLOSED
    level: Undisclosed = UNDISCLOSED
    games_count: Undisclosed = UNDISCLOSED
    groups_count: Undisclosed = UNDISCLOSED
    badges_count: Undisclosed = UNDISCLOSED

    @classmethod
    def from_name(cls, name: str, **kwargs) -> "HiddenProfile":
        """Build with the hidden-profile marker appended to the name."""
        return cls(display_name=f"{name}\n{HIDDEN_PROFILE_MARKER}", **kwargs)


class FetchFailed(_Snapshot):
    """Profile could not be fetched or recognized. Carries no profile data."""

    variant: Literal["fetch_failed"] = "fetch_failed"


ProfileSnapshot = Annotated[
    Union[FullyVisible, PartiallyHidden, HiddenProfile, FetchFailed],
    Field(discriminator="variant"),
]

snapshot_adapter: TypeAdapter[ProfileSnapshot] = TypeAdapter(ProfileSnapshot)


def is_success(snapshot: ProfileSnapshot) -> bool:
    """True for every variant except FetchFailed."""
    return not isinstance(snapshot, FetchFailed)
