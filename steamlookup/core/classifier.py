"""Classification of scraped profile fields into snapshot variants."""

from steamlookup.core.parser import ProfileFields
from steamlookup.models.snapshot import (
    FetchFailed,
    FullyVisible,
    HiddenProfile,
    PartiallyHidden,
    ProfileSnapshot,
)


def classify(fields: ProfileFields, identifier: str, source_url: str) -> ProfileSnapshot:
    """
    Map scraped fields to exactly one snapshot variant.

    Only three triggers matter, checked in this order:
        name and level empty       -> FetchFailed
        level empty                -> HiddenProfile
        friends count empty        -> PartiallyHidden
        otherwise                  -> FullyVisible

    Args:
        fields: Raw fields from the parser
        identifier: Identifier the page was fetched for
        source_url: URL the page was fetched from

    Returns:
        One of FullyVisible, PartiallyHidden, HiddenProfile, FetchFailed
    """
    base = {"identifier": identifier, "source_url": source_url}

    if not fields.display_name and not fields.level:
        return FetchFailed(**base)

    if not fields.level:
        return HiddenProfile.from_name(
            fields.display_name,
            avatar_url=fields.avatar_url,
            **base,
        )

    visible = {
        "display_name": fields.display_name,
        "level": fields.level,
        "avatar_url": fields.avatar_url,
        "games_count": fields.games_count,
        "groups_count": fields.groups_count,
        "badges_count": fields.badges_count,
        **base,
    }

    if not fields.friends_count:
        return PartiallyHidden(**visible)

    return FullyVisible(friends_count=fields.friends_count, **visible)
