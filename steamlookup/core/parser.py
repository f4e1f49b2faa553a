"""BeautifulSoup-based HTML parser for Steam Community profiles."""

from dataclasses import dataclass, asdict

from bs4 import BeautifulSoup

from steamlookup.exceptions import ParseError


@dataclass(frozen=True)
class ProfileFields:
    """Raw field values scraped from a profile page. Missing fields are empty strings."""

    display_name: str = ""
    friends_count: str = ""
    level: str = ""
    avatar_url: str = ""
    games_count: str = ""
    groups_count: str = ""
    badges_count: str = ""

    def as_dict(self) -> dict:
        return asdict(self)


# Selectors - centralized for easy updates when Steam changes their DOM
SELECTORS = {
    "display_name": ".actual_persona_name",
    "friends_count": "a[href*='/friends'] span:nth-child(2)",
    "level": "a[href*='/badges'] > div > div > span",
    "avatar": ".playerAvatarAutoSizeInner > img",
    "games_count": "a[href*='/games/?tab=all'] span:nth-child(2)",
    "groups_count": "a[href*='/groups/'] span:nth-child(2)",
    "badges_count": "a[href*='/badges/'] span:nth-child(2)",
}


def select_text(soup: BeautifulSoup, selector: str) -> str:
    """
    Combined text of every element matching selector.

    Each match contributes its whitespace-normalized text; matches are
    joined with a single space. Returns "" when nothing matches.
    """
    texts = []
    for el in soup.select(selector):
        text = " ".join(el.get_text(" ", strip=True).split())
        if text:
            texts.append(text)
    return " ".join(texts)


def select_attr(soup: BeautifulSoup, selector: str, attr: str) -> str:
    """Attribute value of the first matching element that carries it."""
    for el in soup.select(selector):
        value = el.get(attr)
        if value:
            return value.strip()
    return ""


def parse_profile(soup: BeautifulSoup) -> ProfileFields:
    """
    Extract profile fields from parsed HTML.

    Args:
        soup: BeautifulSoup object of the page

    Returns:
        ProfileFields with raw (unclassified) values
    """
    return ProfileFields(
        display_name=select_text(soup, SELECTORS["display_name"]),
        friends_count=select_text(soup, SELECTORS["friends_count"]),
        level=select_text(soup, SELECTORS["level"]),
        avatar_url=select_attr(soup, SELECTORS["avatar"], "src"),
        games_count=select_text(soup, SELECTORS["games_count"]),
        groups_count=select_text(soup, SELECTORS["groups_count"]),
        badges_count=select_text(soup, SELECTORS["badges_count"]),
    )


def parse_page(html: str) -> ProfileFields:
    """
    Full page parsing.

    Args:
        html: Raw HTML content

    Returns:
        ProfileFields for the page

    Raises:
        ParseError: If the document cannot be parsed
    """
    try:
        soup = BeautifulSoup(html, "lxml")
        return parse_profile(soup)
    except Exception as e:
        raise ParseError(f"Profile parse error: {e}") from e
