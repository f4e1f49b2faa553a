"""httpx-based page fetcher for Steam Community profiles."""

from dataclasses import dataclass

import httpx

from steamlookup.config import AppConfig
from steamlookup.exceptions import FetchError


@dataclass
class FetchResult:
    """Result of a page fetch operation."""

    url: str
    html: str
    response_status: int


def create_client(
    config: AppConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build the AsyncClient used for profile requests.

    No custom headers are set; the request goes out as a plain GET.

    Args:
        config: AppConfig instance, uses defaults if None
        transport: Optional transport override (e.g. httpx.MockTransport)
    """
    config = config or AppConfig()
    return httpx.AsyncClient(
        timeout=config.request_timeout_seconds,
        follow_redirects=config.follow_redirects,
        transport=transport,
    )


async def fetch_profile_page(client: httpx.AsyncClient, url: str) -> FetchResult:
    """
    Fetch the HTML of a profile page.

    Args:
        client: AsyncClient to issue the request with
        url: Canonical profile URL

    Returns:
        FetchResult with HTML content

    Raises:
        FetchError: On transport errors, an unusable URL or a non-2xx response
    """
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"HTTP {e.response.status_code} for {url}") from e
    except httpx.HTTPError as e:
        raise FetchError(f"Request failed: {e!r}") from e
    except httpx.InvalidURL as e:
        # Raised while building the request, outside the HTTPError hierarchy
        raise FetchError(f"Invalid profile URL: {e}") from e

    return FetchResult(
        url=str(response.url),
        html=response.text,
        response_status=response.status_code,
    )
