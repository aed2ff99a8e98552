import datetime as dt
from typing import Optional

import httpx

from app.core.config import settings
from app.core.errors import FetchError
from app.fetch.base import FetchResult
from app.fetch.utils import validate_url

_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.7",
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Upgrade-Insecure-Requests": "1",
}

def _client_options() -> dict:
    options = {
        "headers": {"User-Agent": settings.USER_AGENT, **_HEADERS},
        "follow_redirects": settings.FOLLOW_REDIRECTS,
    }
    if settings.REQUEST_TIMEOUT is not None:
        options["timeout"] = settings.REQUEST_TIMEOUT
    return options

async def fetch_page(url: str, client: Optional[httpx.AsyncClient] = None) -> FetchResult:
    """
    Fetch a page with a single GET request.

    The URL is validated before any network activity. Timeouts, transport
    errors and non-2xx responses are raised as FetchError with the original
    exception chained. A caller-supplied client is used as is and left open.
    """
    url = validate_url(url)

    try:
        if client is not None:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(**_client_options()) as owned_client:
                response = await owned_client.get(url)
        response.raise_for_status()
    except httpx.TimeoutException as e:
        raise FetchError(f"Timeout while fetching {url}") from e
    except httpx.HTTPStatusError as e:
        raise FetchError(f"HTTP error {e.response.status_code} for {url}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(f"Failed to fetch {url}: {str(e) or type(e).__name__}") from e

    return FetchResult(
        url=url,
        status_code=int(response.status_code),
        final_url=str(response.url),
        html=response.text,
        fetched_at=dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
    )

async def fetch_html(url: str) -> str:
    """Fetch raw HTML from a URL."""
    result = await fetch_page(url)
    return result.html
