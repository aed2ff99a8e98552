from urllib.parse import urlparse

from app.core.errors import InvalidUrlError, MissingUrlError

ALLOWED_SCHEMES = ("http", "https")

def is_valid_url(url: str) -> bool:
    """Check that url is an absolute http(s) URL with a host"""
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False

    return parsed.scheme.lower() in ALLOWED_SCHEMES and bool(parsed.hostname)

def validate_url(url: str) -> str:
    """
    Validate an inbound URL and return it stripped of surrounding whitespace.
    Raises MissingUrlError for an empty value, InvalidUrlError for a malformed one.
    """
    if url is None or not str(url).strip():
        raise MissingUrlError()

    url = str(url).strip()
    if not is_valid_url(url):
        raise InvalidUrlError(f"Invalid URL: {url}")

    return url
