"""Shared validation utilities for hourlywolves."""
import httpx

from hourlywolves.exceptions import UrlResolutionError

ALLOWED_SCHEMES = ('http', 'https')


def validate_http_url(value: str | httpx.URL, field_name: str = "URL") -> httpx.URL:
    """
    Parse an absolute http(s) URL.

    :param value: URL to validate
    :param field_name: Name of the field for error messages (default "URL")
    :return: The parsed URL
    :raises UrlResolutionError: If the URL is malformed, relative, or not http(s)
    """
    try:
        url = httpx.URL(str(value))
    except httpx.InvalidURL as e:
        raise UrlResolutionError(f"{field_name} is not a valid URL: {value!r}") from e

    if url.scheme not in ALLOWED_SCHEMES or not url.host:
        raise UrlResolutionError(f"{field_name} must be an absolute http(s) URL: {value!r}")
    return url
