"""Helper utilities for request handlers.

Functions:
    base_url(request) -> str | None
        Extract public base URL (scheme + host) from an incoming request
    get_short_url(shortcode, base) -> str
        Get string representation of short URL for a given shortcode
    get_proxy_url(base, src) -> str
        Get string representation of a direct proxy link for a registered origin URL
    require_https(url, name) -> str
        Validate that a client-provided URL uses the https:// scheme

Example:
    >>> get_short_url('Gh71WPTa', 'https://proxy.example.com')
    'https://proxy.example.com/s/Gh71WPTa'

    >>> get_short_url('Gh71WPTa', None)
    '/s/Gh71WPTa'
"""

from urllib.parse import urlencode

from starlette.requests import Request

from vidproxy.constants import HTTPS_PREFIX
from vidproxy.exceptions import ValidationError


def base_url(request: Request) -> str | None:
    """Extract public base URL from an incoming request

    Args:
        request (Request): incoming Starlette/FastAPI request

    Returns:
        str | None: Base URL, e.g. "https://proxy.example.com".
                    None if the client sent no Host header.
    """
    host = request.headers.get('host')
    if not host:
        return None
    return f'{request.url.scheme}://{host}'


def get_short_url(shortcode: str, base: str | None) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base (str | None): public base URL, see base_url()

    Returns:
        str: absolute short url, or just its path when base is unknown
    """
    path = f'/s/{shortcode}'
    return f'{base.rstrip("/")}{path}' if base else path


def get_proxy_url(base: str | None, src: str) -> str:
    """Get string representation of a direct proxy link for a registered origin URL"""
    query = urlencode({'src': src})
    path = f'/video?{query}'
    return f'{base.rstrip("/")}{path}' if base else path


def require_https(url: str | None, name: str = 'src') -> str:
    """Validate that a client-provided URL is present and uses https://

    Args:
        url (str | None): client-provided URL
        name (str): name of the request parameter (used in error messages)

    Returns:
        str: the URL, unchanged

    Raises:
        ValidationError: if the URL is missing, empty or not https://

    Example:
        >>> require_https('http://example.com/a.mp4')
        ValidationError: Invalid src: must start with https://
    """
    if not url:
        raise ValidationError(f'Missing {name}')
    if not url.startswith(HTTPS_PREFIX):
        raise ValidationError(f'Invalid {name}: must start with {HTTPS_PREFIX}')
    return url
