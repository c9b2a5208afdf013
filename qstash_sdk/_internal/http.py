"""Shared HTTP client configuration."""

import httpx

from qstash_sdk._version import __version__

DEFAULT_BASE_URL = "https://qstash.upstash.io"
DEFAULT_TIMEOUT = 30.0

# RFC 7230 tchar set, used for header names and method tokens
TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def is_token(value: str) -> bool:
    """Check that a string is a non-empty RFC 7230 token."""
    return bool(value) and all(char in TOKEN_CHARS for char in value)


def is_valid_header_value(value: str) -> bool:
    """Check that a string can be sent as an HTTP header value.

    Header values must be ASCII and may not contain control characters
    other than horizontal tab.
    """
    for char in value:
        code = ord(char)
        if code > 0x7E or (code < 0x20 and char != "\t"):
            return False
    return True


def create_http_client(
    *,
    token: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.Client:
    """Create configured HTTP client.

    Every request issued by the returned client carries the bearer token
    as its ``Authorization`` header.

    Args:
        token: QStash API token.
        base_url: Base URL for all requests.
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url,
        headers={
            "Authorization": f"Bearer {token}",
            "User-Agent": f"qstash-sdk/{__version__}",
        },
    )
