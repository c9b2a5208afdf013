"""Redaction of sensitive request headers in debug output."""

from collections.abc import Iterable

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "upstash-forward-authorization",
    "cookie",
    "upstash-forward-cookie",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    """Replace the values of sensitive headers.

    The input is never mutated. Header names are compared case-insensitively
    and repeated headers keep their order.

    Args:
        headers: Header name/value pairs, e.g. ``httpx.Headers.multi_items()``.

    Returns:
        A new list of pairs with sensitive values replaced by "[REDACTED]".
    """
    return [
        (name, REDACTED_VALUE if name.lower() in REDACT_HEADERS else value)
        for name, value in headers
    ]


def format_headers(headers: Iterable[tuple[str, str]]) -> str:
    """Render headers on a single line for debug output, redacted."""
    return ", ".join(f"{name}: {value}" for name, value in redact_headers(headers))
