"""Encoding of delivery options into Upstash-* request headers."""

import httpx

from qstash_sdk._internal.http import is_token, is_valid_header_value
from qstash_sdk._internal.publish.models import DeliveryOptions
from qstash_sdk.exceptions import EncodingError

DEFAULT_METHOD = "POST"

METHOD_HEADER = "Upstash-Method"
DELAY_HEADER = "Upstash-Delay"
NOT_BEFORE_HEADER = "Upstash-Not-Before"
DEDUPLICATION_ID_HEADER = "Upstash-Deduplication-Id"
CONTENT_BASED_DEDUPLICATION_HEADER = "Upstash-Content-Based-Deduplication"
RETRIES_HEADER = "Upstash-Retries"
CALLBACK_HEADER = "Upstash-Callback"


def _header_value(field: str, value: str) -> str:
    if not is_valid_header_value(value):
        raise EncodingError(f"{field} is not a valid header value: {value!r}", field=field)
    return value


def _pass_through(options: DeliveryOptions) -> list[tuple[str, str]]:
    items: list[tuple[str, str]] = []
    for name, values in (options.headers or {}).items():
        if not is_token(name):
            raise EncodingError(f"headers has an invalid header name: {name!r}", field="headers")
        for value in values:
            items.append((name, _header_value("headers", value)))
    return items


def build_headers(options: DeliveryOptions) -> httpx.Headers:
    """Build the request headers for a publish call.

    Pass-through headers are applied first so that a colliding directive
    header always wins. When ``not_before`` is set only ``Upstash-Not-Before``
    is sent, even if ``delay`` or a forwarded ``Upstash-Delay`` is also given.

    Args:
        options: The delivery options to encode.

    Returns:
        Case-insensitive header set.

    Raises:
        EncodingError: If an option cannot be sent as a header. ``field``
            names the first offending option.
    """
    headers = httpx.Headers(_pass_through(options))

    method = (options.method if options.method is not None else DEFAULT_METHOD).upper()
    if not is_token(method):
        raise EncodingError(
            f"method is not a valid HTTP method: {options.method!r}", field="method"
        )
    headers[METHOD_HEADER] = method

    if options.not_before is not None:
        headers.pop(DELAY_HEADER, None)
        headers[NOT_BEFORE_HEADER] = str(options.not_before)
    elif options.delay is not None:
        headers[DELAY_HEADER] = f"{options.delay}s"

    if options.deduplication_id is not None:
        headers[DEDUPLICATION_ID_HEADER] = _header_value(
            "deduplication_id", options.deduplication_id
        )

    if options.content_based_deduplication is not None:
        headers[CONTENT_BASED_DEDUPLICATION_HEADER] = (
            "true" if options.content_based_deduplication else "false"
        )

    if options.retries is not None:
        headers[RETRIES_HEADER] = str(options.retries)

    if options.callback is not None:
        headers[CALLBACK_HEADER] = _header_value("callback", options.callback)

    return headers
