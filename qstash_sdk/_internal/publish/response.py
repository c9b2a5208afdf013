"""Decoding of publish responses into outcome lists."""

from pydantic import TypeAdapter, ValidationError

from qstash_sdk._internal.publish.destination import DecodeMode
from qstash_sdk._internal.publish.models import PublishOutcome, PublishResult
from qstash_sdk.exceptions import DecodeError

_SINGLE_ADAPTER = TypeAdapter(PublishOutcome)
_LIST_ADAPTER = TypeAdapter(list[PublishOutcome])


def normalize_response(
    mode: DecodeMode,
    content: bytes | str,
    status_code: int | None = None,
) -> PublishResult:
    """Decode a publish response body.

    The shape is chosen by ``mode``, which comes from the destination the
    request was sent to. The response itself is never inspected to pick a
    shape, so an array in ``single`` mode is an error.

    Args:
        mode: ``single`` for a direct URL, ``list`` for a topic.
        content: Raw response body.
        status_code: HTTP status, attached to a DecodeError for context.

    Returns:
        One outcome in ``single`` mode, or every outcome in server order.

    Raises:
        DecodeError: If the body is not valid JSON of the expected shape.
    """
    try:
        if mode == "single":
            return [_SINGLE_ADAPTER.validate_json(content)]
        return _LIST_ADAPTER.validate_json(content)
    except ValidationError as e:
        expected = "an object" if mode == "single" else "an array of objects"
        raise DecodeError(
            f"Publish response is not {expected}: {e.errors()[0]['msg']}",
            status_code=status_code,
        ) from e
