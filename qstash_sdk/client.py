"""QStash client.

Example usage:
    from qstash_sdk import DeliveryOptions, DirectUrl, QStashClient, Topic

    with QStashClient(token="your-token") as client:
        [outcome] = client.publish(
            DirectUrl(url="https://example.com/hook"),
            "hello",
            options=DeliveryOptions(delay=30, retries=3),
        )

        for outcome in client.publish_json(Topic(name="orders"), {"id": 1}):
            if not outcome.ok:
                print(outcome.url, outcome.error)
"""

import json
import os
import sys
from typing import Any, Literal, TypeVar, get_args
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from qstash_sdk._internal.http import (
    DEFAULT_BASE_URL,
    create_http_client,
    is_valid_header_value,
)
from qstash_sdk._internal.messages.models import DlqPage, EventsPage, Message
from qstash_sdk._internal.publish.destination import Destination, resolve_destination
from qstash_sdk._internal.publish.headers import build_headers
from qstash_sdk._internal.publish.models import DeliveryOptions, PublishRequest, PublishResult
from qstash_sdk._internal.publish.response import normalize_response
from qstash_sdk._internal.redaction import format_headers
from qstash_sdk.exceptions import (
    DecodeError,
    EncodingError,
    PublishError,
    QStashAPIError,
    QStashConfigError,
    QStashTransportError,
    QStashValidationError,
)

ApiVersion = Literal["v1", "v2"]

DEFAULT_VERSION: ApiVersion = "v2"
DEFAULT_TIMEOUT_MS = 30000
JSON_CONTENT_TYPE = "application/json"

ModelT = TypeVar("ModelT", bound=BaseModel)


class QStashClient:
    """Client for the QStash messaging API.

    Publishing returns the per-target outcomes reported by the service.
    A target the service rejected is reported through ``PublishOutcome.error``
    and is not raised; exceptions are reserved for calls that failed as a
    whole (invalid destination or options, transport failure, undecodable
    response).

    The client holds a pooled ``httpx.Client`` and is safe to share between
    threads. Use it as a context manager or call ``close()`` when done.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        version: ApiVersion = DEFAULT_VERSION,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            token: QStash API token, sent as a bearer token on every request.
            base_url: Base URL of the QStash API.
            version: API version, "v1" or "v2".
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.

        Raises:
            QStashConfigError: If the token, base URL or version is invalid.
        """
        if not token or not is_valid_header_value(token):
            raise QStashConfigError("Invalid QStash token")
        if version not in get_args(ApiVersion):
            raise QStashConfigError(f"Unsupported API version: {version!r}")
        try:
            parsed_url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise QStashConfigError(f"Invalid base URL: {base_url!r}") from e
        if parsed_url.scheme not in ("http", "https") or not parsed_url.host:
            raise QStashConfigError(f"Base URL must be an absolute http(s) URL: {base_url!r}")

        self._base_url = base_url
        self._version = version
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._http = create_http_client(
            token=token,
            base_url=base_url,
            timeout=timeout_ms / 1000,
        )

    @classmethod
    def from_env(cls) -> "QStashClient":
        """Create a client from environment variables.

        Required environment variables:
            QSTASH_TOKEN: The QStash API token.

        Optional environment variables:
            QSTASH_URL: Base URL of the QStash API.
            QSTASH_API_VERSION: API version, "v1" or "v2".
            QSTASH_TIMEOUT_MS: Request timeout in milliseconds.
            QSTASH_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured QStashClient.

        Raises:
            QStashConfigError: If QSTASH_TOKEN is missing or a value is invalid.
            ValueError: If QSTASH_TIMEOUT_MS is not an integer.
        """
        token = os.environ.get("QSTASH_TOKEN")
        if not token:
            raise QStashConfigError("QSTASH_TOKEN is not set")

        base_url = os.environ.get("QSTASH_URL") or DEFAULT_BASE_URL
        version = os.environ.get("QSTASH_API_VERSION") or DEFAULT_VERSION
        timeout_ms = int(os.environ.get("QSTASH_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        debug = os.environ.get("QSTASH_DEBUG", "") == "1"

        return cls(
            token,
            base_url=base_url,
            version=version,  # type: ignore[arg-type]
            timeout_ms=timeout_ms,
            debug=debug,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def version(self) -> ApiVersion:
        return self._version

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._http.close()

    def __enter__(self) -> "QStashClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[qstash-sdk] {message}", file=sys.stderr)

    def _path(self, *segments: str) -> str:
        return "/".join(("", self._version, *segments))

    def _send(
        self,
        method: str,
        path: str,
        *,
        headers: httpx.Headers | None = None,
        content: str | bytes | None = None,
        params: dict[str, str] | None = None,
        error_cls: type[QStashTransportError] = QStashTransportError,
    ) -> httpx.Response:
        """Send one request. Any HTTP response is returned, whatever its status."""
        header_line = format_headers(headers.multi_items()) if headers else ""
        self._log_debug(f"{method} {path} [{header_line}]")
        try:
            response = self._http.request(
                method,
                path,
                headers=headers,
                content=content,
                params=params,
            )
        except httpx.RequestError as e:
            self._log_debug(f"{method} {path} failed: {type(e).__name__}: {e}")
            raise error_cls(f"{method} {path} failed: {e}") from e
        self._log_debug(f"{method} {path} -> {response.status_code}")
        return response

    # =========================================================================
    # Publishing
    # =========================================================================

    def publish(
        self,
        destination: Destination,
        body: str | bytes | None = None,
        *,
        options: DeliveryOptions | None = None,
    ) -> PublishResult:
        """Publish a message.

        Args:
            destination: A DirectUrl or a Topic.
            body: Raw message body, sent unchanged. None sends no body.
            options: Delivery options (delay, retries, headers, ...).

        Returns:
            One outcome for a DirectUrl; one outcome per subscriber, in the
            order reported by the service, for a Topic.

        Raises:
            InvalidDestinationError: If the destination cannot be encoded.
            EncodingError: If an option cannot be encoded as a header.
            PublishError: If the request could not be sent.
            DecodeError: If the response does not have the expected shape.
        """
        request = PublishRequest(
            destination=destination,
            body=body,
            options=options or DeliveryOptions(),
        )
        return self.publish_request(request)

    def publish_request(self, request: PublishRequest) -> PublishResult:
        """Publish a prebuilt PublishRequest. See ``publish``."""
        resolved = resolve_destination(request.destination)
        headers = build_headers(request.options)

        response = self._send(
            "POST",
            self._path(resolved.path),
            headers=headers,
            content=request.body,
            error_cls=PublishError,
        )
        if response.is_error:
            self._log_debug(
                f"Publish returned status {response.status_code}: {response.text[:200]}"
            )

        try:
            return normalize_response(resolved.mode, response.content, response.status_code)
        except DecodeError as e:
            self._log_debug(f"Publish response decode failed: {e}")
            raise

    def publish_json(
        self,
        destination: Destination,
        body: Any,
        *,
        options: DeliveryOptions | None = None,
    ) -> PublishResult:
        """Publish a JSON-serializable value.

        The body is serialized to JSON and ``Content-Type: application/json``
        is forwarded unless ``options.headers`` already sets a Content-Type.
        Otherwise identical to ``publish``.

        Raises:
            EncodingError: If the body is not JSON serializable (field "body").
        """
        options = options or DeliveryOptions()
        headers = dict(options.headers or {})
        if not any(name.lower() == "content-type" for name in headers):
            headers = {"Content-Type": [JSON_CONTENT_TYPE], **headers}

        return self.publish(
            destination,
            _serialize_json(body),
            options=options.model_copy(update={"headers": headers}),
        )

    # =========================================================================
    # Read Endpoints
    # =========================================================================

    def get_events(self, cursor: int | str | None = None) -> EventsPage:
        """Retrieve one page of the event log.

        Args:
            cursor: Cursor from a previous page (a Unix timestamp in ms).

        Returns:
            The events and the cursor of the next page, if any.
        """
        params = {"cursor": str(cursor)} if cursor is not None else None
        response = self._send("GET", self._path("events"), params=params)
        return self._decode(response, EventsPage)

    def get_message(self, message_id: str) -> Message:
        """Retrieve a message by its id."""
        response = self._send("GET", self._message_path(message_id))
        return self._decode(response, Message)

    def cancel_message(self, message_id: str) -> None:
        """Cancel a message so it is not delivered.

        A message already in flight to its destination may not be cancellable.

        Raises:
            QStashAPIError: If the service did not accept the cancellation.
        """
        response = self._send("DELETE", self._message_path(message_id))
        self._raise_for_status(response)

    def get_dead_letter_queue(self, cursor: int | str | None = None) -> DlqPage:
        """Retrieve one page of the dead letter queue."""
        params = {"cursor": str(cursor)} if cursor is not None else None
        response = self._send("GET", self._path("dlq"), params=params)
        return self._decode(response, DlqPage)

    def _message_path(self, message_id: str) -> str:
        if not message_id:
            raise QStashValidationError("message_id must not be empty")
        return self._path("messages", quote(message_id, safe=""))

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        message = f"QStash returned status {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and isinstance(data.get("error"), str):
            message = f"{message}: {data['error']}"
        self._log_debug(message)
        raise QStashAPIError(message, status_code=response.status_code)

    def _decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        self._raise_for_status(response)
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            self._log_debug(f"{model.__name__} decode failed: {e}")
            raise DecodeError(
                f"Response is not a valid {model.__name__}",
                status_code=response.status_code,
            ) from e


def _serialize_json(body: Any) -> str:
    """Serialize a publish_json body, accepting pydantic models."""
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")
    try:
        return json.dumps(body, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"body is not JSON serializable: {e}", field="body") from e


def get_client() -> QStashClient:
    """Get a client configured from environment variables.

    Returns:
        A QStashClient configured by ``QStashClient.from_env()``.
    """
    return QStashClient.from_env()
