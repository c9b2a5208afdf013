"""Public exceptions for the QStash SDK."""


class QStashError(Exception):
    """Base exception for all QStash SDK errors."""


class QStashAPIError(QStashError):
    """Non-success response from a QStash read endpoint."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class QStashConfigError(QStashError):
    """Configuration error (missing env vars, invalid token, base URL or version)."""


class QStashValidationError(QStashError):
    """Validation error for request data."""


class InvalidDestinationError(QStashValidationError):
    """Destination cannot be encoded into a publish path segment."""


class EncodingError(QStashValidationError):
    """A delivery option cannot be encoded into a valid header value.

    The offending option is available as ``field``.
    """

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class QStashTransportError(QStashError):
    """The outbound call could not complete (connection, timeout, framing)."""


class PublishError(QStashTransportError):
    """Transport failure while publishing a message."""


class DecodeError(QStashError):
    """Response body does not match the expected shape."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
