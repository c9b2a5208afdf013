"""QStash SDK for Python.

Client for the QStash message publishing service.

Public API:
    QStashClient - Publish messages and read events, messages and the DLQ
    get_client - QStashClient configured from environment variables
    qstash_sdk.models - Destinations, delivery options and response models
    qstash_sdk.exceptions - Error taxonomy
"""

from qstash_sdk._version import __version__
from qstash_sdk.client import QStashClient, get_client
from qstash_sdk.exceptions import (
    DecodeError,
    EncodingError,
    InvalidDestinationError,
    PublishError,
    QStashAPIError,
    QStashConfigError,
    QStashError,
    QStashTransportError,
    QStashValidationError,
)
from qstash_sdk.models import (
    DeliveryOptions,
    Destination,
    DirectUrl,
    PublishOutcome,
    PublishRequest,
    PublishResult,
    Topic,
)

__all__ = [
    "__version__",
    "QStashClient",
    "get_client",
    "Destination",
    "DirectUrl",
    "Topic",
    "DeliveryOptions",
    "PublishRequest",
    "PublishOutcome",
    "PublishResult",
    "QStashError",
    "QStashAPIError",
    "QStashConfigError",
    "QStashValidationError",
    "InvalidDestinationError",
    "EncodingError",
    "QStashTransportError",
    "PublishError",
    "DecodeError",
]
