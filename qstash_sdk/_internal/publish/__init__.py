"""Publish pipeline for the QStash client.

Destination resolution, delivery-option encoding and response decoding.
These are pure functions; the request itself is sent by QStashClient.
"""

from qstash_sdk._internal.publish.destination import (
    DecodeMode,
    Destination,
    DirectUrl,
    ResolvedDestination,
    Topic,
    resolve_destination,
)
from qstash_sdk._internal.publish.headers import build_headers
from qstash_sdk._internal.publish.models import (
    DeliveryOptions,
    PublishOutcome,
    PublishRequest,
    PublishResult,
)
from qstash_sdk._internal.publish.response import normalize_response

__all__ = [
    "DecodeMode",
    "Destination",
    "DirectUrl",
    "Topic",
    "ResolvedDestination",
    "resolve_destination",
    "build_headers",
    "DeliveryOptions",
    "PublishRequest",
    "PublishOutcome",
    "PublishResult",
    "normalize_response",
]
