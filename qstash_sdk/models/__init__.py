"""Public models for the QStash SDK.

    from qstash_sdk.models import DeliveryOptions, DirectUrl, PublishOutcome, Topic
"""

from qstash_sdk._internal.messages.models import (
    DlqMessage,
    DlqPage,
    Event,
    EventsPage,
    EventState,
    Message,
)
from qstash_sdk._internal.publish.destination import Destination, DirectUrl, Topic
from qstash_sdk._internal.publish.models import (
    DeliveryOptions,
    PublishOutcome,
    PublishRequest,
    PublishResult,
)

__all__ = [
    "Destination",
    "DirectUrl",
    "Topic",
    "DeliveryOptions",
    "PublishRequest",
    "PublishOutcome",
    "PublishResult",
    "Message",
    "Event",
    "EventState",
    "EventsPage",
    "DlqMessage",
    "DlqPage",
]
