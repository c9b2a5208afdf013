"""Models for the QStash read endpoints (messages, events, dead letter queue)."""

from qstash_sdk._internal.messages.models import (
    DlqMessage,
    DlqPage,
    Event,
    EventsPage,
    EventState,
    Message,
)

__all__ = [
    "Message",
    "Event",
    "EventState",
    "EventsPage",
    "DlqMessage",
    "DlqPage",
]
