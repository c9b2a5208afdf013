"""Pydantic models for the QStash read endpoints.

Covers message lookup, the event log and the dead letter queue.
"""

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Delivery states reported in the event log
EventState = Literal["CREATED", "ACTIVE", "DELIVERED", "ERROR", "CANCELED", "RETRY", "FAILED"]

EVENT_STATES: frozenset[str] = frozenset(get_args(EventState))
UNKNOWN_EVENT_STATE: EventState = "ERROR"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _cursor_as_str(v: Any) -> Any:
    # The service has sent cursors both as strings and as numbers
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


# =============================================================================
# Messages
# =============================================================================


class Message(_WireModel):
    """A message stored by QStash."""

    message_id: str
    url: str
    topic_name: str | None = None
    endpoint_name: str | None = None
    key: str | None = None
    method: str | None = None
    header: dict[str, list[str]] | None = None
    body: str | None = None
    max_retries: int | None = None
    not_before: int | None = None
    created_at: int
    callback: str | None = None


# =============================================================================
# Events
# =============================================================================


class Event(_WireModel):
    """Single entry of the event log.

    States the SDK does not know about are reported as ``ERROR``.
    """

    time: int
    state: EventState = UNKNOWN_EVENT_STATE
    message_id: str
    next_delivery_time: int | None = None
    error: str | None = None
    url: str | None = None
    topic_name: str | None = None
    endpoint_name: str | None = None

    @field_validator("state", mode="before")
    @classmethod
    def unknown_state_as_error(cls, v: Any) -> Any:
        if not isinstance(v, str) or v not in EVENT_STATES:
            return UNKNOWN_EVENT_STATE
        return v


class EventsPage(_WireModel):
    """One page of the event log. Pass ``cursor`` back to fetch the next."""

    cursor: str | None = None
    events: list[Event] = Field(default_factory=list)

    @field_validator("cursor", mode="before")
    @classmethod
    def cursor_as_str(cls, v: Any) -> Any:
        return _cursor_as_str(v)


# =============================================================================
# Dead Letter Queue
# =============================================================================


class DlqMessage(Message):
    """A message that exhausted its retries, with the last response received."""

    dlq_id: str | None = None
    response_status: int | None = None
    response_header: dict[str, list[str]] | None = None
    response_body: str | None = None


class DlqPage(_WireModel):
    """One page of the dead letter queue."""

    cursor: str | None = None
    messages: list[DlqMessage] = Field(default_factory=list)

    @field_validator("cursor", mode="before")
    @classmethod
    def cursor_as_str(cls, v: Any) -> Any:
        return _cursor_as_str(v)
