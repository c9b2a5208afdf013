"""Pydantic models for publishing messages.

Wire fields are camelCase; Python attributes are snake_case.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from qstash_sdk._internal.publish.destination import Destination

# =============================================================================
# Request Models
# =============================================================================


class DeliveryOptions(BaseModel):
    """Optional per-publish delivery directives.

    All fields are optional; an unset field leaves the service default.

    Fields:
        headers: Headers forwarded to the destination (name -> values).
        delay: Delay delivery by this many seconds.
        not_before: Absolute Unix timestamp (seconds) before which the
            message is not delivered. Overrides delay.
        deduplication_id: Explicit id used to detect duplicate messages.
        content_based_deduplication: Hash the message content into the
            deduplication id.
        retries: How many times delivery is retried on failure.
        callback: URL receiving the destination's response.
        method: HTTP method used to call the destination (default: POST).
    """

    model_config = ConfigDict(frozen=True)

    headers: dict[str, list[str]] | None = None
    delay: int | None = Field(default=None, ge=0, strict=True)
    not_before: int | None = Field(default=None, ge=0, strict=True)
    deduplication_id: str | None = None
    content_based_deduplication: bool | None = None
    retries: int | None = Field(default=None, ge=0, strict=True)
    callback: str | None = None
    method: str | None = None

    @field_validator("headers", mode="before")
    @classmethod
    def headers_as_lists(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {key: [value] if isinstance(value, str) else value for key, value in v.items()}
        return v


class PublishRequest(BaseModel):
    """A single publish: destination, optional raw body and delivery options."""

    model_config = ConfigDict(frozen=True)

    destination: Destination
    body: str | bytes | None = None
    options: DeliveryOptions = Field(default_factory=DeliveryOptions)


# =============================================================================
# Response Models
# =============================================================================


class PublishOutcome(BaseModel):
    """Per-target result reported by the service.

    A successful enqueue carries ``message_id``; a duplicate may carry
    ``deduplicated=True``; a rejected target carries ``error``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message_id: str | None = None
    url: str | None = None
    error: str | None = None
    deduplicated: bool | None = None

    @property
    def ok(self) -> bool:
        """True unless the service reported an error for this target."""
        return self.error is None


PublishResult = list[PublishOutcome]
