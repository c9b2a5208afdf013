"""Tests for read endpoint models."""

import pytest
from pydantic import ValidationError

from qstash_sdk._internal.messages.models import DlqPage, Event, EventsPage, Message

MESSAGE = {
    "messageId": "msg-1",
    "url": "https://example.com/hook",
    "topicName": "orders",
    "method": "POST",
    "header": {"Content-Type": ["application/json"]},
    "body": '{"id":1}',
    "maxRetries": 3,
    "notBefore": 1700000000,
    "createdAt": 1699999999000,
}


class TestMessage:
    """Tests for Message model."""

    def test_from_wire(self):
        """Should decode a message from camelCase fields."""
        message = Message.model_validate(MESSAGE)
        assert message.message_id == "msg-1"
        assert message.topic_name == "orders"
        assert message.header == {"Content-Type": ["application/json"]}
        assert message.max_retries == 3
        assert message.created_at == 1699999999000
        assert message.callback is None

    def test_requires_id_and_creation_time(self):
        """Should reject a message without messageId or createdAt."""
        with pytest.raises(ValidationError):
            Message.model_validate({"url": "https://example.com"})


class TestEvent:
    """Tests for Event model."""

    def test_known_state(self):
        """Should keep known delivery states."""
        event = Event.model_validate({"time": 1, "state": "DELIVERED", "messageId": "m"})
        assert event.state == "DELIVERED"

    def test_unknown_state_is_error(self):
        """Should map states the SDK does not know to ERROR."""
        event = Event.model_validate({"time": 1, "state": "PAUSED", "messageId": "m"})
        assert event.state == "ERROR"

    def test_optional_fields(self):
        """Should decode optional delivery details."""
        event = Event.model_validate(
            {
                "time": 1,
                "state": "RETRY",
                "messageId": "m",
                "nextDeliveryTime": 2,
                "error": "timeout",
                "endpointName": "ep",
            }
        )
        assert event.next_delivery_time == 2
        assert event.error == "timeout"
        assert event.endpoint_name == "ep"


class TestPages:
    """Tests for paginated responses."""

    def test_events_page(self):
        """Should decode events and the next cursor."""
        page = EventsPage.model_validate(
            {
                "cursor": "1700000000000",
                "events": [{"time": 1, "state": "CREATED", "messageId": "m"}],
            }
        )
        assert page.cursor == "1700000000000"
        assert page.events[0].message_id == "m"

    def test_numeric_cursor(self):
        """Should accept a numeric cursor."""
        page = EventsPage.model_validate({"cursor": 1700000000000, "events": []})
        assert page.cursor == "1700000000000"

    def test_last_page(self):
        """Should have no cursor on the last page."""
        page = EventsPage.model_validate({"events": []})
        assert page.cursor is None

    def test_dlq_page(self):
        """Should decode dead letter queue messages with their last response."""
        page = DlqPage.model_validate(
            {
                "messages": [
                    {**MESSAGE, "dlqId": "dlq-1", "responseStatus": 500, "responseBody": "boom"}
                ],
            }
        )
        assert page.messages[0].dlq_id == "dlq-1"
        assert page.messages[0].response_status == 500
        assert page.messages[0].message_id == "msg-1"
