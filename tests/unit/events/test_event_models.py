"""Unit tests for event models."""

from datetime import datetime
from uuid import UUID

import pytest

from pagelocale.events import Event

pytestmark = pytest.mark.unit


class TestEvent:
    def test_defaults(self):
        event = Event("locale.changed")
        assert isinstance(event.timestamp, datetime)
        assert isinstance(event.correlation_id, UUID)
        assert event.metadata == {}

    def test_to_dict(self):
        event = Event(
            "locale.changed",
            timestamp=datetime(2024, 1, 1, 12, 0, 0),
            correlation_id=UUID("12345678-1234-5678-1234-567812345678"),
            metadata={"locale": "fa"},
        )
        assert event.to_dict() == {
            "event_type": "locale.changed",
            "timestamp": "2024-01-01T12:00:00",
            "correlation_id": "12345678-1234-5678-1234-567812345678",
            "metadata": {"locale": "fa"},
        }

    def test_hashable(self):
        event = Event("locale.changed")
        assert event in {event}
