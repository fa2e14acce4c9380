"""
Unit tests for the LogEvent entity.
"""

from datetime import datetime, timezone

import pytest

from log_bridge.domain.entities import LogEvent
from log_bridge.models import Severity


@pytest.fixture
def event():
    return LogEvent(Severity.INFO, datetime(2025, 1, 1, tzinfo=timezone.utc), "hello")


class TestLogEventEnrichment:
    """Tests for property enrichment."""

    def test_new_event_has_no_properties(self, event):
        assert dict(event.properties) == {}
        assert event.exception is None

    def test_with_property_if_absent_adds(self, event):
        enriched = event.with_property_if_absent("a", 1)

        assert enriched.properties["a"] == 1
        assert not event.has_property("a")

    def test_with_property_if_absent_keeps_first(self, event):
        enriched = event.with_property_if_absent("a", 1).with_property_if_absent("a", 2)
        assert enriched.properties["a"] == 1

    def test_with_property_if_absent_returns_same_event_when_present(self, event):
        enriched = event.with_property_if_absent("a", 1)
        assert enriched.with_property_if_absent("a", 2) is enriched

    def test_with_property_overwrites(self, event):
        enriched = event.with_property("a", 1).with_property("a", 2)
        assert enriched.properties["a"] == 2

    def test_enrichment_keeps_other_fields(self, event):
        enriched = event.with_property("a", 1)

        assert enriched.level is Severity.INFO
        assert enriched.timestamp == event.timestamp
        assert enriched.message_template == "hello"

    def test_properties_are_read_only(self, event):
        with pytest.raises(TypeError):
            event.with_property("a", 1).properties["b"] = 2

    def test_event_is_frozen(self, event):
        with pytest.raises(AttributeError):
            event.message_template = "changed"
