"""
Shared test fixtures and fakes for bridge tests
"""

import pytest

from log_bridge.domain.services import extract_object_properties


class RecordingLog:
    """
    In-memory ILog that records emitted events.

    Derived handles share the parent's event list so tests can inspect
    everything written through one root.
    """

    def __init__(self, enabled=True, properties=None, context=None, events=None):
        self.enabled = enabled
        self.properties = dict(properties or {})
        self.context = context
        self.events = events if events is not None else []
        self.enabled_checks = []
        self.derived_contexts = []

    def is_enabled_for(self, level):
        self.enabled_checks.append(level)
        if isinstance(self.enabled, bool):
            return self.enabled
        return level in self.enabled

    def log(self, event):
        self.events.append((self, event))

    def for_context(self, name):
        child = RecordingLog(self.enabled, self.properties, name, self.events)
        self.derived_contexts.append(child)
        return child

    def with_object_properties(self, state):
        merged = dict(self.properties)
        merged.update(extract_object_properties(state))
        return RecordingLog(self.enabled, merged, self.context, self.events)


@pytest.fixture
def recording_log():
    return RecordingLog()


@pytest.fixture
def make_recording_log():
    return RecordingLog
