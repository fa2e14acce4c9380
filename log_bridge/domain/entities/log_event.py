"""
Domain Entity: LogEvent

An immutable event in the engine's model, built once per emitted log call.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from log_bridge.models import Severity


@dataclass(frozen=True)
class LogEvent:
    """
    Translated log event.

    Enrichment methods return new events; an event is never mutated
    once built.
    """

    level: Severity
    timestamp: datetime
    message_template: Optional[str] = None
    exception: Optional[BaseException] = None
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def with_property(self, key: str, value: Any) -> "LogEvent":
        """Return a copy with `key` set to `value`, overwriting any existing value."""
        merged = dict(self.properties)
        merged[key] = value
        return replace(self, properties=merged)

    def with_property_if_absent(self, key: str, value: Any) -> "LogEvent":
        """
        Return a copy with `key` set to `value` unless the key is already present.

        Args:
            key: Property name
            value: Property value

        Returns:
            A new LogEvent, or this event when `key` already exists
        """
        if key in self.properties:
            return self
        return self.with_property(key, value)
