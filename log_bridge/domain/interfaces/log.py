"""
Interface: Engine Log

Defines the capability set the bridge consumes from the underlying
logging engine.
"""

from typing import Any, Protocol

from log_bridge.models import Severity
from ..entities import LogEvent


class ILog(Protocol):
    """
    Handle onto the underlying logging engine.

    Handles are immutable: deriving a sub-context or enriching with
    properties returns a new handle and leaves this one untouched.
    """

    def is_enabled_for(self, level: Severity) -> bool:
        """
        Check whether events of the given severity would be recorded.

        Args:
            level: Engine severity

        Returns:
            True if an event at this severity is recorded
        """
        ...

    def log(self, event: LogEvent) -> None:
        """Emit one event."""
        ...

    def for_context(self, name: str) -> "ILog":
        """
        Derive a handle scoped to a named sub-context.

        Args:
            name: Context name, typically a category like "app.db"

        Returns:
            New handle writing under that context
        """
        ...

    def with_object_properties(self, state: Any) -> "ILog":
        """
        Derive a handle that attaches properties taken from `state`
        to every event it emits.
        """
        ...
