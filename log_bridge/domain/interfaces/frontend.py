"""
Interface: Front-end Logger

The generic structured-logging API calling code programs against.
"""

from typing import Any, Callable, ContextManager, Optional, Protocol

from log_bridge.models import EventId, LogLevel


Formatter = Callable[[Any, Optional[BaseException]], str]


class ILogger(Protocol):
    """Per-category front-end logger."""

    def log(
        self,
        level: LogLevel,
        event_id: Optional[EventId],
        state: Any,
        exception: Optional[BaseException] = None,
        formatter: Optional[Formatter] = None,
    ) -> None:
        """Log a structured call."""
        ...

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether calls at `level` would be recorded."""
        ...

    def begin_scope(self, state: Any) -> ContextManager:
        """Open a scope attaching `state` to every call until released."""
        ...


class ILoggerProvider(Protocol):
    """Creates front-end loggers by category."""

    def create_logger(self, category_name: Optional[str]) -> ILogger:
        ...

    def dispose(self) -> None:
        ...
