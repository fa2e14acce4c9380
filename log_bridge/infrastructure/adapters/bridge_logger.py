"""
Infrastructure: Bridge Logger

Adapter that implements the front-end ILogger on top of an engine ILog.
"""

from contextvars import ContextVar, Token
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Optional

from log_bridge.domain.entities import LogEvent
from log_bridge.domain.interfaces import Formatter, ILog
from log_bridge.domain.services import (
    extract_template_and_properties,
    is_none_level,
    translate_level,
)
from log_bridge.domain.values import FormattedLogValues
from log_bridge.models import EventId, LogLevel


SCOPE_MODES = ("context", "shared")

# Scoped handles of every context-mode logger, keyed by the logger's slot.
# Loggers outside any scope have no entry and fall back to their initial handle.
_scoped_logs: ContextVar = ContextVar("log_bridge.scoped_logs")


class _SharedSlot:
    """One handle shared by every caller of the logger."""

    def __init__(self, log: ILog):
        self._log = log

    def get(self) -> ILog:
        return self._log

    def set(self, log: ILog) -> None:
        self._log = log

    def restore(self, log: ILog, token: Any) -> None:
        self._log = log


class _ContextSlot:
    """Handle tracked per execution context (thread or asyncio task)."""

    def __init__(self, log: ILog):
        self._initial = log

    def get(self) -> ILog:
        scoped = _scoped_logs.get(None)
        if scoped and self in scoped:
            return scoped[self]
        return self._initial

    def _entries_with(self, log: ILog) -> Dict["_ContextSlot", ILog]:
        entries = dict(_scoped_logs.get(None) or {})
        if log is self._initial:
            entries.pop(self, None)
        else:
            entries[self] = log
        return entries

    def set(self, log: ILog) -> Token:
        return _scoped_logs.set(MappingProxyType(self._entries_with(log)))

    def restore(self, log: ILog, token: Token) -> None:
        """
        Put `log` back as this slot's handle.

        When that leaves no scoped entries and the context had none before
        the scope opened, the variable is reset so the context does not keep it.
        """
        entries = self._entries_with(log)
        if not entries and token.old_value is Token.MISSING:
            try:
                _scoped_logs.reset(token)
                return
            except (ValueError, RuntimeError):
                # released from another context, or token already used
                pass
        _scoped_logs.set(MappingProxyType(entries))


class BridgeLogger:
    """
    Front-end logger for one category.

    Holds the engine handle currently in effect. Scopes swap that handle
    for an enriched one and restore it on release.

    In "shared" scope mode the handle is a single slot on the logger, so
    scopes opened from different threads on the same logger interfere
    with each other. "context" mode keeps one slot per thread / asyncio
    task; a fresh thread starts from the initial handle.

    Example:
        >>> logger = provider.create_logger("app.db")
        >>> with logger.begin_scope({"RequestId": "r-1"}):
        ...     logger.info("Query took {Elapsed} ms", 12)
    """

    def __init__(self, log: ILog, scope_mode: str = "context"):
        """
        Initialize adapter.

        Args:
            log: Initial engine handle
            scope_mode: "context" or "shared"

        Raises:
            ValueError: unknown scope mode
        """
        if scope_mode not in SCOPE_MODES:
            raise ValueError(f"scope_mode must be one of {SCOPE_MODES}, got {scope_mode!r}")
        self.scope_mode = scope_mode
        self._slot = _ContextSlot(log) if scope_mode == "context" else _SharedSlot(log)

    @property
    def current_log(self) -> ILog:
        """Engine handle in effect for the caller."""
        return self._slot.get()

    def log(
        self,
        level: LogLevel,
        event_id: Optional[EventId],
        state: Any,
        exception: Optional[BaseException] = None,
        formatter: Optional[Formatter] = None,
        state_type: type = object,
    ) -> None:
        """
        Translate one front-end call and emit it to the engine.

        Nothing is built when the level is NONE or the engine has the
        translated severity disabled.

        Args:
            level: Front-end level
            event_id: Accepted for API compatibility; not emitted
            state: Arbitrary state; key/value pairs become properties
            exception: Attached exception, if any
            formatter: Optional callable(state, exception) -> str
            state_type: Declared state type, named when state is None

        Raises:
            LevelOutOfRangeError: level is not a known LogLevel
        """
        if is_none_level(level):
            return

        severity = translate_level(level)
        log = self.current_log
        if not log.is_enabled_for(severity):
            return

        template, properties = extract_template_and_properties(state, exception, formatter, state_type)
        event = LogEvent(severity, datetime.now(timezone.utc), template, exception)
        for key, value in properties:
            event = event.with_property_if_absent(key, value)

        log.log(event)

    def is_enabled(self, level: LogLevel) -> bool:
        if is_none_level(level):
            return False
        return self.current_log.is_enabled_for(translate_level(level))

    def begin_scope(self, state: Any) -> "Scope":
        """
        Attach properties from `state` to every event until the scope is released.

        Returns:
            Scope, usable as a context manager
        """
        return Scope(self, state)

    # Convenience front-end methods

    def _log_template(self, level, template, args, exception, event_id):
        self.log(level, event_id, FormattedLogValues(template, *args), exception)

    def trace(self, template: str, *args: Any, exception: Optional[BaseException] = None,
              event_id: Optional[EventId] = None) -> None:
        self._log_template(LogLevel.TRACE, template, args, exception, event_id)

    def debug(self, template: str, *args: Any, exception: Optional[BaseException] = None,
              event_id: Optional[EventId] = None) -> None:
        self._log_template(LogLevel.DEBUG, template, args, exception, event_id)

    def info(self, template: str, *args: Any, exception: Optional[BaseException] = None,
             event_id: Optional[EventId] = None) -> None:
        self._log_template(LogLevel.INFORMATION, template, args, exception, event_id)

    def warning(self, template: str, *args: Any, exception: Optional[BaseException] = None,
                event_id: Optional[EventId] = None) -> None:
        self._log_template(LogLevel.WARNING, template, args, exception, event_id)

    def error(self, template: str, *args: Any, exception: Optional[BaseException] = None,
              event_id: Optional[EventId] = None) -> None:
        self._log_template(LogLevel.ERROR, template, args, exception, event_id)

    def critical(self, template: str, *args: Any, exception: Optional[BaseException] = None,
                 event_id: Optional[EventId] = None) -> None:
        self._log_template(LogLevel.CRITICAL, template, args, exception, event_id)


class Scope:
    """
    Releasable scope opened by BridgeLogger.begin_scope.

    Release restores the handle that was current when the scope opened.
    Releasing twice has no further effect. Scopes must be released in
    reverse order of creation.
    """

    def __init__(self, owner: BridgeLogger, state: Any):
        self._owner = owner
        self._prev_log = owner.current_log
        self._disposed = False
        self._token = owner._slot.set(self._prev_log.with_object_properties(state))

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._owner._slot.restore(self._prev_log, self._token)
        self._disposed = True

    close = dispose

    def __enter__(self) -> "Scope":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()
