"""
Infrastructure: Stdlib Log

Engine implementation that records LogEvents through Python's logging
module.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from log_bridge.domain.entities import LogEvent
from log_bridge.domain.services import extract_object_properties, render_template
from log_bridge.models import Severity


SEVERITY_TO_STDLIB: Dict[Severity, int] = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
}

SOURCE_CONTEXT_KEY = "sourceContext"


class StdlibLog:
    """
    ILog backed by a stdlib logger.

    A handle pairs a logging.Logger with context properties and a source
    context path. Deriving handles never changes the original.

    Attributes:
        logger: Target stdlib logger
        properties: Properties attached to every event from this handle
        source_context: Names of the sub-contexts this handle was derived through
    """

    def __init__(
        self,
        logger: logging.Logger,
        properties: Optional[Mapping[str, Any]] = None,
        source_context: Tuple[str, ...] = (),
    ):
        self.logger = logger
        self.properties = MappingProxyType(dict(properties or {}))
        self.source_context = tuple(source_context)

    def is_enabled_for(self, level: Severity) -> bool:
        return self.logger.isEnabledFor(SEVERITY_TO_STDLIB[level])

    def for_context(self, name: str) -> "StdlibLog":
        """
        Derive a handle writing to the child logger `name`.

        Deriving the same name twice in a row does not repeat it in the
        source context.
        """
        if self.source_context and self.source_context[-1] == name:
            return StdlibLog(self.logger, self.properties, self.source_context)
        return StdlibLog(self.logger.getChild(name), self.properties, self.source_context + (name,))

    def with_object_properties(self, state: Any) -> "StdlibLog":
        extracted = extract_object_properties(state)
        if not extracted:
            return self
        merged = dict(self.properties)
        merged.update(extracted)
        return StdlibLog(self.logger, merged, self.source_context)

    def log(self, event: LogEvent) -> None:
        """
        Emit `event` as one stdlib log record.

        Event properties win over context properties; the source context
        is attached last.
        """
        properties: Dict[str, Any] = dict(self.properties)
        properties.update(event.properties)
        if self.source_context:
            properties[SOURCE_CONTEXT_KEY] = ".".join(self.source_context)

        exc_info = None
        if event.exception is not None:
            exc_info = (type(event.exception), event.exception, event.exception.__traceback__)

        self.logger.log(
            SEVERITY_TO_STDLIB[event.level],
            render_template(event.message_template, properties),
            exc_info=exc_info,
            extra={
                "properties": properties,
                "message_template": event.message_template,
                "event_timestamp": event.timestamp,
            },
        )

    def __repr__(self) -> str:
        return f"StdlibLog({self.logger.name!r}, properties={dict(self.properties)!r})"
