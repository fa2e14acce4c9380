"""
log_bridge Core Package

Bridges a generic structured-logging front-end onto an underlying
logging engine.

Architecture:
- Front-end calls carry level, event id, state, exception, formatter
- Levels translate to engine severities through a fixed table
- Structured state supplies the message template and event properties
- Scopes enrich the engine handle and restore it on release
"""

__version__ = "0.1.0"

from .models import LogLevel, Severity, EventId, BridgeSettings
from .exceptions import LevelOutOfRangeError
from .domain.entities import LogEvent
from .domain.values import FormattedLogValues
from .infrastructure.adapters import BridgeLogger, BridgeLoggerProvider, Scope
from .infrastructure.engine import StdlibLog
from .infrastructure.factory import BridgeFactory
