"""
Domain Interfaces

Protocols for both sides of the bridge: the engine capabilities it
consumes and the front-end API it exposes.
"""

from .log import ILog
from .frontend import ILogger, ILoggerProvider, Formatter

__all__ = ["ILog", "ILogger", "ILoggerProvider", "Formatter"]
