"""
Domain Entities

Pure value objects of the engine's event model.
"""

from .log_event import LogEvent

__all__ = ["LogEvent"]
