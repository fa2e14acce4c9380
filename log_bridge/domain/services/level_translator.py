"""
Domain Service: Level Translator

Maps front-end log levels onto engine severities.
"""

from typing import Any, Dict

from log_bridge.exceptions import LevelOutOfRangeError
from log_bridge.models import LogLevel, Severity


LEVEL_TABLE: Dict[LogLevel, Severity] = {
    LogLevel.TRACE: Severity.DEBUG,
    LogLevel.DEBUG: Severity.DEBUG,
    LogLevel.INFORMATION: Severity.INFO,
    LogLevel.WARNING: Severity.WARN,
    LogLevel.ERROR: Severity.ERROR,
    LogLevel.CRITICAL: Severity.FATAL,
}


def is_none_level(level: Any) -> bool:
    """True when `level` means "no logging"."""
    return level == LogLevel.NONE


def translate_level(level: Any) -> Severity:
    """
    Translate a front-end level to an engine severity.

    NONE has no counterpart; callers short-circuit it before translating.

    Args:
        level: LogLevel member, or an int naming one

    Returns:
        Matching engine severity

    Raises:
        LevelOutOfRangeError: level is not in the table
    """
    if isinstance(level, bool):
        raise LevelOutOfRangeError(level)
    try:
        return LEVEL_TABLE[LogLevel(level)]
    except (ValueError, KeyError, TypeError):
        raise LevelOutOfRangeError(level) from None
