"""
Bridge Exceptions

The only checked failure of the bridge: a front-end level outside the
known enumeration reaching the translation table.
"""

from typing import Any


class LevelOutOfRangeError(ValueError):
    """Raised when a log level has no engine severity counterpart."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"log level out of range: {value!r}")
