"""
Infrastructure: Bridge Logger Provider

Creates per-category BridgeLoggers over one root engine handle.
"""

from typing import Optional

from log_bridge.domain.interfaces import ILog
from .bridge_logger import BridgeLogger


class BridgeLoggerProvider:
    """
    Front-end logger provider writing into a root engine log.

    Caching loggers per category is left to the caller. Disposing the
    provider does not touch the root log, whose lifecycle is owned
    elsewhere.
    """

    def __init__(self, log: ILog, scope_mode: str = "context"):
        """
        Args:
            log: Root engine handle
            scope_mode: Scope mode handed to every created logger
        """
        self._log = log
        self._scope_mode = scope_mode

    @property
    def root_log(self) -> ILog:
        return self._log

    def create_logger(self, category_name: Optional[str] = None) -> BridgeLogger:
        """
        Create a logger for `category_name`.

        An empty or missing category writes straight into the root log;
        any other category writes into root.for_context(category_name).
        """
        log = self._log if not category_name else self._log.for_context(category_name)
        return BridgeLogger(log, scope_mode=self._scope_mode)

    def dispose(self) -> None:
        pass

    def __enter__(self) -> "BridgeLoggerProvider":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()
