"""
Infrastructure: Bridge Factory

Dependency injection factory for assembling the bridge.
Single source of truth for component wiring.
"""

from typing import IO, Optional

from log_bridge.config import load_settings
from log_bridge.infrastructure.adapters import BridgeLoggerProvider
from log_bridge.infrastructure.engine import SEVERITY_TO_STDLIB, StdlibLog
from log_bridge.logging_utils import get_logger
from log_bridge.models import BridgeSettings, Severity


class BridgeFactory:
    """
    Factory for creating BridgeLoggerProviders.

    Implements dependency injection pattern.
    """

    @staticmethod
    def create_provider(
        root_logger_name: str = "log_bridge",
        min_level: Severity = Severity.DEBUG,
        scope_mode: str = "context",
        json_output: bool = True,
        stream: Optional[IO] = None,
    ) -> BridgeLoggerProvider:
        """
        Create a provider writing through the stdlib logging engine.

        Args:
            root_logger_name: Name of the backing stdlib logger
            min_level: Lowest severity recorded
            scope_mode: "context" or "shared"
            json_output: JSON documents when True, text lines otherwise
            stream: Output stream (default: stderr)

        Returns:
            Configured BridgeLoggerProvider
        """
        logger = get_logger(
            root_logger_name,
            level=SEVERITY_TO_STDLIB[Severity(min_level)],
            stream=stream,
            json_output=json_output,
        )
        return BridgeLoggerProvider(StdlibLog(logger), scope_mode=scope_mode)

    @staticmethod
    def create_from_settings(settings: BridgeSettings, stream: Optional[IO] = None) -> BridgeLoggerProvider:
        return BridgeFactory.create_provider(
            root_logger_name=settings.root_logger_name,
            min_level=settings.min_level,
            scope_mode=settings.scope_mode,
            json_output=settings.json_output,
            stream=stream,
        )

    @staticmethod
    def create_from_env() -> BridgeLoggerProvider:
        """
        Create provider from the packaged config and environment variables.

        Convenience method for production deployment.
        """
        return BridgeFactory.create_from_settings(load_settings())
