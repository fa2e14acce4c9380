from .bridge_logger import BridgeLogger, Scope, SCOPE_MODES
from .bridge_provider import BridgeLoggerProvider

__all__ = ["BridgeLogger", "Scope", "SCOPE_MODES", "BridgeLoggerProvider"]
