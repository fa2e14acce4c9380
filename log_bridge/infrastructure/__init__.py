"""
Infrastructure Layer

Front-end adapters, the stdlib engine, and component wiring.
"""

from .factory import BridgeFactory

__all__ = ["BridgeFactory"]
