"""
log_bridge Configuration Module

Provides centralized configuration loading for the bridge.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml

from log_bridge.models import BridgeSettings


logger = logging.getLogger(__name__)

_config_cache: Optional[Dict[str, Any]] = None
CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "log_bridge_config.yaml"

ENV_OVERRIDES = {
    "LOG_BRIDGE_ROOT_LOGGER": "root_logger_name",
    "LOG_BRIDGE_MIN_LEVEL": "min_level",
    "LOG_BRIDGE_SCOPE_MODE": "scope_mode",
    "LOG_BRIDGE_JSON_OUTPUT": "json_output",
}


def get_bridge_config() -> Dict[str, Any]:
    """
    Load bridge configuration (cached).

    Returns:
        Dict containing all configuration settings.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    _config_cache = _read_yaml(DEFAULT_CONFIG_PATH)
    return _config_cache


def clear_config_cache() -> None:
    """Clear the config cache (useful for testing)."""
    global _config_cache
    _config_cache = None


def _read_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def load_settings(path: Optional[Union[str, Path]] = None) -> BridgeSettings:
    """
    Build validated settings from the YAML file and environment.

    Environment variables win over file values.

    Args:
        path: Alternate YAML file; defaults to the packaged config

    Returns:
        BridgeSettings

    Raises:
        pydantic.ValidationError: a value is not valid
    """
    config = _read_yaml(path) if path is not None else get_bridge_config()
    values = dict(config.get("bridge") or {})

    for env_name, field_name in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is not None and raw != "":
            values[field_name] = raw

    settings = BridgeSettings(**values)
    logger.debug("Loaded bridge settings: %s", settings.model_dump())
    return settings


__all__ = [
    "get_bridge_config",
    "clear_config_cache",
    "load_settings",
    "CONFIG_DIR",
    "DEFAULT_CONFIG_PATH",
]
