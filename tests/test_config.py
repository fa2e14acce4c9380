"""
Unit tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from log_bridge.config import clear_config_cache, get_bridge_config, load_settings
from log_bridge.models import BridgeSettings, Severity


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LOG_BRIDGE_ROOT_LOGGER", "LOG_BRIDGE_MIN_LEVEL",
                 "LOG_BRIDGE_SCOPE_MODE", "LOG_BRIDGE_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


def test_packaged_config_loads():
    config = get_bridge_config()
    assert config["bridge"]["scope_mode"] == "context"
    assert get_bridge_config() is config


def test_default_settings():
    settings = load_settings()

    assert settings.root_logger_name == "log_bridge"
    assert settings.min_level is Severity.DEBUG
    assert settings.scope_mode == "context"
    assert settings.json_output is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_BRIDGE_ROOT_LOGGER", "svc")
    monkeypatch.setenv("LOG_BRIDGE_MIN_LEVEL", "warn")
    monkeypatch.setenv("LOG_BRIDGE_SCOPE_MODE", "shared")
    monkeypatch.setenv("LOG_BRIDGE_JSON_OUTPUT", "false")

    settings = load_settings()

    assert settings.root_logger_name == "svc"
    assert settings.min_level is Severity.WARN
    assert settings.scope_mode == "shared"
    assert settings.json_output is False


def test_alternate_file(tmp_path):
    path = tmp_path / "bridge.yaml"
    path.write_text("bridge:\n  min_level: ERROR\n  json_output: false\n")

    settings = load_settings(path)

    assert settings.min_level is Severity.ERROR
    assert settings.json_output is False
    assert settings.scope_mode == "context"


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_settings(path) == BridgeSettings()


def test_invalid_scope_mode(monkeypatch):
    monkeypatch.setenv("LOG_BRIDGE_SCOPE_MODE", "global")
    with pytest.raises(ValidationError):
        load_settings()


def test_invalid_min_level(monkeypatch):
    monkeypatch.setenv("LOG_BRIDGE_MIN_LEVEL", "LOUD")
    with pytest.raises(ValidationError, match="unknown severity name"):
        load_settings()
