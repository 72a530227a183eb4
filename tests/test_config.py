"""Tests for configuration module."""

import json

from schema_bridge.config import Config


def test_config_from_env(monkeypatch):
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("SCHEMA_BRIDGE_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("SCHEMA_BRIDGE_LOGGING__FORMAT", "console")
    monkeypatch.setenv("SCHEMA_BRIDGE_CONVERSION__EXPLICIT_DEFAULT_PRESENCE", "true")
    monkeypatch.setenv("SCHEMA_BRIDGE_CONVERSION__PATTERN_STYLE", "literal")

    # With pydantic-settings, Config() directly loads from env vars
    config = Config()

    assert config.logging.level == "DEBUG"
    assert config.logging.format == "console"
    assert config.conversion.explicit_default_presence is True
    assert config.conversion.pattern_style == "literal"

def test_config_defaults():
    """Test default configuration values."""
    config = Config()

    assert config.logging.level == "INFO"
    assert config.logging.format == "json"
    assert config.conversion.explicit_default_presence is False
    assert config.conversion.pattern_style == "source"


def test_config_from_file(tmp_path):
    """Test loading configuration from a JSON file."""
    config_content = {
        "logging": {
            "level": "WARNING",
            "format": "console"
        },
        "conversion": {
            "explicit_default_presence": True,
        }
    }
    config_file = tmp_path / "test_config.json"
    with open(config_file, "w") as f:
        json.dump(config_content, f)

    config = Config.from_file(config_file)

    assert config.logging.level == "WARNING"
    assert config.logging.format == "console"
    assert config.conversion.explicit_default_presence is True
    # Unspecified fields retain defaults
    assert config.conversion.pattern_style == "source"


def test_partial_config_from_file(tmp_path):
    """Test loading partial configuration from a file, defaults should apply."""
    config_file = tmp_path / "test_config.json"
    with open(config_file, "w") as f:
        json.dump({"conversion": {"pattern_style": "literal"}}, f)

    config = Config.from_file(config_file)

    assert config.conversion.pattern_style == "literal"
    assert config.conversion.explicit_default_presence is False # Default
    assert config.logging.level == "INFO" # Default
