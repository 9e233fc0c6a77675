"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from liftguard.config.settings import Settings, get_settings


def test_defaults(monkeypatch) -> None:
    """Test defaults when no LIFTGUARD_* variables are set."""
    for name in ("LIFTGUARD_LOG_LEVEL", "LIFTGUARD_LOG_FILE", "LIFTGUARD_TAXONOMY_PATH"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.taxonomy_path is None


def test_log_level_normalized(monkeypatch) -> None:
    """Test that the log level is upper-cased."""
    monkeypatch.setenv("LIFTGUARD_LOG_LEVEL", "debug")

    assert get_settings().log_level == "DEBUG"


def test_invalid_log_level_rejected(monkeypatch) -> None:
    """Test that unknown log levels fail validation."""
    monkeypatch.setenv("LIFTGUARD_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    """Test that settings are read once per process."""
    assert get_settings() is get_settings()
