"""Tests for settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from sqlmarshal.config import Settings, get_settings
from sqlmarshal.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults without environment overrides."""
        for name in ("SQLMARSHAL_DIALECT", "SQLMARSHAL_LOG_LEVEL", "SQLMARSHAL_LOG_JSON"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.dialect == "ansi"
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_environment(self, monkeypatch):
        """Test SQLMARSHAL_ prefixed variables are read."""
        monkeypatch.setenv("SQLMARSHAL_DIALECT", "sqlite")
        monkeypatch.setenv("SQLMARSHAL_LOG_JSON", "true")
        settings = get_settings()

        assert settings.dialect == "sqlite"
        assert settings.log_json is True

    def test_unknown_dialect(self, monkeypatch):
        """Test an unsupported dialect fails validation."""
        monkeypatch.setenv("SQLMARSHAL_DIALECT", "oracle")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for logging setup."""

    def test_configure_sets_root_level(self):
        """Test the root logger follows the configured level."""
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back(self):
        """Test an unknown level name means WARNING."""
        configure_logging("chatty")
        assert logging.getLogger().level == logging.WARNING

    def test_events_reach_stdlib(self, caplog):
        """Test events are written through the stdlib logger of the same name."""
        with caplog.at_level(logging.DEBUG, logger="sqlmarshal.test"):
            get_logger("sqlmarshal.test").debug("record_tokenized", table="X")

        assert any(
            r.name == "sqlmarshal.test" and "record_tokenized" in r.getMessage() for r in caplog.records
        )
