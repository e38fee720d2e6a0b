"""Tests for logging configuration helpers."""

import logging

import structlog
from checkout.utils.logging import add_context, clear_context, configure_logging, get_log_level


class TestLogLevel:
    def test_explicit_log_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        monkeypatch.setenv("ENVIRONMENT", "development")
        assert get_log_level() == "ERROR"

    def test_test_environment_is_quiet(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "test")
        assert get_log_level() == "WARNING"

    def test_production(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "production")
        assert get_log_level() == "INFO"

    def test_unknown_environment_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "qa")
        assert get_log_level() == "INFO"


class TestConfigureLogging:
    def teardown_method(self):
        clear_context()
        structlog.reset_defaults()
        logging.getLogger().handlers = []

    def test_sets_root_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING
        assert structlog.is_configured()

    def test_context_binding(self):
        add_context(order_id="ord-1")
        assert structlog.contextvars.get_contextvars() == {"order_id": "ord-1"}
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
