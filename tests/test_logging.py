"""Tests for structured logging configuration."""

import logging
from typing import Generator

import pytest
import structlog

from tasklist.config import Settings
from tasklist.logging import (
    Loggers,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    logging_enabled,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()
    clear_context()


class TestConfigureLogging:
    def test_defaults_use_console_renderer(self):
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_format(self, isolated_cwd):
        configure_logging(Settings(log_format="json"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_level_filters_below_threshold(self, isolated_cwd):
        configure_logging(Settings(log_level="error"))
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.ERROR)

    def test_debug_level(self, isolated_cwd):
        configure_logging(Settings(log_level="debug"))
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.DEBUG)


class TestLoggingEnabled:
    def test_disabled_until_configured(self):
        structlog.reset_defaults()
        assert not logging_enabled()

    def test_enabled_after_configure(self):
        configure_logging()
        assert logging_enabled()


class TestContext:
    def test_bind_and_clear(self):
        bind_context(app_name="tasklist", user="u1")
        assert structlog.contextvars.get_contextvars() == {
            "app_name": "tasklist",
            "user": "u1",
        }
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}


class TestLoggers:
    def test_named_loggers(self):
        assert Loggers.store() is not None
        assert Loggers.cli() is not None
        assert Loggers.config() is not None

    def test_get_logger_without_name(self):
        assert get_logger() is not None
