"""Unit tests for structlog configuration."""

import os
from unittest.mock import patch

import structlog

from walletbalance.config.logging import configure_logging, get_logger
from walletbalance.config.settings import get_settings


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_structlog(self) -> None:
        """structlog is marked configured after the call."""
        configure_logging()

        assert structlog.is_configured()

    def test_json_renderer_by_default(self) -> None:
        """Production mode renders JSON."""
        with patch.dict(os.environ, {"DEBUG": "false"}):
            get_settings.cache_clear()
            configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_in_debug(self) -> None:
        """Debug mode pretty-prints."""
        with patch.dict(os.environ, {"DEBUG": "true"}):
            get_settings.cache_clear()
            configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_get_logger_returns_logger(self) -> None:
        """get_logger returns a structlog logger proxy."""
        logger = get_logger("walletbalance.test")

        assert hasattr(logger, "info")
