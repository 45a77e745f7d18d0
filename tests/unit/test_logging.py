"""Tests for structured logging configuration."""

import json
import logging
from io import StringIO
from unittest.mock import patch

import structlog

from slidepages.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        """Reset structlog and logging configuration before each test."""
        structlog.reset_defaults()
        clear_contextvars()

    def test_configure_development_mode(self) -> None:
        """Should configure console output in development mode."""
        configure_logging(development=True)
        logger = get_logger("test")
        logger.info("navigator_initialized", slide_x=True)

    def test_configure_production_mode(self) -> None:
        """Should configure JSON output in production mode."""
        configure_logging(development=False)
        logger = get_logger("test")
        logger.info("navigator_initialized", slide_x=True)

    def test_reads_environment_variable(self) -> None:
        """Should read ENVIRONMENT env var to determine mode."""
        with patch.dict("os.environ", {"ENVIRONMENT": "production"}):
            configure_logging()
            get_logger("test").info("test")

    def test_reads_log_level_environment_variable(self) -> None:
        """Should read LOG_LEVEL env var."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True)
            assert logging.getLogger().level == logging.DEBUG

    def test_explicit_log_level(self) -> None:
        """Should honour an explicit log level over the environment."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True, log_level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        """Should default to INFO for an unknown level name."""
        configure_logging(development=True, log_level="CHATTY")
        assert logging.getLogger().level == logging.INFO


class TestGetLogger:
    """Tests for get_logger function."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        configure_logging(development=True)

    def test_returns_bound_logger(self) -> None:
        logger = get_logger("slidepages.core.navigator")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "info")
        assert hasattr(logger, "warning")

    def test_logger_without_name(self) -> None:
        get_logger().info("test message")


class TestContextVars:
    """Tests for context variable functions."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        clear_contextvars()
        configure_logging(development=True)

    def teardown_method(self) -> None:
        clear_contextvars()

    def test_bind_contextvars_adds_to_context(self) -> None:
        bind_contextvars(slide_id="hero-banner")
        assert structlog.contextvars.get_contextvars() == {"slide_id": "hero-banner"}

    def test_clear_contextvars_removes_all(self) -> None:
        bind_contextvars(slide_id="hero-banner", page_x=1)
        clear_contextvars()
        assert structlog.contextvars.get_contextvars() == {}

    def test_unbind_contextvars_removes_specific(self) -> None:
        bind_contextvars(keep="this", remove="that")
        unbind_contextvars("remove")
        assert structlog.contextvars.get_contextvars() == {"keep": "this"}


class TestProductionJsonOutput:
    """Tests for JSON output in production mode."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        clear_contextvars()

    def test_json_output_is_valid(self) -> None:
        """Should produce one JSON object per event in production mode."""
        output = StringIO()
        handler = logging.StreamHandler(output)
        handler.setLevel(logging.INFO)

        configure_logging(development=False, log_level="INFO")
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)

        try:
            logger = get_logger("test")
            logger.info("page_landed", page_x=2, exposed_page_x=1)

            handler.flush()
            lines = [line for line in output.getvalue().splitlines() if line]
            assert lines
            parsed = json.loads(lines[-1])
            assert parsed["event"] == "page_landed"
            assert parsed["page_x"] == 2
            assert parsed["exposed_page_x"] == 1
        finally:
            root_logger.removeHandler(handler)
