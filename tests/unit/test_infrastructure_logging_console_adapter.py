"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Context binding
- Renderer and level configuration

Architecture:
- Unit tests with mocked structlog
- NO real logging dependencies
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, level):
        """Test plain levels forward message and context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("Session stored", session_id="abc***", ttl=300)

            getattr(mock_logger, level).assert_called_once_with(
                "Session stored",
                session_id="abc***",
                ttl=300,
            )

    @pytest.mark.parametrize("level", ["error", "critical"])
    def test_logs_exception_details(self, level):
        """Test error/critical expand an exception into context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)(
                "Cache write failed", error=ValueError("boom"), key="abc"
            )

            getattr(mock_logger, level).assert_called_once_with(
                "Cache write failed",
                key="abc",
                error_type="ValueError",
                error_message="boom",
            )

    def test_error_without_exception(self):
        """Test error() without an exception adds no error fields."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().error("Failed", error_code="cache_unavailable")

            mock_logger.error.assert_called_once_with(
                "Failed", error_code="cache_unavailable"
            )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        """Test bind() wraps the bound structlog logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(component="session_cache")
            bound.info("hello")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(component="session_cache")
            mock_logger.bind.return_value.info.assert_called_once_with("hello")

    def test_with_context_is_bind_alias(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(request_id="r1")

            mock_logger.bind.assert_called_once_with(request_id="r1")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()

    def test_level_filters_records(self):
        """Test the level name selects the filtering bound logger."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="warning")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.WARNING
            )
