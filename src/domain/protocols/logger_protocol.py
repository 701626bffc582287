"""LoggerProtocol definition for structured logging.

Structured logging port used by session persistence and its factory. Any
object with these call signatures is accepted; the default implementation is
``src.infrastructure.logging.console_adapter.ConsoleAdapter`` (structlog).

Security:
    - NEVER log session payloads or full session identifiers
    - Log cache keys only in shortened form (see ``mask_session_id``)

Usage:
    from src.core.container import get_logger

    logger = get_logger().bind(component="session_cache")
    logger.info("Session persisted", session_id=mask_session_id(session_id))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message (ids issued, entries stored)."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message (configuration resolved)."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message (degraded reads, ignored settings)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
