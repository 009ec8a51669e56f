"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the codebase while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(message + key-value context).

Log Levels:
    - DEBUG: Detailed diagnostic info (dispatch tracing)
    - INFO: Normal operational events (handler output)
    - WARNING: Degraded behavior (handler failures)
    - ERROR: Operation failed, system continues

Usage:
    from storefront.core.container import get_logger

    logger = get_logger()
    logger.info("customer_created", customer_id="123")

    scoped = logger.bind(handler="NotifyWhenAddressChangedHandler")
    scoped.info("customer_address_changed")  # handler auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
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

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
