from __future__ import annotations

import logging
from typing import Any

from ..utils.helpers import time_stamp
from .internal import (
    ConfigError,
    CredentialsError,
    InternalError,
    MessageValidationError,
    NetworkError,
)


def categorize_error(error: BaseException) -> str:
    """Return the category label used in structured error lines."""
    if isinstance(error, NetworkError | OSError | ConnectionError):
        return "network"
    if isinstance(error, CredentialsError):
        return "auth"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, MessageValidationError):
        return "validation"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_structured_error(
    error_type: str,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> str:
    """Log an error with structured context.

    Args:
        error_type: Category of the error (e.g., 'network', 'auth', 'config')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)

    Returns:
        The line that was logged, including its timestamp.
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception is not None:
        structured_message += f" | Exception: {type(exception).__name__}: {exception}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    line = f"[{time_stamp()}] {structured_message}"
    logging.getLogger("twitchbot.errors").log(level, line)
    return line


def log_error(
    message: str, error: BaseException, context: dict[str, Any] | None = None
) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging. Data attached
            to an ``InternalError`` is merged in.
    """
    merged: dict[str, Any] = {}
    if isinstance(error, InternalError):
        merged.update(error.data)
    if context:
        merged.update(context)
    log_structured_error(
        error_type=categorize_error(error),
        message=f"{message}: {error}",
        exception=error,
        context=merged or None,
    )
