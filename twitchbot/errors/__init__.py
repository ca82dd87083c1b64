"""Error hierarchy and error logging helpers."""

from .handling import categorize_error, log_error, log_structured_error  # noqa: F401
from .internal import (  # noqa: F401
    ConfigError,
    ConnectionClosedError,
    ConnectionLostError,
    CredentialsError,
    InternalError,
    MessageValidationError,
    NetworkError,
    NotConnectedError,
)

__all__ = [
    "InternalError",
    "NetworkError",
    "ConnectionClosedError",
    "ConnectionLostError",
    "NotConnectedError",
    "CredentialsError",
    "ConfigError",
    "MessageValidationError",
    "categorize_error",
    "log_error",
    "log_structured_error",
]
