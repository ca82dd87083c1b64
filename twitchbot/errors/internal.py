"""Centralized internal error hierarchy.

These exceptions provide semantic categories for the session's retry and
shutdown logic. Raw socket / JSON / validation errors are wrapped into these
at the transport and configuration boundaries.

Classes:
  InternalError           – Base for all internal errors.
  NetworkError            – Transport level failures (connect, read, write).
  ConnectionClosedError   – The server closed the stream (end-of-stream).
  ConnectionLostError     – The watch loop lost its connection; restart cycle.
  NotConnectedError       – An operation needed a live connection.
  CredentialsError        – Credential source missing, unreadable or malformed.
  ConfigError             – Bot configuration missing or invalid.
  MessageValidationError  – Outbound chat message rejected before sending.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors."""


class ConnectionClosedError(NetworkError):
    """Exception raised when the remote end closed the stream."""


class ConnectionLostError(NetworkError):
    """Exception raised when the watch loop ends because the connection dropped.

    The session controller reacts by restarting the connect/join/watch cycle.
    """


class NotConnectedError(NetworkError):
    """Exception raised when an operation requires a live connection."""


class CredentialsError(InternalError):
    """Exception raised when credentials cannot be read or parsed.

    Fatal for the session: it is never retried.
    """


class ConfigError(InternalError):
    """Exception raised for missing or invalid bot configuration."""


class MessageValidationError(InternalError):
    """Exception raised when an outbound chat message is empty or too large."""


__all__ = [
    "InternalError",
    "NetworkError",
    "ConnectionClosedError",
    "ConnectionLostError",
    "NotConnectedError",
    "CredentialsError",
    "ConfigError",
    "MessageValidationError",
]
