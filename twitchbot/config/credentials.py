"""Credential sources.

The bot reads its OAuth credentials exactly once, before the first connect
attempt. Any failure here is fatal for the session.
"""

from __future__ import annotations

import json
import os
from typing import Any, Protocol

from pydantic import ValidationError

from ..errors.internal import CredentialsError
from .model import Credentials


class CredentialSource(Protocol):
    """Anything able to produce the bot's credentials."""

    def load(self) -> Credentials:
        """Return credentials or raise ``CredentialsError``."""
        ...

    def describe(self) -> str:
        """Short label used in log lines."""
        ...


class JsonCredentialSource:
    """Reads ``{"password": ..., "client_id": ...}`` from a JSON file.

    An empty document yields empty credentials; the server will reject the
    login later, which surfaces as a dropped connection.
    """

    def __init__(self, path: str | os.PathLike[str]):
        if not isinstance(path, str | os.PathLike):
            raise TypeError("path must be str or os.PathLike")
        self.path = str(path)

    def describe(self) -> str:
        return self.path

    def load(self) -> Credentials:
        try:
            with open(self.path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise CredentialsError(
                f"Cannot read credentials file {self.path}: {e}",
                data={"path": self.path},
            ) from e
        except UnicodeDecodeError as e:
            raise CredentialsError(
                f"Credentials file {self.path} is not valid UTF-8",
                data={"path": self.path},
            ) from e

        if not text.strip():
            return Credentials()

        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as e:
            raise CredentialsError(
                f"Malformed credentials file {self.path}: {e}",
                data={"path": self.path},
            ) from e

        if not isinstance(data, dict):
            raise CredentialsError(
                f"Credentials file {self.path} must contain a JSON object",
                data={"path": self.path},
            )
        try:
            return Credentials.model_validate(data)
        except ValidationError as e:
            raise CredentialsError(
                f"Invalid credentials in {self.path}: {e.error_count()} error(s)",
                data={"path": self.path},
            ) from e


class StaticCredentialSource:
    """Credentials supplied directly, e.g. from the environment."""

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def describe(self) -> str:
        return "static"

    def load(self) -> Credentials:
        return self.credentials
