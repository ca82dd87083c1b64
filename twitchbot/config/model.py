from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    BOT_MSG_RATE_SECONDS,
    BOT_RECONNECT_DELAY_SECONDS,
    CREDENTIALS_FILE,
    IRC_CONNECT_BACKOFF_BASE_SECONDS,
    IRC_CONNECT_BACKOFF_MAX_SECONDS,
    IRC_CONNECT_MAX_ATTEMPTS,
    IRC_CONNECT_TIMEOUT_SECONDS,
    TWITCH_IRC_PORT,
    TWITCH_IRC_SERVER,
)

_CHANNEL_RE = re.compile(r"^\w+$", re.ASCII)


def normalize_channel(channel: str) -> str:
    """Strip whitespace and a leading '#', and lowercase the channel name."""
    return channel.strip().lstrip("#").lower()


class Credentials(BaseModel):
    """OAuth credentials for the bot account.

    Attributes:
        password: The bot account's OAuth password (``oauth:...``).
        client_id: The developer application client ID.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    password: str = ""
    client_id: str = ""

    @field_validator("password", "client_id", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def __repr__(self) -> str:  # never print the secret
        masked = "***" if self.password else "''"
        return f"Credentials(password={masked}, client_id={self.client_id!r})"

    __str__ = __repr__


class BotConfig(BaseModel):
    """Static configuration of a bot session.

    Attributes:
        channel: Channel to join. Normalized to lowercase without '#', which
            is also the login of the only user allowed to issue commands.
        name: Display name the bot registers with (NICK).
        server: IRC server host.
        port: IRC server port.
        msg_rate: Forced delay in seconds after each processed line.
        credentials_path: Path of the JSON credentials document.
        reconnect_delay: Seconds to wait before restarting after a drop.
        connect_timeout: Seconds allowed for a single connect attempt.
        connect_max_attempts: Connect attempts before giving up, 0 for never.
        connect_backoff_base: First retry delay in seconds.
        connect_backoff_max: Upper bound of the exponential retry delay.
    """

    channel: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1, max_length=25)
    server: str = TWITCH_IRC_SERVER
    port: int = Field(default=TWITCH_IRC_PORT, ge=1, le=65535)
    msg_rate: float = Field(default=BOT_MSG_RATE_SECONDS, ge=0)
    credentials_path: str = CREDENTIALS_FILE
    reconnect_delay: float = Field(default=BOT_RECONNECT_DELAY_SECONDS, ge=0)
    connect_timeout: float = Field(default=IRC_CONNECT_TIMEOUT_SECONDS, gt=0)
    connect_max_attempts: int = Field(default=IRC_CONNECT_MAX_ATTEMPTS, ge=0)
    connect_backoff_base: float = Field(default=IRC_CONNECT_BACKOFF_BASE_SECONDS, ge=0)
    connect_backoff_max: float = Field(default=IRC_CONNECT_BACKOFF_MAX_SECONDS, ge=0)

    @field_validator("channel", mode="before")
    @classmethod
    def validate_channel(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("channel must be a string")
        channel = normalize_channel(v)
        if not _CHANNEL_RE.match(channel):
            raise ValueError(f"invalid channel name: {v!r}")
        return channel

    @field_validator("name", "server", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BotConfig:
        """Create BotConfig from a dictionary, ignoring None values."""
        return cls.model_validate({k: v for k, v in data.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
