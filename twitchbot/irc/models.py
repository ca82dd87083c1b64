"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTING = auto()
    CONNECTED = auto()
    JOINED = auto()
    WATCHING = auto()
    TERMINATED = auto()


class DispatchOutcome(Enum):
    IGNORED = auto()
    HANDLED = auto()
    SHUTDOWN = auto()


@dataclass(slots=True, frozen=True)
class ChatEvent:
    """A chat line decomposed into sender, message type and payload.

    ``payload`` is None for messageless events.
    """

    user: str
    msg_type: str
    payload: str | None
    raw: str = ""


@dataclass(slots=True, frozen=True)
class CommandInvocation:
    command: str
    argument: str | None = None
