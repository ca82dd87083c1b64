"""IRC subsystem package.

Contains the line transport, parser, command dispatcher, connection retry
and the session controller for the Twitch chat bot.
"""

from .connection import IRCConnectionController  # noqa: F401
from .dispatcher import SHUTDOWN_COMMAND, CommandDispatcher  # noqa: F401
from .models import (  # noqa: F401
    ChatEvent,
    CommandInvocation,
    ConnectionState,
    DispatchOutcome,
)
from .parser import (  # noqa: F401
    CMD_REGEX,
    KEEPALIVE_PROBE,
    KEEPALIVE_RESPONSE,
    MSG_REGEX,
    is_keepalive,
    parse_chat_event,
    parse_command,
)
from .protocols import ChatBot, Transport, TransportFactory  # noqa: F401
from .session import TwitchBot  # noqa: F401
from .transport import LineTransport, open_line_transport  # noqa: F401

__all__ = [
    "ChatBot",
    "ChatEvent",
    "CMD_REGEX",
    "CommandDispatcher",
    "CommandInvocation",
    "ConnectionState",
    "DispatchOutcome",
    "IRCConnectionController",
    "KEEPALIVE_PROBE",
    "KEEPALIVE_RESPONSE",
    "LineTransport",
    "MSG_REGEX",
    "SHUTDOWN_COMMAND",
    "Transport",
    "TransportFactory",
    "TwitchBot",
    "is_keepalive",
    "open_line_transport",
    "parse_chat_event",
    "parse_command",
]
