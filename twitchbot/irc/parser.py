"""Classification and decomposition of Twitch IRC lines.

Both patterns are compiled once at import and only ever read afterwards.
"""

from __future__ import annotations

import re

from .models import ChatEvent, CommandInvocation

KEEPALIVE_PROBE = "PING :tmi.twitch.tv"
KEEPALIVE_RESPONSE = "PONG :tmi.twitch.tv"
COMMAND_MARKER = "!"
PRIVMSG = "PRIVMSG"

# Groups: user name, message type, optional message payload.
MSG_REGEX = re.compile(
    r"^:(\w+)!\w+@\w+\.tmi\.twitch\.tv (\w+) #\w+(?: :(.*))?$", re.ASCII
)

# Groups: command token, optional argument token. Applied to payloads only.
CMD_REGEX = re.compile(
    r"^" + re.escape(COMMAND_MARKER) + r"(\w+)\s?(\w+)?", re.ASCII
)


def is_keepalive(line: str) -> bool:
    return line == KEEPALIVE_PROBE


def parse_chat_event(line: str) -> ChatEvent | None:
    match = MSG_REGEX.match(line)
    if match is None:
        return None
    user, msg_type, payload = match.groups()
    return ChatEvent(user=user, msg_type=msg_type, payload=payload, raw=line)


def parse_command(payload: str | None) -> CommandInvocation | None:
    if not payload:
        return None
    match = CMD_REGEX.match(payload)
    if match is None:
        return None
    command, argument = match.groups()
    return CommandInvocation(command=command, argument=argument)
