"""Protocol definitions for the IRC session components.

The session only depends on these interfaces, so any line oriented transport
(a real socket or an in-memory fake) can drive it.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable


class Transport(Protocol):
    """Newline delimited read/write over one connection."""

    @property
    def closed(self) -> bool:
        """True once the connection has been closed."""
        ...

    async def read_line(self) -> str:
        """Return the next line without terminator.

        Raises ``NetworkError`` (``ConnectionClosedError`` on end-of-stream).
        """
        ...

    async def write_line(self, raw: str) -> None:
        """Write ``raw`` followed by CRLF."""
        ...

    async def close(self) -> None:
        """Close the connection; safe to call more than once."""
        ...


# (host, port, timeout) -> connected transport; raises OSError/TimeoutError.
TransportFactory = Callable[[str, int, float], Awaitable[Transport]]


@runtime_checkable
class ChatBot(Protocol):
    """Public surface of a chat bot session."""

    async def connect(self) -> None:
        """Open a connection to the chat server."""
        ...

    async def disconnect(self) -> float | None:
        """Close the connection to the chat server."""
        ...

    async def handle_chat(self) -> None:
        """Listen to chat messages and PING requests from the server."""
        ...

    async def join_channel(self) -> None:
        """Authenticate and join the configured channel."""
        ...

    def read_credentials(self) -> object:
        """Load the credentials needed for authentication."""
        ...

    async def say(self, msg: str) -> None:
        """Send a message to the joined channel."""
        ...

    async def start(self) -> None:
        """Keep the bot connected and handling chat until shut down."""
        ...
