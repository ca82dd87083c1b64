"""Line transport over an asyncio stream pair."""

from __future__ import annotations

import asyncio

from ..constants import IRC_READ_LIMIT_BYTES
from ..errors.internal import ConnectionClosedError, NetworkError

LINE_TERMINATOR = "\r\n"


class LineTransport:
    def __init__(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        self.reader = reader
        self.writer = writer
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def read_line(self) -> str:
        if self._closed:
            raise ConnectionClosedError("Connection already closed")
        try:
            data = await self.reader.readline()
        except (asyncio.LimitOverrunError, ValueError) as e:
            raise NetworkError(f"Line exceeds read limit: {e}") from e
        except (OSError, asyncio.IncompleteReadError) as e:
            raise NetworkError(f"Read failed: {e}") from e
        if not data:
            raise ConnectionClosedError("Connection closed by server")
        return data.decode("utf-8", errors="replace").rstrip("\r\n")

    async def write_line(self, raw: str) -> None:
        if self._closed:
            raise ConnectionClosedError("Connection already closed")
        try:
            self.writer.write(f"{raw}{LINE_TERMINATOR}".encode())
            await self.writer.drain()
        except (OSError, RuntimeError) as e:
            raise NetworkError(f"Write failed: {e}") from e

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.writer.close()
        try:
            await self.writer.wait_closed()
        except (OSError, RuntimeError) as e:
            raise NetworkError(f"Close failed: {e}") from e


async def open_line_transport(host: str, port: int, timeout: float) -> LineTransport:
    """Open a TCP connection to ``host:port`` bounded by ``timeout`` seconds.

    Raises:
        OSError: If the connection cannot be established.
        TimeoutError: If it takes longer than ``timeout``.
    """
    reader, writer = await asyncio.wait_for(
        asyncio.open_connection(host, port, limit=IRC_READ_LIMIT_BYTES),
        timeout=timeout,
    )
    return LineTransport(reader, writer)
