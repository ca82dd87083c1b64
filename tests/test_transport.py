from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from twitchbot.errors.internal import ConnectionClosedError, NetworkError
from twitchbot.irc.transport import LineTransport, open_line_transport


class RecordingWriter:
    def __init__(self, *, fail: bool = False) -> None:
        self.data = bytearray()
        self.fail = fail
        self.closed = False
        self.wait_closed_calls = 0

    def write(self, data: bytes) -> None:
        if self.fail:
            raise ConnectionResetError("Connection reset by peer")
        self.data.extend(data)

    async def drain(self) -> None:
        await asyncio.sleep(0)

    def close(self) -> None:
        self.closed = True

    async def wait_closed(self) -> None:
        self.wait_closed_calls += 1


def _reader(payload: bytes, *, eof: bool = True) -> asyncio.StreamReader:
    reader = asyncio.StreamReader()
    reader.feed_data(payload)
    if eof:
        reader.feed_eof()
    return reader


@pytest.mark.asyncio
async def test_read_line_strips_terminator():
    transport = LineTransport(_reader(b"PING :tmi.twitch.tv\r\nsecond\n"), RecordingWriter())
    assert await transport.read_line() == "PING :tmi.twitch.tv"
    assert await transport.read_line() == "second"


@pytest.mark.asyncio
async def test_read_line_end_of_stream_raises():
    transport = LineTransport(_reader(b""), RecordingWriter())
    with pytest.raises(ConnectionClosedError):
        await transport.read_line()


@pytest.mark.asyncio
async def test_read_line_returns_partial_line_before_eof():
    transport = LineTransport(_reader(b"partial"), RecordingWriter())
    assert await transport.read_line() == "partial"
    with pytest.raises(ConnectionClosedError):
        await transport.read_line()


@pytest.mark.asyncio
async def test_read_line_replaces_invalid_utf8():
    transport = LineTransport(_reader(b"caf\xff\r\n"), RecordingWriter())
    assert await transport.read_line() == "caf�"


@pytest.mark.asyncio
async def test_write_line_appends_crlf():
    writer = RecordingWriter()
    transport = LineTransport(_reader(b""), writer)
    await transport.write_line("PONG :tmi.twitch.tv")
    assert bytes(writer.data) == b"PONG :tmi.twitch.tv\r\n"


@pytest.mark.asyncio
async def test_write_failure_is_network_error():
    transport = LineTransport(_reader(b""), RecordingWriter(fail=True))
    with pytest.raises(NetworkError):
        await transport.write_line("NICK testbot")


@pytest.mark.asyncio
async def test_close_is_idempotent_and_blocks_io():
    writer = RecordingWriter()
    transport = LineTransport(_reader(b"line\r\n"), writer)
    await transport.close()
    await transport.close()
    assert transport.closed
    assert writer.closed
    assert writer.wait_closed_calls == 1
    with pytest.raises(ConnectionClosedError):
        await transport.read_line()
    with pytest.raises(ConnectionClosedError):
        await transport.write_line("JOIN #mychan")


@pytest.mark.asyncio
async def test_open_line_transport_uses_asyncio_connection():
    reader = _reader(b"")
    writer = RecordingWriter()
    with patch(
        "twitchbot.irc.transport.asyncio.open_connection",
        AsyncMock(return_value=(reader, writer)),
    ) as open_conn:
        transport = await open_line_transport("irc.example.test", 6667, 1.0)
    assert isinstance(transport, LineTransport)
    assert transport.reader is reader
    assert open_conn.await_args.args == ("irc.example.test", 6667)
