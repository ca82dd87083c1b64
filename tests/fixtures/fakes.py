"""In-memory stand-ins for the network and the credential store."""

from __future__ import annotations

from twitchbot.config.model import Credentials
from twitchbot.errors.internal import ConnectionClosedError, NetworkError


class FakeTransport:
    """In-memory line transport.

    ``lines`` are returned by ``read_line`` in order; exceptions in the list
    are raised instead. Once exhausted the stream reports end-of-stream.
    """

    def __init__(self, lines=(), *, fail_writes: bool = False) -> None:
        self.incoming: list[str | BaseException] = list(lines)
        self.sent: list[str] = []
        self.fail_writes = fail_writes
        self.close_calls = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def read_line(self) -> str:
        if self._closed:
            raise ConnectionClosedError("Connection already closed")
        if not self.incoming:
            raise ConnectionClosedError("Connection closed by server")
        item = self.incoming.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def write_line(self, raw: str) -> None:
        if self.fail_writes:
            raise NetworkError("Write failed: broken pipe")
        self.sent.append(raw)

    async def close(self) -> None:
        self.close_calls += 1
        self._closed = True


class FakeTransportFactory:
    """Transport factory failing ``failures`` times before handing out transports."""

    def __init__(self, transports=(), *, failures: int = 0) -> None:
        self.transports: list[FakeTransport] = list(transports)
        self.failures = failures
        self.calls: list[tuple[str, int, float]] = []

    async def __call__(self, host: str, port: int, timeout: float) -> FakeTransport:
        self.calls.append((host, port, timeout))
        if self.failures > 0:
            self.failures -= 1
            raise ConnectionRefusedError("Connection refused")
        if not self.transports:
            raise ConnectionRefusedError("No more transports")
        return self.transports.pop(0)


class FailingCredentialSource:
    def __init__(self, error: Exception) -> None:
        self.error = error

    def describe(self) -> str:
        return "failing"

    def load(self) -> Credentials:
        raise self.error
