"""Long-lived chat bot session: connect, authenticate, join, watch, reconnect."""

from __future__ import annotations

import asyncio
import logging
import time

from ..config.credentials import CredentialSource, JsonCredentialSource
from ..config.model import BotConfig, Credentials
from ..constants import IRC_MAX_LINE_BYTES
from ..errors.internal import (
    ConnectionLostError,
    CredentialsError,
    MessageValidationError,
    NetworkError,
    NotConnectedError,
)
from ..logs.logger import logger
from ..utils.helpers import format_duration
from .connection import IRCConnectionController
from .dispatcher import CommandDispatcher
from .models import ConnectionState, DispatchOutcome
from .parser import (
    KEEPALIVE_RESPONSE,
    PRIVMSG,
    is_keepalive,
    parse_chat_event,
    parse_command,
)
from .protocols import Transport, TransportFactory
from .transport import LINE_TERMINATOR, open_line_transport

_LIVE_STATES = frozenset(
    {ConnectionState.CONNECTED, ConnectionState.JOINED, ConnectionState.WATCHING}
)


class TwitchBot:  # pylint: disable=too-many-instance-attributes
    """A single-channel Twitch chat bot.

    The bot keeps at most one live transport. ``start()`` drives the
    connect -> join -> watch cycle and restarts it whenever the connection
    drops; it only returns after the channel owner issues ``!tbdown``.
    """

    def __init__(
        self,
        config: BotConfig,
        credential_source: CredentialSource | None = None,
        *,
        transport_factory: TransportFactory = open_line_transport,
        dispatcher: CommandDispatcher | None = None,
    ) -> None:
        self.config = config
        self.credential_source = credential_source or JsonCredentialSource(
            config.credentials_path
        )
        self.credentials: Credentials | None = None
        self.transport: Transport | None = None
        self.state = ConnectionState.DISCONNECTED
        self.start_time: float | None = None
        self.dispatcher = dispatcher or CommandDispatcher(config.channel, config.name)
        self.connection_controller = IRCConnectionController(
            config, transport_factory, username=config.name
        )

    @property
    def channel(self) -> str:
        return self.config.channel

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def is_connected(self) -> bool:
        return self.state in _LIVE_STATES

    def _set_state(self, new_state: ConnectionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                user=self.name,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    def _require_transport(self) -> Transport:
        if self.transport is None or not self.is_connected:
            raise NotConnectedError(
                "Not connected to the chat server", data={"state": self.state.name}
            )
        return self.transport

    def read_credentials(self) -> Credentials:
        """Load credentials from the credential source.

        Raises:
            CredentialsError: If the source cannot provide them.
        """
        self.credentials = self.credential_source.load()
        logger.log_event(
            "bot",
            "credentials_loaded",
            level=logging.DEBUG,
            user=self.name,
            source=self.credential_source.describe(),
        )
        return self.credentials

    async def connect(self) -> None:
        """Connect to the chat server, retrying until it succeeds.

        Raises:
            NetworkError: If a finite attempt budget is configured and spent.
        """
        if self.transport is not None:
            await self.disconnect()
        self._set_state(ConnectionState.CONNECTING)
        try:
            transport = await self.connection_controller.open()
        except BaseException:
            self._set_state(ConnectionState.DISCONNECTED)
            raise
        self.transport = transport
        self.start_time = time.monotonic()
        self._set_state(ConnectionState.CONNECTED)
        logger.log_event("irc", "connected", user=self.name, server=self.config.server)

    async def disconnect(self) -> float | None:
        """Close the connection and report how long it was live.

        Returns the uptime in seconds, or None when there was no connection.
        """
        transport = self.transport
        if transport is None:
            logger.log_event(
                "irc", "disconnect_not_connected", level=logging.WARNING, user=self.name
            )
            return None
        self.transport = None
        try:
            await transport.close()
        except NetworkError as e:
            logger.log_event(
                "irc", "close_error", level=logging.WARNING, user=self.name, error=str(e)
            )
        started = self.start_time if self.start_time is not None else time.monotonic()
        uptime = time.monotonic() - started
        self.start_time = None
        self._set_state(ConnectionState.DISCONNECTED)
        logger.log_event(
            "irc",
            "disconnected",
            level=logging.WARNING,
            user=self.name,
            server=self.config.server,
            uptime_seconds=uptime,
            uptime=format_duration(uptime),
        )
        return uptime

    async def join_channel(self) -> None:
        """Authenticate and join the configured channel.

        Nothing is awaited from the server; a rejected login shows up later
        as a dropped connection.
        """
        transport = self._require_transport()
        password = self.credentials.password if self.credentials else ""
        logger.log_event("irc", "joining", user=self.name, channel=self.channel)
        await transport.write_line(f"PASS {password}")
        await transport.write_line(f"NICK {self.name}")
        await transport.write_line(f"JOIN #{self.channel}")
        self._set_state(ConnectionState.JOINED)
        logger.log_event(
            "irc", "joined", user=self.name, channel=self.channel, name=self.name
        )

    async def process_line(self, line: str) -> bool:
        """Handle one incoming line. Returns True when the bot must shut down."""
        transport = self._require_transport()
        if is_keepalive(line):
            await transport.write_line(KEEPALIVE_RESPONSE)
            logger.log_event("irc", "keepalive", level=logging.DEBUG, user=self.name)
            return False

        logger.log_event("irc", "raw", level=logging.DEBUG, user=self.name, line=line)
        event = parse_chat_event(line)
        if event is None:
            logger.log_event("irc", "unrecognized", user=self.name, line=line)
            return False
        if event.msg_type != PRIVMSG:
            logger.log_event(
                "irc",
                "ignored_msg_type",
                level=logging.DEBUG,
                user=self.name,
                msg_type=event.msg_type,
                author=event.user,
            )
            return False

        logger.log_event(
            "irc",
            "privmsg",
            user=self.name,
            channel=self.channel,
            author=event.user,
            chat_message=event.payload or "",
        )
        invocation = parse_command(event.payload)
        if invocation is None:
            return False
        outcome = await self.dispatcher.dispatch(event, invocation)
        return outcome is DispatchOutcome.SHUTDOWN

    async def handle_chat(self) -> None:
        """Watch the channel until shutdown is requested.

        Returns normally after the shutdown command; the connection is closed
        either way.

        Raises:
            ConnectionLostError: If reading from or writing to the server fails.
        """
        transport = self._require_transport()
        self._set_state(ConnectionState.WATCHING)
        logger.log_event("irc", "watching", user=self.name, channel=self.channel)
        while True:
            try:
                line = await transport.read_line()
                shutdown = await self.process_line(line)
            except NetworkError as e:
                logger.log_event(
                    "irc",
                    "read_failed",
                    level=logging.WARNING,
                    user=self.name,
                    channel=self.channel,
                    error=str(e),
                )
                await self.disconnect()
                raise ConnectionLostError(
                    "Failed to read line from channel. Disconnected.",
                    data={"channel": self.channel},
                ) from e
            if shutdown:
                await self.disconnect()
                self._set_state(ConnectionState.TERMINATED)
                return
            await asyncio.sleep(self.config.msg_rate)

    async def say(self, msg: str) -> None:
        """Send ``msg`` to the channel as a single PRIVMSG.

        Raises:
            MessageValidationError: If ``msg`` is empty, holds a line break,
                or the framed line exceeds the protocol's 512 byte limit.
            NotConnectedError: If there is no live connection.
            NetworkError: If the write fails.
        """
        if not msg:
            raise MessageValidationError("msg was empty")
        if "\r" in msg or "\n" in msg:
            raise MessageValidationError("msg contained a line break")
        frame = f"PRIVMSG #{self.channel} {msg}"
        size = len(f"{frame}{LINE_TERMINATOR}".encode())
        if size > IRC_MAX_LINE_BYTES:
            raise MessageValidationError(
                f"msg exceeded {IRC_MAX_LINE_BYTES} bytes",
                data={"size": size, "limit": IRC_MAX_LINE_BYTES},
            )
        transport = self._require_transport()
        await transport.write_line(frame)
        logger.log_event(
            "irc",
            "say",
            level=logging.DEBUG,
            user=self.name,
            channel=self.channel,
            chat_message=msg,
        )

    async def start(self) -> None:
        """Run the bot until the channel owner shuts it down.

        Raises:
            CredentialsError: If credentials cannot be read; nothing is retried.
            NetworkError: If a finite connect budget is exhausted.
        """
        try:
            self.read_credentials()
        except CredentialsError as e:
            logger.log_event(
                "bot", "credentials_error", level=logging.ERROR, user=self.name, error=str(e)
            )
            logger.log_event("bot", "aborting", level=logging.ERROR, user=self.name)
            raise

        while True:
            await self.connect()
            try:
                await self.join_channel()
                await self.handle_chat()
            except asyncio.CancelledError:
                if self.transport is not None:
                    await self.disconnect()
                raise
            except NetworkError as e:
                if self.transport is not None:
                    await self.disconnect()
                await asyncio.sleep(self.config.reconnect_delay)
                logger.log_event(
                    "bot", "restart", level=logging.WARNING, user=self.name, error=str(e)
                )
                continue
            logger.log_event("bot", "terminated", user=self.name)
            return
