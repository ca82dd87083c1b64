"""Channel owner command dispatch."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

from ..logs.logger import logger
from .models import ChatEvent, CommandInvocation, DispatchOutcome

CommandHandler = Callable[
    [CommandInvocation, ChatEvent], Awaitable[DispatchOutcome] | DispatchOutcome
]

SHUTDOWN_COMMAND = "tbdown"


class CommandDispatcher:
    """Routes command invocations from the channel owner to handlers.

    The owner of ``channel`` is the only privileged sender. Invocations from
    anyone else, unknown tokens and failing handlers are ignored.
    """

    def __init__(self, channel: str, username: str | None = None):
        self.channel = channel
        self.username = username
        self._handlers: dict[str, CommandHandler] = {}
        self.register(SHUTDOWN_COMMAND, self._handle_shutdown)

    def register(self, command: str, handler: CommandHandler) -> None:
        self._handlers[command] = handler

    def unregister(self, command: str) -> None:
        self._handlers.pop(command, None)

    @property
    def commands(self) -> list[str]:
        return sorted(self._handlers)

    def is_privileged(self, event: ChatEvent) -> bool:
        return event.user == self.channel

    async def dispatch(
        self, event: ChatEvent, invocation: CommandInvocation
    ) -> DispatchOutcome:
        if not self.is_privileged(event):
            logger.log_event(
                "irc",
                "command_ignored",
                level=logging.DEBUG,
                user=self.username,
                channel=self.channel,
                command=invocation.command,
                author=event.user,
            )
            return DispatchOutcome.IGNORED
        handler = self._handlers.get(invocation.command)
        if handler is None:
            logger.log_event(
                "irc",
                "command_unknown",
                level=logging.DEBUG,
                user=self.username,
                channel=self.channel,
                command=invocation.command,
                author=event.user,
            )
            return DispatchOutcome.IGNORED
        try:
            outcome = handler(invocation, event)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as e:  # noqa: BLE001
            logger.log_event(
                "irc",
                "command_handler_error",
                level=logging.ERROR,
                user=self.username,
                channel=self.channel,
                command=invocation.command,
                error=str(e),
                error_type=type(e).__name__,
            )
            return DispatchOutcome.IGNORED
        if not isinstance(outcome, DispatchOutcome):
            return DispatchOutcome.HANDLED
        return outcome

    async def _handle_shutdown(
        self, invocation: CommandInvocation, event: ChatEvent
    ) -> DispatchOutcome:
        logger.log_event(
            "bot",
            "shutdown_command",
            level=logging.WARNING,
            user=self.username,
            channel=self.channel,
            author=event.user,
        )
        return DispatchOutcome.SHUTDOWN
