"""Connect-with-retry for the IRC transport."""

from __future__ import annotations

import logging

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    stop_never,
    wait_exponential,
)

from ..config.model import BotConfig
from ..errors.internal import NetworkError
from ..logs.logger import logger
from .protocols import Transport, TransportFactory


class IRCConnectionController:
    """Opens the transport, retrying failed attempts with bounded backoff.

    ``connect_max_attempts == 0`` keeps retrying until the connection is
    established or the task is cancelled.
    """

    def __init__(
        self,
        config: BotConfig,
        factory: TransportFactory,
        username: str | None = None,
    ) -> None:
        self.config = config
        self.factory = factory
        self.username = username
        self.last_attempts = 0

    def _stop_policy(self):  # type: ignore[no-untyped-def]
        if self.config.connect_max_attempts > 0:
            return stop_after_attempt(self.config.connect_max_attempts)
        return stop_never

    def _before_sleep(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.log_event(
            "irc",
            "connect_retry",
            level=logging.WARNING,
            user=self.username,
            server=self.config.server,
            attempt=retry_state.attempt_number,
            error=str(error),
        )

    async def open(self) -> Transport:
        """Return a connected transport.

        Raises:
            NetworkError: If ``connect_max_attempts`` attempts all failed.
        """
        logger.log_event(
            "irc",
            "connecting",
            user=self.username,
            server=self.config.server,
            port=self.config.port,
        )
        retrying = AsyncRetrying(
            stop=self._stop_policy(),
            wait=wait_exponential(
                multiplier=self.config.connect_backoff_base,
                max=self.config.connect_backoff_max,
            ),
            retry=retry_if_exception_type((OSError, TimeoutError)),
            before_sleep=self._before_sleep,
        )
        self.last_attempts = 0
        try:
            async for attempt in retrying:
                with attempt:
                    self.last_attempts = attempt.retry_state.attempt_number
                    transport = await self.factory(
                        self.config.server,
                        self.config.port,
                        self.config.connect_timeout,
                    )
        except RetryError as e:
            cause = e.last_attempt.exception()
            logger.log_event(
                "irc",
                "connect_exhausted",
                level=logging.ERROR,
                user=self.username,
                server=self.config.server,
                attempts=self.last_attempts,
            )
            raise NetworkError(
                f"Cannot connect to {self.config.server}:{self.config.port}",
                data={"attempts": self.last_attempts},
            ) from cause
        return transport
