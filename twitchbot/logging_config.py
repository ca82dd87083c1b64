r"""
Logging configuration module for the Twitch chat bot.

Provides a clean, configurable logging setup using the colorlog library. The
bot's own events already carry their timestamp (see ``logs.logger``), so the
console format only adds the colored level column.
"""

import logging
import os
import sys

import colorlog


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config=None):
        """Initialize the configurator.

        Args:
            config: Optional config dict; ``stream`` overrides the output stream.
        """
        self.config = config or {}

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self) -> None:
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        formatter = self.build_formatter()
        handler = logging.StreamHandler(self.config.get("stream", sys.stdout))
        handler.setFormatter(formatter)

        logging.basicConfig(
            level=log_level,
            handlers=[handler],
            format="%(message)s",
            force=True,
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        # Keep asyncio internals quiet unless debugging the bot itself
        logging.getLogger("asyncio").setLevel(logging.WARNING)
        logging.getLogger("twitchbot").setLevel(log_level)
