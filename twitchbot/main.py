#!/usr/bin/env python3
"""
Main entry point for the Twitch chat bot
"""

import asyncio
import logging
import sys

from .config import get_configuration
from .errors import CredentialsError, NetworkError, log_error
from .irc import ChatBot, TwitchBot
from .logging_config import LoggerConfigurator
from .logs.logger import logger


async def main() -> None:
    """Load configuration and run the bot until it is shut down from chat.

    Raises:
        SystemExit: If credentials are unusable or the bot cannot connect.
    """
    configurator = LoggerConfigurator()
    configurator.configure()
    try:
        logger.log_event("app", "start")
        config = get_configuration()
        bot: ChatBot = TwitchBot(config)
        await bot.start()
    except asyncio.CancelledError:
        raise
    except CredentialsError:
        # Already reported by the bot
        sys.exit(1)
    except NetworkError as e:
        log_error("Bot stopped", e)
        sys.exit(1)
    except Exception as e:
        log_error("Main application error", e)
        sys.exit(1)
    finally:
        logger.log_event("app", "shutdown")


def run() -> None:
    """Synchronous entry point for the application.

    Raises:
        SystemExit: If a critical error occurs during execution.
    """
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
        sys.exit(0)
    except asyncio.CancelledError:
        sys.exit(0)


if __name__ == "__main__":
    run()
