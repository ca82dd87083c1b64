"""Single-channel Twitch chat bot.

Basic usage::

    import asyncio

    from twitchbot import BotConfig, TwitchBot

    bot = TwitchBot(
        BotConfig(
            channel="twitch",
            name="TwitchBot",
            credentials_path="../private/oauth.json",
        )
    )
    asyncio.run(bot.start())
"""

from .config import BotConfig, Credentials, JsonCredentialSource  # noqa: F401
from .irc import TwitchBot  # noqa: F401

__all__ = ["BotConfig", "Credentials", "JsonCredentialSource", "TwitchBot"]
