"""
Configuration constants for the Twitch chat bot

This module contains all configurable constants used throughout the application.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


# IRC server endpoint
TWITCH_IRC_SERVER = _get_env_str("TWITCH_IRC_SERVER", "irc.chat.twitch.tv")
TWITCH_IRC_PORT = _get_env_int("TWITCH_IRC_PORT", 6667)

# Forced delay between processed lines. 20/30 of a second keeps a non-moderator
# account inside the chat message limits.
BOT_MSG_RATE_SECONDS = _get_env_float("BOT_MSG_RATE_SECONDS", 20 / 30)

# Delay before the whole connect/join/watch cycle is restarted after a drop
BOT_RECONNECT_DELAY_SECONDS = _get_env_float("BOT_RECONNECT_DELAY_SECONDS", 1.0)

# Connect retry policy
IRC_CONNECT_TIMEOUT_SECONDS = _get_env_float("IRC_CONNECT_TIMEOUT_SECONDS", 10.0)
IRC_CONNECT_MAX_ATTEMPTS = _get_env_int(
    "IRC_CONNECT_MAX_ATTEMPTS", 0
)  # 0 retries forever
IRC_CONNECT_BACKOFF_BASE_SECONDS = _get_env_float(
    "IRC_CONNECT_BACKOFF_BASE_SECONDS", 1.0
)
IRC_CONNECT_BACKOFF_MAX_SECONDS = _get_env_float(
    "IRC_CONNECT_BACKOFF_MAX_SECONDS", 30.0
)

# Wire limits
IRC_MAX_LINE_BYTES = _get_env_int("IRC_MAX_LINE_BYTES", 512)
IRC_READ_LIMIT_BYTES = _get_env_int("IRC_READ_LIMIT_BYTES", 64 * 1024)

# Default locations
CREDENTIALS_FILE = _get_env_str("TWITCHBOT_CREDENTIALS_FILE", "private/oauth.json")
CONFIG_FILE = _get_env_str("TWITCHBOT_CONF_FILE", "twitchbot.conf")

# Month-day hour:minute:second zone, attached to every emitted log line
LOG_TIMESTAMP_FORMAT = _get_env_str("LOG_TIMESTAMP_FORMAT", "%b %d %H:%M:%S %Z")
