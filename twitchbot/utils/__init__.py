"""Utility functions package for the Twitch chat bot.

Exposed functions:
    format_duration: Formats time durations into human-readable strings.
    time_stamp: Formats the current local time for log lines.
"""

from .helpers import format_duration, time_stamp

__all__ = ["format_duration", "time_stamp"]
