"""
Tests for error categorization and structured error logging
"""

import logging
from unittest.mock import patch

import pytest

from twitchbot.errors import (
    ConfigError,
    ConnectionLostError,
    CredentialsError,
    InternalError,
    MessageValidationError,
    NetworkError,
    categorize_error,
    log_error,
    log_structured_error,
)


class TestInternalError:
    def test_data_is_copied(self):
        data = {"path": "a"}
        error = InternalError("boom", data=data)
        data["path"] = "b"
        assert error.data == {"path": "a"}

    def test_data_defaults_to_empty(self):
        assert NetworkError("x").data == {}


@pytest.mark.parametrize(
    "error,category",
    [
        (ConnectionLostError("lost"), "network"),
        (ConnectionResetError(), "network"),
        (CredentialsError("bad"), "auth"),
        (ConfigError("bad"), "config"),
        (MessageValidationError("empty"), "validation"),
        (InternalError("x"), "internal"),
        (RuntimeError("x"), "unknown"),
    ],
)
def test_categorize_error(error, category):
    assert categorize_error(error) == category


def test_log_structured_error_format(caplog):
    caplog.set_level(logging.WARNING, logger="twitchbot.errors")
    with patch("twitchbot.errors.handling.time_stamp", return_value="Jan 01 00:00:00 UTC"):
        line = log_structured_error(
            "network",
            "Read failed",
            exception=OSError("reset"),
            context={"channel": "mychan", "attempt": 2},
            level=logging.WARNING,
        )
    assert line == (
        "[Jan 01 00:00:00 UTC] [NETWORK] Read failed | Exception: OSError: reset"
        " | Context: channel=mychan | attempt=2"
    )
    (record,) = [r for r in caplog.records if r.name == "twitchbot.errors"]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == line


def test_log_structured_error_without_extras():
    with patch("twitchbot.errors.handling.time_stamp", return_value="Jan 01 00:00:00 UTC"):
        line = log_structured_error("config", "Missing file")
    assert line == "[Jan 01 00:00:00 UTC] [CONFIG] Missing file"


def test_log_error_merges_error_data(caplog):
    caplog.set_level(logging.ERROR, logger="twitchbot.errors")
    error = NetworkError("Cannot connect", data={"attempts": 3})
    log_error("Bot stopped", error, context={"channel": "mychan"})
    (record,) = [r for r in caplog.records if r.name == "twitchbot.errors"]
    message = record.getMessage()
    assert message.startswith("[")
    assert "] [NETWORK] Bot stopped: Cannot connect" in message
    assert "attempts=3" in message
    assert "channel=mychan" in message
