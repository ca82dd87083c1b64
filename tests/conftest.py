from __future__ import annotations

import pytest

from twitchbot.config.credentials import StaticCredentialSource
from twitchbot.config.model import BotConfig, Credentials


@pytest.fixture
def bot_config() -> BotConfig:
    return BotConfig(
        channel="mychan",
        name="testbot",
        server="irc.example.test",
        port=6667,
        msg_rate=0,
        reconnect_delay=0,
        connect_timeout=1,
        connect_backoff_base=0,
        connect_backoff_max=0,
        credentials_path="unused.json",
    )


@pytest.fixture
def credential_source() -> StaticCredentialSource:
    return StaticCredentialSource(
        Credentials(password="oauth:secret", client_id="client123")
    )
