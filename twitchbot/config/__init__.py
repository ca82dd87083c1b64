"""Configuration package exports.

Bot configuration and credential models, the credential sources and the
config file loader.
"""

from .credentials import (  # noqa: F401
    CredentialSource,
    JsonCredentialSource,
    StaticCredentialSource,
)
from .loader import ConfigLoader, get_configuration  # noqa: F401
from .model import BotConfig, Credentials, normalize_channel  # noqa: F401

__all__ = [
    "BotConfig",
    "Credentials",
    "CredentialSource",
    "JsonCredentialSource",
    "StaticCredentialSource",
    "ConfigLoader",
    "get_configuration",
    "normalize_channel",
]
