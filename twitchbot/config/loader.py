"""Configuration loading utilities."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from ..constants import CONFIG_FILE
from ..errors.internal import ConfigError
from ..logs.logger import logger
from .model import BotConfig


class ConfigLoader:
    """Loads the bot configuration from a JSON file."""

    def __init__(self, config_file: str | None = None) -> None:
        self.config_file = config_file or CONFIG_FILE

    def load_raw(self) -> dict[str, Any]:
        """Return the raw JSON object stored in the config file.

        Raises:
            ConfigError: If the file is missing, unreadable or not an object.
        """
        try:
            with open(self.config_file, encoding="utf-8") as f:
                data: Any = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(
                f"Configuration file not found: {self.config_file}",
                data={"path": self.config_file},
            ) from e
        except (OSError, ValueError) as e:
            raise ConfigError(
                f"Cannot read configuration file {self.config_file}: {e}",
                data={"path": self.config_file},
            ) from e
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration file {self.config_file} must contain a JSON object",
                data={"path": self.config_file},
            )
        return data

    def load(self) -> BotConfig:
        """Load and validate the configuration.

        Raises:
            ConfigError: If the file cannot be read or fails validation.
        """
        raw = self.load_raw()
        try:
            return BotConfig.from_dict(raw)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e.error_count()} error(s)",
                data={"path": self.config_file},
            ) from e

    def get_configuration(self) -> BotConfig:
        """Load the configuration, exiting the process when it is unusable.

        Raises:
            SystemExit: If no config file or no valid configuration is found.
        """
        try:
            config = self.load()
        except ConfigError as e:
            if isinstance(e.__cause__, FileNotFoundError):
                logger.log_event(
                    "app", "config_missing", level=logging.ERROR, path=self.config_file
                )
            else:
                logger.log_event(
                    "app",
                    "config_invalid",
                    level=logging.ERROR,
                    path=self.config_file,
                    error=str(e),
                )
            sys.exit(1)
        logger.log_event(
            "app", "config_loaded", channel=config.channel, name=config.name
        )
        return config


def get_configuration(config_file: str | None = None) -> BotConfig:
    """Load and validate the bot configuration from the config file."""
    return ConfigLoader(config_file).get_configuration()
