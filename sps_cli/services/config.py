"""Settings management for the Stone Paper Scissors CLI.

Settings are resolved in three layers: built-in defaults, an optional JSON
settings file, and explicit overrides from command-line options or environment
variables. The manager only reads files; it never writes them.
"""

import json
import os
from typing import Any
from loguru import logger
from pydantic import ValidationError

from sps_cli.models.config import GameSettings


class SettingsError(Exception):
    """Raised when a settings file cannot be read or does not validate."""


class SettingsManager:
    """Resolves the settings for a match.

    Attributes:
        settings (GameSettings): The resolved settings.
        config_file (str | None): Path of the settings file that was read, if any.
    """

    def __init__(self, config_file: str | None = None) -> None:
        """Initialize the settings manager.

        Args:
            config_file: Optional JSON settings file to load on top of the defaults.

        Raises:
            SettingsError: If ``config_file`` is given but cannot be loaded.
        """
        self.config_file = config_file
        self.settings = GameSettings()
        if config_file:
            self._load_file(config_file)

    def _load_file(self, path: str) -> None:
        """Load settings from a JSON file on top of the defaults."""
        if not os.path.exists(path):
            raise SettingsError(f"Settings file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SettingsError(f"Failed to parse settings file {path}: {str(e)}") from e
        except OSError as e:
            raise SettingsError(f"Error reading settings file {path}: {str(e)}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a JSON object")

        try:
            self.settings = GameSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings in {path}: {e.error_count()} error(s)\n{e}") from e

        logger.debug(f"Settings loaded from {path}")

    def apply_overrides(self, no_delay: bool = False, **overrides: Any) -> GameSettings:
        """Apply explicit overrides and return the final settings.

        Overrides whose value is None are ignored so unset CLI options keep the
        file or default value.

        Raises:
            SettingsError: If an override does not validate.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if updates:
            try:
                self.settings = GameSettings.model_validate({**self.settings.model_dump(), **updates})
            except ValidationError as e:
                raise SettingsError(f"Invalid option value: {e.error_count()} error(s)\n{e}") from e
            logger.debug(f"Settings overridden: {updates}")

        if no_delay:
            self.settings = self.settings.without_delays()
            logger.debug("All delays disabled")

        return self.settings
