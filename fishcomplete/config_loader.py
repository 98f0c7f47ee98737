"""Configuration file loading."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .config import Configuration, Settings
from .constants import CONFIG_FILE, CONFIG_SECTION
from .models import FishCompleteError
from .validation import SCHEMA, validate_config

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader", "load_settings"]


class ConfigLoader:
    """Loads the `[fishcomplete]` section of a TOML file.

    A missing default file is not an error: every option has a default.
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log
        self.errors: list[str] = []

    def load(self, config_filename: str = "") -> Configuration:
        """Load the configuration.

        Args:
            config_filename: Optional path to the config file, defaults to CONFIG_FILE

        Returns:
            The configuration section, with schema defaults

        Raises:
            FishCompleteError: If an explicit file is missing or the TOML is invalid
        """
        if config_filename:
            fname = Path(os.path.expandvars(config_filename)).expanduser()
            if not fname.exists():
                self.log.critical("Config file not found: %s", fname)
                raise FishCompleteError(fname)
        else:
            fname = CONFIG_FILE

        section = self._load_config_file(fname) if fname.exists() else {}
        self.errors = validate_config(section)
        for error in self.errors:
            self.log.warning("%s: %s", fname, error)
        return Configuration(section, logger=self.log, schema=SCHEMA)

    def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Read `fname` and return its `[fishcomplete]` section."""
        self.log.info("Loading %s", fname)
        with fname.open("rb") as f:
            try:
                config = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                self.log.critical("Problem reading %s: %s", fname, e)
                raise FishCompleteError(fname) from e
        section = config.get(CONFIG_SECTION, {})
        if not isinstance(section, dict):
            self.log.critical("%s: [%s] must be a table", fname, CONFIG_SECTION)
            raise FishCompleteError(fname)
        return section


def load_settings(config_filename: str = "", *, log: logging.Logger) -> Settings:
    """Load the configuration file and resolve it into Settings."""
    return Settings.from_config(ConfigLoader(log).load(config_filename))
