"""Configuration wrapper providing typed access and the resolved settings."""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .constants import DEFAULT_BASH_COMMAND, DEFAULT_PRIMARY_COMMAND, DEFAULT_SENTINEL_PATTERN

if TYPE_CHECKING:
    import logging

    from .validation import ConfigItems

__all__ = ["Configuration", "Settings", "coerce_to_bool", "BOOL_TRUE_STRINGS", "BOOL_FALSE_STRINGS", "BOOL_STRINGS"]

ConfigValueType = float | bool | str | list | dict

BOOL_TRUE_STRINGS = frozenset({"true", "yes", "on", "1", "enabled"})
BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})
BOOL_STRINGS = BOOL_TRUE_STRINGS | BOOL_FALSE_STRINGS


def coerce_to_bool(value: ConfigValueType | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Args:
        value: The value to coerce
        default: Default value if value is None

    Returns:
        The boolean value

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


class Configuration(dict):
    """Configuration section with schema-aware defaults and typed accessors."""

    def __init__(
        self,
        *args: Any,  # noqa: ANN401
        logger: logging.Logger,
        schema: ConfigItems | None = None,
        **kwargs: Any,  # noqa: ANN401
    ):
        """Initialize the configuration object.

        Args:
            *args: Arguments for dict
            logger: Logger instance to use for warnings
            schema: Optional list of ConfigField definitions for automatic defaults
            **kwargs: Keyword arguments for dict
        """
        super().__init__(*args, **kwargs)
        self.log = logger
        self._schema_defaults: dict[str, ConfigValueType] = {}
        if schema:
            self._schema_defaults = {prop.name: prop.default for prop in schema if prop.default is not None}

    def get(self, name: str, default: ConfigValueType | None = None) -> ConfigValueType | None:  # type: ignore[override]
        """Get a value, falling back to the schema default then to `default`."""
        if name in self:
            return dict.get(self, name)  # type: ignore[return-value]
        if name in self._schema_defaults:
            return self._schema_defaults[name]
        return default

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Get a boolean value, see `coerce_to_bool`."""
        return coerce_to_bool(self.get(name), default)

    def get_int(self, name: str, default: int = 0) -> int:
        """Get an integer value, `default` if missing or invalid."""
        value = self.get(name)
        if value is None:
            return default
        try:
            return int(value)  # type: ignore[arg-type]
        except (ValueError, TypeError):
            self.log.warning("Invalid integer value for %s: %s", name, value)
            return default

    def get_str(self, name: str, default: str = "") -> str:
        """Get a string value."""
        value = self.get(name)
        if value is None:
            return default
        return str(value)

    def has_explicit(self, name: str) -> bool:
        """Check if value was explicitly set (not from schema default)."""
        return name in self


@dataclass(frozen=True)
class Settings:
    """Settings read once per completion request.

    Attributes:
        fallback_enabled: Try the secondary backend on low quality results
        prefer_fallback: Ask the secondary backend first
        command_path: Resolved primary executable, None if not found
        sentinel_pattern: Regular expression stripped from the start of the line
        bash_path: Resolved secondary executable, None if not found
    """

    fallback_enabled: bool = True
    prefer_fallback: bool = False
    command_path: str | None = None
    sentinel_pattern: str = DEFAULT_SENTINEL_PATTERN
    bash_path: str | None = None

    @classmethod
    def from_config(cls, config: Configuration) -> Settings:
        """Build the settings, resolving executables from PATH."""
        pattern = config.get_str("sentinel_pattern", DEFAULT_SENTINEL_PATTERN)
        try:
            re.compile(pattern)
        except re.error as e:
            config.log.warning("Invalid sentinel_pattern %r (%s), using the default", pattern, e)
            pattern = DEFAULT_SENTINEL_PATTERN
        return cls(
            fallback_enabled=config.get_bool("fallback", True),
            prefer_fallback=config.get_bool("prefer_fallback", False),
            command_path=shutil.which(config.get_str("command", DEFAULT_PRIMARY_COMMAND)),
            sentinel_pattern=pattern,
            bash_path=shutil.which(config.get_str("bash_command", DEFAULT_BASH_COMMAND)),
        )

    @classmethod
    def default(cls) -> Settings:
        """Settings with no configuration file, executables looked up in PATH."""
        return cls(command_path=shutil.which(DEFAULT_PRIMARY_COMMAND), bash_path=shutil.which(DEFAULT_BASH_COMMAND))
