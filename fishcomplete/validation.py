"""Configuration schema and validation.

The schema (ConfigField, ConfigItems) provides the defaults used by
`Configuration` and drives `validate_config`, which reports wrong types and
unknown keys with a "did you mean" hint.
"""

import difflib
import re
from dataclasses import dataclass
from typing import Any

from .config import BOOL_STRINGS
from .constants import DEFAULT_BASH_COMMAND, DEFAULT_PRIMARY_COMMAND, DEFAULT_SENTINEL_PATTERN

__all__ = [
    "SCHEMA",
    "ConfigField",
    "ConfigItems",
    "validate_config",
]


@dataclass
class ConfigField:
    """Describes an expected configuration field.

    Attributes:
        name: The configuration key name
        field_type: Expected type or tuple of accepted types
        default: Default value if not provided
        description: Human-readable description
    """

    name: str
    field_type: type | tuple[type, ...] = str
    default: Any = None
    description: str = ""

    @property
    def type_name(self) -> str:
        """Return a human-readable type name."""
        if isinstance(self.field_type, tuple):
            return " or ".join(typ.__name__ for typ in self.field_type)
        return self.field_type.__name__


class ConfigItems(list):
    """A list of ConfigField items with cached lookup by name."""

    def __init__(self, *args: ConfigField) -> None:
        super().__init__(args)
        self._cache: dict[str, ConfigField] = {}

    def get(self, name: str) -> ConfigField | None:
        """Get a ConfigField by name."""
        v = self._cache.get(name)
        if not v:
            for prop in self:
                if prop.name == name:
                    v = prop
                    self._cache[name] = v
                    break
        return v

    @property
    def names(self) -> list[str]:
        """Names of all the fields."""
        return [prop.name for prop in self]


SCHEMA = ConfigItems(
    ConfigField("fallback", bool, True, "Try the bash backend when fish only returns file names"),
    ConfigField("prefer_fallback", bool, False, "Ask the bash backend first, use fish only if it has nothing"),
    ConfigField("command", str, DEFAULT_PRIMARY_COMMAND, "fish executable (name or path)"),
    ConfigField("bash_command", str, DEFAULT_BASH_COMMAND, "bash executable (name or path)"),
    ConfigField("sentinel_pattern", str, DEFAULT_SENTINEL_PATTERN, "Regular expression removed from the start of the line"),
)


def _find_similar_key(unknown_key: str, known_keys: list[str]) -> str | None:
    """Find a similar key using fuzzy matching."""
    matches = difflib.get_close_matches(unknown_key, known_keys, n=1)
    if matches:
        return matches[0]
    return None


def _check_type(prop: ConfigField, value: Any) -> str | None:  # noqa: ANN401
    """Return an error message if `value` doesn't fit `prop`."""
    if prop.field_type is bool:
        if isinstance(value, bool) or (isinstance(value, str) and value.lower().strip() in BOOL_STRINGS):
            return None
        return f"'{prop.name}': expected bool, got {value!r}"
    if not isinstance(value, prop.field_type):
        return f"'{prop.name}': expected {prop.type_name}, got {type(value).__name__}"
    if prop.name == "sentinel_pattern":
        try:
            re.compile(value)
        except re.error as e:
            return f"'{prop.name}': invalid regular expression: {e}"
    return None


def validate_config(config: dict[str, Any], schema: ConfigItems = SCHEMA) -> list[str]:
    """Validate a configuration section against a schema.

    Args:
        config: The configuration section
        schema: The expected fields

    Returns:
        A list of error messages, empty when the configuration is valid
    """
    errors = []
    for key, value in config.items():
        prop = schema.get(key)
        if prop is None:
            similar = _find_similar_key(key, schema.names)
            hint = f", did you mean '{similar}'?" if similar else ""
            errors.append(f"unknown option '{key}'{hint}")
            continue
        error = _check_type(prop, value)
        if error:
            errors.append(error)
    return errors
