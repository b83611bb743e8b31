"""Configuration loading and typed access.

The configuration file is TOML; only the ``[jikko]`` table is used::

    [jikko]
    color = "auto"            # or true / false
    acronyms = ["gh", "k8s"]  # extra identifier acronyms
    handler_packages = ["my_jikko_commands"]
    claude_dir = "~/.claude"
    repo_root = "~/Projects/claude-scripts"
    sd_host = "junkpile"
    sd_output_dir = "~/Projects/gallery/@output"
    include = ["~/.config/jikko/local.toml"]
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_FILE, PROGRAM_NAME
from .models import JikkoError

if TYPE_CHECKING:
    import logging

__all__ = ["BOOL_FALSE_STRINGS", "ConfigLoader", "Configuration", "coerce_to_bool", "merge"]

ConfigValue = float | bool | str | list | dict

BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def merge(target: dict[str, Any], other: dict[str, Any]) -> dict[str, Any]:
    """Merge `other` into `target` in place and return `target`.

    Tables merge recursively, lists are concatenated, anything else is
    replaced: ``merge({"a": {"b": 1}}, {"a": {"c": 2}})`` gives
    ``{"a": {"b": 1, "c": 2}}``.
    """
    for key, value in other.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            target[key] = current + value
        else:
            target[key] = value
    return target


def coerce_to_bool(value: ConfigValue | None, default: bool = False) -> bool:
    """Read `value` as a boolean.

    None gives `default`. Strings are false when blank or one of
    `BOOL_FALSE_STRINGS` (case insensitive), true otherwise.
    """
    if value is None:
        return default
    if isinstance(value, str):
        word = value.strip().lower()
        return bool(word) and word not in BOOL_FALSE_STRINGS
    return bool(value)


class Configuration(dict):
    """The ``[jikko]`` table with typed accessors."""

    def __init__(self, *args: Any, logger: logging.Logger, **kwargs: Any) -> None:  # noqa: ANN401
        super().__init__(*args, **kwargs)
        self.log = logger

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Get a boolean value, see `coerce_to_bool`."""
        return coerce_to_bool(self.get(name), default)

    def get_int(self, name: str, default: int = 0) -> int:
        """Get an integer value, `default` if missing or invalid."""
        value = self.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except (ValueError, TypeError):
            self.log.warning("Invalid integer value for %s: %s", name, value)
            return default

    def get_str(self, name: str, default: str = "") -> str:
        """Get a string value."""
        value = self.get(name)
        if value is None:
            return default
        return str(value)

    def get_path(self, name: str, default: str) -> Path:
        """Get a filesystem path, expanding ``~`` and environment variables."""
        return Path(os.path.expandvars(self.get_str(name, default))).expanduser()

    def get_list(self, name: str) -> list[str]:
        """Get a list of strings; a single string becomes a one item list."""
        value = self.get(name)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(v) for v in value]
        self.log.warning("Invalid list value for %s: %s", name, value)
        return []

    def color_mode(self) -> bool | None:
        """Return the forced color mode, or None for automatic detection."""
        value = self.get("color")
        if value is None or (isinstance(value, str) and value.strip().lower() == "auto"):
            return None
        return coerce_to_bool(value)


class ConfigLoader:
    """Load the configuration file, following ``include`` directives."""

    def __init__(self, log: logging.Logger) -> None:
        self.log = log

    def load(self, config_filename: str | os.PathLike | None = None) -> Configuration:
        """Load the configuration.

        A missing file is not an error: an empty configuration is returned.

        Args:
            config_filename: Optional path overriding the default CONFIG_FILE

        Raises:
            JikkoError: If a file has TOML syntax errors
        """
        fname = Path(os.path.expandvars(str(config_filename))).expanduser() if config_filename else CONFIG_FILE
        raw = self._load_file(fname, explicit=bool(config_filename))
        section = raw.get(PROGRAM_NAME, {})

        for extra in Configuration(section, logger=self.log).get_list("include"):
            extra_path = Path(os.path.expandvars(extra)).expanduser()
            merge(section, self._load_file(extra_path, explicit=True).get(PROGRAM_NAME, {}))

        section.pop("include", None)
        return Configuration(section, logger=self.log)

    def _load_file(self, fname: Path, explicit: bool) -> dict[str, Any]:
        """Load a single TOML file into a dictionary."""
        if not fname.exists():
            if explicit:
                self.log.warning("Config file not found: %s", fname)
            return {}
        self.log.info("Loading %s", fname)
        with fname.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                self.log.critical("Problem reading %s: %s", fname, e)
                raise JikkoError(f"invalid configuration file {fname}") from e
