"""Shared constants for jikko."""

import os
from pathlib import Path

__all__ = [
    "ACRONYMS",
    "CONFIG_FILE",
    "DEFAULT_CLAUDE_DIR",
    "DEFAULT_REPO_ROOT",
    "DEFAULT_SD_HOST",
    "DEFAULT_SD_OUTPUT_DIR",
    "HANDLERS_PACKAGE",
    "HELP_ALIASES",
    "PROGRAM_NAME",
    "VERSION_ALIASES",
]

PROGRAM_NAME = "jikko"

HELP_ALIASES = frozenset({"help", "--help", "-h"})
VERSION_ALIASES = frozenset({"version", "--version", "-v"})

# Path segments upper-cased instead of capitalized in handler identifiers
ACRONYMS = frozenset({"ai", "sd", "api", "ui", "cf", "cl", "ps", "psn"})

HANDLERS_PACKAGE = "jikko.handlers"

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "jikko" / "config.toml"

DEFAULT_CLAUDE_DIR = "~/.claude"
DEFAULT_REPO_ROOT = "~/Projects/claude-scripts"

# Image generation host
DEFAULT_SD_HOST = "junkpile"
DEFAULT_SD_OUTPUT_DIR = "~/Projects/gallery/@output"
