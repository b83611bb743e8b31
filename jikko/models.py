"""Shared data types: exit codes, errors and command metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .handlers.interface import Command

__all__ = [
    "CommandArg",
    "CommandInfo",
    "CommandPath",
    "ExitCode",
    "HandlerEntry",
    "JikkoError",
    "Resolution",
]

CommandPath = tuple[str, ...]


class JikkoError(Exception):
    """Used for errors which already triggered logging or a console message."""


class ExitCode(IntEnum):
    """Process exit codes for the jikko CLI."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Unknown command
    CONFIG_ERROR = 2  # Unreadable configuration file
    COMMAND_ERROR = 4  # Handler failed
    INTERRUPTED = 130


@dataclass(frozen=True)
class Resolution:
    """Outcome of splitting the command line into a command path and its args."""

    path: CommandPath
    args: tuple[str, ...]

    @property
    def attempted(self) -> str:
        """The command the user tried to run, as typed.

        Includes the leading non-flag args the router refused to consume.
        """
        words = list(self.path)
        for arg in self.args:
            if arg.startswith("-"):
                break
            words.append(arg)
        return " ".join(words)


@dataclass(frozen=True)
class HandlerEntry:
    """A registered handler."""

    path: CommandPath
    identifier: str  # e.g. "AI.SD.Generate"
    handler: type[Command]

    @property
    def name(self) -> str:
        """Space separated path, as typed on the command line."""
        return " ".join(self.path)


@dataclass
class CommandArg:
    """An argument parsed from a command's docstring."""

    value: str  # e.g., "major|minor|patch" or "prompt..."
    required: bool  # True for <arg>, False for [arg]


@dataclass
class CommandInfo:
    """Complete information about a command, used by the help output."""

    name: str
    identifier: str
    args: list[CommandArg] = field(default_factory=list)
    short_description: str = ""
    full_description: str = ""
