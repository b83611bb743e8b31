"""Command line routing.

The router consumes the leading non-flag tokens of the command line while
they lead to a registered handler or to a namespace of handlers, then calls
the handler with the remaining tokens::

    jikko commands add net switch "Switch networks"
          ^^^^^^^^^^^^ ^^^^^^^^^^^^^^^^^^^^^^^^^^^^^
          command path residual args
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from ..ansi import UIStyles
from ..constants import HELP_ALIASES, PROGRAM_NAME, VERSION_ALIASES
from ..help import get_command_help, get_help
from ..logging_setup import get_logger
from ..models import ExitCode, Resolution
from ..version import VERSION

if TYPE_CHECKING:
    from ..config import Configuration
    from ..ui import Console
    from .registry import HandlerRegistry

__all__ = ["AppContext", "Router"]


@dataclass
class AppContext:
    """Process wide objects handed to every handler."""

    console: Console
    config: Configuration
    registry: HandlerRegistry


class Router:
    """Map a command line to a handler and run it."""

    def __init__(self, context: AppContext) -> None:
        self.context = context
        self.registry = context.registry
        self.console = context.console
        self.log = get_logger("router")

    def __call__(self, args: Sequence[str]) -> ExitCode:
        """Dispatch `args` (the command line without the program name).

        Returns:
            The process exit code
        """
        args = list(args)
        if not args or args[0] in HELP_ALIASES:
            if len(args) > 1:
                self.console.puts(get_command_help(self.registry, args[1:], self.console))
            else:
                self.console.puts(get_help(self.registry, self.console))
            return ExitCode.SUCCESS

        if args[0] in VERSION_ALIASES:
            self.console.puts(f"{PROGRAM_NAME} {VERSION}")
            return ExitCode.SUCCESS

        resolution = self.parse_args(args)
        handler = self.resolve(resolution)
        if handler is None:
            self.console.puts(self.console.style(f"Unknown command: {resolution.attempted}", *UIStyles.ERROR))
            self.console.puts(f"Run {self.console.bold(f'{PROGRAM_NAME} help')} for available commands")
            return ExitCode.USAGE_ERROR

        handler(list(resolution.args))
        return ExitCode.SUCCESS

    def parse_args(self, args: Sequence[str]) -> Resolution:
        """Split `args` into the longest routable command path and its args.

        e.g., ["commands", "add", "test", "foo"] -> (("commands", "add"), ("test", "foo"))

        A token is consumed while it starts no flag and the path extended with it
        is either a handler or a namespace containing handlers.
        """
        path: list[str] = []
        remaining = list(args)
        while remaining and not remaining[0].startswith("-"):
            candidate = [*path, remaining[0]]
            if self.registry.has_handler(candidate) or self.registry.has_namespace(candidate):
                path.append(remaining.pop(0))
            else:
                break
        return Resolution(path=tuple(path), args=tuple(remaining))

    def resolve(self, resolution: Resolution) -> Callable[[list[str]], None] | None:
        """Return the handler for the resolved path, bound to the context.

        A path that is only a namespace, or that has no handler, gives None.
        """
        entry = self.registry.load(resolution.path)
        if entry is None:
            self.log.debug("no handler for %r", resolution.path)
            return None
        self.log.debug("%s -> %s%s", entry.name, entry.identifier, resolution.args)
        return partial(entry.handler.call, context=self.context)
