"""Handler registry.

Handler classes are marked with the `command` decorator::

    @command("git", "status")
    class Status(Command):
        \"\"\"Show the working tree status.\"\"\"

`load_handlers` imports every module of a package and registers the marked
classes they define, so each process builds its own registry.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from collections.abc import Callable, Iterable
from types import ModuleType
from typing import TYPE_CHECKING, TypeVar

from ..constants import ACRONYMS, HANDLERS_PACKAGE
from ..logging_setup import get_logger
from ..models import CommandInfo, CommandPath, HandlerEntry, JikkoError
from .naming import handler_identifier, path_key
from .parsing import parse_docstring

if TYPE_CHECKING:
    from ..handlers.interface import Command

__all__ = ["HandlerRegistry", "command", "load_handlers"]

CommandT = TypeVar("CommandT", bound="type[Command]")

# class attribute holding the path given to `command`
PATH_ATTRIBUTE = "command_path"


def command(*path: str) -> Callable[[CommandT], CommandT]:
    """Class decorator marking a handler to be registered at `path`."""

    def _mark(handler: CommandT) -> CommandT:
        setattr(handler, PATH_ATTRIBUTE, tuple(path))
        return handler

    return _mark


class HandlerRegistry:
    """Mapping of command paths to handler classes."""

    def __init__(self, acronyms: Iterable[str] = ACRONYMS) -> None:
        self.log = get_logger("registry")
        self.acronyms = frozenset(a.lower() for a in acronyms)
        self._by_path: dict[str, HandlerEntry] = {}
        self._by_identifier: dict[str, HandlerEntry] = {}
        self._namespaces: set[str] = set()

    def __len__(self) -> int:
        return len(self._by_path)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, tuple | list) and self.has_handler(path)

    def identifier(self, path: Iterable[str]) -> str:
        """Return the handler identifier for `path` using this registry's acronyms."""
        return handler_identifier(path, self.acronyms)

    def add_acronyms(self, acronyms: Iterable[str]) -> None:
        """Extend the acronym list and rebuild the identifier index.

        The registry is left untouched when the rebuild fails.

        Raises:
            JikkoError: If two registered paths now share an identifier
        """
        rebuilt = HandlerRegistry(self.acronyms | {a.lower() for a in acronyms})
        for entry in self._by_path.values():
            rebuilt.register(entry.path, entry.handler)
        self.acronyms = rebuilt.acronyms
        self._by_path = rebuilt._by_path
        self._by_identifier = rebuilt._by_identifier
        self._namespaces = rebuilt._namespaces

    def register(self, path: Iterable[str], handler: type[Command]) -> HandlerEntry:
        """Register `handler` at `path`.

        Re-registering the same handler at the same path is a no-op.

        Raises:
            JikkoError: For an empty path, a path segment starting with "-",
                or an identifier already used by another handler
        """
        path = tuple(path)
        if not path:
            raise JikkoError("cannot register a handler at an empty path")
        if any(not segment or segment.startswith("-") for segment in path):
            raise JikkoError(f"invalid command path: {path_key(path)}")

        identifier = self.identifier(path)
        existing = self._by_identifier.get(identifier)
        if existing is not None:
            if existing.handler is handler and existing.path == path:
                return existing
            raise JikkoError(f"{path_key(path)} and {path_key(existing.path)} both map to {identifier}")

        entry = HandlerEntry(path=path, identifier=identifier, handler=handler)
        self._by_path[path_key(path)] = entry
        self._by_identifier[identifier] = entry
        for depth in range(1, len(path)):
            self._namespaces.add(path_key(path[:depth]))
        self.log.debug("registered %s as %s", path_key(path), identifier)
        return entry

    def command(self, *path: str) -> Callable[[CommandT], CommandT]:
        """Class decorator marking the handler and registering it here right away."""

        def _register(handler: CommandT) -> CommandT:
            command(*path)(handler)
            self.register(path, handler)
            return handler

        return _register

    def register_module(self, module: ModuleType) -> list[HandlerEntry]:
        """Register the handlers marked with `command` that `module` defines."""
        entries = []
        for obj in vars(module).values():
            if not isinstance(obj, type) or obj.__module__ != module.__name__:
                continue
            path = vars(obj).get(PATH_ATTRIBUTE)
            if path:
                entries.append(self.register(path, obj))
        return entries

    def has_handler(self, path: Iterable[str]) -> bool:
        """Tell whether a handler is registered at exactly `path`."""
        return path_key(path) in self._by_path

    def has_namespace(self, path: Iterable[str]) -> bool:
        """Tell whether some registered path strictly extends `path`."""
        return path_key(path) in self._namespaces

    def lookup(self, identifier: str) -> HandlerEntry | None:
        """Find a handler by identifier."""
        return self._by_identifier.get(identifier)

    def load(self, path: CommandPath) -> HandlerEntry | None:
        """Return the handler entry for `path`, None if there is none."""
        if not path:
            return None
        return self.lookup(self.identifier(path))

    def entries(self) -> list[HandlerEntry]:
        """All handler entries, sorted by path."""
        return sorted(self._by_path.values(), key=lambda entry: entry.path)

    def children(self, path: CommandPath) -> list[HandlerEntry]:
        """Handler entries strictly below `path`, sorted."""
        depth = len(path)
        return [entry for entry in self.entries() if len(entry.path) > depth and entry.path[:depth] == tuple(path)]

    def info(self, entry: HandlerEntry) -> CommandInfo:
        """Describe a handler from its docstring."""
        args, short_desc, full_desc = parse_docstring(inspect.getdoc(entry.handler) or "")
        return CommandInfo(
            name=entry.name,
            identifier=entry.identifier,
            args=args,
            short_description=short_desc,
            full_description=full_desc,
        )


def load_handlers(registry: HandlerRegistry, package: str = HANDLERS_PACKAGE) -> list[str]:
    """Import every module found in `package` and register its handlers.

    A module that fails to import is logged and skipped: its commands are
    then reported as unknown, the other modules still load.

    Args:
        registry: Receives the handlers
        package: Dotted name of a package holding handler modules

    Returns:
        The imported module names

    Raises:
        JikkoError: If two handlers map to the same identifier
    """
    log = get_logger("registry")
    failed: set[str] = set()

    def _failed(name: str) -> None:
        if name not in failed:
            failed.add(name)
            log.exception("Unable to load handlers from %s", name)

    try:
        root = importlib.import_module(package)
    except Exception:  # pylint: disable=W0718
        _failed(package)
        return []

    modules = [root]
    for module_info in pkgutil.walk_packages(getattr(root, "__path__", []), prefix=f"{root.__name__}.", onerror=_failed):
        try:
            modules.append(importlib.import_module(module_info.name))
        except Exception:  # pylint: disable=W0718
            _failed(module_info.name)

    for module in modules:
        registry.register_module(module)
    return [module.__name__ for module in modules]
