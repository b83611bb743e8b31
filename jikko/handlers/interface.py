"""Common handler interface."""

from __future__ import annotations

import json
import os
import subprocess
from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import questionary

from ..config import Configuration
from ..constants import DEFAULT_CLAUDE_DIR, DEFAULT_REPO_ROOT
from ..logging_setup import get_logger
from ..models import JikkoError
from ..ui import Console

if TYPE_CHECKING:
    from ..commands.router import AppContext

__all__ = ["Command"]

# exit status of a shell for an unknown program
COMMAND_NOT_FOUND = 127


class Command:
    """Base class for every jikko command.

    Subclasses implement `run`, reading their arguments from `self.args`,
    and are registered with `jikko.commands.registry.command`.
    """

    valued_flags: frozenset[str] = frozenset()
    """ flags expecting a value, skipped by `positional` """

    def __init__(self, args: Sequence[str] = (), context: AppContext | None = None) -> None:
        self.args: list[str] = list(args)
        """ the residual command line arguments """
        self.context = context
        self.console: Console = context.console if context else Console()
        self.config: Configuration = context.config if context else Configuration(logger=get_logger("config"))
        self.log = get_logger(type(self).__module__.removeprefix("jikko.handlers."))

    @classmethod
    def call(cls, args: Sequence[str] = (), context: AppContext | None = None) -> None:
        """Run the command with `args`."""
        cls(args, context).run()

    def run(self) -> None:
        """Do the work. To be overridden."""
        raise NotImplementedError

    def sub(self, other: type[Command], args: Sequence[str] = ()) -> Command:
        """Create another command sharing this one's context."""
        return other(args, self.context)

    # Paths

    @property
    def claude_dir(self) -> Path:
        return self.config.get_path("claude_dir", DEFAULT_CLAUDE_DIR)

    @property
    def settings_path(self) -> Path:
        return self.claude_dir / "settings.json"

    @property
    def repo_root(self) -> Path:
        """Checkout of the jikko sources."""
        return self.config.get_path("repo_root", DEFAULT_REPO_ROOT)

    @staticmethod
    def home(path: str | os.PathLike) -> str:
        """Shorten `path` with "~" for display."""
        return str(path).replace(str(Path.home()), "~", 1)

    # Output

    def puts(self, msg: Any = "") -> None:  # noqa: ANN401
        self.console.puts(msg)

    def ok(self, msg: str) -> None:
        self.console.ok(msg)

    def warn(self, msg: str) -> None:
        self.console.warn(msg)

    def err(self, msg: str) -> None:
        self.console.err(msg)

    def info(self, msg: str) -> None:
        self.console.info(msg)

    def muted(self, msg: str) -> None:
        self.console.muted(msg)

    def title(self, msg: str) -> None:
        self.console.title(msg)

    def frame(self, title: str) -> AbstractContextManager[None]:
        return self.console.frame(title)

    def spin(self, title: str) -> AbstractContextManager[None]:
        return self.console.spin(title)

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
        self.console.table(headers, rows)

    def fail(self, msg: str) -> JikkoError:
        """Print `msg` as an error and return the exception to raise."""
        self.err(msg)
        return JikkoError(msg)

    # Argument helpers

    def option(self, *flags: str, default: str | None = None) -> str | None:
        """Return the value following the first of `flags` found in the args."""
        for flag in flags:
            if flag in self.args:
                idx = self.args.index(flag)
                if idx + 1 < len(self.args):
                    return self.args[idx + 1]
        return default

    def positional(self) -> list[str]:
        """Return the args that are neither flags nor flag values."""
        result = []
        skip = False
        for arg in self.args:
            if skip:
                skip = False
            elif arg.startswith("-"):
                skip = arg in self.valued_flags
            else:
                result.append(arg)
        return result

    # Prompts

    def confirm(self, question: str, default: bool = False) -> bool:
        return bool(questionary.confirm(question, default=default).ask())

    def select(self, question: str, options: Sequence[str]) -> str | None:
        return questionary.select(question, choices=list(options)).ask()

    # JSON

    def read_json(self, path: Path) -> Any | None:  # noqa: ANN401
        """Return the decoded content of `path`, None if missing or invalid."""
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            self.log.warning("Invalid JSON in %s", path)
            return None

    def write_json(self, path: Path, data: Any) -> None:  # noqa: ANN401
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")

    # Shell

    def _run(self, cmd: str | Sequence[str], **kwargs: Any) -> subprocess.CompletedProcess:  # noqa: ANN401
        """Run `cmd`: a string runs through the shell, a sequence runs directly."""
        self.log.debug("run: %s", cmd)
        try:
            return subprocess.run(cmd, shell=isinstance(cmd, str), check=False, **kwargs)  # noqa: S602
        except FileNotFoundError as e:
            self.log.warning("Command not found: %s", e.filename)
            return subprocess.CompletedProcess(cmd, COMMAND_NOT_FOUND, stdout="" if kwargs.get("text") else None)

    def sh(self, cmd: str | Sequence[str], quiet: bool = False) -> bool:
        """Run `cmd` in the foreground, return True on success."""
        output = subprocess.DEVNULL if quiet else None
        return self._run(cmd, stdout=output, stderr=output).returncode == 0

    def capture(self, cmd: str | Sequence[str]) -> str:
        """Run `cmd` and return its standard output (stderr is discarded)."""
        return self._run(cmd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True).stdout

    def sh_result(self, cmd: str | Sequence[str]) -> tuple[bool, str]:
        """Run `cmd`, return success and its merged stdout/stderr."""
        proc = self._run(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)
        return proc.returncode == 0, proc.stdout

    @staticmethod
    def rows(text: str) -> Iterator[list[str]]:
        """Split tab separated output into rows, skipping blank lines."""
        for line in text.splitlines():
            if line.strip():
                yield line.strip().split("\t")
