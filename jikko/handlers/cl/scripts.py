"""Overview of the jikko checkout."""

from pathlib import Path

from ...commands.registry import command
from ...constants import PROGRAM_NAME
from ...version import VERSION
from ..interface import Command

COLUMNS = 3
COLUMN_WIDTH = 24


@command("cl", "scripts")
class Scripts(Command):
    """Show the jikko version, the state of its checkout and every command."""

    def run(self) -> None:
        with self.frame(PROGRAM_NAME):
            self.info(f"Version: {VERSION}")
            self.info(f"Path: {self.home(self.repo_root)}")
            self.puts()
            self.show_status(self.repo_root)
            self.puts()
            self.show_commands()

    def show_status(self, repo: Path) -> None:
        self.title("Git Status")
        if not repo.is_dir():
            self.warn(f"Not found: {self.home(repo)}")
            return
        git = ["git", "-C", str(repo)]
        branch = self.capture([*git, "branch", "--show-current"]).strip()
        last_commit = self.capture([*git, "log", "-1", "--format=%h %s"]).strip()
        status = self.capture([*git, "status", "--porcelain"]).strip()

        self.info(f"Branch: {branch}")
        self.info(f"Last: {last_commit}")
        if not status:
            self.ok("Working tree clean")
            return
        self.warn("Uncommitted changes:")
        for line in status.splitlines():
            self.muted(f"  {line.strip()}")

    def show_commands(self) -> None:
        self.title("Available Commands")
        names = [entry.name for entry in self.context.registry.entries()] if self.context else []
        for start in range(0, len(names), COLUMNS):
            self.muted("".join(name.ljust(COLUMN_WIDTH) for name in names[start : start + COLUMNS]).rstrip())
