"""git diff."""

from ...commands.registry import command
from ..interface import Command


@command("git", "diff")
class Diff(Command):
    """Show unstaged changes."""

    def run(self) -> None:
        self.sh("git diff")
