"""git status."""

from ...commands.registry import command
from ..interface import Command


@command("git", "status")
class Status(Command):
    """Show the working tree status."""

    def run(self) -> None:
        self.sh("git status")
