"""Commit everything then push."""

from ...commands.registry import command
from ..interface import Command
from .commit import Commit


@command("git", "push")
class Push(Command):
    """Commit every change with a timestamped message and push it."""

    def run(self) -> None:
        self.sub(Commit).run()
        self.puts()
        self.info("Pushing...")
        if not self.sh("git push"):
            raise self.fail("git push failed")
