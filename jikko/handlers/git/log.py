"""git log."""

from ...commands.registry import command
from ..interface import Command

LOG_LENGTH = 20


@command("git", "log")
class Log(Command):
    """Show the last commits, one per line."""

    def run(self) -> None:
        self.sh(["git", "log", "--oneline", f"-{LOG_LENGTH}"])
