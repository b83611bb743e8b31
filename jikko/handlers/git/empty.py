"""Empty commit, handy to re-trigger CI."""

from datetime import datetime

from ...commands.registry import command
from ..interface import Command


@command("git", "empty")
class Empty(Command):
    """Create an empty commit."""

    def run(self) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
        if not self.sh(["git", "commit", "--allow-empty", "-m", f"{timestamp} Update"]):
            raise self.fail("Could not create the empty commit")
        self.ok("Empty commit created")
