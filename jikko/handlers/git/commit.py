"""Commit everything with a timestamped message."""

from datetime import datetime

from ...commands.registry import command
from ..interface import Command


@command("git", "commit")
class Commit(Command):
    """Stage every change and commit it with a timestamped message."""

    def run(self) -> None:
        with self.spin("Staging files"):
            self.sh("git add -A", quiet=True)

        count = len(self.capture("git diff --cached --numstat").splitlines())
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        message = f"[Update] {timestamp}, {count} files"

        with self.spin("Committing"):
            if not self.sh(["git", "commit", "-m", message], quiet=True):
                raise self.fail("git commit failed")

        self.ok(f"Committed {count} files")
