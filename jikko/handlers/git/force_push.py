"""Empty commit then force push."""

from ...commands.registry import command
from ..interface import Command
from .empty import Empty


@command("git", "force_push")
class ForcePush(Command):
    """Create an empty commit and force push the current branch."""

    def run(self) -> None:
        self.sub(Empty).run()
        branch = self.capture("git branch --show-current").strip()
        if not branch:
            raise self.fail("Not on a branch")
        self.puts()
        self.warn(f"Force pushing {branch}...")
        self.sh(["git", "push", "--force", "origin", branch])
