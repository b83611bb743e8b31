"""Delete a Cloudflare Pages project."""

import sys

from ...commands.registry import command
from ...constants import PROGRAM_NAME
from ..interface import Command


@command("cf", "pages_destroy")
class PagesDestroy(Command):
    """<project> Delete a Cloudflare Pages project.

    Asks for confirmation on a terminal, `--yes` skips the question.
    Without a terminal, wrangler decides.
    """

    def run(self) -> None:
        positional = self.positional()
        if not positional:
            self.err(f"Usage: {PROGRAM_NAME} cf pages_destroy <project> [--yes]")
            return
        project = positional[0]

        cmd = ["wrangler", "pages", "project", "delete", project]
        if "--yes" in self.args:
            cmd.append("--yes")
        elif sys.stdin.isatty():
            if not self.confirm(f"Delete the Pages project {project}?"):
                self.muted("Cancelled")
                return
            cmd.append("--yes")

        if not self.sh(cmd):
            raise self.fail("wrangler failed")
