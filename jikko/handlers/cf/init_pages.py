"""Create a Cloudflare Pages project."""

from ...commands.registry import command
from ...constants import PROGRAM_NAME
from ..interface import Command


@command("cf", "init_pages")
class InitPages(Command):
    """<project> Create a Cloudflare Pages project."""

    def run(self) -> None:
        if not self.args:
            self.err(f"Usage: {PROGRAM_NAME} cf init_pages <project>")
            return
        if not self.sh(["wrangler", "pages", "project", "create", self.args[0]]):
            raise self.fail("wrangler failed")
