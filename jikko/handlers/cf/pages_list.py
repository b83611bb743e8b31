"""Cloudflare Pages projects."""

from ...commands.registry import command
from ..interface import Command

# wrangler prints a banner before the table
WRANGLER_HEADER_LINES = 3


@command("cf", "pages_list")
class PagesList(Command):
    """List Cloudflare Pages projects."""

    def run(self) -> None:
        ok, output = self.sh_result(["wrangler", "pages", "project", "list"])
        lines = output.splitlines()
        if not ok:
            for line in lines:
                self.muted(line)
            raise self.fail("wrangler failed")
        for line in lines[WRANGLER_HEADER_LINES:]:
            self.puts(line)
