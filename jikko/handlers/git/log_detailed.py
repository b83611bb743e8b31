"""git log as a table."""

from ...commands.registry import command
from ..interface import Command
from .log import LOG_LENGTH

LOG_FORMAT = "%ad\t%h\t%s\t%an"


@command("git", "log_detailed")
class LogDetailed(Command):
    """Show the last commits with their date and author."""

    def run(self) -> None:
        output = self.capture(["git", "log", f"--pretty=format:{LOG_FORMAT}", "--date=short", f"-{LOG_LENGTH}"])
        rows = list(self.rows(output))
        if rows:
            self.table(["Date", "Hash", "Message", "Author"], rows)
        else:
            self.muted("No commits found")
