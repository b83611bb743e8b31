"""Scaffold a command from free-form words."""

from ...commands.registry import command
from ...constants import PROGRAM_NAME
from ..interface import Command
from .init import Init


@command("commands", "add")
class Add(Command):
    """<category> <name> [description...] Scaffold a new command, the description may span several words."""

    def run(self) -> None:
        if len(self.args) < 2:  # noqa: PLR2004
            self.err(f"Usage: {PROGRAM_NAME} commands add <category> <name> [description...]")
            return
        category, name, *words = self.args
        description = " ".join(words) or "TODO"

        init = Init([category, name, description], self.context)
        init.run()
        if not init.created:
            return

        # markers read by the agent driving this command
        self.puts("---")
        self.puts("SCAFFOLD_CREATED=true")
        self.puts(f"DESCRIPTION={description}")
