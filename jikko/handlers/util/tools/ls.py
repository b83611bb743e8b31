"""Whitelisted tool permissions."""

from ....commands.registry import command
from ...interface import Command
from . import allowed_permissions


@command("util", "tools", "ls")
class Ls(Command):
    """List the whitelisted tool permissions."""

    def run(self) -> None:
        permissions = allowed_permissions(self.read_json(self.settings_path))
        if not permissions:
            self.muted("No tool permissions whitelisted")
            return
        self.title("Whitelisted Permissions")
        for permission in permissions:
            self.puts(f"  {permission}")
