"""Remove a tool permission from the whitelist."""

import sys

from ....commands.registry import command
from ....constants import PROGRAM_NAME
from ...interface import Command
from . import allowed_permissions


@command("util", "tools", "rm")
class Rm(Command):
    """[permission] Remove a whitelisted tool permission, asks which one when omitted."""

    def run(self) -> None:
        data = self.read_json(self.settings_path)
        if data is None:
            self.err("No settings.json found")
            return
        permissions = allowed_permissions(data)

        if self.args:
            permission = self.args[0]
        elif permissions and sys.stdin.isatty():
            permission = self.select("Remove which permission?", permissions)
            if permission is None:
                return
        else:
            self.err(f"Usage: {PROGRAM_NAME} util tools rm <permission>")
            return

        if permission not in permissions:
            self.warn(f"Not in whitelist: {permission}")
            return

        data["permissions"]["allow"].remove(permission)
        self.write_json(self.settings_path, data)
        self.ok(f"Removed: {permission}")
