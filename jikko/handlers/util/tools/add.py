"""Whitelist a tool permission."""

from ....commands.registry import command
from ....constants import PROGRAM_NAME
from ...interface import Command


@command("util", "tools", "add")
class Add(Command):
    """<permission> Whitelist a tool permission, e.g. "Bash(git status:*)"."""

    def run(self) -> None:
        if not self.args:
            self.err(f"Usage: {PROGRAM_NAME} util tools add <permission>")
            return
        permission = self.args[0]

        data = self.read_json(self.settings_path)
        if not isinstance(data, dict):
            data = {}
        allowed = data.setdefault("permissions", {}).setdefault("allow", [])

        if permission in allowed:
            self.warn(f"Already whitelisted: {permission}")
            return

        allowed.append(permission)
        self.write_json(self.settings_path, data)
        self.ok(f"Added: {permission}")
