"""MCP server configurations visible from the current directory."""

from pathlib import Path

from ....commands.registry import command
from ...interface import Command
from . import MCP_FILES, describe_servers, mcp_servers


@command("util", "check", "mcp")
class Mcp(Command):
    """Find the MCP configurations below, above and outside the current directory."""

    def run(self) -> None:
        cwd = Path.cwd()
        self.title("MCP Configuration")
        self.muted(f"pwd: {cwd}")
        self.check_current(cwd)
        self.check_parents(cwd)
        self.check_global()

    def check_current(self, cwd: Path) -> None:
        self.puts()
        self.info("Current Directory")
        found = sorted(path for name in MCP_FILES for path in cwd.rglob(name) if "node_modules" not in path.parts)
        if not found:
            self.muted("(none)")
        for path in found:
            self.ok(f"{path.relative_to(cwd)}: {describe_servers(self.read_json(path))}")

    def check_parents(self, cwd: Path) -> None:
        self.puts()
        self.info("Parent Directories")
        found = 0
        # the filesystem root is not searched
        for directory in cwd.parents[:-1]:
            for name in MCP_FILES:
                path = directory / name
                if path.exists():
                    found += 1
                    self.warn(f"{self.home(path)}: {describe_servers(self.read_json(path))}")
        if not found:
            self.muted("(none)")

    def check_global(self) -> None:
        self.puts()
        self.info("Global Configs")
        servers = mcp_servers(self.read_json(self.settings_path))
        if servers:
            self.ok(f"settings.json: {', '.join(servers)}")

        cache = self.claude_dir / "plugins" / "cache"
        for name in MCP_FILES:
            for path in sorted(cache.glob(f"**/.claude-plugin/{name}")):
                self.ok(f"Plugin: {describe_servers(self.read_json(path))}")
