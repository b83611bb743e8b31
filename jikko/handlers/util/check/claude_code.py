"""Claude Code files applying to the current directory."""

import sys
from pathlib import Path

from ....commands.registry import command
from ...interface import Command
from . import MCP_FILES, count_lines, describe_servers, mcp_servers, project_key

if sys.platform == "darwin":
    MANAGED_SETTINGS = Path("/Library/Application Support/ClaudeCode/managed-settings.json")
else:
    MANAGED_SETTINGS = Path("/etc/claude-code/managed-settings.json")


@command("util", "check", "claude_code")
class ClaudeCode(Command):
    """Show the settings, memory and MCP files Claude Code reads here."""

    def run(self) -> None:
        cwd = Path.cwd()
        self.title("Claude Code Configuration")
        self.muted(f"pwd: {cwd}")
        self.check_settings()
        self.check_memory(cwd)
        self.check_mcp()

    def check_settings(self) -> None:
        self.puts()
        self.info("Settings Files")
        for path, label in (
            (MANAGED_SETTINGS, "Managed"),
            (Path(".claude/settings.local.json"), "Local"),
            (Path(".claude/settings.json"), "Project"),
            (self.settings_path, "User"),
        ):
            if path.exists():
                self.ok(f"{label}: {self.home(path)}")

    def check_memory(self, cwd: Path) -> None:
        self.puts()
        self.info("Memory Files (CLAUDE.md)")
        for path, label in (
            (Path("CLAUDE.local.md"), "Local"),
            (Path("CLAUDE.md"), "Project"),
            (Path(".claude/CLAUDE.md"), "Project"),
            (self.claude_dir / "CLAUDE.md", "User"),
        ):
            if path.exists():
                self.ok(f"{label} ({count_lines(path)} lines)")

        auto_memory = self.claude_dir / "projects" / project_key(cwd) / "memory" / "MEMORY.md"
        if auto_memory.exists():
            self.ok(f"Auto memory ({count_lines(auto_memory)} lines)")

    def check_mcp(self) -> None:
        self.puts()
        self.info("MCP Configuration")
        for name in MCP_FILES:
            path = Path(name)
            if path.exists():
                self.ok(f"{name}: {describe_servers(self.read_json(path))}")
        servers = mcp_servers(self.read_json(self.settings_path))
        if servers:
            self.ok(f"settings.json: {', '.join(servers)}")
