"""Plugin source checkout versus installed copy."""

from __future__ import annotations

from pathlib import Path

from ....commands.registry import command
from ...interface import Command

DEFAULT_PLUGIN = "browse@saiden"
DEFAULT_PLUGIN_SOURCE = "~/Projects/claude-browse"
SHORT_SHA = 7


@command("util", "check", "plugin")
class Plugin(Command):
    """[name@marketplace] Compare a plugin's source checkout with its installed copy.

    Defaults come from the `plugin` and `plugin_source` settings.
    """

    def run(self) -> None:
        plugin = self.args[0] if self.args else self.config.get_str("plugin", DEFAULT_PLUGIN)
        self.title(f"Plugin: {plugin}")

        source_commit = self.check_source(self.config.get_path("plugin_source", DEFAULT_PLUGIN_SOURCE))
        installed_commit = self.check_installed(plugin)

        self.puts()
        if not (source_commit and installed_commit):
            return
        if source_commit == installed_commit:
            self.ok(f"In sync ({source_commit})")
        else:
            self.err(f"Out of sync: source={source_commit}, installed={installed_commit}")

    def check_source(self, source: Path) -> str | None:
        """Print the state of the source checkout, return its short commit."""
        if not source.is_dir():
            return None
        git = ["git", "-C", str(source)]
        commit = self.capture([*git, "rev-parse", "HEAD"]).strip()[:SHORT_SHA]
        package = self.read_json(source / "package.json")
        version = package.get("version") if isinstance(package, dict) else None
        dirty = len(self.capture([*git, "status", "--porcelain"]).splitlines())

        self.info("Source")
        self.puts(f"  Version: {version}")
        self.puts(f"  Commit:  {commit}")
        if dirty:
            self.warn(f"  {dirty} uncommitted")
        else:
            self.ok("  Clean")
        return commit or None

    def check_installed(self, plugin: str) -> str | None:
        """Print the installed version, return its short commit."""
        self.puts()
        self.info("Installed")
        data = self.read_json(self.claude_dir / "plugins" / "installed_plugins.json")
        if not isinstance(data, dict):
            self.muted("  Not found")
            return None
        installs = (data.get("plugins") or {}).get(plugin)
        if not installs:
            self.muted("  Not installed")
            return None

        install = installs[0]
        commit = (install.get("gitCommitSha") or "")[:SHORT_SHA]
        self.puts(f"  Version: {install.get('version')}")
        self.puts(f"  Commit:  {commit}")
        return commit or None
