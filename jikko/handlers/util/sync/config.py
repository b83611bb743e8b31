"""Dotfiles sync."""

from pathlib import Path

from ....commands.registry import command
from ....models import JikkoError
from ...interface import Command

DEFAULT_SYNC_HOST = "chi@junkpile"
DEFAULT_SYNC_FILES = (".gemrc", ".gitignore", ".gitconfig", ".zshrc")


@command("util", "sync", "config")
class SyncConfig(Command):
    """Copy the dotfiles of the home directory to the sync host.

    The host and the files come from the `sync_host` and `sync_files` settings.
    """

    def run(self) -> None:
        host = self.config.get_str("sync_host", DEFAULT_SYNC_HOST)
        files = self.config.get_list("sync_files") or list(DEFAULT_SYNC_FILES)

        self.title(f"Syncing to {host}")
        failed = []
        for name in files:
            local = Path.home() / name
            if not local.exists():
                self.warn(f"{name} (not found)")
                continue
            try:
                with self.spin(name):
                    if not self.sh(["scp", "-q", str(local), f"{host}:~/{name}"], quiet=True):
                        raise JikkoError(f"scp {name} failed")
            except JikkoError:
                failed.append(name)

        if failed:
            raise self.fail(f"Could not copy {', '.join(failed)}")
        self.ok("Done")
