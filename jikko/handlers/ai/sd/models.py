"""Models available on the GPU host."""

from pathlib import PurePosixPath

from ....commands.registry import command
from ....constants import DEFAULT_SD_HOST
from ...interface import Command
from . import REMOTE_LORAS_DIR, REMOTE_MODELS_DIR


@command("ai", "sd", "models")
class Models(Command):
    """List the checkpoints and LoRAs installed on the GPU host."""

    def run(self) -> None:
        host = self.config.get_str("sd_host", DEFAULT_SD_HOST)
        self.title(f"SD Models on {host}")
        for label, directory in (("Checkpoints", REMOTE_MODELS_DIR), ("LoRAs", REMOTE_LORAS_DIR)):
            self.puts()
            self.info(label)
            listing = self.capture(["ssh", host, f"ls -1 {directory}/*.gguf 2>/dev/null"])
            names = [PurePosixPath(line.strip()).name for line in listing.splitlines() if line.strip()]
            if not names:
                self.muted("(none)")
            for name in names:
                self.puts(name)
