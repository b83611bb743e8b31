"""Model conversion to GGUF on the GPU host."""

import shlex

from ....commands.registry import command
from ....constants import DEFAULT_SD_HOST, PROGRAM_NAME
from ...interface import Command

DEFAULT_QUANTIZATION = "q8_0"


@command("ai", "sd", "convert")
class Convert(Command):
    """<model> Convert a model to GGUF on the GPU host.

    Option: --type <quantization> (q8_0 by default).
    """

    valued_flags = frozenset({"--type"})

    def run(self) -> None:
        positional = self.positional()
        if not positional:
            self.err(f"Usage: {PROGRAM_NAME} ai sd convert <model> [--type {DEFAULT_QUANTIZATION}]")
            return
        model = positional[0]
        quantization = self.option("--type", default=DEFAULT_QUANTIZATION)
        host = self.config.get_str("sd_host", DEFAULT_SD_HOST)

        self.title("Convert to GGUF")
        self.puts(f"Model: {model}")
        self.puts(f"Type:  {quantization}")
        self.puts()

        remote_cmd = f"tsr convert {shlex.quote(model)} --type {shlex.quote(quantization)}"
        with self.spin(f"Converting on {host}"):
            if not self.sh(["ssh", host, remote_cmd], quiet=True):
                raise self.fail(f"Conversion failed on {host}")

        self.ok("Conversion complete")
