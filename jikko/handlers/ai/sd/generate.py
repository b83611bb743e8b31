"""Image generation with stable-diffusion.cpp on the GPU host."""

from __future__ import annotations

import shlex
import time

from ....commands.registry import command
from ....constants import DEFAULT_SD_HOST, DEFAULT_SD_OUTPUT_DIR, PROGRAM_NAME
from ...interface import Command
from . import REMOTE_MODELS_DIR, REMOTE_OUTPUT_DIR

DEFAULT_MODEL = "obsessiveCompulsive_v20-q8_0.gguf"
NEGATIVE_PROMPT = "worst quality, low quality, lowres"
PROMPT_PREVIEW = 60


@command("ai", "sd", "generate")
class Generate(Command):
    """<prompt...> Generate an image on the GPU host and copy it locally.

    Options: -m <model>, -W <width>, -H <height>, --steps <n>, --cfg <scale>,
    -s <seed>. The host and the local output directory come from the
    `sd_host` and `sd_output_dir` settings.
    """

    valued_flags = frozenset({"-m", "-W", "-H", "--steps", "--cfg", "-s"})

    def run(self) -> None:
        prompt = " ".join(self.positional())
        if not prompt:
            self.err(f"Usage: {PROGRAM_NAME} ai sd generate <prompt>")
            return

        try:
            width = int(self.option("-W", default="512"))
            height = int(self.option("-H", default="512"))
            steps = int(self.option("--steps", default="20"))
            cfg = float(self.option("--cfg", default="6"))
            seed = int(self.option("-s", default="-1"))
        except ValueError as e:
            self.err(f"Invalid option value: {e}")
            return
        model = self.option("-m", default=DEFAULT_MODEL)
        host = self.config.get_str("sd_host", DEFAULT_SD_HOST)

        filename = f"sd_{int(time.time())}.png"
        remote = f"{REMOTE_OUTPUT_DIR}/{filename}"
        local_dir = self.config.get_path("sd_output_dir", DEFAULT_SD_OUTPUT_DIR)
        local_dir.mkdir(parents=True, exist_ok=True)
        local = local_dir / filename
        model_path = model if model.startswith("/") else f"{REMOTE_MODELS_DIR}/{model}"

        with self.frame("SD Generate"):
            self.puts(f"Model:  {model}")
            self.puts(f"Size:   {width}x{height}")
            self.puts(f"Steps:  {steps}, CFG: {cfg}")
            self.puts(f"Prompt: {prompt[:PROMPT_PREVIEW]}{'...' if len(prompt) > PROMPT_PREVIEW else ''}")

        remote_cmd = " ".join(
            [
                "HSA_OVERRIDE_GFX_VERSION=10.3.0 sd",
                f"--model {shlex.quote(model_path)}",
                f"--prompt {shlex.quote(prompt)}",
                f"-n {shlex.quote(NEGATIVE_PROMPT)}",
                f"-W {width} -H {height}",
                f"--steps {steps} --cfg-scale {cfg} -s {seed}",
                f"-o {shlex.quote(remote)}",
            ]
        )

        self.puts()
        with self.spin(f"Generating on {host}"):
            if not self.sh(["ssh", host, remote_cmd], quiet=True):
                raise self.fail(f"Generation failed on {host}")

        with self.spin("Copying to local"):
            if not self.sh(["scp", f"{host}:{remote}", str(local)], quiet=True):
                raise self.fail(f"Could not copy {remote}")

        self.puts()
        self.ok(f"Saved: {local}")
