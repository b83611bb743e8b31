"""docker images."""

from ...commands.registry import command
from ..interface import Command


@command("docker", "images")
class Images(Command):
    """List local images."""

    def run(self) -> None:
        self.sh("docker images")
