"""Running containers."""

from ...commands.registry import command
from ..interface import Command


@command("docker", "ps")
class PS(Command):
    """List running containers."""

    def run(self) -> None:
        output = self.capture(["docker", "ps", "--format", "{{.ID}}\t{{.Image}}\t{{.Status}}\t{{.Names}}"])
        rows = list(self.rows(output))
        if rows:
            self.table(["ID", "Image", "Status", "Names"], rows)
        else:
            self.muted("No containers running")
