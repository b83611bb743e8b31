"""Recently used branches."""

from ...commands.registry import command
from ..interface import Command

MAX_BRANCHES = 20

BRANCH_FORMAT = "\t".join(
    [
        "%(refname:short)",
        "%(objectname:short)",
        "%(contents:subject)",
        "%(authorname)",
        "%(committerdate:relative)",
    ]
)


@command("git", "branches")
class Branches(Command):
    """List local branches, most recently committed first."""

    def run(self) -> None:
        output = self.capture(
            [
                "git",
                "for-each-ref",
                "--sort=-committerdate",
                f"--count={MAX_BRANCHES}",
                f"--format={BRANCH_FORMAT}",
                "refs/heads/",
            ]
        )
        rows = list(self.rows(output))
        if rows:
            self.table(["Branch", "Hash", "Message", "Author", "Age"], rows)
        else:
            self.muted("No branches found")
