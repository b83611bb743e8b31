"""Semantic version bump for the project in the current directory."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..commands.registry import command
from .interface import Command


@dataclass(frozen=True)
class ProjectType:
    """Where a kind of project stores its version."""

    name: str
    file: str  # file name or glob pattern
    pattern: re.Pattern[str]  # group 1 is the version


PROJECT_TYPES = (
    ProjectType("rust", "Cargo.toml", re.compile(r'^version = "(.+?)"', re.MULTILINE)),
    ProjectType("python", "pyproject.toml", re.compile(r'^version = "(.+?)"', re.MULTILINE)),
    ProjectType("node", "package.json", re.compile(r'"version":\s*"(.+?)"')),
    ProjectType("ruby", "lib/**/version.rb", re.compile(r"VERSION\s*=\s*[\"'](.+?)[\"']")),
)

BUMP_TYPES = ("major", "minor", "patch")


def bump_version(current: str, bump_type: str = "patch") -> str:
    """Return `current` bumped by `bump_type`; unknown types bump the patch level.

    Missing components count as 0: "1.2" -> "1.2.1".
    """
    parts = [int(p) if p.isdigit() else 0 for p in current.split(".")[:3]]
    major, minor, patch = parts + [0] * (3 - len(parts))
    if bump_type == "major":
        return f"{major + 1}.0.0"
    if bump_type == "minor":
        return f"{major}.{minor + 1}.0"
    return f"{major}.{minor}.{patch + 1}"


def detect_project(root: Path) -> tuple[ProjectType, Path] | None:
    """Find the first supported version file under `root`."""
    for project in PROJECT_TYPES:
        if "*" in project.file:
            matches = sorted(root.glob(project.file))
            if matches:
                return project, matches[0]
        elif (root / project.file).exists():
            return project, root / project.file
    return None


@command("bump")
class Bump(Command):
    """[major|minor|patch] Bump the project version, commit and tag it.

    Supports Cargo.toml, pyproject.toml, package.json and lib/**/version.rb.
    Flags: --dry-run (only show the preview), --no-git (skip commit and tag).
    """

    def run(self) -> None:
        positional = self.positional()
        flagged = [arg[2:] for arg in self.args if arg[2:] in BUMP_TYPES and arg.startswith("--")]
        bump_type = (flagged or positional or ["patch"])[0]
        dry_run = "--dry-run" in self.args
        no_git = "--no-git" in self.args

        if bump_type not in BUMP_TYPES:
            self.err(f"Unknown bump type: {bump_type} (expected {', '.join(BUMP_TYPES)})")
            return

        detected = detect_project(Path.cwd())
        if detected is None:
            raise self.fail("No supported project found")
        project, version_file = detected

        content = version_file.read_text(encoding="utf-8")
        match = project.pattern.search(content)
        if match is None:
            raise self.fail(f"Version not found in {version_file.name}")
        current = match.group(1)
        new = bump_version(current, bump_type)

        with self.frame("Version Bump"):
            self.puts(f"Project:  {project.name} ({version_file.name})")
            self.puts(f"Current:  {current}")
            self.puts(f"New:      {new}")
            self.puts(f"Type:     {bump_type}")
            if dry_run:
                self.puts("(dry run)")
        if dry_run:
            return

        with self.spin(f"Updating {version_file.name}"):
            start, end = match.span(1)
            version_file.write_text(content[:start] + new + content[end:], encoding="utf-8")

        if not no_git:
            with self.spin("Committing"):
                self.sh(["git", "add", str(version_file)], quiet=True)
                self.sh(["git", "commit", "-m", new], quiet=True)
            with self.spin(f"Tagging v{new}"):
                self.sh(["git", "tag", "-a", f"v{new}", "-m", f"v{new}"], quiet=True)

        self.puts()
        self.ok(f"{current} -> {new}")
