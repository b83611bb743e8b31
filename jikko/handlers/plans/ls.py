"""Saved plans overview."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ...commands.registry import command
from ..interface import Command

TITLE_WIDTH = 40

_TITLE = re.compile(r"^# (.+)", re.MULTILINE)
_PHASE = re.compile(r"^## Phase", re.MULTILINE)
_PROJECT_PATTERNS = (
    re.compile(r"lib/([a-z_-]+)/", re.IGNORECASE),
    re.compile(r"Projects/([a-z_-]+)/", re.IGNORECASE),
    re.compile(r"src/([a-z_-]+)/", re.IGNORECASE),
)


@dataclass
class Plan:
    """Summary of a plan file."""

    file: str
    title: str
    phases: int
    project: str
    modified: datetime

    @classmethod
    def from_file(cls, path: Path) -> Plan:
        content = path.read_text(encoding="utf-8", errors="replace")
        title_match = _TITLE.search(content)
        title = title_match.group(1).removeprefix("Plan: ") if title_match else "(untitled)"
        return cls(
            file=path.name,
            title=title,
            phases=len(_PHASE.findall(content)),
            project=extract_project(content),
            modified=datetime.fromtimestamp(path.stat().st_mtime),
        )


def extract_project(content: str) -> str:
    """Guess the project a plan is about from the paths it mentions."""
    for pattern in _PROJECT_PATTERNS:
        match = pattern.search(content)
        if match:
            return match.group(1)
    return "-"


@command("plans", "ls")
class Ls(Command):
    """List saved plans, most recent first."""

    @property
    def plans_dir(self) -> Path:
        return self.claude_dir / "plans"

    def run(self) -> None:
        plans = [Plan.from_file(path) for path in self.plans_dir.glob("*.md")]
        if not plans:
            self.muted("No plans found")
            return
        plans.sort(key=lambda p: p.modified, reverse=True)
        self.table(
            ["Modified", "Project", "Title", "Phases"],
            [[p.modified.strftime("%Y-%m-%d"), p.project, p.title[:TITLE_WIDTH], p.phases] for p in plans],
        )
