"""Terminal output for commands.

Everything jikko prints for the user goes through a `Console`, built once
at startup from a `UIConfig` and handed to the router and the handlers.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

from .ansi import BOLD, CYAN, UIStyles, colorize, should_colorize, visible_len

__all__ = ["Console", "UIConfig"]

CHECK = "✓"
CROSS = "✗"
PENDING = "…"


@dataclass
class UIConfig:
    """Output settings.

    Attributes:
        color: Use ANSI colors. Decided from `stream` when left to None.
        stream: Where to write, defaults to stdout.
    """

    color: bool | None = None
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def __post_init__(self) -> None:
        if self.color is None:
            self.color = should_colorize(self.stream)


class Console:
    """Formatting helpers writing to the configured stream."""

    def __init__(self, config: UIConfig | None = None) -> None:
        self.config = config or UIConfig()

    def style(self, text: str, *codes: str) -> str:
        """Colorize `text` if colors are enabled."""
        if not self.config.color:
            return text
        return colorize(text, *codes)

    def puts(self, msg: Any = "") -> None:  # noqa: ANN401
        """Print a line."""
        print(msg, file=self.config.stream)

    def ok(self, msg: str) -> None:
        """Print a success line."""
        self.puts(f"{self.style(CHECK, *UIStyles.OK)} {self.style(msg, *UIStyles.OK)}")

    def warn(self, msg: str) -> None:
        """Print a warning line."""
        self.puts(f"{self.style(CROSS, *UIStyles.WARN)} {self.style(msg, *UIStyles.WARN)}")

    def err(self, msg: str) -> None:
        """Print an error line."""
        self.puts(f"{self.style(CROSS, *UIStyles.ERROR)} {self.style(msg, *UIStyles.ERROR)}")

    def info(self, msg: str) -> None:
        self.puts(self.style(msg, *UIStyles.INFO))

    def muted(self, msg: str) -> None:
        self.puts(self.style(msg, *UIStyles.MUTED))

    def bold(self, msg: str) -> str:
        return self.style(msg, *UIStyles.TITLE)

    def title(self, msg: str) -> None:
        """Print a bold title underlined in cyan."""
        self.puts()
        self.puts(self.bold(msg))
        self.puts(self.style("─" * len(msg), CYAN))

    @contextmanager
    def frame(self, title: str, color: str = CYAN) -> Iterator[None]:
        """Surround the output printed in the block with a titled frame."""
        self.puts(self.style(f"┏━━ {title} ", color, BOLD) + self.style("━" * max(4, 39 - len(title)), color))
        try:
            yield
        finally:
            self.puts(self.style("┗" + "━" * max(44, len(title) + 8), color))

    @contextmanager
    def spin(self, title: str) -> Iterator[None]:
        """Report the progress of the block: pending, then done or failed.

        Exceptions raised in the block are reported and re-raised.
        """
        self.puts(self.style(f"{PENDING} {title}", *UIStyles.MUTED))
        try:
            yield
        except BaseException:
            self.puts(f"{self.style(CROSS, *UIStyles.ERROR)} {title}")
            raise
        self.puts(f"{self.style(CHECK, *UIStyles.OK)} {title}")

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
        """Print `rows` aligned in columns under `headers`.

        Nothing is printed when there are no rows.
        """
        if not rows:
            return
        cells = [[str(c) for c in row] for row in rows]
        widths = [
            max([len(str(header))] + [visible_len(row[i]) for row in cells if i < len(row)])
            for i, header in enumerate(headers)
        ]

        def pad(text: str, width: int) -> str:
            return text + " " * (width - visible_len(text))

        header_row = " │ ".join(self.style(pad(str(h), widths[i]), *UIStyles.HEADER) for i, h in enumerate(headers))
        self.puts(f" {header_row} ")
        self.puts("─" + "─┼─".join("─" * w for w in widths) + "─")
        for row in cells:
            line = " │ ".join(pad(row[i] if i < len(row) else "", w) for i, w in enumerate(widths))
            self.puts(f" {line} ")
