"""Terminal colors.

Colors are skipped when ``NO_COLOR`` is set or the stream is not a
terminal, and forced with ``FORCE_COLOR``.
"""

import os
import re
import sys
from typing import TextIO

__all__ = [
    "BOLD",
    "CYAN",
    "DIM",
    "GRAY",
    "GREEN",
    "RED",
    "RESET",
    "YELLOW",
    "LogStyles",
    "UIStyles",
    "colorize",
    "make_style",
    "should_colorize",
    "strip_ansi",
    "visible_len",
]

_CSI = "\x1b["
_SGR = re.compile(r"\x1b\[[0-9;]*m")

RESET = f"{_CSI}0m"

# attributes
BOLD = "1"
DIM = "2"

# foreground
RED = "31"
GREEN = "32"
YELLOW = "33"
CYAN = "36"
GRAY = "90"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell whether `stream` (stderr by default) should receive colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    target = sys.stderr if stream is None else stream
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())


def make_style(*codes: str) -> tuple[str, str]:
    """Return the (start, end) escape sequences for `codes`.

    Used by the log formatter which needs both halves separately.
    """
    start = f"{_CSI}{';'.join(codes)}m" if codes else ""
    return start, RESET


def colorize(text: str, *codes: str) -> str:
    """Wrap `text` with the SGR `codes`, e.g. ``colorize("done", GREEN, BOLD)``."""
    if not codes:
        return text
    start, end = make_style(*codes)
    return f"{start}{text}{end}"


def strip_ansi(text: str) -> str:
    """Remove every ANSI SGR sequence from `text`."""
    return _SGR.sub("", text)


def visible_len(text: str) -> int:
    """Length of `text` as displayed on a terminal."""
    return len(strip_ansi(text))


class LogStyles:
    """Styles of the log levels above INFO."""

    WARNING = (YELLOW, DIM)
    ERROR = (RED, DIM)
    CRITICAL = (RED, BOLD)


class UIStyles:
    """Styles of the console messages."""

    OK = (GREEN,)
    WARN = (YELLOW,)
    ERROR = (RED,)
    INFO = (CYAN,)
    MUTED = (GRAY,)
    TITLE = (BOLD,)
    HEADER = (BOLD, CYAN)
