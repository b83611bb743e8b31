"""Handler identifiers derived from command paths."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..constants import ACRONYMS

__all__ = ["camelize", "handler_identifier", "path_key"]

_WORD_SEPARATORS = re.compile(r"[_-]")


def camelize(segment: str, acronyms: Iterable[str] = ACRONYMS) -> str:
    """Convert one path segment to its identifier part.

    Acronyms are upper-cased verbatim, other segments are split on "_" and "-"
    and each word is capitalized: "force_push" -> "ForcePush", "sd" -> "SD".

    Args:
        segment: A single path segment
        acronyms: Lower case segments to upper-case instead
    """
    if segment.lower() in acronyms:
        return segment.upper()
    return "".join(word.capitalize() for word in _WORD_SEPARATORS.split(segment))


def handler_identifier(path: Iterable[str], acronyms: Iterable[str] = ACRONYMS) -> str:
    """Build the qualified handler identifier for `path`.

    E.g. ("ai", "sd", "generate") -> "AI.SD.Generate"
    """
    acronyms = frozenset(a.lower() for a in acronyms)
    return ".".join(camelize(segment, acronyms) for segment in path)


def path_key(path: Iterable[str]) -> str:
    """Join path segments the way the registry stores them: "git/status"."""
    return "/".join(path)
