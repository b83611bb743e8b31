"""Handler docstrings as help text."""

from __future__ import annotations

import re

from ..models import CommandArg

__all__ = ["parse_docstring"]

NO_DESCRIPTION = "No description available."

# <required> or [optional]
_HINT = re.compile(r"\s*([<\[])([^>\]]+)[>\]]")


def parse_docstring(docstring: str | None) -> tuple[list[CommandArg], str, str]:
    """Split a handler docstring into argument hints and descriptions.

    Only the hints opening the first line are arguments::

        <category> <name> [description...] Scaffold a new command

    Returns:
        (args, short description, full docstring)
    """
    if not docstring:
        return [], NO_DESCRIPTION, ""

    full = docstring.strip()
    first = full.splitlines()[0].strip()

    args: list[CommandArg] = []
    pos = 0
    while match := _HINT.match(first, pos):
        args.append(CommandArg(value=match.group(2), required=match.group(1) == "<"))
        pos = match.end()

    return args, first[pos:].strip() or first, full
