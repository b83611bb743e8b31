"""Help text generation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .ansi import UIStyles
from .constants import PROGRAM_NAME
from .models import CommandInfo, HandlerEntry
from .version import VERSION

if TYPE_CHECKING:
    from .commands.registry import HandlerRegistry
    from .ui import Console

__all__ = ["format_usage", "get_command_help", "get_help"]


def format_usage(info: CommandInfo) -> str:
    """Return the command name followed by its argument hints.

    E.g. "commands add <category> <name> [description...]"
    """
    hints = [f"<{arg.value}>" if arg.required else f"[{arg.value}]" for arg in info.args]
    return " ".join([info.name, *hints])


def _listing(registry: HandlerRegistry, entries: Sequence[HandlerEntry], console: Console, strip: int = 0) -> list[str]:
    """One line per entry: usage then short description."""
    infos = [registry.info(entry) for entry in entries]
    usages = [" ".join(format_usage(info).split(" ")[strip:]) for info in infos]
    width = max((len(u) for u in usages), default=0) + 2
    return [f"  {usage:{width}s}{console.style(info.short_description, *UIStyles.MUTED)}" for usage, info in zip(usages, infos, strict=True)]


def get_help(registry: HandlerRegistry, console: Console) -> str:
    """Get the general help: usage banner and every registered command."""
    lines = [
        f"{console.bold(PROGRAM_NAME)} v{VERSION}",
        "",
        f"{console.style('Usage:', *UIStyles.INFO)} {PROGRAM_NAME} <command> [args]",
        f"       {PROGRAM_NAME} help <command>",
        "",
        console.style("Commands:", *UIStyles.INFO),
    ]
    lines.extend(_listing(registry, registry.entries(), console))
    return "\n".join(lines)


def get_command_help(registry: HandlerRegistry, words: Sequence[str], console: Console) -> str:
    """Get detailed help for a command or a namespace.

    Unknown commands get a notice followed by the general help.

    Args:
        registry: The handler registry
        words: The command path as typed, e.g. ["git", "status"]
        console: Used for styling
    """
    path = tuple(w for w in words if not w.startswith("-"))
    lines: list[str] = []

    entry = registry.load(path)
    if entry is not None:
        info = registry.info(entry)
        lines += [
            f"{console.bold(info.name)} ({info.identifier})",
            "",
            f"{console.style('Usage:', *UIStyles.INFO)} {PROGRAM_NAME} {format_usage(info)}",
        ]
        if info.full_description:
            lines += ["", info.full_description]

    if registry.has_namespace(path):
        if lines:
            lines.append("")
        else:
            lines += [console.bold(" ".join(path)), ""]
        lines.append(console.style("Subcommands:", *UIStyles.INFO))
        lines.extend(_listing(registry, registry.children(path), console, strip=len(path)))

    if not lines:
        notice = console.style(f"Unknown command: {' '.join(words)}", *UIStyles.ERROR)
        return f"{notice}\n\n{get_help(registry, console)}"
    return "\n".join(lines)
