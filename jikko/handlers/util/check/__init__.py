"""Claude Code configuration checks."""

from pathlib import Path
from typing import Any

__all__ = ["MCP_FILES", "count_lines", "describe_servers", "mcp_servers", "project_key"]

MCP_FILES = (".mcp.json", "mcp.json")


def mcp_servers(data: Any) -> list[str]:  # noqa: ANN401
    """Names of the ``mcpServers`` of decoded JSON, [] when absent."""
    if isinstance(data, dict) and isinstance(data.get("mcpServers"), dict):
        return list(data["mcpServers"])
    return []


def describe_servers(data: Any) -> str:  # noqa: ANN401
    return ", ".join(mcp_servers(data)) or "(none)"


def count_lines(path: Path) -> int:
    return len(path.read_text(encoding="utf-8", errors="replace").splitlines())


def project_key(directory: Path) -> str:
    """Name of the Claude project folder of `directory`: "/root/app" -> "-root-app"."""
    return str(directory).replace("/", "-")
