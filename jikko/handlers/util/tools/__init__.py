"""Tool permission whitelist in the Claude settings (``permissions.allow``)."""

from typing import Any

__all__ = ["allowed_permissions"]


def allowed_permissions(settings: Any) -> list[str]:  # noqa: ANN401
    """Return ``permissions.allow`` from decoded settings, [] when absent."""
    if not isinstance(settings, dict):
        return []
    permissions = settings.get("permissions")
    if not isinstance(permissions, dict):
        return []
    return list(permissions.get("allow") or [])
