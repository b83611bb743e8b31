"""Debug mode state.

Debug mode is enabled by the `DEBUG` environment variable or by
`jikko --debug <logfile>`; it raises every jikko logger to DEBUG level.
"""

import os

__all__ = [
    "is_debug",
    "set_debug",
]


class _DebugState:
    """Debug flags set at startup."""

    enabled: bool = bool(os.environ.get("DEBUG"))


_debug_state = _DebugState()


def is_debug() -> bool:
    """Return the current debug state."""
    return _debug_state.enabled


def set_debug(value: bool) -> None:
    """Set the debug state."""
    _debug_state.enabled = value
