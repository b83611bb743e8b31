"""Logging configuration.

Every logger lives below "jikko" and shares the handlers built by
`init_logger`: a colored screen handler and, with ``--debug <file>``, a
plain file handler.
"""

import logging

from .ansi import LogStyles, make_style, should_colorize
from .debug import is_debug, set_debug

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
]

ROOT_LOGGER = "jikko"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"
DEBUG_SCREEN_FORMAT = "%(name)18s - %(message)s // %(filename)s:%(lineno)d"


class LogObjects:
    """Handlers shared by the jikko loggers."""

    handlers: list[logging.Handler] = []


class ScreenLogFormatter(logging.Formatter):
    """Formatter coloring warnings, errors and critical records."""

    def __init__(self) -> None:
        super().__init__()
        fmt = DEBUG_SCREEN_FORMAT if is_debug() else "%(message)s"
        colored = should_colorize()
        self._by_level = {logging.INFO: logging.Formatter(fmt)}
        for level, style in (
            (logging.WARNING, LogStyles.WARNING),
            (logging.ERROR, LogStyles.ERROR),
            (logging.CRITICAL, LogStyles.CRITICAL),
        ):
            start, end = make_style(*style) if colored else ("", "")
            self._by_level[level] = logging.Formatter(start + fmt + end)

    def format(self, record: logging.LogRecord) -> str:
        return self._by_level.get(record.levelno, self._by_level[logging.INFO]).format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """(Re)build the shared handlers.

    Args:
        filename: Also write every record to this file
        force_debug: Turn the debug mode on
    """
    if force_debug:
        set_debug(True)

    for handler in LogObjects.handlers:
        handler.close()
    LogObjects.handlers.clear()

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT))
        LogObjects.handlers.append(file_handler)
    screen = logging.StreamHandler()
    screen.setFormatter(ScreenLogFormatter())
    LogObjects.handlers.append(screen)

    # loggers created earlier must drop the closed handlers
    for name in list(logging.root.manager.loggerDict):
        if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
            _attach(logging.getLogger(name))


def _attach(logger: logging.Logger, level: int | None = None) -> None:
    if level is None:
        level = logging.DEBUG if is_debug() else logging.WARNING
    logger.setLevel(level)
    logger.handlers[:] = LogObjects.handlers
    logger.propagate = False


def get_logger(name: str = ROOT_LOGGER, level: int | None = None) -> logging.Logger:
    """Return the logger `name`, placed below "jikko" when needed.

    The level defaults to DEBUG in debug mode, WARNING otherwise.
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name)
    _attach(logger, level)
    return logger
