"""Jikko - command line entry point."""

import sys
from collections.abc import Sequence

from .commands.registry import HandlerRegistry, load_handlers
from .commands.router import AppContext, Router
from .config import ConfigLoader, Configuration
from .constants import HANDLERS_PACKAGE
from .logging_setup import get_logger, init_logger
from .models import ExitCode, JikkoError
from .ui import Console, UIConfig

__all__ = ["main", "run"]

# options taking a value, accepted before the command path only
GLOBAL_OPTIONS = ("--debug", "--config")


def use_params(args: Sequence[str]) -> tuple[dict[str, str], list[str]]:
    """Take the leading global options off `args`.

    Returns:
        The options found (name -> value) and the remaining arguments,
        handed untouched to the router
    """
    params: dict[str, str] = {}
    rest = list(args)
    while rest and rest[0] in GLOBAL_OPTIONS:
        name = rest.pop(0)
        params[name] = rest.pop(0) if rest else ""
    return params, rest


def setup_registry(config: Configuration) -> HandlerRegistry:
    """Build the registry of the built-in handlers and of the configured packages.

    Raises:
        JikkoError: If two handlers map to the same identifier
    """
    registry = HandlerRegistry()
    registry.add_acronyms(config.get_list("acronyms"))
    for package in [HANDLERS_PACKAGE, *config.get_list("handler_packages")]:
        load_handlers(registry, package)
    return registry


def run(argv: Sequence[str]) -> ExitCode:
    """Run jikko with `argv` (without the program name).

    Returns:
        The process exit code
    """
    params, args = use_params(argv)
    if params.get("--debug"):
        init_logger(filename=params["--debug"], force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")

    try:
        config = ConfigLoader(get_logger("config")).load(params.get("--config") or None)
    except JikkoError:
        return ExitCode.CONFIG_ERROR

    console = Console(UIConfig(color=config.color_mode()))
    try:
        registry = setup_registry(config)
    except JikkoError as e:
        log.critical("Invalid command registration: %s", e)
        return ExitCode.CONFIG_ERROR

    router = Router(AppContext(console=console, config=config, registry=registry))
    try:
        return router(args)
    except KeyboardInterrupt:
        return ExitCode.INTERRUPTED
    except JikkoError:
        log.critical("Command failed.")
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
    return ExitCode.COMMAND_ERROR


def main() -> None:
    """Run the command."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
