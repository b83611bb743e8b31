"generic fixtures"
from io import StringIO

from pytest import fixture

from jikko.commands.registry import HandlerRegistry, load_handlers
from jikko.commands.router import AppContext, Router
from jikko.config import Configuration
from jikko.logging_setup import get_logger
from jikko.ui import Console, UIConfig

from .testtools import FakeRun


def pytest_configure():
    "Runs once before all"
    from jikko.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@fixture
def output():
    "Captures what the console prints"
    return StringIO()


@fixture
def console(output):
    return Console(UIConfig(color=False, stream=output))


@fixture
def test_logger():
    return get_logger("tests")


@fixture
def config(test_logger):
    "An empty configuration"
    return Configuration(logger=test_logger)


@fixture
def registry():
    "A registry without any handler"
    return HandlerRegistry()


@fixture
def builtin_registry():
    "The registry holding the built-in handlers"
    registry = HandlerRegistry()
    load_handlers(registry)
    return registry


@fixture
def context(console, config, builtin_registry):
    return AppContext(console=console, config=config, registry=builtin_registry)


@fixture
def router(context):
    return Router(context)


@fixture
def fake_run(monkeypatch):
    "Replaces subprocess.run for handlers"
    fake = FakeRun()
    monkeypatch.setattr("jikko.handlers.interface.subprocess.run", fake)
    return fake


@fixture
def claude_dir(tmp_path, config):
    "Points `claude_dir` to a temporary directory"
    path = tmp_path / "claude"
    path.mkdir()
    config["claude_dir"] = str(path)
    return path


@fixture
def handler_package(tmp_path, monkeypatch):
    "Factory writing an importable package of handler modules"
    monkeypatch.syspath_prepend(str(tmp_path))

    def make(name, modules):
        root = tmp_path / name
        root.mkdir()
        (root / "__init__.py").write_text("")
        for module, source in modules.items():
            (root / f"{module}.py").write_text(source)
        return name

    return make
