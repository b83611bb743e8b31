"""Tests for the handler base class."""

import subprocess

import pytest

from jikko.handlers.interface import COMMAND_NOT_FOUND, Command
from jikko.models import JikkoError


class Sample(Command):
    """[words...] Sample command."""

    valued_flags = frozenset({"-n", "--name"})

    def run(self):
        self.puts(" ".join(self.positional()))


def test_call_uses_context(context, output):
    Sample.call(["hello", "-n", "skipped", "world", "--verbose"], context=context)
    assert output.getvalue() == "hello world\n"


def test_without_context():
    cmd = Sample(["a"])
    assert cmd.context is None
    assert cmd.config == {}
    assert cmd.args == ["a"]


def test_base_run_not_implemented():
    with pytest.raises(NotImplementedError):
        Command.call([])


def test_option(context):
    cmd = Sample(["-n", "x", "--name"], context)
    assert cmd.option("-n") == "x"
    assert cmd.option("--name", default="d") == "d"
    assert cmd.option("--missing", default="d") == "d"
    assert cmd.option("--name", "-n") == "x"


def test_fail(context, output):
    error = Sample([], context).fail("nope")
    assert isinstance(error, JikkoError)
    assert "✗ nope" in output.getvalue()


def test_paths(context, claude_dir, monkeypatch, tmp_path):
    cmd = Sample([], context)
    assert cmd.claude_dir == claude_dir
    assert cmd.settings_path == claude_dir / "settings.json"
    monkeypatch.setenv("HOME", str(tmp_path))
    assert cmd.home(tmp_path / "a" / "b") == "~/a/b"
    assert cmd.home("/elsewhere") == "/elsewhere"


def test_json_roundtrip(context, tmp_path):
    cmd = Sample([], context)
    path = tmp_path / "sub" / "data.json"
    assert cmd.read_json(path) is None
    cmd.write_json(path, {"a": [1, 2]})
    assert path.read_text().endswith("\n")
    assert cmd.read_json(path) == {"a": [1, 2]}


def test_read_invalid_json(context, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{nope")
    assert Sample([], context).read_json(path) is None


def test_shell_helpers(context, fake_run):
    fake_run.outputs["git branch"] = "main\n"
    fake_run.failures.append("false")
    cmd = Sample([], context)
    assert cmd.sh("true") is True
    assert cmd.sh(["false", "x"]) is False
    assert cmd.capture("git branch --show-current") == "main\n"
    assert cmd.sh_result("false") == (False, "")
    assert fake_run.calls == ["true", "false x", "git branch --show-current", "false"]


def test_shell_uses_shell_for_strings(context, monkeypatch):
    seen = []

    def fake(cmd, **kwargs):
        seen.append(kwargs["shell"])
        return subprocess.CompletedProcess(cmd, 0, stdout="")

    monkeypatch.setattr("jikko.handlers.interface.subprocess.run", fake)
    cmd = Sample([], context)
    cmd.sh("echo hi")
    cmd.sh(["echo", "hi"])
    assert seen == [True, False]


def test_missing_program(context, monkeypatch):
    def fake(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file", cmd[0])

    monkeypatch.setattr("jikko.handlers.interface.subprocess.run", fake)
    cmd = Sample([], context)
    assert cmd.sh(["no-such-program"]) is False
    assert cmd.capture(["no-such-program"]) == ""
    assert cmd.sh_result(["no-such-program"]) == (False, "")
    assert COMMAND_NOT_FOUND == 127


def test_rows():
    assert list(Command.rows("a\tb\n\n c\td \n")) == [["a", "b"], ["c", "d"]]


def test_prompts(context, mocker):
    select = mocker.patch("jikko.handlers.interface.questionary.select")
    select.return_value.ask.return_value = "two"
    confirm = mocker.patch("jikko.handlers.interface.questionary.confirm")
    confirm.return_value.ask.return_value = None

    cmd = Sample([], context)
    assert cmd.select("Which?", ("one", "two")) == "two"
    select.assert_called_once_with("Which?", choices=["one", "two"])
    assert cmd.confirm("Sure?") is False
