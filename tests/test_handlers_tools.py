"""Tests for the tool permission commands."""

import json

import pytest

from jikko.handlers.util.tools import allowed_permissions
from jikko.handlers.util.tools.add import Add
from jikko.handlers.util.tools.ls import Ls
from jikko.handlers.util.tools.rm import Rm


@pytest.fixture
def settings(claude_dir):
    path = claude_dir / "settings.json"
    path.write_text(json.dumps({"model": "opus", "permissions": {"allow": ["Bash(ls:*)", "Read"]}}))
    return path


def allowed(path):
    return json.loads(path.read_text())["permissions"]["allow"]


def test_allowed_permissions():
    assert allowed_permissions(None) == []
    assert allowed_permissions([]) == []
    assert allowed_permissions({"permissions": "x"}) == []
    assert allowed_permissions({"permissions": {"allow": ["A"]}}) == ["A"]


def test_ls(context, settings, output):
    Ls.call([], context=context)
    lines = output.getvalue().splitlines()
    assert "Whitelisted Permissions" in lines
    assert lines[-2:] == ["  Bash(ls:*)", "  Read"]


def test_ls_without_settings(context, claude_dir, output):
    Ls.call([], context=context)
    assert output.getvalue() == "No tool permissions whitelisted\n"


def test_add(context, settings, output):
    Add.call(["Bash(git status:*)"], context=context)
    assert allowed(settings) == ["Bash(ls:*)", "Read", "Bash(git status:*)"]
    assert json.loads(settings.read_text())["model"] == "opus"
    assert "Added: Bash(git status:*)" in output.getvalue()


def test_add_creates_settings(context, claude_dir):
    Add.call(["Read"], context=context)
    assert allowed(claude_dir / "settings.json") == ["Read"]


def test_add_duplicate(context, settings, output):
    Add.call(["Read"], context=context)
    assert allowed(settings) == ["Bash(ls:*)", "Read"]
    assert "Already whitelisted: Read" in output.getvalue()


def test_rm(context, settings, output):
    Rm.call(["Read"], context=context)
    assert allowed(settings) == ["Bash(ls:*)"]
    assert "Removed: Read" in output.getvalue()


def test_rm_unknown(context, settings, output):
    Rm.call(["Write"], context=context)
    assert allowed(settings) == ["Bash(ls:*)", "Read"]
    assert "Not in whitelist: Write" in output.getvalue()


def test_rm_without_settings(context, claude_dir, output):
    Rm.call(["Read"], context=context)
    assert "No settings.json found" in output.getvalue()


def test_rm_interactive(context, settings, mocker):
    stdin = mocker.patch("jikko.handlers.util.tools.rm.sys").stdin
    stdin.isatty.return_value = True
    select = mocker.patch.object(Rm, "select", return_value="Bash(ls:*)")

    Rm.call([], context=context)

    select.assert_called_once_with("Remove which permission?", ["Bash(ls:*)", "Read"])
    assert allowed(settings) == ["Read"]


def test_rm_interactive_cancelled(context, settings, mocker):
    stdin = mocker.patch("jikko.handlers.util.tools.rm.sys").stdin
    stdin.isatty.return_value = True
    mocker.patch.object(Rm, "select", return_value=None)

    Rm.call([], context=context)

    assert allowed(settings) == ["Bash(ls:*)", "Read"]


def test_rm_not_a_tty(context, settings, output, mocker):
    stdin = mocker.patch("jikko.handlers.util.tools.rm.sys").stdin
    stdin.isatty.return_value = False

    Rm.call([], context=context)

    assert "Usage: jikko util tools rm" in output.getvalue()
