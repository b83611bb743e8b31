from io import StringIO

import pytest

from jikko.ansi import BOLD, DIM, GREEN, RED, RESET, YELLOW, colorize, make_style, should_colorize, strip_ansi, visible_len


@pytest.fixture
def plain_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.mark.parametrize(
    ("codes", "expected"),
    [((RED,), "\x1b[31mhello\x1b[0m"), ((RED, BOLD), "\x1b[31;1mhello\x1b[0m"), ((), "hello")],
)
def test_colorize(codes, expected):
    assert colorize("hello", *codes) == expected


def test_make_style():
    assert make_style(YELLOW, DIM) == ("\x1b[33;2m", RESET)
    assert make_style() == ("", RESET)


def test_visible_len():
    text = colorize("ok", GREEN) + " done " + colorize("!", RED, BOLD)
    assert strip_ansi(text) == "ok done !"
    assert visible_len(text) == 9


def test_no_color_wins(plain_env, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not should_colorize(StringIO())


def test_force_color(plain_env, monkeypatch):
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert should_colorize(StringIO())


def test_pipes_are_plain(plain_env):
    assert not should_colorize(StringIO())


def test_terminals_are_colored(plain_env, mocker):
    stream = mocker.Mock()
    stream.isatty.return_value = True
    assert should_colorize(stream)
