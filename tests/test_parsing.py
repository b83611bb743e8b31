import pytest

from jikko.commands.parsing import NO_DESCRIPTION, parse_docstring


@pytest.mark.parametrize(
    ("doc", "args", "short"),
    [
        ("<permission> Whitelist a tool permission", [("permission", True)], "Whitelist a tool permission"),
        ("[major|minor|patch] Bump the version", [("major|minor|patch", False)], "Bump the version"),
        (
            "<category> <name> [description...] Scaffold a command",
            [("category", True), ("name", True), ("description...", False)],
            "Scaffold a command",
        ),
        ("Show the working tree status.", [], "Show the working tree status."),
        ("Remove <permission> from the list", [], "Remove <permission> from the list"),
        ("<name>", [("name", True)], "<name>"),
    ],
)
def test_first_line(doc, args, short):
    parsed_args, parsed_short, full = parse_docstring(doc)
    assert [(a.value, a.required) for a in parsed_args] == args
    assert parsed_short == short
    assert full == doc


def test_multiline():
    doc = """<prompt...> Generate an image.

    Options: -m <model>.
    """
    args, short, full = parse_docstring(doc)
    assert [a.value for a in args] == ["prompt..."]
    assert short == "Generate an image."
    assert full.endswith("Options: -m <model>.")


@pytest.mark.parametrize("doc", ["", None])
def test_missing(doc):
    assert parse_docstring(doc) == ([], NO_DESCRIPTION, "")
