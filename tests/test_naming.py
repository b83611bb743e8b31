"""Tests for handler identifiers."""

import pytest

from jikko.commands.naming import camelize, handler_identifier, path_key


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("git", "Git"),
        ("status", "Status"),
        ("force_push", "ForcePush"),
        ("pages-list", "PagesList"),
        ("ai", "AI"),
        ("SD", "SD"),
        ("cf", "CF"),
        ("psn", "PSN"),
        ("camelCase", "Camelcase"),
    ],
)
def test_camelize(segment, expected):
    assert camelize(segment) == expected


def test_custom_acronyms():
    assert camelize("gh", acronyms={"gh"}) == "GH"
    assert camelize("ai", acronyms={"gh"}) == "Ai"


def test_handler_identifier():
    assert handler_identifier(["ai", "sd", "generate"]) == "AI.SD.Generate"
    assert handler_identifier(("git", "force_push")) == "Git.ForcePush"
    assert handler_identifier(["docker", "ps"]) == "Docker.PS"


def test_handler_identifier_acronyms_case_insensitive():
    assert handler_identifier(["k8s", "pods"], acronyms=["K8S"]) == "K8S.Pods"


def test_path_key():
    assert path_key(("util", "tools", "ls")) == "util/tools/ls"
    assert path_key(()) == ""
