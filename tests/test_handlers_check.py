"""Tests for the Claude Code configuration checks."""

import json
from pathlib import Path

import pytest

from jikko.handlers.util.check import describe_servers, mcp_servers, project_key
from jikko.handlers.util.check.claude_code import ClaudeCode
from jikko.handlers.util.check.mcp import Mcp
from jikko.handlers.util.check.plugin import Plugin


def servers(*names):
    return {"mcpServers": {name: {"command": name} for name in names}}


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


@pytest.fixture
def project(tmp_path, monkeypatch):
    path = tmp_path / "work" / "app"
    path.mkdir(parents=True)
    monkeypatch.chdir(path)
    return path


def test_helpers():
    assert mcp_servers(servers("browse", "fs")) == ["browse", "fs"]
    assert mcp_servers({"mcpServers": []}) == []
    assert mcp_servers(None) == []
    assert describe_servers(servers("fs")) == "fs"
    assert describe_servers({}) == "(none)"
    assert project_key(Path("/root/app")) == "-root-app"


def test_claude_code(context, claude_dir, project, output, monkeypatch):
    monkeypatch.setattr("jikko.handlers.util.check.claude_code.MANAGED_SETTINGS", project / "managed.json")
    (project / "CLAUDE.md").write_text("# App\n\nRules\n")
    write_json(project / ".claude" / "settings.json", {})
    write_json(project / ".mcp.json", servers("browse", "fs"))
    write_json(claude_dir / "settings.json", servers("github"))
    memory = claude_dir / "projects" / project_key(Path.cwd()) / "memory" / "MEMORY.md"
    memory.parent.mkdir(parents=True)
    memory.write_text("- one\n- two\n")

    ClaudeCode.call([], context=context)

    text = output.getvalue()
    assert "Claude Code Configuration" in text
    assert f"pwd: {Path.cwd()}" in text
    assert "✓ Project: .claude/settings.json" in text
    assert "✓ User: " in text
    assert "Managed" not in text
    assert "Local:" not in text
    assert "✓ Project (3 lines)" in text
    assert "✓ Auto memory (2 lines)" in text
    assert "✓ .mcp.json: browse, fs" in text
    assert "✓ settings.json: github" in text


def test_claude_code_empty(context, claude_dir, project, output, monkeypatch):
    monkeypatch.setattr("jikko.handlers.util.check.claude_code.MANAGED_SETTINGS", project / "managed.json")
    ClaudeCode.call([], context=context)
    assert "✓" not in output.getvalue()


def test_mcp(context, claude_dir, project, output):
    write_json(project / "sub" / "mcp.json", servers("fs"))
    write_json(project / ".mcp.json", {})
    write_json(project / "node_modules" / "pkg" / ".mcp.json", servers("ignored"))
    write_json(project.parent / ".mcp.json", servers("parent"))
    write_json(claude_dir / "settings.json", servers("github"))
    write_json(claude_dir / "plugins" / "cache" / "browse" / ".claude-plugin" / ".mcp.json", servers("browse"))

    Mcp.call([], context=context)

    lines = output.getvalue().splitlines()
    current = lines.index("Current Directory")
    assert lines[current + 1 : current + 3] == ["✓ .mcp.json: (none)", "✓ sub/mcp.json: fs"]
    assert "ignored" not in output.getvalue()
    assert f"✗ {project.parent / '.mcp.json'}: parent" in lines
    assert "✓ settings.json: github" in lines
    assert "✓ Plugin: browse" in lines


def test_mcp_nothing(context, claude_dir, project, output):
    Mcp.call([], context=context)
    lines = output.getvalue().splitlines()
    assert lines[lines.index("Current Directory") + 1] == "(none)"
    assert lines[lines.index("Parent Directories") + 1] == "(none)"


@pytest.fixture
def source(tmp_path, config):
    path = tmp_path / "claude-browse"
    path.mkdir()
    write_json(path / "package.json", {"version": "1.2.0"})
    config["plugin_source"] = str(path)
    return path


def install(claude_dir, sha, plugin="browse@saiden"):
    data = {"plugins": {plugin: [{"version": "1.2.0", "gitCommitSha": sha}]}}
    write_json(claude_dir / "plugins" / "installed_plugins.json", data)


def test_plugin_in_sync(context, claude_dir, source, fake_run, output):
    fake_run.outputs[f"git -C {source} rev-parse"] = "abc1234def5678\n"
    install(claude_dir, "abc1234ffff0000")

    Plugin.call([], context=context)

    text = output.getvalue()
    assert "Plugin: browse@saiden" in text
    assert "  Version: 1.2.0" in text
    assert "✓   Clean" in text
    assert text.endswith("✓ In sync (abc1234)\n")


def test_plugin_out_of_sync(context, claude_dir, source, fake_run, output):
    fake_run.outputs[f"git -C {source} rev-parse"] = "abc1234def5678\n"
    fake_run.outputs[f"git -C {source} status"] = " M index.js\n M README.md\n"
    install(claude_dir, "9999999aaaa")

    Plugin.call([], context=context)

    text = output.getvalue()
    assert "2 uncommitted" in text
    assert "✗ Out of sync: source=abc1234, installed=9999999" in text


def test_plugin_named(context, claude_dir, source, fake_run, output):
    install(claude_dir, "abc1234", plugin="other@market")
    Plugin.call(["browse@saiden"], context=context)
    assert "Not installed" in output.getvalue()
    assert "sync" not in output.getvalue()


def test_plugin_without_source(context, claude_dir, tmp_path, config, fake_run, output):
    config["plugin_source"] = str(tmp_path / "missing")
    install(claude_dir, "abc1234")
    Plugin.call(["browse@saiden"], context=context)
    assert fake_run.calls == []
    assert "  Commit:  abc1234" in output.getvalue()
    assert "sync" not in output.getvalue()
