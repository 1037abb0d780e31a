"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

import pytest

from studio_mcp import cli
from studio_mcp.cli import _build_parser


def test_cli_collects_command_after_own_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--debug", "echo", "--example", "{{text # say}}"])
    assert args.debug is True
    assert args.command == ["echo", "--example", "{{text # say}}"]


def test_cli_leaves_flags_after_command_to_the_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["ls", "--debug", "[-l]"])
    assert args.debug is False
    assert args.command == ["ls", "--debug", "[-l]"]


def test_cli_accepts_config_path(tmp_path) -> None:
    parser = _build_parser()
    args = parser.parse_args(["--config", str(tmp_path), "git", "status"])
    assert args.config == tmp_path
    assert args.command == ["git", "status"]


def test_cli_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("studio-mcp ")


def test_cli_requires_a_command(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2
    assert "no command provided" in capsys.readouterr().err


def test_cli_rejects_blank_base_command(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["  "])
    assert excinfo.value.code == 1
    assert "empty command provided" in capsys.readouterr().err


def test_cli_serves_blueprint(monkeypatch) -> None:
    served = {}

    def fake_run(self) -> None:  # type: ignore[no-untyped-def]
        served["tool"] = self.tool.name
        served["description"] = self.tool.description
        served["name"] = self.name

    monkeypatch.setattr("studio_mcp.cli.Studio.run", fake_run)
    monkeypatch.delenv("STUDIO_MCP_CONFIG", raising=False)

    cli.main(["--debug", "git-log", "[-p]"])

    assert served == {
        "tool": "git_log",
        "description": "Run the shell command `git-log [-p]`",
        "name": "studio-mcp",
    }
