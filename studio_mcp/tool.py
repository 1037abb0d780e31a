"""Command execution behind the single MCP tool."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from .blueprint import Blueprint, RenderError
from .config import ExecutionConfig
from .logging import get_logger

_logger = get_logger("tool")


@dataclass
class ExecuteRequest:
    """A fully rendered command ready to spawn."""

    argv: Sequence[str]
    timeout: Optional[float] = None
    cwd: Optional[Path] = None
    env: Dict[str, str] = field(default_factory=dict)


@dataclass
class ExecuteResult:
    """Combined output of a finished command."""

    output: str
    success: bool
    exit_code: Optional[int] = None


@dataclass
class ToolResult:
    """Text returned to the MCP client for one tool call."""

    text: str
    is_error: bool = False


def execute(request: ExecuteRequest) -> ExecuteResult:
    """Run ``request.argv`` without a shell and capture stdout and stderr."""
    argv = list(request.argv)
    if not argv or not argv[0].strip():
        return ExecuteResult(output="Studio error: Empty command provided", success=False)

    _logger.debug("Executing command: %s", " ".join(argv))
    env = {**os.environ, **request.env} if request.env else None
    try:
        completed = subprocess.run(
            argv,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=request.timeout,
            cwd=request.cwd,
            env=env,
        )
    except subprocess.TimeoutExpired:
        _logger.debug("Command timed out after %ss", request.timeout)
        return ExecuteResult(
            output=f"Studio error: command timed out after {request.timeout:g}s",
            success=False,
        )
    except OSError as exc:
        _logger.debug("Spawn error: %s", exc)
        return ExecuteResult(output=f"Studio error: {exc}", success=False)

    output = _combine_output(completed.stdout, completed.stderr)
    _logger.debug("Command completed with exit code: %d", completed.returncode)
    _logger.debug("Final output length: %d chars", len(output))

    if completed.returncode != 0 and not output:
        output = f"Command failed with exit code {completed.returncode}"
    return ExecuteResult(
        output=output,
        success=completed.returncode == 0,
        exit_code=completed.returncode,
    )


class CommandTool:
    """Binds a blueprint to an executor and shapes results for MCP."""

    def __init__(
        self,
        blueprint: Blueprint,
        *,
        execution: ExecutionConfig | None = None,
        executor: Callable[[ExecuteRequest], ExecuteResult] | None = None,
    ) -> None:
        self.blueprint = blueprint
        self.execution = execution or ExecutionConfig()
        self._executor = executor or execute

    @property
    def name(self) -> str:
        return self.blueprint.tool_name

    @property
    def description(self) -> str:
        return self.blueprint.tool_description

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.blueprint.schema()

    def call(self, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """Render ``arguments`` into argv, run it, and report the outcome."""
        supplied = dict(arguments or {})
        _logger.debug("Tool called with args: %s", json.dumps(supplied, default=str))

        try:
            argv = self.blueprint.render(supplied)
        except RenderError as exc:
            _logger.debug("Validation error: %s", exc)
            return ToolResult(text=f"Validation error: {exc}", is_error=True)

        _logger.debug("Built command: %s", " ".join(argv))
        result = self._executor(
            ExecuteRequest(
                argv=argv,
                timeout=self.execution.timeout,
                cwd=self.execution.cwd,
                env=dict(self.execution.env),
            )
        )
        _logger.debug(
            "Tool result - success: %s, output length: %d", result.success, len(result.output)
        )
        return ToolResult(text=result.output, is_error=not result.success)


def _combine_output(stdout: str | None, stderr: str | None) -> str:
    parts = [stream.rstrip() for stream in (stdout, stderr) if stream and stream.strip()]
    return "\n".join(parts).strip()


__all__ = ["CommandTool", "ExecuteRequest", "ExecuteResult", "ToolResult", "execute"]
