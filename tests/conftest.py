from __future__ import annotations

from typing import Callable, List

import pytest

from studio_mcp.tool import ExecuteRequest, ExecuteResult


class RecordingExecutor:
    """Stands in for subprocess execution and remembers every request."""

    def __init__(self, result: ExecuteResult | None = None) -> None:
        self.requests: List[ExecuteRequest] = []
        self.result = result or ExecuteResult(output="ok", success=True, exit_code=0)

    def __call__(self, request: ExecuteRequest) -> ExecuteResult:
        self.requests.append(request)
        return self.result


@pytest.fixture
def recording_executor() -> Callable[..., RecordingExecutor]:
    """Provide a factory for executors that record rendered commands."""
    return RecordingExecutor
