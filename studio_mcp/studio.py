"""MCP server exposing a single command-line tool over stdio."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .constants import SERVER_NAME, VERSION
from .logging import get_logger
from .tool import CommandTool

_logger = get_logger("studio")


class ToolCallError(RuntimeError):
    """Raised from the call handler so the SDK reports an ``isError`` result."""


class Studio:
    """Owns the command tool and the MCP handlers that expose it."""

    def __init__(self, tool: CommandTool, *, name: str = SERVER_NAME, version: str = VERSION) -> None:
        self.tool = tool
        self.name = name
        self.version = version

    def tool_definition(self) -> types.Tool:
        return types.Tool(
            name=self.tool.name,
            description=self.tool.description,
            inputSchema=self.tool.input_schema,
        )

    async def list_tools(self) -> List[types.Tool]:
        return [self.tool_definition()]

    async def call_tool(self, name: str, arguments: Dict[str, Any] | None) -> List[types.TextContent]:
        if name != self.tool.name:
            raise ToolCallError(f"Unknown tool: {name}")

        loop = asyncio.get_running_loop()
        # subprocess.run blocks; keep the protocol loop free while it runs.
        result = await loop.run_in_executor(None, self.tool.call, arguments or {})
        if result.is_error:
            raise ToolCallError(result.text)
        return [types.TextContent(type="text", text=result.text)]

    def create_server(self) -> Server:
        """Build the low-level MCP server with list/call handlers registered."""
        server: Server = Server(self.name, version=self.version)
        server.list_tools()(self.list_tools)
        # Arguments are checked by the blueprint so errors name the parameter.
        server.call_tool(validate_input=False)(self.call_tool)
        return server

    async def serve(self) -> None:
        """Serve MCP requests on stdin/stdout until the client disconnects."""
        server = self.create_server()
        _logger.debug("Serving tool %s: %s", self.tool.name, self.tool.description)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())

    def run(self) -> None:
        asyncio.run(self.serve())


__all__ = ["Studio", "ToolCallError"]
