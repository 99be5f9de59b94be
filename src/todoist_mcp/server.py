"""
MCP server wiring: registers the list-tools and call-tool handlers.
"""

import logging

from mcp import types
from mcp.server import Server

from todoist_mcp import __version__
from todoist_mcp.tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "todoist-mcp-server"


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Build the MCP server around a dispatcher."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict | None) -> types.CallToolResult:
        result = await dispatcher.call_tool(name, arguments)
        return result.to_call_tool_result()

    logger.info(f"Registered {len(dispatcher.list_tools())} tools")
    return server
