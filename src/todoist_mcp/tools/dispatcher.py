"""
Routes MCP tool calls to the task and project tools.

Every outcome, including failures, is returned as a ToolResult; nothing
raised by a tool reaches the protocol layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from mcp import types

from todoist_mcp.todoist_client import TodoistClient
from todoist_mcp.tools import project_tools, task_tools
from todoist_mcp.tools.arguments import (
    CompleteTaskArgs,
    CreateTaskArgs,
    DeleteTaskArgs,
    GetProjectsArgs,
    GetTasksArgs,
    UpdateTaskArgs,
)
from todoist_mcp.tools.catalog import TOOLS
from todoist_mcp.tools.errors import InvalidArgumentsError, LookupNotFoundError, UnknownToolError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ToolResult:
    text: str
    is_error: bool = False

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )


@dataclass(slots=True)
class _Route:
    parse: Callable[[Any], Any]
    handle: Callable[[TodoistClient, Any], Awaitable[str]]


_ROUTES: dict[str, _Route] = {
    "todoist_create_task": _Route(CreateTaskArgs.from_arguments, task_tools.create_task),
    "todoist_get_tasks": _Route(GetTasksArgs.from_arguments, task_tools.get_tasks),
    "todoist_get_projects": _Route(GetProjectsArgs.from_arguments, project_tools.get_projects),
    "todoist_update_task": _Route(UpdateTaskArgs.from_arguments, task_tools.update_task),
    "todoist_delete_task": _Route(DeleteTaskArgs.from_arguments, task_tools.delete_task),
    "todoist_complete_task": _Route(CompleteTaskArgs.from_arguments, task_tools.complete_task),
}


class ToolDispatcher:
    """Validates, runs and formats tool calls against one Todoist client."""

    def __init__(self, client: TodoistClient):
        self.client = client

    def list_tools(self) -> list[types.Tool]:
        return list(TOOLS)

    async def call_tool(self, name: str, arguments: Any) -> ToolResult:
        """
        Run the named tool.

        Args:
            name: Tool name from the catalog
            arguments: Raw call arguments

        Returns:
            ToolResult with is_error set for any failure
        """
        logger.info(f"Tool call: {name}")
        try:
            route = _ROUTES.get(name)
            if route is None:
                raise UnknownToolError(name)
            args = route.parse(arguments)
            return ToolResult(await route.handle(self.client, args))
        except (LookupNotFoundError, UnknownToolError) as e:
            logger.warning(f"{name}: {e}")
            return ToolResult(str(e), is_error=True)
        except InvalidArgumentsError as e:
            logger.warning(f"{name}: {e}")
            return ToolResult(f"Error: {e}", is_error=True)
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}", exc_info=True)
            return ToolResult(f"Error: {e}", is_error=True)
