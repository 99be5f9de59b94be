"""
Typed arguments for each MCP tool.

Each dataclass is built with ``from_arguments``, which checks the presence and
type of the tool's required field and raises InvalidArgumentsError otherwise.
Optional fields are copied through as given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from todoist_mcp.tools.errors import InvalidArgumentsError

DEFAULT_TASK_LIMIT = 10


def _require_mapping(arguments: Any) -> Mapping[str, Any]:
    if arguments is None:
        raise InvalidArgumentsError("No arguments provided")
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentsError(f"Arguments must be an object, got {type(arguments).__name__}")
    return arguments


def _require_str(arguments: Mapping[str, Any], field: str, tool_name: str) -> str:
    value = arguments.get(field)
    if not isinstance(value, str):
        raise InvalidArgumentsError(f"Invalid arguments for {tool_name}")
    return value


@dataclass(slots=True)
class CreateTaskArgs:
    content: str
    description: str | None = None
    due_string: str | None = None
    priority: int | None = None
    project_id: str | None = None
    project_name: str | None = None
    section_id: str | None = None
    section_name: str | None = None
    parent_id: str | None = None
    parent_task_name: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Any) -> CreateTaskArgs:
        args = _require_mapping(arguments)
        return cls(
            content=_require_str(args, "content", "todoist_create_task"),
            description=args.get("description"),
            due_string=args.get("due_string"),
            priority=args.get("priority"),
            project_id=args.get("project_id"),
            project_name=args.get("project_name"),
            section_id=args.get("section_id"),
            section_name=args.get("section_name"),
            parent_id=args.get("parent_id"),
            parent_task_name=args.get("parent_task_name"),
        )


@dataclass(slots=True)
class GetTasksArgs:
    project_id: str | None = None
    project_name: str | None = None
    section_id: str | None = None
    section_name: str | None = None
    parent_id: str | None = None
    parent_task_name: str | None = None
    filter: str | None = None
    priority: int | None = None
    limit: int | None = DEFAULT_TASK_LIMIT

    @classmethod
    def from_arguments(cls, arguments: Any) -> GetTasksArgs:
        args = _require_mapping(arguments)
        return cls(
            project_id=args.get("project_id"),
            project_name=args.get("project_name"),
            section_id=args.get("section_id"),
            section_name=args.get("section_name"),
            parent_id=args.get("parent_id"),
            parent_task_name=args.get("parent_task_name"),
            filter=args.get("filter"),
            priority=args.get("priority"),
            limit=args.get("limit", DEFAULT_TASK_LIMIT),
        )


@dataclass(slots=True)
class GetProjectsArgs:
    filter: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Any) -> GetProjectsArgs:
        args = _require_mapping(arguments)
        project_filter = args.get("filter")
        if project_filter is not None and not isinstance(project_filter, str):
            raise InvalidArgumentsError("Invalid arguments for todoist_get_projects")
        return cls(filter=project_filter)


@dataclass(slots=True)
class UpdateTaskArgs:
    task_name: str
    content: str | None = None
    description: str | None = None
    due_string: str | None = None
    priority: int | None = None

    @classmethod
    def from_arguments(cls, arguments: Any) -> UpdateTaskArgs:
        args = _require_mapping(arguments)
        return cls(
            task_name=_require_str(args, "task_name", "todoist_update_task"),
            content=args.get("content"),
            description=args.get("description"),
            due_string=args.get("due_string"),
            priority=args.get("priority"),
        )


@dataclass(slots=True)
class DeleteTaskArgs:
    task_name: str

    @classmethod
    def from_arguments(cls, arguments: Any) -> DeleteTaskArgs:
        args = _require_mapping(arguments)
        return cls(task_name=_require_str(args, "task_name", "todoist_delete_task"))


@dataclass(slots=True)
class CompleteTaskArgs:
    task_name: str

    @classmethod
    def from_arguments(cls, arguments: Any) -> CompleteTaskArgs:
        args = _require_mapping(arguments)
        return cls(task_name=_require_str(args, "task_name", "todoist_complete_task"))
