"""
MCP tools for Todoist task operations.

Tasks can be addressed by name: project, section and parent task accept either
an id or a (partial, case-insensitive) name, and update/delete/complete look
the task up by its content.

Priority values: 1 (normal) to 4 (urgent)
Due dates: Todoist natural language ("tomorrow", "every monday", "Jan 23")
"""

from __future__ import annotations

import logging

from todoist_mcp.models import Task
from todoist_mcp.todoist_client import TodoistClient
from todoist_mcp.tools.arguments import (
    CompleteTaskArgs,
    CreateTaskArgs,
    DeleteTaskArgs,
    GetTasksArgs,
    UpdateTaskArgs,
)
from todoist_mcp.tools.resolver import (
    find_task_by_name,
    lookup_project_name,
    lookup_section_name,
    lookup_task_content,
    resolve_parent_task,
    resolve_project,
    resolve_section,
)

logger = logging.getLogger(__name__)


def _format_task(task: Task) -> str:
    """Format a task as a list entry."""
    lines = [f"- {task.content}"]
    if task.description:
        lines.append(f"  Description: {task.description}")
    if task.due_string:
        lines.append(f"  Due: {task.due_string}")
    if task.priority:
        lines.append(f"  Priority: {task.priority}")
    return "\n".join(lines)


def _tasks_header(project_name: str | None, section_name: str | None, parent_task_name: str | None) -> str:
    if project_name and section_name:
        return f'Tasks in section "{section_name}" of project "{project_name}":\n\n'
    if project_name:
        return f'Tasks in project "{project_name}":\n\n'
    if parent_task_name:
        return f'Subtasks of "{parent_task_name}":\n\n'
    return ""


def filter_tasks(
    tasks: list[Task],
    priority: int | None = None,
    section_id: str | None = None,
    parent_id: str | None = None,
    limit: int | None = None
) -> list[Task]:
    """
    Apply the client-side filters of todoist_get_tasks, in order.

    A falsy priority disables the priority filter. A limit of None or <= 0
    returns every remaining task.
    """
    filtered = tasks
    if priority:
        filtered = [t for t in filtered if t.priority == priority]
    if section_id:
        filtered = [t for t in filtered if t.section_id == section_id]
    if parent_id:
        filtered = [t for t in filtered if t.parent_id == parent_id]
    if limit and limit > 0:
        filtered = filtered[:int(limit)]
    return filtered


async def create_task(client: TodoistClient, args: CreateTaskArgs) -> str:
    """
    Create a task, resolving project, section and parent by name if needed.

    A name that matches nothing is dropped and the task is created without
    that association.
    """
    project = await resolve_project(client, args.project_id, args.project_name)
    section = await resolve_section(client, project.id, args.section_id, args.section_name)
    parent = await resolve_parent_task(client, args.parent_id, args.parent_task_name)

    task = await client.create_task(
        content=args.content,
        description=args.description,
        due_string=args.due_string,
        priority=args.priority,
        project_id=project.id,
        section_id=section.id,
        parent_id=parent.id,
    )
    logger.info(f"Created task {task.id}: {task.content!r}")

    project_name = await lookup_project_name(client, project.id) if project.id else None
    section_name = await lookup_section_name(client, project.id, section.id) if section.id else None
    parent_task_name = await lookup_task_content(client, parent.id) if parent.id else None

    lines = ["Task created:", f"Title: {task.content}"]
    if task.description:
        lines.append(f"Description: {task.description}")
    if task.due_string:
        lines.append(f"Due: {task.due_string}")
    if task.priority:
        lines.append(f"Priority: {task.priority}")
    if project_name:
        lines.append(f"Project: {project_name}")
    if section_name:
        lines.append(f"Section: {section_name}")
    if parent_task_name:
        lines.append(f"Parent Task: {parent_task_name}")
    return "\n".join(lines)


async def get_tasks(client: TodoistClient, args: GetTasksArgs) -> str:
    """
    List tasks, optionally narrowed by project, section, parent, filter and priority.

    Only the project id and the raw filter are sent to Todoist; section,
    parent and priority are applied locally to the fetched tasks.
    """
    project = await resolve_project(client, args.project_id, args.project_name)
    section = await resolve_section(client, project.id, args.section_id, args.section_name)
    parent = await resolve_parent_task(client, args.parent_id, args.parent_task_name)

    tasks = await client.get_tasks(project_id=project.id, filter=args.filter)
    filtered = filter_tasks(
        tasks,
        priority=args.priority,
        section_id=section.id,
        parent_id=parent.id,
        limit=args.limit,
    )

    project_name = project.name
    if project.id and not project_name:
        project_name = await lookup_project_name(client, project.id)

    if not filtered:
        if project_name:
            return f'No tasks found in project "{project_name}"'
        return "No tasks found matching the criteria"

    task_list = "\n\n".join(_format_task(t) for t in filtered)
    return _tasks_header(project_name, section.name, parent.name) + task_list


async def update_task(client: TodoistClient, args: UpdateTaskArgs) -> str:
    """Find a task by name and apply a partial update."""
    task = await find_task_by_name(client, args.task_name)

    update_data = {}
    if args.content:
        update_data["content"] = args.content
    if args.description is not None:
        update_data["description"] = args.description
    if args.due_string is not None:
        update_data["due_string"] = args.due_string
    if args.priority:
        update_data["priority"] = args.priority

    updated = await client.update_task(task.id, **update_data)
    logger.info(f"Updated task {task.id}: fields {sorted(update_data)}")

    lines = [f'Task "{task.content}" updated:', f"New Title: {updated.content}"]
    if updated.description:
        lines.append(f"New Description: {updated.description}")
    if updated.due_string:
        lines.append(f"New Due Date: {updated.due_string}")
    if updated.priority:
        lines.append(f"New Priority: {updated.priority}")
    return "\n".join(lines)


async def delete_task(client: TodoistClient, args: DeleteTaskArgs) -> str:
    task = await find_task_by_name(client, args.task_name)
    await client.delete_task(task.id)
    logger.info(f"Deleted task {task.id}")
    return f'Successfully deleted task: "{task.content}"'


async def complete_task(client: TodoistClient, args: CompleteTaskArgs) -> str:
    task = await find_task_by_name(client, args.task_name)
    await client.close_task(task.id)
    logger.info(f"Completed task {task.id}")
    return f'Successfully completed task: "{task.content}"'
