"""
Name resolution for Todoist projects, sections and tasks.

Agents usually refer to things by (partial) name rather than by id. Every
resolver here follows the same rules:

- an explicit id always wins and no lookup is made;
- otherwise the full candidate list is fetched fresh from Todoist;
- the first candidate, in Todoist's order, whose lowercased name contains the
  lowercased query is the match;
- a failed fetch is logged and treated as "no match".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, TypeVar

from todoist_mcp.models import Project, Section, Task
from todoist_mcp.todoist_client import TodoistClient
from todoist_mcp.tools.errors import LookupNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class Resolved:
    """An id, plus the display name when it came from a name search."""

    id: str | None = None
    name: str | None = None


def find_first_match(candidates: Iterable[T], query: str, key: Callable[[T], str]) -> T | None:
    """Return the first candidate whose key contains ``query``, ignoring case."""
    query_lower = query.lower()
    for candidate in candidates:
        if query_lower in key(candidate).lower():
            return candidate
    return None


async def best_effort(description: str, fetch: Callable[[], Awaitable[T]]) -> T | None:
    """Run an auxiliary Todoist fetch, returning None if it fails."""
    try:
        return await fetch()
    except Exception as e:
        logger.error(f"Error {description}: {e}", exc_info=True)
        return None


async def resolve_project(client: TodoistClient, project_id: str | None, project_name: str | None) -> Resolved:
    if project_id:
        return Resolved(id=project_id)
    if not project_name:
        return Resolved()

    projects = await best_effort("finding project by name", client.get_projects)
    match = find_first_match(projects or [], project_name, key=lambda p: p.name)
    if match is None:
        logger.info(f"No project matching {project_name!r}")
        return Resolved()
    return Resolved(id=match.id, name=match.name)


async def resolve_section(
    client: TodoistClient,
    project_id: str | None,
    section_id: str | None,
    section_name: str | None
) -> Resolved:
    """Resolve a section by name within ``project_id``; skipped without a project."""
    if section_id:
        return Resolved(id=section_id)
    if not section_name or not project_id:
        return Resolved()

    sections = await best_effort("finding section by name", lambda: client.get_sections(project_id))
    match = find_first_match(sections or [], section_name, key=lambda s: s.name)
    if match is None:
        logger.info(f"No section matching {section_name!r} in project {project_id}")
        return Resolved()
    return Resolved(id=match.id, name=match.name)


async def resolve_parent_task(client: TodoistClient, parent_id: str | None, parent_task_name: str | None) -> Resolved:
    if parent_id:
        return Resolved(id=parent_id)
    if not parent_task_name:
        return Resolved()

    tasks = await best_effort("finding parent task by name", client.get_tasks)
    match = find_first_match(tasks or [], parent_task_name, key=lambda t: t.content)
    if match is None:
        logger.info(f"No parent task matching {parent_task_name!r}")
        return Resolved()
    return Resolved(id=match.id, name=match.content)


async def find_task_by_name(client: TodoistClient, task_name: str) -> Task:
    """
    Find the task an update/delete/complete call refers to.

    Unlike the other resolvers this is part of the primary operation, so
    Todoist errors propagate.

    Raises:
        LookupNotFoundError: If no task content contains ``task_name``
    """
    tasks = await client.get_tasks()
    match = find_first_match(tasks, task_name, key=lambda t: t.content)
    if match is None:
        raise LookupNotFoundError(task_name)
    return match


# ==================== Display Lookups ====================


async def lookup_project_name(client: TodoistClient, project_id: str) -> str | None:
    project: Project | None = await best_effort("getting project details", lambda: client.get_project(project_id))
    return project.name if project else None


async def lookup_section_name(client: TodoistClient, project_id: str | None, section_id: str) -> str | None:
    sections: list[Section] | None = await best_effort(
        "getting section details", lambda: client.get_sections(project_id)
    )
    section = next((s for s in sections or [] if s.id == section_id), None)
    return section.name if section else None


async def lookup_task_content(client: TodoistClient, task_id: str) -> str | None:
    task: Task | None = await best_effort("getting parent task details", lambda: client.get_task(task_id))
    return task.content if task else None
