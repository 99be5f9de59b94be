"""
MCP tools for Todoist project operations.
"""

from __future__ import annotations

from todoist_mcp.models import Project
from todoist_mcp.todoist_client import TodoistClient
from todoist_mcp.tools.arguments import GetProjectsArgs


def _format_project(project: Project) -> str:
    """Format a project with its ID so it can be used in later calls."""
    return f"- {project.name} (ID: {project.id})"


async def get_projects(client: TodoistClient, args: GetProjectsArgs) -> str:
    """
    List all projects, optionally keeping only those whose name contains the filter.

    The filter is a case-insensitive substring match.
    """
    projects = await client.get_projects()

    if args.filter:
        filter_lower = args.filter.lower()
        projects = [p for p in projects if filter_lower in p.name.lower()]

    if not projects:
        return "No projects found matching the criteria"
    return "\n\n".join(_format_project(p) for p in projects)
