# tests/test_project_tools.py

from __future__ import annotations

import pytest

from todoist_mcp.tools.arguments import GetProjectsArgs
from todoist_mcp.tools.project_tools import get_projects

from .fakes import FakeTodoistClient


@pytest.mark.asyncio
async def test_get_projects_lists_all_in_order(client: FakeTodoistClient) -> None:
    text = await get_projects(client, GetProjectsArgs())
    assert text == (
        "- Inbox (ID: p-inbox)\n\n"
        "- Grocery Shopping (ID: p-grocery)\n\n"
        "- Work Stuff (ID: p-work)\n\n"
        "- Shopping List (ID: p-shop2)"
    )


@pytest.mark.asyncio
async def test_get_projects_filter_is_case_insensitive_substring(client: FakeTodoistClient) -> None:
    text = await get_projects(client, GetProjectsArgs(filter="SHOPPING"))
    assert text == "- Grocery Shopping (ID: p-grocery)\n\n- Shopping List (ID: p-shop2)"


@pytest.mark.asyncio
async def test_get_projects_no_match(client: FakeTodoistClient) -> None:
    assert await get_projects(client, GetProjectsArgs(filter="garden")) == "No projects found matching the criteria"
    assert await get_projects(FakeTodoistClient(), GetProjectsArgs()) == "No projects found matching the criteria"
