# tests/test_resolver.py

from __future__ import annotations

import pytest

from todoist_mcp.models import Project
from todoist_mcp.todoist_client import TodoistAPIError
from todoist_mcp.tools.errors import LookupNotFoundError
from todoist_mcp.tools.resolver import (
    Resolved,
    find_first_match,
    find_task_by_name,
    lookup_project_name,
    lookup_section_name,
    resolve_parent_task,
    resolve_project,
    resolve_section,
)

from .fakes import FakeTodoistClient


def test_find_first_match_is_case_insensitive_substring() -> None:
    projects = [Project("1", "Inbox"), Project("2", "Grocery Shopping"), Project("3", "Shopping List")]
    match = find_first_match(projects, "SHOP", key=lambda p: p.name)
    assert match is not None and match.id == "2"


def test_find_first_match_returns_none_for_empty_or_unmatched() -> None:
    assert find_first_match([], "anything", key=lambda p: p.name) is None
    assert find_first_match([Project("1", "Inbox")], "work", key=lambda p: p.name) is None


@pytest.mark.asyncio
async def test_explicit_ids_skip_all_lookups(client: FakeTodoistClient) -> None:
    assert await resolve_project(client, "p-x", "Grocery") == Resolved(id="p-x")
    assert await resolve_section(client, "p-x", "s-x", "Dairy") == Resolved(id="s-x")
    assert await resolve_parent_task(client, "t-x", "report") == Resolved(id="t-x")
    assert client.calls == []


@pytest.mark.asyncio
async def test_resolve_project_first_match_in_remote_order(client: FakeTodoistClient) -> None:
    resolved = await resolve_project(client, None, "shopping")
    assert resolved == Resolved(id="p-grocery", name="Grocery Shopping")
    assert [name for name, _ in client.calls] == ["get_projects"]


@pytest.mark.asyncio
async def test_resolve_project_without_name_or_match(client: FakeTodoistClient) -> None:
    assert await resolve_project(client, None, None) == Resolved()
    assert client.calls == []
    assert await resolve_project(client, None, "Holidays") == Resolved()


@pytest.mark.asyncio
async def test_resolve_project_swallows_fetch_errors(client: FakeTodoistClient) -> None:
    client.failing.add("get_projects")
    assert await resolve_project(client, None, "Grocery") == Resolved()


@pytest.mark.asyncio
async def test_resolve_section_requires_project(client: FakeTodoistClient) -> None:
    assert await resolve_section(client, None, None, "Dairy") == Resolved()
    assert client.calls == []


@pytest.mark.asyncio
async def test_resolve_section_scoped_to_project(client: FakeTodoistClient) -> None:
    resolved = await resolve_section(client, "p-grocery", None, "produce")
    assert resolved == Resolved(id="s-produce", name="Fresh Produce")
    assert client.called("get_sections") == [{"project_id": "p-grocery"}]

    # "Meetings" lives in another project
    assert await resolve_section(client, "p-grocery", None, "meet") == Resolved()


@pytest.mark.asyncio
async def test_resolve_parent_task_searches_all_tasks(client: FakeTodoistClient) -> None:
    resolved = await resolve_parent_task(client, None, "quarterly")
    assert resolved == Resolved(id="t-report", name="Write quarterly report")
    assert client.called("get_tasks") == [{"project_id": None, "filter": None}]


@pytest.mark.asyncio
async def test_resolve_parent_task_swallows_fetch_errors(client: FakeTodoistClient) -> None:
    client.failing.add("get_tasks")
    assert await resolve_parent_task(client, None, "report") == Resolved()


@pytest.mark.asyncio
async def test_find_task_by_name(client: FakeTodoistClient) -> None:
    task = await find_task_by_name(client, "MILK")
    assert task.id == "t-milk"

    with pytest.raises(LookupNotFoundError) as excinfo:
        await find_task_by_name(client, "Buy bread")
    assert str(excinfo.value) == 'Could not find a task matching "Buy bread"'


@pytest.mark.asyncio
async def test_find_task_by_name_propagates_fetch_errors(client: FakeTodoistClient) -> None:
    client.failing.add("get_tasks")
    with pytest.raises(TodoistAPIError):
        await find_task_by_name(client, "milk")


@pytest.mark.asyncio
async def test_display_lookups_collapse_errors_to_none(client: FakeTodoistClient) -> None:
    assert await lookup_project_name(client, "p-work") == "Work Stuff"
    assert await lookup_project_name(client, "p-missing") is None
    assert await lookup_section_name(client, "p-grocery", "s-dairy") == "Dairy"
    assert await lookup_section_name(client, None, "s-meetings") == "Meetings"

    client.failing.add("get_sections")
    assert await lookup_section_name(client, "p-grocery", "s-dairy") is None
