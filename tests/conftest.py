# tests/conftest.py

from __future__ import annotations

import pytest

from todoist_mcp.models import Project, Section, Task
from todoist_mcp.tools.dispatcher import ToolDispatcher

from .fakes import FakeTodoistClient


@pytest.fixture()
def projects() -> list[Project]:
    return [
        Project(id="p-inbox", name="Inbox"),
        Project(id="p-grocery", name="Grocery Shopping"),
        Project(id="p-work", name="Work Stuff"),
        Project(id="p-shop2", name="Shopping List"),
    ]


@pytest.fixture()
def sections() -> list[Section]:
    return [
        Section(id="s-dairy", name="Dairy", project_id="p-grocery"),
        Section(id="s-produce", name="Fresh Produce", project_id="p-grocery"),
        Section(id="s-meetings", name="Meetings", project_id="p-work"),
    ]


@pytest.fixture()
def tasks() -> list[Task]:
    return [
        Task(id="t-milk", content="Buy milk and eggs", priority=1, project_id="p-grocery", section_id="s-dairy"),
        Task(id="t-cheese", content="Buy cheese", priority=4, project_id="p-grocery", section_id="s-dairy"),
        Task(id="t-apples", content="Buy apples", due_string="tomorrow", project_id="p-grocery", section_id="s-produce"),
        Task(id="t-report", content="Write quarterly report", description="Q3 numbers", priority=4, project_id="p-work"),
        Task(id="t-slides", content="Report slides", priority=2, project_id="p-work", parent_id="t-report"),
        Task(id="t-charts", content="Report charts", project_id="p-work", parent_id="t-report"),
    ]


@pytest.fixture()
def client(projects, sections, tasks) -> FakeTodoistClient:
    return FakeTodoistClient(projects=projects, sections=sections, tasks=tasks)


@pytest.fixture()
def dispatcher(client) -> ToolDispatcher:
    return ToolDispatcher(client)
