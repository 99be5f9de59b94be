"""
Todoist entities as returned by the REST API.

Only the fields the MCP tools read are kept. Ids are normalised to strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(slots=True)
class Project:
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        return cls(id=str(data["id"]), name=data.get("name") or "")


@dataclass(slots=True)
class Section:
    id: str
    name: str
    project_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Section:
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            project_id=_optional_str(data.get("project_id")),
        )


@dataclass(slots=True)
class Task:
    id: str
    content: str
    description: str | None = None
    due_string: str | None = None
    priority: int | None = None
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        due = data.get("due") or {}
        return cls(
            id=str(data["id"]),
            content=data.get("content") or "",
            description=data.get("description") or None,
            due_string=due.get("string") or None,
            priority=data.get("priority") or None,
            project_id=_optional_str(data.get("project_id")),
            section_id=_optional_str(data.get("section_id")),
            parent_id=_optional_str(data.get("parent_id")),
        )
