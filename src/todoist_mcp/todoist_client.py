"""
Todoist API Client using the REST v2 endpoints.

Base URL: https://api.todoist.com/rest/v2
Documentation: https://developer.todoist.com/rest/v2/
"""

import httpx
from typing import Optional, Any
import logging

from .config import DEFAULT_API_BASE_URL
from .models import Project, Section, Task

logger = logging.getLogger(__name__)


class TodoistAPIError(Exception):
    """Exception raised for Todoist API errors."""

    def __init__(self, status_code: int, message: str, response_body: Any = None):
        self.status_code = status_code
        self.message = message
        self.response_body = response_body
        super().__init__(f"Todoist API Error {status_code}: {message}")


class TodoistClient:
    """
    Client for the Todoist REST API.

    All methods are async and use httpx for HTTP requests.

    Endpoints implemented:
    - Projects: list, get
    - Sections: list (optionally scoped to a project)
    - Tasks: list (optionally scoped by project and/or filter), get, create,
      update, close, delete
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the Todoist client.

        Args:
            api_token: Todoist personal API token (sent as a bearer token)
            base_url: REST API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json"
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: Optional[dict] = None,
        params: Optional[dict] = None
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: API endpoint (without base URL)
            json: JSON body for POST requests
            params: Query parameters

        Returns:
            Response JSON or None for empty responses

        Raises:
            TodoistAPIError: If the API returns an error or cannot be reached
        """
        client = await self._get_client()

        try:
            response = await client.request(
                method=method,
                url=endpoint,
                json=json,
                params=params
            )
        except httpx.RequestError as e:
            logger.error(f"Request error: {e}")
            raise TodoistAPIError(
                status_code=0,
                message=f"Request failed: {str(e)}"
            ) from e

        logger.debug(f"{method} {endpoint} -> {response.status_code}")

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise TodoistAPIError(
                status_code=response.status_code,
                message=f"API request failed: {endpoint}",
                response_body=body
            )

        # close/delete return 204 No Content
        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise TodoistAPIError(
                status_code=response.status_code,
                message=f"Invalid JSON in response: {endpoint}",
                response_body=response.text
            ) from e

    # ==================== Project Operations ====================

    async def get_projects(self) -> list[Project]:
        """Get all projects, in the order Todoist returns them."""
        result = await self._request("GET", "/projects")
        return [Project.from_dict(p) for p in result or []]

    async def get_project(self, project_id: str) -> Project:
        """Get a project by ID."""
        return Project.from_dict(await self._request("GET", f"/projects/{project_id}"))

    # ==================== Section Operations ====================

    async def get_sections(self, project_id: Optional[str] = None) -> list[Section]:
        """
        Get sections.

        Args:
            project_id: Only return sections of this project. All sections
                are returned when omitted.
        """
        params = {"project_id": project_id} if project_id else None
        result = await self._request("GET", "/sections", params=params)
        return [Section.from_dict(s) for s in result or []]

    # ==================== Task Operations ====================

    async def get_tasks(
        self,
        project_id: Optional[str] = None,
        filter: Optional[str] = None
    ) -> list[Task]:
        """
        Get active tasks.

        Args:
            project_id: Only return tasks of this project
            filter: Todoist filter query (e.g. "today", "overdue", "p1")

        Returns:
            List of tasks, unscoped when no argument is given
        """
        params: dict[str, Any] = {}
        if project_id:
            params["project_id"] = project_id
        if filter:
            params["filter"] = filter

        result = await self._request("GET", "/tasks", params=params or None)
        return [Task.from_dict(t) for t in result or []]

    async def get_task(self, task_id: str) -> Task:
        """Get an active task by ID."""
        return Task.from_dict(await self._request("GET", f"/tasks/{task_id}"))

    async def create_task(
        self,
        content: str,
        description: Optional[str] = None,
        due_string: Optional[str] = None,
        priority: Optional[int] = None,
        project_id: Optional[str] = None,
        section_id: Optional[str] = None,
        parent_id: Optional[str] = None
    ) -> Task:
        """
        Create a new task.

        Args:
            content: Task title (required)
            description: Task description
            due_string: Natural language due date ("tomorrow", "next Monday")
            priority: Priority from 1 (normal) to 4 (urgent)
            project_id: Project ID (Inbox when omitted)
            section_id: Section ID
            parent_id: Parent task ID, makes the new task a subtask

        Returns:
            Created task
        """
        body: dict[str, Any] = {"content": content}

        if description is not None:
            body["description"] = description
        if due_string is not None:
            body["due_string"] = due_string
        if priority is not None:
            body["priority"] = priority
        if project_id is not None:
            body["project_id"] = project_id
        if section_id is not None:
            body["section_id"] = section_id
        if parent_id is not None:
            body["parent_id"] = parent_id

        return Task.from_dict(await self._request("POST", "/tasks", json=body))

    async def update_task(self, task_id: str, **fields: Any) -> Task:
        """
        Update an existing task.

        Only the given fields are sent (content, description, due_string,
        priority, ...).

        Args:
            task_id: Task ID

        Returns:
            Updated task
        """
        return Task.from_dict(await self._request("POST", f"/tasks/{task_id}", json=fields))

    async def close_task(self, task_id: str) -> bool:
        """Mark a task as complete."""
        await self._request("POST", f"/tasks/{task_id}/close")
        return True

    async def delete_task(self, task_id: str) -> bool:
        """Delete a task."""
        await self._request("DELETE", f"/tasks/{task_id}")
        return True
