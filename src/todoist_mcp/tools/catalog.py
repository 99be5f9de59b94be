"""
MCP tool descriptors advertised by the server.

The JSON schemas here are what the client sees; argument checking at call
time happens in todoist_mcp.tools.arguments.
"""

from mcp.types import Tool

PRIORITY_VALUES = [1, 2, 3, 4]

CREATE_TASK_TOOL = Tool(
    name="todoist_create_task",
    description="Create a new task in Todoist with optional description, due date, priority, section, and parent task support",
    inputSchema={
        "type": "object",
        "properties": {
            "content": {
                "type": "string",
                "description": "The content/title of the task"
            },
            "description": {
                "type": "string",
                "description": "Detailed description of the task (optional)"
            },
            "project_id": {
                "type": "string",
                "description": "ID of the project to add the task to (optional)"
            },
            "project_name": {
                "type": "string",
                "description": "Name of the project to add the task to (e.g., 'Shopping', 'Work') (optional)"
            },
            "section_id": {
                "type": "string",
                "description": "ID of the section to add the task to (optional)"
            },
            "section_name": {
                "type": "string",
                "description": "Name of the section to add the task to (e.g., 'Groceries', 'Meetings') (optional)"
            },
            "parent_id": {
                "type": "string",
                "description": "ID of the parent task to create this as a subtask (optional)"
            },
            "parent_task_name": {
                "type": "string",
                "description": "Name/content of the parent task to create this as a subtask (optional)"
            },
            "due_string": {
                "type": "string",
                "description": "Natural language due date like 'tomorrow', 'next Monday', 'Jan 23' (optional)"
            },
            "priority": {
                "type": "number",
                "description": "Task priority from 1 (normal) to 4 (urgent) (optional)",
                "enum": PRIORITY_VALUES
            }
        },
        "required": ["content"]
    },
)

GET_TASKS_TOOL = Tool(
    name="todoist_get_tasks",
    description="Get a list of tasks from Todoist with various filters including section and parent task",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Filter tasks by project ID (optional)"
            },
            "project_name": {
                "type": "string",
                "description": "Filter tasks by project name (e.g., 'Shopping', 'Work') (optional)"
            },
            "section_id": {
                "type": "string",
                "description": "Filter tasks by section ID (optional)"
            },
            "section_name": {
                "type": "string",
                "description": "Filter tasks by section name (e.g., 'Groceries', 'Meetings') (optional)"
            },
            "parent_id": {
                "type": "string",
                "description": "Filter tasks by parent task ID to get subtasks (optional)"
            },
            "parent_task_name": {
                "type": "string",
                "description": "Filter tasks by parent task name to get subtasks (optional)"
            },
            "filter": {
                "type": "string",
                "description": "Natural language filter like 'today', 'tomorrow', 'next week', 'priority 1', 'overdue' (optional)"
            },
            "priority": {
                "type": "number",
                "description": "Filter by priority level (1-4) (optional)",
                "enum": PRIORITY_VALUES
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of tasks to return (optional)",
                "default": 10
            }
        }
    },
)

GET_PROJECTS_TOOL = Tool(
    name="todoist_get_projects",
    description="Get a list of projects from Todoist with optional filters",
    inputSchema={
        "type": "object",
        "properties": {
            "filter": {
                "type": "string",
                "description": "Natural language filter like 'Career planning', 'shopping','work', 'personal growth' (optional)"
            }
        }
    },
)

UPDATE_TASK_TOOL = Tool(
    name="todoist_update_task",
    description="Update an existing task in Todoist by searching for it by name and then updating it",
    inputSchema={
        "type": "object",
        "properties": {
            "task_name": {
                "type": "string",
                "description": "Name/content of the task to search for and update"
            },
            "content": {
                "type": "string",
                "description": "New content/title for the task (optional)"
            },
            "description": {
                "type": "string",
                "description": "New description for the task (optional)"
            },
            "due_string": {
                "type": "string",
                "description": "New due date in natural language like 'tomorrow', 'next Monday' (optional)"
            },
            "priority": {
                "type": "number",
                "description": "New priority level from 1 (normal) to 4 (urgent) (optional)",
                "enum": PRIORITY_VALUES
            }
        },
        "required": ["task_name"]
    },
)

DELETE_TASK_TOOL = Tool(
    name="todoist_delete_task",
    description="Delete a task from Todoist by searching for it by name",
    inputSchema={
        "type": "object",
        "properties": {
            "task_name": {
                "type": "string",
                "description": "Name/content of the task to search for and delete"
            }
        },
        "required": ["task_name"]
    },
)

COMPLETE_TASK_TOOL = Tool(
    name="todoist_complete_task",
    description="Mark a task as complete by searching for it by name",
    inputSchema={
        "type": "object",
        "properties": {
            "task_name": {
                "type": "string",
                "description": "Name/content of the task to search for and complete"
            }
        },
        "required": ["task_name"]
    },
)

TOOLS: list[Tool] = [
    CREATE_TASK_TOOL,
    GET_TASKS_TOOL,
    GET_PROJECTS_TOOL,
    UPDATE_TASK_TOOL,
    DELETE_TASK_TOOL,
    COMPLETE_TASK_TOOL,
]
