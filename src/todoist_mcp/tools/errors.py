"""Errors raised while handling an MCP tool call.

All of them are turned into an error-flagged text result by the dispatcher.
"""


class ToolCallError(Exception):
    """Base class for tool call failures that are reported to the caller."""


class InvalidArgumentsError(ToolCallError):
    """The call's arguments are missing or have the wrong shape."""


class LookupNotFoundError(ToolCallError):
    """A task searched by name does not exist."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f'Could not find a task matching "{query}"')


class UnknownToolError(ToolCallError):
    """The call names a tool that is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
