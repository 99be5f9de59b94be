#!/usr/bin/env python3

import asyncio
import contextlib
import logging
import os
import sys
from typing import Optional, Sequence

import uvicorn
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from starlette.applications import Starlette
from starlette.responses import Response
from starlette.routing import Mount, Route

from todoist_mcp.config import MissingCredentialError, Settings, load_settings, parse_args, setup_logging
from todoist_mcp.server import create_server
from todoist_mcp.todoist_client import TodoistClient
from todoist_mcp.tools.dispatcher import ToolDispatcher


# --- Transports --- #
async def run_stdio(server: Server, client: TodoistClient) -> None:
    """Serve over stdin/stdout until the client disconnects."""
    try:
        async with stdio_server() as (read_stream, write_stream):
            logging.info("Todoist MCP Server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.close()


def create_sse_app(server: Server, client: TodoistClient) -> Starlette:
    """HTTP/SSE app for cloud deployment."""
    sse = SseServerTransport("/messages/")

    async def handle_sse(request):
        async with sse.connect_sse(
            request.scope, request.receive, request._send
        ) as streams:
            await server.run(
                streams[0], streams[1],
                server.create_initialization_options()
            )
        return Response()

    async def health_check(request):
        return Response("OK", status_code=200)

    @contextlib.asynccontextmanager
    async def lifespan(app):
        yield
        await client.close()

    return Starlette(
        routes=[
            Route("/sse", endpoint=handle_sse, methods=["GET"]),
            Mount("/messages", app=sse.handle_post_message),
            Route("/health", endpoint=health_check, methods=["GET"]),
        ],
        lifespan=lifespan,
    )


def run(settings: Settings) -> None:
    client = TodoistClient(api_token=settings.api_token, base_url=settings.api_base_url)
    server = create_server(ToolDispatcher(client))

    if settings.transport == "sse":
        app = create_sse_app(server, client)
        logging.info(f"Starting Todoist MCP server on port {settings.port}")
        logging.info("Health check available at: /health")
        uvicorn.run(app, host="0.0.0.0", port=settings.port)
    else:
        asyncio.run(run_stdio(server, client))


# --- Main Execution Logic --- #
def main(argv: Optional[Sequence[str]] = None) -> None:
    setup_logging(os.environ.get("LOG_LEVEL", "INFO"))
    args = parse_args(argv)

    try:
        settings = load_settings(args.dotenv_dir)
    except MissingCredentialError as e:
        logging.error(f"Error: {e}")
        sys.exit(1)

    # LOG_LEVEL may have come from the .env file
    logging.getLogger().setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    try:
        run(settings)
    except KeyboardInterrupt:
        logging.info("Server stopped")
    except Exception as e:
        logging.error(f"Fatal error running server: {e}", exc_info=True)
        sys.exit(1)


# --- Script Entry Point --- #
if __name__ == "__main__":
    main()
