"""
MCP Server implementation for schema-form.

Provides both stdio and SSE transport support for the Model Context Protocol.
"""

import json
import logging
from typing import Any, Literal

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.sse import SseServerTransport
from mcp.types import Tool, TextContent
from starlette.applications import Starlette
from starlette.routing import Mount, Route
from starlette.responses import JSONResponse

from schema_form import __version__
from schema_form.config import get_config
from schema_form.mcp_server.tools import (
    get_mcp_tools,
    mcp_schema_to_form,
    mcp_validate_form,
)

logger = logging.getLogger("schema-form-mcp")


def handle_tool_call(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Dispatch a tool call to its handler."""
    if name == "schema_to_form":
        return mcp_schema_to_form(
            schema=arguments.get("schema", {}),
            validate=arguments.get("validate", True),
        )
    if name == "validate_form":
        return mcp_validate_form(form=arguments.get("form", {}))
    return {"error": f"Unknown tool: {name}"}


def create_mcp_server() -> Server:
    """
    Create and configure the MCP server instance.

    Returns:
        Configured MCP Server with schema-form tools registered.
    """
    server = Server("schema-form-mcp")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        tools_def = get_mcp_tools()
        return [
            Tool(
                name=t["name"],
                description=t["description"],
                inputSchema=t["inputSchema"],
            )
            for t in tools_def
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls."""
        logger.info(f"Tool call: {name}")
        result = handle_tool_call(name, arguments)
        indent = get_config().indent_json_output
        return [TextContent(type="text", text=json.dumps(result, indent=indent))]

    return server


async def run_stdio_server(server: Server) -> None:
    """
    Run MCP server with stdio transport.

    Used for desktop clients and local subprocess communication.
    """
    logger.info("Starting MCP server with stdio transport...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def create_sse_app(server: Server) -> Starlette:
    """
    Create Starlette app for SSE transport.

    Used for remote/Docker deployment.
    """
    # SSE transport - messages endpoint is relative to SSE mount point
    sse_transport = SseServerTransport("/messages/")

    async def handle_sse(scope, receive, send):
        """Handle SSE connections - raw ASGI handler."""
        async with sse_transport.connect_sse(scope, receive, send) as streams:
            await server.run(
                streams[0],
                streams[1],
                server.create_initialization_options(),
            )

    async def handle_messages(scope, receive, send):
        """Handle message POST requests - raw ASGI handler."""
        await sse_transport.handle_post_message(scope, receive, send)

    async def health_check(request):
        """Health check endpoint."""
        return JSONResponse({
            "status": "healthy",
            "service": "schema-form-mcp",
            "transport": "sse",
            "version": __version__,
        })

    return Starlette(
        routes=[
            Route("/health", health_check, methods=["GET"]),
            Mount("/sse/messages", app=handle_messages),
            Mount("/sse", app=handle_sse),
        ],
    )


async def run_sse_server(server: Server, host: str = "0.0.0.0", port: int = 8080) -> None:
    """
    Run MCP server with SSE transport.

    Args:
        server: MCP Server instance
        host: Host to bind to
        port: Port to listen on
    """
    import uvicorn

    logger.info(f"Starting MCP server with SSE transport on {host}:{port}...")

    app = create_sse_app(server)
    config = uvicorn.Config(app, host=host, port=port, log_level=get_config().log_level.lower())
    server_instance = uvicorn.Server(config)
    await server_instance.serve()


async def run_mcp_server(
    transport: Literal["stdio", "sse"] = "stdio",
    host: str = "0.0.0.0",
    port: int = 8080,
) -> None:
    """
    Run MCP server with specified transport.

    Args:
        transport: Transport type - "stdio" or "sse"
        host: Host for SSE transport (default: 0.0.0.0)
        port: Port for SSE transport (default: 8080)
    """
    server = create_mcp_server()

    if transport == "stdio":
        await run_stdio_server(server)
    elif transport == "sse":
        await run_sse_server(server, host, port)
    else:
        raise ValueError(f"Unknown transport: {transport}. Use 'stdio' or 'sse'.")
