"""
Keycloak MCP Server - Main Entry Point

Low-level MCP server over stdio with:
- One tool per registered Keycloak admin operation
- Argument validation by the dispatcher (SDK-side validation disabled)
- A fresh authenticated admin session per tool call

Environment Variables:
- KEYCLOAK_URL: Keycloak base URL (default: http://localhost:8080)
- KEYCLOAK_ADMIN / KEYCLOAK_ADMIN_PASSWORD: Admin credentials
- KEYCLOAK_MCP_LOG_LEVEL: Logging level
- See config.py for the full list
"""
from __future__ import annotations

import asyncio
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool, ToolAnnotations

from mcp_server_keycloak.config import AppConfig, get_config
from mcp_server_keycloak.core import (
    KeycloakSessionManager,
    OperationDispatcher,
    OperationRegistry,
    get_logger,
    init_observability,
)
from mcp_server_keycloak.tools import build_registry

logger = get_logger("keycloak-mcp.server")


def build_tools(registry: OperationRegistry) -> list[Tool]:
    """Describe every registered operation as an MCP tool."""
    return [
        Tool(
            name=operation.name,
            title=operation.title,
            description=operation.description,
            inputSchema=operation.input_schema(),
            annotations=ToolAnnotations(
                title=operation.title,
                readOnlyHint=operation.read_only,
                destructiveHint=operation.destructive,
                idempotentHint=operation.idempotent,
                openWorldHint=True,
            ),
        )
        for operation in registry
    ]


def build_server(
    dispatcher: OperationDispatcher,
    registry: OperationRegistry,
    config: AppConfig,
) -> Server:
    """
    Create the MCP server and wire its handlers to the dispatcher.

    Errors raised by the dispatcher are reported by the SDK as tool results
    with ``isError`` set and the error message as text.
    """
    server = Server(
        config.server.name,
        version=config.server.version,
        instructions=(
            "Administer a Keycloak server: users, realms, clients, roles, "
            "groups, sessions and events. Every tool takes the target realm "
            "as its 'realm' argument."
        ),
    )
    tools = build_tools(registry)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return tools

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        text = await dispatcher.dispatch(name, arguments)
        return [TextContent(type="text", text=text)]

    return server


async def serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Entry point: run the server over stdio."""
    try:
        config = get_config()
        init_observability(
            service_name=config.server.name,
            service_version=config.server.version,
            log_level=config.server.log_level,
            json_logs=config.server.json_logs,
        )

        sessions = KeycloakSessionManager(
            config.keycloak.url,
            config.keycloak.auth_config(),
            verify=config.keycloak.verify_ssl,
            timeout=config.keycloak.request_timeout,
        )
        registry = build_registry()
        dispatcher = OperationDispatcher(registry, sessions)
        server = build_server(dispatcher, registry, config)

        logger.info(
            "Starting Keycloak MCP server",
            version=config.server.version,
            keycloak_url=config.keycloak.url,
            tools=len(registry),
        )
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        logger.info("Keycloak MCP server stopped")
    except Exception as e:
        logger.exception("Fatal error starting Keycloak MCP server", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
