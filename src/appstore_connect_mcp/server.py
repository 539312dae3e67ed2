"""
MCP stdio server exposing the App Store Connect tools.
"""

import logging
import sys
from typing import Any, Dict, List

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .auth import TokenProvider
from .catalog import tool_definitions
from .client import AppStoreConnectClient
from .config import Settings
from .diagnostics import TOOL_NOT_FOUND
from .exceptions import AppStoreConnectError, ToolNotFoundError
from .tools import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "appstore-connect-server"


def build_server(settings: Settings) -> Server:
    """Wire settings, client and dispatcher into an MCP server."""
    client = AppStoreConnectClient(
        TokenProvider(settings.credentials),
        timeout=settings.timeout,
        stage_reports=settings.stage_reports,
    )
    dispatcher = ToolDispatcher(client, vendor_number=settings.vendor_number)
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [types.Tool(**definition) for definition in tool_definitions(settings.vendor_number)]

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        # Blocking HTTP work runs off the event loop
        try:
            response = await anyio.to_thread.run_sync(dispatcher.call_tool, name, arguments)
        except ToolNotFoundError:
            logger.warning(f"call_tool: unknown tool {name}")
            # Callers match on the fixed "Tool not found:" prefix
            raise ToolNotFoundError(
                TOOL_NOT_FOUND.format(name=name, available=", ".join(dispatcher.tool_names()))
            )
        text = response["content"][0]["text"]
        if response.get("isError"):
            # The server reports raised exceptions as isError results
            raise AppStoreConnectError(text)
        return [types.TextContent(type="text", text=text)]

    return server


async def _serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point."""
    settings = Settings.from_env()

    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        server = build_server(settings)
    except AppStoreConnectError as e:
        logger.error(f"Failed to start: {e}")
        sys.exit(1)

    logger.info("App Store Connect MCP server running on stdio")
    anyio.run(_serve, server)


if __name__ == "__main__":
    main()
