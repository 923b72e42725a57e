import os
import sys
import asyncio
import logging
from pathlib import Path

# Add project root to Python path so the server can be run as a script
project_root = os.path.abspath(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))
)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from src.servers.github.handlers.catalog import TOOLS
from src.servers.github.handlers.dispatcher import dispatch
from src.utils.github.util import create_github_client

SERVICE_NAME = Path(__file__).parent.name
SERVER_NAME = "github-server"
SERVER_VERSION = "0.1.0"

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(SERVICE_NAME)


def create_server(github_client=None):
    """
    Initializes and configures a GitHub MCP server instance.

    Args:
        github_client (Optional[GitHubClient]): Client used for every tool call.
            Built from GITHUB_TOKEN when omitted.

    Returns:
        Server: Configured server instance with all GitHub tools registered.

    Raises:
        ValueError: If no client is given and GITHUB_TOKEN is not set.
    """
    if github_client is None:
        github_client = create_github_client()

    server = Server(SERVER_NAME)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """
        Lists all available tools for interacting with the GitHub API.

        Returns:
            list[types.Tool]: A list of tool metadata with schema definitions.
        """
        logger.info("Listing tools")
        return [tool.model_copy(deep=True) for tool in TOOLS]

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        """
        Dispatches a tool call to the corresponding GitHub API method.

        McpError raised by the dispatcher propagates so the caller receives
        the error code instead of a generic error result.
        """
        name = req.params.name
        logger.info(f"Calling tool: {name}")

        content = await dispatch(github_client, name, req.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


def get_initialization_options(server_instance: Server) -> InitializationOptions:
    """
    Provides initialization options required for registering the server.

    Args:
        server_instance (Server): The GitHub MCP server instance.

    Returns:
        InitializationOptions: The initialization configuration block.
    """
    return InitializationOptions(
        server_name=SERVER_NAME,
        server_version=SERVER_VERSION,
        capabilities=server_instance.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )


async def run_stdio_server(server_instance: Server):
    """Run the server using stdin/stdout streams"""
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("GitHub MCP server running on stdio")
        await server_instance.run(
            read_stream,
            write_stream,
            get_initialization_options(server_instance),
        )


def main():
    """Entry point: build the server from the environment and serve on stdio"""
    try:
        server_instance = create_server()
    except ValueError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    try:
        asyncio.run(run_stdio_server(server_instance))
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
