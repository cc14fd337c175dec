"""Main MCP server for the Template Outlet documentation."""

import asyncio
import logging
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from template_outlet_mcp.core.errors import DocsServerError
from template_outlet_mcp.core.examples import EXAMPLE_MARKERS
from template_outlet_mcp.core.logging import setup_logging
from template_outlet_mcp.core.search import SectionFilter
from template_outlet_mcp.mcp_server.config import Config
from template_outlet_mcp.mcp_server.formatting import format_error_response
from template_outlet_mcp.mcp_server.tools import DocsTools

logger = logging.getLogger(__name__)

server = Server("template-outlet-docs")

# Process-wide state, set up by init_server()
config: Config
tools: DocsTools

# Prefix used when a tool fails, keyed by tool name
TOOL_ERROR_LABELS = {
    "search-docs": "searching documentation",
    "get-example": "retrieving example",
    "list-sections": "listing sections",
    "get-installation": "getting installation guide",
    "version": "getting version",
}


class ToolCallError(Exception):
    """Failed tool call; the SDK returns its message with ``isError=True``."""


def init_server(server_config: Config | None = None) -> DocsTools:
    """Create the tools (and with them the index cache) for this process."""
    global config, tools
    config = server_config or Config()
    tools = DocsTools(config)
    return tools


@server.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    """List available MCP tools."""
    return [
        types.Tool(
            name="search-docs",
            description="Search Alpine.js Template Outlet documentation for specific topics, patterns, or examples. Perfect for finding information about recursive rendering, nested structures, or specific use cases.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": 'Search query (e.g., "recursive rendering", "menu example", "troubleshooting infinite loop")',
                    },
                    "section": {
                        "type": "string",
                        "enum": [f.value for f in SectionFilter],
                        "description": 'Limit search to specific section (optional, defaults to "all")',
                        "default": SectionFilter.ALL.value,
                    },
                },
                "required": ["query"],
            },
        ),
        types.Tool(
            name="get-example",
            description="Get a specific code example with full implementation details from the documentation",
            inputSchema={
                "type": "object",
                "properties": {
                    "example": {
                        "type": "string",
                        "enum": list(EXAMPLE_MARKERS),
                        "description": "Name of the example to retrieve",
                    }
                },
                "required": ["example"],
            },
        ),
        types.Tool(
            name="list-sections",
            description="List all available documentation sections and topics with their hierarchy",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
        types.Tool(
            name="get-installation",
            description="Get installation instructions for Alpine.js Template Outlet (NPM, CDN and self-hosted setups)",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
        types.Tool(
            name="version",
            description="Get version information about the Template Outlet MCP server, including package version, MCP SDK version, and related links",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
    ]


@server.call_tool()
async def handle_call_tool(
    name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    arguments = arguments or {}
    if name not in TOOL_ERROR_LABELS:
        raise ToolCallError(f"Error: Unknown tool '{name}'")

    try:
        if name == "search-docs":
            text = await tools.search_docs(**arguments)
        elif name == "get-example":
            text = await tools.get_example(**arguments)
        elif name == "list-sections":
            text = await tools.list_sections()
        elif name == "get-installation":
            text = await tools.get_installation()
        else:
            text = await tools.version()

        return [types.TextContent(type="text", text=text)]

    except DocsServerError as e:
        logger.warning(f"Tool {name} failed: {e}")
        text = format_error_response(e, debug=config.settings.is_development)
        raise ToolCallError(text) from e

    except Exception as e:
        logger.error(f"Tool execution failed: {e}", exc_info=True)
        raise ToolCallError(f"Error {TOOL_ERROR_LABELS[name]}: {e}") from e


async def main():
    init_server()
    setup_logging(config.settings.log_level, config.settings.log_file)
    logger.info(f"Starting MCP server {config.mcp_server_name} v{config.mcp_server_version}")

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=config.mcp_server_name,
                server_version=config.mcp_server_version,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def cli_main():
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
