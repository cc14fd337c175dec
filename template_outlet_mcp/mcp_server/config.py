"""Configuration for the MCP server."""

from template_outlet_mcp import __version__
from template_outlet_mcp.models.config import DocsSettings

PACKAGE_NAME = "template-outlet-mcp"


class Config:
    """MCP server configuration."""

    def __init__(self, settings: DocsSettings | None = None, **overrides: str):
        """Initialize configuration with optional overrides."""
        self.settings = settings or DocsSettings.load_from_file()
        self.mcp_server_name = overrides.get(
            "mcp_server_name", self.settings.server_name
        )
        self.mcp_server_version = overrides.get("mcp_server_version", __version__)

    def __repr__(self) -> str:
        return f"Config(mcp_server_name='{self.mcp_server_name}')"
