"""MCP tools for the Template Outlet documentation."""

import logging
from importlib.metadata import PackageNotFoundError, version

from template_outlet_mcp.core.cache import IndexCache
from template_outlet_mcp.core.examples import get_example_text
from template_outlet_mcp.core.headings import list_sections
from template_outlet_mcp.core.loader import DocumentLoader
from template_outlet_mcp.core.search import SectionFilter
from template_outlet_mcp.core.service import DocsSearchService
from template_outlet_mcp.mcp_server.config import PACKAGE_NAME, Config
from template_outlet_mcp.mcp_server.content import (
    INSTALLATION_GUIDE,
    PACKAGE_DESCRIPTION,
    PLUGIN_NPM_URL,
    REPOSITORY_URL,
)
from template_outlet_mcp.mcp_server.formatting import (
    format_example,
    format_search_results,
    format_table_of_contents,
)

logger = logging.getLogger(__name__)


def _installed_version(distribution: str) -> str:
    try:
        return version(distribution)
    except PackageNotFoundError:
        return "unknown"


class DocsTools:
    """Collection of MCP tools backed by one loader and one index cache."""

    def __init__(self, config: Config, loader: DocumentLoader | None = None):
        """Initialize tools; the index cache is owned by this instance."""
        self.config = config
        self.loader = loader or DocumentLoader(config.settings)
        self.cache = IndexCache(self.loader)
        self.search_service = DocsSearchService(self.cache)

    async def search_docs(
        self, query: str, section: str = SectionFilter.ALL.value
    ) -> str:
        """Search the documentation.

        Args:
            query: Text to look for (case-insensitive, matched literally)
            section: One of all, api, examples, troubleshooting, best-practices

        Returns:
            Markdown with up to five ranked snippets, or a hint when nothing matched
        """
        results = await self.search_service.search(query, section)
        return format_search_results(query, section, results)

    async def get_example(self, example: str) -> str:
        """Return one of the named worked examples from the manual."""
        manual = await self.loader.read_manual()
        marker, body = get_example_text(manual, example)
        return format_example(marker, body)

    async def list_sections(self) -> str:
        """Return the manual's table of contents.

        Re-reads the manual on every call instead of using the cached index.
        """
        manual = await self.loader.read_manual()
        return format_table_of_contents(list_sections(manual))

    async def get_installation(self) -> str:
        return INSTALLATION_GUIDE

    async def version(self) -> str:
        return (
            "# Template Outlet MCP Server Version\n\n"
            f"**Package:** {PACKAGE_NAME}\n"
            f"**Version:** {self.config.mcp_server_version}\n"
            f"**Description:** {PACKAGE_DESCRIPTION}\n\n"
            f"**MCP SDK Version:** {_installed_version('mcp')}\n\n"
            "---\n\n"
            f"**Repository:** {REPOSITORY_URL}\n"
            f"**Plugin Package:** {PLUGIN_NPM_URL}"
        )

    def clear_cache(self) -> None:
        self.cache.clear()
