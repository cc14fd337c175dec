"""Search facade used by the MCP tools and the CLI."""

import logging

from template_outlet_mcp.core.cache import IndexCache
from template_outlet_mcp.core.errors import ValidationError
from template_outlet_mcp.core.search import SearchResult, SectionFilter, search_index

logger = logging.getLogger(__name__)


def parse_section_filter(section: str | SectionFilter) -> SectionFilter:
    """Convert a filter name such as ``"best-practices"`` to ``SectionFilter``."""
    try:
        return SectionFilter(section)
    except ValueError:
        allowed = ", ".join(f.value for f in SectionFilter)
        raise ValidationError(
            f'Invalid section "{section}". Expected one of: {allowed}',
            details={"section": str(section)},
        )


class DocsSearchService:
    """Searches the documentation through an explicitly owned index cache."""

    def __init__(self, cache: IndexCache):
        self.cache = cache

    async def search(
        self, query: str, section: str | SectionFilter = SectionFilter.ALL
    ) -> list[SearchResult]:
        section_filter = parse_section_filter(section)
        if not query.strip():
            return []

        index = await self.cache.get_index()
        results = search_index(index, query, section_filter)
        logger.debug(
            f'Search for "{query}" returned {len(results)} results',
            extra={"extra_data": {"section": section_filter.value}},
        )
        return results
