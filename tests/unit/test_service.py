"""Unit tests for the search facade."""

from unittest.mock import AsyncMock, Mock

import pytest

from template_outlet_mcp.core.errors import ValidationError
from template_outlet_mcp.core.index import build_index
from template_outlet_mcp.core.search import ResultType, SectionFilter
from template_outlet_mcp.core.service import DocsSearchService, parse_section_filter


class TestParseSectionFilter:
    """Test filter name parsing."""

    def test_known_names(self):
        assert parse_section_filter("best-practices") is SectionFilter.BEST_PRACTICES
        assert parse_section_filter(SectionFilter.API) is SectionFilter.API

    def test_unknown_name(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_section_filter("faq")
        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"section": "faq"}


class TestDocsSearchService:
    """Test searching through the cache."""

    def setup_method(self):
        """Set up test fixtures."""
        index = build_index("## Troubleshooting\nIf foo() fails, retry.\n", "")
        self.cache = Mock()
        self.cache.get_index = AsyncMock(return_value=index)
        self.service = DocsSearchService(self.cache)

    @pytest.mark.asyncio
    async def test_search(self):
        results = await self.service.search("foo", "troubleshooting")
        assert [r.type for r in results] == [
            ResultType.TROUBLESHOOTING,
            ResultType.SECTION,
        ]
        self.cache.get_index.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_blank_query_skips_index(self):
        assert await self.service.search("   ") == []
        self.cache.get_index.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_filter(self):
        with pytest.raises(ValidationError):
            await self.service.search("foo", "nope")
