"""Unit tests for tool output rendering."""

import json

from template_outlet_mcp.core.errors import DocumentationNotFoundError
from template_outlet_mcp.core.headings import Heading
from template_outlet_mcp.core.search import ResultType, SearchResult
from template_outlet_mcp.mcp_server.formatting import (
    format_error_response,
    format_example,
    format_search_results,
    format_table_of_contents,
)


class TestFormatSearchResults:
    """Test search result rendering."""

    def test_results(self):
        results = [
            SearchResult(type=ResultType.API_REFERENCE, snippet="api text", relevance=30),
            SearchResult(
                type=ResultType.SECTION, snippet="intro text", relevance=30, title="Intro"
            ),
        ]
        text = format_search_results("foo", "all", results)

        assert text.startswith('# Search Results for "foo"\n\nFound 2 relevant sections:')
        assert "### 1. API Reference\n\napi text\n\n---\n" in text
        assert "### 2. Section: Intro\n\nintro text\n\n---\n" in text

    def test_no_results(self):
        text = format_search_results("zzz", "api", [])
        assert text.startswith('No results found for "zzz" in section "api".')
        assert "list-sections" in text


class TestFormatTableOfContents:
    """Test table of contents rendering."""

    def test_indentation_and_counts(self):
        headings = [
            Heading(level=2, title="Intro", position=0),
            Heading(level=3, title="Setup", position=10),
            Heading(level=2, title="API", position=20),
        ]
        text = format_table_of_contents(headings)

        assert "Total sections: 2 main sections, 1 subsections" in text
        assert "- Intro\n  - Setup\n- API" in text


class TestFormatExample:
    def test_includes_marker_and_body(self):
        text = format_example("Example 2: Nested Menu", "### Example 2: Nested Menu\nbody")
        assert text.startswith("# Example 2: Nested Menu\n\n### Example 2")
        assert "Template Outlet plugin" in text


class TestFormatErrorResponse:
    """Test error rendering."""

    def test_message_and_details(self):
        error = DocumentationNotFoundError("missing", details={"path": "/docs"})
        text = format_error_response(error)

        assert text.startswith("Error: missing")
        assert "Details: " + json.dumps({"path": "/docs"}, indent=2) in text
        assert "Debug" not in text

    def test_plain_exception(self):
        assert format_error_response(RuntimeError("boom")) == "Error: boom"

    def test_debug_block(self):
        text = format_error_response(DocumentationNotFoundError(), debug=True)
        assert '"name": "DocumentationNotFoundError"' in text
        assert '"is_operational": true' in text
