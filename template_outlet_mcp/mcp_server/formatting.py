"""Markdown rendering of tool results."""

import json

from template_outlet_mcp.core.errors import DocsServerError
from template_outlet_mcp.core.headings import Heading
from template_outlet_mcp.core.search import SearchResult


def format_search_results(
    query: str, section: str, results: list[SearchResult]
) -> str:
    if not results:
        return (
            f'No results found for "{query}" in section "{section}".\n\n'
            "Try:\n"
            "- Using different keywords\n"
            '- Searching in "all" sections\n'
            "- Using the list-sections tool to see available topics"
        )

    blocks = "\n".join(
        f"### {i}. {result.heading}\n\n{result.snippet}\n\n---\n"
        for i, result in enumerate(results, start=1)
    )
    return (
        f'# Search Results for "{query}"\n\n'
        f"Found {len(results)} relevant sections:\n\n{blocks}"
    )


def format_table_of_contents(headings: list[Heading]) -> str:
    """Render headings as an indented list with section counts."""
    toc = "\n".join(
        f"{'  ' * (heading.level - 2)}- {heading.title}" for heading in headings
    )
    main_count = sum(1 for heading in headings if heading.level == 2)
    sub_count = sum(1 for heading in headings if heading.level == 3)

    return (
        "# Alpine.js Template Outlet Documentation Structure\n\n"
        f"Total sections: {main_count} main sections, {sub_count} subsections\n\n"
        f"## Table of Contents\n\n{toc}\n\n---\n\n"
        "**Tip:** Use the `search-docs` tool to find specific information "
        "within these sections."
    )


def format_example(marker: str, body: str) -> str:
    return (
        f"# {marker}\n\n{body}\n\n---\n\n"
        "**Note:** This example uses Alpine.js and the Template Outlet plugin. "
        "Make sure both are included in your project."
    )


def format_error_response(error: Exception, debug: bool = False) -> str:
    """Render an error as tool output text.

    Details are appended as pretty JSON; ``debug`` adds the error class and
    whether it is operational.
    """
    text = f"Error: {error}"

    details = getattr(error, "details", None)
    if details:
        text += f"\n\nDetails: {json.dumps(details, indent=2, default=str)}"

    if debug:
        debug_info = {
            "name": type(error).__name__,
            "is_operational": isinstance(error, DocsServerError)
            and error.is_operational,
        }
        text += f"\n\nDebug: {json.dumps(debug_info, indent=2)}"

    return text
