"""Relevance-ranked substring search over a built documentation index."""

from dataclasses import dataclass
from enum import Enum

from template_outlet_mcp.core.index import DocumentIndex, iter_lines

MAX_RESULTS = 5
DEFAULT_SNIPPET_CHARS = 300
EXAMPLE_SNIPPET_CHARS = 400
ELLIPSIS = "..."

OCCURRENCE_WEIGHT = 10
HEADING_BONUS = 50
EXACT_MATCH_BONUS = 20


class ResultType(str, Enum):
    """Kind of index region a search result came from."""

    API_REFERENCE = "API Reference"
    TROUBLESHOOTING = "Troubleshooting"
    BEST_PRACTICES = "Best Practices"
    SECTION = "Section"
    EXAMPLE = "Example"


class SectionFilter(str, Enum):
    """Restricts which named regions are scanned.

    Generic sections are scanned whatever the filter.
    """

    ALL = "all"
    API = "api"
    EXAMPLES = "examples"
    TROUBLESHOOTING = "troubleshooting"
    BEST_PRACTICES = "best-practices"

    def allows(self, other: "SectionFilter") -> bool:
        return self is SectionFilter.ALL or self is other


@dataclass(frozen=True)
class SearchResult:
    """Single ranked match."""

    type: ResultType
    snippet: str
    relevance: int
    title: str | None = None

    @property
    def heading(self) -> str:
        """Display heading, e.g. ``Section: Getting Started``."""
        if self.title:
            return f"{self.type.value}: {self.title}"
        return self.type.value


def _has_heading_match(content: str, normalized_query: str) -> bool:
    for _, line in iter_lines(content):
        if line.startswith("##") and normalized_query in line[2:].lower():
            return True
    return False


def calculate_relevance(content: str, query: str) -> int:
    """Score a matched region.

    ``10 * occurrences + 50`` if a ``##`` line contains the query, ``+ 20``
    whenever the query occurs at all. The query is always literal text.
    """
    normalized_content = content.lower()
    normalized_query = query.lower()

    occurrences = normalized_content.count(normalized_query)
    heading_bonus = HEADING_BONUS if _has_heading_match(content, normalized_query) else 0
    exact_match_bonus = EXACT_MATCH_BONUS if normalized_query in normalized_content else 0

    return occurrences * OCCURRENCE_WEIGHT + heading_bonus + exact_match_bonus


def get_relevant_snippet(
    content: str, query: str, context_chars: int = DEFAULT_SNIPPET_CHARS
) -> str:
    """Cut a window of text around the first occurrence of ``query``."""
    index = content.lower().find(query.lower())
    if index == -1:
        return content[:context_chars] + ELLIPSIS

    half = context_chars // 2
    start = max(0, index - half)
    end = min(len(content), index + len(query) + half)

    snippet = content[start:end].strip()
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(content):
        snippet = snippet + ELLIPSIS
    return snippet


def _match(
    result_type: ResultType,
    content: str,
    query: str,
    title: str | None = None,
    context_chars: int = DEFAULT_SNIPPET_CHARS,
) -> SearchResult:
    return SearchResult(
        type=result_type,
        title=title,
        snippet=get_relevant_snippet(content, query, context_chars),
        relevance=calculate_relevance(content, query),
    )


def search_index(
    index: DocumentIndex,
    query: str,
    section_filter: SectionFilter = SectionFilter.ALL,
) -> list[SearchResult]:
    """Return at most five results, best first.

    Scan order is API, Troubleshooting, Best Practices, every section, then
    every example. Equal scores keep scan order.
    """
    if not query:
        return []

    normalized_query = query.lower()
    results: list[SearchResult] = []

    regions = (
        (SectionFilter.API, ResultType.API_REFERENCE, index.api),
        (SectionFilter.TROUBLESHOOTING, ResultType.TROUBLESHOOTING, index.troubleshooting),
        (SectionFilter.BEST_PRACTICES, ResultType.BEST_PRACTICES, index.best_practices),
    )
    for region_filter, result_type, content in regions:
        if section_filter.allows(region_filter) and normalized_query in content.lower():
            results.append(_match(result_type, content, query))

    for section in index.sections:
        if normalized_query in section.content.lower():
            results.append(
                _match(ResultType.SECTION, section.content, query, title=section.title)
            )

    if section_filter.allows(SectionFilter.EXAMPLES):
        for i, example in enumerate(index.examples, start=1):
            search_text = f"{example.context}\n{example.code}"
            if normalized_query in search_text.lower():
                results.append(
                    _match(
                        ResultType.EXAMPLE,
                        search_text,
                        query,
                        title=f"Code Example {i}",
                        context_chars=EXAMPLE_SNIPPET_CHARS,
                    )
                )

    # sorted() is stable, ties keep scan order
    results = sorted(results, key=lambda result: -result.relevance)
    return results[:MAX_RESULTS]
