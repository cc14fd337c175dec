"""Lookup of the named worked examples in the manual."""

from template_outlet_mcp.core.errors import ExampleNotFoundError

EXAMPLE_MARKERS = {
    "simple-tree": "Example 1: Simple Tree Structure",
    "nested-menu": "Example 2: Nested Menu",
    "interactive-tree": "Example 3: Interactive Tree with Add/Remove",
    "file-system": "Example 4: File System Explorer",
    "comment-thread": "Use Case 1: Comment Thread System",
    "org-chart": "Use Case 2: Organization Chart",
}


def get_example_text(manual: str, example_name: str) -> tuple[str, str]:
    """Return ``(marker, body)`` for a named example.

    The body runs from the example's ``###`` heading to the next ``##`` or
    ``###`` heading.

    Raises:
        ExampleNotFoundError: Unknown name, or the heading is missing from
            the manual.
    """
    available = list(EXAMPLE_MARKERS)
    marker = EXAMPLE_MARKERS.get(example_name)
    if marker is None:
        raise ExampleNotFoundError(example_name, available)

    start = manual.find(f"### {marker}")
    if start == -1:
        raise ExampleNotFoundError(example_name, available)

    end = manual.find("\n##", start)
    if end == -1:
        end = len(manual)
    return marker, manual[start:end].strip()
