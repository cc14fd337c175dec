"""Heading listing for the table of contents."""

import re
from dataclasses import dataclass

from template_outlet_mcp.core.index import iter_lines

MARKDOWN_LINK_PATTERN = re.compile(r"\[.*?\]\(.*?\)")

HEADING_PREFIXES = {2: "## ", 3: "### "}


@dataclass(frozen=True)
class Heading:
    level: int
    title: str
    position: int


def clean_heading_title(title: str) -> str:
    """Drop inline Markdown links and surrounding whitespace."""
    return MARKDOWN_LINK_PATTERN.sub("", title).strip()


def list_sections(manual: str) -> list[Heading]:
    """Return every ``##`` and ``###`` heading of the manual in document order.

    Reads the text directly rather than a cached index, so it always reflects
    the manual it is given.
    """
    headings = []
    for offset, line in iter_lines(manual):
        for level, prefix in HEADING_PREFIXES.items():
            if line.startswith(prefix) and len(line) > len(prefix):
                headings.append(
                    Heading(
                        level=level,
                        title=clean_heading_title(line[len(prefix) :]),
                        position=offset,
                    )
                )
    return sorted(headings, key=lambda heading: heading.position)
