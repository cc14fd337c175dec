"""In-memory documentation index.

The manual is parsed into ``##``-level sections, fenced HTML examples and
three named regions (API Reference, Troubleshooting, Best Practices). The
README is kept as a single opaque blob. Building is a pure function of the
two input strings; an index is never mutated after it is built.
"""

from collections.abc import Iterator
from dataclasses import dataclass

SECTION_PREFIX = "## "
HTML_FENCE = "```html\n"
FENCE = "```"

# Characters captured on each side of an example's opening fence
EXAMPLE_CONTEXT_CHARS = 300

API_HEADING = "API Reference"
TROUBLESHOOTING_HEADING = "Troubleshooting"
BEST_PRACTICES_HEADING = "Best Practices"


@dataclass(frozen=True)
class Section:
    """A ``##``-heading-delimited slice of the manual.

    Attributes:
        title: Raw heading text without the ``## `` prefix
        content: Text from the heading line up to the next ``##`` heading
        position: Character offset of the heading in the manual
    """

    title: str
    content: str
    position: int


@dataclass(frozen=True)
class Example:
    """A fenced HTML code block and the text surrounding it."""

    code: str
    context: str


@dataclass(frozen=True)
class DocumentIndex:
    """Parsed documentation, rebuilt wholesale on every cache refresh."""

    sections: tuple[Section, ...]
    examples: tuple[Example, ...]
    api: str
    troubleshooting: str
    best_practices: str
    readme: str


def iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, line)`` pairs, line terminators removed."""
    offset = 0
    for line in text.split("\n"):
        yield offset, line.rstrip("\r")
        offset += len(line) + 1


def _is_section_heading(line: str) -> bool:
    return line.startswith(SECTION_PREFIX) and len(line) > len(SECTION_PREFIX)


def parse_sections(content: str) -> list[Section]:
    """Split the manual into ``##`` sections in document order.

    ``###`` headings stay embedded in their parent section. Each section runs
    up to the start of the next one, so adjacent sections never overlap.
    """
    headings = [
        (offset, line[len(SECTION_PREFIX) :])
        for offset, line in iter_lines(content)
        if _is_section_heading(line)
    ]

    sections = []
    for i, (position, title) in enumerate(headings):
        end = headings[i + 1][0] if i + 1 < len(headings) else len(content)
        sections.append(
            Section(title=title, content=content[position:end], position=position)
        )
    return sections


def get_context_around(text: str, position: int, chars: int) -> str:
    """Return up to ``chars`` characters either side of ``position``, stripped."""
    start = max(0, position - chars)
    end = min(len(text), position + chars)
    return text[start:end].strip()


def extract_examples(content: str) -> list[Example]:
    """Collect every fenced HTML code block with its surrounding context."""
    examples = []
    search_from = 0
    while True:
        fence_start = content.find(HTML_FENCE, search_from)
        if fence_start == -1:
            break
        code_start = fence_start + len(HTML_FENCE)
        code_end = content.find(FENCE, code_start)
        if code_end == -1:
            # Unterminated fence
            break
        examples.append(
            Example(
                code=content[code_start:code_end],
                context=get_context_around(
                    content, fence_start, EXAMPLE_CONTEXT_CHARS
                ),
            )
        )
        search_from = code_end + len(FENCE)
    return examples


def extract_region(content: str, heading: str) -> str:
    """Return the body of the first ``## <heading>`` section.

    The body starts right after the heading text and ends before the next
    ``##`` heading (``###`` does not end it). Missing heading gives ``""``.
    """
    marker = SECTION_PREFIX + heading
    for offset, line in iter_lines(content):
        if line.startswith(marker):
            start = offset + len(marker)
            end = content.find("\n" + SECTION_PREFIX, start)
            return content[start:] if end == -1 else content[start:end]
    return ""


def build_index(manual: str, readme: str) -> DocumentIndex:
    """Build a search index from the manual and README text."""
    return DocumentIndex(
        sections=tuple(parse_sections(manual)),
        examples=tuple(extract_examples(manual)),
        api=extract_region(manual, API_HEADING),
        troubleshooting=extract_region(manual, TROUBLESHOOTING_HEADING),
        best_practices=extract_region(manual, BEST_PRACTICES_HEADING),
        readme=readme,
    )
