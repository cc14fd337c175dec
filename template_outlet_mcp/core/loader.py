"""Locating and reading the README and manual."""

import asyncio
import logging
from pathlib import Path

from template_outlet_mcp.core.errors import (
    DocumentationNotFoundError,
    DocumentationReadError,
)
from template_outlet_mcp.models.config import DocsSettings

logger = logging.getLogger(__name__)

MANUAL_FILENAME = "manual.md"
README_FILENAME = "README.md"

PACKAGE_DIR = Path(__file__).resolve().parent.parent
BUNDLED_DOCS_DIR = PACKAGE_DIR / "docs"
SIBLING_DOCS_DIR = PACKAGE_DIR.parent.parent / "template-outlet"


def resolve_docs_path(settings: DocsSettings | None = None) -> Path:
    """Find the documentation directory.

    Tries, in order: docs bundled with the package (only if they contain
    ``manual.md``), the configured ``docs_path`` (``TEMPLATE_OUTLET_DOCS_PATH``)
    and a sibling ``template-outlet`` checkout.

    Raises:
        DocumentationNotFoundError: If none of the locations exist.
    """
    settings = settings or DocsSettings()

    if (BUNDLED_DOCS_DIR / MANUAL_FILENAME).exists():
        logger.debug(f"Using bundled documentation at {BUNDLED_DOCS_DIR}")
        return BUNDLED_DOCS_DIR

    if settings.docs_path:
        if settings.docs_path.exists():
            logger.debug(f"Using configured documentation at {settings.docs_path}")
            return settings.docs_path
        logger.warning(
            f"TEMPLATE_OUTLET_DOCS_PATH is set but path does not exist: {settings.docs_path}"
        )

    if SIBLING_DOCS_DIR.exists():
        logger.debug(f"Using sibling documentation checkout at {SIBLING_DOCS_DIR}")
        return SIBLING_DOCS_DIR

    checked_paths = [BUNDLED_DOCS_DIR, settings.docs_path, SIBLING_DOCS_DIR]
    raise DocumentationNotFoundError(
        "Template Outlet documentation not found. Please either:\n"
        "1. Set TEMPLATE_OUTLET_DOCS_PATH environment variable to the docs location\n"
        f"2. Copy manual.md and README.md into {BUNDLED_DOCS_DIR}\n"
        "3. Clone the template-outlet repository as a sibling directory",
        details={"checked_paths": [str(path) for path in checked_paths if path]},
    )


class DocumentLoader:
    """Reads the manual and README from the documentation directory.

    Unless a directory is given explicitly it is resolved on every call;
    ``read_documents`` resolves it once for both files.
    """

    def __init__(
        self, settings: DocsSettings | None = None, docs_dir: Path | None = None
    ):
        self.settings = settings or DocsSettings()
        self.docs_dir = docs_dir

    def get_path(self, filename: str) -> Path:
        docs_dir = self.docs_dir or resolve_docs_path(self.settings)
        return docs_dir / filename

    async def read_manual(self) -> str:
        return await self._read(self.get_path(MANUAL_FILENAME))

    async def read_readme(self) -> str:
        return await self._read(self.get_path(README_FILENAME))

    async def read_documents(self) -> tuple[str, str]:
        """Read ``(manual, readme)`` from a single resolved directory."""
        docs_dir = self.docs_dir or resolve_docs_path(self.settings)
        manual = await self._read(docs_dir / MANUAL_FILENAME)
        readme = await self._read(docs_dir / README_FILENAME)
        return manual, readme

    async def _read(self, path: Path) -> str:
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError as e:
            raise DocumentationNotFoundError(
                f"Documentation file not found: {path}",
                details={"path": str(path)},
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentationReadError(
                f"Failed to read documentation file {path}: {e}",
                details={"path": str(path)},
            ) from e
