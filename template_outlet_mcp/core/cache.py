"""Time-based cache around the documentation index."""

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from template_outlet_mcp.core.errors import DocsServerError, IndexBuildError
from template_outlet_mcp.core.index import DocumentIndex, build_index

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 5 * 60


class DocumentSource(Protocol):
    """Anything that can supply the raw manual and README text."""

    async def read_manual(self) -> str: ...

    async def read_readme(self) -> str: ...

    async def read_documents(self) -> tuple[str, str]: ...


@dataclass(frozen=True)
class _CacheEntry:
    index: DocumentIndex
    built_at: float


class IndexCache:
    """Holds the most recently built index for ``CACHE_TTL_SECONDS``.

    The index and its build timestamp are swapped in as one entry, and only
    after both documents loaded and parsed, so a failed or in-flight rebuild
    is never observable. Concurrent callers wait behind a single rebuild.
    """

    def __init__(
        self,
        source: DocumentSource,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.source = source
        self._clock = clock
        self._entry: _CacheEntry | None = None
        self._lock = asyncio.Lock()

    @property
    def is_fresh(self) -> bool:
        """True if an index is cached and younger than the TTL."""
        entry = self._entry
        return entry is not None and self._clock() - entry.built_at < CACHE_TTL_SECONDS

    async def get_index(self) -> DocumentIndex:
        """Return the cached index, rebuilding it when absent or stale.

        Raises:
            IndexBuildError: If either document fails to load. The cached
                entry is left as it was.
        """
        async with self._lock:
            entry = self._entry
            if entry is not None and self.is_fresh:
                logger.debug("Search index cache hit")
                return entry.index

            try:
                manual, readme = await self.source.read_documents()
            except (DocsServerError, OSError) as e:
                logger.error(f"Error building search index: {e}")
                raise IndexBuildError.from_cause(e) from e

            index = build_index(manual, readme)
            self._entry = _CacheEntry(index=index, built_at=self._clock())
            logger.info(
                "Built documentation search index",
                extra={
                    "extra_data": {
                        "sections": len(index.sections),
                        "examples": len(index.examples),
                    }
                },
            )
            return index

    def clear(self) -> None:
        """Drop the cached index so the next lookup rebuilds it."""
        self._entry = None
        logger.debug("Search index cache cleared")
