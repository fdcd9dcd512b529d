"""Debounced, cancellable search for interactive callers."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Sequence

from furnisearch.index.search import MAX_RESULTS, search
from furnisearch.models import CatalogItem, ScoredResult

LOGGER = logging.getLogger(__name__)

DEFAULT_DELAY = 0.15


class DebouncedSearch:
    """Run searches after a quiet period, dropping superseded queries.

    Each ``submit`` cancels the previous pending call; the awaiter of a
    cancelled call receives ``None`` instead of results. The catalog is
    fetched from ``catalog_provider`` when the search actually runs.
    """

    def __init__(
        self,
        catalog_provider: Callable[[], Sequence[CatalogItem]],
        *,
        delay: float = DEFAULT_DELAY,
        limit: int = MAX_RESULTS,
    ) -> None:
        self.catalog_provider = catalog_provider
        self.delay = delay
        self.limit = limit
        self._pending: asyncio.Task[List[ScoredResult]] | None = None

    async def _run(self, query: str) -> List[ScoredResult]:
        await asyncio.sleep(self.delay)
        catalog = self.catalog_provider()
        return await asyncio.to_thread(search, query, catalog, limit=self.limit)

    async def submit(self, query: str) -> List[ScoredResult] | None:
        self.cancel()
        task = asyncio.create_task(self._run(query))
        self._pending = task
        try:
            return await task
        except asyncio.CancelledError:
            if task.cancelled() and not _current_task_cancelling():
                LOGGER.debug("Search for %r superseded", query)
                return None
            raise
        finally:
            if self._pending is task:
                self._pending = None

    def cancel(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None


def _current_task_cancelling() -> bool:
    current = asyncio.current_task()
    return current is not None and current.cancelling() > 0
