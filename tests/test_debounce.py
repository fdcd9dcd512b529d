"""Tests for debounced search."""

from __future__ import annotations

import asyncio

from furnisearch.index.debounce import DebouncedSearch


class TestDebouncedSearch:
    """Tests for DebouncedSearch."""

    def test_runs_after_delay(self, storefront) -> None:
        """A lone submission returns search results."""
        debounced = DebouncedSearch(lambda: storefront, delay=0)

        results = asyncio.run(debounced.submit("locker"))

        assert results is not None
        assert results[0].item.name == "Staff Locker"

    def test_superseded_query_returns_none(self, storefront) -> None:
        """A newer submission cancels the pending one."""
        debounced = DebouncedSearch(lambda: storefront, delay=0.05)

        async def scenario():
            first = asyncio.create_task(debounced.submit("chair"))
            await asyncio.sleep(0)
            second = asyncio.create_task(debounced.submit("rack"))
            return await first, await second

        first, second = asyncio.run(scenario())

        assert first is None
        assert second is not None
        assert all("Rack" in result.item.name for result in second)

    def test_cancel(self, storefront) -> None:
        """cancel() drops the pending search."""
        debounced = DebouncedSearch(lambda: storefront, delay=0.05)

        async def scenario():
            pending = asyncio.create_task(debounced.submit("chair"))
            await asyncio.sleep(0)
            debounced.cancel()
            return await pending

        assert asyncio.run(scenario()) is None

    def test_catalog_read_when_run(self, make_item) -> None:
        """The catalog provider is consulted when the search runs."""
        catalog = []
        debounced = DebouncedSearch(lambda: list(catalog), delay=0)
        catalog.append(make_item(1, "Shoe Rack"))

        results = asyncio.run(debounced.submit("shoe"))

        assert results is not None
        assert [result.item.name for result in results] == ["Shoe Rack"]
