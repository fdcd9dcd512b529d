"""Shared fixtures."""

from __future__ import annotations

from typing import Callable, List

import pytest

from furnisearch.catalog import load_catalog
from furnisearch.models import CatalogItem


@pytest.fixture()
def storefront() -> List[CatalogItem]:
    """The bundled storefront catalog."""
    return load_catalog()


@pytest.fixture()
def make_item() -> Callable[..., CatalogItem]:
    """Factory for synthetic catalog items."""

    def _make(
        item_id: int,
        name: str,
        category: str = "Misc",
        subcategory: str = "Other",
        **kwargs,
    ) -> CatalogItem:
        return CatalogItem(id=item_id, name=name, category=category, subcategory=subcategory, **kwargs)

    return _make
