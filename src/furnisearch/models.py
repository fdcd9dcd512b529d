"""Core furnisearch data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

ItemId = Union[int, str]


@dataclass(frozen=True, slots=True)
class CatalogItem:
    """One sellable product as exposed to search.

    ``name``, ``category`` and ``subcategory`` are required; ``description``
    and ``image`` are optional and default to empty values.
    """

    id: ItemId
    name: str
    category: str
    subcategory: str
    description: str = ""
    image: str | None = None
    is_new: bool = False


@dataclass(frozen=True, slots=True)
class SearchIndexEntry:
    """Catalog item paired with precomputed lowercase search data."""

    item: CatalogItem
    search_text: str
    keywords: List[str] = field(default_factory=list)


@dataclass(slots=True)
class ScoredResult:
    item: CatalogItem
    score: float
    matched_terms: float

    @property
    def name(self) -> str:
        return self.item.name
