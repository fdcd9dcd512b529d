"""Search index construction."""

from __future__ import annotations

from typing import List, Sequence

from furnisearch.models import CatalogItem, SearchIndexEntry
from furnisearch.utils.text import join_fields, split_words


def build_entry(item: CatalogItem) -> SearchIndexEntry:
    description = item.description or ""
    fields = (item.name, item.category, item.subcategory, description)
    keywords: List[str] = []
    for value in fields:
        keywords.extend(split_words(value))
    return SearchIndexEntry(item=item, search_text=join_fields(fields), keywords=keywords)


def build_index(catalog: Sequence[CatalogItem]) -> List[SearchIndexEntry]:
    """Derive one index entry per catalog item, preserving catalog order.

    The index is rebuilt from the given snapshot on every call, so entries
    always reflect the catalog the caller passes in.
    """
    return [build_entry(item) for item in catalog]
