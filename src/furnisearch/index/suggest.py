"""Query completion from catalog vocabulary."""

from __future__ import annotations

from typing import Iterator, List, Sequence

from furnisearch.models import CatalogItem
from furnisearch.utils.text import split_words

MIN_QUERY_CHARS = 2
MIN_TERM_CHARS = 3
MAX_SUGGESTIONS = 5


def _iter_terms(catalog: Sequence[CatalogItem]) -> Iterator[str]:
    for item in catalog:
        yield from split_words(item.name)
        yield from split_words(item.category)
        yield from split_words(item.subcategory)


def suggest(
    partial: str | None, catalog: Sequence[CatalogItem], *, limit: int = MAX_SUGGESTIONS
) -> List[str]:
    """Suggest up to ``limit`` catalog words that complete ``partial``.

    Words come from item names, categories and subcategories. Order is first
    appearance: catalog order, then name, category, subcategory, then word
    position within the field.
    """
    if not partial or len(partial) < MIN_QUERY_CHARS:
        return []

    prefix = partial.lower()
    # dict keeps insertion order, unlike set
    seen: dict[str, None] = {}
    for term in _iter_terms(catalog):
        if len(term) >= MIN_TERM_CHARS and term.startswith(prefix) and term != prefix:
            seen.setdefault(term, None)
            if len(seen) >= limit:
                break
    return list(seen)[:max(limit, 0)]
