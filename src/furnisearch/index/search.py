"""Query entry point: rank a catalog snapshot against free-text input."""

from __future__ import annotations

import locale
import logging
from typing import List, Sequence

from furnisearch.index.indexer import build_index
from furnisearch.index.scoring import score_entry
from furnisearch.models import CatalogItem, ScoredResult
from furnisearch.utils.text import normalize_query

MAX_RESULTS = 50

LOGGER = logging.getLogger(__name__)


def collation_key(name: str) -> tuple[str, str]:
    """Locale-aware sort key for display names, case-insensitive first."""
    return (locale.strxfrm(name.casefold()), name)


def _rank_key(result: ScoredResult) -> tuple[float, tuple[str, str]]:
    return (-result.score, collation_key(result.item.name))


def search(
    query: str | None, catalog: Sequence[CatalogItem], *, limit: int = MAX_RESULTS
) -> List[ScoredResult]:
    """Return catalog items relevant to ``query``, best first.

    Results are sorted by score descending, ties broken by name, and capped
    at ``limit`` (never more than 50). The catalog is not modified.
    """
    terms = normalize_query(query)
    if not terms:
        return []

    index = build_index(catalog)
    results: List[ScoredResult] = []
    for entry in index:
        scored = score_entry(entry, terms)
        if scored is not None:
            results.append(scored)

    LOGGER.debug("Query %r: %d terms, %d of %d items matched", query, len(terms), len(results), len(index))

    results.sort(key=_rank_key)
    cap = max(0, min(limit, MAX_RESULTS))
    return results[:cap]


class Searcher:
    """High-level API bound to a catalog snapshot."""

    def __init__(self, catalog: Sequence[CatalogItem], *, max_results: int = MAX_RESULTS) -> None:
        self.catalog = list(catalog)
        self.max_results = max_results

    def search(self, query: str | None, *, limit: int | None = None) -> List[ScoredResult]:
        return search(query, self.catalog, limit=limit if limit is not None else self.max_results)
