"""Relevance scoring for a single index entry."""

from __future__ import annotations

from typing import Sequence

from furnisearch.index.fuzzy import SIMILARITY_THRESHOLD, similarity
from furnisearch.models import ScoredResult, SearchIndexEntry

NAME_MATCH = 100
NAME_WORD_BONUS = 50
NAME_PREFIX_BONUS = 25
CATEGORY_MATCH = 75
SUBCATEGORY_MATCH = 60
DESCRIPTION_MATCH = 40
PARTIAL_KEYWORD_MATCH = 10
FUZZY_KEYWORD_MATCH = 20
ALL_TERMS_BONUS = 30
NEW_ITEM_BONUS = 5

PARTIAL_CREDIT = 0.5
FUZZY_CREDIT = 0.3


def required_match_ratio(term_count: int) -> float:
    return 0.5 if term_count == 1 else 0.6


def score_entry(entry: SearchIndexEntry, terms: Sequence[str]) -> ScoredResult | None:
    """Score ``entry`` against the query terms.

    Field matches accumulate per field, so a term found in both the name and
    the category counts twice towards ``matched_terms``. Returns ``None`` when
    too few terms matched for the entry to be relevant.
    """
    item = entry.item
    name = item.name.lower()
    name_words = name.split()
    category = item.category.lower()
    subcategory = item.subcategory.lower()
    description = (item.description or "").lower()

    score = 0.0
    matched = 0.0

    for term in terms:
        term_matched = False

        if term in name:
            score += NAME_MATCH
            matched += 1
            term_matched = True
            if term in name_words:
                score += NAME_WORD_BONUS
            if name.startswith(term):
                score += NAME_PREFIX_BONUS

        if term in category:
            score += CATEGORY_MATCH
            matched += 1
            term_matched = True

        if term in subcategory:
            score += SUBCATEGORY_MATCH
            matched += 1
            term_matched = True

        if description and term in description:
            score += DESCRIPTION_MATCH
            matched += 1
            term_matched = True

        for keyword in entry.keywords:
            if term in keyword and keyword != term:
                score += PARTIAL_KEYWORD_MATCH
                matched = max(matched, PARTIAL_CREDIT)
                term_matched = True

        # Gated on this term alone, not on matches from earlier terms
        if not term_matched:
            for keyword in entry.keywords:
                if similarity(term, keyword) > SIMILARITY_THRESHOLD:
                    score += FUZZY_KEYWORD_MATCH
                    matched += FUZZY_CREDIT

    term_count = len(terms)
    if matched < term_count * required_match_ratio(term_count):
        return None

    if matched >= term_count:
        score += ALL_TERMS_BONUS

    if item.is_new:
        score += NEW_ITEM_BONUS

    return ScoredResult(item=item, score=score, matched_terms=matched)
