"""Text helpers shared by the index builder and the suggestion extractor."""

from __future__ import annotations

from typing import Iterable, List


def split_words(text: str) -> List[str]:
    """Lowercase ``text`` and split it on runs of whitespace."""
    return text.lower().split()


def normalize_query(query: str | None) -> List[str]:
    """Turn raw query input into an ordered list of lowercase terms.

    An empty list means there is nothing to search for.
    """
    if not query:
        return []
    return split_words(query)


def join_fields(fields: Iterable[str]) -> str:
    """Space-join fields into a single lowercase string."""
    return " ".join(fields).lower()
