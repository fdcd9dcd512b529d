"""Edit-distance similarity used as the typo fallback when scoring."""

from __future__ import annotations

SIMILARITY_THRESHOLD = 0.7


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    Insertions, deletions and substitutions each cost 1. Comparison is
    case-sensitive; callers lowercase their inputs beforehand.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("chiar", "chair")
        2
        >>> levenshtein_distance("", "abc")
        3
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Use shorter string as columns for space efficiency
    if len(s1) > len(s2):
        s1, s2 = s2, s1

    m, n = len(s1), len(s2)
    prev_row = list(range(m + 1))
    curr_row = [0] * (m + 1)

    for j in range(1, n + 1):
        curr_row[0] = j
        for i in range(1, m + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            curr_row[i] = min(
                prev_row[i] + 1,  # deletion
                curr_row[i - 1] + 1,  # insertion
                prev_row[i - 1] + cost,  # substitution
            )
        prev_row, curr_row = curr_row, prev_row

    return prev_row[m]


def similarity(s1: str, s2: str) -> float:
    """Return a similarity ratio in ``[0, 1]`` derived from edit distance.

    Identical strings score 1.0. Strings shorter than two characters are
    too short to compare and score 0.0 unless identical.
    """
    if s1 == s2:
        return 1.0
    if len(s1) < 2 or len(s2) < 2:
        return 0.0

    longest = max(len(s1), len(s2))
    return (longest - levenshtein_distance(s1, s2)) / longest
