"""Set similarity used to rank suggestions.

Kept independent of the index so it can be unit tested on plain sets.
"""

from __future__ import annotations

from collections.abc import Set


def intersection_size(a: Set[str], b: Set[str]) -> int:
    """Count shared members by iterating the smaller set."""

    small, large = (a, b) if len(a) < len(b) else (b, a)
    return sum(1 for token in small if token in large)


def jaccard(a: Set[str], b: Set[str]) -> float:
    """Return |a & b| / |a | b|.

    Two empty sets are considered identical and score 1.0.
    """

    if not a and not b:
        return 1.0
    shared = intersection_size(a, b)
    union = len(a) + len(b) - shared
    if union == 0:
        return 0.0
    return shared / union
