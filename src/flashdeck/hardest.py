"""Finds the cards answered wrong most often."""
from typing import List, NamedTuple

from .stats import StatsTracker


class HardestCards(NamedTuple):
    terms: List[str]
    count: int


def find_hardest(stats: StatsTracker) -> HardestCards:
    """
    Collect every term sharing the highest mistake count.

    Terms come back in ascending lexicographic order. When nothing has been
    missed yet (or nothing is tracked) the result is an empty list with a
    count of 0.
    """
    entries = stats.all_entries()
    max_count = max((count for _, count in entries), default=0)
    if max_count == 0:
        return HardestCards([], 0)
    terms = sorted(term for term, count in entries if count == max_count)
    return HardestCards(terms, max_count)
