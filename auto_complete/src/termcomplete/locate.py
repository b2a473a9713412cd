# src/termcomplete/locate.py
"""
Prefix boundary search over a catalogue sorted by text.

Terms sharing a prefix sit in one contiguous block of a sorted catalogue, so
the first and last member of that block can each be found with a binary
search. Both searches use two tests at every midpoint:

  * starts_with(text, prefix)  -> the midpoint is inside the block
  * compare_prefix(text, prefix) -> which side of the block the midpoint is on

lowest_match keeps walking left after a hit, highest_match keeps walking right.
"""
from __future__ import annotations
from typing import Optional, Sequence, Tuple

from .models import Term
from .order import starts_with, compare_prefix


def _boundary(terms: Sequence[Term], prefix: str, *, lowest: bool) -> Optional[int]:
    if not terms or not prefix:
        return None

    left, right = 0, len(terms) - 1
    result: Optional[int] = None

    while left <= right:
        mid = (left + right) // 2
        text = terms[mid].text
        if starts_with(text, prefix):
            result = mid
            if lowest:
                right = mid - 1
            else:
                left = mid + 1
        elif compare_prefix(text, prefix) < 0:
            # midpoint sorts before the block
            left = mid + 1
        else:
            right = mid - 1

    return result


def lowest_match(terms: Sequence[Term], prefix: str) -> Optional[int]:
    """
    Index of the first term whose text starts with prefix, or None.

    An empty prefix matches nothing, as does an empty catalogue.
    O(log n).
    """
    return _boundary(terms, prefix, lowest=True)


def highest_match(terms: Sequence[Term], prefix: str) -> Optional[int]:
    """Index of the last term whose text starts with prefix, or None."""
    return _boundary(terms, prefix, lowest=False)


def match_range(terms: Sequence[Term], prefix: str) -> Optional[Tuple[int, int]]:
    """(lowest, highest) inclusive, or None when either boundary is missing."""
    lo = lowest_match(terms, prefix)
    if lo is None:
        return None
    hi = highest_match(terms, prefix)
    if hi is None:
        return None
    return lo, hi
