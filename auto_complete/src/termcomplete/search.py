from __future__ import annotations
from typing import List, Optional, Sequence

from .models import Term
from .locate import lowest_match, highest_match
from .rank import rank_by_weight


# /* ~~~ Ranked completions for a prefix: locate the block, then sort it by weight ~~~ */
def autocomplete(terms: Sequence[Term], prefix: str) -> List[Term]:
    """
    All terms whose text starts with prefix, heaviest first.

    Returns [] for an empty catalogue, an empty prefix, or no match.
    Pure: depends only on its two arguments and returns a fresh list.
    """
    if not terms or not prefix:
        return []

    lo = lowest_match(terms, prefix)
    hi = highest_match(terms, prefix)
    if lo is None or hi is None:
        return []

    return rank_by_weight(terms[lo:hi + 1])


def complete_query(query: str, terms: Sequence[Term], top_k: Optional[int] = None) -> List[Term]:
    """autocomplete() cut down to the best top_k rows (None keeps all)."""
    if top_k is not None and top_k <= 0:
        return []
    rows = autocomplete(terms, query)
    if top_k is None:
        return rows
    return rows[:top_k]
