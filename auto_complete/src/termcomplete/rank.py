from __future__ import annotations
from typing import Iterable, List

from .models import Term
from .order import by_weight_desc


def rank_by_weight(subrange: Iterable[Term]) -> List[Term]:
    """
    Return a new list with the same terms ordered by weight, highest first.

    The input is never modified. Terms with equal weight come out in no
    promised order; callers must not rely on it.
    """
    return sorted(subrange, key=by_weight_desc)
