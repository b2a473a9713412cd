# src/termcomplete/order.py
"""
Comparators shared by the loader, the locator and the ranking engine.

All text comparison is codepoint ordinal (plain ``str`` ordering in Python),
which for UTF-8 input is the same order as comparing the raw bytes.
Sort keys are passed explicitly to ``sorted()``; nothing here holds state.
"""
from __future__ import annotations
import math
from typing import Sequence

from .models import Term


class UnsortedCatalogueError(ValueError):
    """Raised by check_sorted() when a term sorts before its predecessor."""

    def __init__(self, index: int, previous: str, current: str) -> None:
        super().__init__(
            f"catalogue is not sorted at index {index}: {previous!r} > {current!r}"
        )
        self.index = index
        self.previous = previous
        self.current = current


def starts_with(text: str, prefix: str) -> bool:
    """True iff text begins with prefix, character for character."""
    return text.startswith(prefix)


def compare_prefix(text: str, prefix: str) -> int:
    """
    Compare the first len(prefix) characters of text against prefix.

    Returns <0 if that head sorts before prefix, 0 if equal, >0 if after.
    A text shorter than prefix compares by what it has, so "ap" < "app".
    """
    head = text[:len(prefix)]
    if head < prefix:
        return -1
    if head > prefix:
        return 1
    return 0


def by_text(term: Term) -> str:
    """Sort key: lexicographic ascending."""
    return term.text


def by_weight_desc(term: Term) -> float:
    """
    Sort key: weight descending when used with a plain ascending sort.
    NaN has no order against real numbers, so it is pushed after everything.
    """
    w = term.weight
    if math.isnan(w):
        return math.inf
    return -w


def check_sorted(terms: Sequence[Term]) -> None:
    """Linear scan; raise UnsortedCatalogueError at the first inversion."""
    for i in range(1, len(terms)):
        prev, cur = terms[i - 1].text, terms[i].text
        if prev > cur:
            raise UnsortedCatalogueError(i, prev, cur)
