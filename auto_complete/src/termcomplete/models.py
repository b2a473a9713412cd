# src/termcomplete/models.py
"""
Data models for the term autocomplete engine.

- Term: one catalogue entry (text + weight). Immutable.
- Catalogue: the sorted, immutable term collection plus where it came from.

These classes do not contain business logic; searching and ranking live in
locate.py, rank.py and search.py and operate on plain sequences of Term.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Term:
    """
    A single weighted catalogue entry.

    Attributes
    ----------
    text : str
        The completion text. Compared by codepoint ordinal, never locale-aware.
        May be empty (the loader uses "" for malformed rows).
    weight : float
        Relevance / popularity. Higher ranks first. Duplicates are legal.
    """
    text: str
    weight: float

    def as_dict(self) -> dict:
        return {"text": self.text, "weight": self.weight}


@dataclass(frozen=True, slots=True)
class Catalogue:
    """
    The term collection handed to the search core.

    Attributes
    ----------
    terms : Tuple[Term, ...]
        Non-decreasing by text. Stored as a tuple so no caller can mutate it
        while a search is running.
    source : Optional[str]
        Path the terms were loaded from, or None when attached in memory.
    """
    terms: Tuple[Term, ...] = field(default_factory=tuple)
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.terms)
