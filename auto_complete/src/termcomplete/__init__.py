"""
Term Autocomplete Engine

Ranks a fixed catalogue of weighted terms against a typed prefix and returns
the matching terms heaviest first.

The package keeps each concern in its own module:
- Data models (Term, Catalogue)
- Comparators and sort keys
- Prefix boundary search (binary search for the first/last match)
- Weight ranking
- Catalogue loading
- The Engine that ties them together for the front ends

Main Functions:
    autocomplete(terms, prefix): ranked matches for a prefix
    load_terms(path): read and sort a catalogue file

Example Usage:
    from termcomplete import Term, autocomplete

    terms = [Term("app", 10), Term("apple", 50), Term("application", 30)]
    for t in autocomplete(terms, "app"):
        print(f"{t.weight:>6} {t.text}")
"""

# src/termcomplete/__init__.py
from .models import Term, Catalogue
from .locate import lowest_match, highest_match, match_range
from .rank import rank_by_weight
from .search import autocomplete, complete_query
from .loader import load_terms, read_terms, CatalogueFormatError
from .order import check_sorted, UnsortedCatalogueError
from .engine import Engine

__version__ = "1.0.0"
__all__ = [
    "Term", "Catalogue",
    "lowest_match", "highest_match", "match_range",
    "rank_by_weight", "autocomplete", "complete_query",
    "load_terms", "read_terms", "CatalogueFormatError",
    "check_sorted", "UnsortedCatalogueError",
    "Engine",
]
