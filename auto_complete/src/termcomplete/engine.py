# termcomplete/engine.py
from __future__ import annotations

import os
import logging
from typing import Any, Iterable, List, Optional

from . import config as CFG
from .models import Term, Catalogue
from .loader import load_terms, sort_terms
from .order import check_sorted as check_sorted_terms
from .search import complete_query

log = logging.getLogger(__name__)

# complete(top_k=...) default: read config.TOP_K at call time
USE_CONFIG: Any = object()


class Engine:
    """
    Thin orchestration layer that glues together:
      - catalogue loading (loader.load_terms),
      - the optional sort-order check (order.check_sorted),
      - search/ranking pipeline (search.complete_query).

    Public API (used by CLI/Flask/GUI):
      * load(path, ...):     read a catalogue file -> attach it
      * attach(terms, ...):  use an in-memory term collection
      * complete(prefix, top_k): return ranked completions
      * shutdown():          drop the catalogue

    The catalogue is held as an immutable tuple. Each query reads the current
    reference once, so a concurrent load() only swaps which tuple later
    queries see; a running query keeps its own snapshot.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._catalogue: Optional[Catalogue] = None

    # /* ~~~ Read a catalogue file and make it the active one ~~~ */
    def load(
        self,
        path: str,
        *,
        max_chars: Optional[int] = None,       # truncate term text on load
        check_sorted: Optional[bool] = None,   # default: CFG.CHECK_SORTED
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            CFG.VERBOSE = True

        if not os.path.exists(path):
            raise FileNotFoundError(path)

        if check_sorted is None:
            check_sorted = CFG.CHECK_SORTED
        catalogue = load_terms(path, max_chars=max_chars, check=check_sorted)
        self._catalogue = catalogue
        log.info("Engine load() complete: terms=%d", len(catalogue))

    # /* ~~~ Use an in-memory collection; the check (if on) sees it in caller order ~~~ */
    def attach(self, terms: Iterable[Term], *, check_sorted: Optional[bool] = None) -> None:
        rows = tuple(terms)
        if check_sorted is None:
            check_sorted = CFG.CHECK_SORTED
        if check_sorted:
            log.info("Checking sort order of %d terms", len(rows))
            check_sorted_terms(rows)
        catalogue = Catalogue(terms=sort_terms(rows))
        self._catalogue = catalogue
        log.info("Engine attach() complete: terms=%d", len(catalogue))

    # ------------- query -------------

    # /* ~~~ Run autocomplete for a user prefix and return ranked terms ~~~ */
    def complete(self, prefix: str, *, top_k: Optional[int] = USE_CONFIG) -> List[Term]:
        """top_k: a count, None for every match, or omitted for config.TOP_K."""
        catalogue = self._catalogue
        if catalogue is None:
            raise RuntimeError("Engine not initialized. Call load() or attach() first.")
        if top_k is USE_CONFIG:
            top_k = CFG.TOP_K
        return complete_query(prefix, catalogue.terms, top_k=top_k)

    @property
    def ready(self) -> bool:
        return self._catalogue is not None

    @property
    def size(self) -> int:
        catalogue = self._catalogue
        return len(catalogue) if catalogue is not None else 0

    @property
    def source(self) -> Optional[str]:
        catalogue = self._catalogue
        return catalogue.source if catalogue is not None else None

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._catalogue = None
        log.info("Engine shutdown complete")

