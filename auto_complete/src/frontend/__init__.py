"""Public API for the term autocomplete engine (module-level, one catalogue)."""
from __future__ import annotations
import time
from termcomplete.engine import Engine, USE_CONFIG
from termcomplete.models import Term

_engine: Engine | None = None

def initialize(path: str,
               max_chars: int | None = None,
               check_sorted: bool | None = None,
               verbose: bool = False) -> None:
    """
    Load the catalogue at `path` into the shared engine.
    Calling it again replaces the catalogue for every later complete() call.
    """
    global _engine
    t0 = time.perf_counter()
    if verbose:
        print(f"[load] reading terms from {path}")
    eng = Engine()
    eng.load(path, max_chars=max_chars, check_sorted=check_sorted, verbose=verbose)
    _engine = eng
    if verbose:
        print(f"[ready] {eng.size:,} terms in {time.perf_counter() - t0:.2f}s")

def complete(query: str, k: int | None = USE_CONFIG) -> list[Term]:
    """Return the top-k ranked terms for `query` (k omitted: config.TOP_K, None: all)."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.complete(query, top_k=k)
