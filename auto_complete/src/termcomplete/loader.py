"""
Catalogue Loading Module

Reads a weighted term catalogue from disk and returns it sorted by text,
ready for the prefix search in locate.py.

File format:
    <count>
    <weight><whitespace><text>
    ...

The first line holds the number of term rows that follow. Each row starts
with a numeric weight; everything after the whitespace that follows it is
the term text (e.g. "13076300   Buenos Aires, Argentina").

Bad rows never abort a load. They are logged and replaced by an empty
term with weight 0 so the row count stays what the header promised:
    - unparsable or missing weight, or no text   -> Term("", 0.0)
    - nan / inf weight                           -> weight 0.0, text kept
    - file ends before <count> rows              -> Term("", 0.0) per missing row
The header is read like scanf("%d"): its leading integer counts ("3 rows"
reads 3). No leading integer, or a count that is not positive, is an error.
"""

# src/termcomplete/loader.py
from __future__ import annotations
import logging
import math
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from .models import Term, Catalogue
from .order import by_text, check_sorted
from . import config as CFG

log = logging.getLogger(__name__)

_EMPTY = Term("", 0.0)

# leading integer, the way scanf("%d") reads it: "3 terms" -> 3, "2.5" -> 2
_COUNT_RE = re.compile(r"\s*([+-]?\d+)")


class CatalogueFormatError(ValueError):
    """The catalogue header is missing or does not hold a positive count."""


def _parse_count(header: Optional[str], source: str) -> int:
    if header is None:
        raise CatalogueFormatError(f"{source}: empty file, expected a term count")
    m = _COUNT_RE.match(header)
    if m is None:
        raise CatalogueFormatError(f"{source}: invalid term count {header.strip()!r}")
    count = int(m.group(1))
    if count <= 0:
        raise CatalogueFormatError(f"{source}: term count must be positive, got {count}")
    return count


def parse_term_line(line: str, line_no: int = 0, *,
                    max_chars: Optional[int] = None) -> Term:
    """
    Parse one "<weight> <text>" row.

    Args:
        line: Raw row, line terminator optional.
        line_no: 1-based file line number, only used in warnings.
        max_chars: Truncate the text to this many characters when set.

    Returns:
        Term: the parsed row, or Term("", 0.0) when the row is malformed.

    Example:
        >>> parse_term_line("  5627187200\\tthe")
        Term(text='the', weight=5627187200.0)
    """
    parts = line.rstrip("\r\n").lstrip().split(None, 1)
    if len(parts) < 2:
        log.warning("malformed line %d: %r", line_no, line)
        return _EMPTY
    raw_weight, text = parts
    try:
        weight = float(raw_weight)
    except ValueError:
        log.warning("malformed line %d: bad weight %r", line_no, raw_weight)
        return _EMPTY

    if not math.isfinite(weight):
        log.warning("line %d: non-finite weight %r, using 0", line_no, raw_weight)
        weight = 0.0

    if max_chars is not None and len(text) > max_chars:
        text = text[:max_chars]
    return Term(text=text, weight=weight)


def sort_terms(terms: Iterable[Term]) -> Tuple[Term, ...]:
    """Lexicographic ascending by text (codepoint order). Stable."""
    return tuple(sorted(terms, key=by_text))


def _iter_rows(lines: Iterator[str], count: int, max_chars: Optional[int]) -> Iterator[Term]:
    # header is file line 1, so row i lives on line i + 2
    for i in range(count):
        line = next(lines, None)
        if line is None:
            log.warning("early end of file at line %d, %d of %d rows read",
                        i + 2, i, count)
            for _ in range(count - i):
                yield _EMPTY
            return
        yield parse_term_line(line, i + 2, max_chars=max_chars)
        if CFG.VERBOSE and (i + 1) % CFG.PROGRESS_EVERY_LINES == 0:
            log.info("[loaded] rows=%d/%d", i + 1, count)


def read_terms(lines: Iterable[str], *, source: str = "<lines>",
               max_chars: Optional[int] = None,
               check: bool = False) -> Tuple[Term, ...]:
    """
    Build a sorted term tuple from catalogue lines (header included).

    With check=True the rows must already be in text order as written;
    the file is rejected instead of silently re-sorted.

    Raises:
        CatalogueFormatError: the header is not a positive integer.
        UnsortedCatalogueError: check=True and the rows are out of order.
    """
    it = iter(lines)
    count = _parse_count(next(it, None), source)
    if max_chars is None:
        max_chars = CFG.MAX_TERM_CHARS
    rows: List[Term] = list(_iter_rows(it, count, max_chars))
    if check:
        log.info("Checking sort order of %d rows in %s", len(rows), source)
        check_sorted(rows)
    return sort_terms(rows)


def load_terms(path: str | Path, *, max_chars: Optional[int] = None,
               check: bool = False) -> Catalogue:
    """
    Load and sort a catalogue file.

    Raises:
        FileNotFoundError: path does not exist.
        CatalogueFormatError: the header is not a positive integer.
        UnsortedCatalogueError: check=True and the file is out of order.
    """
    p = Path(path)
    log.info("Reading terms from %s", p)
    with p.open("r", encoding=CFG.ENCODING, errors="ignore") as f:
        terms = read_terms(f, source=str(p), max_chars=max_chars, check=check)
    log.info("Loaded %d terms from %s", len(terms), p)
    return Catalogue(terms=terms, source=str(p))
