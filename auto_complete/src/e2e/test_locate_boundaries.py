# src/e2e/test_locate_boundaries.py
import pytest

from termcomplete.models import Term
from termcomplete.locate import lowest_match, highest_match, match_range


def _terms(*texts: str) -> list[Term]:
    return [Term(t, float(i)) for i, t in enumerate(texts)]


CITIES = _terms("app", "apple", "application", "banana")


@pytest.mark.parametrize("prefix, lo, hi", [
    ("a", 0, 2),
    ("app", 0, 2),
    ("appl", 1, 2),
    ("apple", 1, 1),
    ("appli", 2, 2),
    ("b", 3, 3),
    ("banana", 3, 3),
])
def test_boundaries_on_small_catalogue(prefix, lo, hi):
    assert lowest_match(CITIES, prefix) == lo
    assert highest_match(CITIES, prefix) == hi
    assert match_range(CITIES, prefix) == (lo, hi)


@pytest.mark.parametrize("prefix", ["", "c", "aa", "bananas", "applications", "A"])
def test_no_match_returns_none(prefix):
    assert lowest_match(CITIES, prefix) is None
    assert highest_match(CITIES, prefix) is None
    assert match_range(CITIES, prefix) is None


def test_empty_catalogue_returns_none():
    assert lowest_match([], "a") is None
    assert highest_match([], "a") is None


def test_match_at_index_zero_is_not_confused_with_no_match():
    terms = _terms("alpha", "beta")
    assert lowest_match(terms, "al") == 0
    assert highest_match(terms, "al") == 0


def test_shorter_text_sorts_before_longer_prefix():
    # "a" is a proper prefix of the query, so it must steer the search right
    terms = _terms("a", "ab", "abc", "b")
    assert match_range(terms, "abc") == (2, 2)
    assert match_range(terms, "ab") == (1, 2)


def test_entry_equal_to_prefix_matches_itself():
    terms = _terms("zoo", "zoom")
    assert match_range(terms, "zoom") == (1, 1)
    assert match_range(terms, "zoo") == (0, 1)


def test_all_entries_identical_to_prefix():
    terms = _terms("same", "same", "same", "same", "same")
    assert lowest_match(terms, "same") == 0
    assert highest_match(terms, "same") == 4


def test_block_in_the_middle_of_a_long_catalogue():
    words = sorted(f"{c}{n:03d}" for c in "abcdefgh" for n in range(50))
    terms = _terms(*words)
    lo, hi = match_range(terms, "d")
    assert (lo, hi) == (150, 199)
    assert all(terms[i].text.startswith("d") for i in range(lo, hi + 1))
    assert not terms[lo - 1].text.startswith("d")
    assert not terms[hi + 1].text.startswith("d")


def test_comparison_is_codepoint_ordinal_not_case_folded():
    # uppercase sorts before lowercase in codepoint order
    terms = _terms("Apple", "Banana", "apple", "banana")
    assert match_range(terms, "A") == (0, 0)
    assert match_range(terms, "a") == (2, 2)
    assert match_range(terms, "B") == (1, 1)


def test_non_ascii_prefix():
    terms = _terms("café", "cafétéria", "cafe", "zürich")
    terms.sort(key=lambda t: t.text)
    lo, hi = match_range(terms, "café")
    assert [t.text for t in terms[lo:hi + 1]] == ["café", "cafétéria"]
    assert match_range(terms, "zü") is not None
