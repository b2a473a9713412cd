# src/e2e/test_autocomplete_properties.py
from collections import Counter
import random

import pytest

from termcomplete import Term, autocomplete


def _catalogue(rng: random.Random) -> tuple[Term, ...]:
    n = rng.randint(1, 60)
    rows = [
        Term("".join(rng.choice("abc") for _ in range(rng.randint(0, 5))), float(rng.randint(0, 20)))
        for _ in range(n)
    ]
    return tuple(sorted(rows, key=lambda t: t.text))


@pytest.mark.parametrize("seed", range(20))
def test_ranked_and_complete(seed):
    rng = random.Random(seed)
    terms = _catalogue(rng)
    for prefix in ("a", "b", "c", "ab", "ca", "abc", "cccc", "bab"):
        out = autocomplete(terms, prefix)
        # weights never increase down the list
        assert all(out[i].weight >= out[i + 1].weight for i in range(len(out) - 1))
        # exactly the matching terms, duplicates included
        expected = Counter(t for t in terms if t.text.startswith(prefix))
        assert Counter(out) == expected


@pytest.mark.parametrize("seed", range(5))
def test_repeated_calls_agree(seed):
    rng = random.Random(seed)
    terms = _catalogue(rng)
    first = autocomplete(terms, "a")
    second = autocomplete(terms, "a")
    assert Counter(first) == Counter(second)
    assert [t.weight for t in first] == [t.weight for t in second]


@pytest.mark.parametrize("seed", range(5))
def test_empty_prefix_on_nonempty_catalogue(seed):
    assert autocomplete(_catalogue(random.Random(seed)), "") == []
