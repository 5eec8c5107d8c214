from itertools import combinations, islice
from math import comb

import pytest

from kselect import (
    CombinadicCombinations, Combinations, InvalidArgument,
    LexCombinationIterator
)

SMALL = [(n, k) for n in range(1, 9) for k in range(0, n + 1)]


def drain(it):
    return [tuple(c) for c in it]


@pytest.mark.parametrize("n,k", SMALL)
def test_lex_matches_itertools(n, k):
    res = drain(LexCombinationIterator(n, k))
    assert res == list(combinations(range(n), k))
    assert all(list(c) == sorted(set(c)) for c in res)


def test_lex_5_3():
    res = drain(LexCombinationIterator(5, 3))
    assert len(res) == 10
    assert res[:4] == [(0, 1, 2), (0, 1, 3), (0, 1, 4), (0, 2, 3)]
    assert res[-1] == (2, 3, 4)


@pytest.mark.parametrize(
    "n,k,count", [(10, 3, 120), (6, 6, 1), (6, 0, 1), (1, 1, 1), (20, 10, 184756)]
)
def test_counts(n, k, count):
    assert LexCombinationIterator(n, k).count == count
    assert CombinadicCombinations(n, k).count == count
    assert len(Combinations(n, k)) == count


def test_lex_count_decreases_to_zero():
    it = LexCombinationIterator(4, 2)
    seen = []
    while it.has_next():
        before = it.count
        it.advance()
        assert it.count == before - 1
        seen.append(it.count)
    assert seen == [5, 4, 3, 2, 1, 0]


def test_lex_buffer_is_aliased():
    it = LexCombinationIterator(5, 2)
    assert next(it) is next(it)


def test_lex_empty_selection():
    it = LexCombinationIterator(3, 0)
    assert next(it) == []
    assert not it.has_next()
    with pytest.raises(StopIteration):
        next(it)


def test_lex_advance_after_exhaustion():
    it = LexCombinationIterator(4, 4)
    assert it.advance() == [0, 1, 2, 3]
    assert not it.has_next()
    assert it.advance() == [0, 1, 2, 3]
    assert it.count == 0


@pytest.mark.parametrize("n,k", SMALL)
def test_combinadic_get_matches_lex(n, k):
    gen = CombinadicCombinations(n, k)
    lex = drain(LexCombinationIterator(n, k))
    assert [tuple(gen.get(r)) for r in range(gen.count)] == lex


@pytest.mark.parametrize("n,k", SMALL)
def test_combinadic_sequential_matches_get(n, k):
    gen = CombinadicCombinations(n, k)
    seq = drain(gen)
    assert len(seq) == gen.count
    assert seq == [tuple(gen.get(r)) for r in range(gen.count)]


def test_combinadic_get_returns_fresh_lists():
    gen = CombinadicCombinations(6, 3)
    a, b = gen.get(0), gen.get(0)
    assert a == b == [0, 1, 2]
    assert a is not b
    assert gen.get(gen.count - 1) == [3, 4, 5]


def test_combinadic_large_rank():
    gen = CombinadicCombinations(30, 5)
    lex = LexCombinationIterator(30, 5)
    expected = tuple(next(islice(lex, 10000, None)))
    assert tuple(gen.get(10000)) == expected


def test_combinadic_sequential_reuses_buffer():
    it = iter(CombinadicCombinations(5, 2))
    first = next(it)
    assert first == [0, 1]
    assert next(it) is first
    assert first == [0, 2]


def test_combinadic_advance_after_exhaustion():
    it = iter(CombinadicCombinations(3, 2))
    res = drain(it)
    assert res == [(0, 1), (0, 2), (1, 2)]
    assert not it.has_next()
    assert it.advance() == [1, 2]


def test_combinadic_iterable_restarts():
    gen = CombinadicCombinations(5, 3)
    assert drain(gen) == drain(gen)
    assert len(gen) == 10


@pytest.mark.parametrize("cls", (LexCombinationIterator, CombinadicCombinations, Combinations))
@pytest.mark.parametrize("n,k", [(0, 0), (2, 3), (2, -1)])
def test_invalid_domain(cls, n, k):
    with pytest.raises(InvalidArgument):
        cls(n, k)


def test_combinations_repr():
    assert repr(Combinations(5, 2)) == "Combinations(n=5, k=2)"
    assert repr(CombinadicCombinations(5, 2)) == "CombinadicCombinations(n=5, k=2)"
