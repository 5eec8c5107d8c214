"""
C(n, k): k-subsets of range(n), written as strictly increasing index lists
and enumerated in lexicographic order.

LexCombinationIterator walks the subsets with a constant-amortized
successor step (Rosen, Discrete Mathematics and Its Applications).
CombinadicCombinations computes the subset at any rank directly through
the combinatorial number system (combinadics), without visiting the
subsets before it.
"""
from collections.abc import Iterator

from kselect.kstypes import IndexArray
from kselect.logging_utils import get_logger
from kselect.util import binomial, check_domain, identity_permutation

log = get_logger(__name__)


class LexCombinationIterator(Iterator):
    """
    Iterate over C(n, k) in lexicographic order. Every value returned is
    the same list object, rewritten in place on each step.
    """

    def __init__(self, n: int, k: int):
        check_domain(n, k)
        self.n = n
        self.k = k
        self.count = binomial(n, k)
        self._a: IndexArray | None = None
        log.debug("C(%d, %d) iterator, count=%d", n, k, self.count)

    def has_next(self) -> bool:
        return self.count > 0

    def advance(self) -> IndexArray:
        if self._a is None:
            self._a = identity_permutation(self.k)
        elif self.count > 0:
            self._step()
        else:
            return self._a
        self.count -= 1
        if self.count == 0:
            log.debug("C(%d, %d) exhausted", self.n, self.k)
        return self._a

    def __next__(self) -> IndexArray:
        if self.count <= 0:
            raise StopIteration
        return self.advance()

    def __iter__(self) -> Iterator[IndexArray]:
        return self

    def __length_hint__(self) -> int:
        return self.count

    def _step(self) -> None:
        a, n, k = self._a, self.n, self.k
        i = k - 1
        while a[i] == n - k + i:
            i -= 1
        a[i] += 1
        for j in range(i + 1, k):
            a[j] = a[i] + j - i


class Combinations:
    """Reusable C(n, k); each iter() starts a fresh LexCombinationIterator."""

    def __init__(self, n: int, k: int):
        check_domain(n, k)
        self.n = n
        self.k = k

    def __iter__(self) -> LexCombinationIterator:
        return LexCombinationIterator(self.n, self.k)

    def __len__(self) -> int:
        return binomial(self.n, self.k)

    def __repr__(self) -> str:
        return f"Combinations(n={self.n}, k={self.k})"


def _unrank_into(a: IndexArray, n: int, k: int, m: int) -> None:
    """
    Write the combination whose complement index (count - rank - 1) is m
    into a. For each i = k..1, v is lowered until C(v, i) <= m, shrinking
    the coefficient with C(v - 1, i) = C(v, i) * (v - i) / v.
    """
    upper = n
    for i in range(k, 0, -1):
        v = upper
        c = binomial(v, i)
        while c > m:
            c = c * (v - i) // v
            v -= 1
        m -= c
        a[k - i] = (n - 1) - v
        upper = v


class CombinadicCombinations:
    """
    C(n, k) with random access by lexicographic rank.

    get() allocates a new list per call and touches no shared state, so a
    single instance can serve get() from several threads. Iterating gives
    a sequential view that reuses one buffer, in the same order as
    LexCombinationIterator.
    """

    def __init__(self, n: int, k: int):
        check_domain(n, k)
        self.n = n
        self.k = k
        self.count = binomial(n, k)
        log.debug("combinadic C(%d, %d), count=%d", n, k, self.count)

    def get(self, rank: int) -> IndexArray:
        """
        Return the combination at `rank`, 0 <= rank < count.

        rank is not validated. Outside that range the result is undefined:
        an arbitrary list may come back, or an arithmetic error may be
        raised.
        """
        a = [0] * self.k
        _unrank_into(a, self.n, self.k, self.count - rank - 1)
        return a

    def __iter__(self) -> "CombinadicIterator":
        return CombinadicIterator(self)

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"CombinadicCombinations(n={self.n}, k={self.k})"


class CombinadicIterator(Iterator):
    """Sequential view over a CombinadicCombinations, rank 0 upward."""

    def __init__(self, source: CombinadicCombinations):
        self._source = source
        self._remaining = source.count
        self._a = [0] * source.k

    def has_next(self) -> bool:
        return self._remaining > 0

    def advance(self) -> IndexArray:
        if self._remaining > 0:
            src = self._source
            # complement index of rank count - remaining
            _unrank_into(self._a, src.n, src.k, self._remaining - 1)
            self._remaining -= 1
        return self._a

    def __next__(self) -> IndexArray:
        if self._remaining <= 0:
            raise StopIteration
        return self.advance()

    def __iter__(self) -> Iterator[IndexArray]:
        return self

    def __length_hint__(self) -> int:
        return self._remaining
