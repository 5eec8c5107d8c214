"""
P(n, k): ordered selections of k distinct indices out of range(n), in
lexicographic order.

The iterator keeps a full permutation of range(n) as working state and
exposes only its first k slots. The trailing n - k slots are scratch space
that lets a next-permutation style successor step skip every arrangement
sharing the visible prefix, so each step is O(n) instead of walking the
n! full permutations.
"""
from collections.abc import Iterator

from kselect.kstypes import IndexArray
from kselect.logging_utils import get_logger
from kselect.util import check_domain, identity_permutation, permutation_count

log = get_logger(__name__)


class PnkIterator(Iterator):
    """
    Iterate over P(n, k). Every value returned is the same list object,
    rewritten in place on each step.
    """

    def __init__(self, n: int, k: int):
        check_domain(n, k)
        self.n = n
        self.k = k
        self._a = identity_permutation(n)
        self._result = self._a[:k]
        # with k == n the last slot is forced, so pivot on the last pair
        self._edge = n - 2 if k == n else k - 1
        self._has_next = True
        log.debug("P(%d, %d) iterator, edge=%d", n, k, self._edge)

    def has_next(self) -> bool:
        return self._has_next

    def advance(self) -> IndexArray:
        """
        Copy the visible prefix into the output buffer and step the working
        array. Past exhaustion this returns the final arrangement again.
        """
        self._result[:] = self._a[:self.k]
        if self._has_next:
            self._compute_next()
        return self._result

    def __next__(self) -> IndexArray:
        if not self._has_next:
            raise StopIteration
        return self.advance()

    def __iter__(self) -> Iterator[IndexArray]:
        return self

    def _compute_next(self) -> None:
        a, edge = self._a, self._edge
        if edge < 0:
            # k == 0, or n == k == 1: a single arrangement
            self._exhaust()
            return
        if a[edge] < a[edge + 1]:
            self._rotate_left()
            return
        i = self._find_i()
        if i == 0 and a[0] > a[1]:
            self._exhaust()
            return
        self._reverse_right_of(edge)
        self._reverse_right_of(i)
        j = self._find_j(i)
        a[i], a[j] = a[j], a[i]

    def _exhaust(self) -> None:
        self._has_next = False
        log.debug("P(%d, %d) exhausted at %s", self.n, self.k, self._result)

    def _rotate_left(self) -> None:
        a, edge = self._a, self._edge
        a[edge:] = a[edge + 1:] + [a[edge]]

    def _reverse_right_of(self, start: int) -> None:
        a = self._a
        i, j = start + 1, self.n - 1
        while i < j:
            a[i], a[j] = a[j], a[i]
            i += 1
            j -= 1

    def _find_i(self) -> int:
        # rightmost i <= edge with a[i] < a[i + 1], stopping at 0
        a = self._a
        i = self._edge
        while i > 0 and a[i] >= a[i + 1]:
            i -= 1
        return i

    def _find_j(self, i: int) -> int:
        # smallest value to the right of i that is still above a[i]
        a = self._a
        current = a[i]
        min_right = self.n
        index_of_min = i
        for j in range(i + 1, self.n):
            if current < a[j] < min_right:
                min_right = a[j]
                index_of_min = j
        return index_of_min


class KPermutations:
    """Reusable P(n, k); each iter() starts a fresh PnkIterator."""

    def __init__(self, n: int, k: int):
        check_domain(n, k)
        self.n = n
        self.k = k

    def __iter__(self) -> PnkIterator:
        return PnkIterator(self.n, self.k)

    def __len__(self) -> int:
        return permutation_count(self.n, self.k)

    def __repr__(self) -> str:
        return f"KPermutations(n={self.n}, k={self.k})"
