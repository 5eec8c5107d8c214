from typing import Callable, TypeVar

from kselect.combinations import LexCombinationIterator
from kselect.kstypes import IndexIterator, IndexTuple
from kselect.permutations import PnkIterator
from kselect.util import check_types

T = TypeVar('T', bound=IndexIterator)


def _kswrap(factory: Callable[[int, int], T], n: int, k: int) -> T:
    # reject non-ints here; the domain check lives in the constructors
    check_types(n, k)
    return factory(n, k)


def _freeze(iterator: IndexIterator) -> tuple[IndexTuple, ...]:
    # the iterators reuse one buffer, so copy every step
    return tuple(tuple(value) for value in iterator)


def kperms(n: int, k: int) -> PnkIterator:
    return _kswrap(PnkIterator, n, k)


def kpermute(n: int, k: int) -> tuple[IndexTuple, ...]:
    return _freeze(_kswrap(PnkIterator, n, k))


def kcombs(n: int, k: int) -> LexCombinationIterator:
    return _kswrap(LexCombinationIterator, n, k)


def kcombine(n: int, k: int) -> tuple[IndexTuple, ...]:
    return _freeze(_kswrap(LexCombinationIterator, n, k))
