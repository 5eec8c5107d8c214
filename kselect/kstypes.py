from typing import Iterator, Protocol, TypeAlias

IndexArray: TypeAlias = list[int]
IndexTuple: TypeAlias = tuple[int, ...]


class IndexIterator(Protocol):
    """
    Lazy, finite, non-restartable stream of fixed-length index arrays.

    The array handed out by advance() / __next__ is owned by the iterator
    and overwritten by the following call. Copy it to keep it.
    """

    def has_next(self) -> bool:
        pass

    def advance(self) -> IndexArray:
        pass

    def __next__(self) -> IndexArray:
        pass

    def __iter__(self) -> Iterator[IndexArray]:
        pass
