from kselect.combinations import (
    CombinadicCombinations, CombinadicIterator, Combinations,
    LexCombinationIterator
)
from kselect.kselect import kcombine, kcombs, kpermute, kperms
from kselect.kstypes import IndexArray, IndexIterator, IndexTuple
from kselect.permutations import KPermutations, PnkIterator
from kselect.util import (
    InvalidArgument, binomial, identity_permutation, permutation_count
)

__all__ = [
    "CombinadicCombinations", "CombinadicIterator", "Combinations",
    "IndexArray", "IndexIterator", "IndexTuple", "InvalidArgument",
    "KPermutations", "LexCombinationIterator", "PnkIterator", "binomial",
    "identity_permutation", "kcombine", "kcombs", "kpermute", "kperms",
    "permutation_count",
]
