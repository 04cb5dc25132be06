"""
Algorithm Core Library - normalization, statistics and reordering.

Pure functions over numpy arrays, kept separate from the stateful store so
they can be reused and tested on their own.
"""

from .normalization import (
    NormalizationMode,
    RangePolicy,
    normalize,
    scale_line,
    empty_normalized,
)
from .statistics import StatisticMethod, statistic, correlation, similarity_matrix
from .reordering import (
    ALPHABETICAL,
    SortDirection,
    identity_order,
    is_permutation,
    statistic_sort,
    similarity_sort,
    reverse_order,
    shuffle_order,
)
from .seriation import DEFAULT_MAX_ITER, greedy_seriation, two_dim_sort

__all__ = [
    # Normalization
    "NormalizationMode",
    "RangePolicy",
    "normalize",
    "scale_line",
    "empty_normalized",
    # Statistics & similarity
    "StatisticMethod",
    "statistic",
    "correlation",
    "similarity_matrix",
    # Reordering
    "ALPHABETICAL",
    "SortDirection",
    "identity_order",
    "is_permutation",
    "statistic_sort",
    "similarity_sort",
    "reverse_order",
    "shuffle_order",
    # Seriation
    "DEFAULT_MAX_ITER",
    "greedy_seriation",
    "two_dim_sort",
]
