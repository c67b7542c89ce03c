"""
bitcomb: combinations by binary counting.

    every mask 1 .. 2^n - 1 is a subset, bit i set means item i is in it.

    >>> from bitcomb import all_combinations, B
    >>> all_combinations([1, 2, 3])
    [[1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3]]
    >>> B([1, 2, 3]).comb.position_of_length(2, [2, 3])
    3
"""

# expose the functional api
from .enumerator import (
    all_combinations,
    qualifying_combinations,
    combinations_of_length,
    combination_at,
    position_of,
    position_of_qualifying,
    position_of_length,
    qualifying_positions,
    length_positions,
    qualifying_length_positions,
)

# expose the fluent api
from .enumerable import Enumerable
from .factories import from_iterable, from_range, empty, bitcomb, B

# expose supporting types and settings
from .types import CombinationRecord, TargetNotFoundError, SizeOverflowError
from .config import DEFAULT_MAX_WIDTH, EnumeratorConfig

# define what `import *` does
__all__ = [
    "all_combinations",
    "qualifying_combinations",
    "combinations_of_length",
    "combination_at",
    "position_of",
    "position_of_qualifying",
    "position_of_length",
    "qualifying_positions",
    "length_positions",
    "qualifying_length_positions",
    "Enumerable",
    "from_iterable",
    "from_range",
    "empty",
    "bitcomb",
    "B",
    "CombinationRecord",
    "TargetNotFoundError",
    "SizeOverflowError",
    "DEFAULT_MAX_WIDTH",
    "EnumeratorConfig",
]
