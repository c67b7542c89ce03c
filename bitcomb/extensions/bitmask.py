from __future__ import annotations
import typing
import math
import numpy as np
import pandas as pd
from .. import enumerator
from ..config import DEFAULT_MAX_WIDTH
from ..masks import check_width, iter_masks, subset_of
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class BitmaskAccessor(Generic[T]):
    """
    exposes the bitmask enumerator on an enumerable.
    sequence results come back as new lazy enumerables, lookups are evaluated eagerly.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _items(self) -> List[T]:
        return self._enumerable._get_data()

    # --- combinations ---

    def all(self) -> 'Enumerable[List[T]]':
        """every non-empty combination in ascending mask order"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: enumerator.all_combinations(self._items()))

    def qualifying(self, predicate: Predicate[List[T]]) -> 'Enumerable[List[T]]':
        """combinations satisfying predicate, in ascending mask order"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: enumerator.qualifying_combinations(self._items(), predicate))

    def of_length(self, length: int) -> 'Enumerable[List[T]]':
        """combinations with exactly `length` items. empty for length < 1 or length > n."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: enumerator.combinations_of_length(self._items(), length))

    def at(self, position: int) -> List[T]:
        """the combination at a 1-indexed position of the full enumeration"""
        return enumerator.combination_at(self._items(), position)

    def binomial_coefficient(self, r: int) -> int:
        """
        n choose r. matches of_length(r).to.count() for every r except 0,
        since the empty combination is never enumerated.
        """
        if r < 0:
            return 0
        return math.comb(self._enumerable.to.count(), r)

    # --- positions ---

    def position_of(self, target: Target, matcher: Optional[Matcher] = None) -> int:
        return enumerator.position_of(self._items(), target, matcher)

    def position_of_qualifying(self, predicate: Predicate[List[T]], target: Target,
                               matcher: Optional[Matcher] = None) -> int:
        return enumerator.position_of_qualifying(self._items(), predicate, target, matcher)

    def position_of_length(self, length: int, target: Target, matcher: Optional[Matcher] = None) -> int:
        return enumerator.position_of_length(self._items(), length, target, matcher)

    def qualifying_positions(self, predicate: Predicate[List[T]]) -> 'Enumerable[int]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: enumerator.qualifying_positions(self._items(), predicate))

    def length_positions(self, length: int) -> 'Enumerable[int]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: enumerator.length_positions(self._items(), length))

    def qualifying_length_positions(self, length: int, predicate: Predicate[List[T]]) -> 'Enumerable[int]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: enumerator.qualifying_length_positions(self._items(), length, predicate))

    # --- tabular views ---

    def records(self, length: Optional[int] = None,
                *, max_width: int = DEFAULT_MAX_WIDTH) -> 'Enumerable[CombinationRecord[T]]':
        """
        combinations paired with their mask and position.
        with a length the position is the rank within that length, as position_of_length reports it.
        """
        from ..enumerable import Enumerable
        def records_data():
            data = self._items()
            check_width(len(data), max_width)
            if length is not None and not 0 < length <= len(data):
                return []
            masks = iter_masks(len(data), length)
            return [CombinationRecord(position, mask, subset_of(data, mask))
                    for position, mask in enumerate(masks, 1)]

        return Enumerable(records_data)

    def mask_array(self, length: Optional[int] = None, *, max_width: int = DEFAULT_MAX_WIDTH) -> np.ndarray:
        """
        masks of the (optionally length-filtered) enumeration as an int64 array.
        masks above 63 bits do not fit int64, so a wider max_width only helps filtered results.
        """
        data = self._items()
        check_width(len(data), max_width)
        if length is None:
            return np.arange(1, 1 << len(data), dtype=np.int64)
        return np.array(enumerator.length_positions(data, length, max_width=max_width), dtype=np.int64)

    def table(self, length: Optional[int] = None, *, max_width: int = DEFAULT_MAX_WIDTH) -> pd.DataFrame:
        """one row per combination with position, mask, length and the combination itself"""
        rows = self.records(length, max_width=max_width).select(lambda r: {
            'position': r.position,
            'mask': r.mask,
            'length': r.length,
            'combination': r.items,
        }).to.list()
        return pd.DataFrame(rows, columns=['position', 'mask', 'length', 'combination'])
