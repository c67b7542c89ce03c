"""
combination enumeration by binary counting.

a counter runs from 1 to 2^n - 1 and every value is read as a subset indicator:
for [1, 2, 3] the masks 001, 010, 011, 100, 101, 110, 111 give
[1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3].

positions are 1-indexed ranks in that ascending-mask order, so in the full
enumeration the position of a combination is its mask. items are never compared
or hashed unless a value pattern is looked up, which means duplicate items are
combined independently: [1, 2, 2, 3] yields [1, 2, 3] twice.
"""
import logging
import numbers
from .types import *
from .config import DEFAULT_MAX_WIDTH
from .masks import check_width, iter_masks, popcount, resolve_mask, subset_of

logger = logging.getLogger(__name__)


def _prepare(items: Iterable[T], max_width: int) -> List[T]:
    data = list(items)
    check_width(len(data), max_width)
    return data


# --- combinations ---

def all_combinations(items: Iterable[T], *, max_width: int = DEFAULT_MAX_WIDTH) -> List[Combination]:
    """every non-empty combination, ordered by ascending mask"""
    data = _prepare(items, max_width)
    result = [subset_of(data, mask) for mask in iter_masks(len(data))]
    logger.debug("enumerated %d combinations of %d items", len(result), len(data))
    return result


def qualifying_combinations(items: Iterable[T], predicate: Predicate[Combination],
                            *, max_width: int = DEFAULT_MAX_WIDTH) -> List[Combination]:
    """
    the combinations for which predicate holds, ordered by ascending mask.
    predicate is called exactly once per mask, in mask order.
    """
    data = _prepare(items, max_width)
    result = []
    for mask in iter_masks(len(data)):
        subset = subset_of(data, mask)
        if predicate(subset):
            result.append(subset)
    logger.debug("%d of %d combinations qualified", len(result), (1 << len(data)) - 1)
    return result


def combinations_of_length(items: Iterable[T], length: int,
                           *, max_width: int = DEFAULT_MAX_WIDTH) -> List[Combination]:
    """
    the combinations with exactly `length` items, ordered by ascending mask.
    a length outside [1, n] has no combinations and gives an empty list.
    """
    data = _prepare(items, max_width)
    if not 0 < length <= len(data):
        return []
    result = [subset_of(data, mask) for mask in iter_masks(len(data), length)]
    logger.debug("enumerated %d combinations of length %d from %d items", len(result), length, len(data))
    return result


def combination_at(items: Iterable[T], position: int, *, max_width: int = DEFAULT_MAX_WIDTH) -> Combination:
    """the combination at a 1-indexed position of the full enumeration"""
    if not isinstance(position, numbers.Integral):
        raise TypeError("position must be an integer")
    data = _prepare(items, max_width)
    return subset_of(data, resolve_mask(data, position))


# --- positions ---

def position_of(items: Iterable[T], target: Target, matcher: Optional[Matcher] = None,
                *, max_width: int = DEFAULT_MAX_WIDTH) -> int:
    """
    1-indexed position of target among all combinations.
    target is either an explicit mask or a value pattern compared with matcher
    (default ==). since masks are enumerated from 1 upwards the position is the mask.
    """
    data = _prepare(items, max_width)
    return resolve_mask(data, target, matcher)


def position_of_qualifying(items: Iterable[T], predicate: Predicate[Combination], target: Target,
                           matcher: Optional[Matcher] = None, *, max_width: int = DEFAULT_MAX_WIDTH) -> int:
    """
    1-indexed position of target among the qualifying combinations only.
    raises TargetNotFoundError if target does not qualify itself.
    """
    data = _prepare(items, max_width)
    target_mask = resolve_mask(data, target, matcher)
    if not predicate(subset_of(data, target_mask)):
        raise TargetNotFoundError(f"mask {target_mask} does not satisfy the predicate")

    position = 1  # the target itself
    for mask in range(1, target_mask):
        if predicate(subset_of(data, mask)):
            position += 1
    return position


def position_of_length(items: Iterable[T], length: int, target: Target, matcher: Optional[Matcher] = None,
                       *, max_width: int = DEFAULT_MAX_WIDTH) -> int:
    """
    1-indexed position of target among the combinations with exactly `length` items.
    raises TargetNotFoundError if target has a different length.
    """
    data = _prepare(items, max_width)
    target_mask = resolve_mask(data, target, matcher)
    if popcount(target_mask) != length:
        raise TargetNotFoundError(f"mask {target_mask} has {popcount(target_mask)} items, not {length}")
    return sum(1 for mask in range(1, target_mask + 1) if popcount(mask) == length)


# --- position lists ---

def qualifying_positions(items: Iterable[T], predicate: Predicate[Combination],
                         *, max_width: int = DEFAULT_MAX_WIDTH) -> List[int]:
    """positions in the full enumeration of every qualifying combination"""
    data = _prepare(items, max_width)
    return [mask for mask in iter_masks(len(data)) if predicate(subset_of(data, mask))]


def length_positions(items: Iterable[T], length: int, *, max_width: int = DEFAULT_MAX_WIDTH) -> List[int]:
    """positions in the full enumeration of every combination with exactly `length` items"""
    data = _prepare(items, max_width)
    if not 0 < length <= len(data):
        return []
    return list(iter_masks(len(data), length))


def qualifying_length_positions(items: Iterable[T], length: int, predicate: Predicate[Combination],
                                *, max_width: int = DEFAULT_MAX_WIDTH) -> List[int]:
    """positions in the full enumeration of every qualifying combination with exactly `length` items"""
    data = _prepare(items, max_width)
    if not 0 < length <= len(data):
        return []
    return [mask for mask in iter_masks(len(data), length) if predicate(subset_of(data, mask))]
