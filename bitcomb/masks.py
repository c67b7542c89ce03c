"""
bit-level primitives shared by every enumeration.
a mask in [1, 2^n - 1] selects the items whose bit is set; bit 0 is the first item.
"""
import numbers
import operator
from .types import *
from .config import DEFAULT_MAX_WIDTH


def popcount(mask: int) -> int:
    """number of set bits, which is also the length of the selected combination"""
    return mask.bit_count()


def check_width(n: int, max_width: int = DEFAULT_MAX_WIDTH) -> None:
    """fail fast before the counter would have to be wider than max_width bits"""
    if n > max_width:
        raise SizeOverflowError(f"cannot enumerate {n} items, masks are limited to {max_width} bits")


def iter_masks(n: int, length: Optional[int] = None) -> Iterator[int]:
    """ascending masks in [1, 2^n - 1], optionally only those with exactly `length` set bits"""
    for mask in range(1, 1 << n):
        if length is None or mask.bit_count() == length:
            yield mask


def subset_of(items: Sequence[T], mask: int) -> List[T]:
    """the items selected by mask, in their original relative order"""
    return [items[i] for i in range(len(items)) if (mask >> i) & 1]


def resolve_mask(items: Sequence[T], target: Target, matcher: Optional[Matcher] = None) -> int:
    """
    turn a lookup target into a mask.
    an integer is taken as an explicit mask and only range-checked. any other
    sequence is a value pattern: the lowest mask whose combination matches it
    element for element wins, so with duplicate items the first occurrence is used.
    a str is rejected rather than split into characters.
    """
    if isinstance(target, bool):
        raise TypeError("a bool is neither a mask nor a combination")
    if isinstance(target, str):
        raise TypeError("a str target is ambiguous, pass a list of items instead")

    limit = 1 << len(items)
    if isinstance(target, numbers.Integral):
        mask = int(target)
        if not 1 <= mask < limit:
            raise TargetNotFoundError(f"mask {mask} is outside the enumeration range [1, {limit - 1}]")
        return mask

    pattern = list(target)
    match = matcher if matcher is not None else operator.eq
    # only masks of the pattern's length can match, so skip the rest
    for mask in iter_masks(len(items), len(pattern)):
        if all(match(a, b) for a, b in zip(subset_of(items, mask), pattern)):
            return mask
    raise TargetNotFoundError(f"no combination matches {pattern}")
