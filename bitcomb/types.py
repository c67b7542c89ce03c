from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Sequence, Any, Optional, Union,
    List
)

T = TypeVar('T')
U = TypeVar('U')

Combination = List[T]
Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
Matcher = Callable[[T, T], bool]
Target = Union[int, Sequence[T]]


class TargetNotFoundError(ValueError):
    """raised when a position lookup target is not part of the enumeration it is queried against"""


class SizeOverflowError(ValueError):
    """raised when the input is wider than the mask counter allows"""


class CombinationRecord(Generic[T]):
    """a combination together with its mask and its 1-indexed position"""

    def __init__(self, position: int, mask: int, items: List[T]):
        self.position = position
        self.mask = mask
        self.items = items  # no copy, the enumerator hands over a fresh list

    @property
    def length(self) -> int: return len(self.items)

    def __eq__(self, other) -> bool:
        return (isinstance(other, CombinationRecord)
                and (self.position, self.mask, self.items) == (other.position, other.mask, other.items))

    def __repr__(self) -> str:
        return f"CombinationRecord(position={self.position}, mask={self.mask:#b}, items={self.items})"
