"""Sub-ranges, split strategies and counted comparisons shared by the finders"""
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple
import numpy as np
import pandas as pd

from extremal_core.src.selection.stats import SelectionStats


@dataclass(frozen=True)
class SubRange:
    """Half-open view [start, end) into a sequence"""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def split(self, offset: int) -> Tuple['SubRange', 'SubRange']:
        """Split at start + offset into two contiguous, non-overlapping halves"""
        if not 0 < offset < self.length:
            raise ValueError(f"Split offset {offset} outside (0, {self.length})")
        mid = self.start + offset
        return SubRange(self.start, mid), SubRange(mid, self.end)

    def indices(self) -> range:
        return range(self.start, self.end)


def _midpoint(length: int) -> int:
    return length // 2


def _ceil_midpoint(length: int) -> int:
    return (length + 1) // 2


def _even_midpoint(length: int) -> int:
    # Left part always even, so an odd remainder only ever travels right
    return 2 * ((length // 2 + 1) // 2)


SPLIT_STRATEGIES: Dict[str, Callable[[int], int]] = {
    'midpoint': _midpoint,
    'ceil': _ceil_midpoint,
    'even': _even_midpoint,
}


def get_split_strategy(name: str) -> Callable[[int], int]:
    try:
        return SPLIT_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown split strategy '{name}'. Expected one of: {sorted(SPLIT_STRATEGIES)}"
        ) from None


def even_offsets(strategy: Callable[[int], int]) -> Callable[[int], int]:
    """
    Wrap a strategy so its offset is even and leaves at least 2 on the right.

    Only the rightmost part of any split can then have odd length, which
    keeps pair leaves at length 2 except for one possible length-3 leaf.
    """
    def offset(length: int) -> int:
        suggested = min(strategy(length), length - 2)
        return max(2, suggested - suggested % 2)
    return offset


def split_point(length: int, strategy: Callable[[int], int], min_part: int = 1) -> int:
    """
    Offset at which to split a sub-range of the given length.

    The strategy's suggestion is clamped so that both halves hold at least
    min_part elements.
    """
    if length < 2 * min_part:
        raise ValueError(f"Cannot split length {length} into parts of at least {min_part}")
    offset = strategy(length)
    return max(min_part, min(offset, length - min_part))


def as_indexable(sequence: Any) -> Sequence:
    """
    Return a positionally indexable, length-queryable view of sequence.

    The caller's object is never copied when it already supports positional
    access; other finite iterables are materialised once.
    """
    if isinstance(sequence, pd.DataFrame):
        raise TypeError("Expected a one-dimensional sequence, got a DataFrame")
    if isinstance(sequence, pd.Series):
        return sequence.to_numpy()
    if isinstance(sequence, np.ndarray):
        if sequence.ndim != 1:
            raise TypeError(f"Expected a one-dimensional array, got ndim={sequence.ndim}")
        return sequence
    if isinstance(sequence, Mapping):
        raise TypeError("Expected a sequence of values, got a mapping")
    if isinstance(sequence, Sequence):
        return sequence
    try:
        return list(sequence)
    except TypeError:
        raise TypeError(f"Expected a sequence, got {type(sequence).__name__}") from None


class Ranking:
    """Counted index-based comparisons over a prepared sequence"""

    def __init__(self, keys: Sequence, order: str = 'max', stats: Optional[SelectionStats] = None):
        if order not in ('max', 'min'):
            raise ValueError(f"order must be 'max' or 'min', got '{order}'")
        self.keys = keys
        self.order = order
        self.stats = stats if stats is not None else SelectionStats()

    def beats(self, i: int, j: int) -> bool:
        """True if element j strictly outranks element i"""
        self.stats.comparisons += 1
        if self.order == 'max':
            return self.keys[j] > self.keys[i]
        return self.keys[j] < self.keys[i]

    def pick(self, i: int, j: int) -> int:
        """Winner of i and j; ties keep i"""
        return j if self.beats(i, j) else i


def prepare(sequence: Any, key: Optional[Callable[[Any], Any]] = None) -> Tuple[Sequence, Sequence]:
    """Return (items, keys) for a sequence; keys is items itself when key is None"""
    items = as_indexable(sequence)
    if key is None:
        return items, items
    return items, [key(item) for item in items]
