"""Linear-scan and sort-based reference implementations"""
from typing import Any, Callable, Dict, List, Optional, Tuple

from extremal_core.src.selection.errors import EmptyInputError, InsufficientInputError
from extremal_core.src.selection.ranges import Ranking, prepare
from extremal_core.src.selection.stats import SelectionStats


def _linear_best(sequence: Any, key, order: str, stats: Optional[SelectionStats]) -> Any:
    items, keys = prepare(sequence, key)
    if len(keys) == 0:
        raise EmptyInputError('linear_max' if order == 'max' else 'linear_min')
    ranking = Ranking(keys, order=order, stats=stats)
    best = 0
    # Single pass
    for i in range(1, len(keys)):
        best = ranking.pick(best, i)
    return items[best]


def linear_max(sequence: Any, key: Optional[Callable[[Any], Any]] = None, stats: Optional[SelectionStats] = None) -> Any:
    """Maximum by single-pass scan"""
    return _linear_best(sequence, key, 'max', stats)


def linear_min(sequence: Any, key: Optional[Callable[[Any], Any]] = None, stats: Optional[SelectionStats] = None) -> Any:
    """Minimum by single-pass scan"""
    return _linear_best(sequence, key, 'min', stats)


def linear_top_two(
    sequence: Any,
    key: Optional[Callable[[Any], Any]] = None,
    stats: Optional[SelectionStats] = None
) -> Tuple[Any, Any]:
    """
    Running (max1, max2) scan.

    Seeded from the first two elements rather than a default value, so
    all-negative inputs are handled. Each later element costs one comparison
    against max1 and, when it loses, a second against max2: up to 2n - 3
    comparisons on descending input.
    """
    items, keys = prepare(sequence, key)
    if len(keys) < 2:
        raise InsufficientInputError(len(keys), required=2, operation='linear_top_two')
    ranking = Ranking(keys, order='max', stats=stats)

    first, second = (1, 0) if ranking.beats(0, 1) else (0, 1)
    for i in range(2, len(keys)):
        if ranking.beats(first, i):
            first, second = i, first
        elif ranking.beats(second, i):
            second = i
    return items[first], items[second]


def sorted_extremes(
    sequence: Any,
    count: int = 2,
    key: Optional[Callable[[Any], Any]] = None
) -> Dict[str, List[Any]]:
    """
    The count largest and count smallest elements via one sort.

    Returns {'maxs': [largest first], 'mins': [smallest first]}.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    items, _ = prepare(sequence, key)
    if len(items) < count:
        raise InsufficientInputError(len(items), required=count, operation='sorted_extremes')

    ordered = sorted(items, key=key)
    return {
        'maxs': ordered[-count:][::-1],
        'mins': ordered[:count],
    }
