"""MaxFinder: single largest (or smallest) element by recursive bisection"""
from typing import Any, Callable, Optional

from extremal_core.src.selection.decompose import DecompositionPlan, solve_iterative, solve_recursive
from extremal_core.src.selection.errors import EmptyInputError
from extremal_core.src.selection.ranges import Ranking, SubRange, get_split_strategy, prepare
from extremal_core.src.selection.stats import SelectionStats


class MaxFinder:
    """
    Find the maximum of a sequence by divide and conquer.

    Leaves hold one or two elements; each merge keeps the larger of the two
    half-winners. A run over n elements makes exactly n - 1 comparisons.
    With order='min' the same decomposition finds the minimum.
    """

    def __init__(self, split: str = 'midpoint', key: Optional[Callable[[Any], Any]] = None, order: str = 'max'):
        self.split = split
        self.strategy = get_split_strategy(split)
        self.key = key
        self.order = order

    def _plan(self, ranking: Ranking) -> DecompositionPlan:
        def solve_leaf(sub_range: SubRange) -> int:
            if sub_range.length == 1:
                return sub_range.start
            return ranking.pick(sub_range.start, sub_range.start + 1)

        return DecompositionPlan(
            leaf_limit=2,
            min_part=1,
            strategy=self.strategy,
            solve_leaf=solve_leaf,
            merge=ranking.pick,
        )

    def find_index(self, sequence: Any, stats: Optional[SelectionStats] = None, iterative: bool = False) -> int:
        """Position of a winning element in sequence"""
        _, keys = prepare(sequence, self.key)
        return self._find_index(keys, stats, iterative)

    def find(self, sequence: Any, stats: Optional[SelectionStats] = None, iterative: bool = False) -> Any:
        """Winning element of sequence. Raises EmptyInputError on empty input."""
        items, keys = prepare(sequence, self.key)
        return items[self._find_index(keys, stats, iterative)]

    def _find_index(self, keys, stats: Optional[SelectionStats], iterative: bool) -> int:
        if len(keys) == 0:
            raise EmptyInputError('find_max' if self.order == 'max' else 'find_min')
        if stats is None:
            stats = SelectionStats()
        ranking = Ranking(keys, order=self.order, stats=stats)
        root = SubRange(0, len(keys))
        solve = solve_iterative if iterative else solve_recursive
        return solve(root, self._plan(ranking), stats)
