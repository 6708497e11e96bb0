"""TopTwoFinder: largest and second-largest elements by tournament merge"""
from typing import Any, Callable, Optional, Tuple

from extremal_core.src.selection.decompose import DecompositionPlan, solve_iterative, solve_recursive
from extremal_core.src.selection.errors import InsufficientInputError
from extremal_core.src.selection.ranges import Ranking, SubRange, even_offsets, get_split_strategy, prepare
from extremal_core.src.selection.stats import SelectionStats

# (winner index, runner-up index) for one solved sub-range
Pair = Tuple[int, int]


class TopTwoFinder:
    """
    Find the two largest elements of a sequence with a tournament merge.

    Every sub-range keeps its winner and the runner-up that winner defeated.
    Merging two sides compares the two winners, then the overall winner's
    own runner-up against the losing side's winner: 2 comparisons per merge.

    Leaves always hold 2 or 3 elements, never 1, so no placeholder value is
    needed for a missing runner-up. Whatever the split strategy, the left
    part of every split is rounded down to an even length, so at most one
    leaf has 3 elements and a run costs 3n/2 - 2 comparisons for even n.
    """

    def __init__(self, split: str = 'even', key: Optional[Callable[[Any], Any]] = None, order: str = 'max'):
        self.split = split
        self.strategy = even_offsets(get_split_strategy(split))
        self.key = key
        self.order = order

    def _plan(self, ranking: Ranking) -> DecompositionPlan:
        def solve_leaf(sub_range: SubRange) -> Pair:
            a = sub_range.start
            b = a + 1
            winner, loser = (b, a) if ranking.beats(a, b) else (a, b)
            if sub_range.length == 2:
                return winner, loser

            c = a + 2
            if ranking.beats(winner, c):
                return c, winner
            return winner, ranking.pick(loser, c)

        def merge(left: Pair, right: Pair) -> Pair:
            if ranking.beats(left[0], right[0]):
                winner, runner_up, challenger = right[0], right[1], left[0]
            else:
                winner, runner_up, challenger = left[0], left[1], right[0]
            return winner, ranking.pick(runner_up, challenger)

        return DecompositionPlan(
            leaf_limit=3,
            min_part=2,
            strategy=self.strategy,
            solve_leaf=solve_leaf,
            merge=merge,
        )

    def find_indices(self, sequence: Any, stats: Optional[SelectionStats] = None, iterative: bool = False) -> Pair:
        """Positions (first, second) of the two winning elements; always distinct"""
        _, keys = prepare(sequence, self.key)
        return self._find_indices(keys, stats, iterative)

    def find(self, sequence: Any, stats: Optional[SelectionStats] = None, iterative: bool = False) -> Tuple[Any, Any]:
        """
        Return (first, second) with first ranked at or above second.

        Raises InsufficientInputError when sequence has fewer than 2 elements.
        """
        items, keys = prepare(sequence, self.key)
        first, second = self._find_indices(keys, stats, iterative)
        return items[first], items[second]

    def _find_indices(self, keys, stats: Optional[SelectionStats], iterative: bool) -> Pair:
        if len(keys) < 2:
            operation = 'find_top_two' if self.order == 'max' else 'find_bottom_two'
            raise InsufficientInputError(len(keys), required=2, operation=operation)
        if stats is None:
            stats = SelectionStats()
        ranking = Ranking(keys, order=self.order, stats=stats)
        root = SubRange(0, len(keys))
        solve = solve_iterative if iterative else solve_recursive
        return solve(root, self._plan(ranking), stats)
