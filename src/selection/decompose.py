"""Divide-and-conquer drivers: plain recursion and an explicit work stack"""
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from extremal_core.src.selection.ranges import SubRange, split_point
from extremal_core.src.selection.stats import SelectionStats


@dataclass
class DecompositionPlan:
    """How one finder splits, solves leaves and merges partial results"""
    leaf_limit: int                          # sub-ranges this long or shorter are leaves
    min_part: int                            # smallest allowed half after a split
    strategy: Callable[[int], int]           # suggested split offset for a length
    solve_leaf: Callable[[SubRange], Any]
    merge: Callable[[Any, Any], Any]

    def halves(self, sub_range: SubRange) -> Tuple[SubRange, SubRange]:
        return sub_range.split(split_point(sub_range.length, self.strategy, self.min_part))


def solve_recursive(sub_range: SubRange, plan: DecompositionPlan, stats: SelectionStats, depth: int = 1) -> Any:
    """Solve by recursive bisection. Depth grows with log2 of the range length."""
    if depth == 1:
        stats.mode = 'recursive'
    stats.observe_depth(depth)

    if sub_range.length <= plan.leaf_limit:
        stats.leaves += 1
        return plan.solve_leaf(sub_range)

    left, right = plan.halves(sub_range)
    left_result = solve_recursive(left, plan, stats, depth + 1)
    right_result = solve_recursive(right, plan, stats, depth + 1)
    stats.merges += 1
    return plan.merge(left_result, right_result)


def solve_iterative(sub_range: SubRange, plan: DecompositionPlan, stats: SelectionStats) -> Any:
    """
    Solve with an explicit stack of pending sub-ranges instead of the call stack.

    Ranges are expanded left-first and merged post-order, so comparisons run
    in the same order as solve_recursive and produce the same winners.
    """
    stats.mode = 'iterative'
    # (range, expanded, depth); an expanded entry means both halves are solved
    pending: List[Tuple[SubRange, bool, int]] = [(sub_range, False, 1)]
    results: List[Any] = []

    while pending:
        current, expanded, depth = pending.pop()

        if expanded:
            right_result = results.pop()
            left_result = results.pop()
            stats.merges += 1
            results.append(plan.merge(left_result, right_result))
            continue

        stats.observe_depth(depth)
        if current.length <= plan.leaf_limit:
            stats.leaves += 1
            results.append(plan.solve_leaf(current))
            continue

        left, right = plan.halves(current)
        pending.append((current, True, depth))
        pending.append((right, False, depth + 1))
        pending.append((left, False, depth + 1))

    return results.pop()
