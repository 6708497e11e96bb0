"""Unit tests for TopTwoFinder"""
import pytest

from extremal_core.src.selection.errors import InsufficientInputError
from extremal_core.src.selection.ranges import SPLIT_STRATEGIES
from extremal_core.src.selection.stats import SelectionStats
from extremal_core.src.selection.top_two import TopTwoFinder


def test_worked_example():
    assert TopTwoFinder().find([1, 3, 6, 2, 1, 9, 2, 7, 3]) == (9, 7)


def test_all_negative_values():
    """Test that no zero placeholder leaks into all-negative results"""
    assert TopTwoFinder().find([-5, -1, -9, -2]) == (-1, -2)
    assert TopTwoFinder().find([-5, -1, -9]) == (-1, -5)
    assert TopTwoFinder().find([-7, -3, -8, -4, -6]) == (-3, -4)


def test_equal_pair():
    assert TopTwoFinder().find([5, 5]) == (5, 5)


def test_duplicate_winner_reported_twice():
    assert TopTwoFinder().find([1, 9, 3, 9, 2]) == (9, 9)


@pytest.mark.parametrize("values", [[], [5]])
def test_insufficient_input(values):
    with pytest.raises(InsufficientInputError) as exc_info:
        TopTwoFinder().find(values)
    assert exc_info.value.actual == len(values)
    assert exc_info.value.required == 2


@pytest.mark.parametrize("values, expected", [
    ([1, 2, 3], (3, 2)),
    ([1, 3, 2], (3, 2)),
    ([2, 1, 3], (3, 2)),
    ([2, 3, 1], (3, 2)),
    ([3, 1, 2], (3, 2)),
    ([3, 2, 1], (3, 2)),
])
def test_three_element_leaf_all_orders(values, expected):
    assert TopTwoFinder().find(values) == expected


def test_indices_are_distinct():
    values = [4, 4, 4, 4, 4]
    first, second = TopTwoFinder().find_indices(values)
    assert first != second


def test_even_length_comparison_count():
    """Test exactly 3n/2 - 2 comparisons for even n"""
    for n in [2, 4, 6, 8, 10, 16, 64, 100]:
        stats = SelectionStats()
        TopTwoFinder().find(list(range(n)), stats=stats)
        assert stats.comparisons == 3 * n // 2 - 2


def test_odd_length_comparison_bound():
    for n in [3, 5, 7, 9, 33, 101]:
        for values in (list(range(n)), list(range(n, 0, -1))):
            stats = SelectionStats()
            TopTwoFinder().find(values, stats=stats)
            assert stats.comparisons <= (3 * n - 3) // 2


def test_bottom_two():
    assert TopTwoFinder(order='min').find([1, 3, 6, 2, 1, 9, 2, 7, 3]) == (1, 1)
    assert TopTwoFinder(order='min').find([4, -2, 11, -7]) == (-7, -2)


def test_key_function():
    people = [
        {'name': 'Alice', 'age': 25},
        {'name': 'Bob', 'age': 30},
        {'name': 'Charlie', 'age': 22},
        {'name': 'David', 'age': 45},
        {'name': 'Eve', 'age': 35},
    ]
    first, second = TopTwoFinder(key=lambda p: p['age']).find(people)
    assert (first['name'], second['name']) == ('David', 'Eve')


def test_leaves_never_single():
    """Test that the pair split never produces a one-element leaf"""
    for split in ['even', 'midpoint', 'ceil']:
        for n in range(2, 40):
            stats = SelectionStats()
            TopTwoFinder(split=split).find(list(range(n)), stats=stats)
            # Leaves hold 2 or 3 elements
            assert n / 3 <= stats.leaves <= n / 2


@pytest.mark.parametrize("split", sorted(SPLIT_STRATEGIES))
def test_every_split_keeps_even_comparison_count(split):
    """Test that no split strategy pushes the count past 3n/2 - 2 on even n"""
    for n in [4, 6, 12, 24, 48, 100]:
        stats = SelectionStats()
        assert TopTwoFinder(split=split).find(list(range(n, 0, -1)), stats=stats) == (n, n - 1)
        assert stats.comparisons == 3 * n // 2 - 2


@pytest.mark.parametrize("split", sorted(SPLIT_STRATEGIES))
def test_every_split_has_at_most_one_three_leaf(split):
    for n in [5, 7, 9, 25, 99]:
        stats = SelectionStats()
        TopTwoFinder(split=split).find(list(range(n)), stats=stats)
        assert stats.leaves == (n - 1) // 2
        assert stats.comparisons <= (3 * n - 3) // 2
