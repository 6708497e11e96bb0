"""
extremal_core - divide-and-conquer extremal selection.

find_max returns the largest element of a sequence; find_top_two returns
the (largest, second-largest) pair using a tournament merge.
"""
from extremal_core.src.selection.engine import (
    SelectionEngine,
    find_bottom_two,
    find_max,
    find_min,
    find_top_two,
)
from extremal_core.src.selection.errors import EmptyInputError, InsufficientInputError, SelectionError

__all__ = [
    "SelectionEngine",
    "find_max",
    "find_min",
    "find_top_two",
    "find_bottom_two",
    "EmptyInputError",
    "InsufficientInputError",
    "SelectionError",
]
