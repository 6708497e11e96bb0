"""
Minimal Engine Example: worked selection examples

Runs the engine on the worked example and on an all-negative sequence,
and validates the results.
"""
from extremal_core.config.params_loader import ParamsLoader
from extremal_core.src.selection.engine import SelectionEngine
from extremal_core.src.selection.errors import InsufficientInputError
from extremal_core.src.selection.stats import SelectionStats


def main():
    """Run worked examples"""
    engine = SelectionEngine(ParamsLoader(overrides={'selection': {'log_events': True, 'echo_events': True}}))

    values = [1, 3, 6, 2, 1, 9, 2, 7, 3]
    stats = SelectionStats()
    largest = engine.find_max(values)
    top_two = engine.find_top_two(values, stats=stats)
    print(f"Sequence: {values}")
    print(f"Max: {largest}")
    print(f"Top two: {top_two} ({stats.comparisons} comparisons)")

    negatives = [-5, -1, -9, -2]
    negative_top_two = engine.find_top_two(negatives)
    print(f"Top two of {negatives}: {negative_top_two}")

    assert largest == 9, f"Expected 9, got {largest}"
    assert top_two == (9, 7), f"Expected (9, 7), got {top_two}"
    assert negative_top_two == (-1, -2), f"Expected (-1, -2), got {negative_top_two}"

    try:
        engine.find_top_two([5])
    except InsufficientInputError as exc:
        print(f"Rejected single-element input: {exc}")

    print("\n[OK] Worked examples passed")


if __name__ == '__main__':
    main()
