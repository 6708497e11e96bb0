"""Selection engine: configured entry points over MaxFinder and TopTwoFinder"""
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional, Tuple

from extremal_core.config.params_loader import ParamsLoader
from extremal_core.src.diagnostics.logging import log_selection_event
from extremal_core.src.selection.errors import SelectionError
from extremal_core.src.selection.max_finder import MaxFinder
from extremal_core.src.selection.ranges import as_indexable
from extremal_core.src.selection.stats import SelectionStats
from extremal_core.src.selection.top_two import TopTwoFinder

KeyFn = Optional[Callable[[Any], Any]]


def expected_depth(length: int) -> int:
    """Upper bound on bisection depth for a range of the given length"""
    return max(1, (length - 1).bit_length())


class SelectionEngine:
    """
    Runs finders with the split strategies and recursion policy from params.

    In 'auto' mode a call recurses only while the expected bisection depth
    stays within selection.max_recursion_depth; longer inputs go through the
    explicit work stack instead and a 'mode_fallback' event is logged.

    Events are kept in event_log only when selection.log_events is on, and
    printed only when selection.echo_events is also on.
    """

    def __init__(self, params: Optional[ParamsLoader] = None):
        self.params = params if params is not None else ParamsLoader()
        self.max_split = self.params.get('selection', 'max_split_strategy')
        self.pair_split = self.params.get('selection', 'pair_split_strategy')
        self.max_recursion_depth = self.params.get('selection', 'max_recursion_depth')
        self.force_mode = self.params.get('selection', 'force_mode')
        self.log_events = bool(self.params.get('selection', 'log_events', default=False))
        self.echo_events = bool(self.params.get('selection', 'echo_events', default=False))
        self.event_log: Deque[Dict[str, Any]] = deque(maxlen=self.params.get('selection', 'event_log_size'))

    def use_iterative(self, length: int) -> bool:
        if self.force_mode == 'iterative':
            return True
        if self.force_mode == 'recursive':
            return False
        return expected_depth(length) > self.max_recursion_depth

    def _emit(self, event_type: str, payload: Dict[str, Any]):
        # With log_events off a call touches no engine state at all
        if not self.log_events:
            return
        log_selection_event(event_type, payload, logger=self.event_log, echo=self.echo_events)

    def _run(self, operation: str, sequence: Any, stats: Optional[SelectionStats], call: Callable) -> Any:
        items = as_indexable(sequence)
        if stats is None:
            stats = SelectionStats()
        iterative = self.use_iterative(len(items))
        if iterative and self.force_mode == 'auto':
            self._emit('mode_fallback', {
                'operation': operation,
                'n': len(items),
                'expected_depth': expected_depth(len(items)),
                'max_recursion_depth': self.max_recursion_depth,
            })
        try:
            result = call(items, stats, iterative)
        except SelectionError as exc:
            self._emit('input_rejected', {'operation': operation, 'n': len(items), 'reason': str(exc)})
            raise
        self._emit('selection_complete', {'operation': operation, 'n': len(items), **stats.to_dict()})
        return result

    def find_max(self, sequence: Any, key: KeyFn = None, stats: Optional[SelectionStats] = None) -> Any:
        """Largest element. Raises EmptyInputError on empty input."""
        finder = MaxFinder(split=self.max_split, key=key)
        return self._run('find_max', sequence, stats, finder.find)

    def find_min(self, sequence: Any, key: KeyFn = None, stats: Optional[SelectionStats] = None) -> Any:
        """Smallest element. Raises EmptyInputError on empty input."""
        finder = MaxFinder(split=self.max_split, key=key, order='min')
        return self._run('find_min', sequence, stats, finder.find)

    def find_top_two(self, sequence: Any, key: KeyFn = None, stats: Optional[SelectionStats] = None) -> Tuple[Any, Any]:
        """(largest, second-largest). Raises InsufficientInputError below 2 elements."""
        finder = TopTwoFinder(split=self.pair_split, key=key)
        return self._run('find_top_two', sequence, stats, finder.find)

    def find_bottom_two(self, sequence: Any, key: KeyFn = None, stats: Optional[SelectionStats] = None) -> Tuple[Any, Any]:
        """(smallest, second-smallest). Raises InsufficientInputError below 2 elements."""
        finder = TopTwoFinder(split=self.pair_split, key=key, order='min')
        return self._run('find_bottom_two', sequence, stats, finder.find)

    def find_extremes(self, sequence: Any, key: KeyFn = None) -> Dict[str, Any]:
        """{'max': largest, 'min': smallest}"""
        items = as_indexable(sequence)
        return {
            'max': self.find_max(items, key=key),
            'min': self.find_min(items, key=key),
        }


_default_engine: Optional[SelectionEngine] = None


def get_default_engine() -> SelectionEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = SelectionEngine()
    return _default_engine


def find_max(sequence: Any, key: KeyFn = None) -> Any:
    return get_default_engine().find_max(sequence, key=key)


def find_min(sequence: Any, key: KeyFn = None) -> Any:
    return get_default_engine().find_min(sequence, key=key)


def find_top_two(sequence: Any, key: KeyFn = None) -> Tuple[Any, Any]:
    return get_default_engine().find_top_two(sequence, key=key)


def find_bottom_two(sequence: Any, key: KeyFn = None) -> Tuple[Any, Any]:
    return get_default_engine().find_bottom_two(sequence, key=key)
