"""Load and access selection engine parameters from base_params.json"""
import json
from pathlib import Path
from typing import Any, Dict, Optional
import copy
import warnings

FORCE_MODES = ('auto', 'recursive', 'iterative')


class ParamsLoader:
    """Single source of truth for selection parameters"""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        overrides_path: Optional[Path] = None,
        overrides: Dict[str, Any] = None,
        strict: bool = True
    ):
        params_file = Path(base_path) if base_path is not None else Path(__file__).parent / "base_params.json"

        with open(params_file, 'r') as f:
            self._params = json.load(f)

        if overrides_path is not None:
            with open(overrides_path, 'r') as f:
                file_overrides = json.load(f)
            self._params = self._deep_merge(self._params, file_overrides, strict=strict)

        if overrides:
            self._params = self._deep_merge(self._params, overrides, strict=strict)

        if strict:
            self._validate_selection()

    def _deep_merge(self, base: Any, override: Any, strict: bool = True, path: str = "") -> Any:
        """
        Recursive merge with strict type checking.

        Rules:
        - dict + dict -> recursive merge
        - list or scalar in override -> replace
        - unknown keys in strict mode -> raise KeyError
        - type mismatch -> raise TypeError (int/float are interchangeable)
        """
        if isinstance(base, dict) and isinstance(override, dict):
            result = copy.deepcopy(base)
            for k, v in override.items():
                new_path = f"{path}.{k}" if path else k

                if k not in base:
                    if strict:
                        raise KeyError(f"Override key '{new_path}' does not exist in base params.")
                    warnings.warn(f"Override key '{new_path}' does not exist in base params. Adding it.")
                    result[k] = v
                else:
                    result[k] = self._deep_merge(base[k], v, strict=strict, path=new_path)
            return result

        # bool is an int subclass but never a valid stand-in for a number here
        numeric = (
            isinstance(base, (int, float)) and isinstance(override, (int, float))
            and not isinstance(base, bool) and not isinstance(override, bool)
        )
        bool_mismatch = (
            base is not None and override is not None
            and isinstance(base, bool) != isinstance(override, bool)
        )
        type_mismatch = not isinstance(override, type(base)) and not numeric
        if (bool_mismatch or type_mismatch) and base is not None and override is not None:
            msg = f"Type mismatch at '{path}': expected {type(base).__name__}, got {type(override).__name__}"
            if strict:
                raise TypeError(msg)
            warnings.warn(msg)

        return override

    def _validate_selection(self):
        """Reject selection settings the engine cannot run with"""
        from extremal_core.src.selection.ranges import SPLIT_STRATEGIES

        for name in ('max_split_strategy', 'pair_split_strategy'):
            strategy = self.get('selection', name)
            if strategy not in SPLIT_STRATEGIES:
                raise ValueError(
                    f"selection.{name}='{strategy}' is not one of {sorted(SPLIT_STRATEGIES)}"
                )

        force_mode = self.get('selection', 'force_mode')
        if force_mode not in FORCE_MODES:
            raise ValueError(f"selection.force_mode='{force_mode}' is not one of {list(FORCE_MODES)}")

        depth = self.get('selection', 'max_recursion_depth')
        if depth is None or depth < 1:
            raise ValueError(f"selection.max_recursion_depth must be >= 1, got {depth}")

    def get(self, *keys: str, default: Any = None) -> Any:
        """Get nested parameter value from a tuple of keys"""
        value = self._params
        for key in keys:
            if isinstance(value, dict):
                value = value.get(key, default)
            else:
                return default
        return value

    def get_all(self) -> Dict[str, Any]:
        """Get all parameters"""
        return copy.deepcopy(self._params)

    def snapshot(self) -> Dict[str, Any]:
        """Create a snapshot of parameters used (for reporting)"""
        return copy.deepcopy(self._params)
