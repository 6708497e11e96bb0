"""Sequence loader for CSV/Parquet input files"""
from pathlib import Path
from typing import Dict, Optional, List
import pandas as pd
from .schema import SequenceSchema


class SequenceLoader:
    """Loads and validates named sequences from {name}.csv or {name}.parquet files"""

    def __init__(self, data_path: str, drop_nan: bool = True):
        self.data_path = Path(data_path)
        if not self.data_path.exists():
            raise FileNotFoundError(f"Data path does not exist: {data_path}")

        # NaN is unordered against everything, so it cannot take part in a selection
        self.drop_nan = drop_nan
        self._sequences: Dict[str, pd.Series] = {}
        self._dropped: Dict[str, int] = {}

    def _resolve(self, name: str) -> Optional[Path]:
        for suffix in ('.csv', '.parquet'):
            path = self.data_path / f"{name}{suffix}"
            if path.exists():
                return path
        return None

    def load_sequence(self, name: str, column: str = SequenceSchema.DEFAULT_COLUMN, sort_by: Optional[str] = None) -> List[str]:
        """
        Load one column of a file as a sequence.
        Returns list of validation errors (empty if valid).
        """
        errors = []

        path = self._resolve(name)
        if path is None:
            errors.append(f"{name}: sequence file not found")
            return errors

        if path.suffix == '.csv':
            df = pd.read_csv(path)
        else:
            df = pd.read_parquet(path)

        if len(df) == 0:
            errors.append(f"{name}: No rows found")
            return errors

        if sort_by is not None:
            if sort_by not in df.columns:
                errors.append(f"{name}: Missing sort column '{sort_by}'")
                return errors
            df = df.sort_values(sort_by).reset_index(drop=True)

        schema_errors = SequenceSchema.validate_column(df, column, name)
        if schema_errors:
            errors.extend(schema_errors)
            return errors

        series = df[column]
        missing = int(series.isna().sum())
        if missing:
            if self.drop_nan:
                series = series.dropna().reset_index(drop=True)
            else:
                errors.append(f"{name}: '{column}' has {missing} missing values")

        self._dropped[name] = missing if self.drop_nan else 0
        self._sequences[name] = series.rename(name)
        return errors

    def get_sequence(self, name: str) -> Optional[pd.Series]:
        """Get a loaded sequence"""
        return self._sequences.get(name)

    def get_dropped_count(self, name: str) -> int:
        """Number of missing values dropped while loading name"""
        return self._dropped.get(name, 0)

    def get_names(self) -> List[str]:
        """Get list of loaded sequence names"""
        return list(self._sequences.keys())
