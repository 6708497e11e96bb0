"""Schema validation for sequence input files"""
from typing import List
import pandas as pd


class SequenceSchema:
    """Validates that a loaded column can be fed to the selection engine"""

    DEFAULT_COLUMN = 'value'

    @staticmethod
    def validate_column(df: pd.DataFrame, column: str, name: str) -> List[str]:
        """Validate column presence and orderability. Returns list of errors."""
        errors = []
        if column not in df.columns:
            errors.append(f"{name}: Missing required column '{column}'")
            return errors

        series = df[column]
        orderable = (
            pd.api.types.is_numeric_dtype(series)
            or pd.api.types.is_datetime64_any_dtype(series)
            or pd.api.types.is_string_dtype(series)
        )
        if pd.api.types.is_bool_dtype(series) or not orderable:
            errors.append(f"{name}: '{column}' must be numeric, datetime or string (got {series.dtype})")

        if pd.api.types.is_object_dtype(series):
            kinds = {type(v).__name__ for v in series.dropna()}
            if len(kinds) > 1:
                errors.append(f"{name}: '{column}' mixes value types {sorted(kinds)}")

        return errors
