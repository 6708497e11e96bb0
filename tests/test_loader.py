"""Tests for SequenceLoader and SequenceSchema"""
import pytest
import numpy as np
import pandas as pd

from extremal_core.src.data.loader import SequenceLoader
from extremal_core.src.selection.engine import SelectionEngine


class TestSequenceLoader:

    @pytest.fixture
    def data_dir(self, tmp_path):
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        pd.DataFrame({'value': [1, 3, 6, 2, 1, 9, 2, 7, 3]}).to_csv(data_dir / "worked.csv", index=False)
        pd.DataFrame({'value': [-5.0, np.nan, -1.0, -9.0, -2.0]}).to_csv(data_dir / "gaps.csv", index=False)
        pd.DataFrame({
            'ts': pd.to_datetime(['2021-01-03', '2021-01-01', '2021-01-02'], utc=True),
            'price': [101.5, 99.0, 100.25],
        }).to_parquet(data_dir / "prices.parquet")
        pd.DataFrame({'flag': [True, False, True]}).to_csv(data_dir / "flags.csv", index=False)
        return data_dir

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SequenceLoader(str(tmp_path / "nope"))

    def test_load_csv_feeds_engine(self, data_dir):
        loader = SequenceLoader(str(data_dir))
        assert loader.load_sequence('worked') == []
        series = loader.get_sequence('worked')
        assert series.name == 'worked'
        engine = SelectionEngine()
        assert engine.find_max(series) == 9
        assert engine.find_top_two(series) == (9, 7)

    def test_nan_dropped(self, data_dir):
        loader = SequenceLoader(str(data_dir))
        assert loader.load_sequence('gaps') == []
        assert loader.get_dropped_count('gaps') == 1
        assert len(loader.get_sequence('gaps')) == 4
        assert SelectionEngine().find_top_two(loader.get_sequence('gaps')) == (-1.0, -2.0)

    def test_nan_reported_when_not_dropping(self, data_dir):
        loader = SequenceLoader(str(data_dir), drop_nan=False)
        errors = loader.load_sequence('gaps')
        assert any('missing values' in e for e in errors)

    def test_parquet_with_sort(self, data_dir):
        loader = SequenceLoader(str(data_dir))
        assert loader.load_sequence('prices', column='price', sort_by='ts') == []
        assert loader.get_sequence('prices').tolist() == [99.0, 100.25, 101.5]

    def test_missing_file_and_column(self, data_dir):
        loader = SequenceLoader(str(data_dir))
        assert loader.load_sequence('absent') == ['absent: sequence file not found']
        errors = loader.load_sequence('worked', column='close')
        assert errors == ["worked: Missing required column 'close'"]
        assert loader.get_names() == []

    def test_bool_column_rejected(self, data_dir):
        loader = SequenceLoader(str(data_dir))
        errors = loader.load_sequence('flags', column='flag')
        assert errors
        assert loader.get_sequence('flags') is None
