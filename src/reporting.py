"""Report generation: comparison-count benchmark CSV/JSON outputs"""
import pandas as pd
import json
from pathlib import Path
from typing import List, Dict, Optional, Union, Any, Sequence
from dataclasses import dataclass
import numpy as np
from datetime import datetime, UTC

from extremal_core.src.selection.baselines import linear_max, linear_top_two
from extremal_core.src.selection.max_finder import MaxFinder
from extremal_core.src.selection.stats import SelectionStats
from extremal_core.src.selection.top_two import TopTwoFinder

# Largest comparisons-per-element a tournament top-two run may use
TOURNAMENT_RATIO_BOUND = 1.5

BENCHMARK_COLUMNS = [
    'shape', 'n', 'dc_max', 'linear_max', 'tournament_top_two', 'linear_top_two',
    'tournament_ratio', 'linear_ratio', 'max_depth', 'max_split', 'pair_split',
]


@dataclass
class ValidationResult:
    """Result of benchmark validation"""
    passed: bool                     # True only if no hard failures
    failures: List[str]              # Hard violations
    warnings: List[str]              # WARN-level issues
    info: List[str]                  # Informational notes
    metrics: Dict[str, Any]          # Parsed metrics.json
    artifacts_dir: Path              # Where artifacts were loaded from


def generate_sequence(shape: str, n: int, rng: np.random.Generator) -> np.ndarray:
    """Benchmark input of the given shape"""
    if shape == 'random':
        return rng.integers(-1_000_000, 1_000_000, size=n)
    if shape == 'ascending':
        return np.arange(n)
    if shape == 'descending':
        # Worst case for the running two-slot scan: every element needs 2 comparisons
        return np.arange(n, 0, -1)
    raise ValueError(f"Unknown shape: {shape}")


def compare_comparison_counts(
    sizes: Sequence[int],
    shapes: Sequence[str] = ('random', 'descending'),
    seed: int = 42,
    max_split: str = 'midpoint',
    pair_split: str = 'even'
) -> pd.DataFrame:
    """
    Count comparisons made by the divide-and-conquer finders and the linear
    baselines on the same inputs. One row per (shape, n).

    max_split and pair_split name the split strategies the finders run with,
    normally selection.max_split_strategy and selection.pair_split_strategy.
    """
    rng = np.random.default_rng(seed)
    max_finder = MaxFinder(split=max_split)
    top_two_finder = TopTwoFinder(split=pair_split)

    rows = []
    for shape in shapes:
        for n in sizes:
            if n < 2:
                raise ValueError(f"Benchmark sizes must be >= 2, got {n}")
            values = generate_sequence(shape, n, rng)

            dc_max = SelectionStats()
            max_finder.find(values, stats=dc_max)
            lin_max = SelectionStats()
            linear_max(values, stats=lin_max)
            tournament = SelectionStats()
            top_two_finder.find(values, stats=tournament)
            lin_top = SelectionStats()
            linear_top_two(values, stats=lin_top)

            rows.append({
                'shape': shape,
                'n': n,
                'dc_max': dc_max.comparisons,
                'linear_max': lin_max.comparisons,
                'tournament_top_two': tournament.comparisons,
                'linear_top_two': lin_top.comparisons,
                'tournament_ratio': tournament.comparisons / n,
                'linear_ratio': lin_top.comparisons / n,
                'max_depth': tournament.max_depth,
                'max_split': max_split,
                'pair_split': pair_split,
            })

    return pd.DataFrame(rows, columns=BENCHMARK_COLUMNS)


class BenchmarkReport:
    """Writes benchmark.csv and metrics.json to an artifacts directory"""

    def __init__(self, output_dir: Union[str, Path] = "reports"):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def summarize(self, df: pd.DataFrame) -> Dict[str, Any]:
        """Headline metrics for a benchmark table"""
        if df.empty:
            return {'rows': 0}

        worst = df[df['shape'] == 'descending']
        beats_linear = bool((worst['tournament_top_two'] < worst['linear_top_two']).all()) if not worst.empty else None

        return {
            'rows': int(len(df)),
            'sizes': sorted(int(n) for n in df['n'].unique()),
            'shapes': sorted(df['shape'].unique().tolist()),
            'mean_tournament_ratio': float(df['tournament_ratio'].mean()),
            'max_tournament_ratio': float(df['tournament_ratio'].max()),
            'mean_linear_ratio': float(df['linear_ratio'].mean()),
            'dc_max_is_n_minus_1': bool((df['dc_max'] == df['n'] - 1).all()),
            'tournament_beats_linear': beats_linear,
        }

    def write(self, df: pd.DataFrame, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Write artifacts and return the metrics dict"""
        df.to_csv(self.output_dir / 'benchmark.csv', index=False)

        metrics = {
            'generated_at': datetime.now(UTC).isoformat(),
            **self.summarize(df),
        }
        with open(self.output_dir / 'metrics.json', 'w') as f:
            json.dump(metrics, f, indent=2)

        if params is not None:
            with open(self.output_dir / 'params_snapshot.json', 'w') as f:
                json.dump(params, f, indent=2)

        return metrics


def validate_benchmark(
    artifacts_dir: Union[str, Path],
    *,
    tolerance: float = 0.0,
) -> ValidationResult:
    """
    Validate benchmark artifacts against the comparison-count bounds.

    Hard failures: missing artifacts, a max run that did not use exactly
    n - 1 comparisons, or a tournament run above 1.5 comparisons per element
    (plus tolerance). The tournament losing to the linear scan on descending
    input is a warning.
    """
    artifacts_dir = Path(artifacts_dir)
    failures: List[str] = []
    warnings: List[str] = []
    info: List[str] = []

    csv_path = artifacts_dir / 'benchmark.csv'
    metrics_path = artifacts_dir / 'metrics.json'
    for path in (csv_path, metrics_path):
        if not path.exists():
            failures.append(f"Missing required artifact: {path.name}")
    if failures:
        return ValidationResult(False, failures, warnings, info, {}, artifacts_dir)

    try:
        df = pd.read_csv(csv_path)
        with open(metrics_path, 'r') as f:
            metrics = json.load(f)
    except (OSError, ValueError) as e:
        failures.append(f"Failed to load artifacts: {e}")
        return ValidationResult(False, failures, warnings, info, {}, artifacts_dir)

    missing_cols = set(BENCHMARK_COLUMNS) - set(df.columns)
    if missing_cols:
        failures.append(f"benchmark.csv missing required columns: {sorted(missing_cols)}")
        return ValidationResult(False, failures, warnings, info, metrics, artifacts_dir)

    for _, row in df.iterrows():
        n = int(row['n'])
        if int(row['dc_max']) != n - 1:
            failures.append(f"{row['shape']} n={n}: max used {int(row['dc_max'])} comparisons, expected {n - 1}")
        if float(row['tournament_ratio']) > TOURNAMENT_RATIO_BOUND + tolerance:
            failures.append(
                f"{row['shape']} n={n}: tournament ratio {row['tournament_ratio']:.3f} "
                f"exceeds {TOURNAMENT_RATIO_BOUND + tolerance:.3f}"
            )

    if metrics.get('tournament_beats_linear') is False:
        warnings.append("Tournament top-two did not beat the linear scan on descending input")
    elif metrics.get('tournament_beats_linear') is None:
        info.append("No descending rows; worst-case comparison not checked")

    info.append(f"Validated {len(df)} benchmark rows")
    return ValidationResult(not failures, failures, warnings, info, metrics, artifacts_dir)
