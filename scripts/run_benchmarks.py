"""
Comparison-Count Benchmark Runner
Counts comparisons made by the divide-and-conquer finders against the linear-scan baselines
and writes benchmark.csv / metrics.json.
"""
import argparse
import sys
from pathlib import Path

from extremal_core.config.params_loader import ParamsLoader
from extremal_core.src.reporting import BenchmarkReport, compare_comparison_counts, validate_benchmark


def main():
    parser = argparse.ArgumentParser(description='Benchmark comparison counts of the selection engine')
    parser.add_argument('--output-dir', type=str, default='artifacts/benchmark', help='Output directory')
    parser.add_argument('--sizes', type=int, nargs='+', default=None, help='Sequence lengths (default: benchmark.sizes)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed (default: benchmark.seed)')
    parser.add_argument('--overrides', type=str, default=None, help='JSON overrides file for base params')
    args = parser.parse_args()

    params = ParamsLoader(overrides_path=Path(args.overrides) if args.overrides else None)
    sizes = args.sizes or params.get('benchmark', 'sizes')
    seed = args.seed if args.seed is not None else params.get('benchmark', 'seed')
    shapes = params.get('benchmark', 'shapes')

    print(f"Running benchmark: sizes={sizes} shapes={shapes} seed={seed}", file=sys.stderr, flush=True)
    df = compare_comparison_counts(
        sizes,
        shapes=shapes,
        seed=seed,
        max_split=params.get('selection', 'max_split_strategy'),
        pair_split=params.get('selection', 'pair_split_strategy'),
    )

    report = BenchmarkReport(args.output_dir)
    metrics = report.write(df, params=params.snapshot())
    print(df.to_string(index=False))
    print(f"\nMean tournament ratio: {metrics['mean_tournament_ratio']:.3f}")
    print(f"Mean linear ratio:     {metrics['mean_linear_ratio']:.3f}")

    result = validate_benchmark(args.output_dir, tolerance=params.get('benchmark', 'tournament_ratio_tolerance'))
    for msg in result.warnings:
        print(f"[WARN] {msg}")
    for msg in result.failures:
        print(f"[FAIL] {msg}")
    if not result.passed:
        return 1

    print(f"\n[OK] Benchmark artifacts written to {args.output_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
