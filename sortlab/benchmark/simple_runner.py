"""
Simple benchmark runner for sorting algorithms.

Usage examples:
    python -m sortlab.benchmark.simple_runner
    python -m sortlab.benchmark.simple_runner --algorithms bubble,quick --sizes 100,1000 --scenarios random,sorted
"""

import argparse
import json
import sys

from sortlab.benchmark import (
    ALL_SCENARIOS,
    METRICS,
    BenchmarkConfig,
    BenchmarkRunner,
    aggregate_results,
    results_to_records,
)
from sortlab.benchmark.report import plot_series, print_results, print_series


def _split(value: str):
    return [item.strip() for item in value.split(",") if item.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark sorting algorithms")
    parser.add_argument(
        "--algorithms",
        default="bubble,quick,merge",
        help="Comma-separated list of algorithms (bubble, selection, insertion, quick, merge)",
    )
    parser.add_argument(
        "--sizes", default="100,1000", help="Comma-separated list of dataset sizes"
    )
    parser.add_argument(
        "--scenarios",
        default="random",
        help="Comma-separated list of scenarios (random, sorted, reverse)",
    )
    parser.add_argument(
        "--metric", default="time_ms", choices=METRICS, help="Metric to aggregate"
    )
    parser.add_argument(
        "--scenario-filter",
        default=ALL_SCENARIOS,
        help="Scenario to aggregate over, or 'all'",
    )
    parser.add_argument(
        "--log-scale", action="store_true", help="Make aggregated values log-safe"
    )
    parser.add_argument(
        "--danger-threshold",
        type=int,
        default=20_000,
        help="Skip quadratic algorithms at or above this size",
    )
    parser.add_argument(
        "--pause-ms", type=float, default=0.0, help="Pause between tasks (ms)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON records"
    )
    parser.add_argument("--plot", default=None, help="Save a PNG chart to this path")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = BenchmarkConfig(
            algorithms=_split(args.algorithms),
            sizes=[int(size) for size in _split(args.sizes)],
            scenarios=_split(args.scenarios),
            danger_threshold=args.danger_threshold,
            pause_ms=args.pause_ms,
            seed=args.seed,
        )
        runner = BenchmarkRunner(config)
        results = runner.run()

        if args.json:
            print(json.dumps(results_to_records(results), indent=2))
        else:
            print_results(results)

        series = aggregate_results(
            results,
            metric=args.metric,
            scenario_filter=args.scenario_filter,
            log_scale=args.log_scale,
        )
        print_series(series, args.metric)

        if args.plot:
            path = plot_series(series, args.metric, args.plot, log_scale=args.log_scale)
            print(f"\nPlot saved as {path}")

    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
