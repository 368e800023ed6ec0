from pathlib import Path
from typing import Optional, Sequence, Union

import matplotlib.pyplot as plt

from ..algorithms.registry import AlgorithmType
from .aggregate import SeriesPoint
from .benchmark import BenchmarkResult

METRIC_LABELS = {
    "time_ms": "Time (ms)",
    "comparisons": "Comparisons",
    "swaps": "Swaps",
}

COLORS = {
    AlgorithmType.BUBBLE: "#ef4444",
    AlgorithmType.SELECTION: "#f97316",
    AlgorithmType.INSERTION: "#eab308",
    AlgorithmType.QUICK: "#22c55e",
    AlgorithmType.MERGE: "#3b82f6",
}


def print_results(results: Sequence[BenchmarkResult]) -> None:
    """Print one row per benchmark result"""
    print("\nBenchmark Results")
    print("=" * 80)

    header = (
        f"{'Algorithm':<16} {'N':<10} {'Scenario':<10} "
        f"{'Time (ms)':<12} {'Comparisons':<14} {'Swaps':<14}"
    )
    print(header)
    print("-" * len(header))

    for result in results:
        row = (
            f"{result.algorithm.display_name:<16} {result.size:<10} "
            f"{result.scenario.display_name:<10} {result.metrics.time_ms:<12.4f} "
            f"{result.metrics.comparisons:<14} {result.metrics.swaps:<14}"
        )
        if not result.completed:
            row += " (partial)"
        print(row)


def print_series(series: Sequence[SeriesPoint], metric: str) -> None:
    """Print an aggregated series, one column per algorithm"""
    algorithms = list(dict.fromkeys(a for point in series for a in point.values))

    print(f"\n{METRIC_LABELS.get(metric, metric)} by size")
    print("=" * 80)

    header = f"{'N':<10}" + "".join(f" {a.display_name:<16}" for a in algorithms)
    print(header)
    print("-" * len(header))

    for point in series:
        row = f"{point.size:<10}"
        for algorithm in algorithms:
            value = point.values.get(algorithm)
            row += f" {'N/A':<16}" if value is None else f" {value:<16}"
        print(row)


def plot_series(
    series: Sequence[SeriesPoint],
    metric: str,
    output_path: Union[str, Path],
    log_scale: bool = False,
    title: Optional[str] = None,
) -> Path:
    """Save a line chart of an aggregated series as PNG"""
    plt.figure(figsize=(12, 8))

    algorithms = list(dict.fromkeys(a for point in series for a in point.values))
    for algorithm in algorithms:
        points = [p for p in series if algorithm in p.values]
        plt.plot(
            [p.size for p in points],
            [p.values[algorithm] for p in points],
            color=COLORS.get(algorithm, "blue"),
            linestyle="-",
            marker="o",
            label=algorithm.display_name,
        )

    if series and all(p.size > 0 for p in series):
        plt.xscale("log")
    if log_scale:
        plt.yscale("log")
    plt.xlabel("N")
    plt.ylabel(METRIC_LABELS.get(metric, metric))
    plt.title(title or f"Sorting benchmark - {METRIC_LABELS.get(metric, metric)}")
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()

    output_path = Path(output_path)
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close()
    return output_path
