"""
Benchmarking module for sorting algorithms.

This module runs instrumented sorts over generated datasets and shapes the
results for tables, charts and other downstream consumers.
"""

from .aggregate import (
    ALL_SCENARIOS,
    LOG_SCALE_FLOORS,
    METRICS,
    SeriesPoint,
    aggregate_results,
    series_to_rows,
)
from .benchmark import (
    AVAILABLE_SIZES,
    DANGER_THRESHOLD,
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkRunner,
    BenchmarkTask,
    EmptySelectionError,
    build_tasks,
    is_dangerous_combination,
    results_to_records,
    run_experiments,
)

__all__ = [
    "ALL_SCENARIOS",
    "AVAILABLE_SIZES",
    "DANGER_THRESHOLD",
    "LOG_SCALE_FLOORS",
    "METRICS",
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRunner",
    "BenchmarkTask",
    "EmptySelectionError",
    "SeriesPoint",
    "aggregate_results",
    "build_tasks",
    "is_dangerous_combination",
    "results_to_records",
    "run_experiments",
    "series_to_rows",
]
