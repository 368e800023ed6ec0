"""
Aggregation of benchmark results into chart-ready series.

Results are grouped by size and algorithm, averaged over every result that
matches the scenario filter, and returned ordered by size. Nothing is
cached; each call re-derives the series from the result list.
"""

import statistics
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from data.generate import Scenario

from ..algorithms.registry import AlgorithmType
from .benchmark import BenchmarkResult

METRICS = ("time_ms", "comparisons", "swaps")
ALL_SCENARIOS = "all"

# Smallest value shown on a log axis when the mean is not positive
LOG_SCALE_FLOORS = {
    "time_ms": 0.0001,
    "comparisons": 0.1,
    "swaps": 0.1,
}


@dataclass
class SeriesPoint:
    """Per-algorithm mean of one metric at one input size"""

    size: int
    values: Dict[AlgorithmType, float] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        """Chart row: ``{"name": "100", "size": 100, "quick": 6.0, ...}``"""
        row: Dict[str, Any] = {"name": str(self.size), "size": self.size}
        for algorithm, value in self.values.items():
            row[algorithm.value] = value
        return row


def _metric_value(result: BenchmarkResult, metric: str) -> float:
    return getattr(result.metrics, metric)


def _matches(result: BenchmarkResult, scenario_filter: Union[Scenario, str]) -> bool:
    if scenario_filter == ALL_SCENARIOS:
        return True
    return result.scenario is Scenario.parse(scenario_filter)


def aggregate_results(
    results: Sequence[BenchmarkResult],
    metric: str = "time_ms",
    scenario_filter: Union[Scenario, str] = ALL_SCENARIOS,
    log_scale: bool = False,
    precision: Optional[int] = 4,
) -> List[SeriesPoint]:
    """
    Average one metric per (size, algorithm) over the matching results.

    Args:
        results: Benchmark results from one run
        metric: One of ``time_ms``, ``comparisons`` or ``swaps``
        scenario_filter: ``"all"`` or a single scenario
        log_scale: Replace non-positive means with a small positive floor
        precision: Decimal places to round to, or None to keep full precision

    Returns:
        Series points ordered by ascending size
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric: {metric!r} (expected one of {METRICS})")
    if scenario_filter != ALL_SCENARIOS:
        scenario_filter = Scenario.parse(scenario_filter)

    groups: Dict[Tuple[int, AlgorithmType], List[float]] = {}
    for result in results:
        if not _matches(result, scenario_filter):
            continue
        key = (result.size, result.algorithm)
        groups.setdefault(key, []).append(_metric_value(result, metric))

    points: Dict[int, SeriesPoint] = {}
    for (size, algorithm), samples in groups.items():
        value = statistics.mean(samples)

        if precision is not None:
            value = round(value, precision)
        # floor after rounding so tiny positive means cannot round to 0
        if log_scale and value <= 0:
            value = LOG_SCALE_FLOORS[metric]

        point = points.setdefault(size, SeriesPoint(size=size))
        point.values[algorithm] = value

    return [points[size] for size in sorted(points)]


def series_to_rows(series: Sequence[SeriesPoint]) -> List[Dict[str, Any]]:
    """Convert a series into plain dict rows."""
    return [point.as_dict() for point in series]
