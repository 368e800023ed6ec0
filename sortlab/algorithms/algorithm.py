import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class SortMetrics:
    """
    Instrumentation collected while sorting.

    Attributes:
        time_ms: Wall-clock time of the sort body in milliseconds
        comparisons: Number of element-to-element ordering tests
        swaps: Number of "swap units". The unit differs per algorithm:
            element swaps (bubble, selection, quick), shifts (insertion)
            or elements appended to a merged run (merge). Compare this
            counter across algorithms only as a rough direction.
    """

    time_ms: float
    comparisons: int
    swaps: int

    def as_dict(self) -> Dict[str, float]:
        return {
            "time_ms": self.time_ms,
            "comparisons": self.comparisons,
            "swaps": self.swaps,
        }


@dataclass
class SortResult:
    """
    Result of a sort operation.

    Attributes:
        values: The sorted output (a new list, the input is left untouched)
        metrics: Counters and elapsed time for this sort
        completed: False when the sort was aborted and metrics are partial
        additional_info: Any additional algorithm-specific information
    """

    values: List[int]
    metrics: SortMetrics
    completed: bool = True
    additional_info: Optional[dict] = None


@dataclass
class Counters:
    """Mutable counters shared by a sort body and its helpers."""

    comparisons: int = 0
    swaps: int = 0


class SortAlgorithm(ABC):
    """
    Abstract base class for instrumented sorting algorithms.

    Subclasses implement ``_sort`` on a private working copy and bump the
    shared counters; ``sort`` handles copying, timing and statistics.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        track_performance: bool = False,
    ):
        """
        Initialize the algorithm.

        Args:
            clock: Monotonic clock returning seconds, used around the sort body
            track_performance: Whether to accumulate statistics across calls
        """
        self.clock = clock
        self.track_performance = track_performance
        self.total_comparisons = 0
        self.total_swaps = 0
        self.total_sorts = 0
        self.total_time_ms = 0.0

    def sort(self, data: Sequence[int]) -> SortResult:
        """
        Sort data in ascending order without mutating it.

        Args:
            data: The input sequence

        Returns:
            A SortResult with the sorted copy and its metrics
        """
        values = list(data)
        counters = Counters()

        start_time = self.clock()
        output, info = self._run(values, counters)
        end_time = self.clock()

        metrics = SortMetrics(
            time_ms=(end_time - start_time) * 1000,
            comparisons=counters.comparisons,
            swaps=counters.swaps,
        )

        if self.track_performance:
            self._update_statistics(metrics)

        return SortResult(
            values=output,
            metrics=metrics,
            completed=info is None,
            additional_info=info,
        )

    def _run(self, values: List[int], counters: Counters):
        """Run the sort body. Returns (output, info) where info is set on abort."""
        return self._sort(values, counters), None

    @abstractmethod
    def _sort(self, values: List[int], counters: Counters) -> List[int]:
        """
        Sort values, updating counters.

        Args:
            values: A working copy the algorithm may mutate
            counters: Comparison and swap counters to update

        Returns:
            The sorted list (may be ``values`` itself)
        """
        pass

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        pass

    def _update_statistics(self, metrics: SortMetrics) -> None:
        self.total_comparisons += metrics.comparisons
        self.total_swaps += metrics.swaps
        self.total_sorts += 1
        self.total_time_ms += metrics.time_ms

    def get_performance_stats(self) -> dict:
        """
        Get performance statistics for all sorts performed.

        Returns:
            Dictionary containing performance metrics
        """
        if self.total_sorts == 0:
            return {
                "total_sorts": 0,
                "total_comparisons": 0,
                "total_swaps": 0,
                "total_time_ms": 0.0,
                "avg_comparisons": 0.0,
                "avg_swaps": 0.0,
                "avg_time_ms": 0.0,
            }

        return {
            "total_sorts": self.total_sorts,
            "total_comparisons": self.total_comparisons,
            "total_swaps": self.total_swaps,
            "total_time_ms": self.total_time_ms,
            "avg_comparisons": self.total_comparisons / self.total_sorts,
            "avg_swaps": self.total_swaps / self.total_sorts,
            "avg_time_ms": self.total_time_ms / self.total_sorts,
        }

    def reset_statistics(self) -> None:
        """Reset all performance statistics."""
        self.total_comparisons = 0
        self.total_swaps = 0
        self.total_sorts = 0
        self.total_time_ms = 0.0

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"

