import time
from typing import Callable, List, Optional

from .algorithm import Counters, SortAlgorithm


class QuickSort(SortAlgorithm):
    """
    Quick sort with the Lomuto partition scheme, last element as pivot.

    Every element scanned against the pivot is one comparison. Every
    repositioning during partitioning counts as a swap, and so does the
    final pivot placement, even when it is a self-swap (i == j). That
    quirk is kept so swap counts stay comparable with earlier runs.

    Subranges are processed left first from an explicit work stack, in
    the same order the plain recursive version visits them, while the
    logical recursion depth is tracked. The work stack lives on the heap,
    so depth is unbounded by default; with ``max_depth`` set, deeper
    subranges abandon the sort and the partial metrics are reported
    instead of crashing the run.

    Time Complexity: O(n log n) average, O(n^2) worst (sorted input)
    Space Complexity: O(n) worst for the work stack
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        track_performance: bool = False,
        max_depth: Optional[int] = None,
    ):
        """
        Initialize quick sort.

        Args:
            clock: Monotonic clock returning seconds
            track_performance: Whether to accumulate statistics across calls
            max_depth: Deepest logical recursion allowed, or None for no limit
        """
        super().__init__(clock=clock, track_performance=track_performance)
        self.max_depth = max_depth

    def _run(self, values: List[int], counters: Counters):
        try:
            return self._sort(values, counters), None
        except (RecursionError, MemoryError) as e:
            print(
                f"→ FAILED: {self.get_algorithm_name()} aborted on N={len(values):,}: {e} "
                f"(partial metrics: {counters.comparisons:,} comparisons, "
                f"{counters.swaps:,} swaps)"
            )
            return values, {"error": type(e).__name__, "message": str(e)}

    def _sort(self, values: List[int], counters: Counters) -> List[int]:
        stack = [(0, len(values) - 1, 0)]

        while stack:
            low, high, depth = stack.pop()
            if low >= high:
                continue
            if self.max_depth is not None and depth > self.max_depth:
                raise RecursionError(
                    f"quick sort recursion depth exceeded {self.max_depth}"
                )

            pi = self._partition(values, low, high, counters)

            # Right pushed first so the left subrange is handled first
            stack.append((pi + 1, high, depth + 1))
            stack.append((low, pi - 1, depth + 1))

        return values

    @staticmethod
    def _partition(values: List[int], low: int, high: int, counters: Counters) -> int:
        pivot = values[high]
        i = low - 1

        for j in range(low, high):
            counters.comparisons += 1
            if values[j] < pivot:
                i += 1
                values[i], values[j] = values[j], values[i]
                counters.swaps += 1

        values[i + 1], values[high] = values[high], values[i + 1]
        counters.swaps += 1
        return i + 1

    def get_algorithm_name(self) -> str:
        return "Quick Sort"
