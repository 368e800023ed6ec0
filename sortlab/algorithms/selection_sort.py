from typing import List

from .algorithm import Counters, SortAlgorithm


class SelectionSort(SortAlgorithm):
    """Selection sort; swaps only when the minimum is not already in place."""

    def _sort(self, values: List[int], counters: Counters) -> List[int]:
        n = len(values)

        for i in range(n):
            min_idx = i
            for j in range(i + 1, n):
                counters.comparisons += 1
                if values[j] < values[min_idx]:
                    min_idx = j
            if min_idx != i:
                values[i], values[min_idx] = values[min_idx], values[i]
                counters.swaps += 1

        return values

    def get_algorithm_name(self) -> str:
        return "Selection Sort"
