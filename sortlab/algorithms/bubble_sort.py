from typing import List

from .algorithm import Counters, SortAlgorithm


class BubbleSort(SortAlgorithm):
    """
    Bubble sort with early exit.

    One comparison per adjacent pair examined, one swap per inversion
    corrected. Stops after the first pass without swaps, so sorted input
    costs N-1 comparisons and 0 swaps.

    Time Complexity: O(n^2) worst/average, O(n) best
    Space Complexity: O(1) extra
    """

    def _sort(self, values: List[int], counters: Counters) -> List[int]:
        n = len(values)

        for i in range(n):
            swapped = False
            for j in range(n - i - 1):
                counters.comparisons += 1
                if values[j] > values[j + 1]:
                    values[j], values[j + 1] = values[j + 1], values[j]
                    counters.swaps += 1
                    swapped = True
            if not swapped:
                break

        return values

    def get_algorithm_name(self) -> str:
        return "Bubble Sort"
