from typing import List

from .algorithm import Counters, SortAlgorithm


class InsertionSort(SortAlgorithm):
    """
    Insertion sort.

    The swap counter counts shifts: each time a strictly greater
    predecessor moves one slot right. The comparison that stops the scan
    is counted, running off the front is not.
    """

    def _sort(self, values: List[int], counters: Counters) -> List[int]:
        for i in range(1, len(values)):
            key = values[i]
            j = i - 1

            while j >= 0:
                counters.comparisons += 1
                if values[j] > key:
                    values[j + 1] = values[j]
                    counters.swaps += 1  # shift
                    j -= 1
                else:
                    break
            values[j + 1] = key

        return values

    def get_algorithm_name(self) -> str:
        return "Insertion Sort"
