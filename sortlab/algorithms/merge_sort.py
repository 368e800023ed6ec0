from typing import List

from .algorithm import Counters, SortAlgorithm


class MergeSort(SortAlgorithm):
    """
    Top-down recursive merge sort.

    One comparison per head-to-head test during a merge. The swap counter
    counts every element appended to a merged run, including the tails
    copied after one side runs out, so it totals elements merged rather
    than relocations.

    Time Complexity: O(n log n)
    Space Complexity: O(n)
    """

    def _sort(self, values: List[int], counters: Counters) -> List[int]:
        return self._merge_sort(values, counters)

    def _merge_sort(self, values: List[int], counters: Counters) -> List[int]:
        if len(values) <= 1:
            return values

        middle = len(values) // 2
        left = self._merge_sort(values[:middle], counters)
        right = self._merge_sort(values[middle:], counters)
        return self._merge(left, right, counters)

    @staticmethod
    def _merge(left: List[int], right: List[int], counters: Counters) -> List[int]:
        merged: List[int] = []
        left_idx = right_idx = 0

        while left_idx < len(left) and right_idx < len(right):
            counters.comparisons += 1
            # ties go to the right run
            if left[left_idx] < right[right_idx]:
                merged.append(left[left_idx])
                left_idx += 1
            else:
                merged.append(right[right_idx])
                right_idx += 1
            counters.swaps += 1

        while left_idx < len(left):
            merged.append(left[left_idx])
            left_idx += 1
            counters.swaps += 1
        while right_idx < len(right):
            merged.append(right[right_idx])
            right_idx += 1
            counters.swaps += 1

        return merged

    def get_algorithm_name(self) -> str:
        return "Merge Sort"
