from enum import Enum
from typing import Dict, Sequence, Type, Union

from .algorithm import SortAlgorithm, SortResult
from .bubble_sort import BubbleSort
from .insertion_sort import InsertionSort
from .merge_sort import MergeSort
from .quick_sort import QuickSort
from .selection_sort import SelectionSort


class AlgorithmType(str, Enum):
    """Identifiers of the benchmarked sorting algorithms."""

    BUBBLE = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"
    QUICK = "quick"
    MERGE = "merge"

    @property
    def display_name(self) -> str:
        return f"{self.value.title()} Sort"

    @property
    def quadratic(self) -> bool:
        """True for the O(n^2) algorithms guarded by the danger threshold."""
        return self in QUADRATIC_ALGORITHMS

    @classmethod
    def parse(cls, value: Union["AlgorithmType", str]) -> "AlgorithmType":
        """Resolve an enum member, value or display name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", " ")
            for member in cls:
                if key in (member.value, member.display_name.lower()):
                    return member
        raise ValueError(f"Unknown algorithm: {value!r}")


QUADRATIC_ALGORITHMS = frozenset(
    {AlgorithmType.BUBBLE, AlgorithmType.SELECTION, AlgorithmType.INSERTION}
)

ALGORITHMS: Dict[AlgorithmType, Type[SortAlgorithm]] = {
    AlgorithmType.BUBBLE: BubbleSort,
    AlgorithmType.SELECTION: SelectionSort,
    AlgorithmType.INSERTION: InsertionSort,
    AlgorithmType.QUICK: QuickSort,
    AlgorithmType.MERGE: MergeSort,
}


def get_algorithm(algorithm: Union[AlgorithmType, str], **kwargs) -> SortAlgorithm:
    """
    Build a sorting algorithm instance.

    Args:
        algorithm: Algorithm identifier or display name
        **kwargs: Constructor arguments (clock, track_performance, ...);
            ``max_depth`` is only passed to quick sort

    Returns:
        A ready-to-use SortAlgorithm
    """
    algo_type = AlgorithmType.parse(algorithm)
    max_depth = kwargs.pop("max_depth", None)
    if algo_type is AlgorithmType.QUICK:
        return QuickSort(max_depth=max_depth, **kwargs)
    return ALGORITHMS[algo_type](**kwargs)


def run_algorithm(algorithm: Union[AlgorithmType, str], data: Sequence[int]) -> SortResult:
    """Sort data with the named algorithm."""
    return get_algorithm(algorithm).sort(data)
