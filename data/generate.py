import math
import random
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union


class Scenario(str, Enum):
    """Shape of the input sequence before sorting."""

    RANDOM = "random"
    SORTED = "sorted"
    REVERSE = "reverse"

    @property
    def display_name(self) -> str:
        return self.value.title()

    @classmethod
    def parse(cls, value: Union["Scenario", str]) -> "Scenario":
        """Resolve an enum member, value or display name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.display_name.lower()):
                    return member
        raise ValueError(f"Unknown scenario: {value!r}")


class DatasetGenerator:
    """
    Generates integer datasets of a given size and distribution shape.

    Every dataset is a permutation of 0..N-1. The generator owns its own
    random source so the shuffle is reproducible with a seed and never
    interferes with the global random state.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    @staticmethod
    def validate_size(size) -> int:
        """
        Validate a dataset size and return it as an int.

        Args:
            size: Requested number of elements

        Returns:
            The size as a non-negative int

        Raises:
            ValueError: If size is negative, non-finite, fractional or not a number
        """
        if isinstance(size, bool) or not isinstance(size, (int, float)):
            raise ValueError(f"Size must be a number, got {size!r}")
        if isinstance(size, float):
            if not math.isfinite(size):
                raise ValueError(f"Size must be finite, got {size!r}")
            if not size.is_integer():
                raise ValueError(f"Size must be a whole number, got {size!r}")
            size = int(size)
        if size < 0:
            raise ValueError(f"Size must be non-negative, got {size}")
        return size

    def generate(self, size: int, scenario: Union[Scenario, str]) -> List[int]:
        """
        Generate a dataset.

        Args:
            size: Number of elements N
            scenario: Sorted, Reverse or Random ordering of 0..N-1

        Returns:
            A new list containing a permutation of 0..N-1
        """
        n = self.validate_size(size)
        scenario = Scenario.parse(scenario)

        arr = list(range(n))
        if scenario is Scenario.SORTED:
            return arr
        if scenario is Scenario.REVERSE:
            arr.reverse()
            return arr

        # Fisher-Yates shuffle, index walks down from n-1 to 1
        for i in range(n - 1, 0, -1):
            j = self._rng.randint(0, i)
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    def generate_batch(
        self, sizes: Iterable[int], scenario: Union[Scenario, str]
    ) -> Iterator[List[int]]:
        """Generate one dataset per size."""
        for size in sizes:
            yield self.generate(size, scenario)
