import time
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from data.generate import DatasetGenerator, Scenario

from ..algorithms.algorithm import SortMetrics
from ..algorithms.registry import AlgorithmType, get_algorithm

AVAILABLE_SIZES = [100, 1_000, 10_000, 100_000]
DANGER_THRESHOLD = 20_000


class EmptySelectionError(ValueError):
    """Raised when no benchmark task survives the safety filter."""


def _unique(values: Sequence, parse: Callable) -> List:
    """Normalise values with parse and drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(parse(v) for v in values))


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run"""

    algorithms: Sequence[Union[AlgorithmType, str]]
    sizes: Sequence[int]
    scenarios: Sequence[Union[Scenario, str]]
    danger_threshold: int = DANGER_THRESHOLD
    pause_ms: float = 0.0
    seed: Optional[int] = None
    quick_sort_max_depth: Optional[int] = None

    def __post_init__(self):
        self.algorithms = _unique(self.algorithms, AlgorithmType.parse)
        self.scenarios = _unique(self.scenarios, Scenario.parse)
        self.sizes = _unique(self.sizes, DatasetGenerator.validate_size)
        if self.pause_ms < 0:
            raise ValueError("pause_ms must be non-negative")


@dataclass(frozen=True)
class BenchmarkTask:
    """One algorithm to run on one generated dataset"""

    algorithm: AlgorithmType
    size: int
    scenario: Scenario


@dataclass(frozen=True)
class BenchmarkResult:
    """Result of a single benchmark task"""

    id: str
    algorithm: AlgorithmType
    size: int
    scenario: Scenario
    metrics: SortMetrics
    completed: bool = True

    def to_record(self) -> Dict[str, Any]:
        """Flat, JSON-friendly view of the result."""
        return {
            "id": self.id,
            "algorithm": self.algorithm.value,
            "size": self.size,
            "scenario": self.scenario.value,
            "time_ms": round(self.metrics.time_ms, 4),
            "comparisons": self.metrics.comparisons,
            "swaps": self.metrics.swaps,
            "completed": self.completed,
        }


def is_dangerous_combination(
    algorithm: Union[AlgorithmType, str],
    size: int,
    threshold: int = DANGER_THRESHOLD,
) -> bool:
    """Check whether a quadratic algorithm would run on a too-large input"""
    return AlgorithmType.parse(algorithm).quadratic and size >= threshold


def build_tasks(
    config: BenchmarkConfig,
) -> Tuple[List[BenchmarkTask], List[BenchmarkTask]]:
    """
    Expand a selection into tasks, ordered size, then scenario, then algorithm.

    Returns:
        (tasks to run, tasks skipped by the safety filter)
    """
    tasks: List[BenchmarkTask] = []
    skipped: List[BenchmarkTask] = []

    for size in config.sizes:
        for scenario in config.scenarios:
            for algorithm in config.algorithms:
                task = BenchmarkTask(algorithm=algorithm, size=size, scenario=scenario)
                if is_dangerous_combination(algorithm, size, config.danger_threshold):
                    skipped.append(task)
                else:
                    tasks.append(task)

    return tasks, skipped


class BenchmarkRunner:
    """Runs benchmark tasks one after another and collects their results"""

    def __init__(
        self,
        config: BenchmarkConfig,
        progress_callback: Optional[Callable[[BenchmarkTask, int, int], None]] = None,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.perf_counter,
        skipped_callback: Optional[Callable[[List[BenchmarkTask]], None]] = None,
    ):
        self.config = config
        self.progress_callback = progress_callback
        self.skipped_callback = skipped_callback
        self.id_factory = id_factory
        self.sleep = sleep
        self.clock = clock
        self.generator = DatasetGenerator(seed=config.seed)
        self.results: List[BenchmarkResult] = []
        self.skipped: List[BenchmarkTask] = []
        self.current_task: Optional[BenchmarkTask] = None
        self.total_steps: int = 0
        self.current_step: int = 0

    def run(self) -> List[BenchmarkResult]:
        """
        Run every task that passes the safety filter.

        Results are published on ``self.results`` only once the whole run
        has finished; a previous run's results are replaced, not merged.

        Raises:
            EmptySelectionError: If no task is left to run
        """
        tasks, skipped = build_tasks(self.config)
        self.skipped = skipped
        if skipped and self.skipped_callback is not None:
            self.skipped_callback(list(skipped))

        if not tasks:
            raise EmptySelectionError(
                "No benchmark tasks to run; check the selected algorithms, "
                "sizes and scenarios"
            )

        self.total_steps = len(tasks)
        self.current_step = 0
        new_results: List[BenchmarkResult] = []

        if self.progress_callback is None:
            print(f"\nStarting benchmark: {self.total_steps} tasks")
            for task in skipped:
                print(
                    f"Skipping {task.algorithm.display_name} for N={task.size:,} "
                    f"(>= {self.config.danger_threshold:,})"
                )
            print(f"Started at {datetime.now().strftime('%H:%M:%S')}")
            print("=" * 80)

        for task in tasks:
            if self.current_step > 0 and self.config.pause_ms > 0:
                self.sleep(self.config.pause_ms / 1000)

            self.current_step += 1
            self.current_task = task
            self._report_progress(task)

            new_results.append(self.run_task(task))

        self.current_task = None
        self.results = new_results

        if self.progress_callback is None:
            print("=" * 80)
            print(
                f"Completed {len(new_results)} experiments at "
                f"{datetime.now().strftime('%H:%M:%S')}"
            )

        return self.results

    def run_task(self, task: BenchmarkTask) -> BenchmarkResult:
        """Generate the dataset for a task and sort it once"""
        data = self.generator.generate(task.size, task.scenario)
        algorithm = get_algorithm(
            task.algorithm,
            clock=self.clock,
            max_depth=self.config.quick_sort_max_depth,
        )
        outcome = algorithm.sort(data)

        return BenchmarkResult(
            id=self.id_factory(),
            algorithm=task.algorithm,
            size=task.size,
            scenario=task.scenario,
            metrics=outcome.metrics,
            completed=outcome.completed,
        )

    def _report_progress(self, task: BenchmarkTask) -> None:
        if self.progress_callback is not None:
            self.progress_callback(task, self.current_step, self.total_steps)
            return

        progress = (self.current_step / self.total_steps) * 100
        print(
            f"[{self.current_step:2d}/{self.total_steps}] "
            f"Running {task.algorithm.display_name}, N={task.size:,} "
            f"({task.scenario.display_name}) ({progress:5.1f}%)"
        )


def run_experiments(
    algorithms: Sequence[Union[AlgorithmType, str]],
    sizes: Sequence[int],
    scenarios: Sequence[Union[Scenario, str]],
    **options: Any,
) -> List[BenchmarkResult]:
    """
    Run a benchmark selection and return its results.

    Keyword options are split between BenchmarkConfig (danger_threshold,
    pause_ms, seed, quick_sort_max_depth) and BenchmarkRunner
    (progress_callback, skipped_callback, id_factory, sleep, clock).
    """
    runner_keys = (
        "progress_callback",
        "skipped_callback",
        "id_factory",
        "sleep",
        "clock",
    )
    runner_options = {k: options.pop(k) for k in runner_keys if k in options}

    config = BenchmarkConfig(
        algorithms=algorithms, sizes=sizes, scenarios=scenarios, **options
    )
    return BenchmarkRunner(config, **runner_options).run()


def results_to_records(results: Sequence[BenchmarkResult]) -> List[Dict[str, Any]]:
    """Serialize results for consumers outside the engine."""
    return [result.to_record() for result in results]

