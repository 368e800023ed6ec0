"""
Pytest configuration and fixtures for sortlab tests.

This file contains shared fixtures and configuration for all test modules.
"""

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def generator():
    """A seeded dataset generator."""
    from data.generate import DatasetGenerator

    return DatasetGenerator(seed=42)


@pytest.fixture
def fake_clock():
    """A clock that advances by 2ms on every call."""

    class FakeClock:
        def __init__(self):
            self.now = 0.0
            self.calls = 0

        def __call__(self):
            self.calls += 1
            self.now += 0.002
            return self.now

    return FakeClock()


@pytest.fixture
def counting_ids():
    """Deterministic id factory: id-1, id-2, ..."""

    class Ids:
        def __init__(self):
            self.count = 0

        def __call__(self):
            self.count += 1
            return f"id-{self.count}"

    return Ids()


@pytest.fixture
def make_result():
    """Build a BenchmarkResult with the given metrics."""
    from data.generate import Scenario
    from sortlab.algorithms.algorithm import SortMetrics
    from sortlab.algorithms.registry import AlgorithmType
    from sortlab.benchmark import BenchmarkResult

    counter = {"n": 0}

    def _make(algorithm, size, scenario, time_ms=0.0, comparisons=0, swaps=0):
        counter["n"] += 1
        return BenchmarkResult(
            id=f"r{counter['n']}",
            algorithm=AlgorithmType.parse(algorithm),
            size=size,
            scenario=Scenario.parse(scenario),
            metrics=SortMetrics(time_ms=time_ms, comparisons=comparisons, swaps=swaps),
        )

    return _make


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "integration" in item.nodeid or "test_integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        if any(keyword in item.nodeid for keyword in ["large", "stress"]):
            item.add_marker(pytest.mark.slow)

        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Skip slow tests unless --run-slow is passed."""
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
