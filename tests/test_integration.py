"""
Integration tests for sortlab.

Tests cover end-to-end workflows from selection to aggregated series,
console reports, chart output and the command-line runner.
"""

import json

import pytest

from data.generate import DatasetGenerator, Scenario
from sortlab.algorithms.registry import AlgorithmType, run_algorithm
from sortlab.benchmark import aggregate_results, run_experiments
from sortlab.benchmark.report import plot_series, print_results, print_series
from sortlab.benchmark.simple_runner import main


class TestIntegrationWorkflows:
    """Integration tests for complete workflows."""

    def test_full_selection_to_series(self, capsys):
        results = run_experiments(
            list(AlgorithmType),
            [10, 100],
            list(Scenario),
            seed=3,
        )

        assert len(results) == 2 * 3 * 5
        assert "Completed 30 experiments" in capsys.readouterr().out

        series = aggregate_results(results, metric="comparisons")
        assert [p.size for p in series] == [10, 100]
        assert set(series[1].values) == set(AlgorithmType)

        # selection sort compares n(n-1)/2 pairs on every scenario
        assert series[1].values[AlgorithmType.SELECTION] == 4950

    def test_sorted_scenario_matches_best_cases(self):
        results = run_experiments(
            ["bubble", "selection", "insertion"],
            [100],
            ["sorted"],
            progress_callback=lambda *args: None,
        )

        by_algorithm = {r.algorithm: r.metrics for r in results}
        assert by_algorithm[AlgorithmType.BUBBLE].comparisons == 99
        assert by_algorithm[AlgorithmType.BUBBLE].swaps == 0
        assert by_algorithm[AlgorithmType.SELECTION].swaps == 0
        assert by_algorithm[AlgorithmType.INSERTION].comparisons == 99
        assert by_algorithm[AlgorithmType.INSERTION].swaps == 0

    def test_generated_data_sorted_by_every_algorithm(self):
        generator = DatasetGenerator(seed=11)

        for data in generator.generate_batch([0, 7, 64], Scenario.RANDOM):
            for algorithm in AlgorithmType:
                assert run_algorithm(algorithm, data).values == sorted(data)

    def test_large_random_dataset_fast_algorithms(self):
        results = run_experiments(
            ["quick", "merge"], [100_000], ["random"], progress_callback=lambda *a: None
        )

        assert all(r.completed for r in results)


class TestReports:
    """Tests for console and chart output."""

    def test_print_results(self, capsys, make_result):
        result = make_result("quick", 100, "sorted", time_ms=1.5, comparisons=4950)

        print_results([result])

        out = capsys.readouterr().out
        assert "Quick Sort" in out
        assert "4950" in out
        assert "Sorted" in out

    def test_print_results_marks_partial(self, capsys, make_result):
        from dataclasses import replace

        result = replace(make_result("quick", 100, "sorted"), completed=False)

        print_results([result])

        assert "(partial)" in capsys.readouterr().out

    def test_print_series_fills_missing(self, capsys, make_result):
        results = [
            make_result("bubble", 10, "random", swaps=3),
            make_result("merge", 100, "random", swaps=7),
        ]

        print_series(aggregate_results(results, "swaps"), "swaps")

        out = capsys.readouterr().out
        assert "Swaps by size" in out
        assert "N/A" in out

    def test_plot_series(self, tmp_path, make_result):
        results = [
            make_result("bubble", 10, "random", time_ms=0.5),
            make_result("bubble", 100, "random", time_ms=5.0),
            make_result("quick", 100, "random", time_ms=0.0),
        ]
        series = aggregate_results(results, log_scale=True)

        path = plot_series(series, "time_ms", tmp_path / "chart.png", log_scale=True)

        assert path.exists()
        assert path.stat().st_size > 0


class TestSimpleRunner:
    """Tests for the command-line runner."""

    def test_default_style_run(self, capsys):
        main(["--algorithms", "quick,merge", "--sizes", "10,20", "--seed", "5"])

        out = capsys.readouterr().out
        assert "Completed 4 experiments" in out
        assert "Merge Sort" in out
        assert "Time (ms) by size" in out

    def test_json_output(self, capsys):
        main(
            [
                "--algorithms",
                "bubble",
                "--sizes",
                "5",
                "--scenarios",
                "sorted",
                "--metric",
                "comparisons",
                "--json",
            ]
        )

        out = capsys.readouterr().out
        start = out.index("[\n")
        end = out.index("\n]", start) + 2
        records = json.loads(out[start:end])
        assert records[0]["algorithm"] == "bubble"
        assert records[0]["comparisons"] == 4
        assert records[0]["swaps"] == 0

    def test_plot_option(self, tmp_path, capsys):
        target = tmp_path / "out.png"

        main(["--algorithms", "merge", "--sizes", "10", "--plot", str(target)])

        assert target.exists()
        assert "Plot saved" in capsys.readouterr().out

    def test_empty_selection_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--algorithms", "bubble", "--sizes", "100000"])

        assert excinfo.value.code == 1
        assert "Error: No benchmark tasks" in capsys.readouterr().out

    def test_bad_size_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--sizes", "-3"])

        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().out
