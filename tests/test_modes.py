"""Tests for compare, run and sweep mode orchestration.

Runs tiny configurations and writes artefacts under pytest tmp_path.
"""

from __future__ import annotations

import csv
import logging
import random
from pathlib import Path

import pytest

import main
from algotracker.config import parse_config
from algotracker.modes import run_compare, run_single, run_sweep

SMALL_PROTOCOL = {"warmup_runs": 1, "sorting_runs": 2, "searching_runs": 3, "graph_runs": 2}


def test_run_compare_writes_csv_and_charts(tmp_path: Path) -> None:
    config = parse_config(
        {
            "protocol": SMALL_PROTOCOL,
            "compare": [
                {"category": "sorting", "algorithms": ["bubble", "merge"], "size": 60},
                {"category": "searching", "size": 100, "kind": "sorted"},
                {"category": "graph", "vertices": 12, "edges": 30, "start": 3},
            ],
        }
    )
    store = run_compare(config, random.Random(0), str(tmp_path))
    # 2 sorting + 2 searching + 3 graph
    assert len(store) == 7
    assert [r.input_size for r in store] == [60, 60, 100, 100, 12, 12, 12]
    assert len(list(tmp_path.glob("compare_*.csv"))) == 3
    assert len(list(tmp_path.glob("compare_*.png"))) == 3
    results_csv = list(tmp_path.glob("results_*.csv"))
    assert len(results_csv) == 1
    with open(results_csv[0], newline="", encoding="utf-8") as f:
        assert len(list(csv.reader(f))) == 8


def test_run_compare_skips_invalid_job(tmp_path: Path) -> None:
    config = parse_config(
        {
            "protocol": SMALL_PROTOCOL,
            "charts": {"enabled": False},
            "compare": [
                {"category": "sorting", "algorithms": ["linear"], "size": 10},
                {"category": "graph", "vertices": 4, "edges": 4, "start": 9},
                {"category": "sorting", "algorithms": ["quick"], "size": 10},
            ],
        }
    )
    store = run_compare(config, random.Random(1), str(tmp_path))
    assert [r.algorithm.name for r in store] == ["Quick Sort"]
    assert not list(tmp_path.glob("*.png"))


def test_run_compare_logs_results_by_category(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.INFO, logger="algotracker")
    config = parse_config(
        {
            "protocol": SMALL_PROTOCOL,
            "charts": {"enabled": False},
            "compare": [
                {"category": "sorting", "algorithms": ["quick"], "values": [3, 1, 2]},
                {"category": "searching", "values": [5, 6], "target": 6},
            ],
        }
    )
    run_compare(config, random.Random(0), str(tmp_path))
    assert "Sorting results:" in caplog.text
    assert "Searching results:" in caplog.text
    assert "Graph results:" not in caplog.text


def test_run_compare_without_jobs(tmp_path: Path) -> None:
    store = run_compare(parse_config({}), random.Random(0), str(tmp_path / "none"))
    assert len(store) == 0


def test_run_sweep(tmp_path: Path) -> None:
    config = parse_config(
        {
            "protocol": SMALL_PROTOCOL,
            "sweep": {
                "category": "sorting",
                "algorithms": ["insertion", "quick"],
                "sizes": [20, 40],
            },
        }
    )
    store = run_sweep(config, random.Random(2), str(tmp_path))
    assert len(store) == 4
    assert store.input_sizes() == [20, 40]
    assert store.fastest_algorithm(40) in {"Insertion Sort", "Quick Sort"}
    assert len(list(tmp_path.glob("sweep_*.csv"))) == 1
    assert len(list(tmp_path.glob("sweep_*.png"))) == 1


def test_run_sweep_searching_all_variants(tmp_path: Path) -> None:
    config = parse_config(
        {
            "protocol": SMALL_PROTOCOL,
            "charts": {"enabled": False},
            "sweep": {"category": "searching", "sizes": [0, 50]},
        }
    )
    store = run_sweep(config, random.Random(3), str(tmp_path))
    assert store.algorithm_names() == ["Linear Search", "Binary Search"]
    assert len(store) == 4


def test_main_cli(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "seed: 5\n"
        "log_level: WARNING\n"
        "protocol: {sorting_runs: 1, searching_runs: 1, graph_runs: 1}\n"
        "charts: {enabled: false}\n"
        "compare:\n"
        "  - {category: sorting, algorithms: [selection, quick], size: 30}\n"
        "sweep: {category: sorting, algorithms: [merge], sizes: [10]}\n",
        encoding="utf-8",
    )
    out = tmp_path / "out"
    assert main.main(["--config", str(cfg), "--output-dir", str(out)]) == 0
    assert list((out / "compare").glob("compare_sorting_1_*.csv"))
    assert main.main(["--config", str(cfg), "--output-dir", str(out), "--mode", "sweep"]) == 0
    assert list((out / "sweep").glob("sweep_*.csv"))


def test_main_requires_config() -> None:
    with pytest.raises(SystemExit):
        main.main([])


def test_run_single_logs_outputs(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.INFO, logger="algotracker")
    config = parse_config(
        {
            "protocol": SMALL_PROTOCOL,
            "run": [
                {"algorithm": "bubble", "values": [3, 1, 2]},
                {"algorithm": "binary", "values": [9, 4, 7, 1], "target": 7},
                {"algorithm": "linear", "values": [9, 4], "target": 5},
                {
                    "algorithm": "dijkstra",
                    "vertices": 4,
                    "graph_edges": [[0, 1, 2], [1, 2, 1], [0, 3, 7]],
                    "directed": False,
                    "start": 2,
                },
                {"algorithm": "bfs", "vertices": 6, "edges": 10},
            ],
        }
    )
    store = run_single(config, random.Random(4), str(tmp_path))
    assert [r.algorithm.name for r in store] == [
        "Bubble Sort",
        "Binary Search",
        "Linear Search",
        "Dijkstra's Algorithm",
        "Breadth-First Search",
    ]
    text = caplog.text
    assert "Sorted array: [1, 2, 3]" in text
    assert "Target 7 found at index 2" in text
    assert "Target 5 not found" in text
    assert "Shortest distances from vertex 2:" in text
    assert "Vertex 0: 3" in text
    assert "Vertex 3: 10" in text
    assert "Breadth-First Search traversal: [0" in text
    assert "Time Complexity: O(n^2)" in text
    assert "Graph results:" in text
    assert len(list(tmp_path.glob("results_*.csv"))) == 1


def test_run_single_skips_rejected_entries(tmp_path: Path) -> None:
    config = parse_config(
        {
            "protocol": SMALL_PROTOCOL,
            "run": [
                {"algorithm": "dfs", "vertices": 3, "start": 9},
                {"algorithm": "bfs", "vertices": 2, "graph_edges": [[0, 5]]},
                {"algorithm": "dijkstra", "vertices": 0, "edges": 0},
            ],
        }
    )
    store = run_single(config, random.Random(5), str(tmp_path))
    assert [r.algorithm.name for r in store] == ["Dijkstra's Algorithm"]
    assert store.results[0].input_size == 0


def test_run_single_without_entries(tmp_path: Path) -> None:
    store = run_single(parse_config({}), random.Random(0), str(tmp_path / "none"))
    assert len(store) == 0
    assert not (tmp_path / "none").exists()


def test_main_cli_run_mode(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "mode: run\n"
        "log_level: WARNING\n"
        "protocol: {sorting_runs: 1, searching_runs: 1, graph_runs: 1}\n"
        "run:\n"
        "  - {algorithm: merge, values: [4, 2, 9]}\n"
        "  - {algorithm: dfs, vertices: 3, graph_edges: [[0, 1], [1, 2]]}\n",
        encoding="utf-8",
    )
    out = tmp_path / "out"
    assert main.main(["--config", str(cfg), "--output-dir", str(out)]) == 0
    assert list((out / "run").glob("results_*.csv"))
