"""CSV export and plain-text tables for benchmark results."""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Iterable, List, Sequence

from algotracker.algorithms import (
    INFINITY,
    NOT_FOUND,
    Searcher,
    ShortestPathFinder,
    Sorter,
    Variant,
)
from algotracker.benchmark.comparison import Comparison
from algotracker.benchmark.results import ResultStore
from algotracker.benchmark.runner import BenchmarkInput, BenchmarkOutcome
from algotracker.models import AlgorithmCategory, PerformanceResult

logger = logging.getLogger("algotracker.export")

RESULT_COLUMNS = [
    "algorithm",
    "category",
    "input_size",
    "execution_time_ms",
    "time_complexity",
    "space_complexity",
]
COMPARISON_COLUMNS = ["rank", "algorithm", "average_ms", "relative_to_fastest"]

_RULE = "-" * 50
# arrays longer than this are shortened in text output
PREVIEW_LIMIT = 20


def write_results_csv(results: Iterable[PerformanceResult], path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(RESULT_COLUMNS)
        for r in results:
            writer.writerow(
                [
                    r.algorithm.name,
                    r.algorithm.category.display_name,
                    r.input_size,
                    f"{r.execution_time_ms:.6f}",
                    r.algorithm.time_complexity,
                    r.algorithm.space_complexity,
                ]
            )
            rows += 1
    logger.info("Results written: %s (%d rows)", out_path, rows)
    return out_path


def _relative(average_ms: float, fastest_ms: float) -> float:
    if fastest_ms == 0.0:
        return 1.0 if average_ms == 0.0 else math.inf
    return average_ms / fastest_ms


def write_comparison_csv(comparison: Comparison, path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fastest_ms = comparison.fastest.average_ms
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(COMPARISON_COLUMNS)
        for rank, entry in enumerate(comparison.ranking, start=1):
            writer.writerow(
                [
                    rank,
                    entry.name,
                    f"{entry.average_ms:.6f}",
                    f"{_relative(entry.average_ms, fastest_ms):.2f}",
                ]
            )
    logger.info("Comparison written: %s", out_path)
    return out_path


def format_comparison(comparison: Comparison) -> str:
    """Ranking table followed by the fastest algorithm and the speedup."""
    lines = [
        "COMPARISON RESULTS",
        _RULE,
        f"{'Algorithm':<30} {'Execution Time (ms)':<15}",
        _RULE,
    ]
    for entry in comparison.ranking:
        lines.append(f"{entry.name:<30} {entry.average_ms:<15.3f}")
    lines.append(_RULE)
    fastest = comparison.fastest
    lines.append(f"Fastest algorithm: {fastest.name} ({fastest.average_ms:.3f} ms)")
    lines.append(f"Speedup compared to slowest: {comparison.speedup:.2f}x")
    return "\n".join(lines)


def format_results_table(results: Sequence[PerformanceResult]) -> str:
    if not results:
        return "No results available."
    lines = [
        _RULE,
        f"{'Algorithm':<25} {'Input Size':<15} {'Execution Time (ms)':<15}",
        _RULE,
    ]
    for r in results:
        lines.append(f"{r.algorithm.name:<25} {r.input_size:<15d} {r.execution_time_ms:<15.3f}")
    lines.append(_RULE)
    return "\n".join(lines)


def format_distances(distances: Sequence[int], start: int) -> str:
    lines: List[str] = [f"Shortest distances from vertex {start}:"]
    for vertex, d in enumerate(distances):
        if d == INFINITY:
            lines.append(f"Vertex {vertex}: Infinity (not reachable)")
        else:
            lines.append(f"Vertex {vertex}: {d}")
    return "\n".join(lines)


def format_results_by_category(store: ResultStore) -> str:
    """One results table per category that has results, in category order."""
    blocks = []
    for category in AlgorithmCategory:
        results = store.by_category(category)
        if results:
            blocks.append(f"{category.display_name} results:\n{format_results_table(results)}")
    return "\n\n".join(blocks) if blocks else "No results available."


def _preview(values: Sequence[int]) -> str:
    if len(values) <= PREVIEW_LIMIT:
        return str(list(values))
    head = ", ".join(str(v) for v in values[:PREVIEW_LIMIT])
    return f"[{head}, ...] ({len(values)} values)"


def format_run(
    variant: Variant, benchmark_input: BenchmarkInput, outcome: BenchmarkOutcome
) -> str:
    """Input, output and descriptor details of a single measured run."""
    descriptor = variant.descriptor
    lines: List[str] = []
    if isinstance(variant, Sorter):
        original = benchmark_input.values  # type: ignore[union-attr]
        lines.append(f"Original array: {_preview(original)}")
        lines.append(f"Sorted array: {_preview(outcome.output)}")
    elif isinstance(variant, Searcher):
        values = list(benchmark_input.values)  # type: ignore[union-attr]
        target = benchmark_input.target  # type: ignore[union-attr]
        if variant.requires_sorted_input:
            values.sort()
            lines.append(f"Array sorted for {descriptor.name}: {_preview(values)}")
        else:
            lines.append(f"Array: {_preview(values)}")
        if outcome.output == NOT_FOUND:
            lines.append(f"Target {target} not found")
        else:
            lines.append(f"Target {target} found at index {outcome.output}")
    elif isinstance(variant, ShortestPathFinder):
        start = benchmark_input.start  # type: ignore[union-attr]
        lines.append(format_distances(outcome.output, start))
    else:
        lines.append(f"{descriptor.name} traversal: {outcome.output}")
    lines.extend(
        [
            f"Execution time: {outcome.result.execution_time_ms:.3f} ms",
            f"Algorithm: {descriptor.name}",
            f"Description: {descriptor.description}",
            f"Time Complexity: {descriptor.time_complexity}",
            f"Space Complexity: {descriptor.space_complexity}",
        ]
    )
    return "\n".join(lines)
