import math
import random

import pytest

from algotracker import catalog
from algotracker.algorithms import Sorter
from algotracker.benchmark.comparison import ComparisonEngine, compute_speedup
from algotracker.benchmark.results import ResultStore
from algotracker.benchmark.runner import (
    ArrayInput,
    BenchmarkOutcome,
    GraphInput,
    SearchInput,
)
from algotracker.models import (
    AlgorithmCategory,
    AlgorithmDescriptor,
    Graph,
    InvalidArgumentError,
    PerformanceResult,
)


def test_bubble_vs_quick_on_1000_random() -> None:
    rng = random.Random(7)
    values = [rng.randint(0, 1000) for _ in range(1000)]
    engine = ComparisonEngine()
    comparison = engine.compare([catalog.get("bubble"), catalog.get("quick")], ArrayInput(values))
    assert comparison.fastest.name == "Quick Sort"
    assert comparison.slowest.name == "Bubble Sort"
    assert comparison.speedup >= 1.0
    assert comparison.outputs["Quick Sort"] == sorted(values)
    assert comparison.outputs["Bubble Sort"] == sorted(values)


def test_ranking_sorted_and_speedup_consistent() -> None:
    rng = random.Random(3)
    values = [rng.randint(0, 500) for _ in range(300)]
    comparison = ComparisonEngine().compare(catalog.variants_for("sorting"), ArrayInput(values))
    times = [e.average_ms for e in comparison.ranking]
    assert times == sorted(times)
    assert len(comparison.ranking) == 5
    assert comparison.speedup == pytest.approx(times[-1] / times[0])


def test_results_appended_to_store_in_completion_order() -> None:
    store = ResultStore()
    engine = ComparisonEngine(store=store)
    variants = [catalog.get("linear"), catalog.get("binary")]
    comparison = engine.compare(variants, SearchInput(list(range(100)), 42))
    assert [r.algorithm.name for r in store] == ["Linear Search", "Binary Search"]
    assert comparison.results == list(store.results)
    assert all(r.input_size == 100 for r in store)
    assert comparison.outputs == {"Linear Search": 42, "Binary Search": 42}


def test_graph_comparison(small_graph: Graph) -> None:
    engine = ComparisonEngine()
    variants = catalog.variants_for(AlgorithmCategory.GRAPH)
    comparison = engine.compare(variants, GraphInput(small_graph, 0))
    assert {e.name for e in comparison.ranking} == {
        "Depth-First Search",
        "Breadth-First Search",
        "Dijkstra's Algorithm",
    }
    assert comparison.outputs["Depth-First Search"] == [0, 1, 3, 2]


def test_empty_variant_set_rejected() -> None:
    engine = ComparisonEngine()
    with pytest.raises(InvalidArgumentError):
        engine.compare([], ArrayInput([1, 2, 3]))
    assert len(engine.store) == 0


def test_mixed_categories_rejected_before_running() -> None:
    engine = ComparisonEngine()
    with pytest.raises(InvalidArgumentError):
        engine.compare([catalog.get("quick"), catalog.get("linear")], ArrayInput([3, 2, 1]))
    assert len(engine.store) == 0


def test_invalid_start_vertex_reported(small_graph: Graph) -> None:
    with pytest.raises(InvalidArgumentError):
        ComparisonEngine().compare([catalog.get("dfs")], GraphInput(small_graph, -1))


def test_single_variant_speedup_is_one() -> None:
    comparison = ComparisonEngine().compare([catalog.get("merge")], ArrayInput(list(range(200))))
    assert comparison.speedup == pytest.approx(1.0)
    assert comparison.fastest == comparison.slowest


def test_equal_times_keep_given_order() -> None:
    class FixedTimeRunner:
        def run(self, variant, benchmark_input):
            result = PerformanceResult(variant.descriptor, 2.0, benchmark_input.size)
            return BenchmarkOutcome(result=result, output=None)

    def noop(values: list[int]) -> list[int]:
        return values

    names = ["C", "A", "B"]
    variants = [
        Sorter(AlgorithmDescriptor(n, "", AlgorithmCategory.SORTING, "", ""), noop) for n in names
    ]
    comparison = ComparisonEngine(FixedTimeRunner()).compare(variants, ArrayInput([1]))
    assert [e.name for e in comparison.ranking] == names
    assert comparison.speedup == 1.0


def test_compute_speedup_zero_handling() -> None:
    assert compute_speedup(2.0, 6.0) == pytest.approx(3.0)
    assert compute_speedup(0.0, 0.0) == 1.0
    assert math.isinf(compute_speedup(0.0, 1.0))
