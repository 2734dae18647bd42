"""Comparison engine: benchmark several variants on one shared input and rank them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from algotracker.algorithms import Variant
from algotracker.benchmark.results import ResultStore
from algotracker.benchmark.runner import BenchmarkInput, BenchmarkRunner, accepts
from algotracker.models import InvalidArgumentError, PerformanceResult

logger = logging.getLogger("algotracker.compare")


@dataclass(frozen=True)
class RankedEntry:
    name: str
    average_ms: float


@dataclass
class Comparison:
    """Outcome of one comparison.

    Fields:
        ranking: Entries sorted ascending by ``average_ms``; equal times keep
            the order in which variants were given.
        speedup: ``slowest / fastest`` average time.
        results: Performance results in completion order.
        outputs: Last measured output per algorithm name.
    """

    ranking: List[RankedEntry]
    speedup: float
    results: List[PerformanceResult] = field(default_factory=list)
    outputs: Dict[str, Any] = field(default_factory=dict)

    @property
    def fastest(self) -> RankedEntry:
        return self.ranking[0]

    @property
    def slowest(self) -> RankedEntry:
        return self.ranking[-1]


def compute_speedup(fastest_ms: float, slowest_ms: float) -> float:
    """``slowest_ms / fastest_ms``; a zero fastest time gives 1.0 or inf."""
    if fastest_ms == 0.0:
        return 1.0 if slowest_ms == 0.0 else math.inf
    return slowest_ms / fastest_ms


class ComparisonEngine:
    def __init__(self, runner: BenchmarkRunner | None = None, store: ResultStore | None = None):
        self.runner = runner if runner is not None else BenchmarkRunner()
        self.store = store if store is not None else ResultStore()

    def compare(self, variants: Sequence[Variant], benchmark_input: BenchmarkInput) -> Comparison:
        """Benchmark each variant independently on ``benchmark_input``.

        Every result is appended to ``self.store`` as soon as its run
        completes.

        Raises:
            InvalidArgumentError: If ``variants`` is empty or one of them cannot
                run on the given input kind. Nothing is run in that case.
        """
        if not variants:
            raise InvalidArgumentError("At least one algorithm is required for a comparison")
        for variant in variants:
            if not accepts(variant, benchmark_input):
                raise InvalidArgumentError(
                    f"{variant.descriptor.name} cannot run on {type(benchmark_input).__name__}"
                )

        results: List[PerformanceResult] = []
        outputs: Dict[str, Any] = {}
        for variant in variants:
            outcome = self.runner.run(variant, benchmark_input)
            self.store.add(outcome.result)
            results.append(outcome.result)
            outputs[variant.descriptor.name] = outcome.output

        # sorted() is stable: ties stay in the given order
        ranking = sorted(
            (RankedEntry(r.algorithm.name, r.execution_time_ms) for r in results),
            key=lambda e: e.average_ms,
        )
        speedup = compute_speedup(ranking[0].average_ms, ranking[-1].average_ms)
        logger.info(
            "Compared %d algorithms on size=%d: fastest=%s (%.3f ms) speedup=%.2fx",
            len(ranking),
            benchmark_input.size,
            ranking[0].name,
            ranking[0].average_ms,
            speedup,
        )
        return Comparison(ranking=ranking, speedup=speedup, results=results, outputs=outputs)
