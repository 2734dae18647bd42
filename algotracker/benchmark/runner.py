"""Benchmark runner: fixed measurement protocol for one algorithm variant.

Protocol per invocation:
    1. ``warmup_runs`` untimed calls on freshly produced inputs.
    2. ``measured_runs`` timed calls, each on a fresh independent input; only
       the call itself is inside the ``perf_counter_ns`` window.
    3. Arithmetic mean of the measured runs in milliseconds, plus the output
       of the last measured call.

No retries and no outlier rejection: timing noise is reported as is.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Sequence, Tuple, TypeVar, Union

from algotracker.algorithms import GraphTraverser, Searcher, ShortestPathFinder, Sorter, Variant
from algotracker.algorithms.base import validate_start_vertex
from algotracker.models import (
    AlgorithmCategory,
    Graph,
    InvalidArgumentError,
    PerformanceResult,
)

logger = logging.getLogger("algotracker.runner")

I = TypeVar("I")
T = TypeVar("T")

NS_PER_MS = 1_000_000.0


@dataclass(frozen=True)
class MeasurementProtocol:
    warmup_runs: int = 1
    measured_runs: int = 10

    def __post_init__(self) -> None:
        if self.warmup_runs < 0:
            raise InvalidArgumentError(f"warmup_runs must be >= 0, got {self.warmup_runs}")
        if self.measured_runs < 1:
            raise InvalidArgumentError(f"measured_runs must be >= 1, got {self.measured_runs}")


DEFAULT_PROTOCOLS: Dict[AlgorithmCategory, MeasurementProtocol] = {
    AlgorithmCategory.SORTING: MeasurementProtocol(warmup_runs=1, measured_runs=10),
    AlgorithmCategory.SEARCHING: MeasurementProtocol(warmup_runs=1, measured_runs=100),
    AlgorithmCategory.GRAPH: MeasurementProtocol(warmup_runs=1, measured_runs=10),
}


@dataclass(frozen=True)
class Measurement(Generic[T]):
    average_ms: float
    last_output: T


@dataclass(frozen=True)
class ArrayInput:
    values: Sequence[int]

    @property
    def size(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class SearchInput:
    values: Sequence[int]
    target: int

    @property
    def size(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class GraphInput:
    graph: Graph
    start: int = 0

    @property
    def size(self) -> int:
        return self.graph.vertex_count


BenchmarkInput = Union[ArrayInput, SearchInput, GraphInput]


@dataclass(frozen=True)
class BenchmarkOutcome:
    result: PerformanceResult
    output: Any


def measure(
    operation: Callable[[I], T],
    input_factory: Callable[[], I],
    protocol: MeasurementProtocol,
) -> Measurement[T]:
    """Time ``operation`` under ``protocol``.

    ``input_factory`` is called once per warm-up and once per measured run,
    outside the timed window, so in-place algorithms always start from the
    same initial condition.
    """
    for _ in range(protocol.warmup_runs):
        operation(input_factory())

    total_ns = 0
    output = None
    for _ in range(protocol.measured_runs):
        data = input_factory()
        t0 = time.perf_counter_ns()
        output = operation(data)
        total_ns += time.perf_counter_ns() - t0

    average_ms = total_ns / protocol.measured_runs / NS_PER_MS
    return Measurement(average_ms=average_ms, last_output=output)


def accepts(variant: Variant, benchmark_input: BenchmarkInput) -> bool:
    """Whether ``variant`` can be run on ``benchmark_input``."""
    if isinstance(variant, Sorter):
        return isinstance(benchmark_input, ArrayInput)
    if isinstance(variant, Searcher):
        return isinstance(benchmark_input, SearchInput)
    if isinstance(variant, (GraphTraverser, ShortestPathFinder)):
        return isinstance(benchmark_input, GraphInput)
    return False


@dataclass
class BenchmarkRunner:
    """Runs catalog variants under the per-category measurement protocol."""

    protocols: Dict[AlgorithmCategory, MeasurementProtocol] = field(
        default_factory=lambda: dict(DEFAULT_PROTOCOLS)
    )

    def protocol_for(self, category: AlgorithmCategory) -> MeasurementProtocol:
        return self.protocols.get(category, DEFAULT_PROTOCOLS[category])

    def run(self, variant: Variant, benchmark_input: BenchmarkInput) -> BenchmarkOutcome:
        """Measure ``variant`` on ``benchmark_input``.

        Raises:
            InvalidArgumentError: If the input kind does not match the variant
                capability, or a graph start vertex is out of range.
        """
        if not accepts(variant, benchmark_input):
            raise InvalidArgumentError(
                f"{variant.descriptor.name} cannot run on {type(benchmark_input).__name__}"
            )
        operation, input_factory = _prepare(variant, benchmark_input)
        protocol = self.protocol_for(variant.descriptor.category)
        measurement = measure(operation, input_factory, protocol)
        result = PerformanceResult(
            algorithm=variant.descriptor,
            execution_time_ms=measurement.average_ms,
            input_size=benchmark_input.size,
        )
        logger.debug(
            "%s size=%d warmup=%d runs=%d avg=%.6f ms",
            variant.descriptor.name,
            result.input_size,
            protocol.warmup_runs,
            protocol.measured_runs,
            result.execution_time_ms,
        )
        return BenchmarkOutcome(result=result, output=measurement.last_output)


def _prepare(
    variant: Variant, benchmark_input: BenchmarkInput
) -> Tuple[Callable[[Any], Any], Callable[[], Any]]:
    """Build the timed operation and its input factory for one variant."""
    if isinstance(variant, Sorter):
        source: List[int] = list(benchmark_input.values)  # type: ignore[union-attr]
        return variant.sort, source.copy

    if isinstance(variant, Searcher):
        values = list(benchmark_input.values)  # type: ignore[union-attr]
        if variant.requires_sorted_input:
            values.sort()
        target = benchmark_input.target  # type: ignore[union-attr]
        search = variant.search
        return (lambda data: search(data, target)), values.copy

    graph = benchmark_input.graph  # type: ignore[union-attr]
    start = benchmark_input.start  # type: ignore[union-attr]
    if isinstance(variant, GraphTraverser):
        fn = variant.traverse
    else:
        fn = variant.find_shortest_paths
    # reject a bad start vertex once, before warm-up; an empty distance
    # table is the answer on a graph without vertices
    if not (isinstance(variant, ShortestPathFinder) and graph.vertex_count == 0):
        validate_start_vertex(graph, start)
    return (lambda g: fn(g, start)), (lambda: graph)
