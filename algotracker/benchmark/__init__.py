"""Benchmark package: measurement protocol, result store and comparisons.

Provides the runner that times one variant, the append-only result store and
the engine that ranks several variants on a shared input.
"""

from algotracker.benchmark.comparison import Comparison, ComparisonEngine, RankedEntry
from algotracker.benchmark.results import ResultStore
from algotracker.benchmark.runner import (
    DEFAULT_PROTOCOLS,
    ArrayInput,
    BenchmarkOutcome,
    BenchmarkRunner,
    GraphInput,
    Measurement,
    MeasurementProtocol,
    SearchInput,
    measure,
)

__all__ = [
    "DEFAULT_PROTOCOLS",
    "ArrayInput",
    "BenchmarkOutcome",
    "BenchmarkRunner",
    "Comparison",
    "ComparisonEngine",
    "GraphInput",
    "Measurement",
    "MeasurementProtocol",
    "RankedEntry",
    "ResultStore",
    "SearchInput",
    "measure",
]
