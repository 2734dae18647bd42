"""Core package for algorithm benchmarking.

Exports base data structures, the benchmark runner and the comparison engine.
"""

from algotracker.benchmark import (  # noqa: F401
    ArrayInput,
    BenchmarkRunner,
    ComparisonEngine,
    GraphInput,
    ResultStore,
    SearchInput,
)
from algotracker.models import (  # noqa: F401
    AlgorithmCategory,
    AlgorithmDescriptor,
    Edge,
    Graph,
    InvalidArgumentError,
    PerformanceResult,
)

__all__ = [
    "AlgorithmCategory",
    "AlgorithmDescriptor",
    "ArrayInput",
    "BenchmarkRunner",
    "ComparisonEngine",
    "Edge",
    "Graph",
    "GraphInput",
    "InvalidArgumentError",
    "PerformanceResult",
    "ResultStore",
    "SearchInput",
]
