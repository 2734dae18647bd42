"""Capability records and shared helpers for algorithm variants.

Every concrete algorithm is a plain, stateless function. A capability record
pairs such a function with its descriptor so that the benchmark layer can
tell the four algorithm shapes apart without a common base class:

    Sorter             -- values -> sorted values
    Searcher           -- values, target -> index or -1
    GraphTraverser     -- graph, start -> visit order
    ShortestPathFinder -- graph, start -> distance table
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Union

from algotracker.models import AlgorithmDescriptor, Graph, InvalidArgumentError

NOT_FOUND = -1
INFINITY = 2**31 - 1  # distance of vertices unreachable from the start vertex

SortFn = Callable[[List[int]], List[int]]
SearchFn = Callable[[Sequence[int], int], int]
TraverseFn = Callable[[Graph, int], List[int]]
ShortestPathFn = Callable[[Graph, int], List[int]]


@dataclass(frozen=True)
class Sorter:
    descriptor: AlgorithmDescriptor
    sort: SortFn

    @property
    def name(self) -> str:
        return self.descriptor.name


@dataclass(frozen=True)
class Searcher:
    """Searcher capability.

    ``requires_sorted_input`` marks variants whose contract assumes ascending
    input; the runner hands such variants a sorted copy of the values.
    """

    descriptor: AlgorithmDescriptor
    search: SearchFn
    requires_sorted_input: bool = False

    @property
    def name(self) -> str:
        return self.descriptor.name


@dataclass(frozen=True)
class GraphTraverser:
    descriptor: AlgorithmDescriptor
    traverse: TraverseFn

    @property
    def name(self) -> str:
        return self.descriptor.name


@dataclass(frozen=True)
class ShortestPathFinder:
    descriptor: AlgorithmDescriptor
    find_shortest_paths: ShortestPathFn

    @property
    def name(self) -> str:
        return self.descriptor.name


Variant = Union[Sorter, Searcher, GraphTraverser, ShortestPathFinder]


def validate_start_vertex(graph: Graph, start: int) -> None:
    """Reject a start vertex outside ``[0, vertex_count)``.

    Raises:
        InvalidArgumentError: If ``start`` is not a vertex of ``graph``. On a
            graph without vertices every start is rejected.
    """
    if not graph.has_vertex(start):
        raise InvalidArgumentError(
            f"Start vertex {start} out of range for graph with {graph.vertex_count} vertices"
        )
