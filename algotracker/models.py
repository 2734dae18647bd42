"""Core data structures shared by algorithms and the benchmark layer.

This module defines:
    AlgorithmCategory    -- closed set of algorithm families.
    AlgorithmDescriptor  -- immutable metadata for one algorithm variant.
    Edge / Graph         -- directed, weighted adjacency-list graph.
    PerformanceResult    -- one measured outcome (algorithm, time, size).
    InvalidArgumentError -- raised for arguments rejected before any work.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class InvalidArgumentError(ValueError):
    """Argument rejected before the requested operation started."""


class AlgorithmCategory(Enum):
    SORTING = "Sorting"
    SEARCHING = "Searching"
    GRAPH = "Graph"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | AlgorithmCategory") -> "AlgorithmCategory":
        """Accept an enum member, its name or its display name (any case)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        for member in cls:
            if member.name == key or member.value.upper() == key:
                return member
        raise InvalidArgumentError(f"Unknown algorithm category: {value!r}")


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """Immutable metadata identifying an algorithm variant.

    Attributes:
        name: Unique display name, used as grouping key by the result store.
        description: One sentence describing the algorithm.
        category: Family the algorithm belongs to.
        time_complexity: Big-O time complexity as text (e.g. ``"O(n log n)"``).
        space_complexity: Big-O extra space as text.
    """

    name: str
    description: str
    category: AlgorithmCategory
    time_complexity: str
    space_complexity: str


@dataclass(frozen=True)
class Edge:
    destination: int
    weight: int = 1


@dataclass
class Graph:
    """Directed weighted graph stored as adjacency lists.

    Vertices are the dense integers ``0..vertex_count-1``. The graph is only
    mutated while it is being built (``add_edge``); algorithms treat it as
    read-only. Self-loops and parallel edges are allowed. ``add_edge`` does
    not range-check destinations; ``from_edges`` does.
    """

    vertex_count: int
    adjacency: list[list[Edge]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.vertex_count < 0:
            raise InvalidArgumentError(f"vertex_count must be >= 0, got {self.vertex_count}")
        if not self.adjacency:
            self.adjacency = [[] for _ in range(self.vertex_count)]
        elif len(self.adjacency) != self.vertex_count:
            raise InvalidArgumentError(
                f"adjacency has {len(self.adjacency)} lists for {self.vertex_count} vertices"
            )

    def add_edge(self, source: int, destination: int, weight: int = 1) -> None:
        self.adjacency[source].append(Edge(destination, weight))

    def add_undirected_edge(self, u: int, v: int, weight: int = 1) -> None:
        self.add_edge(u, v, weight)
        self.add_edge(v, u, weight)

    def neighbors(self, vertex: int) -> list[Edge]:
        return self.adjacency[vertex]

    def has_vertex(self, vertex: int) -> bool:
        return 0 <= vertex < self.vertex_count

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.adjacency)

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Sequence[Sequence[int]],
        directed: bool = True,
    ) -> "Graph":
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` items.

        With ``directed=False`` every item adds the edge in both directions.

        Raises:
            InvalidArgumentError: If an item has neither 2 nor 3 entries or
                names a vertex outside the graph.
        """
        graph = cls(vertex_count)
        add = graph.add_edge if directed else graph.add_undirected_edge
        for edge in edges:
            if len(edge) not in (2, 3):
                raise InvalidArgumentError(f"Edge must be (u, v) or (u, v, weight), got {edge!r}")
            u, v = edge[0], edge[1]
            if not (graph.has_vertex(u) and graph.has_vertex(v)):
                raise InvalidArgumentError(
                    f"Edge ({u}, {v}) out of range for graph with {vertex_count} vertices"
                )
            add(u, v, edge[2] if len(edge) == 3 else 1)
        return graph


@dataclass(frozen=True)
class PerformanceResult:
    """Single measured outcome.

    Fields:
        algorithm: Shared descriptor of the measured variant.
        execution_time_ms: Average time of the measured runs (ms, >= 0).
        input_size: Array length or graph vertex count.
    """

    algorithm: AlgorithmDescriptor
    execution_time_ms: float
    input_size: int

    def __post_init__(self) -> None:
        if self.execution_time_ms < 0:
            raise InvalidArgumentError(
                f"execution_time_ms must be >= 0, got {self.execution_time_ms}"
            )

    @property
    def algorithm_name(self) -> str:
        return self.algorithm.name

    @property
    def category(self) -> AlgorithmCategory:
        return self.algorithm.category
