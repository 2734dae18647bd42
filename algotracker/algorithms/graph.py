"""Graph traversals (DFS, BFS) and Dijkstra shortest paths.

All functions validate ``start`` before touching the graph and raise
``InvalidArgumentError`` when it is not a vertex, except Dijkstra on a
graph without vertices, which returns an empty table. Neighbors are visited
in adjacency-list order; vertices unreachable from ``start`` never appear in
a traversal and keep ``INFINITY`` in the distance table.
"""

from __future__ import annotations

import heapq
from collections import deque
from typing import List

from algotracker.algorithms.base import INFINITY, validate_start_vertex
from algotracker.models import Graph


def depth_first_search(graph: Graph, start: int) -> List[int]:
    """Recursive pre-order DFS.

    Recursion depth equals the longest simple path explored, so very deep
    graphs can exceed the interpreter recursion limit.
    """
    validate_start_vertex(graph, start)
    visited = [False] * graph.vertex_count
    order: List[int] = []
    _dfs_visit(graph, start, visited, order)
    return order


def _dfs_visit(graph: Graph, vertex: int, visited: List[bool], order: List[int]) -> None:
    visited[vertex] = True
    order.append(vertex)
    for edge in graph.neighbors(vertex):
        if not visited[edge.destination]:
            _dfs_visit(graph, edge.destination, visited, order)


def breadth_first_search(graph: Graph, start: int) -> List[int]:
    validate_start_vertex(graph, start)
    visited = [False] * graph.vertex_count
    visited[start] = True
    order: List[int] = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for edge in graph.neighbors(vertex):
            if not visited[edge.destination]:
                visited[edge.destination] = True
                queue.append(edge.destination)
    return order


def dijkstra(graph: Graph, start: int) -> List[int]:
    """Single-source shortest distances over non-negative weights.

    Returns:
        List of length ``vertex_count``; ``dist[start] == 0`` and unreachable
        vertices hold ``INFINITY``. Heap entries are ``(distance, vertex)``
        so equal distances are settled in ascending vertex order. A graph
        without vertices yields an empty table whatever ``start`` is.

    Negative weights break the algorithm's assumptions; they are not
    detected and the result is then unspecified.
    """
    if graph.vertex_count == 0:
        return []
    validate_start_vertex(graph, start)
    dist = [INFINITY] * graph.vertex_count
    dist[start] = 0
    settled = [False] * graph.vertex_count
    heap = [(0, start)]
    while heap:
        d, vertex = heapq.heappop(heap)
        if settled[vertex]:
            continue
        settled[vertex] = True
        for edge in graph.neighbors(vertex):
            candidate = d + edge.weight
            if candidate < dist[edge.destination]:
                dist[edge.destination] = candidate
                heapq.heappush(heap, (candidate, edge.destination))
    return dist
