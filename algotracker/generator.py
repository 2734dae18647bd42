"""Synthetic benchmark inputs: integer arrays and random directed graphs.

Every function takes an optional ``rng`` so runs can be reproduced from a
seed; without one a fresh ``random.Random()`` is used.
"""

from __future__ import annotations

import random
from typing import List, Optional

from algotracker.models import Graph, InvalidArgumentError

ARRAY_KINDS = ("random", "sorted", "reversed", "nearly_sorted", "duplicates")


def _check_range(size: int, min_value: int, max_value: int) -> None:
    if size < 0:
        raise InvalidArgumentError(f"size must be >= 0, got {size}")
    if min_value > max_value:
        raise InvalidArgumentError(f"min_value {min_value} > max_value {max_value}")


def random_array(
    size: int, min_value: int = 0, max_value: int = 1000, rng: Optional[random.Random] = None
) -> List[int]:
    _check_range(size, min_value, max_value)
    rng = rng or random.Random()
    return [rng.randint(min_value, max_value) for _ in range(size)]


def sorted_array(
    size: int, min_value: int = 0, max_value: int = 1000, rng: Optional[random.Random] = None
) -> List[int]:
    return sorted(random_array(size, min_value, max_value, rng))


def reversed_array(
    size: int, min_value: int = 0, max_value: int = 1000, rng: Optional[random.Random] = None
) -> List[int]:
    return sorted(random_array(size, min_value, max_value, rng), reverse=True)


def nearly_sorted_array(
    size: int,
    min_value: int = 0,
    max_value: int = 1000,
    fraction: float = 0.1,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Sorted array disturbed by ``int(size * fraction)`` random swaps."""
    if not 0.0 <= fraction <= 1.0:
        raise InvalidArgumentError(f"fraction must be within [0, 1], got {fraction}")
    rng = rng or random.Random()
    values = sorted_array(size, min_value, max_value, rng)
    if size < 2:
        return values
    for _ in range(int(size * fraction)):
        i = rng.randrange(size)
        j = rng.randrange(size)
        values[i], values[j] = values[j], values[i]
    return values


def array_with_duplicates(
    size: int, unique_values: int, rng: Optional[random.Random] = None
) -> List[int]:
    """Array drawn from the values ``0..unique_values-1``."""
    if size < 0:
        raise InvalidArgumentError(f"size must be >= 0, got {size}")
    if unique_values < 1:
        raise InvalidArgumentError(f"unique_values must be >= 1, got {unique_values}")
    rng = rng or random.Random()
    return [rng.randrange(unique_values) for _ in range(size)]


def generate_array(
    kind: str,
    size: int,
    min_value: int = 0,
    max_value: int = 1000,
    fraction: float = 0.1,
    unique_values: int = 10,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Dispatch on ``kind`` (one of ``ARRAY_KINDS``)."""
    if kind == "random":
        return random_array(size, min_value, max_value, rng)
    elif kind == "sorted":
        return sorted_array(size, min_value, max_value, rng)
    elif kind == "reversed":
        return reversed_array(size, min_value, max_value, rng)
    elif kind == "nearly_sorted":
        return nearly_sorted_array(size, min_value, max_value, fraction, rng)
    elif kind == "duplicates":
        return array_with_duplicates(size, unique_values, rng)
    else:
        raise InvalidArgumentError(f"Unknown array kind: {kind}")


def random_graph(
    vertices: int, edges: int, max_weight: int = 10, rng: Optional[random.Random] = None
) -> Graph:
    """Directed graph with ``edges`` random edges and weights in ``1..max_weight``.

    Self-loops are avoided whenever the graph has more than one vertex.
    Parallel edges may occur.
    """
    if vertices < 0:
        raise InvalidArgumentError(f"vertices must be >= 0, got {vertices}")
    if edges < 0:
        raise InvalidArgumentError(f"edges must be >= 0, got {edges}")
    if max_weight < 1:
        raise InvalidArgumentError(f"max_weight must be >= 1, got {max_weight}")
    if vertices == 0 and edges > 0:
        raise InvalidArgumentError("Cannot place edges in a graph without vertices")
    rng = rng or random.Random()
    graph = Graph(vertices)
    for _ in range(edges):
        u = rng.randrange(vertices)
        v = rng.randrange(vertices)
        while vertices > 1 and v == u:
            v = rng.randrange(vertices)
        graph.add_edge(u, v, rng.randint(1, max_weight))
    return graph
