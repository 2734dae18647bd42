"""Algorithm variants.

Contains:
- Sorting: bubble, insertion, selection, merge, quick
- Searching: linear, binary
- Graph: depth-first, breadth-first traversal and Dijkstra shortest paths
"""

from algotracker.algorithms.base import (
    INFINITY,
    NOT_FOUND,
    GraphTraverser,
    Searcher,
    ShortestPathFinder,
    Sorter,
    Variant,
)
from algotracker.algorithms.graph import breadth_first_search, depth_first_search, dijkstra
from algotracker.algorithms.searching import binary_search, linear_search
from algotracker.algorithms.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

__all__ = [
    "INFINITY",
    "NOT_FOUND",
    "GraphTraverser",
    "Searcher",
    "ShortestPathFinder",
    "Sorter",
    "Variant",
    "binary_search",
    "breadth_first_search",
    "bubble_sort",
    "depth_first_search",
    "dijkstra",
    "insertion_sort",
    "linear_search",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]
