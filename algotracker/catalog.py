"""Fixed catalog of algorithm descriptors and their capability records.

Descriptors are created once at import and shared by reference by every
``PerformanceResult`` that refers to them. Variant records hold no state, so
the same record is handed out on every lookup.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from algotracker.algorithms import (
    GraphTraverser,
    Searcher,
    ShortestPathFinder,
    Sorter,
    Variant,
    binary_search,
    breadth_first_search,
    bubble_sort,
    depth_first_search,
    dijkstra,
    insertion_sort,
    linear_search,
    merge_sort,
    quick_sort,
    selection_sort,
)
from algotracker.models import AlgorithmCategory, AlgorithmDescriptor, InvalidArgumentError

SORTING = AlgorithmCategory.SORTING
SEARCHING = AlgorithmCategory.SEARCHING
GRAPH = AlgorithmCategory.GRAPH

BUBBLE_SORT = AlgorithmDescriptor(
    name="Bubble Sort",
    description="Repeatedly swaps adjacent elements that are out of order.",
    category=SORTING,
    time_complexity="O(n^2)",
    space_complexity="O(1)",
)
INSERTION_SORT = AlgorithmDescriptor(
    name="Insertion Sort",
    description="Builds the sorted prefix by inserting one element at a time.",
    category=SORTING,
    time_complexity="O(n^2)",
    space_complexity="O(1)",
)
SELECTION_SORT = AlgorithmDescriptor(
    name="Selection Sort",
    description="Repeatedly selects the minimum of the unsorted suffix.",
    category=SORTING,
    time_complexity="O(n^2)",
    space_complexity="O(1)",
)
MERGE_SORT = AlgorithmDescriptor(
    name="Merge Sort",
    description="Stable divide and conquer sort merging sorted halves.",
    category=SORTING,
    time_complexity="O(n log n)",
    space_complexity="O(n)",
)
QUICK_SORT = AlgorithmDescriptor(
    name="Quick Sort",
    description="Partitions around a median-of-three pivot and sorts both sides.",
    category=SORTING,
    time_complexity="O(n log n) average, O(n^2) worst",
    space_complexity="O(log n)",
)
LINEAR_SEARCH = AlgorithmDescriptor(
    name="Linear Search",
    description="Scans the sequence in order until the target is found.",
    category=SEARCHING,
    time_complexity="O(n)",
    space_complexity="O(1)",
)
BINARY_SEARCH = AlgorithmDescriptor(
    name="Binary Search",
    description="Halves the search interval of a sorted sequence each step.",
    category=SEARCHING,
    time_complexity="O(log n)",
    space_complexity="O(1)",
)
DEPTH_FIRST_SEARCH = AlgorithmDescriptor(
    name="Depth-First Search",
    description="Explores each branch as deep as possible before backtracking.",
    category=GRAPH,
    time_complexity="O(V + E)",
    space_complexity="O(V)",
)
BREADTH_FIRST_SEARCH = AlgorithmDescriptor(
    name="Breadth-First Search",
    description="Explores vertices level by level from the start vertex.",
    category=GRAPH,
    time_complexity="O(V + E)",
    space_complexity="O(V)",
)
DIJKSTRA = AlgorithmDescriptor(
    name="Dijkstra's Algorithm",
    description="Shortest distances from one vertex over non-negative weights.",
    category=GRAPH,
    time_complexity="O((V + E) log V)",
    space_complexity="O(V)",
)

VARIANTS: tuple[Variant, ...] = (
    Sorter(BUBBLE_SORT, bubble_sort),
    Sorter(INSERTION_SORT, insertion_sort),
    Sorter(SELECTION_SORT, selection_sort),
    Sorter(MERGE_SORT, merge_sort),
    Sorter(QUICK_SORT, quick_sort),
    Searcher(LINEAR_SEARCH, linear_search),
    Searcher(BINARY_SEARCH, binary_search, requires_sorted_input=True),
    GraphTraverser(DEPTH_FIRST_SEARCH, depth_first_search),
    GraphTraverser(BREADTH_FIRST_SEARCH, breadth_first_search),
    ShortestPathFinder(DIJKSTRA, dijkstra),
)

# Short config-friendly aliases -> display names
ALIASES: Dict[str, str] = {
    "bubble": BUBBLE_SORT.name,
    "insertion": INSERTION_SORT.name,
    "selection": SELECTION_SORT.name,
    "merge": MERGE_SORT.name,
    "quick": QUICK_SORT.name,
    "linear": LINEAR_SEARCH.name,
    "binary": BINARY_SEARCH.name,
    "dfs": DEPTH_FIRST_SEARCH.name,
    "bfs": BREADTH_FIRST_SEARCH.name,
    "dijkstra": DIJKSTRA.name,
}

_BY_NAME: Dict[str, Variant] = {v.descriptor.name.lower(): v for v in VARIANTS}


def get(name: str) -> Variant:
    """Look up a variant by display name or alias (case-insensitive).

    Raises:
        InvalidArgumentError: If no variant matches.
    """
    key = name.strip().lower()
    key = ALIASES.get(key, key).lower()
    try:
        return _BY_NAME[key]
    except KeyError:
        raise InvalidArgumentError(f"Unknown algorithm: {name}") from None


def get_many(names: Iterable[str]) -> List[Variant]:
    return [get(n) for n in names]


def variants_for(category: AlgorithmCategory | str) -> List[Variant]:
    cat = AlgorithmCategory.parse(category)
    return [v for v in VARIANTS if v.descriptor.category is cat]


def list_descriptors(category: AlgorithmCategory | str | None = None) -> List[AlgorithmDescriptor]:
    """Descriptors of the catalog, optionally restricted to one category."""
    if category is None:
        return [v.descriptor for v in VARIANTS]
    return [v.descriptor for v in variants_for(category)]
