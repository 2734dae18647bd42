"""Shared primitives used by execution modes.

Turns a configured job into a concrete benchmark input and resolves
algorithm names against the catalog, so each mode (``compare``, ``run``,
``sweep``)
builds its inputs the same way.
"""
from __future__ import annotations

import random
from typing import List, Sequence

from algotracker import catalog, generator
from algotracker.algorithms import Variant
from algotracker.benchmark.runner import ArrayInput, BenchmarkInput, GraphInput, SearchInput
from algotracker.config import CompareJob
from algotracker.models import AlgorithmCategory, Graph, InvalidArgumentError


def resolve_variants(category: AlgorithmCategory, names: Sequence[str]) -> List[Variant]:
    """Variants named in ``names`` or, when empty, the whole category.

    Raises:
        InvalidArgumentError: If a name is unknown or belongs to another
            category.
    """
    if not names:
        return catalog.variants_for(category)
    variants = catalog.get_many(names)
    for v in variants:
        if v.descriptor.category is not category:
            raise InvalidArgumentError(
                f"{v.descriptor.name} is not a {category.display_name.lower()} algorithm"
            )
    return variants


def pick_target(values: Sequence[int], rng: random.Random) -> int:
    """A value present in ``values`` (0 for an empty array)."""
    if not values:
        return 0
    return values[rng.randrange(len(values))]


def build_input(job: CompareJob, rng: random.Random) -> BenchmarkInput:
    """Benchmark input for ``job``: its explicit values or edges, else generated."""
    if job.category is AlgorithmCategory.GRAPH:
        if job.graph_edges is not None:
            graph = Graph.from_edges(job.vertices, job.graph_edges, directed=job.directed)
        else:
            graph = generator.random_graph(job.vertices, job.edges, job.max_weight, rng=rng)
        return GraphInput(graph=graph, start=job.start)

    if job.values is not None:
        values = list(job.values)
    else:
        values = generator.generate_array(
            job.kind,
            job.size,
            min_value=job.min_value,
            max_value=job.max_value,
            fraction=job.fraction,
            unique_values=job.unique_values,
            rng=rng,
        )
    if job.category is AlgorithmCategory.SORTING:
        return ArrayInput(values)
    target = job.target if job.target is not None else pick_target(values, rng)
    return SearchInput(values, target)
