"""Sweep mode: run a set of array algorithms over growing input sizes.

For every size one input is generated and shared by all selected
algorithms. Results go to a store that is queried for the fastest algorithm
per size and the average time per algorithm, then exported as CSV and as a
scaling chart.
"""
from __future__ import annotations

import logging
import os
import random
from datetime import datetime

from algotracker.benchmark.results import ResultStore
from algotracker.benchmark.runner import ArrayInput, BenchmarkInput, BenchmarkRunner, SearchInput
from algotracker.config import AppConfig
from algotracker.export import write_results_csv
from algotracker.generator import generate_array
from algotracker.models import AlgorithmCategory
from algotracker.visualization import next_unique_path, plot_scaling

from .common import pick_target, resolve_variants

logger = logging.getLogger("algotracker.sweep")


def run_sweep(config: AppConfig, rng: random.Random, out_dir: str) -> ResultStore:
    store = ResultStore()
    sweep = config.sweep
    if sweep is None:
        logger.warning("No sweep section configured")
        return store
    runner = BenchmarkRunner(config.protocols)
    variants = resolve_variants(sweep.category, sweep.algorithms)
    logger.info(
        "Sweep: sizes=%s algorithms=%s",
        ",".join(str(s) for s in sweep.sizes),
        ",".join(v.descriptor.name for v in variants),
    )

    for size in sweep.sizes:
        values = generate_array(
            sweep.kind, size, min_value=sweep.min_value, max_value=sweep.max_value, rng=rng
        )
        benchmark_input: BenchmarkInput
        if sweep.category is AlgorithmCategory.SORTING:
            benchmark_input = ArrayInput(values)
        else:
            benchmark_input = SearchInput(values, pick_target(values, rng))
        for variant in variants:
            outcome = runner.run(variant, benchmark_input)
            store.add(outcome.result)
        logger.info("Size %d: fastest=%s", size, store.fastest_algorithm(size))

    for name in store.algorithm_names():
        avg = store.average_execution_time(name)
        logger.info("Sweep summary %-22s avg=%.3f ms", name, avg)

    os.makedirs(out_dir, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    base = os.path.join(out_dir, f"sweep_{stamp}")
    write_results_csv(store.results, next_unique_path(base + ".csv"))
    if config.charts_enabled:
        try:
            path = plot_scaling(store, next_unique_path(base + ".png"))
            logger.info("Saved scaling chart to %s", path)
        except Exception as e:  # pragma: no cover
            logger.warning("Failed to create scaling chart: %s", e)
    return store
