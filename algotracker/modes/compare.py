"""Compare mode.

Runs every configured comparison job: generates its input, benchmarks the
selected algorithms through the comparison engine, logs the ranking and
writes one CSV (plus an optional bar chart) per job. All results end up in
one shared store which is exported as a results CSV at the end.
"""
from __future__ import annotations

import logging
import os
import random
from datetime import datetime

from algotracker.benchmark.comparison import ComparisonEngine
from algotracker.benchmark.results import ResultStore
from algotracker.benchmark.runner import BenchmarkRunner
from algotracker.catalog import DIJKSTRA
from algotracker.config import AppConfig
from algotracker.export import (
    format_comparison,
    format_distances,
    format_results_by_category,
    write_comparison_csv,
    write_results_csv,
)
from algotracker.models import InvalidArgumentError
from algotracker.visualization import next_unique_path, plot_comparison

from .common import build_input, resolve_variants

logger = logging.getLogger("algotracker.compare")


def run_compare(config: AppConfig, rng: random.Random, out_dir: str) -> ResultStore:
    """Execute all ``config.compare`` jobs.

    A job whose algorithms or input are rejected is logged and skipped; the
    remaining jobs still run.

    Returns:
        Store holding every performance result produced, in completion order.
    """
    store = ResultStore()
    engine = ComparisonEngine(BenchmarkRunner(config.protocols), store)
    if not config.compare:
        logger.warning("No comparison jobs configured")
        return store
    os.makedirs(out_dir, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    for idx, job in enumerate(config.compare, start=1):
        logger.info(
            "(%d/%d) Comparing %s algorithms: %s",
            idx,
            len(config.compare),
            job.category.display_name.lower(),
            ", ".join(job.algorithms) or "all",
        )
        try:
            variants = resolve_variants(job.category, job.algorithms)
            benchmark_input = build_input(job, rng)
            comparison = engine.compare(variants, benchmark_input)
        except InvalidArgumentError as e:
            logger.error("Comparison %d skipped: %s", idx, e)
            continue

        logger.info("\n%s", format_comparison(comparison))
        distances = comparison.outputs.get(DIJKSTRA.name)
        if distances is not None:
            logger.debug("\n%s", format_distances(distances, job.start))
        base = f"compare_{job.category.name.lower()}_{idx}_{stamp}"
        write_comparison_csv(comparison, next_unique_path(os.path.join(out_dir, base + ".csv")))
        if config.charts_enabled:
            try:
                path = plot_comparison(
                    comparison, next_unique_path(os.path.join(out_dir, base + ".png"))
                )
                logger.info("Saved comparison chart to %s", path)
            except Exception as e:  # pragma: no cover
                logger.warning("Failed to create comparison chart: %s", e)

    logger.info("Results by category:\n%s", format_results_by_category(store))
    if len(store):
        write_results_csv(
            store.results, next_unique_path(os.path.join(out_dir, f"results_{stamp}.csv"))
        )
    return store
