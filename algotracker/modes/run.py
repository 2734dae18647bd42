"""Run mode: measure single algorithms and show what they produced.

Each ``run`` entry names one algorithm and its input. The output (sorted
array, found index, visit order or distance table) is logged next to the
measured time and the algorithm's descriptor. Rejected entries are logged
and skipped.
"""
from __future__ import annotations

import logging
import os
import random
from datetime import datetime

from algotracker import catalog
from algotracker.benchmark.results import ResultStore
from algotracker.benchmark.runner import BenchmarkRunner
from algotracker.config import AppConfig
from algotracker.export import format_results_by_category, format_run, write_results_csv
from algotracker.models import InvalidArgumentError
from algotracker.visualization import next_unique_path

from .common import build_input

logger = logging.getLogger("algotracker.run")


def run_single(config: AppConfig, rng: random.Random, out_dir: str) -> ResultStore:
    store = ResultStore()
    if not config.run:
        logger.warning("No run entries configured")
        return store
    runner = BenchmarkRunner(config.protocols)

    for idx, job in enumerate(config.run, start=1):
        name = job.algorithms[0]
        logger.info("(%d/%d) Running %s", idx, len(config.run), name)
        try:
            variant = catalog.get(name)
            benchmark_input = build_input(job, rng)
            outcome = runner.run(variant, benchmark_input)
        except InvalidArgumentError as e:
            logger.error("Run %d skipped: %s", idx, e)
            continue
        store.add(outcome.result)
        logger.info("\n%s", format_run(variant, benchmark_input, outcome))

    logger.info("Results by category:\n%s", format_results_by_category(store))
    if len(store):
        os.makedirs(out_dir, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        write_results_csv(
            store.results, next_unique_path(os.path.join(out_dir, f"results_{stamp}.csv"))
        )
    return store
