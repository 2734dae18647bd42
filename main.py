#!/usr/bin/env python3


import argparse
import logging
import os
import random
import sys
import threading

from algotracker.config import MODES, load_config
from algotracker.modes import run_compare, run_single, run_sweep

# DFS recurses once per vertex on the current path
RECURSION_LIMIT = 100000
STACK_SIZE = 256 * 1024 * 1024


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Algorithm benchmark runner (config driven)")
    parser.add_argument("--config", required=True, help="Path to the YAML/JSON config file")
    parser.add_argument("--mode", choices=MODES, help="Override the mode set in the config")
    parser.add_argument("--output-dir", help="Override output_dir from the config")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.mode:
        config.mode = args.mode
    if args.output_dir:
        config.output_dir = args.output_dir

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("algotracker")

    rng = random.Random(config.seed) if config.seed is not None else random.Random()
    out_dir = os.path.join(config.output_dir, config.mode)
    logger.info("Mode=%s seed=%s output=%s", config.mode, config.seed, out_dir)

    if config.mode == "sweep":
        store = run_sweep(config, rng, out_dir)
    elif config.mode == "run":
        store = run_single(config, rng, out_dir)
    else:
        store = run_compare(config, rng, out_dir)
    logger.info("Finished with %d results", len(store))
    return 0


def run_with_large_stack(target, stack_size=STACK_SIZE):
    """Call ``target`` in a thread with a ``stack_size`` byte stack.

    The thread stack bounds how deep recursion can go before the interpreter
    crashes, whatever the recursion limit says. Returns what ``target``
    returns and re-raises what it raises (``SystemExit`` included). Platforms
    that refuse the size run ``target`` in the calling thread.
    """
    outcome = {}

    def runner():
        try:
            outcome["value"] = target()
        except BaseException as e:  # handed back to the caller below
            outcome["error"] = e

    try:
        previous = threading.stack_size(stack_size)
    except (ValueError, RuntimeError):
        return target()
    try:
        thread = threading.Thread(target=runner, name="main_runner")
        thread.start()
    finally:
        threading.stack_size(previous)
    thread.join()
    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("value")


if __name__ == "__main__":
    sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))
    sys.exit(run_with_large_stack(main))
