"""Pytest configuration, shared fixtures & custom summary hook.

Also ensures the project root is on sys.path for imports.
"""

from __future__ import annotations

import random
import sys
from collections import Counter, defaultdict
from pathlib import Path

import pytest

# Ensure project root is on sys.path so "import algotracker" and "import main" work
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from algotracker.models import Graph  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def small_graph() -> Graph:
    """0->1, 0->2, 1->3 with unit weights plus an isolated vertex 4."""
    return Graph.from_edges(5, [(0, 1, 1), (0, 2, 1), (1, 3, 1)])


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:
    """Per-module pass/fail counts, grouped by the component under test."""
    per_module: dict[str, Counter] = defaultdict(Counter)
    for outcome in ("passed", "failed", "error", "skipped"):
        for rep in terminalreporter.stats.get(outcome, []):
            if getattr(rep, "when", "call") not in ("call", "setup"):
                continue
            module = rep.nodeid.split("::", 1)[0].rsplit("/", 1)[-1]
            per_module[module.removeprefix("test_").removesuffix(".py")][outcome] += 1
    if not per_module:
        return

    terminalreporter.section("Benchmark suite summary", sep="=")
    width = max(len(name) for name in per_module)
    for name in sorted(per_module):
        counts = per_module[name]
        line = f"{name:<{width}}  passed={counts['passed']:<4d} failed={counts['failed']}"
        if counts["error"] or counts["skipped"]:
            line += f" errors={counts['error']} skipped={counts['skipped']}"
        terminalreporter.write_line(line)
    failed = terminalreporter.stats.get("failed", [])
    if failed:
        terminalreporter.write_line("Failed tests:")
        for rep in failed:
            terminalreporter.write_line(f"  - {rep.nodeid}")
