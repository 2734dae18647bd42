"""Execution modes driven by the run configuration."""

from algotracker.modes.compare import run_compare
from algotracker.modes.run import run_single
from algotracker.modes.sweep import run_sweep

__all__ = ["run_compare", "run_single", "run_sweep"]
