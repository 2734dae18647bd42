import itertools
import os
from pathlib import Path
from typing import Iterable, List, Optional

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from algotracker.benchmark.comparison import Comparison  # noqa: E402
from algotracker.benchmark.results import ResultStore  # noqa: E402


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def plot_comparison(comparison: Comparison, save_path: str | Path, title: Optional[str] = None) -> str:
    """Horizontal bar chart of a ranking, fastest on top.

    Each bar is annotated with its average time; the speedup goes into the
    title.
    """
    names = [e.name for e in comparison.ranking]
    times = [e.average_ms for e in comparison.ranking]
    height = max(2.5, 0.6 * len(names) + 1.5)
    fig, ax = plt.subplots(figsize=(10, height), constrained_layout=True)
    cmap = plt.get_cmap("tab10")
    colors = [cmap(i % 10) for i in range(len(names))]
    bars = ax.barh(range(len(names)), times, color=colors, alpha=0.85, edgecolor="black", linewidth=0.6)
    ax.set_yticks(range(len(names)))
    ax.set_yticklabels(names)
    ax.invert_yaxis()
    for bar, t in zip(bars, times):
        ax.annotate(
            f"{t:.3f} ms",
            xy=(bar.get_width(), bar.get_y() + bar.get_height() / 2),
            xytext=(4, 0),
            textcoords="offset points",
            va="center",
            fontsize=9,
        )
    ax.set_xlabel("Average execution time [ms]", fontsize=12)
    ax.set_title(
        title or f"Algorithm comparison (speedup {comparison.speedup:.2f}x)",
        fontsize=14,
        fontweight="bold",
    )
    ax.grid(True, alpha=0.25, axis="x", linestyle="--", linewidth=0.7)

    save_path = str(save_path)
    _ensure_dir(os.path.dirname(save_path))
    fig.savefig(save_path, dpi=180)
    plt.close(fig)
    return save_path


def plot_scaling(
    store: ResultStore,
    save_path: str | Path,
    algorithms: Optional[Iterable[str]] = None,
    log_scale: bool = False,
) -> str:
    """Average time against input size, one line per algorithm.

    Points are the store's averages per (algorithm, input size), so repeated
    measurements of the same size are folded into one point.
    """
    names: List[str] = list(algorithms) if algorithms is not None else store.algorithm_names()
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    for name in names:
        per_size: dict[int, list[float]] = {}
        for r in store.by_algorithm(name):
            per_size.setdefault(r.input_size, []).append(r.execution_time_ms)
        if not per_size:
            continue
        sizes = sorted(per_size)
        avgs = [sum(per_size[s]) / len(per_size[s]) for s in sizes]
        ax.plot(
            sizes,
            avgs,
            label=name,
            linewidth=2,
            marker="o",
            markersize=4,
            markerfacecolor="white",
            markeredgewidth=1.0,
        )
    if log_scale:
        ax.set_yscale("log")
    ax.set_xlabel("Input size", fontsize=12)
    ax.set_ylabel("Average execution time [ms]", fontsize=12)
    ax.set_title("Scaling", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(
            loc="center left",
            bbox_to_anchor=(1.02, 0.5),
            frameon=False,
            fontsize=9,
            borderaxespad=0.0,
        )

    save_path = str(save_path)
    _ensure_dir(os.path.dirname(save_path))
    fig.savefig(save_path, dpi=180)
    plt.close(fig)
    return save_path


def next_unique_path(path: str | Path) -> str:
    """``path`` if it is free, else the first free ``<stem>_<n><suffix>`` beside it."""
    p = Path(path)
    numbered = (p.with_name(f"{p.stem}_{n}{p.suffix}") for n in itertools.count(1))
    return str(next(c for c in itertools.chain([p], numbered) if not c.exists()))
