"""Run configuration loaded from YAML (or JSON) files.

Layout of a config file::

    log_level: INFO
    seed: 42
    output_dir: results
    mode: compare            # compare | sweep | run
    protocol:
      warmup_runs: 1
      sorting_runs: 10
      searching_runs: 100
      graph_runs: 10
    charts:
      enabled: true
    compare:
      - category: sorting
        algorithms: [bubble, quick]
        size: 1000
        kind: random
    sweep:
      category: sorting
      algorithms: [insertion, merge, quick]
      sizes: [100, 500, 1000]
      kind: random
    run:
      - algorithm: dijkstra
        vertices: 4
        graph_edges: [[0, 1, 2], [1, 2, 1], [0, 3, 7]]
        directed: false
      - algorithm: binary
        values: [9, 4, 7, 1]
        target: 7

Compare and run entries accept ``values`` (an explicit array) or
``graph_edges`` (explicit edges, with ``directed``) in place of a generated
input. Unknown keys are ignored.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import yaml

from algotracker import catalog
from algotracker.benchmark.runner import DEFAULT_PROTOCOLS, MeasurementProtocol
from algotracker.models import AlgorithmCategory

MODES = ("compare", "sweep", "run")


@dataclass(slots=True)
class CompareJob:
    """One compare or run job: which algorithms, on what input."""

    category: AlgorithmCategory
    algorithms: List[str] = field(default_factory=list)
    size: int = 1000
    kind: str = "random"
    min_value: int = 0
    max_value: int = 1000
    fraction: float = 0.1
    unique_values: int = 10
    target: Optional[int] = None
    vertices: int = 10
    edges: int = 20
    max_weight: int = 10
    start: int = 0
    # explicit inputs replace the generated ones when set
    values: Optional[List[int]] = None
    graph_edges: Optional[List[Tuple[int, ...]]] = None
    directed: bool = True


@dataclass(slots=True)
class SweepConfig:
    category: AlgorithmCategory = AlgorithmCategory.SORTING
    algorithms: List[str] = field(default_factory=list)
    sizes: List[int] = field(default_factory=lambda: [100, 500, 1000])
    kind: str = "random"
    min_value: int = 0
    max_value: int = 1000


@dataclass(slots=True)
class AppConfig:
    log_level: str = "INFO"
    seed: Optional[int] = None
    output_dir: str = "results"
    mode: str = "compare"
    charts_enabled: bool = True
    protocols: Dict[AlgorithmCategory, MeasurementProtocol] = field(
        default_factory=lambda: dict(DEFAULT_PROTOCOLS)
    )
    compare: List[CompareJob] = field(default_factory=list)
    sweep: Optional[SweepConfig] = None
    run: List[CompareJob] = field(default_factory=list)


def _section(raw: Dict[str, Any], key: str, kind: type) -> Any:
    value = raw.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ValueError(f"Config section '{key}' must be a {kind.__name__}")
    return value


def _parse_protocols(raw: Dict[str, Any]) -> Dict[AlgorithmCategory, MeasurementProtocol]:
    warmup = int(raw.get("warmup_runs", 1))
    runs_keys = {
        AlgorithmCategory.SORTING: "sorting_runs",
        AlgorithmCategory.SEARCHING: "searching_runs",
        AlgorithmCategory.GRAPH: "graph_runs",
    }
    protocols = {}
    for category, key in runs_keys.items():
        default = DEFAULT_PROTOCOLS[category].measured_runs
        protocols[category] = MeasurementProtocol(
            warmup_runs=warmup, measured_runs=int(raw.get(key, default))
        )
    return protocols


def _parse_edges(raw: Any) -> Optional[List[Tuple[int, ...]]]:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ValueError("'graph_edges' must be a list of [u, v] or [u, v, weight] items")
    edges = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) not in (2, 3):
            raise ValueError(f"Bad edge in 'graph_edges': {item!r}")
        edges.append(tuple(int(x) for x in item))
    return edges


def _parse_job(
    raw: Dict[str, Any], category: AlgorithmCategory, algorithms: List[str]
) -> CompareJob:
    target = raw.get("target")
    values = raw.get("values")
    if values is not None and not isinstance(values, list):
        raise ValueError("'values' must be a list of integers")
    return CompareJob(
        category=category,
        algorithms=algorithms,
        size=int(raw.get("size", 1000)),
        kind=str(raw.get("kind", "random")),
        min_value=int(raw.get("min_value", 0)),
        max_value=int(raw.get("max_value", 1000)),
        fraction=float(raw.get("fraction", 0.1)),
        unique_values=int(raw.get("unique_values", 10)),
        target=int(target) if target is not None else None,
        vertices=int(raw.get("vertices", 10)),
        edges=int(raw.get("edges", 20)),
        max_weight=int(raw.get("max_weight", 10)),
        start=int(raw.get("start", 0)),
        values=[int(v) for v in values] if values is not None else None,
        graph_edges=_parse_edges(raw.get("graph_edges")),
        directed=bool(raw.get("directed", True)),
    )


def _parse_compare_job(raw: Any) -> CompareJob:
    if not isinstance(raw, dict):
        raise ValueError("Each 'compare' entry must be a mapping")
    if "category" not in raw:
        raise ValueError("Compare entry is missing 'category'")
    algorithms = [str(a) for a in raw.get("algorithms") or []]
    return _parse_job(raw, AlgorithmCategory.parse(raw["category"]), algorithms)


def _parse_run_job(raw: Any) -> CompareJob:
    """A single-algorithm job; its category comes from the catalog entry."""
    if not isinstance(raw, dict):
        raise ValueError("Each 'run' entry must be a mapping")
    if "algorithm" not in raw:
        raise ValueError("Run entry is missing 'algorithm'")
    name = str(raw["algorithm"])
    category = catalog.get(name).descriptor.category
    if "category" in raw and AlgorithmCategory.parse(raw["category"]) is not category:
        raise ValueError(f"{name} is not in category {raw['category']}")
    return _parse_job(raw, category, [name])


def _parse_sweep(raw: Dict[str, Any]) -> SweepConfig:
    category = AlgorithmCategory.parse(raw.get("category", "sorting"))
    if category is AlgorithmCategory.GRAPH:
        raise ValueError("Sweep supports the sorting and searching categories only")
    sizes = [int(s) for s in raw.get("sizes") or [100, 500, 1000]]
    return SweepConfig(
        category=category,
        algorithms=[str(a) for a in raw.get("algorithms") or []],
        sizes=sizes,
        kind=str(raw.get("kind", "random")),
        min_value=int(raw.get("min_value", 0)),
        max_value=int(raw.get("max_value", 1000)),
    )


def parse_config(raw: Dict[str, Any] | None) -> AppConfig:
    """Build an ``AppConfig`` from an already decoded mapping."""
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ValueError("Config root must be a mapping")
    mode = str(raw.get("mode", "compare"))
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode} (expected one of {', '.join(MODES)})")
    seed = raw.get("seed")
    charts = _section(raw, "charts", dict)
    sweep_raw = raw.get("sweep")
    if sweep_raw is not None and not isinstance(sweep_raw, dict):
        raise ValueError("Config section 'sweep' must be a dict")
    return AppConfig(
        log_level=str(raw.get("log_level", "INFO")),
        seed=int(seed) if seed is not None else None,
        output_dir=str(raw.get("output_dir", "results")),
        mode=mode,
        charts_enabled=bool(charts.get("enabled", True)),
        protocols=_parse_protocols(_section(raw, "protocol", dict)),
        compare=[_parse_compare_job(j) for j in _section(raw, "compare", list)],
        sweep=_parse_sweep(sweep_raw) if sweep_raw is not None else None,
        run=[_parse_run_job(j) for j in _section(raw, "run", list)],
    )


def load_config(config_file: str = "config.yaml") -> AppConfig:
    """Load configuration from a YAML or JSON file."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    if config_file.endswith((".yml", ".yaml")):
        raw = yaml.safe_load(text) or {}
    else:
        raw = json.loads(text)
    return parse_config(raw)
