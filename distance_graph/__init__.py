from __future__ import annotations

# Public API surface: core graph, scenario loading, rendering

from .graph import DistanceGraph
from .scenario import build_graph, demo_scenario, load_scenario_from_json, normalize_scenario
from .render import (
    UNREACHABLE,
    format_adjacency,
    format_all_pairs,
    format_distance,
    format_single,
    summarize,
    write_distances_csv,
)

__all__ = [
    "DistanceGraph",
    "build_graph",
    "demo_scenario",
    "load_scenario_from_json",
    "normalize_scenario",
    "UNREACHABLE",
    "format_adjacency",
    "format_all_pairs",
    "format_distance",
    "format_single",
    "summarize",
    "write_distances_csv",
]
