"""
Text and CSV rendering for adjacency matrices and distance results.

Deterministic behavior:
- Row-major pair order (source, then target).
- Text output uses one decimal; CSV uses fixed 6 decimals.
- +inf renders as "INF" in adjacency listings, "unreachable" in distance
  listings and as an empty cell in CSV.
"""

from __future__ import annotations
import csv
import math
from typing import Dict, List, TextIO

import numpy as np

from .graph import DistanceGraph

UNREACHABLE = "unreachable"

_CSV_HEADER: List[str] = ["source", "target", "distance"]


def _is_unreachable(val: float) -> bool:
    return math.isinf(val) and val > 0


def format_distance(value: float) -> str:
    v = float(value)
    if _is_unreachable(v):
        return UNREACHABLE
    return f"{v:.1f}"


def format_adjacency(graph: DistanceGraph) -> str:
    w = graph.weights
    lines = ["Adjacency matrix:"]
    for row in w:
        lines.append(" ".join("INF" if _is_unreachable(x) else f"{x:.1f}" for x in row))
    return "\n".join(lines)


def format_all_pairs(dist: np.ndarray) -> str:
    d = np.asarray(dist, dtype=float)
    lines = ["Shortest distances between all pairs:"]
    for i in range(d.shape[0]):
        for j in range(d.shape[1]):
            lines.append(f"Shortest distance from {i} to {j}: {format_distance(d[i, j])}")
    return "\n".join(lines)


def format_single(start: int, end: int, value: float) -> str:
    if _is_unreachable(float(value)):
        return f"No path from {start} to {end}"
    return f"Shortest distance from {start} to {end}: {format_distance(value)}"


def write_distances_csv(dist: np.ndarray, fp: TextIO) -> int:
    """
    Write one CSV row per ordered pair with a fixed header.

    Returns:
        int: number of rows written (excluding header).
    """
    d = np.asarray(dist, dtype=float)
    writer = csv.writer(fp, lineterminator="\n")
    writer.writerow(_CSV_HEADER)

    count = 0
    for i in range(d.shape[0]):
        for j in range(d.shape[1]):
            v = float(d[i, j])
            writer.writerow([i, j, "" if _is_unreachable(v) else f"{v:.6f}"])
            count += 1
    return count


def summarize(dist: np.ndarray) -> Dict[str, float]:
    """Reachability summary; diagonal pairs count as reachable pairs."""
    d = np.asarray(dist, dtype=float)
    n = int(d.shape[0]) if d.ndim == 2 else 0
    finite = np.isfinite(d)
    reachable = int(np.count_nonzero(finite))
    pair_count = n * n
    return {
        "vertex_count": float(n),
        "pair_count": float(pair_count),
        "reachable_pairs": float(reachable),
        "unreachable_pairs": float(pair_count - reachable),
        "max_finite_distance": float(d[finite].max()) if reachable else 0.0,
    }


__all__ = [
    "UNREACHABLE",
    "format_distance",
    "format_adjacency",
    "format_all_pairs",
    "format_single",
    "write_distances_csv",
    "summarize",
]
