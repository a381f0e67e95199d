from __future__ import annotations

"""
Scenario loader: JSON graph descriptions -> DistanceGraph.

Inputs (scenario: dict):
- vertices: int >= 0
- edges: optional List of either
    [source, target, weight]            (positional triple)
    {"source": int, "target": int, "weight": float}
- query: optional {"start": int, "end": int}
- scenario_id: optional str

Normalized form:
    {"scenario_id": str | None, "vertices": int,
     "edges": [(int, int, float), ...], "query": (int, int) | None}

Edge endpoints are not range-checked here; build_graph() hands them to
DistanceGraph.add_edge, which drops out-of-range edges silently. The loader
only counts them and logs a warning.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from distance_graph.graph import DistanceGraph

logger = logging.getLogger(__name__)

Edge = Tuple[int, int, float]

_ALLOWED_KEYS = {"scenario_id", "vertices", "edges", "query"}


def _parse_int(val: Any, what: str) -> int:
    # bool is an int subclass but never a meaningful vertex id
    if isinstance(val, bool) or not isinstance(val, int):
        raise ValueError(f"{what} must be an integer, got {val!r}")
    return int(val)


def _parse_weight(val: Any, what: str) -> float:
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise ValueError(f"{what} must be a number, got {val!r}")
    return float(val)


def _parse_edge(entry: Any, idx: int) -> Edge:
    where = f"edges[{idx}]"
    if isinstance(entry, dict):
        missing = [k for k in ("source", "target", "weight") if k not in entry]
        if missing:
            raise ValueError(f"{where} missing required fields: {missing}")
        extra = sorted(k for k in entry.keys() if k not in ("source", "target", "weight"))
        if extra:
            raise ValueError(f"{where} has unknown fields: {extra}")
        src, dst, w = entry["source"], entry["target"], entry["weight"]
    elif isinstance(entry, (list, tuple)):
        if len(entry) != 3:
            raise ValueError(f"{where} must be [source, target, weight]")
        src, dst, w = entry
    else:
        raise ValueError(f"{where} must be a list or an object")
    return (
        _parse_int(src, f"{where}.source"),
        _parse_int(dst, f"{where}.target"),
        _parse_weight(w, f"{where}.weight"),
    )


def _parse_query(raw: Any) -> Optional[Tuple[int, int]]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("query must be an object when present")
    if "start" not in raw or "end" not in raw:
        raise ValueError("query requires both 'start' and 'end'")
    return _parse_int(raw["start"], "query.start"), _parse_int(raw["end"], "query.end")


def normalize_scenario(raw: Any) -> Dict[str, Any]:
    """
    Validate an in-memory scenario dict and return its normalized form.

    Raises:
      ValueError with a clear message for malformed sections or missing fields.
    """
    if not isinstance(raw, dict):
        raise ValueError("scenario root must be a JSON object")

    extra = sorted(k for k in raw.keys() if k not in _ALLOWED_KEYS)
    if extra:
        raise ValueError(f"unknown top-level keys in scenario: {extra}")

    if "vertices" not in raw:
        raise ValueError("scenario.vertices is required")
    n = _parse_int(raw["vertices"], "scenario.vertices")
    if n < 0:
        raise ValueError("scenario.vertices must be >= 0")

    edges_raw = raw.get("edges") or []
    if not isinstance(edges_raw, list):
        raise ValueError("scenario.edges must be a list when present")
    edges: List[Edge] = [_parse_edge(e, i) for i, e in enumerate(edges_raw)]

    sid = raw.get("scenario_id")
    if sid is not None and not isinstance(sid, str):
        raise ValueError("scenario_id must be a string when present")

    return {
        "scenario_id": sid,
        "vertices": n,
        "edges": edges,
        "query": _parse_query(raw.get("query")),
    }


def load_scenario_from_json(path: str) -> Dict[str, Any]:
    """Load a scenario JSON file and return its normalized form (see normalize_scenario)."""
    if not isinstance(path, str) or not path:
        raise ValueError("load_scenario_from_json: path must be a non-empty string")
    if not os.path.exists(path):
        raise ValueError(f"load_scenario_from_json: file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"load_scenario_from_json: failed to parse JSON: {e}") from e

    return normalize_scenario(raw)


def build_graph(scenario: Dict[str, Any]) -> DistanceGraph:
    """Construct a DistanceGraph and insert the scenario's edges in order."""
    n = int(scenario["vertices"])
    graph = DistanceGraph(n)
    dropped = 0
    for u, v, w in scenario.get("edges", []):
        if not (0 <= u < n and 0 <= v < n):
            dropped += 1
        graph.add_edge(u, v, w)
    if dropped:
        logger.warning(
            "scenario %s: %d edge(s) reference vertices outside [0, %d) and were ignored",
            scenario.get("scenario_id") or "<unnamed>", dropped, n,
        )
    return graph


def demo_scenario() -> Dict[str, Any]:
    """Four-vertex reference graph; shortest 0 -> 3 is 10.0 via vertex 2."""
    return {
        "scenario_id": "demo",
        "vertices": 4,
        "edges": [
            (0, 1, 5.0),
            (0, 2, 3.0),
            (1, 2, 2.0),
            (1, 3, 6.0),
            (2, 3, 7.0),
        ],
        "query": (0, 3),
    }


__all__ = ["normalize_scenario", "load_scenario_from_json", "build_graph", "demo_scenario"]
