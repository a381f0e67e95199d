"""
Command-line runner for distance-graph.

Features:
- Loads a scenario JSON via distance_graph.scenario.load_scenario_from_json(),
  or runs the built-in four-vertex demo when --config is omitted
- Prints the adjacency matrix and the all-pairs shortest distance listing
- Answers a single-pair query from --start/--end or the scenario's "query"
- Optionally writes all-pairs distances to CSV (--csv)
- Logs a summary metrics line:
    metrics max_finite_distance=... pair_count=... reachable_pairs=... unreachable_pairs=... vertex_count=...
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from distance_graph.logging import get_logger, log_metrics
from distance_graph.render import (
    format_adjacency,
    format_all_pairs,
    format_single,
    summarize,
    write_distances_csv,
)
from distance_graph.scenario import build_graph, demo_scenario, load_scenario_from_json

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="distance-graph",
        description="All-pairs shortest distances (Floyd-Warshall) for a weighted digraph",
    )
    ap.add_argument("--config", default=None, help="Path to scenario JSON (default: built-in demo)")
    ap.add_argument("--start", type=int, default=None, help="Source vertex for a single-pair query")
    ap.add_argument("--end", type=int, default=None, help="Target vertex for a single-pair query")
    ap.add_argument("--csv", default=None, help="Also write all-pairs distances to this CSV path")
    ap.add_argument("--log-level", default="INFO", choices=_LOG_LEVELS, help="Logging level")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    if (args.start is None) != (args.end is None):
        ap.error("--start and --end must be given together")

    logger = get_logger(level=getattr(logging, args.log_level))

    if args.config is not None:
        try:
            scenario = load_scenario_from_json(args.config)
        except ValueError as e:
            ap.error(str(e))
    else:
        scenario = demo_scenario()

    query = scenario.get("query")
    if args.start is not None:
        query = (int(args.start), int(args.end))

    graph = build_graph(scenario)
    logger.info(
        "scenario %s: vertices=%d edges=%d",
        scenario.get("scenario_id") or "<unnamed>", graph.vertex_count, len(scenario["edges"]),
    )

    dist = graph.shortest_distances()
    print(format_adjacency(graph))
    print()
    print(format_all_pairs(dist))

    if query is not None:
        start, end = query
        print()
        print(format_single(start, end, graph.get_shortest_distance(start, end)))

    if args.csv:
        with open(args.csv, "w", encoding="utf-8", newline="") as fp:
            rows = write_distances_csv(dist, fp)
        logger.info("wrote %d rows to %s", rows, args.csv)

    log_metrics(summarize(dist), logger=logger)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
