import io
import math

import numpy as np

from distance_graph import DistanceGraph
from distance_graph.render import (
    format_adjacency,
    format_all_pairs,
    format_distance,
    format_single,
    summarize,
    write_distances_csv,
)


def _mk_graph():
    g = DistanceGraph(3)
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, 1.5)
    return g


def test_format_distance():
    assert format_distance(10) == "10.0"
    assert format_distance(-2.5) == "-2.5"
    assert format_distance(math.inf) == "unreachable"


def test_format_adjacency_uses_inf_label():
    text = format_adjacency(_mk_graph())
    assert text.splitlines() == [
        "Adjacency matrix:",
        "0.0 4.0 INF",
        "INF 0.0 1.5",
        "INF INF 0.0",
    ]


def test_format_all_pairs_lists_every_ordered_pair():
    lines = format_all_pairs(_mk_graph().shortest_distances()).splitlines()
    assert lines[0] == "Shortest distances between all pairs:"
    assert len(lines) == 1 + 9
    assert "Shortest distance from 0 to 2: 5.5" in lines
    assert "Shortest distance from 2 to 0: unreachable" in lines
    assert lines[1] == "Shortest distance from 0 to 0: 0.0"


def test_format_single():
    assert format_single(0, 3, 10.0) == "Shortest distance from 0 to 3: 10.0"
    assert format_single(1, 0, math.inf) == "No path from 1 to 0"


def test_write_distances_csv_basic():
    dist = _mk_graph().shortest_distances()
    buf = io.StringIO()
    nrows = write_distances_csv(dist, buf)
    assert nrows == 9

    lines = buf.getvalue().strip().splitlines()
    assert lines[0] == "source,target,distance"
    assert lines[1] == "0,0,0.000000"
    assert lines[3] == "0,2,5.500000"
    # Unreachable serialized as empty cell
    assert lines[4] == "1,0,"


def test_write_distances_csv_empty_matrix_writes_header_only():
    buf = io.StringIO()
    assert write_distances_csv(DistanceGraph(0).shortest_distances(), buf) == 0
    assert buf.getvalue() == "source,target,distance\n"


def test_summarize_counts_reachability():
    s = summarize(_mk_graph().shortest_distances())
    assert s["vertex_count"] == 3.0
    assert s["pair_count"] == 9.0
    assert s["reachable_pairs"] == 6.0
    assert s["unreachable_pairs"] == 3.0
    assert s["max_finite_distance"] == 5.5
    assert all(math.isfinite(v) for v in s.values())


def test_summarize_empty():
    s = summarize(np.zeros((0, 0)))
    assert s["pair_count"] == 0.0
    assert s["max_finite_distance"] == 0.0
