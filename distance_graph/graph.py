"""Dense weighted digraph with Floyd-Warshall all-pairs distances.

The adjacency matrix is a square float64 array where cell (i, j) holds the
direct edge weight i -> j, 0.0 on the diagonal and +inf for "no edge".

Invariants
- Shape is fixed at construction: (vertex_count, vertex_count).
- add_edge overwrites; it never accumulates or takes a minimum.
- Queries work on a fresh copy and never mutate the stored matrix.

Out-of-range vertex indices are not errors: add_edge ignores them and
get_shortest_distance reports +inf, the same value used for unreachable pairs.
"""
from __future__ import annotations

import logging
import math
import operator

import numpy as np

logger = logging.getLogger(__name__)


def _as_index(x: object, name: str) -> int:
    try:
        return operator.index(x)  # type: ignore[arg-type]
    except TypeError as e:
        raise TypeError(f"{name} must be an integer vertex index, got {type(x).__name__}") from e


class DistanceGraph:
    """Weighted directed graph over vertices 0..vertex_count-1."""

    def __init__(self, vertex_count: int) -> None:
        n = _as_index(vertex_count, "vertex_count")
        if n < 0:
            raise ValueError(f"vertex_count must be >= 0, got {n}")
        self._n = n
        self._weights = np.full((n, n), np.inf, dtype=float)
        np.fill_diagonal(self._weights, 0.0)

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def weights(self) -> np.ndarray:
        """Copy of the adjacency matrix."""
        return self._weights.copy()

    def _in_range(self, v: int) -> bool:
        return 0 <= v < self._n

    def add_edge(self, source: int, target: int, weight: float) -> None:
        """
        Set the weight of directed edge source -> target.

        Later insertions for the same pair replace earlier ones. Writing the
        diagonal is allowed and breaks the zero self-distance; callers should
        not do that. Indices outside [0, vertex_count) leave the graph unchanged.
        """
        u = _as_index(source, "source")
        v = _as_index(target, "target")
        try:
            w = float(weight)
        except (TypeError, ValueError) as e:
            raise TypeError("weight must be a real number convertible to float") from e
        if not (self._in_range(u) and self._in_range(v)):
            logger.debug("ignoring edge %d -> %d: vertex out of range [0, %d)", u, v, self._n)
            return
        self._weights[u, v] = w

    def shortest_distances(self) -> np.ndarray:
        """
        Run Floyd-Warshall on a copy of the adjacency matrix.

        The intermediate vertex k is the outermost loop; updates are applied in
        place in (k, i, j) order, so exactly vertex_count**3 relaxations are
        checked. With a negative cycle present the result is deterministic but
        understates the affected distances.

        Returns
        -------
        np.ndarray
            New (vertex_count, vertex_count) array of shortest distances,
            +inf where no path exists.
        """
        n = self._n
        dist = self._weights.tolist()
        for k in range(n):
            row_k = dist[k]
            for i in range(n):
                row_i = dist[i]
                for j in range(n):
                    # row_i[k] is re-read each step: j == k can lower it
                    via = row_i[k] + row_k[j]
                    if via < row_i[j]:
                        row_i[j] = via
        return np.array(dist, dtype=float).reshape(n, n)

    def get_shortest_distance(self, start: int, end: int) -> float:
        """Shortest distance start -> end, or +inf if unreachable or out of range."""
        s = _as_index(start, "start")
        e = _as_index(end, "end")
        if not (self._in_range(s) and self._in_range(e)):
            return math.inf
        return float(self.shortest_distances()[s, e])

    def __repr__(self) -> str:
        off_diag = ~np.eye(self._n, dtype=bool)
        edges = int(np.count_nonzero(np.isfinite(self._weights) & off_diag))
        return f"DistanceGraph(vertex_count={self._n}, finite_off_diagonal={edges})"


__all__ = ["DistanceGraph"]
