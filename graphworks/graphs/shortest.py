"""
Single-source shortest paths: Dijkstra's algorithm.

``dijkstra`` is the textbook O(n^2) form over an adjacency matrix: each round
finalizes the unmarked node of minimum tentative distance found by a linear
scan. ``dijkstra_heap`` drives the same relaxation with BinaryHeapEdge and
lazy deletion, in O((n + m) log n).

Both accept any graph container; adjacency-list graphs are projected with
``to_adjacency_matrix()`` (so unweighted graphs count one per arc).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..logging import get_logger
from .heap import BinaryHeapEdge
from .utils import check_label, reconstruct_path

logger = get_logger(__name__)


@dataclass
class ShortestPathResult:
    """
    Distances and predecessors from one source.

    Attributes:
        source: Source node.
        dist: Shortest distance per node; ``math.inf`` when unreachable.
        pred: Predecessor on a shortest path per node; ``pred[source] ==
            source`` and None when unreachable.
    """

    source: int
    dist: List[float]
    pred: List[Optional[int]]

    def is_reachable(self, v: int) -> bool:
        v = check_label(v, len(self.pred))
        return self.pred[v] is not None

    @property
    def unreachable(self) -> List[int]:
        """Nodes the source cannot reach, in label order."""
        return [v for v, p in enumerate(self.pred) if p is None]

    def path_to(self, target: int) -> Optional[List[int]]:
        """
        Return the shortest path from the source to ``target``, or None.

        Raises:
            IndexError: If target is out of range.
        """
        return reconstruct_path(self.pred, self.source, target)


def _prepare(graph, source: int):
    mat = graph.to_adjacency_matrix()
    n = mat.shape[0]
    source = check_label(source, n)

    negative = np.argwhere(mat < 0)
    if negative.size:
        u, v = (int(k) for k in negative[0])
        raise ValueError(
            f"Dijkstra requires non-negative weights. "
            f"Found negative weight {mat[u, v]} on arc ({u}, {v})"
        )

    dist: List[float] = [math.inf] * n
    pred: List[Optional[int]] = [None] * n
    dist[source] = 0
    pred[source] = source
    return mat, source, dist, pred


def dijkstra(graph, source: int) -> ShortestPathResult:
    """
    Dijkstra's algorithm with linear-scan minimum selection.

    Each round picks the unmarked node with the smallest finite distance
    (lowest label on ties), marks it, and relaxes the arcs towards its
    unmarked successors with a strict improvement test. The loop stops once
    no unmarked node has a finite distance.

    Args:
        graph: Graph with non-negative weights, usually a MatrixDirectedGraph.
        source: Source node.

    Returns:
        ShortestPathResult; unreachable nodes keep ``math.inf`` and None.

    Raises:
        ValueError: If the graph has a negative weight.
        IndexError: If source is out of range.

    Complexity: O(n^2).

    Example:
        >>> G = MatrixDirectedGraph.from_matrix([[0, 4, 1], [0, 0, 0], [0, 2, 0]], weighted=True)
        >>> dijkstra(G, 0).dist
        [0, 3, 1]
    """
    mat, source, dist, pred = _prepare(graph, source)
    n = len(dist)
    mark = [False] * n

    while True:
        x = -1
        best = math.inf
        for y in range(n):
            if not mark[y] and dist[y] < best:
                x = y
                best = dist[y]
        if x == -1:
            break

        mark[x] = True
        for y in np.flatnonzero(mat[x]).tolist():
            if mark[y]:
                continue
            candidate = dist[x] + int(mat[x, y])
            if candidate < dist[y]:
                dist[y] = candidate
                pred[y] = x

    result = ShortestPathResult(source, dist, pred)
    logger.debug(
        "Dijkstra from %d reached %d of %d nodes", source, n - len(result.unreachable), n
    )
    return result


def dijkstra_heap(graph, source: int) -> ShortestPathResult:
    """
    Dijkstra's algorithm driven by a binary heap of edges.

    Heap entries are ``(pred, node)`` edges keyed by the tentative distance
    of ``node``. Outdated entries are skipped when popped. Distances always
    equal those of :func:`dijkstra`; predecessors may differ between
    equally short paths.

    Raises:
        ValueError: If the graph has a negative weight.
        IndexError: If source is out of range.

    Complexity: O((n + m) log n) heap operations.
    """
    mat, source, dist, pred = _prepare(graph, source)
    n = len(dist)
    mark = [False] * n

    heap = BinaryHeapEdge()
    heap.insert(source, source, 0)
    while heap:
        x = heap.remove().v
        if mark[x]:
            continue

        mark[x] = True
        for y in np.flatnonzero(mat[x]).tolist():
            if mark[y]:
                continue
            candidate = dist[x] + int(mat[x, y])
            if candidate < dist[y]:
                dist[y] = candidate
                pred[y] = x
                heap.insert(x, y, candidate)

    result = ShortestPathResult(source, dist, pred)
    logger.debug(
        "Heap Dijkstra from %d reached %d of %d nodes", source, n - len(result.unreachable), n
    )
    return result
