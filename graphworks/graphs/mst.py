"""
Minimum spanning tree: Prim's algorithm driven by BinaryHeapEdge.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

from dataclasses import dataclass
from typing import List

from ..logging import get_logger
from .heap import BinaryHeapEdge
from .primitives import Edge
from .utils import check_label

logger = get_logger(__name__)


@dataclass
class MSTResult:
    """
    Tree grown by Prim's algorithm.

    Attributes:
        edges: Tree edges in the order they were added; ``edge.u`` is the
            endpoint already in the tree, ``edge.v`` the one it brought in.
        total_weight: Sum of the tree edge weights.
        nb_nodes: Number of nodes of the input graph.
        visited: Per-node flag, True for nodes connected to the start.
    """

    edges: List[Edge]
    total_weight: int
    nb_nodes: int
    visited: List[bool]

    @property
    def is_spanning(self) -> bool:
        """True if the tree covers every node (``nb_nodes - 1`` edges)."""
        return len(self.edges) == self.nb_nodes - 1

    @property
    def unreached(self) -> List[int]:
        """Nodes not connected to the start vertex."""
        return [v for v, seen in enumerate(self.visited) if not seen]


def prim(graph, start: int = 0) -> MSTResult:
    """
    Prim's algorithm for a minimum spanning tree.

    The heap is seeded with the edges from ``start`` to unvisited nodes. Each
    step removes the lightest edge; if both endpoints are already visited it
    would close a cycle and is dropped, otherwise it joins the tree, its new
    endpoint is marked, and that endpoint's edges to unvisited nodes are
    pushed. The loop ends when the heap empties or every node is visited.

    On a disconnected graph the result spans only the component of
    ``start``: ``is_spanning`` is False and ``unreached`` lists the rest.

    Args:
        graph: UndirectedGraph, or MatrixUndirectedGraph (converted first).
        start: Start vertex.

    Returns:
        MSTResult.

    Raises:
        ValueError: If the graph is directed.
        IndexError: If start is out of range.

    Complexity: O(m log m).

    Example:
        >>> G = UndirectedGraph.from_matrix([[0, 1, 3], [1, 0, 2], [3, 2, 0]], weighted=True)
        >>> prim(G, 0).total_weight
        3
    """
    if graph.directed:
        raise ValueError("Prim's algorithm requires an undirected graph")
    if hasattr(graph, "to_list_graph"):
        graph = graph.to_list_graph()

    n = graph.nb_nodes
    start = check_label(start, n)

    visited = [False] * n
    visited[start] = True
    nb_visited = 1

    heap = BinaryHeapEdge()
    for edge in graph.incident_edges(start):
        far = edge.other(start)
        if not visited[far]:
            heap.insert(start, far, edge.weight)

    tree: List[Edge] = []
    while heap and nb_visited < n:
        edge = heap.remove()
        if visited[edge.u] and visited[edge.v]:
            continue

        new_node = edge.v if visited[edge.u] else edge.u
        tree.append(edge)
        visited[new_node] = True
        nb_visited += 1

        for incident in graph.incident_edges(new_node):
            far = incident.other(new_node)
            if not visited[far]:
                heap.insert(new_node, far, incident.weight)

    result = MSTResult(tree, sum(edge.weight for edge in tree), n, visited)
    if not result.is_spanning:
        logger.info(
            "Prim from %d reached %d of %d nodes; the graph is disconnected",
            start,
            nb_visited,
            n,
        )
    return result
