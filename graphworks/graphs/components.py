"""
Strongly connected components: Kosaraju's two-pass algorithm.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.5 (Strongly connected components).
"""

from typing import List

from ..logging import get_logger
from .traversal import DFSTimestamps, dfs_with_timestamps, explore

logger = get_logger(__name__)


def strongly_connected_components(graph) -> List[List[int]]:
    """
    Decompose a directed graph into strongly connected components.

    1. Run a timestamped DFS over the whole graph to get finish times.
    2. Compute the inverse graph.
    3. Take nodes by decreasing finish time; from each node not yet reached
       in this second pass, run a DFS on the inverse graph. The nodes that
       call finishes, in post-order, form one component.

    Args:
        graph: DirectedGraph or MatrixDirectedGraph.

    Returns:
        List of components in discovery order of the second pass; each
        component lists its nodes in post-order.

    Raises:
        ValueError: If the graph is undirected.

    Complexity: O(n + m) for adjacency-list graphs, O(n^2) for matrix graphs.

    Example:
        >>> G = DirectedGraph.from_matrix([[0, 1, 0], [1, 0, 0], [0, 1, 0]])
        >>> strongly_connected_components(G)
        [[2], [1, 0]]
    """
    if not graph.directed:
        raise ValueError("Strongly connected components require a directed graph")

    first_pass = dfs_with_timestamps(graph)
    inverse = graph.compute_inverse()
    order = first_pass.decreasing_finish_order()
    logger.debug("Kosaraju second pass order: %s", order)

    second_pass = DFSTimestamps(graph.nb_nodes)
    components: List[List[int]] = []
    for v in order:
        if second_pass.is_discovered(v):
            continue
        start = len(second_pass.postorder)
        explore(inverse, v, second_pass)
        components.append(second_pass.postorder[start:])

    logger.debug("Found %d strongly connected component(s)", len(components))
    return components


def is_strongly_connected(graph) -> bool:
    """Return True if every node reaches every other node (vacuously for n <= 1)."""
    return len(strongly_connected_components(graph)) <= 1
