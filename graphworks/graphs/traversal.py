"""
Graph traversal algorithms: BFS and timestamped DFS.

Every function accepts any graph container. Directed graphs are followed
along successors, undirected graphs along neighbours, in incidence-list order
for adjacency-list graphs and increasing index order for matrix graphs.

DFS bookkeeping lives in a DFSTimestamps value created per call (or passed
in explicitly to continue a traversal); nothing is shared between calls. The
DFS uses an explicit stack of (node, successors, next-index) frames, so graph
depth is not limited by the interpreter's recursion limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS, parenthesis theorem).
"""

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, List, Optional

from ..logging import get_logger
from .utils import check_label

logger = get_logger(__name__)


def successor_function(graph) -> Callable[[int], List[int]]:
    """Return the callable that lists the nodes reachable in one step from a node."""
    if graph.directed:
        return graph.successors
    return graph.neighbors


def bfs(graph, source: int) -> List[int]:
    """
    Breadth-first search from a source node.

    Args:
        graph: Graph to traverse.
        source: Label of the start node.

    Returns:
        Nodes in BFS visitation order, starting with ``source``. Nodes not
        reachable from ``source`` do not appear.

    Raises:
        IndexError: If source is out of range.

    Complexity: O(n + m).

    Example:
        >>> G = DirectedGraph.from_matrix([[0, 1, 1], [0, 0, 1], [0, 0, 0]])
        >>> bfs(G, 0)
        [0, 1, 2]
    """
    source = check_label(source, graph.nb_nodes)
    next_nodes = successor_function(graph)

    mark = [False] * graph.nb_nodes
    mark[source] = True
    queue = deque([source])
    order: List[int] = []

    while queue:
        v = queue.popleft()
        order.append(v)
        for w in next_nodes(v):
            if not mark[w]:
                mark[w] = True
                queue.append(w)

    return order


class NodeState(IntEnum):
    """Exploration state of a node during DFS."""

    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


@dataclass
class DFSTimestamps:
    """
    State of a timestamped depth-first traversal.

    Timestamps come from a single clock starting at 1; a discovery or finish
    time of 0 means the event has not happened yet. A node is in progress
    between its discovery and its finish.

    Attributes:
        nb_nodes: Number of nodes of the traversed graph.
        state: Per-node NodeState.
        discovery: Per-node discovery time.
        finish: Per-node finish time.
        parent: Per-node DFS-forest parent (None for roots and unreached nodes).
        preorder: Nodes in discovery order.
        postorder: Nodes in finish order.
        clock: Last timestamp handed out.
    """

    nb_nodes: int
    state: List[NodeState] = field(init=False)
    discovery: List[int] = field(init=False)
    finish: List[int] = field(init=False)
    parent: List[Optional[int]] = field(init=False)
    preorder: List[int] = field(init=False, default_factory=list)
    postorder: List[int] = field(init=False, default_factory=list)
    clock: int = field(init=False, default=0)

    def __post_init__(self):
        self.state = [NodeState.UNVISITED] * self.nb_nodes
        self.discovery = [0] * self.nb_nodes
        self.finish = [0] * self.nb_nodes
        self.parent = [None] * self.nb_nodes

    def _discover(self, v: int, parent: Optional[int]) -> None:
        self.clock += 1
        self.discovery[v] = self.clock
        self.state[v] = NodeState.IN_PROGRESS
        self.parent[v] = parent
        self.preorder.append(v)

    def _finish(self, v: int) -> None:
        self.clock += 1
        self.finish[v] = self.clock
        self.state[v] = NodeState.DONE
        self.postorder.append(v)

    def is_discovered(self, v: int) -> bool:
        return self.state[v] != NodeState.UNVISITED

    def is_descendant(self, x: int, y: int) -> bool:
        """
        Return True if ``y`` is a proper descendant of ``x`` in the DFS forest.

        Uses the parenthesis property on finished nodes:
        ``discovery[x] < discovery[y] < finish[y] < finish[x]``.

        Raises:
            IndexError: If x or y is out of range.
        """
        x = check_label(x, self.nb_nodes)
        y = check_label(y, self.nb_nodes)
        return (
            self.state[x] == NodeState.DONE
            and self.state[y] == NodeState.DONE
            and self.discovery[x] < self.discovery[y] < self.finish[y] < self.finish[x]
        )

    def decreasing_finish_order(self) -> List[int]:
        """Return the nodes sorted by decreasing finish time."""
        return sorted(range(self.nb_nodes), key=lambda v: self.finish[v], reverse=True)

    @property
    def roots(self) -> List[int]:
        """Roots of the DFS forest, in discovery order."""
        return [v for v in self.preorder if self.parent[v] is None]


def explore(graph, source: int, timestamps: Optional[DFSTimestamps] = None) -> DFSTimestamps:
    """
    Depth-first exploration from ``source``, assigning discovery and finish times.

    Passing the same ``timestamps`` to successive calls continues one clock
    across several DFS trees; nodes discovered by earlier calls are not
    revisited. Exploring from an already discovered node does nothing.

    Args:
        graph: Graph to traverse.
        source: Label of the start node.
        timestamps: Traversal state to continue; a fresh one when None.

    Returns:
        The (updated) traversal state.

    Raises:
        IndexError: If source is out of range.
        ValueError: If ``timestamps`` was sized for another graph.
    """
    n = graph.nb_nodes
    source = check_label(source, n)
    if timestamps is None:
        timestamps = DFSTimestamps(n)
    elif timestamps.nb_nodes != n:
        raise ValueError(
            f"Traversal state covers {timestamps.nb_nodes} nodes but the graph has {n}"
        )

    if timestamps.is_discovered(source):
        return timestamps

    next_nodes = successor_function(graph)
    timestamps._discover(source, None)
    # Frames are [node, successors, index of the next successor to try]
    stack = [[source, next_nodes(source), 0]]

    while stack:
        frame = stack[-1]
        node, successors, index = frame
        if index < len(successors):
            frame[2] = index + 1
            w = successors[index]
            if not timestamps.is_discovered(w):
                timestamps._discover(w, node)
                stack.append([w, next_nodes(w), 0])
        else:
            stack.pop()
            timestamps._finish(node)

    return timestamps


def dfs_with_timestamps(graph, order: Optional[Iterable[int]] = None) -> DFSTimestamps:
    """
    Timestamped DFS over the whole graph.

    A new DFS tree is started from every node still undiscovered, taking
    start nodes in label order (or in ``order`` when given).

    Args:
        graph: Graph to traverse.
        order: Optional sequence of start candidates.

    Returns:
        Fresh traversal state with every node discovered and finished when
        ``order`` covers all nodes.

    Complexity: O(n + m).

    Example:
        >>> G = DirectedGraph.from_matrix([[0, 1], [0, 0]])
        >>> ts = dfs_with_timestamps(G)
        >>> ts.discovery, ts.finish
        ([1, 2], [4, 3])
    """
    timestamps = DFSTimestamps(graph.nb_nodes)
    starts = range(graph.nb_nodes) if order is None else order
    for v in starts:
        if not timestamps.is_discovered(check_label(v, graph.nb_nodes)):
            explore(graph, v, timestamps)

    logger.debug(
        "DFS over %d nodes built %d tree(s)", graph.nb_nodes, len(timestamps.roots)
    )
    return timestamps
