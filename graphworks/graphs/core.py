"""
Adjacency-list graph containers.

Provides DirectedGraph and UndirectedGraph. Each graph owns its nodes and an
insertion-ordered arena mapping integer ids to Arc/Edge records; node
incidence lists hold those ids. Counts are derived from the arena, so they
cannot drift from its contents.

Weighted and unweighted graphs share one class per orientation:
- unweighted graphs store weight 0, ignore duplicate insertions and refuse
  an explicit weight;
- weighted graphs require a nonzero integer weight and overwrite the weight
  of an existing pair in place.

Self-loops are rejected everywhere, including nonzero diagonal entries of an
input matrix.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple

import numpy as np

from ..diagnostics.core import assert_graph_consistent, is_symmetric
from ..diagnostics.debug_mode import run_check
from ..logging import get_logger
from .primitives import Arc, DirectedNode, Edge, UndirectedNode
from .utils import as_square_matrix, check_label, check_weight

logger = get_logger(__name__)


class _ListGraph(ABC):
    """Node and arena bookkeeping shared by both orientations."""

    directed: bool = False

    def __init__(self, nb_nodes: int = 0, weighted: bool = False):
        if nb_nodes < 0:
            raise ValueError(f"Number of nodes must be non-negative, got {nb_nodes}")
        self.weighted = bool(weighted)
        self._nodes = [self._make_node(label) for label in range(nb_nodes)]
        self._arena: Dict[int, object] = {}
        self._next_id = 0

    @abstractmethod
    def _make_node(self, label: int):
        """Create the node record stored under ``label``."""

    @property
    def nodes(self) -> list:
        """Nodes in label order."""
        return list(self._nodes)

    @property
    def nb_nodes(self) -> int:
        return len(self._nodes)

    @property
    def arena(self) -> Mapping[int, object]:
        """Read-only view of the id -> record arena, in insertion order."""
        return MappingProxyType(self._arena)

    def add_node(self) -> int:
        """
        Append a new isolated node.

        Returns:
            The label of the new node (the previous number of nodes).
        """
        label = len(self._nodes)
        self._nodes.append(self._make_node(label))
        return label

    def _check(self, label: int) -> int:
        return check_label(label, len(self._nodes))

    def _store(self, record) -> int:
        record_id = self._next_id
        self._next_id += 1
        self._arena[record_id] = record
        return record_id

    def _after_mutation(self) -> None:
        run_check(assert_graph_consistent, self)


class DirectedGraph(_ListGraph):
    """
    Directed graph with adjacency-list representation.

    Attributes:
        weighted: If True, arcs carry integer weights.

    Complexity:
        - add_arc / remove_arc / is_arc: O(out-degree of the source)
        - successors / predecessors: O(degree)
        - compute_inverse / copy / to_adjacency_matrix: O(n + m)

    Example:
        >>> G = DirectedGraph(3, weighted=True)
        >>> G.add_arc(0, 1, 4)
        Arc(source=0, target=1, weight=4)
        >>> G.successors(0)
        [1]
    """

    directed = True

    def _make_node(self, label: int) -> DirectedNode:
        return DirectedNode(label)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]], weighted: bool = False) -> "DirectedGraph":
        """
        Build a graph from a square adjacency matrix.

        Every nonzero cell ``(i, j)`` becomes an arc ``i -> j``, in row-major
        order. Weighted graphs take the cell value as weight.

        Raises:
            ValueError: If the matrix is invalid or has a nonzero diagonal.
        """
        mat = as_square_matrix(matrix)
        graph = cls(mat.shape[0], weighted=weighted)
        for i, j in zip(*np.nonzero(mat)):
            graph._link(int(i), int(j), int(mat[i, j]) if weighted else 0)
        graph._after_mutation()
        return graph

    def copy(self) -> "DirectedGraph":
        """Return an independent copy with the same labels, arcs and weights."""
        clone = DirectedGraph(self.nb_nodes, weighted=self.weighted)
        for arc in self._arena.values():
            clone._link(arc.source, arc.target, arc.weight)
        return clone

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def arcs(self) -> List[Arc]:
        """All arcs, in insertion order."""
        return list(self._arena.values())

    @property
    def nb_arcs(self) -> int:
        return len(self._arena)

    def out_arcs(self, u: int) -> List[Arc]:
        """Arcs leaving ``u``, in insertion order."""
        node = self._nodes[self._check(u)]
        return [self._arena[arc_id] for arc_id in node.out_arcs]

    def in_arcs(self, v: int) -> List[Arc]:
        """Arcs entering ``v``, in insertion order."""
        node = self._nodes[self._check(v)]
        return [self._arena[arc_id] for arc_id in node.in_arcs]

    def successors(self, u: int) -> List[int]:
        return [arc.target for arc in self.out_arcs(u)]

    def predecessors(self, v: int) -> List[int]:
        return [arc.source for arc in self.in_arcs(v)]

    def _find(self, u: int, v: int) -> Optional[int]:
        for arc_id in self._nodes[u].out_arcs:
            if self._arena[arc_id].target == v:
                return arc_id
        return None

    def is_arc(self, u: int, v: int) -> bool:
        """Return True if the arc ``u -> v`` exists."""
        u, v = self._check(u), self._check(v)
        return u != v and self._find(u, v) is not None

    def get_arc(self, u: int, v: int) -> Optional[Arc]:
        """Return the stored arc ``u -> v``, or None."""
        u, v = self._check(u), self._check(v)
        arc_id = self._find(u, v)
        return None if arc_id is None else self._arena[arc_id]

    def arc_set(self) -> Set[Tuple[int, int, int]]:
        """Return the arcs as a set of ``(source, target, weight)`` triples."""
        return {(arc.source, arc.target, arc.weight) for arc in self._arena.values()}

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _link(self, u: int, v: int, weight: int) -> Arc:
        arc = Arc(u, v, weight)
        arc_id = self._store(arc)
        self._nodes[u].out_arcs.append(arc_id)
        self._nodes[v].in_arcs.append(arc_id)
        return arc

    def add_arc(self, u: int, v: int, weight: Optional[int] = None) -> Arc:
        """
        Add the arc ``u -> v``.

        If the arc already exists, weighted graphs overwrite its weight and
        unweighted graphs leave it untouched.

        Args:
            u: Source node.
            v: Target node.
            weight: Nonzero integer weight (weighted graphs only).

        Returns:
            The stored arc.

        Raises:
            ValueError: On a None endpoint, a self-loop or a bad weight.
            IndexError: If an endpoint is out of range.
        """
        u, v = self._check(u), self._check(v)
        if u == v:
            raise ValueError("Cannot add an arc from a node to itself")
        weight = check_weight(weight, self.weighted)

        arc_id = self._find(u, v)
        if arc_id is not None:
            arc = self._arena[arc_id]
            if self.weighted:
                arc.weight = weight
            return arc

        arc = self._link(u, v, weight)
        self._after_mutation()
        return arc

    def remove_arc(self, u: int, v: int) -> bool:
        """
        Remove the arc ``u -> v`` if present.

        Returns:
            True if an arc was removed, False if there was none.
        """
        u, v = self._check(u), self._check(v)
        arc_id = self._find(u, v)
        if arc_id is None:
            return False

        del self._arena[arc_id]
        self._nodes[u].out_arcs.remove(arc_id)
        self._nodes[v].in_arcs.remove(arc_id)
        self._after_mutation()
        return True

    # ------------------------------------------------------------------
    # Derived graphs
    # ------------------------------------------------------------------

    def compute_inverse(self) -> "DirectedGraph":
        """
        Return the inverse graph: every arc ``(u, v, w)`` becomes ``(v, u, w)``.

        Labels, weights and arc order are preserved; this graph is untouched.
        """
        inverse = DirectedGraph(self.nb_nodes, weighted=self.weighted)
        for arc in self._arena.values():
            inverse._link(arc.target, arc.source, arc.weight)
        return inverse

    def to_adjacency_matrix(self) -> np.ndarray:
        """
        Return the ``(n, n)`` adjacency matrix.

        Cells hold 1 per arc for unweighted graphs and the weight otherwise.
        """
        n = self.nb_nodes
        mat = np.zeros((n, n), dtype=np.int64)
        for arc in self._arena.values():
            mat[arc.source, arc.target] = arc.weight if self.weighted else 1
        return mat

    def __repr__(self) -> str:
        return (
            f"DirectedGraph(nb_nodes={self.nb_nodes}, nb_arcs={self.nb_arcs}, "
            f"weighted={self.weighted})"
        )


class UndirectedGraph(_ListGraph):
    """
    Undirected graph with adjacency-list representation.

    Each logical edge is stored once in the arena and referenced from the
    incidence lists of both endpoints.

    Attributes:
        weighted: If True, edges carry integer weights.

    Complexity:
        - add_edge / remove_edge / is_edge: O(degree of the first endpoint)
        - neighbors: O(degree)
        - copy / to_adjacency_matrix: O(n + m)

    Example:
        >>> G = UndirectedGraph(3)
        >>> _ = G.add_edge(0, 2)
        >>> G.is_edge(2, 0)
        True
    """

    directed = False

    def _make_node(self, label: int) -> UndirectedNode:
        return UndirectedNode(label)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]], weighted: bool = False) -> "UndirectedGraph":
        """
        Build a graph from a square adjacency matrix.

        Only the upper triangle is read, so each edge is created once. An
        asymmetric matrix is accepted with a warning; its lower triangle is
        ignored.

        Raises:
            ValueError: If the matrix is invalid or has a nonzero diagonal.
        """
        mat = as_square_matrix(matrix)
        if not is_symmetric(mat):
            logger.warning("Matrix is not symmetric; only its upper triangle is used")

        graph = cls(mat.shape[0], weighted=weighted)
        for i, j in zip(*np.nonzero(np.triu(mat, k=1))):
            graph._link(int(i), int(j), int(mat[i, j]) if weighted else 0)
        graph._after_mutation()
        return graph

    def copy(self) -> "UndirectedGraph":
        """Return an independent copy with the same labels, edges and weights."""
        clone = UndirectedGraph(self.nb_nodes, weighted=self.weighted)
        for edge in self._arena.values():
            clone._link(edge.u, edge.v, edge.weight)
        return clone

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def edges(self) -> List[Edge]:
        """All edges, in insertion order."""
        return list(self._arena.values())

    @property
    def nb_edges(self) -> int:
        return len(self._arena)

    def incident_edges(self, x: int) -> List[Edge]:
        """Edges touching ``x``, in insertion order."""
        node = self._nodes[self._check(x)]
        return [self._arena[edge_id] for edge_id in node.incident]

    def neighbors(self, x: int) -> List[int]:
        x = self._check(x)
        return [edge.other(x) for edge in self.incident_edges(x)]

    def _find(self, x: int, y: int) -> Optional[int]:
        for edge_id in self._nodes[x].incident:
            if self._arena[edge_id].joins(x, y):
                return edge_id
        return None

    def is_edge(self, x: int, y: int) -> bool:
        """Return True if an edge joins ``x`` and ``y`` (in either order)."""
        x, y = self._check(x), self._check(y)
        return x != y and self._find(x, y) is not None

    def get_edge(self, x: int, y: int) -> Optional[Edge]:
        """Return the stored edge between ``x`` and ``y``, or None."""
        x, y = self._check(x), self._check(y)
        edge_id = self._find(x, y)
        return None if edge_id is None else self._arena[edge_id]

    def edge_set(self) -> Set[Tuple[int, int, int]]:
        """Return the edges as a set of ``(min, max, weight)`` triples."""
        return {
            (min(edge.u, edge.v), max(edge.u, edge.v), edge.weight)
            for edge in self._arena.values()
        }

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _link(self, x: int, y: int, weight: int) -> Edge:
        edge = Edge(x, y, weight)
        edge_id = self._store(edge)
        self._nodes[x].incident.append(edge_id)
        self._nodes[y].incident.append(edge_id)
        return edge

    def add_edge(self, x: int, y: int, weight: Optional[int] = None) -> Edge:
        """
        Add the edge ``{x, y}``.

        If the edge already exists, weighted graphs overwrite its weight and
        unweighted graphs leave it untouched.

        Raises:
            ValueError: On a None endpoint, a self-loop or a bad weight.
            IndexError: If an endpoint is out of range.
        """
        x, y = self._check(x), self._check(y)
        if x == y:
            raise ValueError("Cannot add an edge from a node to itself")
        weight = check_weight(weight, self.weighted)

        edge_id = self._find(x, y)
        if edge_id is not None:
            edge = self._arena[edge_id]
            if self.weighted:
                edge.weight = weight
            return edge

        edge = self._link(x, y, weight)
        self._after_mutation()
        return edge

    def remove_edge(self, x: int, y: int) -> bool:
        """
        Remove the edge ``{x, y}`` if present.

        Returns:
            True if an edge was removed, False if there was none.
        """
        x, y = self._check(x), self._check(y)
        edge_id = self._find(x, y)
        if edge_id is None:
            return False

        del self._arena[edge_id]
        self._nodes[x].incident.remove(edge_id)
        self._nodes[y].incident.remove(edge_id)
        self._after_mutation()
        return True

    def to_adjacency_matrix(self) -> np.ndarray:
        """
        Return the symmetric ``(n, n)`` adjacency matrix.

        Cells hold 1 per edge for unweighted graphs and the weight otherwise.
        """
        n = self.nb_nodes
        mat = np.zeros((n, n), dtype=np.int64)
        for edge in self._arena.values():
            value = edge.weight if self.weighted else 1
            mat[edge.u, edge.v] = value
            mat[edge.v, edge.u] = value
        return mat

    def __repr__(self) -> str:
        return (
            f"UndirectedGraph(nb_nodes={self.nb_nodes}, nb_edges={self.nb_edges}, "
            f"weighted={self.weighted})"
        )
