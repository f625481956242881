"""
Adjacency-matrix graph containers.

Provides MatrixDirectedGraph and MatrixUndirectedGraph backed by an ``(n, n)``
``int64`` numpy array. A nonzero cell means the arc/edge is present: 1 for
unweighted graphs, the weight for weighted ones. The node set is the index
range; counts are derived from the matrix. Undirected matrices are kept
symmetric by every mutation.

Successor, predecessor and neighbour queries return indices in increasing
order, which is the visiting order the traversal algorithms use for matrix
graphs.
"""

from typing import List, Optional, Sequence

import numpy as np

from ..diagnostics.core import is_symmetric
from ..logging import get_logger
from .core import DirectedGraph, UndirectedGraph
from .utils import as_square_matrix, check_label, check_weight

logger = get_logger(__name__)


class _MatrixGraph:
    """Matrix storage and validation shared by both orientations."""

    directed: bool = False

    def __init__(self, nb_nodes: int = 0, weighted: bool = False):
        if nb_nodes < 0:
            raise ValueError(f"Number of nodes must be non-negative, got {nb_nodes}")
        self.weighted = bool(weighted)
        self._matrix = np.zeros((nb_nodes, nb_nodes), dtype=np.int64)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]], weighted: bool = False):
        """
        Build a graph from a square adjacency matrix.

        Unweighted graphs store 1 for every nonzero input cell.

        Raises:
            ValueError: If the matrix is invalid or has a nonzero diagonal.
        """
        mat = as_square_matrix(matrix)
        graph = cls(0, weighted=weighted)
        if not weighted:
            mat = (mat != 0).astype(np.int64)
        graph._matrix = graph._normalize(mat)
        return graph

    @classmethod
    def from_graph(cls, graph):
        """
        Build a matrix graph from an adjacency-list graph of the same orientation.

        Raises:
            ValueError: If the orientations differ.
        """
        if graph.directed != cls.directed:
            kind = "directed" if cls.directed else "undirected"
            raise ValueError(f"{cls.__name__} can only be built from a {kind} graph")
        result = cls(0, weighted=graph.weighted)
        result._matrix = graph.to_adjacency_matrix()
        return result

    def _normalize(self, mat: np.ndarray) -> np.ndarray:
        return mat

    @property
    def matrix(self) -> np.ndarray:
        """Copy of the adjacency matrix."""
        return self._matrix.copy()

    @property
    def nb_nodes(self) -> int:
        return self._matrix.shape[0]

    def to_adjacency_matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def weight(self, u: int, v: int) -> int:
        """Return the value of cell ``(u, v)``; 0 when absent."""
        u, v = self._check(u, v)
        return int(self._matrix[u, v])

    def _check(self, *vertices: int) -> List[int]:
        n = self.nb_nodes
        return [check_label(vertex, n) for vertex in vertices]

    def _cell_value(self, weight: Optional[int]) -> int:
        value = check_weight(weight, self.weighted)
        return value if self.weighted else 1


class MatrixDirectedGraph(_MatrixGraph):
    """
    Directed graph with adjacency-matrix representation.

    Complexity:
        - add_arc / remove_arc / is_arc: O(1)
        - successors / predecessors: O(n)
        - compute_inverse: O(n^2)

    Example:
        >>> G = MatrixDirectedGraph.from_matrix([[0, 1], [0, 0]])
        >>> G.successors(0), G.predecessors(1)
        ([1], [0])
    """

    directed = True

    @property
    def nb_arcs(self) -> int:
        return int(np.count_nonzero(self._matrix))

    def successors(self, u: int) -> List[int]:
        (u,) = self._check(u)
        return np.flatnonzero(self._matrix[u]).tolist()

    def predecessors(self, v: int) -> List[int]:
        (v,) = self._check(v)
        return np.flatnonzero(self._matrix[:, v]).tolist()

    def is_arc(self, u: int, v: int) -> bool:
        u, v = self._check(u, v)
        return bool(self._matrix[u, v] != 0)

    def add_arc(self, u: int, v: int, weight: Optional[int] = None) -> None:
        """
        Add the arc ``u -> v``.

        Weighted graphs always overwrite the cell with ``weight``; unweighted
        graphs set it to 1 if it was empty.

        Raises:
            ValueError: On a None endpoint, a self-loop or a bad weight.
            IndexError: If an endpoint is out of range.
        """
        u, v = self._check(u, v)
        if u == v:
            raise ValueError("Cannot add an arc from a node to itself")
        value = self._cell_value(weight)
        if self.weighted or self._matrix[u, v] == 0:
            self._matrix[u, v] = value

    def remove_arc(self, u: int, v: int) -> bool:
        """Remove the arc ``u -> v``; return True if it existed."""
        u, v = self._check(u, v)
        if self._matrix[u, v] == 0:
            return False
        self._matrix[u, v] = 0
        return True

    def compute_inverse(self) -> "MatrixDirectedGraph":
        """Return the inverse graph (transposed matrix); this graph is untouched."""
        inverse = MatrixDirectedGraph(0, weighted=self.weighted)
        inverse._matrix = self._matrix.T.copy()
        return inverse

    def copy(self) -> "MatrixDirectedGraph":
        clone = MatrixDirectedGraph(0, weighted=self.weighted)
        clone._matrix = self._matrix.copy()
        return clone

    def to_list_graph(self) -> DirectedGraph:
        """Convert to an adjacency-list DirectedGraph (row-major arc order)."""
        return DirectedGraph.from_matrix(self._matrix, weighted=self.weighted)

    def __repr__(self) -> str:
        return (
            f"MatrixDirectedGraph(nb_nodes={self.nb_nodes}, nb_arcs={self.nb_arcs}, "
            f"weighted={self.weighted})"
        )


class MatrixUndirectedGraph(_MatrixGraph):
    """
    Undirected graph with a symmetric adjacency matrix.

    Input matrices are read through their upper triangle, which is mirrored
    into the lower one.

    Example:
        >>> G = MatrixUndirectedGraph(3)
        >>> G.add_edge(0, 2)
        >>> G.neighbors(2)
        [0]
    """

    directed = False

    def _normalize(self, mat: np.ndarray) -> np.ndarray:
        if not is_symmetric(mat):
            logger.warning("Matrix is not symmetric; only its upper triangle is used")
        upper = np.triu(mat, k=1)
        return upper + upper.T

    @property
    def nb_edges(self) -> int:
        return int(np.count_nonzero(np.triu(self._matrix, k=1)))

    def neighbors(self, x: int) -> List[int]:
        (x,) = self._check(x)
        return np.flatnonzero(self._matrix[x]).tolist()

    def is_edge(self, x: int, y: int) -> bool:
        x, y = self._check(x, y)
        return bool(self._matrix[x, y] != 0)

    def add_edge(self, x: int, y: int, weight: Optional[int] = None) -> None:
        """
        Add the edge ``{x, y}``, writing both symmetric cells.

        Weighted graphs always overwrite the weight; unweighted graphs set
        the cells to 1 if they were empty.

        Raises:
            ValueError: On a None endpoint, a self-loop or a bad weight.
            IndexError: If an endpoint is out of range.
        """
        x, y = self._check(x, y)
        if x == y:
            raise ValueError("Cannot add an edge from a node to itself")
        value = self._cell_value(weight)
        if self.weighted or self._matrix[x, y] == 0:
            self._matrix[x, y] = value
            self._matrix[y, x] = value

    def remove_edge(self, x: int, y: int) -> bool:
        """Remove the edge ``{x, y}``; return True if it existed."""
        x, y = self._check(x, y)
        if self._matrix[x, y] == 0:
            return False
        self._matrix[x, y] = 0
        self._matrix[y, x] = 0
        return True

    def copy(self) -> "MatrixUndirectedGraph":
        clone = MatrixUndirectedGraph(0, weighted=self.weighted)
        clone._matrix = self._matrix.copy()
        return clone

    def to_list_graph(self) -> UndirectedGraph:
        """Convert to an adjacency-list UndirectedGraph (upper-triangle edge order)."""
        return UndirectedGraph.from_matrix(self._matrix, weighted=self.weighted)

    def __repr__(self) -> str:
        return (
            f"MatrixUndirectedGraph(nb_nodes={self.nb_nodes}, nb_edges={self.nb_edges}, "
            f"weighted={self.weighted})"
        )
