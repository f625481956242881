"""
Node and edge records for adjacency-list graphs.

Nodes do not point at edge objects: their incidence lists hold the integer
ids under which the owning graph stores its arcs/edges. Arcs and edges only
hold node labels. The graph is therefore the single owner of every record.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class DirectedNode:
    """
    Node of a directed graph.

    Attributes:
        label: Index of the node in its graph, in ``[0, nb_nodes)``.
        out_arcs: Ids of the arcs leaving this node, in insertion order.
        in_arcs: Ids of the arcs entering this node, in insertion order.
    """

    label: int
    out_arcs: List[int] = field(default_factory=list)
    in_arcs: List[int] = field(default_factory=list)


@dataclass
class UndirectedNode:
    """
    Node of an undirected graph.

    Attributes:
        label: Index of the node in its graph, in ``[0, nb_nodes)``.
        incident: Ids of the edges touching this node, in insertion order.
    """

    label: int
    incident: List[int] = field(default_factory=list)


@dataclass(unsafe_hash=True)
class Arc:
    """
    Directed edge ``source -> target``.

    Two arcs are equal when they join the same ordered pair of nodes; the
    weight takes no part in equality or hashing, so re-adding a pair with a
    new weight finds the existing arc.
    """

    source: int
    target: int
    weight: int = field(default=0, compare=False)

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self.source, self.target)

    def reversed(self) -> "Arc":
        """Return a new arc ``target -> source`` with the same weight."""
        return Arc(self.target, self.source, self.weight)


@dataclass(eq=False)
class Edge:
    """
    Undirected edge between ``u`` and ``v``.

    Equality and hashing use the unordered pair ``{u, v}``. The stored order
    still matters for reporting: in a minimum spanning tree ``u`` is the
    endpoint that was already in the tree.
    """

    u: int
    v: int
    weight: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return {self.u, self.v} == {other.u, other.v}

    def __hash__(self) -> int:
        return hash(frozenset((self.u, self.v)))

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self.u, self.v)

    def joins(self, x: int, y: int) -> bool:
        """Return True if this edge connects ``x`` and ``y`` (either order)."""
        return (self.u == x and self.v == y) or (self.u == y and self.v == x)

    def other(self, x: int) -> int:
        """
        Return the endpoint opposite to ``x``.

        Raises:
            ValueError: If ``x`` is not an endpoint of this edge.
        """
        if x == self.u:
            return self.v
        if x == self.v:
            return self.u
        raise ValueError(f"Node {x} is not an endpoint of edge ({self.u}, {self.v})")
