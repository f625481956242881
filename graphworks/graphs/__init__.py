"""
Graph package for graphworks.

This package provides the graph containers and classical algorithms:
- Adjacency-list graphs (DirectedGraph, UndirectedGraph)
- Adjacency-matrix graphs (MatrixDirectedGraph, MatrixUndirectedGraph)
- Binary min-heaps over integers and weighted edges
- Traversal (BFS, timestamped DFS)
- Strongly connected components (Kosaraju)
- Shortest paths (Dijkstra)
- Minimum spanning trees (Prim)
- Random adjacency-matrix generation

Node labels are integers in [0, nb_nodes) and double as array indices.
"""

from .components import is_strongly_connected, strongly_connected_components
from .core import DirectedGraph, UndirectedGraph
from .generators import generate_graph_data
from .heap import BinaryHeap, BinaryHeapEdge
from .matrix import MatrixDirectedGraph, MatrixUndirectedGraph
from .mst import MSTResult, prim
from .primitives import Arc, DirectedNode, Edge, UndirectedNode
from .shortest import ShortestPathResult, dijkstra, dijkstra_heap
from .traversal import DFSTimestamps, NodeState, bfs, dfs_with_timestamps, explore
from .utils import reconstruct_path

__all__ = [
    "Arc",
    "Edge",
    "DirectedNode",
    "UndirectedNode",
    "DirectedGraph",
    "UndirectedGraph",
    "MatrixDirectedGraph",
    "MatrixUndirectedGraph",
    "BinaryHeap",
    "BinaryHeapEdge",
    "bfs",
    "explore",
    "dfs_with_timestamps",
    "DFSTimestamps",
    "NodeState",
    "strongly_connected_components",
    "is_strongly_connected",
    "dijkstra",
    "dijkstra_heap",
    "ShortestPathResult",
    "prim",
    "MSTResult",
    "generate_graph_data",
    "reconstruct_path",
]

# Example usage:
# from graphworks.graphs import MatrixDirectedGraph, dijkstra
#
# G = MatrixDirectedGraph.from_matrix([[0, 4, 2], [0, 0, 1], [0, 1, 0]], weighted=True)
# result = dijkstra(G, 0)
# result.dist          # [0, 3, 2]
# result.path_to(1)    # [0, 2, 1]
