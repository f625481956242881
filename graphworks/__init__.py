"""graphworks - graph containers, binary heaps and classical graph algorithms."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_graph_consistent,
    assert_heap_valid,
    assert_symmetric,
    check_graph_consistency,
    debug_context,
    is_debug_enabled,
    is_heap_valid,
    is_symmetric,
    run_check,
    set_debug_enabled,
)

# Graph containers and algorithms
from .graphs import (
    Arc,
    BinaryHeap,
    BinaryHeapEdge,
    DFSTimestamps,
    DirectedGraph,
    DirectedNode,
    Edge,
    MatrixDirectedGraph,
    MatrixUndirectedGraph,
    MSTResult,
    NodeState,
    ShortestPathResult,
    UndirectedGraph,
    UndirectedNode,
    bfs,
    dfs_with_timestamps,
    dijkstra,
    dijkstra_heap,
    explore,
    generate_graph_data,
    is_strongly_connected,
    prim,
    reconstruct_path,
    strongly_connected_components,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph containers
    "Arc",
    "Edge",
    "DirectedNode",
    "UndirectedNode",
    "DirectedGraph",
    "UndirectedGraph",
    "MatrixDirectedGraph",
    "MatrixUndirectedGraph",
    # Heaps
    "BinaryHeap",
    "BinaryHeapEdge",
    # Algorithms
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
    # Diagnostics
    "is_heap_valid",
    "assert_heap_valid",
    "is_symmetric",
    "assert_symmetric",
    "check_graph_consistency",
    "assert_graph_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "run_check",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
