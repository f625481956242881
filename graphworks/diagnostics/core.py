"""Invariant checks for heaps, matrices and adjacency-list graphs.

The checks are duck-typed so that this module never imports the graph
package: a heap only needs ``keys()``, a graph only needs ``directed``,
``nodes``, ``arena`` and its count property.
"""

from __future__ import annotations

from typing import Any, List

import numpy as np


def is_heap_valid(heap: Any) -> bool:
    """
    Check the min-heap property of a heap.

    For every internal index ``i`` the key at ``i`` must not exceed the keys
    at ``2i + 1`` and ``2i + 2`` (when present).

    Parameters
    ----------
    heap:
        Object exposing ``keys()``, the ordering keys in array order.

    Returns
    -------
    bool
        True if the heap property holds everywhere.
    """
    keys = heap.keys()
    size = len(keys)
    for i in range(size // 2):
        left = 2 * i + 1
        right = left + 1
        if keys[left] < keys[i]:
            return False
        if right < size and keys[right] < keys[i]:
            return False
    return True


def assert_heap_valid(heap: Any) -> None:
    """
    Assert the min-heap property of a heap.

    Raises
    ------
    ValueError
        If some parent key is greater than one of its children's keys.
    """
    keys = heap.keys()
    size = len(keys)
    for i in range(size // 2):
        for child in (2 * i + 1, 2 * i + 2):
            if child < size and keys[child] < keys[i]:
                raise ValueError(
                    f"Heap property violated: key {keys[i]} at index {i} is greater "
                    f"than key {keys[child]} of its child at index {child}."
                )


def is_symmetric(matrix: np.ndarray) -> bool:
    """Return True if ``matrix`` is square and equal to its transpose."""
    mat = np.asarray(matrix)
    return mat.ndim == 2 and mat.shape[0] == mat.shape[1] and bool(np.array_equal(mat, mat.T))


def assert_symmetric(matrix: np.ndarray) -> None:
    """
    Assert that a matrix is square and symmetric.

    Raises
    ------
    ValueError
        If the matrix is not square or differs from its transpose.
    """
    mat = np.asarray(matrix)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {mat.shape}.")
    diff = np.argwhere(mat != mat.T)
    if diff.size:
        i, j = (int(k) for k in diff[0])
        raise ValueError(
            f"Matrix is not symmetric: entry ({i}, {j}) = {mat[i, j]} "
            f"but ({j}, {i}) = {mat[j, i]}."
        )


def check_graph_consistency(graph: Any) -> List[str]:
    """
    Cross-check the arena of an adjacency-list graph against its nodes.

    Parameters
    ----------
    graph:
        A ``DirectedGraph`` or ``UndirectedGraph``.

    Returns
    -------
    list of str
        One message per problem found; empty when the graph is consistent.
    """
    problems: List[str] = []
    arena = graph.arena
    nodes = graph.nodes
    count = graph.nb_arcs if graph.directed else graph.nb_edges

    if count != len(arena):
        problems.append(f"count {count} differs from arena size {len(arena)}")

    for index, node in enumerate(nodes):
        if node.label != index:
            problems.append(f"node at index {index} carries label {node.label}")

    seen_pairs = set()
    for record_id, record in arena.items():
        if graph.directed:
            first, second = record.source, record.target
            pair = (first, second)
        else:
            first, second = record.u, record.v
            pair = (min(first, second), max(first, second))

        if first == second:
            problems.append(f"record {record_id} is a self-loop on {first}")
        if pair in seen_pairs:
            problems.append(f"duplicate record for pair {pair}")
        seen_pairs.add(pair)

        if graph.directed:
            if record_id not in nodes[first].out_arcs:
                problems.append(f"arc {pair} missing from out-list of {first}")
            if record_id not in nodes[second].in_arcs:
                problems.append(f"arc {pair} missing from in-list of {second}")
        else:
            for end in (first, second):
                if record_id not in nodes[end].incident:
                    problems.append(f"edge {pair} missing from incidence list of {end}")

    for node in nodes:
        lists = (node.out_arcs, node.in_arcs) if graph.directed else (node.incident,)
        for ids in lists:
            for record_id in ids:
                if record_id not in arena:
                    problems.append(f"node {node.label} references unknown record {record_id}")

    return problems


def assert_graph_consistent(graph: Any) -> None:
    """
    Assert that an adjacency-list graph passes :func:`check_graph_consistency`.

    Raises
    ------
    ValueError
        Listing every inconsistency found.
    """
    problems = check_graph_consistency(graph)
    if problems:
        raise ValueError("Inconsistent graph: " + "; ".join(problems))
