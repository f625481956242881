"""
Utility functions shared by the graph containers and algorithms.

Provides argument validation for vertex labels, weights and input matrices,
and predecessor-array path reconstruction.
"""

from typing import List, Optional, Sequence

import numpy as np


def check_label(label: int, nb_nodes: int) -> int:
    """
    Validate a vertex label against ``[0, nb_nodes)``.

    Args:
        label: Candidate label.
        nb_nodes: Number of nodes of the graph.

    Returns:
        The label as a plain ``int``.

    Raises:
        ValueError: If label is None or not an integer.
        IndexError: If label is outside ``[0, nb_nodes)``.
    """
    if label is None:
        raise ValueError("Nodes cannot be None")
    if isinstance(label, bool) or not isinstance(label, (int, np.integer)):
        raise ValueError(f"Node labels must be integers, got {label!r}")
    if not 0 <= label < nb_nodes:
        raise IndexError(f"Vertex {label} is out of bounds (0..{nb_nodes - 1})")
    return int(label)


def check_weight(weight: Optional[int], weighted: bool) -> int:
    """
    Validate the weight argument of an add operation.

    Weighted graphs require a nonzero integer (zero means "no edge" in the
    matrix form). Unweighted graphs refuse any explicit weight.

    Returns:
        The weight to store: the given weight, or 0 for unweighted graphs.

    Raises:
        ValueError: On a missing, zero, non-integer or unexpected weight.
    """
    if not weighted:
        if weight is not None:
            raise ValueError("Unweighted graphs do not accept a weight")
        return 0

    if weight is None:
        raise ValueError("Weighted graphs require a weight")
    if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)):
        raise ValueError(f"Weights must be integers, got {weight!r}")
    if weight == 0:
        raise ValueError("Weight must be nonzero; 0 denotes an absent edge")
    return int(weight)


def as_square_matrix(matrix: Sequence[Sequence[int]]) -> np.ndarray:
    """
    Validate an adjacency matrix and return it as a fresh ``int64`` array.

    Args:
        matrix: Square matrix as nested sequences or a 2-D numpy array.
            Zero means absent, any other value present (or the weight).

    Returns:
        ``(n, n)`` ``int64`` copy of the input.

    Raises:
        ValueError: If the matrix is None, ragged, not square, holds
            non-integer entries or has a nonzero diagonal entry.
    """
    if matrix is None:
        raise ValueError("Matrix cannot be None")

    if isinstance(matrix, np.ndarray):
        mat = matrix
    else:
        rows = list(matrix)
        n = len(rows)
        for i, row in enumerate(rows):
            if row is None or len(row) != n:
                raise ValueError(f"Matrix row {i} does not have length {n}")
        mat = np.array(rows) if n else np.zeros((0, 0), dtype=np.int64)

    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {mat.shape}")
    if mat.size and not (np.issubdtype(mat.dtype, np.integer) or mat.dtype == np.bool_):
        raise ValueError(f"Matrix entries must be integers, got dtype {mat.dtype}")

    mat = mat.astype(np.int64, copy=True)

    loops = np.flatnonzero(np.diag(mat))
    if loops.size:
        raise ValueError(f"Self-loops are not allowed: diagonal entry ({loops[0]}, {loops[0]}) is nonzero")

    return mat


def reconstruct_path(pred: Sequence[Optional[int]], source: int, target: int) -> Optional[List[int]]:
    """
    Reconstruct the path from source to target using a predecessor array.

    The array comes from a shortest-path routine where ``pred[source] ==
    source``, ``pred[v]`` is the node before ``v`` on its best path, and
    ``pred[v] is None`` for unreachable nodes.

    Args:
        pred: Predecessor array indexed by node label.
        source: Source node of the search.
        target: Node to reconstruct the path to.

    Returns:
        List of labels from source to target (inclusive), or None if target
        is unreachable.

    Raises:
        IndexError: If source or target is outside the predecessor array.

    Example:
        >>> reconstruct_path([0, 2, 0, None], 0, 1)
        [0, 2, 1]
        >>> reconstruct_path([0, 2, 0, None], 0, 3) is None
        True
    """
    n = len(pred)
    source = check_label(source, n)
    target = check_label(target, n)
    if pred[target] is None:
        return None

    path = [target]
    current = target
    # A valid predecessor array reaches the source in fewer than n steps
    for _ in range(len(pred)):
        if current == source:
            path.reverse()
            return path
        current = pred[current]
        if current is None:
            return None
        path.append(current)

    return None
