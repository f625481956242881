"""
Random adjacency-matrix generation.

The matrices feed the ``from_matrix`` constructors of every graph container;
they never contain self-loops.
"""

from typing import Optional, Union

import numpy as np

from ..logging import get_logger

logger = get_logger(__name__)


def generate_graph_data(
    nb_nodes: int,
    nb_edges: int,
    *,
    undirected: bool = False,
    weighted: bool = False,
    allow_negative: bool = False,
    max_weight: int = 10,
    seed: Optional[Union[int, np.random.Generator]] = None,
) -> np.ndarray:
    """
    Draw a random adjacency matrix with exactly ``nb_edges`` arcs or edges.

    Pairs are sampled uniformly without replacement among the off-diagonal
    cells (the strict upper triangle when ``undirected``, mirrored below).

    Args:
        nb_nodes: Number of nodes.
        nb_edges: Number of distinct arcs (directed) or edges (undirected).
        undirected: Produce a symmetric matrix.
        weighted: Draw weights in ``[1, max_weight]``; otherwise every
            present cell is 1.
        allow_negative: Flip the sign of each weight with probability 1/2.
            Requires ``weighted``.
        max_weight: Largest absolute weight.
        seed: Seed or ``numpy.random.Generator`` for reproducible draws.

    Returns:
        ``(nb_nodes, nb_nodes)`` ``int64`` matrix.

    Raises:
        ValueError: If the counts are negative, ``nb_edges`` exceeds the
            number of available pairs, ``max_weight < 1``, or
            ``allow_negative`` is set without ``weighted``.

    Example:
        >>> mat = generate_graph_data(5, 4, undirected=True, seed=0)
        >>> int((mat != 0).sum())
        8
    """
    if nb_nodes < 0 or nb_edges < 0:
        raise ValueError("Node and edge counts must be non-negative")
    if max_weight < 1:
        raise ValueError(f"max_weight must be at least 1, got {max_weight}")
    if allow_negative and not weighted:
        raise ValueError("allow_negative requires weighted=True")

    if undirected:
        rows, cols = np.triu_indices(nb_nodes, k=1)
    else:
        rows, cols = np.nonzero(~np.eye(nb_nodes, dtype=bool))

    capacity = len(rows)
    if nb_edges > capacity:
        raise ValueError(
            f"Cannot place {nb_edges} edges on {nb_nodes} nodes (at most {capacity})"
        )

    mat = np.zeros((nb_nodes, nb_nodes), dtype=np.int64)
    if nb_edges == 0:
        return mat

    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    chosen = rng.choice(capacity, size=nb_edges, replace=False)

    if weighted:
        values = rng.integers(1, max_weight + 1, size=nb_edges, dtype=np.int64)
        if allow_negative:
            values *= rng.choice(np.array([-1, 1], dtype=np.int64), size=nb_edges)
    else:
        values = np.ones(nb_edges, dtype=np.int64)

    mat[rows[chosen], cols[chosen]] = values
    if undirected:
        mat[cols[chosen], rows[chosen]] = values

    logger.debug(
        "Generated %s matrix with %d nodes and %d edges",
        "symmetric" if undirected else "directed",
        nb_nodes,
        nb_edges,
    )
    return mat
