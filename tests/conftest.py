"""Pytest configuration and shared fixtures for graphworks tests.

This module provides:
- A deterministic numpy RNG fixture for random graph data
- Isolation of the process-wide debug switch between tests
"""

import os

import numpy as np
import pytest

from graphworks.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps tests reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture restoring the debug switch a test may have flipped."""
    previous = is_debug_enabled()
    yield
    set_debug_enabled(previous)


@pytest.fixture
def cycle_matrix():
    """Directed 5-cycle 0 -> 1 -> 2 -> 3 -> 4 -> 0."""
    return [
        [0, 1, 0, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 0, 1, 0],
        [0, 0, 0, 0, 1],
        [1, 0, 0, 0, 0],
    ]


@pytest.fixture
def dijkstra_matrix():
    """Weighted directed regression fixture for shortest paths."""
    return [
        [0, 4, 2, 0, 0],
        [0, 0, 1, 5, 0],
        [0, 0, 0, 8, 10],
        [0, 0, 0, 0, 2],
        [3, 0, 0, 0, 0],
    ]


@pytest.fixture
def weighted_undirected_matrix():
    """Connected weighted undirected graph on 5 nodes."""
    return [
        [0, 3, 0, 4, 0],
        [3, 0, 2, 0, 0],
        [0, 2, 0, 5, 1],
        [4, 0, 5, 0, 6],
        [0, 0, 1, 6, 0],
    ]
