"""Tests for random adjacency-matrix generation."""

import numpy as np
import pytest

from graphworks.graphs import DirectedGraph, UndirectedGraph, generate_graph_data


class TestGenerateGraphData:
    """Tests for generate_graph_data."""

    def test_directed_shape_and_count(self):
        """Test that the requested number of arcs is placed."""
        mat = generate_graph_data(8, 20, seed=1)
        assert mat.shape == (8, 8)
        assert mat.dtype == np.int64
        assert np.count_nonzero(mat) == 20
        assert not np.any(np.diag(mat))
        assert set(np.unique(mat).tolist()) <= {0, 1}

    def test_undirected_is_symmetric(self):
        """Test that undirected matrices are symmetric with the edge count."""
        mat = generate_graph_data(7, 12, undirected=True, seed=2)
        np.testing.assert_array_equal(mat, mat.T)
        assert np.count_nonzero(np.triu(mat, k=1)) == 12
        assert UndirectedGraph.from_matrix(mat).nb_edges == 12

    def test_weighted_range(self):
        """Test that weights stay in [1, max_weight]."""
        mat = generate_graph_data(10, 60, weighted=True, max_weight=5, seed=3)
        values = mat[mat != 0]
        assert values.min() >= 1
        assert values.max() <= 5

    def test_negative_weights(self):
        """Test that negative draws keep their absolute value in range."""
        mat = generate_graph_data(10, 80, weighted=True, allow_negative=True, max_weight=4, seed=4)
        values = mat[mat != 0]
        assert len(values) == 80
        assert np.all(np.abs(values) <= 4)
        assert np.any(values < 0)

    def test_seed_reproducible(self):
        """Test that the same seed gives the same matrix."""
        a = generate_graph_data(9, 15, weighted=True, seed=42)
        b = generate_graph_data(9, 15, weighted=True, seed=42)
        np.testing.assert_array_equal(a, b)

    def test_generator_seed(self, rng):
        """Test that a numpy Generator is accepted as seed."""
        mat = generate_graph_data(6, 10, seed=rng)
        assert np.count_nonzero(mat) == 10

    def test_complete_graphs(self):
        """Test filling every available pair."""
        assert np.count_nonzero(generate_graph_data(4, 12)) == 12
        assert np.count_nonzero(generate_graph_data(4, 6, undirected=True)) == 12

    def test_feeds_graph_constructors(self):
        """Test that generated matrices build valid graphs."""
        mat = generate_graph_data(6, 9, weighted=True, seed=5)
        G = DirectedGraph.from_matrix(mat, weighted=True)
        assert G.nb_arcs == 9

    def test_empty(self):
        """Test zero nodes and zero edges."""
        assert generate_graph_data(0, 0).shape == (0, 0)
        assert not np.any(generate_graph_data(5, 0))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"nb_nodes": -1, "nb_edges": 0},
            {"nb_nodes": 3, "nb_edges": -1},
            {"nb_nodes": 3, "nb_edges": 7},
            {"nb_nodes": 3, "nb_edges": 4, "undirected": True},
            {"nb_nodes": 3, "nb_edges": 2, "max_weight": 0},
            {"nb_nodes": 3, "nb_edges": 2, "allow_negative": True},
        ],
    )
    def test_invalid_arguments(self, kwargs):
        """Test argument validation."""
        with pytest.raises(ValueError):
            generate_graph_data(**kwargs)
