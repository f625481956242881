"""Tests for adjacency-matrix graph containers."""

import logging

import numpy as np
import pytest

from graphworks.graphs import (
    DirectedGraph,
    MatrixDirectedGraph,
    MatrixUndirectedGraph,
    UndirectedGraph,
)


class TestMatrixDirectedGraph:
    """Tests for MatrixDirectedGraph."""

    def test_from_matrix_unweighted_normalizes(self):
        """Test that unweighted graphs store 1 for every nonzero cell."""
        G = MatrixDirectedGraph.from_matrix([[0, 5, 0], [0, 0, -2], [0, 0, 0]])
        np.testing.assert_array_equal(G.matrix, [[0, 1, 0], [0, 0, 1], [0, 0, 0]])
        assert G.nb_arcs == 2

    def test_from_matrix_weighted(self, dijkstra_matrix):
        """Test that weighted graphs keep the cell values."""
        G = MatrixDirectedGraph.from_matrix(dijkstra_matrix, weighted=True)
        assert G.weight(0, 1) == 4
        assert G.weight(4, 0) == 3
        assert G.weight(1, 0) == 0
        assert G.nb_arcs == 8

    def test_matrix_is_a_copy(self):
        """Test that the matrix property cannot mutate the graph."""
        G = MatrixDirectedGraph.from_matrix([[0, 1], [0, 0]])
        mat = G.matrix
        mat[0, 1] = 0
        assert G.is_arc(0, 1)

    def test_from_matrix_rejects_diagonal(self):
        """Test that nonzero diagonal entries are rejected."""
        with pytest.raises(ValueError):
            MatrixDirectedGraph.from_matrix([[0, 0], [0, 3]])

    def test_successors_and_predecessors(self, dijkstra_matrix):
        """Test that neighbour queries return increasing indices."""
        G = MatrixDirectedGraph.from_matrix(dijkstra_matrix, weighted=True)
        assert G.successors(0) == [1, 2]
        assert G.successors(2) == [3, 4]
        assert G.predecessors(3) == [1, 2]
        assert G.predecessors(0) == [4]

    def test_add_arc_unweighted(self):
        """Test that unweighted add sets the cell to 1 once."""
        G = MatrixDirectedGraph(3)
        G.add_arc(0, 2)
        G.add_arc(0, 2)
        assert G.matrix[0, 2] == 1
        assert G.nb_arcs == 1

    def test_add_arc_weighted_overwrites(self):
        """Test that weighted add overwrites an existing cell."""
        G = MatrixDirectedGraph(3, weighted=True)
        G.add_arc(1, 2, 4)
        G.add_arc(1, 2, 6)
        assert G.weight(1, 2) == 6
        assert G.nb_arcs == 1

    def test_add_arc_errors(self):
        """Test the error contract of add_arc."""
        G = MatrixDirectedGraph(2, weighted=True)
        with pytest.raises(ValueError):
            G.add_arc(0, 0, 1)
        with pytest.raises(ValueError):
            G.add_arc(None, 1, 1)
        with pytest.raises(IndexError):
            G.add_arc(0, 5, 1)
        with pytest.raises(ValueError):
            G.add_arc(0, 1)

    def test_remove_arc(self):
        """Test removal and the no-op case."""
        G = MatrixDirectedGraph.from_matrix([[0, 1], [1, 0]])
        assert G.remove_arc(0, 1) is True
        assert G.remove_arc(0, 1) is False
        assert not G.is_arc(0, 1)
        assert G.is_arc(1, 0)

    def test_compute_inverse(self, dijkstra_matrix):
        """Test that the inverse is the transpose and leaves the input alone."""
        G = MatrixDirectedGraph.from_matrix(dijkstra_matrix, weighted=True)
        inverse = G.compute_inverse()
        np.testing.assert_array_equal(inverse.matrix, np.array(dijkstra_matrix).T)
        np.testing.assert_array_equal(G.matrix, np.array(dijkstra_matrix))

    def test_list_round_trip(self, dijkstra_matrix):
        """Test conversion to an adjacency-list graph and back."""
        G = MatrixDirectedGraph.from_matrix(dijkstra_matrix, weighted=True)
        listed = G.to_list_graph()
        assert isinstance(listed, DirectedGraph)
        assert listed.nb_arcs == G.nb_arcs
        back = MatrixDirectedGraph.from_graph(listed)
        np.testing.assert_array_equal(back.matrix, G.matrix)

    def test_from_graph_orientation_mismatch(self):
        """Test that an undirected list graph is refused."""
        with pytest.raises(ValueError):
            MatrixDirectedGraph.from_graph(UndirectedGraph(2))

    def test_copy_is_independent(self):
        """Test that copies share no storage."""
        G = MatrixDirectedGraph.from_matrix([[0, 1], [0, 0]])
        clone = G.copy()
        clone.remove_arc(0, 1)
        assert G.is_arc(0, 1)


class TestMatrixUndirectedGraph:
    """Tests for MatrixUndirectedGraph."""

    def test_symmetry_after_mutations(self):
        """Test that every mutation keeps the matrix symmetric."""
        G = MatrixUndirectedGraph(4, weighted=True)
        G.add_edge(0, 3, 2)
        G.add_edge(2, 1, 5)
        G.add_edge(3, 0, 7)
        G.remove_edge(1, 2)
        mat = G.matrix
        np.testing.assert_array_equal(mat, mat.T)
        assert G.weight(3, 0) == 7
        assert G.nb_edges == 1

    def test_asymmetric_input_warns(self, caplog):
        """Test that an asymmetric matrix is mirrored from its upper triangle."""
        logger = logging.getLogger("graphworks.graphs.matrix")
        logger.propagate = True
        try:
            with caplog.at_level(logging.WARNING, logger="graphworks.graphs.matrix"):
                G = MatrixUndirectedGraph.from_matrix([[0, 1, 0], [0, 0, 0], [1, 0, 0]])
        finally:
            logger.propagate = False
        assert "not symmetric" in caplog.text
        assert G.is_edge(0, 1)
        assert G.is_edge(1, 0)
        assert not G.is_edge(0, 2)

    def test_neighbors(self, weighted_undirected_matrix):
        """Test neighbour queries in increasing order."""
        G = MatrixUndirectedGraph.from_matrix(weighted_undirected_matrix, weighted=True)
        assert G.neighbors(2) == [1, 3, 4]
        assert G.neighbors(0) == [1, 3]
        assert G.nb_edges == 6

    def test_add_edge_unweighted_duplicate(self):
        """Test that an unweighted duplicate is a no-op."""
        G = MatrixUndirectedGraph(3)
        G.add_edge(0, 1)
        G.add_edge(1, 0)
        assert G.nb_edges == 1
        assert G.weight(0, 1) == 1

    def test_add_edge_rejects_self_loop(self):
        """Test that self-loops are rejected."""
        G = MatrixUndirectedGraph(3)
        with pytest.raises(ValueError):
            G.add_edge(2, 2)

    def test_remove_absent(self):
        """Test that removing an absent edge returns False."""
        G = MatrixUndirectedGraph(3)
        assert G.remove_edge(0, 1) is False

    def test_to_list_graph(self, weighted_undirected_matrix):
        """Test conversion to an adjacency-list UndirectedGraph."""
        G = MatrixUndirectedGraph.from_matrix(weighted_undirected_matrix, weighted=True)
        listed = G.to_list_graph()
        assert isinstance(listed, UndirectedGraph)
        assert listed.nb_edges == 6
        assert listed.get_edge(4, 2).weight == 1

    def test_from_graph(self):
        """Test building from an adjacency-list graph."""
        listed = UndirectedGraph(3)
        listed.add_edge(0, 2)
        G = MatrixUndirectedGraph.from_graph(listed)
        assert G.is_edge(2, 0)
        assert G.nb_edges == 1

    def test_from_graph_orientation_mismatch(self):
        """Test that a directed list graph is refused."""
        with pytest.raises(ValueError):
            MatrixUndirectedGraph.from_graph(DirectedGraph(2))
