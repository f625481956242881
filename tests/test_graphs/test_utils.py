"""Tests for graph utility functions."""

import numpy as np
import pytest

from graphworks.graphs import Arc, Edge, reconstruct_path
from graphworks.graphs.utils import as_square_matrix, check_label, check_weight


class TestCheckLabel:
    """Tests for check_label."""

    def test_valid(self):
        """Test that valid labels are returned as int."""
        assert check_label(0, 3) == 0
        result = check_label(np.int64(2), 3)
        assert result == 2
        assert type(result) is int

    def test_none(self):
        """Test that None is a ValueError."""
        with pytest.raises(ValueError):
            check_label(None, 3)

    def test_non_integer(self):
        """Test that non-integer labels are refused."""
        with pytest.raises(ValueError):
            check_label(1.0, 3)
        with pytest.raises(ValueError):
            check_label(True, 3)

    def test_out_of_range(self):
        """Test that labels outside [0, n) are an IndexError."""
        with pytest.raises(IndexError):
            check_label(3, 3)
        with pytest.raises(IndexError):
            check_label(-1, 3)
        with pytest.raises(IndexError):
            check_label(0, 0)


class TestCheckWeight:
    """Tests for check_weight."""

    def test_unweighted(self):
        """Test that unweighted graphs store 0 and refuse weights."""
        assert check_weight(None, False) == 0
        with pytest.raises(ValueError):
            check_weight(3, False)

    def test_weighted(self):
        """Test that weighted graphs need a nonzero integer."""
        assert check_weight(-4, True) == -4
        assert check_weight(np.int32(7), True) == 7
        for bad in (None, 0, 1.5, False):
            with pytest.raises(ValueError):
                check_weight(bad, True)


class TestAsSquareMatrix:
    """Tests for as_square_matrix."""

    def test_nested_lists(self):
        """Test conversion of nested lists."""
        mat = as_square_matrix([[0, 2], [3, 0]])
        assert mat.dtype == np.int64
        np.testing.assert_array_equal(mat, [[0, 2], [3, 0]])

    def test_returns_copy(self):
        """Test that a numpy input is copied."""
        src = np.array([[0, 1], [0, 0]])
        mat = as_square_matrix(src)
        mat[0, 1] = 5
        assert src[0, 1] == 1

    def test_empty(self):
        """Test the empty matrix."""
        assert as_square_matrix([]).shape == (0, 0)

    @pytest.mark.parametrize(
        "matrix",
        [
            None,
            [[0, 1], [1]],
            [[0, 1, 0], [1, 0, 0]],
            np.zeros((2, 3), dtype=int),
            [[0, 0.5], [0, 0]],
            [[0, 0], [0, 1]],
        ],
    )
    def test_invalid(self, matrix):
        """Test rejection of malformed matrices."""
        with pytest.raises(ValueError):
            as_square_matrix(matrix)


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_simple(self):
        """Test path reconstruction through predecessors."""
        assert reconstruct_path([0, 2, 0, None], 0, 1) == [0, 2, 1]

    def test_source(self):
        """Test the path from the source to itself."""
        assert reconstruct_path([0, 0], 0, 0) == [0]

    def test_unreachable(self):
        """Test that unreachable targets give None."""
        assert reconstruct_path([0, 2, 0, None], 0, 3) is None

    def test_labels_outside_array(self):
        """Test that source and target must index the predecessor array."""
        pred = [0, 2, 0, None]
        with pytest.raises(IndexError):
            reconstruct_path(pred, 0, -1)
        with pytest.raises(IndexError):
            reconstruct_path(pred, 0, 4)
        with pytest.raises(IndexError):
            reconstruct_path(pred, -1, 1)

    def test_broken_chain(self):
        """Test that a corrupted predecessor cycle gives None."""
        assert reconstruct_path([0, 2, 1], 0, 1) is None


class TestRecords:
    """Tests for the Arc and Edge records."""

    def test_arc_equality_ignores_weight(self):
        """Test that arcs compare by ordered endpoints only."""
        assert Arc(0, 1, 5) == Arc(0, 1, 9)
        assert Arc(0, 1) != Arc(1, 0)
        assert hash(Arc(0, 1, 5)) == hash(Arc(0, 1, 2))
        assert Arc(2, 3, 4).reversed() == Arc(3, 2)

    def test_edge_unordered(self):
        """Test that edges compare by unordered endpoints."""
        assert Edge(0, 1, 3) == Edge(1, 0, 7)
        assert len({Edge(0, 1), Edge(1, 0), Edge(1, 2)}) == 2
        assert Edge(4, 2).joins(2, 4)
        assert not Edge(4, 2).joins(2, 3)
