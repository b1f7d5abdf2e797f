"""
Tests for NumericMatrix resizing and element access.
"""

import numpy as np
import pytest

from rawtables.core.matrix import NumericMatrix


class TestConstruction:
    """Creation from shape and from arrays."""

    def test_zero_filled(self):
        m = NumericMatrix(2, 3)
        assert m.shape == (2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert np.all(m.data == 0.0)

    def test_default_is_empty(self):
        m = NumericMatrix()
        assert m.shape == (0, 0)
        assert len(m) == 0

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            NumericMatrix(-1, 2)

    def test_from_array_copies_and_casts(self):
        source = np.array([[1, 2], [3, 4]])
        m = NumericMatrix.from_array(source)
        source[0, 0] = 99
        assert m[0, 0] == 1.0
        assert m.data.dtype == np.float64

    def test_from_array_requires_2d(self):
        with pytest.raises(ValueError, match="must be 2D"):
            NumericMatrix.from_array([1.0, 2.0])


class TestElementAccess:
    """Indexing by (row, col)."""

    def test_set_and_get(self):
        m = NumericMatrix(2, 2)
        m[1, 0] = 2.5
        assert m[1, 0] == 2.5
        assert m.data[1, 0] == 2.5

    def test_out_of_range(self):
        m = NumericMatrix(2, 2)
        with pytest.raises(IndexError):
            m[2, 0]
        with pytest.raises(IndexError):
            m[0, -1] = 1.0


class TestDimension:
    """Resizing keeps the overlapping block and zero-fills the rest."""

    def test_grow_rows_keeps_values(self):
        m = NumericMatrix.from_array([[1.0, 2.0]])
        m.dimension(3, 2)
        np.testing.assert_array_equal(m.data, [[1, 2], [0, 0], [0, 0]])

    def test_grow_one_row_at_a_time(self):
        m = NumericMatrix(1, 3)
        for row in range(100):
            m.dimension(row + 1, 3)
            m[row, 2] = row
        assert m.shape == (100, 3)
        np.testing.assert_array_equal(m.data[:, 2], np.arange(100))
        assert np.all(m.data[:, :2] == 0.0)

    def test_change_columns(self):
        m = NumericMatrix.from_array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        m.dimension(2, 2)
        np.testing.assert_array_equal(m.data, [[1, 2], [4, 5]])
        m.dimension(2, 4)
        np.testing.assert_array_equal(m.data, [[1, 2, 0, 0], [4, 5, 0, 0]])

    def test_shrink_then_grow_reads_zero(self):
        m = NumericMatrix.from_array([[1.0], [2.0], [3.0]])
        m.dimension(1, 1)
        m.dimension(3, 1)
        np.testing.assert_array_equal(m.data, [[1], [0], [0]])

    def test_resize_to_zero(self):
        m = NumericMatrix(2, 2)
        m.dimension(0, 2)
        assert m.shape == (0, 2)
        assert m.data.shape == (0, 2)

    def test_negative_dimension_rejected(self):
        m = NumericMatrix(1, 1)
        with pytest.raises(ValueError):
            m.dimension(1, -2)


class TestComparison:

    def test_copy_is_independent(self):
        m = NumericMatrix.from_array([[1.0, 2.0]])
        c = m.copy()
        c[0, 0] = 7.0
        assert m[0, 0] == 1.0
        assert c != m

    def test_equality_ignores_capacity(self):
        grown = NumericMatrix(1, 2)
        for row in range(3):
            grown.dimension(row + 1, 2)
        assert grown == NumericMatrix(3, 2)
