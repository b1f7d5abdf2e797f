"""
Resizable numeric matrix for labeled tables.

NumericMatrix holds the floating-point payload of a labeled table (genotype
dosages, collapsed burden scores, covariates, phenotypes). Unlike a plain
ndarray it can grow after creation, which is what the table readers need:
the number of rows is only known once the whole file has been scanned.

Engineering Design:
    - Storage: a float64 ndarray buffer with spare row capacity
    - Logical shape: (rows, cols), always <= buffer shape
    - Growth: row capacity doubles, so appending one row per input line
      costs amortized O(cols)
    - Resizing keeps the overlapping top-left block and zero-fills new cells

Examples:
    >>> from rawtables.core.matrix import NumericMatrix
    >>>
    >>> m = NumericMatrix(1, 2)
    >>> m[0, 1] = 2.5
    >>> m.dimension(3, 2)
    >>> m.shape
    (3, 2)
    >>> m[0, 1], m[2, 1]
    (2.5, 0.0)
"""

from __future__ import annotations

import numpy as np

__all__ = ['NumericMatrix']


class NumericMatrix:
    """
    Two-dimensional float64 matrix addressed by (row, column).

    Attributes:
        rows: Number of logical rows
        cols: Number of logical columns
        data: View of the logical region of the underlying buffer

    Shape Invariants:
        - 0 <= rows <= buffer rows
        - cols == buffer cols
        - cells outside the logical region are always zero
    """

    def __init__(self, rows: int = 0, cols: int = 0):
        """
        Create a zero-filled matrix.

        Args:
            rows: Initial number of rows
            cols: Initial number of columns

        Raises:
            ValueError: If either dimension is negative
        """
        _check_dimension(rows, cols)
        self._buffer = np.zeros((rows, cols), dtype=np.float64)
        self._rows = rows

    @classmethod
    def from_array(cls, array) -> NumericMatrix:
        """
        Build a matrix from any 2-D array-like (copied, cast to float64).

        Raises:
            ValueError: If the input is not two-dimensional
        """
        values = np.array(array, dtype=np.float64)
        if values.ndim != 2:
            raise ValueError(f"array must be 2D, got shape {values.shape}")
        matrix = cls()
        matrix._buffer = values
        matrix._rows = values.shape[0]
        return matrix

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._buffer.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return (self._rows, self.cols)

    @property
    def data(self) -> np.ndarray:
        """Logical region of the matrix as an ndarray view (rows x cols)."""
        return self._buffer[:self._rows]

    def dimension(self, rows: int, cols: int) -> None:
        """
        Resize to exactly rows x cols.

        Values inside both the old and the new shape are kept; every other
        cell of the new shape reads as zero.

        Args:
            rows: New number of rows
            cols: New number of columns

        Raises:
            ValueError: If either dimension is negative
        """
        _check_dimension(rows, cols)

        if cols != self.cols:
            capacity = max(rows, self._buffer.shape[0])
            buffer = np.zeros((capacity, cols), dtype=np.float64)
            keep_rows = min(rows, self._rows)
            keep_cols = min(cols, self.cols)
            buffer[:keep_rows, :keep_cols] = self._buffer[:keep_rows, :keep_cols]
            self._buffer = buffer
        elif rows > self._buffer.shape[0]:
            capacity = max(rows, 2 * self._buffer.shape[0])
            buffer = np.zeros((capacity, cols), dtype=np.float64)
            buffer[:self._rows] = self._buffer[:self._rows]
            self._buffer = buffer
        elif rows < self._rows:
            # Clear dropped rows so a later grow reads zeros
            self._buffer[rows:self._rows] = 0.0

        self._rows = rows

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._check_index(key)
        return float(self._buffer[row, col])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._check_index(key)
        self._buffer[row, col] = value

    def _check_index(self, key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if not (0 <= row < self._rows and 0 <= col < self.cols):
            raise IndexError(
                f"index ({row}, {col}) out of range for matrix of shape {self.shape}"
            )
        return row, col

    def __len__(self) -> int:
        return self._rows

    def copy(self) -> NumericMatrix:
        """Deep copy of the logical region."""
        return NumericMatrix.from_array(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericMatrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.data, other.data, equal_nan=True)

    __hash__ = None

    def __repr__(self) -> str:
        return f"NumericMatrix({self._rows} rows × {self.cols} cols)"


def _check_dimension(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"dimensions must be non-negative, got ({rows}, {cols})")
