"""
Core data structures for labeled numeric tables.

1. NumericMatrix: Resizable float64 matrix addressed by (row, column)
2. LabelIndex: Insertion-ordered label -> index mapping for rows and columns
3. LabeledTable: A matrix plus its row and column label indices

Examples:
    >>> from rawtables.core import LabeledTable, LabelIndex, NumericMatrix
    >>>
    >>> table = LabeledTable(
    ...     matrix=NumericMatrix.from_array([[1.0, 2.0], [3.0, 4.0]]),
    ...     row_labels=LabelIndex.from_labels(["S1", "S2"]),
    ...     col_labels=LabelIndex.from_labels(["M1", "M2"]),
    ...     upper_left_name="MarkerName",
    ... )
    >>> table.is_consistent()
    True
"""

from rawtables.core.matrix import NumericMatrix
from rawtables.core.labels import LabelIndex, TableFormatError, DuplicateLabelError
from rawtables.core.table import LabeledTable

__all__ = [
    'NumericMatrix',
    'LabelIndex',
    'TableFormatError',
    'DuplicateLabelError',
    'LabeledTable',
]
