"""
Table readers for labeled numeric matrices.

Two layouts are supported:

Generic (R-style) tables, as written by ``write_table`` or R's
``write.table``::

    PeopleID	"BMI"	"AGE"          <- header with a corner label
    S1	22.5	40

    "BMI"	"AGE"                      <- header without a corner label
    S1	22.5	40

PLINK-style tables (``.cov``/``.pheno`` alternate files)::

    FID	IID	BMI	AGE
    F1	S1	22.5	40

Header Resolution (generic tables):
    The header alone does not tell whether its first token names the
    row-label column. The first data line decides: if it has as many tokens
    as the header, the first header token is taken as the corner label and
    dropped; otherwise every header token is a column label. The first data
    line also fixes the token count expected on every later line.

    Note: a corner label implies the data lines carry the same number of
    tokens as the header (label + values vs corner + names), which is the
    layout produced by ``write_table``. A header without a corner label
    gives data lines one token more than the header.

Dirty Data Policy:
    Input is bulk-imported and may be messy, so nothing here raises on bad
    content:
    - Lines with the wrong number of tokens are logged and skipped; later
      lines fill the next row, so no empty rows are left behind
    - Tokens that are not numbers become ``default_value`` and are counted;
      the count is returned so the caller can apply its own policy
    - Repeated row labels are remapped to their latest row (last writer
      wins). With a strict LabelIndex the repeated line is logged and
      skipped instead.

Examples:
    >>> from rawtables.core import LabelIndex, NumericMatrix
    >>> from rawtables.io.readers import read_plink_table
    >>>
    >>> matrix = NumericMatrix(1, 1)
    >>> people, covariates = LabelIndex(), LabelIndex()
    >>> n_invalid = read_plink_table("covar.txt", matrix, people, covariates)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from rawtables.core.labels import DuplicateLabelError, LabelIndex
from rawtables.core.matrix import NumericMatrix
from rawtables.io.tokenizer import (
    DEFAULT_SEPARATORS,
    iter_tokenized_lines,
    parse_float,
    unquote_label,
)

logger = logging.getLogger(__name__)

__all__ = ['read_table', 'read_plink_table', 'DEFAULT_MISSING_VALUE']

PathLike = Union[str, Path]

DEFAULT_MISSING_VALUE = -9.0

# Leading non-value columns of a PLINK-style table (FID, IID)
PLINK_LEADING_COLUMNS = 2


def _is_usable(matrix: Optional[NumericMatrix]) -> bool:
    return matrix is not None and matrix.rows > 0 and matrix.cols > 0


def _fill_row(
    matrix: NumericMatrix,
    row: int,
    tokens: Sequence[str],
    default_value: float,
) -> int:
    """Parse ``tokens`` into ``matrix[row]``; returns the number of invalid tokens."""
    n_invalid = 0
    for col, token in enumerate(tokens):
        value = parse_float(token)
        if value is None:
            value = default_value
            n_invalid += 1
        matrix[row, col] = value
    return n_invalid


def _insert_row_label(row_labels: LabelIndex, label: str, row: int, line_number: int) -> bool:
    """Map a row label; False when a strict index refused a duplicate."""
    try:
        row_labels.insert_or_update(label, row)
    except DuplicateLabelError as e:
        logger.error(f"{e} at line {line_number}, skipping...")
        return False
    return True


def _insert_col_label(col_labels: LabelIndex, label: str, col: int) -> None:
    try:
        col_labels.insert_or_update(label, col)
    except DuplicateLabelError as e:
        logger.error(f"{e} in header, keeping first occurrence")


def read_table(
    path: PathLike,
    matrix: Optional[NumericMatrix],
    row_labels: LabelIndex,
    col_labels: LabelIndex,
    default_value: float = DEFAULT_MISSING_VALUE,
    separators: str = DEFAULT_SEPARATORS,
) -> int:
    """
    Read a generic labeled table into ``matrix`` and the label indices.

    Args:
        path: Input file (plain text or .gz)
        matrix: Output matrix. Must exist and be pre-dimensioned to a
            non-zero shape; it is resized to the table's shape.
        row_labels: Receives row label -> row index. When the header has a
            corner label it is stored as ``row_labels.name``.
        col_labels: Receives column label -> column index
        default_value: Value stored for tokens that are not numbers
        separators: Characters that delimit tokens

    Returns:
        Number of tokens replaced by ``default_value``, or -1 if ``matrix``
        is None or zero-sized (nothing is read in that case)

    Raises:
        OSError: If the file cannot be opened
    """
    if not _is_usable(matrix):
        logger.error(f"Output matrix must be allocated before reading {path}")
        return -1

    n_invalid = 0
    header: Optional[list[str]] = None
    n_tokens = -1
    row = 0

    for line_number, tokens in iter_tokenized_lines(path, separators):
        if header is None:
            header = tokens
            continue

        if not tokens:
            logger.warning(f"Empty line {line_number}, skipping...")
            continue

        if n_tokens < 0:
            n_tokens = len(tokens)
            if len(tokens) == len(header):
                row_labels.name = unquote_label(header[0])
                names = header[1:]
            else:
                names = header
            for col, name in enumerate(names):
                _insert_col_label(col_labels, unquote_label(name), col)

        if len(tokens) != n_tokens:
            logger.warning(
                f"Inconsistent column number at line {line_number} "
                f"({len(tokens)} fields, expected {n_tokens}), skipping..."
            )
            continue

        if not _insert_row_label(row_labels, tokens[0], row, line_number):
            continue
        matrix.dimension(row + 1, n_tokens - 1)
        n_invalid += _fill_row(matrix, row, tokens[1:], default_value)
        row += 1

    if n_tokens < 0:
        logger.warning(f"No data lines in {path}; header could not be resolved")
        return 0

    matrix.dimension(row, n_tokens - 1)
    logger.info(
        f"Read {row} rows x {n_tokens - 1} columns from {path} "
        f"({n_invalid} invalid values)"
    )
    return n_invalid


def read_plink_table(
    path: PathLike,
    matrix: Optional[NumericMatrix],
    row_labels: LabelIndex,
    col_labels: LabelIndex,
    default_value: float = DEFAULT_MISSING_VALUE,
    separators: str = DEFAULT_SEPARATORS,
) -> int:
    """
    Read a PLINK-style table (``FID IID value...``).

    The first line is always the header: its first two tokens name the
    family and individual ID columns, the rest become column labels 0, 1,
    ... The individual ID (second token) of each data line is the row label.

    Args:
        path: Input file (plain text or .gz)
        matrix: Output matrix. Must exist and be pre-dimensioned to a
            non-zero shape; it is resized to the table's shape.
        row_labels: Receives individual ID -> row index; its ``name`` is set
            to the header's individual ID column name
        col_labels: Receives column label -> column index
        default_value: Value stored for tokens that are not numbers
        separators: Characters that delimit tokens

    Returns:
        Number of tokens replaced by ``default_value``, or -1 if ``matrix``
        is None or zero-sized

    Raises:
        OSError: If the file cannot be opened
    """
    if not _is_usable(matrix):
        logger.error(f"Output matrix must be allocated before reading {path}")
        return -1

    n_invalid = 0
    n_tokens = -1
    row = 0

    for line_number, tokens in iter_tokenized_lines(path, separators):
        if n_tokens < 0:
            n_tokens = len(tokens)
            if n_tokens > 1:
                row_labels.name = unquote_label(tokens[1])
            for position in range(PLINK_LEADING_COLUMNS, n_tokens):
                _insert_col_label(
                    col_labels,
                    unquote_label(tokens[position]),
                    position - PLINK_LEADING_COLUMNS,
                )
            continue

        if n_tokens < PLINK_LEADING_COLUMNS or len(tokens) != n_tokens:
            logger.warning(
                f"Inconsistent column number at line {line_number} "
                f"({len(tokens)} fields, expected {n_tokens}), skipping..."
            )
            continue

        sample = tokens[1]
        if sample in row_labels:
            logger.warning(f"Duplicate sample: {sample} at line {line_number}")
        if not _insert_row_label(row_labels, sample, row, line_number):
            continue
        matrix.dimension(row + 1, n_tokens - PLINK_LEADING_COLUMNS)
        n_invalid += _fill_row(
            matrix, row, tokens[PLINK_LEADING_COLUMNS:], default_value
        )
        row += 1

    if n_tokens < 0:
        logger.warning(f"Empty table file {path}")
        return 0

    n_cols = max(n_tokens - PLINK_LEADING_COLUMNS, 0)
    matrix.dimension(row, n_cols)
    logger.info(
        f"Read {row} samples x {n_cols} "
        f"columns from {path} ({n_invalid} invalid values)"
    )
    return n_invalid
