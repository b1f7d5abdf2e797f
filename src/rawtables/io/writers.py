"""
Table writer for labeled numeric matrices.

Writes a NumericMatrix with its row and column labels as an R-readable,
tab-delimited text table, and exports the four raw-data tables of an
association run (genotype, collapsed genotype, covariate, phenotype) under a
common file-name prefix.

Output Format:
    MarkerName	"M1"	"M2"
    S1	1	2
    S2	3	4

    - Header: upper-left name, then one double-quoted label per column
    - Rows: unquoted row label, then one value per column
    - Values are truncated toward zero to integers (2.9 -> 2, -0.5 -> 0);
      genotype dosages 0/1/2 and coded phenotypes depend on this
    - Lines are newline-terminated, fields tab-separated

Engineering Design:
    - Dimensions are validated before any file is opened
    - Files are written atomically; a failed write leaves no partial table
    - A mismatch between labels and matrix is reported and skips only that
      table, never the rest of the export

Examples:
    >>> from rawtables.io.writers import write_raw_data
    >>>
    >>> written = write_raw_data("results/run1", genotype=geno, phenotype=pheno)
    >>> sorted(written)
    ['geno', 'pheno']
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional, Union

from rawtables.core.labels import LabelIndex
from rawtables.core.matrix import NumericMatrix
from rawtables.core.table import LabeledTable
from rawtables.io.tokenizer import quote_label
from rawtables.utils.fileio import atomic_open

logger = logging.getLogger(__name__)

__all__ = [
    'write_table',
    'format_header',
    'format_value',
    'write_raw_data',
    'raw_data_paths',
    'DEFAULT_PREFIX',
    'RAW_DATA_SUFFIXES',
]

PathLike = Union[str, Path]

DEFAULT_PREFIX = "rvtest.raw"

# suffix -> upper-left header cell, in export order
RAW_DATA_SUFFIXES = {
    "geno": "MarkerName",
    "cgeno": "PeopleID",
    "cov": "PeopleID",
    "pheno": "PeopleID",
}

# Header token used when a table has no column labels
PLACEHOLDER_LABEL = "."

MISSING_TOKEN = "NA"


def format_header(upper_left_name: str, col_labels: LabelIndex) -> str:
    """
    Build the newline-terminated header line.

    An empty column index still yields one column: the quoted placeholder
    ``"."``.
    """
    if len(col_labels) == 0:
        labels = [quote_label(PLACEHOLDER_LABEL)]
    else:
        labels = [quote_label(label) for label in col_labels]
    return "\t".join([upper_left_name] + labels) + "\n"


def format_value(value: float) -> str:
    """Format one cell as a truncated integer (``NA`` when not finite)."""
    if not math.isfinite(value):
        return MISSING_TOKEN
    return str(int(value))


def write_table(
    path: PathLike,
    matrix: Optional[NumericMatrix],
    row_labels: LabelIndex,
    col_labels: LabelIndex,
    upper_left_name: Optional[str] = None,
) -> Optional[Path]:
    """
    Write one labeled table.

    Row ``r`` of the output is the label inserted at position ``r`` of
    ``row_labels`` followed by matrix row ``r``.

    Args:
        path: Output file, created or overwritten
        matrix: Values to write. None or an empty matrix is a no-op.
        row_labels: One label per matrix row
        col_labels: One label per matrix column
        upper_left_name: Header corner cell; defaults to ``row_labels.name``

    Returns:
        The written path, or None when nothing was written

    Raises:
        OSError: If the destination cannot be written
    """
    if matrix is None or matrix.rows == 0 or matrix.cols == 0:
        logger.debug(f"Skipping empty table {path}")
        return None

    if len(row_labels) != matrix.rows:
        logger.error(
            f"Row number does not match! {len(row_labels)} row labels for "
            f"{matrix.rows} matrix rows, not writing {path}"
        )
        return None
    if len(col_labels) != matrix.cols:
        logger.error(
            f"Col number does not match! {len(col_labels)} column labels for "
            f"{matrix.cols} matrix columns, not writing {path}"
        )
        return None

    if upper_left_name is None:
        upper_left_name = row_labels.name or ""

    path = Path(path)
    if path.parent != Path('.') and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    data = matrix.data
    with atomic_open(path) as handle:
        handle.write(format_header(upper_left_name, col_labels))
        for r in range(matrix.rows):
            fields = [row_labels.label_at(r)]
            fields.extend(format_value(value) for value in data[r])
            handle.write("\t".join(fields))
            handle.write("\n")

    logger.info(f"Wrote {matrix.rows} x {matrix.cols} table to {path}")
    return path


def raw_data_paths(prefix: str = "") -> dict[str, Path]:
    """Export paths keyed by suffix; an empty prefix means ``rvtest.raw``."""
    prefix = prefix or DEFAULT_PREFIX
    return {suffix: Path(f"{prefix}.{suffix}") for suffix in RAW_DATA_SUFFIXES}


def write_raw_data(
    prefix: str = "",
    genotype: Optional[LabeledTable] = None,
    collapsed_genotype: Optional[LabeledTable] = None,
    covariate: Optional[LabeledTable] = None,
    phenotype: Optional[LabeledTable] = None,
) -> dict[str, Path]:
    """
    Export the raw data of a run as four tables sharing one prefix.

    Output Files:
        {prefix}.geno  - genotype, corner cell ``MarkerName``
        {prefix}.cgeno - collapsed genotype, corner cell ``PeopleID``
        {prefix}.cov   - covariates, corner cell ``PeopleID``
        {prefix}.pheno - phenotypes, corner cell ``PeopleID``

    Tables that are None, empty, or whose labels do not match their matrix
    are skipped (the latter with a logged error); the others are still
    written.

    Args:
        prefix: Output path prefix; empty means ``rvtest.raw``
        genotype: Genotype table
        collapsed_genotype: Collapsed (per-set) genotype table
        covariate: Covariate table
        phenotype: Phenotype table

    Returns:
        Paths actually written, keyed by suffix
    """
    paths = raw_data_paths(prefix)
    tables = {
        "geno": genotype,
        "cgeno": collapsed_genotype,
        "cov": covariate,
        "pheno": phenotype,
    }

    written = {}
    for suffix, upper_left_name in RAW_DATA_SUFFIXES.items():
        table = tables[suffix]
        if table is None:
            continue
        result = write_table(
            paths[suffix],
            table.matrix,
            table.row_labels,
            table.col_labels,
            upper_left_name,
        )
        if result is not None:
            written[suffix] = result
    return written
