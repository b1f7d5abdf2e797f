"""
I/O module for labeled numeric tables.

Reads and writes the tab-delimited table format shared by the raw-data
export of an association run (``.geno``, ``.cgeno``, ``.cov``, ``.pheno``)
and by R and PLINK-style covariate/phenotype files.

Key Functions:
    - write_table: Write one matrix with its row/column labels
    - write_raw_data: Export the four raw-data tables under one prefix
    - read_table: Read a generic table, resolving the header layout
    - read_plink_table: Read a PLINK-style (FID IID ...) table

Design Philosophy:
    - Dirty input degrades to skipped lines and default values, never aborts
    - Usage errors are reported through logging and leave no partial output
    - Values are written as truncated integers, exactly as downstream
      genotype consumers expect

Examples:
    >>> from rawtables.io import read_table, write_table
    >>> from rawtables.core import LabelIndex, NumericMatrix
    >>>
    >>> matrix, people, markers = NumericMatrix(1, 1), LabelIndex(), LabelIndex()
    >>> n_invalid = read_table("run1.geno", matrix, people, markers)
    >>> write_table("copy.geno", matrix, people, markers)
"""

from rawtables.io.readers import read_table, read_plink_table, DEFAULT_MISSING_VALUE
from rawtables.io.writers import (
    write_table,
    write_raw_data,
    raw_data_paths,
    format_header,
    DEFAULT_PREFIX,
)
from rawtables.io.tokenizer import iter_tokenized_lines, open_text, parse_float

__all__ = [
    'read_table',
    'read_plink_table',
    'write_table',
    'write_raw_data',
    'raw_data_paths',
    'format_header',
    'iter_tokenized_lines',
    'open_text',
    'parse_float',
    'DEFAULT_MISSING_VALUE',
    'DEFAULT_PREFIX',
]
