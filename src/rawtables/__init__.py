"""
rawtables - Labeled numeric tables in R/PLINK-compatible text format

Reads and writes the rectangular, labeled matrices (genotype, collapsed
genotype, covariate, phenotype) exchanged between association-testing
pipelines and statistical tooling.
"""

__version__ = "0.1.0"

from rawtables.core.matrix import NumericMatrix
from rawtables.core.labels import LabelIndex, DuplicateLabelError, TableFormatError
from rawtables.core.table import LabeledTable
from rawtables.io.readers import read_table, read_plink_table
from rawtables.io.writers import write_table, write_raw_data

__all__ = [
    "NumericMatrix",
    "LabelIndex",
    "LabeledTable",
    "DuplicateLabelError",
    "TableFormatError",
    "read_table",
    "read_plink_table",
    "write_table",
    "write_raw_data",
]
