"""
Labeled table: a numeric matrix paired with row and column label indices.

A LabeledTable is what gets exported as one ``.geno``/``.cgeno``/``.cov``/
``.pheno`` file and what the readers reconstruct on import. The container
itself does not enforce shape consistency: tables are often assembled
incrementally, and a mismatch is only an error at the moment of writing,
where it is reported and that single write is abandoned.

Examples:
    >>> import pandas as pd
    >>> from rawtables.core.table import LabeledTable
    >>>
    >>> df = pd.DataFrame([[0, 1], [2, 1]], index=["S1", "S2"], columns=["M1", "M2"])
    >>> table = LabeledTable.from_dataframe(df, upper_left_name="PeopleID")
    >>> table.is_consistent()
    True
    >>> table.write("out.geno")
    PosixPath('out.geno')
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from rawtables.core.labels import LabelIndex
from rawtables.core.matrix import NumericMatrix

__all__ = ['LabeledTable']

PathLike = Union[str, Path]


@dataclass
class LabeledTable:
    """
    Numeric matrix with row and column labels.

    Attributes:
        matrix: Table values (rows x cols)
        row_labels: Row label index (samples, markers)
        col_labels: Column label index (markers, sets, covariates, phenotypes)
        upper_left_name: Text for the header's upper-left cell. Falls back to
            ``row_labels.name`` when None.
    """

    matrix: Optional[NumericMatrix] = field(default_factory=NumericMatrix)
    row_labels: LabelIndex = field(default_factory=LabelIndex)
    col_labels: LabelIndex = field(default_factory=LabelIndex)
    upper_left_name: Optional[str] = None

    @property
    def corner_label(self) -> str:
        """Effective upper-left header cell."""
        if self.upper_left_name is not None:
            return self.upper_left_name
        return self.row_labels.name or ""

    def dimension_errors(self) -> list[str]:
        """Describe every label/matrix size mismatch (empty when consistent)."""
        if self.matrix is None:
            return ["matrix is missing"]
        errors = []
        if len(self.row_labels) != self.matrix.rows:
            errors.append(
                f"{len(self.row_labels)} row labels for {self.matrix.rows} matrix rows"
            )
        if len(self.col_labels) != self.matrix.cols:
            errors.append(
                f"{len(self.col_labels)} column labels for {self.matrix.cols} matrix columns"
            )
        return errors

    def is_consistent(self) -> bool:
        """True when label counts match the matrix shape."""
        return not self.dimension_errors()

    def write(self, path: PathLike) -> Optional[Path]:
        """Write with the table writer; returns the path, or None if skipped."""
        from rawtables.io.writers import write_table

        return write_table(
            path, self.matrix, self.row_labels, self.col_labels, self.corner_label
        )

    @classmethod
    def read(
        cls,
        path: PathLike,
        default_value: float = -9.0,
        plink: bool = False,
        strict: bool = False,
        separators: str = " \t",
    ) -> tuple[LabeledTable, int]:
        """
        Load a table from disk.

        Args:
            path: Input file (plain text or .gz)
            default_value: Substitute for tokens that are not numbers
            plink: Parse as a PLINK-style table (FID IID value...)
            strict: Refuse duplicate row labels instead of remapping them
            separators: Characters that delimit tokens

        Returns:
            (table, number of invalid conversions)
        """
        from rawtables.io.readers import read_plink_table, read_table

        # Readers refuse a zero-sized matrix; the real shape is set while reading
        table = cls(
            matrix=NumericMatrix(1, 1),
            row_labels=LabelIndex(strict=strict),
            col_labels=LabelIndex(strict=strict),
        )
        reader = read_plink_table if plink else read_table
        n_invalid = reader(
            path,
            table.matrix,
            table.row_labels,
            table.col_labels,
            default_value=default_value,
            separators=separators,
        )
        if table.matrix.shape == (1, 1) and not table.row_labels:
            # Nothing was read; don't report the placeholder shape
            table.matrix.dimension(0, 0)
        return table, n_invalid

    def to_dataframe(self) -> pd.DataFrame:
        """
        Matrix as a DataFrame indexed by row labels (in insertion order).

        Raises:
            ValueError: If label counts do not match the matrix shape
        """
        errors = self.dimension_errors()
        if errors:
            raise ValueError(f"Inconsistent table: {'; '.join(errors)}")
        index = self.row_labels.to_index()
        if index.name is None and self.upper_left_name:
            index = index.rename(self.upper_left_name)
        return pd.DataFrame(
            self.matrix.data.copy(),
            index=index,
            columns=self.col_labels.to_index(),
        )

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        upper_left_name: Optional[str] = None,
    ) -> LabeledTable:
        """
        Build a table from a numeric DataFrame.

        Row labels come from the index, column labels from the columns.
        Repeated labels collapse under the last-writer-wins policy, which
        leaves the table inconsistent; a UserWarning is emitted for them.

        Raises:
            ValueError: If the frame holds non-numeric values
        """
        for axis_name, labels in (("row", df.index), ("column", df.columns)):
            if labels.duplicated().any():
                n_duplicates = int(labels.duplicated().sum())
                warnings.warn(
                    f"Found {n_duplicates} duplicate {axis_name} labels. "
                    "Later occurrences overwrite earlier ones.",
                    UserWarning
                )

        try:
            values = df.to_numpy(dtype=float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"DataFrame contains non-numeric values: {e}") from e

        return cls(
            matrix=NumericMatrix.from_array(values.reshape(df.shape)),
            row_labels=LabelIndex.from_labels(df.index, name=df.index.name),
            col_labels=LabelIndex.from_labels(df.columns),
            upper_left_name=upper_left_name,
        )
