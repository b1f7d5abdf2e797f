"""
Pytest configuration and shared fixtures for table I/O tests.

Provides small labeled tables and a helper for writing raw table text.
"""

import numpy as np
import pytest
from pathlib import Path

from rawtables.core.labels import LabelIndex
from rawtables.core.matrix import NumericMatrix
from rawtables.core.table import LabeledTable


@pytest.fixture
def write_text(tmp_path):
    """Write ``content`` to ``tmp_path / name`` and return the path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def example_table():
    """2 x 2 table: S1/S2 by M1/M2 with values 1..4."""
    return LabeledTable(
        matrix=NumericMatrix.from_array([[1.0, 2.0], [3.0, 4.0]]),
        row_labels=LabelIndex.from_labels(["S1", "S2"]),
        col_labels=LabelIndex.from_labels(["M1", "M2"]),
        upper_left_name="MarkerName",
    )


def make_table(
    n_rows: int,
    n_cols: int,
    upper_left_name: str = "PeopleID",
    seed: int = 42,
) -> LabeledTable:
    """
    Generate a table of genotype-like values (0, 1, 2 plus fractional noise).

    Args:
        n_rows: Number of samples
        n_cols: Number of markers
        upper_left_name: Header corner cell
        seed: Random seed for reproducibility
    """
    rng = np.random.RandomState(seed)
    values = rng.randint(0, 3, size=(n_rows, n_cols)) + rng.uniform(0, 0.99, size=(n_rows, n_cols))
    return LabeledTable(
        matrix=NumericMatrix.from_array(values),
        row_labels=LabelIndex.from_labels([f"SAMPLE_{i:04d}" for i in range(n_rows)]),
        col_labels=LabelIndex.from_labels([f"rs{1000 + j}" for j in range(n_cols)]),
        upper_left_name=upper_left_name,
    )


@pytest.fixture
def genotype_table():
    """20 samples x 8 markers of genotype-like values."""
    return make_table(20, 8)


@pytest.fixture
def table_factory():
    """Factory for generated tables of any size."""
    return make_table
