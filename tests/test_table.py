"""
Tests for LabeledTable consistency checks, file helpers and pandas interop.
"""

import numpy as np
import pandas as pd
import pytest

from rawtables.core.labels import LabelIndex
from rawtables.core.matrix import NumericMatrix
from rawtables.core.table import LabeledTable


class TestConsistency:

    def test_consistent(self, example_table):
        assert example_table.is_consistent()
        assert example_table.dimension_errors() == []

    def test_mismatch_reported(self):
        table = LabeledTable(
            matrix=NumericMatrix(3, 2),
            row_labels=LabelIndex.from_labels(["S1"]),
            col_labels=LabelIndex.from_labels(["a", "b"]),
        )
        assert not table.is_consistent()
        assert table.dimension_errors() == ["1 row labels for 3 matrix rows"]

    def test_missing_matrix(self):
        table = LabeledTable(matrix=None)
        assert table.dimension_errors() == ["matrix is missing"]

    def test_corner_label_fallback(self):
        table = LabeledTable(row_labels=LabelIndex(name="IID"))
        assert table.corner_label == "IID"
        table.upper_left_name = "PeopleID"
        assert table.corner_label == "PeopleID"
        assert LabeledTable().corner_label == ""


class TestReadWrite:

    def test_read_generic(self, tmp_path, example_table):
        path = tmp_path / "t.txt"
        example_table.write(path)
        table, n_invalid = LabeledTable.read(path)
        assert n_invalid == 0
        assert table.is_consistent()
        assert table.corner_label == "MarkerName"
        assert table.row_labels == example_table.row_labels
        assert table.col_labels == example_table.col_labels
        assert table.matrix == example_table.matrix

    def test_read_plink(self, write_text):
        path = write_text("p.txt", "FID IID A B\nF1 S1 1 x\n")
        table, n_invalid = LabeledTable.read(path, default_value=0, plink=True)
        assert n_invalid == 1
        assert table.corner_label == "IID"
        np.testing.assert_array_equal(table.matrix.data, [[1, 0]])

    def test_read_strict(self, write_text):
        path = write_text("d.txt", "PeopleID A\nS1 1\nS1 2\n")
        table, _ = LabeledTable.read(path, strict=True)
        assert table.row_labels.strict
        assert table.matrix.shape == (1, 1)
        assert table.is_consistent()

    def test_read_empty_file(self, write_text):
        path = write_text("e.txt", "")
        table, n_invalid = LabeledTable.read(path)
        assert n_invalid == 0
        assert table.matrix.shape == (0, 0)


class TestDataFrame:

    def test_to_dataframe(self, example_table):
        df = example_table.to_dataframe()
        assert list(df.index) == ["S1", "S2"]
        assert list(df.columns) == ["M1", "M2"]
        assert df.index.name == "MarkerName"
        assert df.loc["S2", "M1"] == 3.0

    def test_to_dataframe_is_a_copy(self, example_table):
        df = example_table.to_dataframe()
        df.iloc[0, 0] = 100.0
        assert example_table.matrix[0, 0] == 1.0

    def test_to_dataframe_inconsistent(self):
        table = LabeledTable(matrix=NumericMatrix(2, 2))
        with pytest.raises(ValueError, match="Inconsistent table"):
            table.to_dataframe()

    def test_from_dataframe(self):
        df = pd.DataFrame(
            {"BMI": [22.5, 30.1], "AGE": [40, 38]},
            index=pd.Index(["S1", "S2"], name="PeopleID"),
        )
        table = LabeledTable.from_dataframe(df)
        assert table.is_consistent()
        assert table.row_labels.labels() == ["S1", "S2"]
        assert table.col_labels.labels() == ["BMI", "AGE"]
        assert table.corner_label == "PeopleID"
        assert table.matrix[1, 1] == 38.0

    def test_from_dataframe_duplicates_warn(self):
        df = pd.DataFrame([[1.0], [2.0]], index=["S1", "S1"], columns=["A"])
        with pytest.warns(UserWarning, match="duplicate row labels"):
            table = LabeledTable.from_dataframe(df)
        assert not table.is_consistent()

    def test_from_dataframe_non_numeric(self):
        df = pd.DataFrame({"A": ["x", "y"]}, index=["S1", "S2"])
        with pytest.raises(ValueError, match="non-numeric"):
            LabeledTable.from_dataframe(df)

    def test_dataframe_round_trip_through_file(self, tmp_path):
        df = pd.DataFrame([[0, 1, 2], [2, 1, 0]], index=["S1", "S2"], columns=["rs1", "rs2", "rs3"])
        path = tmp_path / "geno.txt"
        LabeledTable.from_dataframe(df, upper_left_name="PeopleID").write(path)
        table, _ = LabeledTable.read(path)
        pd.testing.assert_frame_equal(
            table.to_dataframe(),
            df.astype(float).rename_axis("PeopleID"),
            check_column_type=False,
            check_index_type=False,
        )
