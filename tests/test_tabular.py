"""Tests for the tabular container."""

import pytest

from profilekit.tabular.base import DataColumn, DataSet, DataTable


class TestDataColumn:
    """Tests for DataColumn."""

    def test_accepts(self):
        column = DataColumn(name="Width", data_type=int)

        assert column.accepts(800)
        assert column.accepts(None)
        assert not column.accepts("800")

    def test_default_type(self):
        assert DataColumn(name="any").accepts(object())


class TestDataTable:
    """Tests for DataTable."""

    def test_add_columns_and_row(self):
        table = DataTable(name="Window")
        table.add_column("Width", int)
        table.add_column("Title", str)
        table.add_row([800, "Main"])

        assert table.column_names == ["Width", "Title"]
        assert len(table) == 1
        assert table.get(0, "Title") == "Main"

    def test_add_columns_sequence(self):
        table = DataTable(name="t")
        table.add_columns([DataColumn(name="a", data_type=int), DataColumn(name="b", data_type=str)])
        assert table.get_column("b").data_type is str
        assert table.get_column("c") is None

    def test_duplicate_column(self):
        table = DataTable(name="t")
        table.add_column("a", int)
        with pytest.raises(ValueError):
            table.add_column("a", str)

    def test_column_after_rows(self):
        table = DataTable(name="t")
        table.add_column("a", int)
        table.add_row([1])
        with pytest.raises(ValueError):
            table.add_column("b", int)

    def test_row_length_mismatch(self):
        table = DataTable(name="t")
        table.add_column("a", int)
        with pytest.raises(ValueError):
            table.add_row([1, 2])

    def test_rows_validated_on_construction(self):
        with pytest.raises(ValueError):
            DataTable(name="t", columns=[DataColumn(name="a", data_type=int)], rows=[(1, 2)])

        table = DataTable(name="t", columns=[DataColumn(name="a", data_type=int)], rows=[(1,)])
        assert table.get(0, "a") == 1

    def test_row_type_mismatch(self):
        table = DataTable(name="t")
        table.add_column("a", int)
        with pytest.raises(ValueError):
            table.add_row(["one"])

    def test_get_missing(self):
        table = DataTable(name="t")
        table.add_column("a", int)
        with pytest.raises(KeyError):
            table.get(0, "b")
        with pytest.raises(IndexError):
            table.get(0, "a")


class TestDataSet:
    """Tests for DataSet."""

    def test_add_tables(self):
        data_set = DataSet(name="profile")
        data_set.add_table("A")
        data_set.add_table("B")

        assert data_set.table_names == ["A", "B"]
        assert [t.name for t in data_set] == ["A", "B"]
        assert len(data_set) == 2
        assert data_set.get_table("B").name == "B"
        assert data_set.get_table("C") is None

    def test_duplicate_table(self):
        data_set = DataSet(name="profile")
        data_set.add_table("A")
        with pytest.raises(ValueError):
            data_set.add_table("A")
