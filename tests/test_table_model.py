import pytest

from models.table_model import Column, Table


def test_rows_get_every_declared_column():
    table = Table(columns=["a", "b"], rows=[{"a": "1"}, {"a": None, "b": "2"}])
    assert table.rows == [{"a": "1", "b": ""}, {"a": "", "b": "2"}]


def test_undeclared_columns_are_rejected():
    with pytest.raises(ValueError):
        Table(columns=["a"], rows=[{"a": "1", "z": "2"}])


def test_duplicate_columns_are_rejected():
    with pytest.raises(ValueError):
        Table(columns=["a", "a"])


def test_columns_keep_position(sales_table):
    assert sales_table.columns[1] == Column("revenue", 1)
    assert sales_table.row_count == len(sales_table) == 4
    assert sales_table.has_column("units")
    assert not sales_table.has_column("profit")


def test_values_of_unknown_column(sales_table):
    with pytest.raises(KeyError):
        sales_table.values("profit")


def test_preview_rows_limit(sales_table):
    preview = sales_table.preview_rows(2)
    assert preview == [["Jan", "100", "3"], ["Feb", "250.5", "n/a"]]


def test_empty_table():
    table = Table()
    assert table.is_empty()
    assert table.column_names == []


def test_to_dataframe(sales_table):
    df = sales_table.to_dataframe()
    assert list(df.columns) == ["month", "revenue", "units"]
    assert df.shape == (4, 3)
