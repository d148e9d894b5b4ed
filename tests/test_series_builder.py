import math

from models.chart_model import ChartSpec
from models.table_model import Table
from services.series_builder import NonNumericColumn, build_series, series_warnings
from services.statistics import compute_statistics


def test_scatter_drops_invalid_y_and_keeps_invalid_x():
    table = Table(columns=["x", "y"], rows=[
        {"x": "1", "y": "2"},
        {"x": "a", "y": "3"},
        {"x": "2", "y": "b"},
    ])
    series = build_series(table, ChartSpec("scatter", "x", "y"))
    assert len(series.points) == 2
    assert (series.points[0].x, series.points[0].y) == (1.0, 2.0)
    assert math.isnan(series.points[1].x)
    assert series.points[1].y == 3.0
    assert series.dropped_count == 1
    assert series.labels == [] and series.values == []


def test_bar_keeps_invalid_values_in_place():
    table = Table(columns=["cat", "val"], rows=[{"cat": "A", "val": "10"}, {"cat": "B", "val": "x"}])
    series = build_series(table, ChartSpec("bar", "cat", "val"))
    assert series.labels == ["A", "B"]
    assert series.values[0] == 10.0
    assert math.isnan(series.values[1])
    assert compute_statistics(series.y_values()).count == 1


def test_label_value_alignment(sales_table):
    series = build_series(sales_table, ChartSpec("line", "month", "revenue"))
    assert series.labels == ["Jan", "Feb", "Mar", "Apr"]
    assert len(series.values) == 4
    assert series.invalid_y_count == 1


def test_empty_table_gives_empty_series():
    table = Table(columns=["a", "b"])
    for kind in ("bar", "scatter"):
        series = build_series(table, ChartSpec(kind, "a", "b"))
        assert series.is_empty()
        assert compute_statistics(series.y_values()) is None


def test_same_field_on_both_axes(clean_table):
    series = build_series(clean_table, ChartSpec("pie", "y", "y"))
    assert series.labels == ["2", "4", "6", "8", "10"]
    assert series.values == [2.0, 4.0, 6.0, 8.0, 10.0]


def test_scatter_y_values_feed_statistics(clean_table):
    series = build_series(clean_table, ChartSpec("scatter", "x", "y"))
    assert series.y_values() == [2.0, 4.0, 6.0, 8.0, 10.0]


def test_warning_for_non_numeric_y(sales_table):
    warnings = series_warnings(build_series(sales_table, ChartSpec("bar", "month", "units")))
    assert len(warnings) == 1
    assert isinstance(warnings[0], NonNumericColumn)
    assert warnings[0].field == "units"
    assert warnings[0].axis == "y"
    assert '"units" contains non-numeric values' in warnings[0].message


def test_warning_for_non_numeric_scatter_x(sales_table):
    warnings = series_warnings(build_series(sales_table, ChartSpec("scatter", "month", "revenue")))
    assert [w.axis for w in warnings] == ["x"]
    assert "Scatter plots require a numerical X-axis" in warnings[0].message


def test_scatter_with_dropped_y_only_has_no_warning():
    table = Table(columns=["t", "temp"], rows=[
        {"t": "1", "temp": "20.5"},
        {"t": "2", "temp": "err"},
        {"t": "3", "temp": "21"},
    ])
    series = build_series(table, ChartSpec("scatter", "t", "temp"))
    assert series.dropped_count == 1
    assert series_warnings(series) == []


def test_scatter_with_blank_x_warns_about_x(sales_table):
    series = build_series(sales_table, ChartSpec("scatter", "revenue", "units"))
    assert series.dropped_count == 1
    assert [w.axis for w in series_warnings(series)] == ["x"]


def test_non_scatter_invalid_count_comes_from_coercion(sales_table):
    series = build_series(sales_table, ChartSpec("bar", "month", "units"))
    assert series.invalid_count == 1
    assert series.invalid_y_count == 1
    assert series.dropped_count == 0


def test_clean_table_has_no_warnings(clean_table):
    assert series_warnings(build_series(clean_table, ChartSpec("bar", "x", "y"))) == []
