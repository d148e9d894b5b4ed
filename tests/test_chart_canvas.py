import matplotlib.pyplot as plt
import pytest

from models.chart_model import ChartSpec
from models.table_model import Table
from services.chart_adapter import build_chart_config
from services.series_builder import build_series
from ui.chart_canvas import MatplotlibChart


def _chart(table, kind, x, y):
    spec = ChartSpec(kind, x, y)
    return MatplotlibChart(build_chart_config(build_series(table, spec), spec))


@pytest.mark.parametrize("kind", ["bar", "line", "pie", "doughnut", "scatter"])
def test_every_kind_renders_and_releases(sales_table, kind):
    chart = _chart(sales_table, kind, "month" if kind != "scatter" else "units", "revenue")
    number = chart.figure.number
    assert plt.fignum_exists(number)
    assert chart.ax.get_title() == ("revenue vs month" if kind != "scatter" else "revenue vs units")
    chart.destroy()
    assert chart.destroyed
    assert not plt.fignum_exists(number)


def test_destroy_is_idempotent(clean_table):
    chart = _chart(clean_table, "bar", "x", "y")
    chart.destroy()
    chart.destroy()
    assert chart.destroyed


def test_axis_titles(clean_table):
    chart = _chart(clean_table, "scatter", "x", "y")
    assert chart.ax.get_xlabel() == "x"
    assert chart.ax.get_ylabel() == "y"
    assert chart.ax.get_ylim()[0] <= 0
    chart.destroy()


@pytest.mark.parametrize("kind", ["bar", "line", "pie", "doughnut", "scatter"])
def test_all_invalid_data_does_not_crash(kind):
    table = Table(columns=["a", "b"], rows=[{"a": "p", "b": "q"}, {"a": "r", "b": "-"}])
    chart = _chart(table, kind, "a", "b")
    chart.destroy()


def test_scatter_with_non_numeric_x_does_not_crash(sales_table):
    chart = _chart(sales_table, "scatter", "month", "revenue")
    chart.destroy()
