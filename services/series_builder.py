import logging
from typing import List

from models.chart_model import ChartSpec, Point, SeriesData
from models.table_model import Table
from services.coercion import coerce_column, is_invalid

log = logging.getLogger(__name__)


class NonNumericColumn(UserWarning):
    """A selected axis column holds values that do not coerce to numbers."""

    def __init__(self, field: str, axis: str, message: str):
        super().__init__(message)
        self.field = field
        self.axis = axis
        self.message = message


def build_series(table: Table, spec: ChartSpec) -> SeriesData:
    series = SeriesData(kind=spec.chart_kind, x_field=spec.x_field, y_field=spec.y_field)
    ys = coerce_column(table.values(spec.y_field))

    if spec.is_scatter:
        xs = coerce_column(table.values(spec.x_field))
        # x may stay invalid, the caller warns about it
        series.points = [Point(x=x, y=y) for x, y in zip(xs.values, ys.values) if not is_invalid(y)]
        series.dropped_count = ys.invalid_count
        if series.dropped_count:
            log.debug("Scatter '%s': dropped %d rows with non-numeric y", spec.y_field, series.dropped_count)
    else:
        series.labels = table.values(spec.x_field)
        series.values = ys.values
        series.invalid_count = ys.invalid_count

    return series


def series_warnings(series: SeriesData) -> List[NonNumericColumn]:
    warnings: List[NonNumericColumn] = []
    if series.is_scatter:
        if series.invalid_x_count:
            warnings.append(NonNumericColumn(
                series.x_field, "x",
                f'Warning: Scatter plots require a numerical X-axis. '
                f'The column "{series.x_field}" contains non-numeric values.'
            ))
    elif series.invalid_y_count:
        warnings.append(NonNumericColumn(
            series.y_field, "y",
            f'Warning: The column "{series.y_field}" contains non-numeric values. '
            f'Charts may not render correctly.'
        ))
    return warnings
