import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol, Tuple

from models.chart_model import ChartSpec, ChartSpecError, SeriesData, SummaryStatistics
from models.table_model import Table
from services.chart_adapter import ChartConfig, build_chart_config
from services.coercion import coerce_numeric, is_invalid
from services.report_service import ReportService
from services.series_builder import NonNumericColumn, build_series, series_warnings
from services.statistics import compute_statistics
from services.table_service import TableService

log = logging.getLogger(__name__)


class AppState(Enum):
    EMPTY = "empty"
    LOADED = "loaded"
    VISUALIZED = "visualized"


class ChartHandle(Protocol):
    def destroy(self) -> None: ...


ChartRenderer = Callable[[ChartConfig], ChartHandle]


@dataclass
class Visualization:
    spec: ChartSpec
    series: SeriesData
    config: ChartConfig
    statistics: Optional[SummaryStatistics]
    warnings: List[NonNumericColumn] = field(default_factory=list)
    chart: Optional[ChartHandle] = None


class ChartController:
    """
    Holds the loaded table and the current chart, and runs the three user
    actions (load, generate, clear) one at a time.
    """

    def __init__(self, renderer: Optional[ChartRenderer] = None):
        self.renderer = renderer
        self.table: Optional[Table] = None
        self.visualization: Optional[Visualization] = None
        self.state = AppState.EMPTY
        self.last_warnings: List[str] = []

    # --- LOADING ---
    def load_text(self, text: str, has_header: bool = True) -> Table:
        return self._replace_table(TableService.parse_text(text, has_header=has_header))

    def load_file(self, path: str, has_header: bool = True) -> Table:
        return self._replace_table(TableService.read_file(path, has_header=has_header))

    def _replace_table(self, table: Table) -> Table:
        self.release_chart()
        self.visualization = None
        self.last_warnings = []
        self.table = table
        self.state = AppState.LOADED
        log.info("Loaded table with %d rows and columns %s", table.row_count, table.column_names)
        return table

    def default_axes(self) -> Tuple[Optional[str], Optional[str]]:
        if self.table is None or not self.table.column_names:
            return None, None
        columns = self.table.column_names
        y_field = columns[0]
        if not self.table.is_empty():
            first = self.table.rows[0]
            for col in columns:
                if not is_invalid(coerce_numeric(first[col])):
                    y_field = col
                    break
        return columns[0], y_field

    # --- VISUALIZATION ---
    def generate(self, spec: ChartSpec) -> Visualization:
        if self.table is None:
            raise ChartSpecError("Load some data before generating a chart.")
        spec.validate(self.table)

        series = build_series(self.table, spec)
        warnings = series_warnings(series)
        config = build_chart_config(series, spec)
        statistics = compute_statistics(series.y_values())

        self.release_chart()
        self.visualization = None
        self.state = AppState.LOADED
        chart = self.renderer(config) if self.renderer is not None else None

        self.visualization = Visualization(spec, series, config, statistics, warnings, chart)
        self.last_warnings = [w.message for w in warnings]
        self.state = AppState.VISUALIZED
        log.info("Generated %s chart for %s vs %s (%d warnings)",
                 spec.chart_kind, spec.y_field, spec.x_field, len(warnings))
        return self.visualization

    def release_chart(self):
        if self.visualization is None or self.visualization.chart is None:
            return
        chart = self.visualization.chart
        self.visualization.chart = None
        chart.destroy()
        log.debug("Released previous chart resource")

    def clear(self):
        self.release_chart()
        self.visualization = None
        self.table = None
        self.last_warnings = []
        self.state = AppState.EMPTY
        log.info("Cleared data")

    # --- EXPORT ---
    def export_report(self, path: str, figure: Any = None):
        if self.table is None or self.visualization is None:
            raise ChartSpecError("Generate a chart before exporting a report.")
        if figure is None:
            figure = getattr(self.visualization.chart, "figure", None)
        ReportService.export_report(path, self.table, self.visualization.series,
                                    self.visualization.statistics, figure)
