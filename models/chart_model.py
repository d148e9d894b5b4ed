import math
from dataclasses import dataclass, field
from typing import List, Tuple

from config.settings import CHART_KINDS, STATS_DECIMALS
from models.table_model import Table


class ChartSpecError(ValueError):
    pass


@dataclass(frozen=True)
class ChartSpec:
    """User selection: chart kind plus the X and Y column names."""

    chart_kind: str
    x_field: str
    y_field: str

    @property
    def is_scatter(self) -> bool:
        return self.chart_kind == "scatter"

    @property
    def is_circular(self) -> bool:
        return self.chart_kind in ("pie", "doughnut")

    def validate(self, table: Table) -> None:
        if self.chart_kind not in CHART_KINDS:
            raise ChartSpecError(f"Unknown chart type '{self.chart_kind}'.")
        for axis, name in (("X", self.x_field), ("Y", self.y_field)):
            if not name or not table.has_column(name):
                raise ChartSpecError(f"{axis}-axis column '{name}' is not in the loaded data.")


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass
class SeriesData:
    """
    Chart-ready shaping of the table:
      - bar/line/pie/doughnut: labels + values, invalid values kept in place (NaN)
      - scatter: points, rows with invalid y already dropped
    """

    kind: str
    x_field: str
    y_field: str
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)
    dropped_count: int = 0
    invalid_count: int = 0

    @property
    def is_scatter(self) -> bool:
        return self.kind == "scatter"

    def is_empty(self) -> bool:
        return not (self.points if self.is_scatter else self.values)

    def y_values(self) -> List[float]:
        if self.is_scatter:
            return [p.y for p in self.points]
        return list(self.values)

    @property
    def invalid_x_count(self) -> int:
        if not self.is_scatter:
            return 0
        return sum(1 for p in self.points if math.isnan(p.x))

    @property
    def invalid_y_count(self) -> int:
        if self.is_scatter:
            return self.dropped_count
        return self.invalid_count


@dataclass(frozen=True)
class SummaryStatistics:
    count: int
    min: float
    max: float
    mean: float
    median: float
    standard_deviation: float

    def as_rows(self, field_name: str, decimals: int = STATS_DECIMALS) -> List[Tuple[str, str]]:
        fmt = f"{{:.{decimals}f}}"
        return [
            ("Variable", field_name),
            ("Count (N)", str(self.count)),
            ("Min", fmt.format(self.min)),
            ("Max", fmt.format(self.max)),
            ("Mean", fmt.format(self.mean)),
            ("Median", fmt.format(self.median)),
            ("Std. Deviation", fmt.format(self.standard_deviation)),
        ]
