"""Translate a built series into the configuration the chart renderer draws."""

from __future__ import annotations

from typing import Dict, List, Optional, TypedDict, Union

from config.settings import CHART_BORDER_COLOR, CHART_COLORS
from models.chart_model import ChartSpec, SeriesData


class AxisTitle(TypedDict):
    display: bool
    text: str


class AxisScale(TypedDict, total=False):
    type: str
    position: str
    begin_at_zero: bool
    title: AxisTitle


class ChartDataset(TypedDict):
    label: str
    data: Union[List[float], List[Dict[str, float]]]
    background_color: Union[str, List[str]]
    border_color: str
    border_width: int


class ChartData(TypedDict):
    labels: Optional[List[str]]
    datasets: List[ChartDataset]


class ChartOptions(TypedDict):
    scales: Dict[str, AxisScale]


class ChartConfig(TypedDict):
    type: str
    data: ChartData
    options: ChartOptions


def build_chart_config(series: SeriesData, spec: ChartSpec) -> ChartConfig:
    if spec.is_scatter:
        data: Union[List[float], List[Dict[str, float]]] = [{"x": p.x, "y": p.y} for p in series.points]
    else:
        data = list(series.values)

    dataset: ChartDataset = {
        "label": f"{spec.y_field} vs {spec.x_field}",
        "data": data,
        "background_color": list(CHART_COLORS) if spec.is_circular else CHART_COLORS[0],
        "border_color": CHART_BORDER_COLOR,
        "border_width": 1,
    }

    scales: Dict[str, AxisScale] = {}
    if not spec.is_circular:
        scales = {
            "y": {
                "begin_at_zero": True,
                "title": {"display": True, "text": spec.y_field},
            },
            "x": {
                "type": "linear" if spec.is_scatter else "category",
                "position": "bottom",
                "title": {"display": True, "text": spec.x_field},
            },
        }

    return {
        "type": spec.chart_kind,
        "data": {
            "labels": None if spec.is_scatter else list(series.labels),
            "datasets": [dataset],
        },
        "options": {"scales": scales},
    }
