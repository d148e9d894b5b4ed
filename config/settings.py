"""Global configuration and constants for CSV Chart Studio."""

from __future__ import annotations

import os
from typing import Final, Tuple

APP_TITLE: Final = "CSV Chart Studio - Data Visualizer"
WINDOW_GEOMETRY: Final = "1300x900"

# Preview only, the full table is always used for charts and statistics
PREVIEW_ROW_LIMIT: Final = 100

CSV_ENCODINGS: Final[Tuple[str, ...]] = ("utf-8-sig", "utf-8", "latin-1", "cp1252")
CSV_DELIMITERS: Final[Tuple[str, ...]] = (",", ";", "\t", "|")

CHART_KINDS: Final[Tuple[str, ...]] = ("bar", "line", "pie", "doughnut", "scatter")
CHART_COLORS: Final[Tuple[str, ...]] = (
    "#2563ebb3",
    "#f59e0bb3",
    "#10b981b3",
    "#ef4444b3",
    "#8b5cf6b3",
)
CHART_BORDER_COLOR: Final = "#2563eb"
FIGURE_SIZE: Final = (8, 4)
FIGURE_DPI: Final = 100

STATS_DECIMALS: Final = 2

LOG_LEVEL: Final = os.environ.get("CHART_STUDIO_LOG_LEVEL", "INFO").upper()
