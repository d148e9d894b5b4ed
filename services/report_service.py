import io
import logging
import math
from typing import Any, Optional

import openpyxl
import pandas as pd
from openpyxl.drawing.image import Image as ExcelImage
from openpyxl.styles import Font

from models.chart_model import SeriesData, SummaryStatistics
from models.table_model import Table
from services.statistics import NO_DATA_MESSAGE

log = logging.getLogger(__name__)

STATS_SHEET = "Statistics"


class ReportServiceError(Exception):
    pass


class ReportService:
    """
    Writes the current table, series and statistics to an Excel workbook:
      - Data: the loaded table as parsed
      - Series: what was charted (invalid entries left blank)
      - Statistics: summary for the Y column, plus the chart image if any
    """

    @staticmethod
    def export_report(filename: str, table: Table, series: SeriesData,
                      statistics: Optional[SummaryStatistics], figure: Any = None):
        df_data = table.to_dataframe()
        df_series = ReportService._series_frame(series)
        df_stats = ReportService._stats_frame(series.y_field, statistics)

        try:
            with pd.ExcelWriter(filename, engine="openpyxl") as writer:
                df_data.to_excel(writer, sheet_name="Data", index=False)
                df_series.to_excel(writer, sheet_name="Series", index=False)
                df_stats.to_excel(writer, sheet_name=STATS_SHEET, index=False)

                for sheet_name in writer.sheets:
                    sheet = writer.sheets[sheet_name]
                    for column in sheet.columns:
                        column = [cell for cell in column]
                        max_length = 0
                        for cell in column:
                            # "=..." cells are data, not formulas
                            if cell.data_type == "f":
                                cell.data_type = "s"
                            if cell.value is not None and len(str(cell.value)) > max_length:
                                max_length = len(str(cell.value))
                        sheet.column_dimensions[column[0].column_letter].width = max_length + 2

            if figure is not None:
                wb = openpyxl.load_workbook(filename)
                ws = wb[STATS_SHEET]
                row_idx = len(df_stats) + 4
                buf = io.BytesIO()
                figure.savefig(buf, format="png", dpi=100, bbox_inches="tight")
                buf.seek(0)
                img = ExcelImage(buf)
                img.anchor = f"B{row_idx}"
                ws.add_image(img)
                ws[f"B{row_idx - 1}"] = "Chart"
                ws[f"B{row_idx - 1}"].font = Font(bold=True)
                wb.save(filename)
        except (OSError, ValueError, KeyError) as e:
            raise ReportServiceError(f"Could not write report: {e}") from e

        log.info("Exported report to %s", filename)

    @staticmethod
    def _series_frame(series: SeriesData) -> pd.DataFrame:
        def cell(value: float):
            return None if math.isnan(value) else value

        if series.is_scatter:
            return pd.DataFrame({
                series.x_field + " (x)": [cell(p.x) for p in series.points],
                series.y_field + " (y)": [cell(p.y) for p in series.points],
            })
        y_column = series.y_field if series.y_field != series.x_field else f"{series.y_field} (value)"
        return pd.DataFrame({
            series.x_field: series.labels,
            y_column: [cell(v) for v in series.values],
        })

    @staticmethod
    def _stats_frame(field_name: str, statistics: Optional[SummaryStatistics]) -> pd.DataFrame:
        if statistics is None:
            return pd.DataFrame({"Statistic": ["Variable", "Result"], "Value": [field_name, NO_DATA_MESSAGE]})
        return pd.DataFrame({
            "Statistic": ["Variable", "Count (N)", "Min", "Max", "Mean", "Median", "Std. Deviation"],
            "Value": [field_name, statistics.count, statistics.min, statistics.max,
                      statistics.mean, statistics.median, statistics.standard_deviation],
        })
