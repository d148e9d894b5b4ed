import logging
import math
from itertools import cycle

import matplotlib.pyplot as plt

from config.settings import FIGURE_DPI, FIGURE_SIZE
from services.chart_adapter import ChartConfig

log = logging.getLogger(__name__)


def _finite_or_nan(value: float) -> float:
    return value if math.isfinite(value) else math.nan


class MatplotlibChart:
    """
    One rendered chart: owns a matplotlib figure and, when a Tk master is
    given, the canvas widget embedding it. Call destroy() before replacing it.
    """

    def __init__(self, config: ChartConfig, master=None):
        self.config = config
        self.figure, self.ax = plt.subplots(figsize=FIGURE_SIZE, dpi=FIGURE_DPI)
        self.canvas = None
        self._destroyed = False
        try:
            self._draw()
            if master is not None:
                from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
                self.canvas = FigureCanvasTkAgg(self.figure, master=master)
                self.canvas.get_tk_widget().pack(fill="both", expand=True)
                self.canvas.draw()
        except Exception:
            self.destroy()
            raise

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self):
        if self._destroyed:
            return
        if self.canvas is not None:
            self.canvas.get_tk_widget().destroy()
            self.canvas = None
        plt.close(self.figure)
        self._destroyed = True
        log.debug("Released %s chart", self.config["type"])

    # --- DRAWING ---
    def _draw(self):
        kind = self.config["type"]
        dataset = self.config["data"]["datasets"][0]
        scales = self.config["options"]["scales"]
        ax = self.ax

        if kind in ("pie", "doughnut"):
            self._draw_circular(kind, dataset)
        elif kind == "scatter":
            # non-finite coordinates are masked by matplotlib as NaN
            xs = [_finite_or_nan(p["x"]) for p in dataset["data"]]
            ys = [_finite_or_nan(p["y"]) for p in dataset["data"]]
            ax.scatter(xs, ys, color=dataset["background_color"],
                       edgecolors=dataset["border_color"], linewidths=dataset["border_width"],
                       label=dataset["label"])
        else:
            labels = self.config["data"]["labels"] or []
            values = dataset["data"]
            x_pos = range(len(values))
            if kind == "bar":
                heights = [v if math.isfinite(v) else 0.0 for v in values]
                ax.bar(x_pos, heights, color=dataset["background_color"],
                       edgecolor=dataset["border_color"], linewidth=dataset["border_width"],
                       label=dataset["label"], align="center")
            else:
                ax.plot(x_pos, [_finite_or_nan(v) for v in values], color=dataset["border_color"],
                        marker="o", markersize=4, linewidth=1.5, label=dataset["label"])
            ax.set_xticks(list(x_pos))
            ax.set_xticklabels(labels, rotation=45, ha="right", fontsize=9)

        if scales:
            self._apply_scales(scales)
            if not self._is_empty(dataset):
                ax.legend(loc="upper left", fontsize="small")
        ax.set_title(dataset["label"])
        self.figure.tight_layout()

    def _draw_circular(self, kind, dataset):
        ax = self.ax
        labels = self.config["data"]["labels"] or []
        slices = [(l, v) for l, v in zip(labels, dataset["data"]) if math.isfinite(v) and v > 0]
        if not slices:
            ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes)
            ax.set_axis_off()
            return
        colors = dataset["background_color"]
        if isinstance(colors, str):
            colors = [colors]
        palette = cycle(colors)
        wedgeprops = {"edgecolor": "white", "linewidth": dataset["border_width"]}
        if kind == "doughnut":
            wedgeprops["width"] = 0.45
        wedges, _, _ = ax.pie(
            [v for _, v in slices], labels=None, autopct="%1.1f%%", startangle=90,
            pctdistance=0.78 if kind == "doughnut" else 0.6,
            colors=[next(palette) for _ in slices], wedgeprops=wedgeprops, textprops={"fontsize": 8},
        )
        ax.axis("equal")
        ax.legend(wedges, [l for l, _ in slices], loc="center left", bbox_to_anchor=(1, 0, 0.5, 1),
                  fontsize="small")

    def _apply_scales(self, scales):
        ax = self.ax
        x_scale = scales.get("x", {})
        y_scale = scales.get("y", {})
        if x_scale.get("title", {}).get("display"):
            ax.set_xlabel(x_scale["title"]["text"])
        if y_scale.get("title", {}).get("display"):
            ax.set_ylabel(y_scale["title"]["text"])
        if y_scale.get("begin_at_zero"):
            lo, hi = ax.get_ylim()
            ax.set_ylim(min(lo, 0), max(hi, 0))
        ax.grid(True, linestyle="--", alpha=0.5)

    @staticmethod
    def _is_empty(dataset) -> bool:
        return not dataset["data"]
