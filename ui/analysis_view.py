import tkinter as tk
from tkinter import ttk

from services.statistics import NO_DATA_MESSAGE
from ui.chart_canvas import MatplotlibChart


# ========================================================
#  RESULTS VIEW: CHART + DESCRIPTIVE STATISTICS
# ========================================================
class AnalysisView(ttk.Frame):
    def __init__(self, parent, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)

        self.chart_frame = ttk.LabelFrame(self, text="Chart")
        self.chart_frame.pack(side="left", fill="both", expand=True, padx=5, pady=5)
        self._placeholder = ttk.Label(self.chart_frame, text="Choose axes and press Generate", anchor="center")
        self._placeholder.pack(fill="both", expand=True)

        stats_frame = ttk.LabelFrame(self, text="Statistics")
        stats_frame.pack(side="right", fill="y", padx=5, pady=5)
        self._stats_tree = ttk.Treeview(stats_frame, columns=("stat", "value"), show="headings", height=8)
        self._stats_tree.heading("stat", text="Statistic")
        self._stats_tree.heading("value", text="Value")
        self._stats_tree.column("stat", anchor="w", width=120)
        self._stats_tree.column("value", anchor="e", width=140)
        self._stats_tree.pack(fill="x", padx=5, pady=5)
        self.var_message = tk.StringVar(value="")
        ttk.Label(stats_frame, textvariable=self.var_message, foreground="gray", wraplength=250).pack(padx=5, pady=5)

    def create_chart(self, config):
        """Renderer factory for the controller: draws into this view's chart area."""
        self._placeholder.pack_forget()
        return MatplotlibChart(config, master=self.chart_frame)

    def show_statistics(self, field_name, statistics):
        for r in self._stats_tree.get_children(): self._stats_tree.delete(r)
        if statistics is None:
            self.var_message.set(NO_DATA_MESSAGE)
            return
        self.var_message.set("")
        for label, value in statistics.as_rows(field_name):
            self._stats_tree.insert("", "end", values=(label, value))

    def clear(self):
        for r in self._stats_tree.get_children(): self._stats_tree.delete(r)
        self.var_message.set("")
        self._placeholder.pack(fill="both", expand=True)
