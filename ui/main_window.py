import logging
import tkinter as tk
from tkinter import ttk, filedialog, messagebox
import matplotlib.pyplot as plt

from config.settings import APP_TITLE, CHART_KINDS, PREVIEW_ROW_LIMIT, WINDOW_GEOMETRY
from controllers.chart_controller import AppState, ChartController
from models.chart_model import ChartSpec
from ui.analysis_view import AnalysisView
from ui.dropdown_view import DropdownView
from ui.table_view import TableView

log = logging.getLogger(__name__)


class MainWindow:
    def __init__(self):
        self.window = tk.Tk()
        self.window.title(APP_TITLE)
        self.window.geometry(WINDOW_GEOMETRY)
        self.window.protocol("WM_DELETE_WINDOW", self.on_closing)

        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Ready", anchor="w")
        self.lbl_status.pack(side="left", fill="x")
        self.progress = ttk.Progressbar(self.status_frame, mode='indeterminate', length=200)

        self._setup_input_section()
        self._setup_preview_section()
        self._setup_analysis_section()

        self.controller = ChartController(renderer=self.results.create_chart)
        self._sync_sections()

    def run(self):
        self.window.mainloop()

    def run_task(self, description, func):
        self.window.config(cursor="watch")
        self.lbl_status.config(text=f"⏳ {description}...")
        self.progress.pack(side="right", padx=10)
        self.progress.start(10)
        self.window.update()
        try:
            func()
            self.lbl_status.config(text="✅ Ready")
        except Exception as e:
            log.exception("%s failed", description)
            self.lbl_status.config(text="❌ Error")
            messagebox.showerror("Error", str(e))
        finally:
            self.progress.stop()
            self.progress.pack_forget()
            self.window.config(cursor="")

    # --- LAYOUT ---
    def _setup_input_section(self):
        frame = ttk.LabelFrame(self.window, text="1. Data", padding=5)
        frame.pack(fill="x", padx=10, pady=(10, 5))
        self.txt_input = tk.Text(frame, height=6, font=("Consolas", 10), wrap="none")
        self.txt_input.pack(fill="x", padx=5, pady=5)
        toolbar = ttk.Frame(frame)
        toolbar.pack(fill="x")
        ttk.Button(toolbar, text="📥 Load Data",
                   command=lambda: self.run_task("Parsing data", self.load_text_action)).pack(side="left", padx=5)
        ttk.Button(toolbar, text="📂 Upload File",
                   command=lambda: self.run_task("Reading file", self.load_file_action)).pack(side="left", padx=5)
        ttk.Button(toolbar, text="🗑️ Clear", command=self.clear_action).pack(side="left", padx=5)
        self.var_has_header = tk.BooleanVar(value=True)
        ttk.Checkbutton(toolbar, text="First row is header", variable=self.var_has_header).pack(side="left", padx=15)

    def _setup_preview_section(self):
        self.preview_frame = ttk.LabelFrame(self.window, text="2. Preview", padding=5)
        self.table_preview = TableView(self.preview_frame)
        self.table_preview.pack(fill="both", expand=True)

    def _setup_analysis_section(self):
        self.analysis_frame = ttk.LabelFrame(self.window, text="3. Visualize", padding=5)
        ctrl = ttk.Frame(self.analysis_frame)
        ctrl.pack(fill="x")
        ttk.Label(ctrl, text="Chart type:").pack(side="left")
        self.dd_chart_type = DropdownView(ctrl, placeholder="Select a chart", width=12)
        self.dd_chart_type.pack(side="left", padx=(0, 10))
        self.dd_chart_type.update_options(CHART_KINDS, selected=CHART_KINDS[0])
        ttk.Label(ctrl, text="X axis:").pack(side="left")
        self.dd_x = DropdownView(ctrl)
        self.dd_x.pack(side="left", padx=(0, 10))
        ttk.Label(ctrl, text="Y axis:").pack(side="left")
        self.dd_y = DropdownView(ctrl)
        self.dd_y.pack(side="left", padx=(0, 10))
        ttk.Button(ctrl, text="📊 Generate",
                   command=lambda: self.run_task("Generating chart", self.generate_action)).pack(side="left", padx=5)
        ttk.Button(ctrl, text="💾 Export Report", command=self.export_action).pack(side="right", padx=5)
        self.results = AnalysisView(self.analysis_frame)
        self.results.pack(fill="both", expand=True)

    def _sync_sections(self):
        state = self.controller.state
        if state == AppState.EMPTY:
            self.preview_frame.pack_forget()
            self.analysis_frame.pack_forget()
            return
        # re-packing in this order keeps preview above the analysis section
        self.preview_frame.pack(fill="x", padx=10, pady=5)
        self.analysis_frame.pack(fill="both", expand=True, padx=10, pady=5)

    # --- ACTIONS ---
    def load_text_action(self):
        self.controller.load_text(self.txt_input.get("1.0", "end"), has_header=self.var_has_header.get())
        self._on_table_loaded()

    def load_file_action(self):
        path = filedialog.askopenfilename(filetypes=[("CSV / text", "*.csv *.tsv *.txt"), ("All files", "*.*")])
        if not path: return
        self.controller.load_file(path, has_header=self.var_has_header.get())
        self._on_table_loaded()

    def _on_table_loaded(self):
        table = self.controller.table
        self.table_preview.update_table_multi(table.column_names, table.preview_rows(PREVIEW_ROW_LIMIT),
                                              total_rows=table.row_count)
        x_field, y_field = self.controller.default_axes()
        self.dd_x.update_options(table.column_names, selected=x_field)
        self.dd_y.update_options(table.column_names, selected=y_field)
        self.results.clear()
        self._sync_sections()

    def generate_action(self):
        spec = ChartSpec(
            chart_kind=self.dd_chart_type.get_selected() or "",
            x_field=self.dd_x.get_selected() or "",
            y_field=self.dd_y.get_selected() or "",
        )
        try:
            visualization = self.controller.generate(spec)
        except Exception:
            # a failed render has already released the previous chart
            if self.controller.visualization is None:
                self.results.clear()
            raise
        self.results.show_statistics(spec.y_field, visualization.statistics)
        self._sync_sections()
        for message in self.controller.last_warnings:
            messagebox.showwarning("Warning", message)

    def clear_action(self):
        self.txt_input.delete("1.0", "end")
        self.controller.clear()
        self.table_preview.clear()
        self.results.clear()
        self._sync_sections()

    def export_action(self):
        if self.controller.state != AppState.VISUALIZED:
            messagebox.showinfo("Export", "Generate a chart before exporting a report.")
            return
        path = filedialog.asksaveasfilename(initialfile="chart_report.xlsx", defaultextension=".xlsx",
                                            filetypes=[("Excel", "*.xlsx")])
        if not path: return
        self.run_task("Exporting report", lambda: self.controller.export_report(path))

    def on_closing(self):
        self.controller.release_chart()
        plt.close('all')
        self.window.destroy()
