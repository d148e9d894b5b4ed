import tkinter as tk
from tkinter import ttk


class TableView(ttk.Frame):
    def __init__(self, parent, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        control_frame = ttk.Frame(self)
        control_frame.pack(fill="x", pady=(0, 5))
        ttk.Label(control_frame, text="Search:").pack(side="left", padx=(0, 5))
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(control_frame, textvariable=self.search_var, width=30)
        self.search_entry.pack(side="left", padx=(0, 10))
        self.search_entry.bind("<KeyRelease>", self._on_search)
        self.clear_search_btn = ttk.Button(control_frame, text="Reset", command=self._clear_search)
        self.clear_search_btn.pack(side="left")
        self.status_label = ttk.Label(control_frame, text="")
        self.status_label.pack(side="right")
        tree_frame = ttk.Frame(self)
        tree_frame.pack(fill="both", expand=True)
        self._tree = ttk.Treeview(tree_frame, show="headings", height=8)
        self._tree.pack(side="left", fill="both", expand=True)
        self._scroll_y = ttk.Scrollbar(tree_frame, orient="vertical", command=self._tree.yview)
        self._scroll_y.pack(side="right", fill="y")
        self._tree.configure(yscrollcommand=self._scroll_y.set)
        self._scroll_x = ttk.Scrollbar(self, orient="horizontal", command=self._tree.xview)
        self._scroll_x.pack(side="bottom", fill="x")
        self._tree.configure(xscrollcommand=self._scroll_x.set)
        self._all_data = []
        self._current_columns = []
        self._total_rows = 0

    def _on_search(self, event=None):
        search_term = self.search_var.get().lower()
        if not search_term:
            self._display_data(self._all_data)
            self._show_total()
            return
        filtered_data = [row for row in self._all_data if any(search_term in str(cell).lower() for cell in row)]
        self._display_data(filtered_data)
        self.status_label.config(text=f"Showing {len(filtered_data)} of {len(self._all_data)} previewed rows")

    def _clear_search(self):
        self.search_var.set("")
        self._display_data(self._all_data)
        self._show_total()

    def _show_total(self):
        if self._total_rows > len(self._all_data):
            self.status_label.config(text=f"Previewing first {len(self._all_data)} of {self._total_rows} rows")
        else:
            self.status_label.config(text=f"Total: {self._total_rows} rows")

    def _display_data(self, data):
        for r in self._tree.get_children(): self._tree.delete(r)
        if not self._current_columns: return
        for row in data:
            safe_row = []
            for i in range(len(self._current_columns)):
                if i < len(row): safe_row.append("" if row[i] is None else str(row[i]))
                else: safe_row.append("")
            self._tree.insert("", "end", values=tuple(safe_row))

    def clear(self):
        for r in self._tree.get_children(): self._tree.delete(r)
        self._tree["columns"] = ()
        self._all_data = []
        self._current_columns = []
        self._total_rows = 0
        self.search_var.set("")
        self.status_label.config(text="")

    def update_table_multi(self, columns, rows, total_rows=None):
        self.clear()
        self._current_columns = list(columns)
        self._all_data = rows
        self._total_rows = len(rows) if total_rows is None else total_rows
        if not columns: return
        # positional ids, header text may hold spaces or Tcl specials
        self._tree["columns"] = tuple(f"c{i}" for i in range(len(columns)))
        for col_id, col in zip(self._tree["columns"], columns):
            self._tree.heading(col_id, text=col)
            self._tree.column(col_id, anchor="w", width=140)
        self._display_data(rows)
        self._show_total()
