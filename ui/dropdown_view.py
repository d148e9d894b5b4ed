from tkinter import ttk


class DropdownView(ttk.Frame):
    """
    Readonly combobox with a placeholder; get_selected() is None until a real option is picked
    """

    def __init__(self, parent, placeholder="Select a column", width=20, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.placeholder = placeholder

        self._combobox = ttk.Combobox(self, state="readonly", font=("Arial", 11), width=width)
        self._combobox.pack(fill="x", padx=6, pady=6)
        self._combobox.set(self.placeholder)

    def update_options(self, options, selected=None):
        options = list(options or [])
        self._combobox["values"] = options
        if selected in options:
            self._combobox.set(selected)
        elif options:
            self._combobox.set(self.placeholder)
        else:
            self._combobox.set("No columns")

    def get_selected(self):
        value = self._combobox.get()
        if value not in self._combobox["values"]:
            return None
        return value
