import customtkinter as ctk

from models.filter_state import FilterState
from utils.constants import TIME_WINDOWS, TIME_WINDOW_LABELS, TYPE_FILTERS, TYPE_FILTER_LABELS


class FilterBar(ctk.CTkFrame):
    """Time window, type and search controls. Calls on_change(FilterState)."""

    def __init__(self, master, on_change, initial: FilterState | None = None, **kwargs):
        super().__init__(master, fg_color=("gray88", "gray18"), corner_radius=8, **kwargs)
        self._on_change = on_change
        initial = initial or FilterState()

        self._window_labels = [TIME_WINDOW_LABELS[w] for w in TIME_WINDOWS]
        self._window_var = ctk.StringVar(value=TIME_WINDOW_LABELS[initial.time_window])
        self._type_var = ctk.StringVar(value=TYPE_FILTER_LABELS[initial.type_filter])
        self._search_var = ctk.StringVar(value=initial.search)
        self._search_var.trace_add("write", lambda *_: self._emit())

        self.grid_columnconfigure(5, weight=1)

        ctk.CTkLabel(self, text="Period:").grid(row=0, column=0, padx=(10, 4), pady=6)
        ctk.CTkComboBox(
            self, values=self._window_labels, variable=self._window_var,
            width=130, state="readonly", command=lambda _: self._emit(),
        ).grid(row=0, column=1, padx=(0, 12))

        ctk.CTkLabel(self, text="Type:").grid(row=0, column=2, padx=(0, 4))
        ctk.CTkSegmentedButton(
            self, values=[TYPE_FILTER_LABELS[t] for t in TYPE_FILTERS],
            variable=self._type_var, command=lambda _: self._emit(), width=220,
        ).grid(row=0, column=3, padx=(0, 12))

        ctk.CTkLabel(self, text="Search:").grid(row=0, column=4, padx=(0, 4))
        ctk.CTkEntry(self, textvariable=self._search_var).grid(
            row=0, column=5, padx=(0, 10), sticky="ew"
        )

    def get_state(self) -> FilterState:
        return FilterState(
            time_window=_key_for(TIME_WINDOW_LABELS, self._window_var.get(), "all"),
            type_filter=_key_for(TYPE_FILTER_LABELS, self._type_var.get(), "all"),
            search=self._search_var.get(),
        )

    def _emit(self):
        self._on_change(self.get_state())


def _key_for(labels: dict[str, str], label: str, default: str) -> str:
    return next((k for k, v in labels.items() if v == label), default)
