import customtkinter as ctk

from ui.components.transaction_row import TransactionRow
from ui.tabs.transaction_tab_base import TransactionTabBase
from utils.constants import DASHBOARD_RECENT_LIMIT
from utils.date_helpers import format_display_date


class DashboardTab(TransactionTabBase):
    """Summary cards, the most recent filtered transactions and a count panel."""

    def __init__(self, master, *args, show_all=None, **kwargs):
        self._show_all = show_all or (lambda: None)
        super().__init__(master, *args, **kwargs)

    def _build_content(self):
        bottom = ctk.CTkFrame(self, fg_color="transparent")
        bottom.grid(row=3, column=0, sticky="nsew", padx=10, pady=(0, 10))
        bottom.grid_columnconfigure(0, weight=2)
        bottom.grid_columnconfigure(1, weight=1)
        bottom.grid_rowconfigure(0, weight=1)

        self._recent_frame = ctk.CTkScrollableFrame(bottom, label_text="Recent Transactions")
        self._recent_frame.grid(row=0, column=0, sticky="nsew", padx=(0, 8))
        self._recent_frame.grid_columnconfigure(0, weight=1)

        side = ctk.CTkFrame(bottom, fg_color=("gray90", "gray20"), corner_radius=10)
        side.grid(row=0, column=1, sticky="nsew", padx=(8, 0))
        ctk.CTkLabel(
            side, text="Summary", font=ctk.CTkFont(size=15, weight="bold"),
        ).pack(anchor="w", padx=16, pady=(14, 8))
        self._count_label = ctk.CTkLabel(side, text="", anchor="w")
        self._count_label.pack(anchor="w", padx=16, pady=2)
        self._last_label = ctk.CTkLabel(side, text="", anchor="w")
        self._last_label.pack(anchor="w", padx=16, pady=2)
        ctk.CTkButton(
            side, text="+ New Transaction", command=self.open_add_form,
        ).pack(fill="x", padx=16, pady=(16, 4))
        ctk.CTkButton(
            side, text="View all transactions →",
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"), command=self._show_all,
        ).pack(fill="x", padx=16, pady=4)

    def _render_content(self):
        filtered = self.view.filtered
        self._count_label.configure(text=f"Total transactions: {len(filtered)}")
        last = format_display_date(filtered[0].date, self._date_format) if filtered else "N/A"
        self._last_label.configure(text=f"Latest transaction: {last}")

        for w in self._recent_frame.winfo_children():
            w.destroy()
        if self._render_placeholder(self._recent_frame):
            return
        for idx, tx in enumerate(filtered[:DASHBOARD_RECENT_LIMIT]):
            TransactionRow(
                self._recent_frame, tx, index=idx, on_edit=self.open_edit_form,
                date_format=self._date_format, currency_symbol=self._currency_symbol,
            ).grid(row=idx, column=0, sticky="ew", pady=1, padx=2)
