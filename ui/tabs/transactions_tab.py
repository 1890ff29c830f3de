import customtkinter as ctk

from ui.components.transaction_row import TransactionRow
from ui.tabs.transaction_tab_base import TransactionTabBase


_MAX_RENDERED_ROWS = 100


class TransactionsTab(TransactionTabBase):
    """Every transaction matching the current filters."""

    def _build_content(self):
        hdr = ctk.CTkFrame(self, fg_color="transparent")
        hdr.grid(row=3, column=0, sticky="nsew", padx=8, pady=(0, 8))
        hdr.grid_columnconfigure(0, weight=1)
        hdr.grid_rowconfigure(1, weight=1)

        top = ctk.CTkFrame(hdr, fg_color="transparent")
        top.grid(row=0, column=0, sticky="ew", pady=(0, 4))
        self._count_label = ctk.CTkLabel(top, text="", text_color="gray60")
        self._count_label.pack(side="left", padx=4)
        ctk.CTkButton(
            top, text="+ New Transaction", width=140, command=self.open_add_form,
        ).pack(side="right")

        self._scroll = ctk.CTkScrollableFrame(hdr)
        self._scroll.grid(row=1, column=0, sticky="nsew")
        self._scroll.grid_columnconfigure(0, weight=1)

    def _render_content(self):
        for w in self._scroll.winfo_children():
            w.destroy()
        rows = self.view.filtered
        self._count_label.configure(
            text=f"{len(rows)} of {len(self.view.transactions)} transactions"
        )
        if self._render_placeholder(self._scroll):
            return

        for idx, tx in enumerate(rows[:_MAX_RENDERED_ROWS]):
            TransactionRow(
                self._scroll, tx, index=idx, on_edit=self.open_edit_form,
                date_format=self._date_format, currency_symbol=self._currency_symbol,
            ).grid(row=idx, column=0, sticky="ew", pady=1, padx=2)

        if len(rows) > _MAX_RENDERED_ROWS:
            ctk.CTkLabel(
                self._scroll,
                text=f"Showing {_MAX_RENDERED_ROWS} of {len(rows)} transactions. "
                     "Use filters or search to narrow results.",
                text_color="gray60",
                font=ctk.CTkFont(size=11),
            ).grid(row=_MAX_RENDERED_ROWS, column=0, pady=8)
