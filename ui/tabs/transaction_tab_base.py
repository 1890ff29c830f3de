from functools import partial

import customtkinter as ctk

from models.transaction import Transaction
from services.transaction_service import TransactionService
from services.transaction_view import ERROR, LOADING, TransactionView
from ui.components.alert_banner import AlertBanner
from ui.components.background import run_in_background
from ui.components.filter_bar import FilterBar
from ui.components.transaction_form import TransactionForm
from ui.components.transaction_row import SummaryCards


class TransactionTabBase(ctk.CTkFrame):
    """Shared layout and behaviour of the dashboard and transaction list.

    Row 0: filter bar, row 1: error banner, row 2: summary cards,
    row 3: subclass content built by _build_content().
    """

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        on_transaction_saved,   # callable(tx | None, created: bool)
        date_format: str = "DD/MM/YYYY",
        currency_symbol: str = "R$",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._tx_svc = tx_service
        self._on_transaction_saved = on_transaction_saved
        self._date_format = date_format
        self._currency_symbol = currency_symbol

        self.view = TransactionView(tx_service)
        self.view.subscribe(self._render)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        self._filter_bar = FilterBar(self, on_change=self.view.set_filters)
        self._filter_bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=1, column=0, sticky="ew", padx=8)

        self._cards = SummaryCards(self, currency_symbol=currency_symbol)
        self._cards.grid(row=2, column=0, sticky="ew", padx=10, pady=10)

        self._build_content()
        self.refresh()

    # ── Loading ──────────────────────────────────────────────────────────────
    def refresh(self):
        """Remount: clear the cache and fetch again in the background."""
        generation = self.view.reload()
        run_in_background(
            self, self.view.fetch,
            partial(self.view.complete_load, generation=generation),
            partial(self.view.fail_load, generation=generation),
        )

    def replace_transaction(self, tx: Transaction):
        self.view.replace_transaction(tx)

    def unmount(self):
        """Call before destroying the tab; in-flight results are then dropped."""
        self.view.unmount()

    # ── Rendering ────────────────────────────────────────────────────────────
    def _render(self):
        for w in self._banner_frame.winfo_children():
            w.destroy()
        if self.view.status == ERROR:
            AlertBanner(self._banner_frame, message=self.view.error).pack(fill="x", pady=(6, 0))
        self._cards.show(self.view.totals)
        self._render_content()

    def _render_placeholder(self, parent, row=0):
        """Loading / empty text. Returns True if a placeholder was drawn."""
        if self.view.status == LOADING:
            text = "Loading transactions…"
        elif not self.view.filtered:
            text = "No transactions found."
        else:
            return False
        ctk.CTkLabel(parent, text=text, text_color="gray60").grid(
            row=row, column=0, pady=20
        )
        return True

    def _build_content(self):
        raise NotImplementedError

    def _render_content(self):
        raise NotImplementedError

    # ── Forms ────────────────────────────────────────────────────────────────
    def open_add_form(self):
        form = TransactionForm(
            self.winfo_toplevel(), self._tx_svc,
            on_saved=lambda tx: self._on_transaction_saved(tx, True),
            date_format=self._date_format,
        )
        self.wait_window(form)

    def open_edit_form(self, tx: Transaction):
        form = TransactionForm(
            self.winfo_toplevel(), self._tx_svc,
            transaction=tx,
            on_saved=lambda updated: self._on_transaction_saved(updated, False),
            date_format=self._date_format,
        )
        self.wait_window(form)
