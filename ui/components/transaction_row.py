import customtkinter as ctk

from models.transaction import Transaction
from utils.constants import TYPE_COLORS
from utils.currency import format_currency, format_signed, format_transaction_amount
from utils.date_helpers import format_display_date


class TransactionRow(ctk.CTkFrame):
    """One line of a transaction list: date, title, category, amount, edit."""

    def __init__(self, master, tx: Transaction, index: int = 0, on_edit=None,
                 date_format: str = "DD/MM/YYYY", currency_symbol: str = "R$", **kwargs):
        bg = ("gray92", "gray17") if index % 2 == 0 else ("gray88", "gray21")
        super().__init__(master, fg_color=bg, corner_radius=4, **kwargs)
        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            self, text=format_display_date(tx.date, date_format), width=85, anchor="w"
        ).grid(row=0, column=0, padx=(8, 4), pady=4)

        ctk.CTkLabel(self, text=tx.title, anchor="w").grid(
            row=0, column=1, padx=4, sticky="ew"
        )
        ctk.CTkLabel(
            self, text=tx.category or "—", width=130, anchor="w", text_color="gray60"
        ).grid(row=0, column=2, padx=4)

        ctk.CTkLabel(
            self, text=format_transaction_amount(tx.amount, tx.type, currency_symbol),
            width=110, anchor="e", text_color=TYPE_COLORS.get(tx.type, "gray"),
        ).grid(row=0, column=3, padx=4)

        if on_edit is not None:
            ctk.CTkButton(
                self, text="Edit", width=44, height=24,
                command=lambda: on_edit(tx),
            ).grid(row=0, column=4, padx=(4, 8))


class SummaryCards(ctk.CTkFrame):
    """Income / Expenses / Balance cards over the filtered set."""

    def __init__(self, master, currency_symbol: str = "R$", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._symbol = currency_symbol
        self.grid_columnconfigure((0, 1, 2), weight=1)
        self._values = {}
        for col, label in enumerate(("Income", "Expenses", "Balance")):
            card = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=10)
            card.grid(row=0, column=col, padx=6, sticky="ew")
            card.grid_columnconfigure(0, weight=1)
            ctk.CTkLabel(
                card, text=label, font=ctk.CTkFont(size=12), text_color="gray60",
            ).grid(row=0, column=0, pady=(12, 0), padx=16)
            value = ctk.CTkLabel(card, text="", font=ctk.CTkFont(size=20, weight="bold"))
            value.grid(row=1, column=0, pady=(4, 12), padx=16)
            self._values[label] = value

    def show(self, totals):
        self._values["Income"].configure(
            text=format_currency(totals.income, self._symbol), text_color="#4CAF50"
        )
        self._values["Expenses"].configure(
            text=format_currency(totals.expenses, self._symbol), text_color="#F44336"
        )
        self._values["Balance"].configure(
            text=format_signed(totals.balance, self._symbol),
            text_color="#2196F3" if totals.balance >= 0 else "#FF9800",
        )
