from datetime import date, datetime

import customtkinter as ctk

from models.transaction import Transaction
from services.errors import ValidationError, error_message
from services.transaction_service import TransactionService, validate_transaction_fields
from ui.components.background import run_in_background
from ui.components.date_picker import DatePickerWidget
from utils.constants import CREATE_ERROR_FALLBACK, UPDATE_ERROR_FALLBACK
from utils.date_helpers import combine_local


class TransactionForm(ctk.CTkToplevel):
    """Add or edit a transaction.

    on_saved(tx) runs on the UI thread after the server accepts the change;
    tx is the server's record for edits and may be None for creates when the
    server does not echo the new record.
    """

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        transaction: Transaction | None = None,
        on_saved=None,
        date_format: str = "DD/MM/YYYY",
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._tx_svc = tx_service
        self._transaction = transaction
        self._on_saved = on_saved
        self.saved = False

        self.title("Edit Transaction" if transaction else "New Transaction")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        tx = transaction
        self._field_errors: dict[str, ctk.StringVar] = {}
        r = 0

        self._title_var = ctk.StringVar(value=tx.title if tx else "")
        r = self._entry_row(r, "Title:", "title", self._title_var)

        self._amount_var = ctk.StringVar(value=f"{tx.amount:.2f}" if tx else "")
        r = self._entry_row(r, "Amount:", "amount", self._amount_var)

        self._label("Type:", r)
        self._type_var = ctk.StringVar(value=tx.type if tx else "expense")
        type_frame = ctk.CTkFrame(self, fg_color="transparent")
        type_frame.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="w")
        for value, text in (("expense", "Expense"), ("income", "Income")):
            ctk.CTkRadioButton(
                type_frame, text=text, variable=self._type_var, value=value,
            ).pack(side="left", padx=4)
        r += 1

        self._category_var = ctk.StringVar(value=tx.category if tx else "")
        r = self._entry_row(r, "Category:", "category", self._category_var)

        self._label("Date:", r)
        self._date_picker = DatePickerWidget(
            self,
            initial_date=_local(tx.date).date() if tx else date.today(),
            date_format=date_format,
        )
        self._date_picker.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="w")
        r += 1
        r = self._error_row(r, "date")

        self._build_footer(r)

        self.transient(master)
        self.grab_set()
        self._center()

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=4, sticky="e"
        )

    def _entry_row(self, r, label, field, var) -> int:
        self._label(label, r)
        ctk.CTkEntry(self, textvariable=var, width=220).grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        return self._error_row(r + 1, field)

    def _error_row(self, r, field) -> int:
        var = ctk.StringVar()
        self._field_errors[field] = var
        ctk.CTkLabel(
            self, textvariable=var, text_color="#F44336",
            font=ctk.CTkFont(size=11), anchor="w",
        ).grid(row=r, column=1, padx=(0, 16), sticky="w")
        return r + 1

    def _build_footer(self, r):
        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=300, anchor="w",
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        self._save_btn = ctk.CTkButton(
            btn_frame, text="Save Changes" if self._transaction else "Add Transaction",
            width=130, command=self._on_save,
        )
        self._save_btn.pack(side="right")

    def _show_errors(self, errors: dict[str, str]):
        for field, var in self._field_errors.items():
            var.set(errors.get(field, ""))
        self._error_var.set(errors.get("form", errors.get("type", "")))

    def _on_save(self):
        picked = self._date_picker.get()
        # edits keep the original time of day
        at = _local(self._transaction.date).time() if self._transaction else None
        when = combine_local(picked, at) if picked else None
        fields = dict(
            title=self._title_var.get(),
            amount=self._amount_var.get(),
            type_=self._type_var.get(),
            category=self._category_var.get(),
            date=when,
        )
        errors = validate_transaction_fields(**fields)
        self._show_errors(errors)
        if errors:
            return

        self._save_btn.configure(state="disabled", text="Saving…")
        if self._transaction:
            tx_id = self._transaction.id
            job = lambda: self._tx_svc.update(tx_id, **fields)
        else:
            job = lambda: self._tx_svc.create(**fields)
        run_in_background(self, job, self._on_success, self._on_failure)

    def _on_success(self, tx: Transaction | None):
        self.saved = True
        if self._on_saved:
            self._on_saved(tx)
        self.destroy()

    def _on_failure(self, exc: Exception):
        self._save_btn.configure(
            state="normal", text="Save Changes" if self._transaction else "Add Transaction"
        )
        if isinstance(exc, ValidationError):
            self._show_errors(exc.errors)
            return
        fallback = UPDATE_ERROR_FALLBACK if self._transaction else CREATE_ERROR_FALLBACK
        self._error_var.set(error_message(exc, fallback))

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")


def _local(d: datetime) -> datetime:
    return d.astimezone() if d.tzinfo else d
