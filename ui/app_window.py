import logging

import customtkinter as ctk

from models.transaction import Transaction
from services.auth_service import AuthService
from services.transaction_service import TransactionService
from ui.components.auth_dialogs import LoginDialog
from ui.tabs.dashboard_tab import DashboardTab
from ui.tabs.transactions_tab import TransactionsTab
from utils.constants import APP_HEIGHT, APP_NAME, APP_WIDTH

logger = logging.getLogger(__name__)


class AppWindow(ctk.CTk):
    """Main window. Requires a stored token; otherwise shows the login dialog first."""

    def __init__(
        self,
        auth_service: AuthService,
        tx_service: TransactionService,
        date_format: str = "DD/MM/YYYY",
        currency_symbol: str = "R$",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._auth = auth_service
        self._tx_svc = tx_service
        self._date_format = date_format
        self._currency_symbol = currency_symbol
        self._tabview: ctk.CTkTabview | None = None

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_top_bar()
        self.after(0, self._start)

    def _build_top_bar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0, height=48)
        bar.grid(row=0, column=0, sticky="ew")
        bar.grid_propagate(False)

        title = ctk.CTkFrame(bar, fg_color="transparent")
        title.pack(side="left", padx=12, pady=4)
        ctk.CTkLabel(
            title, text="Personal Finances", font=ctk.CTkFont(size=16, weight="bold"),
        ).pack(anchor="w")
        ctk.CTkLabel(
            title, text="Manage your income and expenses", text_color="gray60",
            font=ctk.CTkFont(size=11),
        ).pack(anchor="w")

        ctk.CTkButton(
            bar, text="Log out", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._logout,
        ).pack(side="right", padx=12)

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self)
        self._tabview.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 8))
        for tab_name in ("Dashboard", "Transactions"):
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        common = dict(
            tx_service=self._tx_svc,
            on_transaction_saved=self._on_transaction_saved,
            date_format=self._date_format,
            currency_symbol=self._currency_symbol,
        )
        self._dashboard_tab = DashboardTab(
            self._tabview.tab("Dashboard"),
            show_all=lambda: self._tabview.set("Transactions"),
            **common,
        )
        self._dashboard_tab.grid(row=0, column=0, sticky="nsew")

        self._transactions_tab = TransactionsTab(self._tabview.tab("Transactions"), **common)
        self._transactions_tab.grid(row=0, column=0, sticky="nsew")

    # ── Session ──────────────────────────────────────────────────────────────
    def _start(self):
        if not self._auth.is_authenticated() and not self._prompt_login():
            return
        self._build_tabs()

    def _prompt_login(self) -> bool:
        """Show the login dialog with the main window hidden. Closes the app on cancel."""
        self.withdraw()
        dlg = LoginDialog(self, self._auth)
        self.wait_window(dlg)
        if not dlg.authenticated:
            self.destroy()
            return False
        self.deiconify()
        return True

    def _logout(self):
        self._auth.logout()
        logger.info("Logged out")
        if self._tabview is not None:
            self._dashboard_tab.unmount()
            self._transactions_tab.unmount()
            self._tabview.destroy()
            self._tabview = None
        if self._prompt_login():
            self._build_tabs()

    # ── Refresh ──────────────────────────────────────────────────────────────
    def _on_transaction_saved(self, tx: Transaction | None, created: bool):
        """Edits patch each view's cache in place; creates refetch."""
        tabs = (self._dashboard_tab, self._transactions_tab)
        if created or tx is None:
            for tab in tabs:
                tab.refresh()
        else:
            for tab in tabs:
                tab.replace_transaction(tx)
