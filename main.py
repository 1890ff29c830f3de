import logging
import os
import sys

import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from services.api_client import ApiClient
from services.auth_service import AuthService
from services.token_store import ConfigTokenStore
from services.transaction_service import TransactionService

from ui.app_window import AppWindow
from utils.app_config import (
    get_api_base_url,
    get_appearance_mode,
    get_currency_symbol,
    get_date_format,
)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ── Services ─────────────────────────────────────────────────────────────
    token_store = ConfigTokenStore()
    api = ApiClient(get_api_base_url(), token_store)
    auth_svc = AuthService(api, token_store)
    tx_svc = TransactionService(api)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(get_appearance_mode())
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        auth_service=auth_svc,
        tx_service=tx_svc,
        date_format=get_date_format(),
        currency_symbol=get_currency_symbol(),
    )
    app.mainloop()


if __name__ == "__main__":
    main()
