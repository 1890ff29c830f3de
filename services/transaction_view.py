"""Per-screen state: load status, cached collection, filters, derived output.

Each tab owns its own TransactionView; nothing here is shared between views.
All methods are expected to run on the UI thread. Network work happens
elsewhere and hands its result to complete_load()/fail_load().
"""
import logging
from datetime import datetime
from typing import Callable

from models.filter_state import FilterState
from models.totals import Totals
from models.transaction import Transaction
from services.errors import error_message
from services.transaction_filter import aggregate, apply_filters
from services.transaction_service import TransactionService
from utils.constants import LOAD_ERROR_FALLBACK

logger = logging.getLogger(__name__)

LOADING = "loading"
READY = "ready"
ERROR = "error"


class TransactionView:
    def __init__(
        self,
        tx_service: TransactionService,
        clock: Callable[[], datetime] | None = None,
    ):
        self._tx_svc = tx_service
        self._clock = clock
        self._listeners: list[Callable[[], None]] = []
        self._mounted = True
        self._generation = 0
        self._settled = False

        self.status = LOADING
        self.error: str | None = None
        self.filter_state = FilterState()
        self.transactions: list[Transaction] = []
        self.filtered: list[Transaction] = []
        self.totals = Totals()

    # ── Lifecycle ────────────────────────────────────────────────────────────
    @property
    def mounted(self) -> bool:
        return self._mounted

    def load(self):
        """Fetch on the calling thread and settle into ready or error."""
        generation = self.reload() if self._settled else self._generation
        try:
            records = self.fetch()
        except Exception as exc:  # any failure is shown, never raised
            self.fail_load(exc, generation)
        else:
            self.complete_load(records, generation)

    def fetch(self) -> list[Transaction]:
        """The network half of load(); safe to run on a worker thread."""
        return self._tx_svc.list_transactions()

    def complete_load(self, records: list[Transaction], generation: int | None = None):
        """Settle into ready. generation defaults to the current load."""
        if not self._accepts(generation):
            return
        self._settled = True
        self.transactions = list(records)
        self.status = READY
        self.error = None
        self._recompute()

    def fail_load(self, exc: BaseException, generation: int | None = None):
        if not self._accepts(generation):
            return
        self._settled = True
        self.status = ERROR
        self.error = error_message(exc, LOAD_ERROR_FALLBACK)
        logger.warning("Transaction load failed: %s", self.error)
        self._recompute()

    def reload(self) -> int:
        """Start over as a fresh mount: back to loading with an empty cache.

        Returns the new load generation. Results tagged with an older
        generation, or arriving after this one has settled, are dropped.
        """
        self._mounted = True
        self._generation += 1
        self._settled = False
        self.status = LOADING
        self.error = None
        self.transactions = []
        self._recompute()
        return self._generation

    def unmount(self):
        """Results delivered after this point are ignored."""
        self._mounted = False
        self._listeners.clear()

    def _accepts(self, generation: int | None) -> bool:
        if not self._mounted or self._settled:
            return False
        return generation is None or generation == self._generation

    # ── Filters ──────────────────────────────────────────────────────────────
    def set_time_window(self, window: str):
        self.set_filters(self.filter_state.with_changes(time_window=window))

    def set_type_filter(self, type_filter: str):
        self.set_filters(self.filter_state.with_changes(type_filter=type_filter))

    def set_search(self, search: str):
        self.set_filters(self.filter_state.with_changes(search=search))

    def set_filters(self, state: FilterState):
        self.filter_state = state
        self._recompute()

    # ── Edits ────────────────────────────────────────────────────────────────
    def replace_transaction(self, updated: Transaction) -> bool:
        """Swap in the record with the same id. Returns False if none matched."""
        if not self._mounted:
            return False
        found = False
        replaced = []
        for tx in self.transactions:
            if tx.id == updated.id:
                replaced.append(updated)
                found = True
            else:
                replaced.append(tx)
        if found:
            self.transactions = replaced
            self._recompute()
        return found

    # ── Derived state ────────────────────────────────────────────────────────
    def subscribe(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def _recompute(self):
        now = self._clock() if self._clock else None
        self.filtered = apply_filters(self.transactions, self.filter_state, now)
        self.totals = aggregate(self.filtered)
        for callback in list(self._listeners):
            callback()
