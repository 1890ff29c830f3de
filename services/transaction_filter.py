"""Filtering and aggregation shared by the dashboard and transaction list.

Everything here is pure: no I/O, no widget state, no caching between calls.
Both screens call apply_filters() and aggregate() so their numbers always
agree.
"""
from datetime import datetime
from typing import Callable, Iterable

from models.filter_state import FilterState
from models.totals import Totals
from models.transaction import Transaction
from utils.date_helpers import now_local, to_frame_of, week_bounds


def _match_all(tx: Transaction, now: datetime) -> bool:
    return True


def _same_year(tx: Transaction, now: datetime) -> bool:
    return to_frame_of(tx.date, now).year == now.year


def _same_month(tx: Transaction, now: datetime) -> bool:
    d = to_frame_of(tx.date, now)
    return d.month == now.month and d.year == now.year


def _same_week(tx: Transaction, now: datetime) -> bool:
    start, end = week_bounds(now)
    return start <= to_frame_of(tx.date, now) <= end


def _same_day(tx: Transaction, now: datetime) -> bool:
    return to_frame_of(tx.date, now).date() == now.date()


_TIME_WINDOW_PREDICATES: dict[str, Callable[[Transaction, datetime], bool]] = {
    "all":   _match_all,
    "year":  _same_year,
    "month": _same_month,
    "week":  _same_week,
    "day":   _same_day,
}


def matches_time_window(tx: Transaction, window: str, now: datetime) -> bool:
    """Unknown window names match everything, same as 'all'."""
    return _TIME_WINDOW_PREDICATES.get(window, _match_all)(tx, now)


def matches_type(tx: Transaction, type_filter: str) -> bool:
    return type_filter == "all" or tx.type == type_filter


def matches_search(tx: Transaction, search: str) -> bool:
    """Case-insensitive substring match on the title. '' matches everything."""
    return search.casefold() in tx.title.casefold()


def matches(tx: Transaction, state: FilterState, now: datetime) -> bool:
    return (
        matches_time_window(tx, state.time_window, now)
        and matches_type(tx, state.type_filter)
        and matches_search(tx, state.search)
    )


def apply_filters(
    transactions: Iterable[Transaction],
    state: FilterState,
    now: datetime | None = None,
) -> list[Transaction]:
    """Return the transactions matching every filter, in their original order.

    now is captured once per call so every record is judged against the same
    reference instant.
    """
    if now is None:
        now = now_local()
    return [tx for tx in transactions if matches(tx, state, now)]


def aggregate(transactions: Iterable[Transaction]) -> Totals:
    """Sum income and expenses of an already-filtered set."""
    income = 0.0
    expenses = 0.0
    for tx in transactions:
        if tx.type == "income":
            income += tx.amount
        elif tx.type == "expense":
            expenses += tx.amount
    return Totals(income=income, expenses=expenses, balance=income - expenses)
