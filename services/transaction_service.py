import logging
import math
from datetime import datetime

from models.transaction import TRANSACTION_TYPES, Transaction
from services.api_client import ApiClient
from services.errors import ApiError, ValidationError

logger = logging.getLogger(__name__)


def parse_amount(value) -> float | None:
    """Return a positive float, or None if value is not a valid amount."""
    if isinstance(value, str):
        value = value.strip()
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def validate_transaction_fields(
    title: str,
    amount,
    type_: str,
    category: str,
    date: datetime | None,
) -> dict[str, str]:
    """Field -> message for every problem found; empty dict when valid."""
    errors: dict[str, str] = {}
    if not (title or "").strip():
        errors["title"] = "Title is required"
    if parse_amount(amount) is None:
        errors["amount"] = "Enter a valid amount"
    if type_ not in TRANSACTION_TYPES:
        errors["type"] = f"Invalid type: {type_}"
    if not (category or "").strip():
        errors["category"] = "Category is required"
    if date is None:
        errors["date"] = "Invalid date"
    return errors


class TransactionService:
    def __init__(self, api: ApiClient):
        self._api = api

    def list_transactions(self) -> list[Transaction]:
        records = self._api.list_transactions()
        transactions = []
        for record in records:
            try:
                transactions.append(Transaction.from_dict(record))
            except (KeyError, TypeError, ValueError) as exc:
                raise ApiError(f"Malformed transaction record: {exc}") from exc
        logger.debug("Fetched %d transactions", len(transactions))
        return transactions

    def create(
        self,
        title: str,
        amount,
        type_: str,
        category: str,
        date: datetime | None,
    ) -> Transaction | None:
        """Validate, then POST. Returns the created record if the server echoes it."""
        payload = self._build_payload(title, amount, type_, category, date)
        data = self._api.create_transaction(payload)
        if data and ("_id" in data or "id" in data):
            try:
                return Transaction.from_dict(data)
            except (KeyError, TypeError, ValueError):
                logger.warning("Create response was not a transaction record")
        return None

    def update(
        self,
        tx_id: str,
        title: str,
        amount,
        type_: str,
        category: str,
        date: datetime | None,
    ) -> Transaction:
        """Full replace of every field except the id; returns the server's copy."""
        payload = self._build_payload(title, amount, type_, category, date)
        data = self._api.update_transaction(tx_id, payload)
        try:
            return Transaction.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise ApiError(f"Malformed transaction record: {exc}") from exc

    def _build_payload(self, title, amount, type_, category, date) -> dict:
        errors = validate_transaction_fields(title, amount, type_, category, date)
        if errors:
            raise ValidationError(errors)
        return Transaction(
            id="",
            title=title.strip(),
            amount=parse_amount(amount),
            type=type_,
            date=date,
            category=category.strip(),
        ).to_payload()
