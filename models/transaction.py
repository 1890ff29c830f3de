from dataclasses import dataclass
from datetime import datetime

from utils.date_helpers import format_timestamp, parse_timestamp

TRANSACTION_TYPES = ("income", "expense")


@dataclass(frozen=True)
class Transaction:
    id: str
    title: str
    amount: float
    type: str               # 'income' | 'expense'
    date: datetime
    category: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Build from an API record. The server names the id field '_id'."""
        type_ = data.get("type")
        if type_ not in TRANSACTION_TYPES:
            raise ValueError(f"Invalid type: {type_}")
        tx_id = data.get("_id", data.get("id"))
        if tx_id is None:
            raise ValueError("Transaction record has no id.")
        return cls(
            id=str(tx_id),
            title=data.get("title") or "",
            amount=float(data["amount"]),
            type=type_,
            date=parse_timestamp(data["date"]),
            category=data.get("category") or "",
        )

    def to_payload(self) -> dict:
        """Mutable fields only; the server owns the id."""
        return {
            "title": self.title,
            "amount": self.amount,
            "type": self.type,
            "category": self.category,
            "date": format_timestamp(self.date),
        }
