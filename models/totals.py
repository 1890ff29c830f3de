from dataclasses import dataclass


@dataclass(frozen=True)
class Totals:
    income: float = 0.0
    expenses: float = 0.0
    balance: float = 0.0
