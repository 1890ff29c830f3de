from utils.constants import DEFAULT_CURRENCY_SYMBOL


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format a float as currency string, e.g. 'R$ 1,234.56'."""
    return f"{symbol} {amount:,.2f}"


def format_signed(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format with +/- sign."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}{symbol} {abs(amount):,.2f}"


def format_transaction_amount(amount: float, type_: str,
                              symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Income shows as '+R$ 10.00', expense as '-R$ 10.00'."""
    sign = "+" if type_ == "income" else "-"
    return f"{sign}{symbol} {abs(amount):,.2f}"
