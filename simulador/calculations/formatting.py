"""
Display formatting for monetary amounts and rates.

Results keep full precision; rounding to two decimals happens here only.
"""

CURRENCY_PREFIXES = {
    "USD": "$",
    "Bs": "Bs ",
}


def format_currency(amount: float, currency: str = "USD") -> str:
    """Format an amount as '$1,234.56' or 'Bs 1,234.56'."""
    prefix = CURRENCY_PREFIXES.get(currency, "$")
    if amount < 0:
        return f"-{prefix}{abs(amount):,.2f}"
    return f"{prefix}{amount:,.2f}"


def format_percentage(rate: float) -> str:
    """Format a percentage figure (13.0 -> '13.00%')."""
    return f"{rate:.2f}%"


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]
