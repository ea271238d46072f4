"""Display formatting for currency amounts and numbers."""

from decimal import ROUND_HALF_UP, Decimal


CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CHF": "CHF ",
    "AUD": "A$",
    "CAD": "CA$",
    "RON": "RON ",
}

# Currencies quoted without minor units
_ZERO_DECIMAL = {"JPY"}


def currency_symbol(currency: str = "USD") -> str:
    """Symbol prefix for an ISO currency code (falls back to the code)."""
    return CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")


def format_number(value: float, decimals: int = 2) -> str:
    """Format a number with thousands separators and fixed decimals."""
    return f"{value:,.{decimals}f}"


def format_currency(value: float, currency: str = "USD") -> str:
    """
    Format an amount in the given currency, e.g. ``-$1,234.50``.

    Args:
        value: Amount to format.
        currency: ISO currency code.

    Returns:
        Formatted string with the sign before the symbol.
    """
    decimals = 0 if currency.upper() in _ZERO_DECIMAL else 2
    sign = "-" if value < 0 else ""
    return f"{sign}{currency_symbol(currency)}{format_number(abs(value), decimals)}"


def format_amount(value: float) -> str:
    """Plain amount without trailing zeros on whole numbers (300.0 -> 300)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def round_half_up(value: float, decimals: int = 2) -> float:
    """
    Round halves away from zero on the float's exact binary value.

    Built-in ``round`` sends exact halves to the even digit (1000.125 -> 1000.12);
    charted values round them up (1000.125 -> 1000.13).
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
