"""Shared utilities used across the cart core."""

from eventcart.config import settings


def describe_date_span(dates: list[str]) -> str:
    """Human text for the dates an event covers.

    Examples:
        >>> describe_date_span(["2024-06-01"])
        '2024-06-01'
        >>> describe_date_span(["2024-06-01", "2024-06-02"])
        '2 dates (2024-06-01 to 2024-06-02)'
    """
    if len(dates) == 1:
        return dates[0]
    if not dates:
        return "no dates"
    return f"{len(dates)} dates ({dates[0]} to {dates[-1]})"


def format_amount(amount: float) -> str:
    """Format a money amount with thousands separators, dropping zero cents.

    Examples:
        >>> format_amount(1000)
        '$1,000'
        >>> format_amount(99.5)
        '$99.50'
    """
    symbol = settings.cart.currency_symbol
    if float(amount).is_integer():
        return f"{symbol}{int(amount):,}"
    return f"{symbol}{amount:,.2f}"
