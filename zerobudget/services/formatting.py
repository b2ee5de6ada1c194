"""Display formatting for amounts, months and dates."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from ..config import CURRENCIES, Preferences
from .dates import parse_month_key, parse_date, to_decimal


def format_currency(amount, preferences: Preferences | None = None) -> str:
    """
    Format an amount for display, e.g. ``-$1,234.50``.

    The currency comes from the explicit ``preferences`` object; without one the
    default preferences (USD) apply.
    """
    preferences = preferences or Preferences()
    symbol, places = CURRENCIES[preferences.currency]
    value = to_decimal(amount)
    quantum = Decimal(1).scaleb(-places)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{places}f}"


def format_month_label(month_key: str) -> str:
    """``2024-03`` -> ``March 2024``."""
    year, month = parse_month_key(month_key)
    return date(year, month, 1).strftime("%B %Y")


def format_date(date_str: str | None) -> str:
    """``2024-03-05`` -> ``Mar 5, 2024``; empty input gives an empty string."""
    if not date_str:
        return ""
    d = parse_date(date_str)
    return f"{d.strftime('%b')} {d.day}, {d.year}"
