"""Display formatting shared by the templates.

Dates follow the ``en-ZA`` layout (day month year) and money is shown in
rand with comma thousands separators.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import CURRENCY_PREFIX


def format_date(value: date, *, month: str = "short", year: bool = True) -> str:
    """``15 Jan 2026`` / ``15 January 2026`` / ``15 Jan``."""
    month_name = value.strftime("%b" if month == "short" else "%B")
    if not year:
        return f"{value.day} {month_name}"
    return f"{value.day} {month_name} {value.year}"


def format_month_year(value: date) -> str:
    return value.strftime("%B %Y")


def format_numeric_date(value: date) -> str:
    return value.strftime("%Y/%m/%d")


def _number(value) -> str:
    d = Decimal(str(value))
    if d == d.to_integral_value():
        return f"{int(d):,}"
    return f"{d.normalize():,}"


def format_currency(value) -> str:
    """``R50,000``; negative amounts keep the sign before the prefix."""
    if value < 0:
        return f"-{CURRENCY_PREFIX}{_number(-value)}"
    return f"{CURRENCY_PREFIX}{_number(value)}"


def format_deduction(value) -> str:
    """Deductions are always rendered as a negative amount: ``-R5,000``."""
    return f"-{CURRENCY_PREFIX}{_number(abs(value))}"


def format_thousands(value) -> str:
    """Abbreviate to thousands with no decimals: 125400 -> ``R125K``."""
    thousands = (Decimal(str(value)) / 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{CURRENCY_PREFIX}{thousands}K"


def format_thousands_exact(value) -> str:
    """Thousands without rounding, as the payroll chart shows: 127800 -> ``R127.8K``."""
    return f"{CURRENCY_PREFIX}{_number(Decimal(str(value)) / 1000)}K"


def format_hours(value) -> str:
    return f"{_number(value)}h"


def initials(name: str) -> str:
    return "".join(part[0] for part in name.split() if part).upper()


def register_filters(app) -> None:
    app.jinja_env.filters["date_short"] = format_date
    app.jinja_env.filters["date_long"] = lambda v: format_date(v, month="long")
    app.jinja_env.filters["day_month"] = lambda v: format_date(v, year=False)
    app.jinja_env.filters["month_year"] = format_month_year
    app.jinja_env.filters["numeric_date"] = format_numeric_date
    app.jinja_env.filters["currency"] = format_currency
    app.jinja_env.filters["deduction"] = format_deduction
    app.jinja_env.filters["thousands"] = format_thousands
    app.jinja_env.filters["thousands_exact"] = format_thousands_exact
    app.jinja_env.filters["hours"] = format_hours
    app.jinja_env.filters["initials"] = initials
