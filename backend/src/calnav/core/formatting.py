"""Month naming for calendar points."""

import calendar
from datetime import date
from typing import Callable, Optional

MonthNameFormatter = Callable[[int], str]


def default_month_formatter(month: int) -> str:
    """Full month name in the process locale (LC_TIME), e.g. 'October'."""
    if month < 1 or month > 12:
        raise ValueError(f"Month must be in 1..12, got {month}")
    return calendar.month_name[month]


def month_name(point: date, formatter: Optional[MonthNameFormatter] = None) -> str:
    """
    Full name of a point's month.

    Args:
        point: Date or datetime
        formatter: Callable mapping a month index (1..12) to its name;
            defaults to the standard library's locale-aware names

    Returns:
        Month name
    """
    fmt = formatter or default_month_formatter
    return fmt(point.month)
