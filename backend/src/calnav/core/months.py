"""
Month stepping with a day-of-month overflow policy.
"""

from datetime import date, timedelta

from calnav.core.config import MonthOverflow
from calnav.core.days import PointT, at_date, days_in_month, point_date


def _add_months(d: date, months: int, overflow: MonthOverflow) -> date:
    """Add months to a date, resolving a missing day-of-month by policy."""
    year = d.year + (d.month + months - 1) // 12
    month = (d.month + months - 1) % 12 + 1
    max_day = days_in_month(year, month)

    if d.day <= max_day:
        return date(year, month, d.day)

    if overflow == MonthOverflow.CLAMP:
        return date(year, month, max_day)

    elif overflow == MonthOverflow.ROLL_OVER:
        # Excess days spill into the following month
        return date(year, month, max_day) + timedelta(days=d.day - max_day)

    else:
        raise ValueError(f"Unknown month overflow policy: {overflow}")


def step_month(
    point: PointT,
    months: int,
    overflow: MonthOverflow = MonthOverflow.CLAMP
) -> PointT:
    """
    Clear a point's time and move it by whole months.

    Args:
        point: Date or datetime to move
        months: Signed number of months
        overflow: Rule for a day-of-month the target month lacks

    Returns:
        The moved point at midnight, in the point's own zone

    Examples:
        >>> from datetime import date
        >>> step_month(date(2023, 1, 31), 1)
        datetime.date(2023, 2, 28)
        >>> step_month(date(2023, 1, 31), 1, MonthOverflow.ROLL_OVER)
        datetime.date(2023, 3, 3)
    """
    return at_date(point, _add_months(point_date(point), months, overflow))
