"""
Day-level arithmetic on calendar points.

A calendar point is either a ``date`` (implicit midnight) or a ``datetime``
(optionally zone-aware). Results keep the kind of their input, and a
``datetime`` result keeps the input's ``tzinfo``.
"""

import calendar
import logging
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional, TypeVar, Union

from calnav.core.config import DayStep

logger = logging.getLogger(__name__)

CalendarPoint = Union[date, datetime]
PointT = TypeVar("PointT", date, datetime)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a Gregorian month (leap-year aware)."""
    return calendar.monthrange(year, month)[1]


def point_date(point: date) -> date:
    """Civil date of a point, dropping any time and zone."""
    return date(point.year, point.month, point.day)


def midnight(d: date, tz: Optional[tzinfo] = None) -> datetime:
    """
    Build midnight of a civil date in the given zone.

    Midnight may not exist on a DST transition day (clocks jumping from 23:59
    to 01:00). The wall clock is still 00:00 and ``zoneinfo`` resolves the
    offset with fold=0; a warning is logged so callers can spot it.
    """
    result = datetime(d.year, d.month, d.day, tzinfo=tz)
    if tz is not None:
        resolved = result.astimezone(timezone.utc).astimezone(tz)
        if resolved.replace(tzinfo=None) != result.replace(tzinfo=None):
            logger.warning(
                f"Midnight of {d.isoformat()} does not exist in {tz}; "
                f"it resolves to {resolved.isoformat()}"
            )
    return result


def at_date(point: PointT, d: date) -> PointT:
    """Return a point of the same kind as ``point`` on date ``d`` at midnight."""
    if isinstance(point, datetime):
        return midnight(d, point.tzinfo)
    return d


def clear_time(point: PointT) -> PointT:
    """Reset the time-of-day to midnight, keeping date and zone."""
    if isinstance(point, datetime):
        return midnight(point_date(point), point.tzinfo)
    return point


def step_day(point: PointT, days: int, step: DayStep = DayStep.CIVIL) -> PointT:
    """
    Move a point by whole calendar days and clear its time.

    Args:
        point: Date or datetime to move
        days: Signed number of days (negative moves backwards)
        step: CIVIL moves the civil date; UTC_ROUND_TRIP adds ``days * 24h``
            in UTC and converts back to the point's zone before clearing,
            which can skip or repeat a date near DST transitions

    Returns:
        The moved point at midnight
    """
    if not isinstance(point, datetime):
        return point + timedelta(days=days)

    if step == DayStep.CIVIL:
        return midnight(point.date() + timedelta(days=days), point.tzinfo)

    elif step == DayStep.UTC_ROUND_TRIP:
        if point.tzinfo is None:
            # No zone to round-trip through: wall clock +24h is the civil step
            return midnight(point.date() + timedelta(days=days), None)
        shifted = (point.astimezone(timezone.utc) + timedelta(days=days)).astimezone(point.tzinfo)
        return midnight(shifted.date(), point.tzinfo)

    else:
        raise ValueError(f"Unknown day step: {step}")
