"""
Calendar navigation over dates and datetimes.

Classification predicates, day, month and weekday stepping, and month
enumeration, all driven by a NavigatorConfig.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple

import numpy as np

from calnav.core.config import NavigatorConfig, DEFAULT_CONFIG
from calnav.core.days import (
    CalendarPoint,
    PointT,
    at_date,
    days_in_month,
    midnight,
    point_date,
    step_day,
)
from calnav.core.months import step_month

logger = logging.getLogger(__name__)


def _repeat_count(x: int) -> int:
    """Number of steps to take for a repeat count; negative means none."""
    if x < 0:
        logger.debug(f"Negative repeat count {x} treated as zero steps")
        return 0
    return x


def _comparable(a: CalendarPoint, b: CalendarPoint) -> Tuple[CalendarPoint, CalendarPoint]:
    """Promote a bare date to midnight in the other operand's zone."""
    if isinstance(a, datetime) and not isinstance(b, datetime):
        return a, midnight(b, a.tzinfo)
    if isinstance(b, datetime) and not isinstance(a, datetime):
        return midnight(a, b.tzinfo), b
    return a, b


class CalendarNavigator:
    """
    Stateless calendar arithmetic with configurable policies.

    Every operation accepts a ``date`` or a ``datetime`` and returns the same
    kind. Navigation results are at midnight in the input's own zone.
    """

    def __init__(self, config: Optional[NavigatorConfig] = None) -> None:
        """
        Initialize navigator.

        Args:
            config: Month overflow, day step and weekend policies
                (defaults to clamp / civil / Saturday+Sunday)
        """
        self.config = config or DEFAULT_CONFIG

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_same_day_as(self, a: CalendarPoint, b: Optional[CalendarPoint]) -> bool:
        """Check if two points share day, month and year. ``None`` never matches."""
        if b is None:
            return False
        return a.day == b.day and a.month == b.month and a.year == b.year

    def is_same_month_year_as(self, a: CalendarPoint, b: CalendarPoint) -> bool:
        """Check if two points share month and year."""
        return a.month == b.month and a.year == b.year

    def is_before_or_same_day_as(self, a: CalendarPoint, b: CalendarPoint) -> bool:
        """
        Check if ``a`` is strictly before ``b`` or on the same calendar day.

        Ordering is by full timestamp; a bare date counts as midnight in the
        other operand's zone. Naive and aware datetimes cannot be ordered
        and raise TypeError.
        """
        left, right = _comparable(a, b)
        return left < right or self.is_same_day_as(a, b)

    def is_one_day_before_of(self, a: CalendarPoint, b: CalendarPoint) -> bool:
        """Check if ``a`` falls on the calendar day before ``b``."""
        return self.is_same_day_as(a, self.previous_day(b))

    def is_weekend(self, a: CalendarPoint) -> bool:
        """Check if a point falls on a weekend day."""
        return a.isoweekday() in self.config.weekend_days

    def is_weekday(self, a: CalendarPoint) -> bool:
        return not self.is_weekend(a)

    # ------------------------------------------------------------------
    # Day and month navigation
    # ------------------------------------------------------------------

    def next_day(self, a: PointT) -> PointT:
        """Following calendar day at midnight."""
        return step_day(a, 1, self.config.day_step)

    def previous_day(self, a: PointT) -> PointT:
        """Preceding calendar day at midnight."""
        return step_day(a, -1, self.config.day_step)

    def next_month(self, a: PointT) -> PointT:
        """Same day next month at midnight, overflow resolved by policy."""
        return step_month(a, 1, self.config.month_overflow)

    def previous_month(self, a: PointT) -> PointT:
        """Same day previous month at midnight, overflow resolved by policy."""
        return step_month(a, -1, self.config.month_overflow)

    def next_x_month(self, a: PointT, x: int) -> PointT:
        """
        Step forward one month at a time, ``x`` times.

        Each step starts from the previous result, so a clamped day carries
        forward: Jan 31 -> Feb 28 -> Mar 28.
        """
        result = a
        for _ in range(_repeat_count(x)):
            result = self.next_month(result)
        return result

    def previous_x_month(self, a: PointT, x: int) -> PointT:
        """Step backward one month at a time, ``x`` times."""
        result = a
        for _ in range(_repeat_count(x)):
            result = self.previous_month(result)
        return result

    # ------------------------------------------------------------------
    # Weekday navigation
    # ------------------------------------------------------------------

    def next_weekday(self, a: PointT) -> PointT:
        """First non-weekend day after ``a``, at midnight."""
        result = self.next_day(a)
        while self.is_weekend(result):
            result = self.next_day(result)
        return result

    def previous_weekday(self, a: PointT) -> PointT:
        """Last non-weekend day before ``a``, at midnight."""
        result = self.previous_day(a)
        while self.is_weekend(result):
            result = self.previous_day(result)
        return result

    def next_x_weekday(self, a: PointT, x: int) -> PointT:
        """
        The ``x``-th weekday after ``a``.

        ``x == 0`` returns ``a`` itself, even on a weekend.
        """
        result = a
        for _ in range(_repeat_count(x)):
            result = self.next_weekday(result)
        return result

    def previous_x_weekday(self, a: PointT, x: int) -> PointT:
        """The ``x``-th weekday before ``a``; ``x == 0`` returns ``a``."""
        result = a
        for _ in range(_repeat_count(x)):
            result = self.previous_weekday(result)
        return result

    # ------------------------------------------------------------------
    # Month enumeration
    # ------------------------------------------------------------------

    def first_day_of_month(self, a: PointT) -> PointT:
        return at_date(a, date(a.year, a.month, 1))

    def last_day_of_month(self, a: PointT) -> PointT:
        return at_date(a, date(a.year, a.month, days_in_month(a.year, a.month)))

    def days_of_month(self, a: PointT) -> List[PointT]:
        """
        Every day of ``a``'s month, ascending, each at midnight.

        Only the month, year and zone of ``a`` matter.
        """
        first = date(a.year, a.month, 1)
        return [
            at_date(a, first + timedelta(days=offset))
            for offset in range(days_in_month(a.year, a.month))
        ]

    def weekdays_of_month(self, a: PointT) -> List[PointT]:
        """Non-weekend days of ``a``'s month, ascending."""
        return [d for d in self.days_of_month(a) if self.is_weekday(d)]

    def business_days_between(self, start: CalendarPoint, end: CalendarPoint) -> int:
        """Count weekdays between two dates (exclusive of start, inclusive of end)."""
        start_date = point_date(start)
        end_date = point_date(end)

        if end_date <= start_date:
            return 0

        # busday_count covers [begin, end); shift both bounds for (start, end]
        return int(np.busday_count(
            start_date + timedelta(days=1),
            end_date + timedelta(days=1),
            weekmask=self.config.weekmask,
        ))


# Default navigator: clamp overflow, civil day steps, Saturday/Sunday weekend
DEFAULT_NAVIGATOR = CalendarNavigator()

is_same_day_as = DEFAULT_NAVIGATOR.is_same_day_as
is_same_month_year_as = DEFAULT_NAVIGATOR.is_same_month_year_as
is_before_or_same_day_as = DEFAULT_NAVIGATOR.is_before_or_same_day_as
is_one_day_before_of = DEFAULT_NAVIGATOR.is_one_day_before_of
is_weekend = DEFAULT_NAVIGATOR.is_weekend
is_weekday = DEFAULT_NAVIGATOR.is_weekday
next_day = DEFAULT_NAVIGATOR.next_day
previous_day = DEFAULT_NAVIGATOR.previous_day
next_month = DEFAULT_NAVIGATOR.next_month
previous_month = DEFAULT_NAVIGATOR.previous_month
next_x_month = DEFAULT_NAVIGATOR.next_x_month
previous_x_month = DEFAULT_NAVIGATOR.previous_x_month
next_weekday = DEFAULT_NAVIGATOR.next_weekday
previous_weekday = DEFAULT_NAVIGATOR.previous_weekday
next_x_weekday = DEFAULT_NAVIGATOR.next_x_weekday
previous_x_weekday = DEFAULT_NAVIGATOR.previous_x_weekday
first_day_of_month = DEFAULT_NAVIGATOR.first_day_of_month
last_day_of_month = DEFAULT_NAVIGATOR.last_day_of_month
days_of_month = DEFAULT_NAVIGATOR.days_of_month
weekdays_of_month = DEFAULT_NAVIGATOR.weekdays_of_month
business_days_between = DEFAULT_NAVIGATOR.business_days_between
