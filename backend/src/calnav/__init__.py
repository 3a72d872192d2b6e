"""
Calendar Navigator - calendar arithmetic over dates and datetimes.

Derives calendar values from a point in time:
- Next/previous calendar day, at midnight in the point's own zone
- Next/previous month with a clamp or roll-over day-of-month policy
- Next/previous weekday and the N-th weekday, skipping weekends
- Every day and every weekday of a month
- Same-day, same-month and weekend predicates

Example:
    >>> from datetime import date
    >>> from calnav import next_weekday, weekdays_of_month
    >>> next_weekday(date(2023, 10, 13))
    datetime.date(2023, 10, 16)
    >>> len(weekdays_of_month(date(2023, 10, 10)))
    22
"""

__version__ = "0.1.0"

# Configuration
from calnav.core.config import (
    NavigatorConfig,
    MonthOverflow,
    DayStep,
    DEFAULT_CONFIG,
)

# Day helpers
from calnav.core.days import (
    CalendarPoint,
    clear_time,
    days_in_month,
)

# Navigation
from calnav.core.calendar import (
    CalendarNavigator,
    DEFAULT_NAVIGATOR,
    is_same_day_as,
    is_same_month_year_as,
    is_before_or_same_day_as,
    is_one_day_before_of,
    is_weekend,
    is_weekday,
    next_day,
    previous_day,
    next_month,
    previous_month,
    next_x_month,
    previous_x_month,
    next_weekday,
    previous_weekday,
    next_x_weekday,
    previous_x_weekday,
    first_day_of_month,
    last_day_of_month,
    days_of_month,
    weekdays_of_month,
    business_days_between,
)

# Formatting
from calnav.core.formatting import month_name, MonthNameFormatter

__all__ = [
    # Version
    "__version__",
    # Configuration
    "NavigatorConfig",
    "MonthOverflow",
    "DayStep",
    "DEFAULT_CONFIG",
    # Day helpers
    "CalendarPoint",
    "clear_time",
    "days_in_month",
    # Navigation
    "CalendarNavigator",
    "DEFAULT_NAVIGATOR",
    "is_same_day_as",
    "is_same_month_year_as",
    "is_before_or_same_day_as",
    "is_one_day_before_of",
    "is_weekend",
    "is_weekday",
    "next_day",
    "previous_day",
    "next_month",
    "previous_month",
    "next_x_month",
    "previous_x_month",
    "next_weekday",
    "previous_weekday",
    "next_x_weekday",
    "previous_x_weekday",
    "first_day_of_month",
    "last_day_of_month",
    "days_of_month",
    "weekdays_of_month",
    "business_days_between",
    # Formatting
    "month_name",
    "MonthNameFormatter",
]
