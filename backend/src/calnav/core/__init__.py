"""Core utilities: navigation policies, day and month steps, calendar navigation."""

from calnav.core.config import NavigatorConfig, MonthOverflow, DayStep, DEFAULT_CONFIG
from calnav.core.days import CalendarPoint, clear_time, days_in_month
from calnav.core.calendar import CalendarNavigator, DEFAULT_NAVIGATOR
from calnav.core.formatting import month_name, MonthNameFormatter

__all__ = [
    "NavigatorConfig",
    "MonthOverflow",
    "DayStep",
    "DEFAULT_CONFIG",
    "CalendarPoint",
    "clear_time",
    "days_in_month",
    "CalendarNavigator",
    "DEFAULT_NAVIGATOR",
    "month_name",
    "MonthNameFormatter",
]
