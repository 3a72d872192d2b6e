"""
Shared pytest fixtures for calnav tests.

Provides reference dates around October 2023, zones with DST transitions,
and navigators for each policy.
"""

import pytest
from datetime import date
from zoneinfo import ZoneInfo

from calnav.core.config import NavigatorConfig, MonthOverflow, DayStep
from calnav.core.calendar import CalendarNavigator


@pytest.fixture
def friday() -> date:
    """Friday 2023-10-13."""
    return date(2023, 10, 13)


@pytest.fixture
def saturday() -> date:
    """Saturday 2023-10-14."""
    return date(2023, 10, 14)


@pytest.fixture
def sunday() -> date:
    """Sunday 2023-10-15."""
    return date(2023, 10, 15)


@pytest.fixture
def monday() -> date:
    """Monday 2023-10-16."""
    return date(2023, 10, 16)


@pytest.fixture
def new_york() -> ZoneInfo:
    """US Eastern; DST starts 2023-03-12 at 02:00."""
    return ZoneInfo("America/New_York")


@pytest.fixture
def sao_paulo() -> ZoneInfo:
    """Brazil; DST started 2018-11-04 at midnight (00:00 did not exist)."""
    return ZoneInfo("America/Sao_Paulo")


@pytest.fixture
def navigator() -> CalendarNavigator:
    """Navigator with default policies."""
    return CalendarNavigator()


@pytest.fixture
def roll_over_navigator() -> CalendarNavigator:
    """Navigator that rolls missing days into the following month."""
    return CalendarNavigator(NavigatorConfig(month_overflow=MonthOverflow.ROLL_OVER))


@pytest.fixture
def utc_round_trip_navigator() -> CalendarNavigator:
    """Navigator stepping days through UTC +/-24h."""
    return CalendarNavigator(NavigatorConfig(day_step=DayStep.UTC_ROUND_TRIP))


# Parametrized fixtures for policy-independent properties

@pytest.fixture(params=[
    MonthOverflow.CLAMP,
    MonthOverflow.ROLL_OVER,
])
def any_navigator(request) -> CalendarNavigator:
    """Navigators for every month overflow policy."""
    return CalendarNavigator(NavigatorConfig(month_overflow=request.param))


@pytest.fixture
def leap_year_days() -> list[date]:
    """Every date of 2024 (a leap year)."""
    start = date(2024, 1, 1)
    return [date.fromordinal(start.toordinal() + i) for i in range(366)]
