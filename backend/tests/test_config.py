"""Tests for navigator configuration."""

import pytest
from pydantic import ValidationError

from calnav.core.config import (
    NavigatorConfig,
    MonthOverflow,
    DayStep,
    DEFAULT_CONFIG,
)


class TestNavigatorConfig:
    """Tests for NavigatorConfig validation."""

    def test_defaults(self) -> None:
        """Defaults are clamp, civil and Saturday/Sunday."""
        assert DEFAULT_CONFIG.month_overflow == MonthOverflow.CLAMP
        assert DEFAULT_CONFIG.day_step == DayStep.CIVIL
        assert DEFAULT_CONFIG.weekend_days == frozenset({6, 7})

    def test_parses_enum_values(self) -> None:
        """Policies can be given by their string values."""
        config = NavigatorConfig(month_overflow="roll_over", day_step="utc_round_trip")
        assert config.month_overflow == MonthOverflow.ROLL_OVER
        assert config.day_step == DayStep.UTC_ROUND_TRIP

    def test_weekend_days_from_list(self) -> None:
        """A list of weekend days is accepted."""
        config = NavigatorConfig(weekend_days=[5, 6])
        assert config.weekend_days == frozenset({5, 6})

    def test_weekend_day_out_of_range_raises(self) -> None:
        """Weekend days outside 1..7 are rejected."""
        with pytest.raises(ValidationError, match="Weekend days must be in 1..7"):
            NavigatorConfig(weekend_days=[0, 6])

    def test_whole_week_weekend_raises(self) -> None:
        """At least one weekday must remain."""
        with pytest.raises(ValidationError, match="whole week"):
            NavigatorConfig(weekend_days=[1, 2, 3, 4, 5, 6, 7])

    def test_unknown_policy_raises(self) -> None:
        """Unknown overflow policy names are rejected."""
        with pytest.raises(ValidationError):
            NavigatorConfig(month_overflow="truncate")

    def test_extra_fields_forbidden(self) -> None:
        """Unknown options are rejected."""
        with pytest.raises(ValidationError):
            NavigatorConfig(holidays=[])

    def test_frozen(self) -> None:
        """Config cannot be changed after construction."""
        config = NavigatorConfig()
        with pytest.raises(ValidationError):
            config.day_step = DayStep.UTC_ROUND_TRIP


class TestWeekmask:
    """Tests for the numpy weekmask derived from weekend days."""

    def test_default_weekmask(self) -> None:
        """Monday to Friday are working days."""
        assert DEFAULT_CONFIG.weekmask == "1111100"

    def test_friday_saturday_weekend(self) -> None:
        """Friday/Saturday weekend leaves Sunday as a working day."""
        assert NavigatorConfig(weekend_days=[5, 6]).weekmask == "1111001"
