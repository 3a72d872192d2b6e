"""
Navigation policies and their validated configuration.

Supports clamp and roll-over month stepping, civil and UTC round-trip day
stepping, and a configurable weekend.
"""

from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Policy enums
# ============================================================================

class MonthOverflow(str, Enum):
    """What happens when the source day does not exist in the target month."""
    CLAMP = "clamp"             # Jan 31 -> Feb 28/29
    ROLL_OVER = "roll_over"     # Jan 31 -> Mar 2/3


class DayStep(str, Enum):
    """How a single day step is taken."""
    CIVIL = "civil"                     # Date arithmetic on the civil date
    UTC_ROUND_TRIP = "utc_round_trip"   # +/-24h in UTC, back to the local zone


# ISO weekday numbers (Monday=1 ... Sunday=7)
SATURDAY = 6
SUNDAY = 7
DEFAULT_WEEKEND: FrozenSet[int] = frozenset({SATURDAY, SUNDAY})


# ============================================================================
# Configuration model
# ============================================================================

class NavigatorConfig(BaseModel):
    """Policies applied by a calendar navigator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    month_overflow: MonthOverflow = Field(
        default=MonthOverflow.CLAMP,
        description="Day-of-month overflow rule for month steps"
    )
    day_step: DayStep = Field(
        default=DayStep.CIVIL,
        description="Arithmetic used for next/previous day"
    )
    weekend_days: FrozenSet[int] = Field(
        default=DEFAULT_WEEKEND,
        description="ISO weekday numbers treated as weekend (Monday=1)"
    )

    @field_validator('weekend_days')
    @classmethod
    def validate_weekend_days(cls, v: FrozenSet[int]) -> FrozenSet[int]:
        """Weekend days must be ISO weekdays and leave at least one weekday."""
        invalid = sorted(d for d in v if d < 1 or d > 7)
        if invalid:
            raise ValueError(f"Weekend days must be in 1..7, got {invalid}")
        if len(v) >= 7:
            raise ValueError("Weekend cannot cover the whole week")
        return v

    @property
    def weekmask(self) -> str:
        """Weekmask string in numpy busday format ('1111100' for Mon-Fri)."""
        return "".join(
            "0" if iso_day in self.weekend_days else "1"
            for iso_day in range(1, 8)
        )


DEFAULT_CONFIG = NavigatorConfig()
