#!/usr/bin/env python3
"""
Example: Print the calendar days and weekdays of a month.

Usage:
    python examples/print_month.py [YYYY-MM-DD] [--zone America/New_York] [--roll-over]
"""

import sys
from pathlib import Path
import argparse
from datetime import date, datetime
from zoneinfo import ZoneInfo

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from calnav import CalendarNavigator, NavigatorConfig, MonthOverflow, month_name


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Show the days, weekdays and neighbours of a date's month"
    )
    parser.add_argument(
        "date",
        type=str,
        nargs="?",
        default=date.today().isoformat(),
        help="Reference date (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--zone", "-z",
        type=str,
        default=None,
        help="IANA zone for the reference point (date-only if omitted)"
    )
    parser.add_argument(
        "--roll-over",
        action="store_true",
        help="Roll missing days into the following month instead of clamping"
    )

    args = parser.parse_args()

    try:
        reference = date.fromisoformat(args.date)
        point = reference
        if args.zone:
            point = datetime(reference.year, reference.month, reference.day, tzinfo=ZoneInfo(args.zone))
    except (ValueError, KeyError) as e:
        print(f"\nERROR: {e}")
        return 1

    overflow = MonthOverflow.ROLL_OVER if args.roll_over else MonthOverflow.CLAMP
    nav = CalendarNavigator(NavigatorConfig(month_overflow=overflow))

    days = nav.days_of_month(point)
    weekdays = nav.weekdays_of_month(point)

    print("=" * 50)
    print(f"{month_name(point).upper()} {point.year}")
    print("=" * 50)
    print(f"  Days:             {len(days)}")
    print(f"  Weekdays:         {len(weekdays)}")
    print(f"  First weekday:    {weekdays[0].isoformat()}")
    print(f"  Last weekday:     {weekdays[-1].isoformat()}")
    print(f"  Next weekday:     {nav.next_weekday(point).isoformat()}")
    print(f"  Previous weekday: {nav.previous_weekday(point).isoformat()}")
    print(f"  Next month:       {nav.next_month(point).isoformat()}")
    print(f"  Previous month:   {nav.previous_month(point).isoformat()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
