"""Calendar arithmetic for shelf lives and expiry countdowns.

Month and year additions clamp to the last valid day of the resulting month:
Jan 31 + 1 month is Feb 29 in a leap year and Feb 28 otherwise, and
Feb 29 + 1 year is Feb 28.
"""

import calendar
import math
from collections.abc import Callable
from datetime import UTC, date, datetime, time, timedelta, tzinfo

from pantry_tracker.domain.inventory import ShelfLifeUnit

MONTHS_PER_YEAR = 12
SECONDS_PER_DAY = 86400

Clock = Callable[[], datetime]


def system_clock(tz: tzinfo = UTC) -> Clock:
    """Return a clock reading the current time in the given timezone."""

    def now() -> datetime:
        return datetime.now(tz=tz)

    return now


def add_duration(start: date, value: int, unit: ShelfLifeUnit) -> date:
    """Add a number of days, months or years to a calendar date."""
    if unit is ShelfLifeUnit.DAY:
        return start + timedelta(days=value)
    months = value if unit is ShelfLifeUnit.MONTH else value * MONTHS_PER_YEAR
    return _add_months(start, months)


def remaining_days(target: date, now: datetime) -> int:
    """Return whole days until the start of ``target``, rounded up.

    The result is zero on the target day itself and negative afterwards.
    """
    tz = now.tzinfo or UTC
    boundary = datetime.combine(target, time.min, tzinfo=tz)
    seconds = (boundary - now).total_seconds()
    return math.ceil(seconds / SECONDS_PER_DAY)


def _add_months(start: date, months: int) -> date:
    index = start.year * MONTHS_PER_YEAR + (start.month - 1) + months
    year, month_index = divmod(index, MONTHS_PER_YEAR)
    month = month_index + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))
