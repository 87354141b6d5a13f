"""Calendar-aware breakdown of the time elapsed between two instants."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class CalendarDelta:
    """Calendar components between an earlier and a later instant.

    Each field counts what remains after the larger units are taken out,
    so 10 days is weeks=1, days=3.
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0


ZERO = CalendarDelta()


def _elapsed(start: datetime, end: datetime) -> timedelta:
    """Real time between two instants, measured in UTC when they are aware."""
    if start.tzinfo is None:
        return end - start
    return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)


def breakdown(earlier: datetime, later: datetime) -> CalendarDelta:
    """Split later - earlier into calendar components.

    Month and year lengths follow the calendar, so 2024-02-10 to
    2024-03-10 is one month although February has 29 days. Hours, minutes
    and seconds are real elapsed time, so a DST change does not add or
    drop an hour.
    Expects earlier <= later.
    """
    if earlier == later:
        return ZERO
    rd = relativedelta(later, earlier)
    anchor = earlier + relativedelta(years=rd.years, months=rd.months, days=rd.days)
    rest = _elapsed(anchor, later)
    # A DST shift can push the remainder past a day boundary either way
    days = rd.days + rest.days
    seconds = rest.seconds
    if days < 0:
        days, seconds = 0, 0
    return CalendarDelta(
        years=rd.years,
        months=rd.months,
        weeks=days // 7,
        days=days % 7,
        hours=seconds // 3600,
        minutes=seconds % 3600 // 60,
        seconds=seconds % 60,
    )
