"""Human-readable "time ago" phrases in long and short form."""

from relatime.delta import CalendarDelta, breakdown
from relatime.log import configure_logging
from relatime.api import (
    short_time_ago,
    short_time_ago_since_now,
    time_ago,
    time_ago_since_now,
)
from relatime.utils.date_utils import earlier_of, later_of

__all__ = [
    "CalendarDelta",
    "breakdown",
    "configure_logging",
    "earlier_of",
    "later_of",
    "short_time_ago",
    "short_time_ago_since_now",
    "time_ago",
    "time_ago_since_now",
]
