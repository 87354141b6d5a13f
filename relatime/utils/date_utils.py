"""Date ordering, calendar checks and localized date rendering."""

import logging
from datetime import datetime, timedelta

from babel.core import UnknownLocaleError
from babel.dates import format_date as babel_format_date

from relatime.config import settings
from relatime.i18n.loader import normalize_language

logger = logging.getLogger(__name__)

DAY_MONTH = "d MMMM"
DAY_MONTH_YEAR = "dd MMMM yyyy"


def earlier_of(a: datetime, b: datetime) -> datetime:
    """Return the earlier instant; ties resolve to a."""
    return a if a <= b else b


def later_of(a: datetime, b: datetime) -> datetime:
    """Return the later instant; ties resolve to a."""
    return a if a >= b else b


def subtract_days(instant: datetime, n: int) -> datetime:
    """Move instant back by n calendar days, keeping the wall-clock time."""
    return instant - timedelta(days=n)


def is_yesterday(subject: datetime, reference: datetime) -> bool:
    """True when the day before reference has subject's day of month.

    Only the day-of-month is compared, so a subject exactly one month and
    a day earlier also counts.
    """
    return subtract_days(reference, 1).day == subject.day


def is_same_year(subject: datetime, reference: datetime) -> bool:
    return subject.year == reference.year


def format_date(instant: datetime, pattern: str, lang: str | None = None) -> str:
    """Render instant with a CLDR date pattern such as 'd MMMM'.

    Unknown locales are rendered in the fallback language.
    """
    code = normalize_language(lang)
    try:
        return babel_format_date(instant, pattern, locale=code)
    except (UnknownLocaleError, ValueError):
        logger.warning(
            "Unknown locale %r, formatting date in %r", code, settings.fallback_language
        )
        return babel_format_date(instant, pattern, locale=settings.fallback_language)
