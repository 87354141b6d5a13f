"""Public entry points for relative-time formatting."""

from datetime import datetime

from relatime.formatters.long_form import format_time_ago
from relatime.formatters.short_form import format_short_time_ago


def _now_like(subject: datetime) -> datetime:
    """Current time, aware in subject's zone or naive like subject."""
    return datetime.now(subject.tzinfo)


def time_ago(
    subject: datetime,
    reference: datetime,
    lang: str | None = None,
    *,
    numeric_dates: bool = False,
    numeric_times: bool = False,
) -> str:
    """Long form, e.g. time_ago(sent_at, now, 'en') -> '3 days ago'."""
    return format_time_ago(
        subject,
        reference,
        lang,
        numeric_dates=numeric_dates,
        numeric_times=numeric_times,
    )


def short_time_ago(subject: datetime, reference: datetime, lang: str | None = None) -> str:
    """Short form, e.g. short_time_ago(sent_at, now, 'en') -> '3d'."""
    return format_short_time_ago(subject, reference, lang)


def time_ago_since_now(
    subject: datetime,
    lang: str | None = None,
    *,
    numeric_dates: bool = False,
    numeric_times: bool = False,
) -> str:
    return time_ago(
        subject,
        _now_like(subject),
        lang,
        numeric_dates=numeric_dates,
        numeric_times=numeric_times,
    )


def short_time_ago_since_now(subject: datetime, lang: str | None = None) -> str:
    return short_time_ago(subject, _now_like(subject), lang)
