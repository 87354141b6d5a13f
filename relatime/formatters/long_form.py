"""Verbose relative-time phrases: '3 days ago', '2 hours ago', '10 March'."""

from collections.abc import Callable
from datetime import datetime

from relatime.formatters.base import TABLE, Rule, TimeAgoContext, always, apply_rules
from relatime.i18n.loader import t
from relatime.utils.date_utils import DAY_MONTH, DAY_MONTH_YEAR, format_date


def _phrase(key: str) -> Callable[[TimeAgoContext], str]:
    """Renderer for a fixed phrase without a numeral."""

    def render(ctx: TimeAgoContext) -> str:
        return t(f"{TABLE}.{key}", ctx.lang)

    return render


def _render_month_or_older(ctx: TimeAgoContext) -> str:
    pattern = DAY_MONTH if ctx.same_year else DAY_MONTH_YEAR
    return format_date(ctx.subject, pattern, ctx.lang)


def _render_weeks(ctx: TimeAgoContext) -> str:
    return format_date(ctx.subject, DAY_MONTH, ctx.lang)


def _render_days(ctx: TimeAgoContext) -> str:
    return t(f"{TABLE}.time_few_days_ago", ctx.lang, count=ctx.delta.days)


def _render_hours(ctx: TimeAgoContext) -> str:
    return t(f"{TABLE}.time_few_hours_ago", ctx.lang, count=ctx.delta.hours)


def _render_one_hour(ctx: TimeAgoContext) -> str:
    return t(f"{TABLE}.time_one_hour_ago", ctx.lang, count=ctx.delta.hours)


def _render_minutes(ctx: TimeAgoContext) -> str:
    return t(f"{TABLE}.time_few_minutes_ago", ctx.lang, count=ctx.delta.minutes)


LONG_FORM_RULES: tuple[Rule, ...] = (
    Rule("months", lambda c: c.delta.months >= 1, _render_month_or_older),
    Rule("weeks", lambda c: c.delta.weeks >= 1, _render_weeks),
    Rule("days", lambda c: c.delta.days >= 2, _render_days),
    Rule("yesterday", lambda c: c.is_yesterday, _phrase("time_one_day_ago")),
    Rule("hours", lambda c: c.delta.hours >= 2, _render_hours),
    Rule("one_hour", lambda c: c.delta.hours == 1, _render_one_hour),
    Rule("minutes", lambda c: c.delta.minutes >= 1, _render_minutes),
    Rule("just_now", always, _phrase("time_0_seconds_ago")),
)


def format_time_ago(
    subject: datetime,
    reference: datetime,
    lang: str | None = None,
    *,
    numeric_dates: bool = False,
    numeric_times: bool = False,
) -> str:
    """Describe how long before reference subject happened.

    Older than a week the subject's own date is shown instead of a phrase.
    numeric_dates and numeric_times are accepted for API compatibility and
    do not change the output.
    """
    ctx = TimeAgoContext.build(subject, reference, lang)
    return apply_rules(LONG_FORM_RULES, ctx)
