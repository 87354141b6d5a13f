"""Compact relative-time tokens: '3d', '2h', '21г'.

A short-form template is found in two steps. First the plural infix for the
value is placed into '%d{infix}{unit}', then that composed string is used as
the translation key; its translation is the template the numeral goes into.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from relatime.formatters.base import TABLE, Rule, TimeAgoContext, always, apply_rules
from relatime.i18n.loader import lookup
from relatime.utils.declension import plural_infix

logger = logging.getLogger(__name__)


def compose_key(unit: str, infix: str = "") -> str:
    """compose_key('d', '_') -> '%d_d'"""
    return f"%d{infix}{unit}"


def render_template(template: str, value: int) -> str:
    """Substitute value into a '%d' template; unusable templates come back unchanged."""
    try:
        return template % value
    except (TypeError, ValueError):
        logger.debug("Template %r does not accept a numeral", template)
        return template


def localized_unit(unit: str, value: int, lang: str) -> str:
    key = compose_key(unit, plural_infix(lang, value))
    return render_template(lookup(TABLE, key, lang), value)


def _unit(tag: str, value: Callable[[TimeAgoContext], int]) -> Callable[[TimeAgoContext], str]:
    def render(ctx: TimeAgoContext) -> str:
        return localized_unit(tag, value(ctx), ctx.lang)

    return render


SHORT_FORM_RULES: tuple[Rule, ...] = (
    Rule("years", lambda c: c.delta.years >= 1, _unit("y", lambda c: c.delta.years)),
    Rule("months", lambda c: c.delta.months >= 1, _unit("M", lambda c: c.delta.months)),
    Rule("weeks", lambda c: c.delta.weeks >= 1, _unit("w", lambda c: c.delta.weeks)),
    Rule("days", lambda c: c.delta.days >= 2, _unit("d", lambda c: c.delta.days)),
    Rule("yesterday", lambda c: c.is_yesterday, _unit("d", lambda c: 1)),
    Rule("hours", lambda c: c.delta.hours >= 1, _unit("h", lambda c: c.delta.hours)),
    Rule("minutes", lambda c: c.delta.minutes >= 1, _unit("m", lambda c: c.delta.minutes)),
    Rule("seconds", lambda c: c.delta.seconds >= 3, _unit("s", lambda c: c.delta.seconds)),
    Rule("just_now", always, _unit("s", lambda c: c.delta.seconds)),
)


def format_short_time_ago(subject: datetime, reference: datetime, lang: str | None = None) -> str:
    ctx = TimeAgoContext.build(subject, reference, lang)
    return apply_rules(SHORT_FORM_RULES, ctx)
