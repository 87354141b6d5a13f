"""Rule cascade shared by the long and short relative-time formatters."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from relatime.delta import CalendarDelta, breakdown
from relatime.i18n.loader import normalize_language
from relatime.utils.date_utils import earlier_of, is_same_year, is_yesterday, later_of

logger = logging.getLogger(__name__)

TABLE = "time_ago"


@dataclass(frozen=True)
class TimeAgoContext:
    """Everything a rule needs, computed once per formatting call."""

    subject: datetime
    reference: datetime
    lang: str
    delta: CalendarDelta
    is_yesterday: bool
    same_year: bool

    @classmethod
    def build(cls, subject: datetime, reference: datetime, lang: str | None) -> "TimeAgoContext":
        earlier = earlier_of(subject, reference)
        later = later_of(reference, subject)
        return cls(
            subject=subject,
            reference=reference,
            lang=normalize_language(lang),
            delta=breakdown(earlier, later),
            is_yesterday=is_yesterday(subject, reference),
            same_year=is_same_year(subject, reference),
        )


@dataclass(frozen=True)
class Rule:
    """One case of a cascade: a predicate and the renderer used when it holds."""

    name: str
    matches: Callable[[TimeAgoContext], bool]
    render: Callable[[TimeAgoContext], str]


def always(ctx: TimeAgoContext) -> bool:
    return True


def first_match(rules: Sequence[Rule], ctx: TimeAgoContext) -> Rule:
    """Return the first rule whose predicate holds for ctx."""
    for rule in rules:
        if rule.matches(ctx):
            return rule
    # Cascades end with an `always` rule
    raise LookupError("no rule matched")


def apply_rules(rules: Sequence[Rule], ctx: TimeAgoContext) -> str:
    rule = first_match(rules, ctx)
    logger.debug("Rule %s matched for %s", rule.name, ctx.delta)
    return rule.render(ctx)
