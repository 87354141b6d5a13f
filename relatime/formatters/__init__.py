"""Long and short relative-time formatters."""

from relatime.formatters.long_form import LONG_FORM_RULES, format_time_ago
from relatime.formatters.short_form import (
    SHORT_FORM_RULES,
    compose_key,
    format_short_time_ago,
    render_template,
)

__all__ = [
    "LONG_FORM_RULES",
    "SHORT_FORM_RULES",
    "compose_key",
    "format_short_time_ago",
    "format_time_ago",
    "render_template",
]
