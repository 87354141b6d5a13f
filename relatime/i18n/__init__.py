"""Translation tables for relative-time phrases."""

from relatime.i18n.loader import (
    SUPPORTED_LANGUAGES,
    lookup,
    normalize_language,
    reload_translations,
    t,
)

__all__ = [
    "SUPPORTED_LANGUAGES",
    "lookup",
    "normalize_language",
    "reload_translations",
    "t",
]
