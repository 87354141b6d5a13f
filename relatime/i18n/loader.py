"""Lightweight i18n loader with string interpolation."""

import json
import logging
from pathlib import Path

from relatime.config import settings

logger = logging.getLogger(__name__)

_translations: dict[str, dict[str, str]] = {}
_i18n_dir = Path(__file__).parent

SUPPORTED_LANGUAGES = ("en", "ru", "uk", "pl")


def normalize_language(lang: str | None) -> str:
    """Reduce a locale code to its language part: 'ru_RU.UTF-8' -> 'ru'.

    None or an empty code resolves to the configured default language.
    """
    if not lang:
        return settings.default_language
    code = lang.split(".", 1)[0].replace("-", "_")
    return code.split("_", 1)[0].lower()


def _translations_dir() -> Path:
    return settings.translations_dir or _i18n_dir


def _load_language(lang: str) -> dict[str, str]:
    """Load translations from JSON file."""
    file_path = _translations_dir() / f"{lang}.json"
    if not file_path.exists():
        logger.debug("No translation table for %r at %s", lang, file_path)
        return {}
    with open(file_path, encoding="utf-8") as f:
        return _flatten_dict(json.load(f))


def _flatten_dict(d: dict, prefix: str = "") -> dict[str, str]:
    """Flatten nested dict: {'a': {'b': 'c'}} -> {'a.b': 'c'}."""
    items: dict[str, str] = {}
    for k, v in d.items():
        key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            items.update(_flatten_dict(v, key))
        else:
            items[key] = str(v)
    return items


def _ensure_loaded(lang: str) -> dict[str, str]:
    """Load language if not already loaded.

    Languages without a table are not cached.
    """
    if lang not in _translations:
        table = _load_language(lang)
        if not table:
            return table
        _translations[lang] = table
    return _translations[lang]


def _resolve(key: str, lang: str) -> str | None:
    """Find the template for key in lang, then in the fallback language."""
    template = _ensure_loaded(lang).get(key)
    if template is None and lang != settings.fallback_language:
        template = _ensure_loaded(settings.fallback_language).get(key)
        if template is not None:
            logger.debug("Key %r missing for %r, using %r", key, lang, settings.fallback_language)
    return template


def lookup(table: str, key: str, lang: str | None = None) -> str:
    """Get the raw template stored under key in a namespaced table.

    Returns the bare key when neither lang nor the fallback language has it.
    """
    template = _resolve(f"{table}.{key}", normalize_language(lang))
    if template is None:
        logger.debug("Untranslated key %r in table %r", key, table)
        return key
    return template


def t(key: str, lang: str | None = None, **kwargs: object) -> str:
    """Get translated string with interpolation.

    Usage:
        t('time_ago.time_few_days_ago', 'en', count=3)
        t('time_ago.time_one_day_ago', 'pl')
    """
    template = _resolve(key, normalize_language(lang))
    if template is None:
        return key  # Return key as-is if not found

    if kwargs:
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return template

    return template


def reload_translations() -> None:
    """Force reload all cached translations."""
    _translations.clear()
