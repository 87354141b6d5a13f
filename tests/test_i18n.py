"""Tests for i18n loader and translations."""

import json

import pytest

from relatime.config import settings
from relatime.i18n.loader import (
    SUPPORTED_LANGUAGES,
    lookup,
    normalize_language,
    _ensure_loaded,
    _translations,
    reload_translations,
    t,
)

LONG_FORM_KEYS = [
    "time_few_days_ago",
    "time_one_day_ago",
    "time_few_hours_ago",
    "time_one_hour_ago",
    "time_few_minutes_ago",
    "time_0_seconds_ago",
]
UNITS = "yMwdhms"


class TestI18nLoader:
    def test_supported_languages(self):
        for lang in ("en", "ru", "uk", "pl"):
            assert lang in SUPPORTED_LANGUAGES

    def test_interpolation(self):
        assert t("time_ago.time_few_days_ago", "en", count=3) == "3 days ago"

    def test_missing_key_returns_key(self):
        result = t("nonexistent.key.that.does.not.exist", "ru")
        assert result == "nonexistent.key.that.does.not.exist"

    def test_lookup_missing_key_returns_bare_key(self):
        assert lookup("time_ago", "%d_q", "ru") == "%d_q"

    def test_lookup_raw_template(self):
        assert lookup("time_ago", "time_few_days_ago", "en") == "{count} days ago"
        assert lookup("time_ago", "%d_d", "ru") == "%dд"

    def test_fallback_to_fallback_language(self):
        """Unknown language resolves through the fallback table."""
        assert t("time_ago.time_few_days_ago", "xx", count=3) == "3 days ago"

    def test_bad_placeholder_returns_template(self):
        assert t("time_ago.time_few_days_ago", "en", days=3) == "{count} days ago"

    @pytest.mark.parametrize("lang", ["en", "ru", "uk", "pl"])
    def test_all_long_form_keys_exist(self, lang):
        for key in LONG_FORM_KEYS:
            assert lookup("time_ago", key, lang) != key, f"Key '{key}' missing for '{lang}'"

    @pytest.mark.parametrize("lang", ["ru", "uk"])
    def test_all_slavic_short_keys_exist(self, lang):
        for unit in UNITS:
            for infix in ("", "_", "__"):
                key = f"%d{infix}{unit}"
                assert f"time_ago.{key}" in _ensure_loaded(lang), f"Key '{key}' missing for '{lang}'"

    @pytest.mark.parametrize("lang", ["en", "pl"])
    def test_all_plain_short_keys_exist(self, lang):
        for unit in UNITS:
            assert f"time_ago.%d{unit}" in _ensure_loaded(lang), f"Key '%d{unit}' missing for '{lang}'"


class TestNormalizeLanguage:
    def test_plain_code(self):
        assert normalize_language("ru") == "ru"

    def test_region_and_encoding_stripped(self):
        assert normalize_language("ru_RU.UTF-8") == "ru"
        assert normalize_language("pt-BR") == "pt"
        assert normalize_language("UK") == "uk"

    def test_empty_uses_default(self, monkeypatch):
        monkeypatch.setattr(settings, "default_language", "pl")
        assert normalize_language(None) == "pl"
        assert normalize_language("") == "pl"


class TestTranslationsDir:
    def test_custom_directory(self, tmp_path, monkeypatch):
        table = {"time_ago": {"time_0_seconds_ago": "right now"}}
        (tmp_path / "en.json").write_text(json.dumps(table), encoding="utf-8")
        monkeypatch.setattr(settings, "translations_dir", tmp_path)
        reload_translations()
        assert t("time_ago.time_0_seconds_ago", "en") == "right now"
        # Keys absent from the custom table come back untranslated
        assert t("time_ago.time_one_day_ago", "en") == "time_ago.time_one_day_ago"

    def test_malformed_template_returned_as_is(self, tmp_path, monkeypatch):
        table = {"time_ago": {"time_few_days_ago": "{count} days {ago"}}
        (tmp_path / "en.json").write_text(json.dumps(table), encoding="utf-8")
        monkeypatch.setattr(settings, "translations_dir", tmp_path)
        reload_translations()
        assert t("time_ago.time_few_days_ago", "en", count=3) == "{count} days {ago"


class TestTranslationCache:
    def test_unknown_languages_not_cached(self):
        for i in range(50):
            t("time_ago.time_one_day_ago", f"q{i}")
        assert set(_translations) == {"en"}

    def test_known_language_cached(self):
        lookup("time_ago", "%dd", "ru")
        assert "ru" in _translations
