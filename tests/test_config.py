"""Tests for settings and logging setup."""

import logging
from datetime import datetime

from relatime import configure_logging, short_time_ago, time_ago
from relatime.config import Settings, settings

REF = datetime(2024, 3, 10, 12, 0, 0)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_LANGUAGE", "FALLBACK_LANGUAGE", "TRANSLATIONS_DIR", "LOG_LEVEL"):
            monkeypatch.delenv(f"RELATIME_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.default_language == "en"
        assert s.fallback_language == "en"
        assert s.translations_dir is None
        assert s.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RELATIME_DEFAULT_LANGUAGE", "ru")
        monkeypatch.setenv("RELATIME_LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.default_language == "ru"
        assert s.log_level == "DEBUG"

    def test_default_language_used_without_lang(self, monkeypatch):
        monkeypatch.setattr(settings, "default_language", "ru")
        assert short_time_ago(datetime(2024, 3, 7, 12, 0), REF) == "3д"
        assert time_ago(datetime(2024, 3, 7, 12, 0), REF) == "3 дн. назад"

    def test_fallback_language(self, monkeypatch):
        monkeypatch.setattr(settings, "fallback_language", "pl")
        assert time_ago(datetime(2024, 3, 7, 12, 0), REF, "xx") == "3 dni temu"


class TestConfigureLogging:
    def test_sets_root_level(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert root.handlers
        handler = root.handlers[0]
        assert "%(levelname)-8s" in handler.formatter._fmt
