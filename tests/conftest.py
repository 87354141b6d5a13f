"""Test configuration: every test starts with a clean translation cache."""

from collections.abc import Generator

import pytest

from relatime.i18n.loader import reload_translations


@pytest.fixture(autouse=True)
def fresh_translations() -> Generator[None, None, None]:
    """Drop cached tables so settings overrides take effect per test."""
    reload_translations()
    yield
    reload_translations()
