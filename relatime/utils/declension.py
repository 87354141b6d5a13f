"""Slavic plural classes encoded as short-form template infixes."""

import math
from enum import Enum

from relatime.i18n.loader import normalize_language

# Languages with the one/few/many numeral rule
SLAVIC_LANGUAGES = frozenset({"ru", "uk"})


class PluralVariant(str, Enum):
    """Infix inserted between '%d' and the unit tag of a short-form key."""

    NONE = ""  # many, zero and every non-Slavic language
    FEW = "_"  # два дня
    ONE = "__"  # один день


def _slavic_variant(n: int) -> PluralVariant:
    last_two = n % 100
    last_one = n % 10
    if last_one == 0 or last_one > 4 or 10 < last_two < 15:
        return PluralVariant.NONE  # пять дней, одиннадцать дней
    if 1 < last_one < 5 and not 10 <= last_two <= 20:
        return PluralVariant.FEW
    if last_one == 1 and last_two != 11:
        return PluralVariant.ONE
    return PluralVariant.NONE


def plural_variant(lang: str | None, value: float) -> PluralVariant:
    """Return the plural class of value for lang.

    Only Russian and Ukrainian distinguish classes; any other or unknown
    language gets PluralVariant.NONE.
    """
    if normalize_language(lang) not in SLAVIC_LANGUAGES:
        return PluralVariant.NONE
    return _slavic_variant(math.floor(value))


def plural_infix(lang: str | None, value: float) -> str:
    """Return the infix string for value: '', '_' or '__'.

    Example: plural_infix('ru', 21) -> '__', plural_infix('ru', 5) -> ''
    """
    return plural_variant(lang, value).value
