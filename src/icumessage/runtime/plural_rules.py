"""CLDR plural rules implementation using Babel.

Provides cardinal and ordinal plural category selection for all locales
using Babel's CLDR data.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from babel.core import UnknownLocaleError

from icumessage.enums import PluralType
from icumessage.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]


def select_plural_category(
    n: int | float | Decimal,
    locale: str,
    plural_type: PluralType = PluralType.CARDINAL,
) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")
        plural_type: Cardinal (quantity) or ordinal (rank) rules

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "en_US", PluralType.ORDINAL)
        'two'
        >>> select_plural_category(42, "ja_JP")
        'other'

    Fallback:
        If locale parsing fails, cardinal falls back to the simple
        one/other rule and ordinal to "other".
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        if plural_type is PluralType.ORDINAL:
            return "other"
        return "one" if abs(n) == 1 else "other"

    if plural_type is PluralType.ORDINAL:
        return locale_obj.ordinal_form(n)
    return locale_obj.plural_form(n)
