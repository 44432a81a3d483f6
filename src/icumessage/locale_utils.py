"""Locale code handling for the formatting backend and default options.

Message callers pass BCP-47 codes ("pt-BR"); Babel expects POSIX codes
("pt_BR"). Every Babel lookup goes through get_babel_locale so a locale is
parsed once per process.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Iterator
from typing import TYPE_CHECKING

from icumessage.constants import DEFAULT_LOCALE, LOCALE_ENV_VAR, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Replace BCP-47 hyphens with the underscores Babel expects.

    Example:
        >>> normalize_locale("zh-Hant-TW")
        'zh_Hant_TW'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a BCP-47 or POSIX locale code into a cached Babel Locale.

    Raises:
        babel.core.UnknownLocaleError: No CLDR data for the locale
        ValueError: Malformed locale code
    """
    # Babel loads CLDR data on import
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _locale_candidates() -> Iterator[str | None]:
    yield os.environ.get(LOCALE_ENV_VAR)

    import locale as locale_module  # noqa: PLC0415

    try:
        yield locale_module.getlocale()[0]
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        yield os.environ.get(var)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale used when a caller passes no options.

    Sources, first usable one wins: ICUMESSAGE_LOCALE, locale.getlocale(),
    then LC_ALL, LC_MESSAGES and LANG. Encoding suffixes (".UTF-8") are
    dropped and the C/POSIX pseudo-locales are skipped.

    Raises:
        RuntimeError: Nothing usable found and raise_on_failure is set
            (otherwise en_US is returned)
    """
    for candidate in _locale_candidates():
        code = (candidate or "").split(".")[0]
        if code and code not in ("C", "POSIX"):
            return normalize_locale(code)

    if raise_on_failure:
        msg = f"No usable locale found in {LOCALE_ENV_VAR}, the OS, LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
