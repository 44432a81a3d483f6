"""Formatter backends: the locale-sensitive collaborators of the interpreter.

The interpreter decides WHICH value is rendered and WITH WHICH style; a
backend does the rendering. MessageBackend is the protocol; BabelBackend is
the default implementation on top of Babel (CLDR data).

Architecture:
    - Every format_* method takes the value and a MessageOptions record
    - options.format carries the style name or CLDR pattern to apply
    - options.extra carries formatter specifics (currency, unit, tzinfo)
    - Named formats map a symbolic name to an option set (message_formats)

Error Handling:
    Babel errors are wrapped in MessageFormattingError and propagate. There
    is no fallback output; a failed format fails the whole call.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import lists as babel_lists
from babel import numbers as babel_numbers
from babel import units as babel_units

from icumessage.constants import (
    DEFAULT_LOCALE,
    LIST_STYLES,
    MAX_LOCALE_CACHE_SIZE,
    PERMILLE_FORMAT,
    UNIT_LENGTHS,
)
from icumessage.diagnostics import (
    ErrorTemplate,
    FormatConfigurationError,
    MessageFormattingError,
)
from icumessage.enums import PluralType
from icumessage.locale_utils import get_babel_locale

from .plural_rules import select_plural_category
from .value_types import Money, Unit

if TYPE_CHECKING:
    from .options import MessageOptions

__all__ = ["BabelBackend", "MessageBackend", "get_shared_backend"]

logger = logging.getLogger(__name__)

# Babel exceptions that signal a value or pattern the formatter cannot render.
_FORMATTING_ERRORS = (
    ValueError,
    TypeError,
    InvalidOperation,
    AttributeError,
    KeyError,
    OverflowError,
)


class MessageBackend(Protocol):
    """Protocol for formatter backends.

    Each method renders one kind of value for the locale and style carried
    by options. plural_category classifies a number for branch selection.
    message_format resolves a named format to its option set and raises
    FormatConfigurationError when the name is unknown.
    """

    def format_number(self, value: Any, options: MessageOptions) -> str: ...

    def format_date(self, value: Any, options: MessageOptions) -> str: ...

    def format_time(self, value: Any, options: MessageOptions) -> str: ...

    def format_datetime(self, value: Any, options: MessageOptions) -> str: ...

    def format_money(self, value: Any, options: MessageOptions) -> str: ...

    def format_list(self, value: Any, options: MessageOptions) -> str: ...

    def format_unit(self, value: Any, options: MessageOptions) -> str: ...

    def plural_category(
        self, number: int | float | Decimal, plural_type: PluralType, options: MessageOptions
    ) -> str: ...

    def message_format(self, name: str) -> Mapping[str, Any]: ...


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _resolve_locale(locale_code: str) -> Locale:
    """Parse locale, falling back to en_US for unknown codes (warned once per code)."""
    try:
        return get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    return get_babel_locale(DEFAULT_LOCALE)


def _formatting_error(
    kind: str, value: object, error: Exception, options: MessageOptions
) -> MessageFormattingError:
    return MessageFormattingError(
        ErrorTemplate.formatting_failed(kind, value, str(error)), locale_code=options.locale
    )


class BabelBackend:
    """CLDR formatting backend built on Babel.

    Named formats are option sets registered under a symbolic name and
    merged into the options when a message uses the name as a style.

    Examples:
        >>> backend = BabelBackend(message_formats={
        ...     "usd": {"format": "currency", "currency": "USD"},
        ... })
        >>> backend.message_format("usd")
        mappingproxy({'format': 'currency', 'currency': 'USD'})

    Spellout:
        Babel has no rule-based number formatter. Spellout formats raise
        FormatConfigurationError; use a backend that implements them.

    Thread Safety:
        Immutable after construction. Babel formatting is thread-safe.
    """

    __slots__ = ("_message_formats",)

    def __init__(self, message_formats: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        """Initialize backend.

        Args:
            message_formats: Named formats, name -> option set
        """
        self._message_formats: Mapping[str, Mapping[str, Any]] = MappingProxyType(
            {name: MappingProxyType(dict(opts)) for name, opts in (message_formats or {}).items()}
        )

    @property
    def message_formats(self) -> Mapping[str, Mapping[str, Any]]:
        """Registered named formats (read-only)."""
        return self._message_formats

    def message_format(self, name: str) -> Mapping[str, Any]:
        """Resolve a named format to its option set.

        Raises:
            FormatConfigurationError: If no format is registered under name
        """
        try:
            return self._message_formats[name]
        except KeyError:
            raise FormatConfigurationError(ErrorTemplate.named_format_not_found(name)) from None

    def plural_category(
        self, number: int | float | Decimal, plural_type: PluralType, options: MessageOptions
    ) -> str:
        """Classify number with the locale's cardinal or ordinal CLDR rules."""
        return select_plural_category(number, options.locale, plural_type)

    def format_number(self, value: Any, options: MessageOptions) -> str:
        """Format a number.

        options.format selects the style:
            None        -> locale decimal format ("1,234.5")
            "short"     -> compact decimal ("1.2K")
            "long"      -> long compact decimal ("1.2 thousand")
            "percent"   -> percent ("25%")
            "permille"  -> per-mille ("250‰")
            "currency"  -> currency (needs a currency code)
            "accounting"-> accounting currency
            "spellout*" -> unsupported by Babel
            other str   -> CLDR number pattern ("#,##0.00")
        """
        fmt = options.format
        if fmt is not None and fmt.startswith("spellout"):
            raise FormatConfigurationError(
                ErrorTemplate.unsupported_format(fmt, type(self).__name__)
            )
        locale = _resolve_locale(options.locale)

        try:
            match fmt:
                case None:
                    return str(babel_numbers.format_decimal(value, locale=locale))
                case "short" | "long":
                    return str(
                        babel_numbers.format_compact_decimal(value, format_type=fmt, locale=locale)
                    )
                case "percent":
                    return str(babel_numbers.format_percent(value, locale=locale))
                case "permille":
                    return str(
                        babel_numbers.format_decimal(value, format=PERMILLE_FORMAT, locale=locale)
                    )
                case "currency" | "accounting":
                    currency = self._currency(value, options)
                    return str(
                        babel_numbers.format_currency(
                            value,
                            currency,
                            locale=locale,
                            format_type="standard" if fmt == "currency" else "accounting",
                        )
                    )
                case _:
                    return str(babel_numbers.format_decimal(value, format=fmt, locale=locale))
        except _FORMATTING_ERRORS as e:
            raise _formatting_error("number", value, e, options) from e

    def format_date(self, value: Any, options: MessageOptions) -> str:
        """Format a date; options.format is a CLDR width or pattern (default medium)."""
        try:
            return str(
                babel_dates.format_date(
                    value,
                    format=options.format or "medium",
                    locale=_resolve_locale(options.locale),
                )
            )
        except _FORMATTING_ERRORS as e:
            raise _formatting_error("date", value, e, options) from e

    def format_time(self, value: Any, options: MessageOptions) -> str:
        """Format a time; honours options.extra["tzinfo"]."""
        try:
            return str(
                babel_dates.format_time(
                    value,
                    format=options.format or "medium",
                    tzinfo=options.get("tzinfo"),
                    locale=_resolve_locale(options.locale),
                )
            )
        except _FORMATTING_ERRORS as e:
            raise _formatting_error("time", value, e, options) from e

    def format_datetime(self, value: Any, options: MessageOptions) -> str:
        """Format a datetime; honours options.extra["tzinfo"]."""
        try:
            return str(
                babel_dates.format_datetime(
                    value,
                    format=options.format or "medium",
                    tzinfo=options.get("tzinfo"),
                    locale=_resolve_locale(options.locale),
                )
            )
        except _FORMATTING_ERRORS as e:
            raise _formatting_error("datetime", value, e, options) from e

    def format_money(self, value: Any, options: MessageOptions) -> str:
        """Format a Money value (or a bare amount with options currency).

        options.format: None (standard), "short" (compact), "long" (currency
        name), "accounting", or a CLDR currency pattern.
        """
        amount = value.amount if isinstance(value, Money) else value
        currency = self._currency(value, options)
        locale = _resolve_locale(options.locale)
        fmt = options.format

        try:
            match fmt:
                case None:
                    return str(babel_numbers.format_currency(amount, currency, locale=locale))
                case "short":
                    return str(
                        babel_numbers.format_compact_currency(
                            amount, currency, format_type="short", locale=locale
                        )
                    )
                case "long":
                    return str(
                        babel_numbers.format_currency(
                            amount, currency, locale=locale, format_type="name"
                        )
                    )
                case "accounting":
                    return str(
                        babel_numbers.format_currency(
                            amount, currency, locale=locale, format_type="accounting"
                        )
                    )
                case _:
                    return str(
                        babel_numbers.format_currency(amount, currency, format=fmt, locale=locale)
                    )
        except _FORMATTING_ERRORS as e:
            raise _formatting_error("money", value, e, options) from e

    def format_list(self, value: Any, options: MessageOptions) -> str:
        """Join a sequence with the locale's list patterns.

        options.format is an ICU list style name ("and", "or_short",
        "unit_narrow", ...); None means "and".
        """
        style = LIST_STYLES.get(options.format or "and")
        if style is None:
            raise FormatConfigurationError(ErrorTemplate.unsupported_style("list", options.format))
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            items = [value]
        else:
            items = list(value)

        try:
            return str(
                babel_lists.format_list(
                    [item if isinstance(item, str) else str(item) for item in items],
                    style=style,
                    locale=_resolve_locale(options.locale),
                )
            )
        except _FORMATTING_ERRORS as e:
            raise _formatting_error("list", value, e, options) from e

    def format_unit(self, value: Any, options: MessageOptions) -> str:
        """Format a Unit value (or a bare number with options unit).

        options.format is the unit length: long (default), short or narrow.
        """
        length = options.format or "long"
        if length not in UNIT_LENGTHS:
            raise FormatConfigurationError(ErrorTemplate.unsupported_style("unit", length))
        if isinstance(value, Unit):
            magnitude, unit = value.value, value.unit
        else:
            magnitude, unit = value, options.get("unit")
        if not unit:
            raise MessageFormattingError(
                ErrorTemplate.unit_required(value), locale_code=options.locale
            )

        try:
            return str(
                babel_units.format_unit(
                    magnitude, unit, length=length, locale=_resolve_locale(options.locale)
                )
            )
        except _FORMATTING_ERRORS as e:
            raise _formatting_error("unit", value, e, options) from e

    def _currency(self, value: Any, options: MessageOptions) -> str:
        """Currency code from a Money value, the options, or the locale's territory."""
        if isinstance(value, Money):
            return value.currency
        currency = options.get("currency")
        if currency:
            return str(currency)
        territory = _resolve_locale(options.locale).territory
        if territory:
            currencies = babel_numbers.get_territory_currencies(territory)
            if currencies:
                return str(currencies[0])
        raise MessageFormattingError(
            ErrorTemplate.currency_required(value), locale_code=options.locale
        )


@functools.cache
def get_shared_backend() -> BabelBackend:
    """Process-wide default backend with no named formats.

    Safe to share: BabelBackend is immutable after construction.
    """
    return BabelBackend()
