"""Value formatter bridge: dispatch (type, style) pairs to backend formatters.

Each supported (type, style) combination builds an option set (style or
pattern merged into the ambient options) and delegates to one backend
formatter. Combinations with no formatter raise FormatConfigurationError
instead of falling through.

Dispatch table:
    number    None | integer | short | currency | percent | permille | pattern | named
    spellout  None | verbose | year | ordinal
    date      None | short | medium | long | full | pattern | named
    time      (as date)
    datetime  (as date)
    money     None | short | long | named
    list      None | and | or[_short|_narrow] | standard[...] | unit[...] | named
    unit      None | long | short | narrow | named

A Symbol style that is not a built-in name for its type is a named format,
resolved through backend.message_format().

Python 3.13+.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from icumessage.constants import (
    DATE_TIME_WIDTHS,
    INTEGER_FORMAT,
    LIST_STYLES,
    MONEY_STYLES,
    UNIT_LENGTHS,
)
from icumessage.diagnostics import ErrorTemplate, FormatConfigurationError
from icumessage.enums import FormatType
from icumessage.syntax import Style, Symbol

from .options import MessageOptions
from .value_types import MessageValue, Money, Unit

__all__ = ["format_to_string", "format_value"]

logger = logging.getLogger(__name__)

_NUMBER_STYLES = frozenset({"short", "currency", "percent", "permille"})
_SPELLOUT_STYLES = frozenset({"verbose", "year", "ordinal"})
_TEMPORAL_TYPES = frozenset({FormatType.DATE, FormatType.TIME, FormatType.DATETIME})


def format_value(
    value: MessageValue,
    format_type: FormatType,
    style: Style,
    options: MessageOptions,
) -> str:
    """Render a value for a {arg, type, style} node.

    Args:
        value: Resolved argument value
        format_type: Node's format type
        style: Node's style (None, CLDR pattern string, or Symbol)
        options: Ambient options (never mutated)

    Returns:
        Formatted text

    Raises:
        FormatConfigurationError: Unsupported combination or unknown named format
    """
    backend = options.backend

    match (format_type, style):
        # number
        case (FormatType.NUMBER, None):
            return backend.format_number(value, options)
        case (FormatType.NUMBER, Symbol(name="integer")):
            return backend.format_number(value, replace(options, format=INTEGER_FORMAT))
        case (FormatType.NUMBER, Symbol(name=name)) if name in _NUMBER_STYLES:
            return backend.format_number(value, replace(options, format=name))
        case (FormatType.NUMBER, str() as pattern):
            return backend.format_number(value, replace(options, format=pattern))
        case (FormatType.NUMBER, Symbol(name=name)):
            return backend.format_number(value, _with_named_format(name, options))

        # spellout
        case (FormatType.SPELLOUT, None):
            return backend.format_number(value, replace(options, format="spellout"))
        case (FormatType.SPELLOUT, Symbol(name=name)) if name in _SPELLOUT_STYLES:
            return backend.format_number(value, replace(options, format=f"spellout_{name}"))

        # date, time, datetime
        case (temporal, None) if temporal in _TEMPORAL_TYPES:
            return _temporal_formatter(temporal, options)(value, options)
        case (temporal, Symbol(name=name)) if temporal in _TEMPORAL_TYPES:
            formatter = _temporal_formatter(temporal, options)
            if name in DATE_TIME_WIDTHS:
                return formatter(value, replace(options, format=name))
            return formatter(value, _with_named_format(name, options))
        case (temporal, str() as pattern) if temporal in _TEMPORAL_TYPES:
            return _temporal_formatter(temporal, options)(value, replace(options, format=pattern))

        # money
        case (FormatType.MONEY, None):
            return backend.format_money(value, options)
        case (FormatType.MONEY, Symbol(name=name)) if name in MONEY_STYLES:
            return backend.format_money(value, replace(options, format=name))
        case (FormatType.MONEY, Symbol(name=name)):
            return backend.format_money(value, _with_named_format(name, options))

        # list
        case (FormatType.LIST, None) | (FormatType.LIST, Symbol(name="and")):
            return backend.format_list(value, options)
        case (FormatType.LIST, Symbol(name=name)) if name in LIST_STYLES:
            return backend.format_list(value, replace(options, format=name))
        case (FormatType.LIST, Symbol(name=name)):
            return backend.format_list(value, _with_named_format(name, options))

        # unit
        case (FormatType.UNIT, None):
            return backend.format_unit(value, options)
        case (FormatType.UNIT, Symbol(name=name)) if name in UNIT_LENGTHS:
            return backend.format_unit(value, replace(options, format=name))
        case (FormatType.UNIT, Symbol(name=name)):
            return backend.format_unit(value, _with_named_format(name, options))

        case _:
            raise FormatConfigurationError(ErrorTemplate.unsupported_style(format_type, style))


def format_to_string(value: MessageValue, options: MessageOptions) -> str:
    """Render a bare interpolated value as text.

    Numbers, dates, times, money and units use the backend's default
    formatters for the locale; everything else is coerced with str().

    Examples:
        >>> format_to_string(1234, MessageOptions(locale="en"))
        '1,234'
        >>> format_to_string(True, MessageOptions())
        'true'
        >>> format_to_string(None, MessageOptions())
        ''
    """
    if isinstance(value, str):
        return value
    backend = options.backend
    if options.format is not None:
        options = replace(options, format=None)

    match value:
        # bool before int: bool is an int subclass
        case bool():
            return "true" if value else "false"
        case int() | float() | Decimal():
            return backend.format_number(value, options)
        # datetime before date: datetime is a date subclass
        case datetime():
            return backend.format_datetime(value, options)
        case date():
            return backend.format_date(value, options)
        case time():
            return backend.format_time(value, options)
        case Money():
            return backend.format_money(value, options)
        case Unit():
            return backend.format_unit(value, options)
        case None:
            return ""
        case _:
            return str(value)


def _temporal_formatter(
    format_type: FormatType, options: MessageOptions
) -> Callable[[Any, MessageOptions], str]:
    backend = options.backend
    match format_type:
        case FormatType.DATE:
            return backend.format_date
        case FormatType.TIME:
            return backend.format_time
        case _:
            return backend.format_datetime


def _with_named_format(name: str, options: MessageOptions) -> MessageOptions:
    """Merge a backend-registered named format into the options."""
    overrides = options.backend.message_format(name)
    logger.debug("Resolved named format '%s': %s", name, dict(overrides))
    return options.with_overrides(overrides)
