"""Immutable options record threaded through message interpretation.

MessageOptions carries the locale, the backend that supplies formatters,
the optional parser, and per-call formatter overrides. It is never mutated:
every component that needs derived state (a pattern for one argument, the
formatted plural argument for a `value` placeholder) builds a new record
with dataclasses.replace() or with_overrides().

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from icumessage.constants import DEFAULT_LOCALE
from icumessage.enums import PluralType

from .backend import MessageBackend, get_shared_backend

if TYPE_CHECKING:
    from icumessage.syntax.parser import MessageParser

__all__ = ["MessageOptions"]

logger = logging.getLogger(__name__)

# Set only by plural resolution; never taken from caller or named-format overrides.
_INTERPRETER_FIELDS = frozenset({"arg", "plural_type"})


@dataclass(frozen=True, slots=True)
class MessageOptions:
    """Configuration for a single formatting call.

    Attributes:
        locale: Locale code (BCP-47 or POSIX) passed to every formatter
        backend: Formatter and plural-category collaborator
        parser: Parser for raw message text (None: pre-parsed input only)
        format: Style or CLDR pattern for the formatter being called
        plural_type: Cardinal/ordinal mode of the innermost plural
        arg: Formatted argument of the innermost plural (`value` text)
        extra: Read-only formatter overrides (currency, unit, tzinfo, ...)

    Example:
        >>> options = MessageOptions(locale="de-DE")
        >>> options.with_overrides({"format": "percent", "currency": "EUR"}).extra
        mappingproxy({'currency': 'EUR'})
    """

    locale: str = DEFAULT_LOCALE
    backend: MessageBackend = field(default_factory=get_shared_backend)
    parser: MessageParser | None = None
    format: str | None = None
    plural_type: PluralType | None = None
    arg: str | None = None
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Freeze extra so callers cannot mutate it through a retained reference."""
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def with_overrides(self, overrides: Mapping[str, Any]) -> MessageOptions:
        """Return a copy with overrides merged in.

        Keys naming a field replace that field; all other keys are merged
        into extra. The interpreter-owned fields arg and plural_type are
        ignored with a warning.

        Args:
            overrides: Option set, e.g. from a named backend format

        Returns:
            New MessageOptions (self is unchanged)
        """
        ignored = _INTERPRETER_FIELDS.intersection(overrides)
        if ignored:
            logger.warning("Ignoring interpreter-owned option(s): %s", ", ".join(sorted(ignored)))
        field_names = {f.name for f in fields(self)} - {"extra"} - _INTERPRETER_FIELDS
        known = {key: value for key, value in overrides.items() if key in field_names}
        unknown = {
            key: value
            for key, value in overrides.items()
            if key not in field_names and key not in _INTERPRETER_FIELDS
        }
        if unknown:
            known["extra"] = {**self.extra, **unknown}
        return replace(self, **known)

    def get(self, key: str, default: Any = None) -> Any:
        """Read an option by name: fields first, then extra."""
        if key != "extra" and key in self.__dataclass_fields__:
            return getattr(self, key)
        return self.extra.get(key, default)
