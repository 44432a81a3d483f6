"""Top-level entry points for formatting ICU messages.

A message is either raw text (parsed by the configured MessageParser) or
an already-parsed node / node sequence. Whitespace normalization runs once
per call, before interpretation.

Result-returning entry points return (result, errors) tuples:
    - to_string(): (text, ()) or (None, (error,))
    - format_message() on raw text: (fragments, ()) or (None, (error,))

Raising entry points (to_string_or_raise, format_message_or_raise) raise
the MessageError instead. No partial output is ever returned.

Python 3.13+.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from icumessage.config import resolve_options
from icumessage.diagnostics import (
    ErrorTemplate,
    FormatConfigurationError,
    MessageError,
    MessageParseError,
)
from icumessage.runtime import Arguments, MessageOptions, interpret
from icumessage.syntax import MessageNode, remove_nested_whitespace

__all__ = [
    "format_message",
    "format_message_or_raise",
    "parse_message",
    "to_string",
    "to_string_or_raise",
]

logger = logging.getLogger(__name__)

type Message = str | MessageNode | Sequence[MessageNode]
type Options = MessageOptions | Mapping[str, Any] | None

# Logging truncation limit for message text in warnings.
_LOG_TRUNCATE: int = 100


def parse_message(text: str, options: MessageOptions) -> tuple[MessageNode, ...]:
    """Parse raw message text with the configured parser.

    Raises:
        FormatConfigurationError: No parser configured
        MessageParseError: Parser failed or left input unconsumed
    """
    parser = options.parser
    if parser is None:
        raise FormatConfigurationError(ErrorTemplate.parser_not_configured())

    try:
        result = parser.parse(text)
    except ValueError as e:
        raise MessageParseError(ErrorTemplate.parse_failed(str(e))) from e

    if result.remainder:
        raise MessageParseError(
            ErrorTemplate.parse_remainder(result.remainder), remainder=result.remainder
        )
    return tuple(result.nodes)


def _render(message: Message, args: Arguments, options: MessageOptions) -> list[str]:
    """Parse (if needed), normalize once, and interpret."""
    if isinstance(message, str):
        nodes: Sequence[MessageNode] = parse_message(message, options)
    elif isinstance(message, Sequence):
        nodes = message
    else:
        nodes = (message,)
    fragments = interpret(remove_nested_whitespace(nodes), args, options)
    logger.debug("Formatted message into %d fragment(s)", len(fragments))
    return fragments


def _describe(message: Message) -> str:
    if isinstance(message, str):
        return repr(message[:_LOG_TRUNCATE])
    return f"<{type(message).__name__}>"


def format_message(
    message: Message, args: Arguments, options: Options = None
) -> tuple[list[str] | None, tuple[MessageError, ...]] | list[str]:
    """Format a message into text fragments.

    Raw text returns a (fragments, errors) tuple. Pre-parsed input returns
    the fragment list directly and raises MessageError on failure.

    Args:
        message: Raw text, a node, or a node sequence
        args: Argument list or mapping
        options: MessageOptions, a mapping of overrides, or None for defaults

    Examples:
        >>> from icumessage.syntax import TextElement
        >>> format_message([TextElement("Hello")], {}, {"locale": "en"})
        ['Hello']
    """
    resolved = resolve_options(options)
    if not isinstance(message, str):
        return _render(message, args, resolved)
    try:
        return (_render(message, args, resolved), ())
    except MessageError as e:
        logger.warning("Failed to format message %s: %s", _describe(message), e)
        return (None, (e,))


def format_message_or_raise(
    message: Message, args: Arguments, options: Options = None
) -> list[str]:
    """Format a message into text fragments, raising on failure.

    Raises:
        MessageError: Any parse, argument, lookup, configuration or formatting error
    """
    return _render(message, args, resolve_options(options))


def to_string(
    message: Message, args: Arguments, options: Options = None
) -> tuple[str | None, tuple[MessageError, ...]]:
    """Format a message into a single string.

    Returns:
        Tuple of (result, errors):
        - result: Formatted text, or None if formatting failed
        - errors: Tuple with the failure (empty tuple on success)

    Examples:
        >>> from icumessage.syntax import TextElement
        >>> to_string([TextElement("Hi")], {}, {"locale": "en"})
        ('Hi', ())
    """
    try:
        fragments = _render(message, args, resolve_options(options))
    except MessageError as e:
        logger.warning("Failed to format message %s: %s", _describe(message), e)
        return (None, (e,))
    return ("".join(fragments), ())


def to_string_or_raise(message: Message, args: Arguments, options: Options = None) -> str:
    """Format a message into a single string, raising on failure.

    Raises:
        MessageError: Any parse, argument, lookup, configuration or formatting error
    """
    return "".join(_render(message, args, resolve_options(options)))
