"""Message parser collaborator protocol.

Parsing raw ICU message text is not done by this package. Callers that
pass raw text to the entry points supply a parser through
MessageOptions(parser=...).

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol

from .ast import ParseResult

__all__ = ["MessageParser"]


class MessageParser(Protocol):
    """Protocol for ICU message parsers.

    parse() returns a ParseResult. A non-empty remainder means the parser
    stopped early; the entry points report it as MessageParseError. A parser
    may also raise MessageParseError (or ValueError) to report an outright
    failure.
    """

    def parse(self, text: str) -> ParseResult:
        ...  # pragma: no cover  # Protocol stub - not executable
