"""ICU message syntax package.

AST node types consumed by the interpreter and the whitespace
normalization pass applied before interpretation. Parsing raw message text
is delegated to a MessageParser collaborator (see icumessage.message).

Python 3.13+. Zero external dependencies.
"""

from .ast import (
    VALUE,
    ArgumentReference,
    BranchKey,
    Branches,
    ComplexNode,
    MessageNode,
    NamedArgument,
    ParseResult,
    Plural,
    PositionalArgument,
    Select,
    SelectOrdinal,
    SimpleFormat,
    Style,
    Symbol,
    TextElement,
    Value,
    is_complex,
)
from .normalize import is_whitespace, remove_nested_whitespace
from .parser import MessageParser

__all__ = [
    "VALUE",
    "ArgumentReference",
    "BranchKey",
    "Branches",
    "ComplexNode",
    "MessageNode",
    "MessageParser",
    "NamedArgument",
    "ParseResult",
    "Plural",
    "PositionalArgument",
    "Select",
    "SelectOrdinal",
    "SimpleFormat",
    "Style",
    "Symbol",
    "TextElement",
    "Value",
    "is_complex",
    "is_whitespace",
    "remove_nested_whitespace",
]
