"""icumessage - ICU message format interpreter with CLDR formatting.

Renders parsed ICU message trees into text: resolves arguments, selects
select/plural/selectordinal branches with CLDR plural rules, and delegates
locale-sensitive formatting of numbers, dates, money, lists and units to a
backend (Babel by default).

Public API:
    to_string / to_string_or_raise - Render a message to a string
    format_message / format_message_or_raise - Render to text fragments
    MessageOptions - Immutable per-call configuration
    BabelBackend - Default CLDR formatting backend
    Money, Unit - Argument value types

Exceptions:
    MessageError - Base exception class
    MessageParseError - Parser failure or unconsumed input
    MessageArgumentError - Missing argument or bag shape mismatch
    MessageLookupError - No branch matched and no "other" branch
    FormatConfigurationError - Unknown named format, unsupported style
    DepthLimitExceededError - Select/plural nesting past MAX_DEPTH
    MessageFormattingError - Formatter rejected a value

Submodules:
    icumessage.syntax - AST node types and whitespace normalization
    icumessage.runtime - Interpreter, branch selection, formatting bridge
    icumessage.diagnostics - Error types, codes and templates
"""

from .diagnostics import (
    DepthLimitExceededError,
    FormatConfigurationError,
    MessageArgumentError,
    MessageError,
    MessageFormattingError,
    MessageLookupError,
    MessageParseError,
)
from .message import format_message, format_message_or_raise, to_string, to_string_or_raise
from .runtime import BabelBackend, MessageBackend, MessageOptions, Money, Unit

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("icumessage")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelBackend",
    "DepthLimitExceededError",
    "FormatConfigurationError",
    "MessageArgumentError",
    "MessageBackend",
    "MessageError",
    "MessageFormattingError",
    "MessageLookupError",
    "MessageOptions",
    "MessageParseError",
    "Money",
    "Unit",
    "__version__",
    "format_message",
    "format_message_or_raise",
    "to_string",
    "to_string_or_raise",
]
