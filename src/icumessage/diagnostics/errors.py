"""Message exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
None of these are recovered inside the interpreter: they propagate to the
top-level entry point.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "DepthLimitExceededError",
    "FormatConfigurationError",
    "MessageArgumentError",
    "MessageError",
    "MessageFormattingError",
    "MessageLookupError",
    "MessageParseError",
]


class MessageError(Exception):
    """Base exception for all message formatting errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageParseError(MessageError):
    """Parser returned an explicit failure or left input unconsumed.

    Attributes:
        remainder: Unparsed text (empty if the parser failed outright)
    """

    category = ErrorCategory.PARSE

    def __init__(self, message: str | Diagnostic, *, remainder: str = "") -> None:
        super().__init__(message)
        self.remainder = remainder


class MessageArgumentError(MessageError):
    """Argument reference could not be resolved.

    Raised for an out-of-range positional index, an absent named key, or a
    reference kind that does not match the argument bag shape.
    """

    category = ErrorCategory.ARGUMENT


class MessageLookupError(MessageError):
    """Select/plural branch set has neither a matching key nor "other"."""

    category = ErrorCategory.LOOKUP


class FormatConfigurationError(MessageError):
    """Formatting configuration is invalid for this call.

    Examples:
    - Named format symbol unknown to the backend
    - (type, style) combination with no formatter
    - `value` placeholder evaluated outside a plural
    """

    category = ErrorCategory.CONFIGURATION


class DepthLimitExceededError(FormatConfigurationError):
    """Select/plural nesting is deeper than the interpreter supports.

    Raised by the whitespace normalizer and the interpreter before the
    Python stack is exhausted.
    """


class MessageFormattingError(MessageError):
    """Locale-aware formatter rejected a value.

    Attributes:
        locale_code: Locale in effect when formatting failed
    """

    category = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code
