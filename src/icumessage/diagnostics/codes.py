"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
MessageError.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization matching the message error taxonomy.

    Categories:
        PARSE: Parser returned a remainder or an explicit failure
        ARGUMENT: Missing argument or argument-bag shape mismatch
        LOOKUP: No branch matched and no "other" fallback exists
        CONFIGURATION: Named format unresolved, unsupported style, misplaced value
        FORMATTING: Locale-aware formatter rejected the value
    """

    PARSE = "parse"
    ARGUMENT = "argument"
    LOOKUP = "lookup"
    CONFIGURATION = "configuration"
    FORMATTING = "formatting"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse errors
        2000-2999: Argument errors
        3000-3999: Branch lookup errors
        4000-4999: Format configuration errors
        5000-5999: Formatting errors
    """

    # Parse errors (1000-1999)
    PARSE_REMAINDER = 1001
    PARSE_FAILED = 1002

    # Argument errors (2000-2999)
    POSITIONAL_ARGUMENT_OUT_OF_RANGE = 2001
    NAMED_ARGUMENT_NOT_PROVIDED = 2002
    ARGUMENT_BAG_MISMATCH = 2003
    PLURAL_ARGUMENT_NOT_NUMERIC = 2004
    NON_FINITE_NUMBER = 2005

    # Lookup errors (3000-3999)
    NO_MATCHING_BRANCH = 3001

    # Configuration errors (4000-4999)
    NAMED_FORMAT_NOT_FOUND = 4001
    UNSUPPORTED_STYLE = 4002
    VALUE_OUTSIDE_PLURAL = 4003
    PARSER_NOT_CONFIGURED = 4004
    UNSUPPORTED_FORMAT = 4005
    UNKNOWN_NODE = 4006
    DEPTH_LIMIT_EXCEEDED = 4007
    VALUE_NOT_FORMATTABLE = 4008

    # Formatting errors (5000-5999)
    FORMATTING_FAILED = 5001
    CURRENCY_REQUIRED = 5002
    UNIT_REQUIRED = 5003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[NO_MATCHING_BRANCH]: No branch matches 'x' and no 'other' branch exists
              = help: Add an 'other' branch to the select or plural
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
