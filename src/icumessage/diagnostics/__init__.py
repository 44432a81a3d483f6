"""Diagnostic system for message formatting errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    DepthLimitExceededError,
    FormatConfigurationError,
    MessageArgumentError,
    MessageError,
    MessageFormattingError,
    MessageLookupError,
    MessageParseError,
)
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatConfigurationError",
    "MessageArgumentError",
    "MessageError",
    "MessageFormattingError",
    "MessageLookupError",
    "MessageParseError",
]
