"""Message runtime package.

Argument resolution, value formatting, branch selection and the
interpreter, plus the Babel formatting backend.

Python 3.13+.
"""

from .arguments import Arguments, resolve_argument
from .backend import BabelBackend, MessageBackend, get_shared_backend
from .formatting import format_to_string, format_value
from .interpreter import MessageInterpreter, interpret
from .options import MessageOptions
from .plural_rules import select_plural_category
from .selection import (
    choose_plural_branch,
    choose_select_branch,
    plural_branch,
    select_branch,
    to_maybe_integer,
)
from .value_types import MessageValue, Money, Unit

__all__ = [
    "Arguments",
    "BabelBackend",
    "MessageBackend",
    "MessageInterpreter",
    "MessageOptions",
    "MessageValue",
    "Money",
    "Unit",
    "choose_plural_branch",
    "choose_select_branch",
    "format_to_string",
    "format_value",
    "get_shared_backend",
    "interpret",
    "plural_branch",
    "resolve_argument",
    "select_branch",
    "select_plural_category",
    "to_maybe_integer",
]
