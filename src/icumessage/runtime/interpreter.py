"""ICU message interpreter - converts AST to formatted text fragments.

Walks the node tree, resolving arguments, choosing select/plural branches
and delegating value formatting to the backend. Output is a flat list of
text fragments; callers join it for the final string. Nesting deeper
than MAX_DEPTH raises DepthLimitExceededError.

Python 3.13+. Indirect dependency: Babel (via the default backend).

Thread Safety:
    An interpreter holds the read-only argument bag and its own nesting
    counter; use one instance per thread. interpret() builds a fresh one per
    call. Options are immutable and passed explicitly, so calls against the
    same AST never share mutable state.
"""

from collections.abc import Sequence

from icumessage.constants import MAX_DEPTH
from icumessage.depth_guard import DepthGuard
from icumessage.diagnostics import ErrorTemplate, FormatConfigurationError
from icumessage.syntax import (
    ComplexNode,
    MessageNode,
    NamedArgument,
    Plural,
    PositionalArgument,
    Select,
    SelectOrdinal,
    SimpleFormat,
    TextElement,
    Value,
    is_complex,
)

from .arguments import Arguments, resolve_argument
from .formatting import format_to_string, format_value
from .options import MessageOptions
from .selection import plural_branch, select_branch
from .value_types import MessageValue

__all__ = ["MessageInterpreter", "interpret"]


class MessageInterpreter:
    """Interprets message nodes against one argument bag.

    Examples:
        >>> from icumessage.enums import FormatType
        >>> nodes = (
        ...     TextElement("You have "),
        ...     SimpleFormat(NamedArgument("count"), FormatType.NUMBER),
        ...     TextElement(" items."),
        ... )
        >>> MessageInterpreter({"count": 5}).interpret(nodes, MessageOptions(locale="en"))
        ['You have ', '5', ' items.']
    """

    __slots__ = ("_depth_guard", "args")

    def __init__(self, args: Arguments, *, max_depth: int = MAX_DEPTH) -> None:
        """Initialize interpreter.

        Args:
            args: Argument list (positional references) or mapping (named references)
            max_depth: Deepest select/plural nesting accepted
        """
        self.args = args
        self._depth_guard = DepthGuard(max_depth=max_depth)

    def interpret(
        self, message: MessageNode | Sequence[MessageNode], options: MessageOptions
    ) -> list[str]:
        """Interpret a node or node sequence into text fragments.

        Args:
            message: Single node or node sequence (already normalized)
            options: Ambient options

        Returns:
            Text fragments in output order

        Raises:
            MessageError: Any argument, lookup, configuration or formatting error
        """
        if isinstance(message, Sequence):
            return self._interpret_sequence(message, options)
        return self._interpret_sequence((message,), options)

    def _interpret_sequence(
        self, nodes: Sequence[MessageNode], options: MessageOptions
    ) -> list[str]:
        """Interpret nodes in order, splicing branch output in place."""
        fragments: list[str] = []
        for node in nodes:
            if is_complex(node):
                fragments.extend(self._interpret_complex(node, options))
            else:
                fragments.append(format_to_string(self._evaluate(node, options), options))
        return fragments

    def _evaluate(self, node: MessageNode, options: MessageOptions) -> MessageValue:
        """Evaluate a node to a value.

        Argument references yield the raw argument so that an enclosing
        simple format receives the value itself, not its text.
        """
        match node:
            case TextElement(value=text):
                return text
            case PositionalArgument() | NamedArgument():
                return resolve_argument(node, self.args)
            case Value():
                if options.arg is None:
                    raise FormatConfigurationError(ErrorTemplate.value_outside_plural())
                return options.arg
            case SimpleFormat(argument=Value(), format_type=format_type):
                raise FormatConfigurationError(ErrorTemplate.value_not_formattable(format_type))
            case SimpleFormat(argument=argument, format_type=format_type, style=style):
                value = self._evaluate(argument, options)
                return format_value(value, format_type, style, options)
            case Select() | Plural() | SelectOrdinal():
                return "".join(self._interpret_complex(node, options))
            case _:
                raise FormatConfigurationError(ErrorTemplate.unknown_node(type(node).__name__))

    def _interpret_complex(self, node: ComplexNode, options: MessageOptions) -> list[str]:
        """Choose a branch and interpret it one nesting level down."""
        with self._depth_guard:
            value = self._evaluate(node.argument, options)
            if isinstance(node, Select):
                return self._interpret_sequence(select_branch(node, value), options)
            branch, branch_options = plural_branch(node, value, options)
            return self._interpret_sequence(branch, branch_options)


def interpret(
    message: MessageNode | Sequence[MessageNode],
    args: Arguments,
    options: MessageOptions,
) -> list[str]:
    """Interpret a node or node sequence with a fresh interpreter.

    Does not normalize whitespace; the public entry points do that once
    before calling here.
    """
    return MessageInterpreter(args).interpret(message, options)
