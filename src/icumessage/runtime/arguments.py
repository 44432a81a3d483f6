"""Argument resolution from the caller-supplied argument bag.

A positional reference ({0}) requires a sequence bag; a named reference
({name}) requires a mapping bag. Using the wrong bag shape is a caller
contract violation and raises MessageArgumentError, as do an out-of-range
index and an absent key.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence

from icumessage.diagnostics import ErrorTemplate, MessageArgumentError
from icumessage.syntax import NamedArgument, PositionalArgument

from .value_types import MessageValue

__all__ = ["Arguments", "resolve_argument"]

type Arguments = Sequence[MessageValue] | Mapping[str, MessageValue]


def _is_sequence_bag(args: object) -> bool:
    # str/bytes are sequences, but never an argument list
    return isinstance(args, Sequence) and not isinstance(args, (str, bytes, bytearray))


def resolve_argument(
    ref: PositionalArgument | NamedArgument, args: Arguments
) -> MessageValue:
    """Look up the value an argument reference points to.

    Args:
        ref: Positional or named argument reference
        args: Argument list or mapping

    Returns:
        The raw argument value (not stringified)

    Raises:
        MessageArgumentError: Index out of range, key absent, or bag shape mismatch

    Examples:
        >>> resolve_argument(PositionalArgument(1), ["a", "b"])
        'b'
        >>> resolve_argument(NamedArgument("count"), {"count": 5})
        5
    """
    match ref:
        case PositionalArgument(index=index):
            if not _is_sequence_bag(args):
                raise MessageArgumentError(
                    ErrorTemplate.argument_bag_mismatch(
                        "positional", "sequence", type(args).__name__
                    )
                )
            if index >= len(args):
                raise MessageArgumentError(ErrorTemplate.positional_out_of_range(index, len(args)))
            return args[index]
        case NamedArgument(name=name):
            if not isinstance(args, Mapping):
                raise MessageArgumentError(
                    ErrorTemplate.argument_bag_mismatch("named", "mapping", type(args).__name__)
                )
            if name not in args:
                raise MessageArgumentError(ErrorTemplate.named_not_provided(name))
            return args[name]
