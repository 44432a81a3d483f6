"""Branch selection for select, plural and selectordinal nodes.

Select:
    1. Exact key match on the (maybe-integer) argument
    2. "other"

Plural / SelectOrdinal:
    1. Exact key match on the argument BEFORE the offset is applied
    2. CLDR plural category of (argument - offset), cardinal or ordinal
    3. "other"

No match and no "other" raises MessageLookupError. The "other" branch is
validated lazily: a branch set without it works as long as some other key
matches.

Python 3.13+.
"""

from collections.abc import Hashable, Iterator
from dataclasses import replace
from decimal import Decimal

from icumessage.constants import OTHER, PLURAL_CATEGORIES
from icumessage.diagnostics import ErrorTemplate, MessageArgumentError, MessageLookupError
from icumessage.enums import PluralType
from icumessage.syntax import Branches, MessageNode, Plural, Select, SelectOrdinal

from .options import MessageOptions
from .value_types import MessageValue

__all__ = [
    "choose_plural_branch",
    "choose_select_branch",
    "plural_branch",
    "select_branch",
    "to_maybe_integer",
]


def to_maybe_integer(value: MessageValue) -> MessageValue:
    """Coerce a selector value to a comparison key.

    Integers pass through, floats truncate toward zero, Decimals convert to
    their integer part. Any other value (strings, booleans, ...) passes
    through unchanged and is compared directly against branch keys.

    Raises:
        MessageArgumentError: For NaN or infinite floats/Decimals

    Examples:
        >>> to_maybe_integer(2.9)
        2
        >>> to_maybe_integer(-2.9)
        -2
        >>> to_maybe_integer(Decimal("7.50"))
        7
        >>> to_maybe_integer("female")
        'female'
    """
    match value:
        case bool() | int():
            return value
        case float() | Decimal():
            try:
                return int(value)
            except (ValueError, OverflowError):
                raise MessageArgumentError(ErrorTemplate.non_finite_number(value)) from None
        case _:
            return value


def _exact_keys(key: MessageValue) -> Iterator[Hashable]:
    """Branch keys that count as an exact match for key."""
    match key:
        # bool before int: True must not match the integer key 1
        case bool():
            yield "true" if key else "false"
        case int():
            yield key
            yield str(key)
        case Hashable():
            yield key


def _lookup_exact(branches: Branches, key: MessageValue) -> tuple[MessageNode, ...] | None:
    for candidate in _exact_keys(key):
        if candidate in branches:
            return branches[candidate]
    return None


def _other(branches: Branches, key: MessageValue) -> tuple[MessageNode, ...]:
    if OTHER not in branches:
        raise MessageLookupError(ErrorTemplate.no_matching_branch(key))
    return branches[OTHER]


def choose_select_branch(branches: Branches, key: MessageValue) -> tuple[MessageNode, ...]:
    """Exact key, else "other"."""
    found = _lookup_exact(branches, key)
    if found is not None:
        return found
    return _other(branches, key)


def choose_plural_branch(
    branches: Branches, exact: int, category: str
) -> tuple[MessageNode, ...]:
    """Exact numeric key, else plural category, else "other".

    Exact keys always take precedence over categories, regardless of
    branch order. A category outside the CLDR set (from a misbehaving
    backend) never matches, so it cannot select a non-category key.
    """
    found = _lookup_exact(branches, exact)
    if found is not None:
        return found
    if category in PLURAL_CATEGORIES and category in branches:
        return branches[category]
    return _other(branches, exact)


def select_branch(node: Select, value: MessageValue) -> tuple[MessageNode, ...]:
    """Choose the branch of a select node for a resolved argument."""
    return choose_select_branch(node.branches, to_maybe_integer(value))


def plural_branch(
    node: Plural | SelectOrdinal,
    value: MessageValue,
    options: MessageOptions,
) -> tuple[tuple[MessageNode, ...], MessageOptions]:
    """Choose the branch of a plural or selectordinal node.

    Args:
        node: Plural or SelectOrdinal node
        value: Resolved argument
        options: Ambient options

    Returns:
        Tuple of (branch nodes, options for the branch). The branch options
        carry the plural type and the offset argument formatted as a number,
        which is what a nested `value` placeholder renders.

    Raises:
        MessageArgumentError: The argument is not a number
        MessageLookupError: No key, category or "other" branch matches
    """
    number = to_maybe_integer(value)
    if isinstance(number, bool) or not isinstance(number, int):
        raise MessageArgumentError(ErrorTemplate.plural_argument_not_numeric(value))

    plural_type = PluralType.ORDINAL if isinstance(node, SelectOrdinal) else PluralType.CARDINAL
    offset_number = number - node.offset
    backend = options.backend

    formatted = backend.format_number(offset_number, options)
    branch_options = replace(options, plural_type=plural_type, arg=formatted)
    category = backend.plural_category(offset_number, plural_type, branch_options)

    return choose_plural_branch(node.branches, number, category), branch_options
