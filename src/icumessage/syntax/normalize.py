"""Whitespace normalization pass over a parsed message.

Authors indent nested plural/select blocks for readability:

    {count, plural,
        one {{gender, select, female {She has one} other {They have one}}}
        other {...}}

The newline and indentation between "one {" and the nested select are
formatting artifacts, not content. This pass drops a branch's leading
whitespace-only TextElement when it is immediately followed by a nested
select, plural or selectordinal. Text with any other content is kept.

The pass is pure: it returns new nodes and never mutates its input.
Running it twice yields the same tree as running it once.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import replace

from icumessage.constants import MAX_DEPTH, WHITESPACE_CHARS
from icumessage.depth_guard import DepthGuard

from .ast import ComplexNode, MessageNode, TextElement, is_complex

__all__ = ["is_whitespace", "remove_nested_whitespace"]


def is_whitespace(text: str) -> bool:
    """Check whether text consists only of spaces, newlines and tabs.

    The empty string counts as whitespace.

    Examples:
        >>> is_whitespace("\\n    ")
        True
        >>> is_whitespace("")
        True
        >>> is_whitespace(" x ")
        False
        >>> is_whitespace("\\r\\n")
        False
    """
    return all(char in WHITESPACE_CHARS for char in text)


def remove_nested_whitespace(
    nodes: Iterable[MessageNode], *, max_depth: int = MAX_DEPTH
) -> tuple[MessageNode, ...]:
    """Normalize a node sequence at every nesting depth.

    Args:
        nodes: Top-level (or branch) node sequence
        max_depth: Deepest select/plural nesting accepted

    Returns:
        New node sequence with leading whitespace removed from branches
        that open with a nested select/plural/selectordinal.

    Raises:
        DepthLimitExceededError: Nesting deeper than max_depth
    """
    return _normalize_sequence(nodes, DepthGuard(max_depth=max_depth))


def _normalize_sequence(nodes: Iterable[MessageNode], guard: DepthGuard) -> tuple[MessageNode, ...]:
    return tuple(_normalize_node(node, guard) for node in nodes)


def _normalize_node(node: MessageNode, guard: DepthGuard) -> MessageNode:
    if not is_complex(node):
        return node
    with guard:
        return _normalize_complex(node, guard)


def _normalize_complex(node: ComplexNode, guard: DepthGuard) -> ComplexNode:
    branches = {key: _normalize_branch(nodes, guard) for key, nodes in node.branches.items()}
    return replace(node, branches=branches)


def _normalize_branch(
    nodes: tuple[MessageNode, ...], guard: DepthGuard
) -> tuple[MessageNode, ...]:
    match nodes:
        case (TextElement(value=text), nested, *_) if is_complex(nested) and is_whitespace(text):
            nodes = nodes[1:]
    return _normalize_sequence(nodes, guard)