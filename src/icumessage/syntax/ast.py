"""ICU message AST (Abstract Syntax Tree) node definitions.

The tagged-node representation produced by a message parser and consumed by
the interpreter. Every node is an immutable, slotted dataclass; branch
mappings are wrapped in read-only MappingProxyType views at construction.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeIs

from icumessage.enums import FormatType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Text
    "TextElement",
    # Argument references
    "PositionalArgument",
    "NamedArgument",
    "Value",
    "VALUE",
    # Formats
    "Symbol",
    "SimpleFormat",
    # Branching
    "Select",
    "Plural",
    "SelectOrdinal",
    "is_complex",
    # Parser collaborator output
    "ParseResult",
    # Type aliases
    "ArgumentReference",
    "BranchKey",
    "Branches",
    "ComplexNode",
    "MessageNode",
    "Style",
]

# ============================================================================
# TEXT
# ============================================================================


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text, passed through to the output unchanged."""

    value: str


# ============================================================================
# ARGUMENT REFERENCES
# ============================================================================


@dataclass(frozen=True, slots=True)
class PositionalArgument:
    """Reference to a positional argument: {0}"""

    index: int

    def __post_init__(self) -> None:
        """Validate index is a non-negative integer."""
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 0:
            msg = f"Positional argument index must be a non-negative int, got {self.index!r}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class NamedArgument:
    """Reference to a named argument: {name}"""

    name: str


@dataclass(frozen=True, slots=True)
class Value:
    """Bare `value` placeholder inside a plural or selectordinal branch.

    Renders the enclosing plural's argument, already offset and formatted
    as a number. Use the module-level VALUE singleton.
    """


VALUE = Value()

type ArgumentReference = PositionalArgument | NamedArgument | Value

# ============================================================================
# FORMATS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Symbol:
    """Symbolic style name, as opposed to a literal pattern string.

    Known names select a built-in style (short, percent, long, or, ...).
    Unknown names are named formats resolved by the backend.

    Example:
        {amount, number, percent}  -> SimpleFormat(..., style=Symbol("percent"))
        {amount, number, #,##0.0}  -> SimpleFormat(..., style="#,##0.0")
    """

    name: str

    def __str__(self) -> str:
        return self.name


# A literal pattern string, a symbolic style, or no style at all.
type Style = str | Symbol | None


@dataclass(frozen=True, slots=True)
class SimpleFormat:
    """Argument formatted by type: {arg, type} or {arg, type, style}"""

    argument: ArgumentReference
    format_type: FormatType
    style: Style = None

    @staticmethod
    def guard(node: object) -> TypeIs["SimpleFormat"]:
        """Type guard for SimpleFormat."""
        return isinstance(node, SimpleFormat)


# ============================================================================
# BRANCHING
# ============================================================================

# Exact keys are ints (or their decimal strings); category and select keys are str.
type BranchKey = str | int


def _freeze_branches(
    branches: Mapping[BranchKey, Sequence["MessageNode"]],
) -> MappingProxyType[BranchKey, tuple["MessageNode", ...]]:
    return MappingProxyType({key: tuple(nodes) for key, nodes in branches.items()})


@dataclass(frozen=True, slots=True)
class Select:
    """Select on an opaque discriminator: {gender, select, female {...} other {...}}

    The "other" branch is required but only checked when no key matches.
    """

    argument: ArgumentReference
    branches: Mapping[BranchKey, tuple["MessageNode", ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "branches", _freeze_branches(self.branches))


@dataclass(frozen=True, slots=True)
class Plural:
    """Cardinal plural: {count, plural, offset:1 =0 {...} one {...} other {...}}

    Attributes:
        argument: Numeric argument reference
        offset: Subtracted from the argument before category selection
        branches: Exact numeric keys and plural category keys
    """

    argument: ArgumentReference
    branches: Mapping[BranchKey, tuple["MessageNode", ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "branches", _freeze_branches(self.branches))


@dataclass(frozen=True, slots=True)
class SelectOrdinal:
    """Ordinal plural: {place, selectordinal, one {#st} two {#nd} other {#th}}

    Same shape as Plural with the offset fixed at 0.
    """

    argument: ArgumentReference
    branches: Mapping[BranchKey, tuple["MessageNode", ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "branches", _freeze_branches(self.branches))

    @property
    def offset(self) -> int:
        """Ordinals never apply an offset."""
        return 0


type ComplexNode = Select | Plural | SelectOrdinal

type MessageNode = (
    TextElement
    | PositionalArgument
    | NamedArgument
    | Value
    | SimpleFormat
    | Select
    | Plural
    | SelectOrdinal
)

type Branches = Mapping[BranchKey, tuple[MessageNode, ...]]


def is_complex(node: object) -> TypeIs[ComplexNode]:
    """Type guard for the branching node kinds."""
    return isinstance(node, (Select, Plural, SelectOrdinal))


# ============================================================================
# PARSER COLLABORATOR OUTPUT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Output of a message parser.

    Attributes:
        nodes: Parsed node sequence
        remainder: Unconsumed input; non-empty means the parse is incomplete
    """

    nodes: tuple[MessageNode, ...]
    remainder: str = ""
