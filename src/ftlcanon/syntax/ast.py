"""FTL AST (Abstract Syntax Tree) node definitions.

Frozen node classes for the FTL resource dialect with sections, entity
traits and quoted patterns. Every node class carries a class-level ``type``
tag (``NodeType``) matching the ``type`` field of the parser's JSON form.
Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeIs

from ftlcanon.enums import NodeType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource structure
    "Resource",
    "Entity",
    "Comment",
    "Section",
    "JunkEntry",
    # Patterns
    "Pattern",
    "QuotedPattern",
    "TextElement",
    "Placeable",
    # Names
    "Identifier",
    "BuiltinReference",
    "EntityReference",
    "ExternalArgument",
    "Keyword",
    # Expressions
    "SelectExpression",
    "CallExpression",
    "KeyValueArg",
    "Number",
    "MemberExpression",
    "Member",
    # Type aliases
    "Entry",
    "AnyPattern",
    "PatternElement",
    "Expression",
    "CallArgument",
    "ASTNode",
]

# ============================================================================
# NAMES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Identifier: entity ids and bare names inside expressions."""

    type: ClassVar[NodeType] = NodeType.IDENTIFIER

    name: str


@dataclass(frozen=True, slots=True)
class BuiltinReference:
    """Reference to a builtin function, e.g. the callee in PLURAL($n)."""

    type: ClassVar[NodeType] = NodeType.BUILTIN_REFERENCE

    name: str


@dataclass(frozen=True, slots=True)
class EntityReference:
    """Reference to another entity: { brand-name }"""

    type: ClassVar[NodeType] = NodeType.ENTITY_REFERENCE

    name: str


@dataclass(frozen=True, slots=True)
class ExternalArgument:
    """Developer-provided argument: $userName"""

    type: ClassVar[NodeType] = NodeType.EXTERNAL_ARGUMENT

    name: str


@dataclass(frozen=True, slots=True)
class Keyword:
    """Keyword, optionally namespaced: long, app/menu

    Used as section keys, member keys and bare keyword expressions.
    """

    type: ClassVar[NodeType] = NodeType.KEYWORD

    name: str
    namespace: str | None = None


# ============================================================================
# ENTRIES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Resource:
    """Root AST node containing all entries."""

    type: ClassVar[NodeType] = NodeType.RESOURCE

    body: tuple["Entry", ...]
    comment: "Comment | None" = None


@dataclass(frozen=True, slots=True)
class Entity:
    """Entity definition.

    Examples:
        greeting = Hello
        brand-name = Firefox
          [gender] masculine
    """

    type: ClassVar[NodeType] = NodeType.ENTITY

    id: Identifier
    value: "AnyPattern | None"
    traits: tuple["Member", ...] = ()
    comment: "Comment | None" = None

    @staticmethod
    def guard(entry: object) -> TypeIs["Entity"]:
        """Type guard for Entity (used in entry filtering)."""
        return isinstance(entry, Entity)


@dataclass(frozen=True, slots=True)
class Comment:
    """Comment, possibly spanning several lines.

    Attached to a Resource, Entity or Section, or standing alone in a body.
    """

    type: ClassVar[NodeType] = NodeType.COMMENT

    content: str


@dataclass(frozen=True, slots=True)
class Section:
    """Section grouping nested entries under a keyword header.

    Example:
        [[ app/menu ]]

        open = Open
    """

    type: ClassVar[NodeType] = NodeType.SECTION

    key: Keyword
    body: tuple["Entry", ...] = ()
    comment: Comment | None = None

    @staticmethod
    def guard(entry: object) -> TypeIs["Section"]:
        """Type guard for Section (used in entry filtering)."""
        return isinstance(entry, Section)


@dataclass(frozen=True, slots=True)
class JunkEntry:
    """Source the parser could not structure into an entry.

    The content is kept for tooling but is never serialized.
    """

    type: ClassVar[NodeType] = NodeType.JUNK_ENTRY

    content: str = ""


# ============================================================================
# PATTERNS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Pattern:
    """Text pattern with optional placeables."""

    type: ClassVar[NodeType] = NodeType.PATTERN

    elements: tuple["PatternElement", ...]


@dataclass(frozen=True, slots=True)
class QuotedPattern:
    """Raw quoted literal: "  leading spaces kept"

    The source is opaque: it is emitted between double quotes verbatim,
    with no escaping and no element processing.
    """

    type: ClassVar[NodeType] = NodeType.PATTERN

    source: str


@dataclass(frozen=True, slots=True)
class TextElement:
    """Plain text segment."""

    type: ClassVar[NodeType] = NodeType.TEXT_ELEMENT

    value: str


@dataclass(frozen=True, slots=True)
class Placeable:
    """Dynamic content: { expression, expression }"""

    type: ClassVar[NodeType] = NodeType.PLACEABLE

    expressions: tuple["Expression", ...]


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class SelectExpression:
    """Conditional expression with variants.

    Example:
        { PLURAL($num) ->
          [one] One item
         *[other] { $num } items
        }
    """

    type: ClassVar[NodeType] = NodeType.SELECT_EXPRESSION

    expression: "Expression"
    variants: tuple["Member", ...]


@dataclass(frozen=True, slots=True)
class CallExpression:
    """Function call: DATETIME($date, month: long)"""

    type: ClassVar[NodeType] = NodeType.CALL_EXPRESSION

    callee: "Expression"
    args: tuple["CallArgument", ...] = ()


@dataclass(frozen=True, slots=True)
class KeyValueArg:
    """Named argument: name: value"""

    type: ClassVar[NodeType] = NodeType.KEY_VALUE_ARG

    name: str
    value: "Expression"


@dataclass(frozen=True, slots=True)
class Number:
    """Number literal: 42 or 3.14

    The value is the numeral as written in source and is printed verbatim.
    """

    type: ClassVar[NodeType] = NodeType.NUMBER

    value: str


@dataclass(frozen=True, slots=True)
class MemberExpression:
    """Member access: brand-name[gender]"""

    type: ClassVar[NodeType] = NodeType.MEMBER_EXPRESSION

    object: "Expression"
    keyword: "Expression"


@dataclass(frozen=True, slots=True)
class Member:
    """Select-expression variant or entity trait.

    Example:
        *[other] { $num } items
    """

    type: ClassVar[NodeType] = NodeType.MEMBER

    key: "Expression"
    value: "AnyPattern | None"
    default: bool = False


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Entry = Entity | Comment | Section | JunkEntry
type AnyPattern = Pattern | QuotedPattern
type PatternElement = TextElement | Placeable
type Expression = (
    Identifier
    | BuiltinReference
    | EntityReference
    | ExternalArgument
    | SelectExpression
    | CallExpression
    | Pattern
    | QuotedPattern
    | Number
    | Keyword
    | MemberExpression
)
type CallArgument = Expression | KeyValueArg

# Complete ASTNode type - union of all AST node types
type ASTNode = (
    Resource
    | Entity
    | Comment
    | Section
    | JunkEntry
    | Pattern
    | QuotedPattern
    | TextElement
    | Placeable
    | Identifier
    | BuiltinReference
    | EntityReference
    | ExternalArgument
    | Keyword
    | SelectExpression
    | CallExpression
    | KeyValueArg
    | Number
    | MemberExpression
    | Member
)
