"""Serialize FTL AST back to FTL syntax.

Converts AST nodes to FTL source code in canonical form. Useful for:
- Formatters
- Migration scripts that rewrite a tree and re-emit it
- Editors that modify single entities

Output layout is fixed: traits and variants are indented two spaces
(one space plus ``*`` for the default member), multi-line text becomes
``|`` continuation lines, comments are prefixed line by line with ``#``.
Junk entries are dropped.

Python 3.13+.
"""

import logging
from collections.abc import Iterable

from ftlcanon.constants import (
    ARGUMENT_SEPARATOR,
    COMMENT_PREFIX,
    MAX_DEPTH,
    MEMBER_INDENT,
    TEXT_CONTINUATION,
)
from ftlcanon.core.depth_guard import DepthGuard, DepthLimitExceededError
from ftlcanon.diagnostics import (
    ErrorTemplate,
    SerializationValidationError,
    UnrecognizedNodeError,
)

from .ast import (
    AnyPattern,
    ASTNode,
    BuiltinReference,
    CallArgument,
    CallExpression,
    Comment,
    Entity,
    EntityReference,
    Entry,
    Expression,
    ExternalArgument,
    Identifier,
    JunkEntry,
    Keyword,
    KeyValueArg,
    Member,
    MemberExpression,
    Number,
    Pattern,
    PatternElement,
    Placeable,
    QuotedPattern,
    Resource,
    Section,
    SelectExpression,
    TextElement,
)

__all__ = [
    "FTLSerializer",
    "SerializationDepthError",
    "SerializationValidationError",
    "serialize",
]

logger = logging.getLogger(__name__)


class SerializationDepthError(DepthLimitExceededError):
    """Raised when the AST nests deeper than the serializer's max_depth.

    Sections, expressions and select variants each consume one level.
    """


# ============================================================================
# VALIDATION
# ============================================================================


def _validate_members(
    members: Iterable[Member],
    kind: str,
    context: str,
    guard: DepthGuard,
    *,
    require_default: bool,
    member_label: str | None = None,
) -> None:
    """Validate default marking of a member list and the members' patterns.

    Args:
        members: Variants of a select expression or traits of an entity
        kind: Label for error messages ("SelectExpression" or "Traits")
        context: Description of location for error message
        guard: Depth guard of the current validation pass
        require_default: True for select expressions
        member_label: If set, errors inside a member name it as
            ``<context> <member_label> [key]``

    Raises:
        SerializationValidationError: If validation fails
    """
    members = tuple(members)
    default_count = sum(1 for m in members if m.default)

    if require_default and default_count == 0:
        raise SerializationValidationError(ErrorTemplate.select_no_default(context))

    if default_count > 1:
        raise SerializationValidationError(
            ErrorTemplate.multiple_defaults(kind, context, default_count)
        )

    for member in members:
        member_context = context
        if member_label is not None:
            key = FTLSerializer(max_depth=guard.max_depth).dump(member.key)
            member_context = f"{context} {member_label} [{key}]"
        _validate_expression(member.key, member_context, guard)
        _validate_pattern(member.value, member_context, guard)


def _validate_pattern(pattern: AnyPattern | None, context: str, guard: DepthGuard) -> None:
    """Validate all expressions within a Pattern."""
    if not isinstance(pattern, Pattern):
        return
    for element in pattern.elements:
        if isinstance(element, Placeable):
            for expr in element.expressions:
                _validate_expression(expr, context, guard)


def _validate_expression(expr: Expression, context: str, guard: DepthGuard) -> None:
    """Validate an Expression recursively."""
    with guard:
        match expr:
            case SelectExpression():
                _validate_expression(expr.expression, context, guard)
                _validate_members(
                    expr.variants, "SelectExpression", context, guard, require_default=True
                )
            case CallExpression():
                _validate_expression(expr.callee, context, guard)
                for arg in expr.args:
                    value = arg.value if isinstance(arg, KeyValueArg) else arg
                    _validate_expression(value, context, guard)
            case MemberExpression():
                _validate_expression(expr.object, context, guard)
                _validate_expression(expr.keyword, context, guard)
            case Pattern():
                _validate_pattern(expr, context, guard)
            case _:
                pass  # Names, numbers and keywords don't need validation


def _validate_entries(body: Iterable[Entry], guard: DepthGuard) -> None:
    """Validate entities in a body, descending into sections."""
    for entry in body:
        if Entity.guard(entry):
            context = f"entity '{entry.id.name}'"
            _validate_pattern(entry.value, context, guard)
            _validate_members(
                entry.traits,
                "Traits",
                context,
                guard,
                require_default=False,
                member_label="trait",
            )
        elif Section.guard(entry):
            with guard:
                _validate_entries(entry.body, guard)


def _validate_resource(resource: Resource, guard: DepthGuard) -> None:
    """Validate a Resource AST for serialization.

    Checks every SelectExpression has exactly one default variant and no
    entity has more than one default trait.

    Args:
        resource: Resource AST to validate
        guard: Depth guard of the current serialization call

    Raises:
        SerializationValidationError: If validation fails
    """
    _validate_entries(resource.body, guard)


# ============================================================================
# SERIALIZER
# ============================================================================


class FTLSerializer:
    """Converts AST back to FTL source string.

    Thread-safe serializer: the only instance state is the immutable
    depth limit. Every call builds its own DepthGuard, so all traversal
    state is local to that call.

    Usage:
        >>> serializer = FTLSerializer()
        >>> entity = Entity(
        ...     id=Identifier(name="hello"),
        ...     value=Pattern(elements=(TextElement(value="Hello, world!"),)),
        ... )
        >>> serializer.serialize(Resource(body=(entity,)))
        'hello = Hello, world!\\n'
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize serializer.

        Args:
            max_depth: Maximum nesting depth (default: MAX_DEPTH from constants).
        """
        self._max_depth = max_depth if max_depth is not None else MAX_DEPTH

    @property
    def max_depth(self) -> int:
        """Configured maximum nesting depth."""
        return self._max_depth

    def _new_guard(self) -> DepthGuard:
        return DepthGuard(max_depth=self._max_depth, error_class=SerializationDepthError)

    def serialize(self, resource: Resource, *, validate: bool = False) -> str:
        """Serialize Resource to FTL string.

        Pure function - builds output locally without mutating instance state.

        Args:
            resource: Resource AST node
            validate: If True, validate AST before serialization (default: False).
                     Checks default marking of select variants and traits.

        Returns:
            FTL source code

        Raises:
            UnrecognizedNodeError: If a node of an unknown type is reached
            SerializationDepthError: If nesting exceeds max_depth
            SerializationValidationError: If validate=True and AST is invalid
        """
        if validate:
            _validate_resource(resource, self._new_guard())

        result = self._dump_resource(resource, self._new_guard())
        logger.debug(
            "Serialized resource: %d entries, %d chars", len(resource.body), len(result)
        )
        return result

    def dump(self, node: ASTNode) -> str:
        """Serialize a single node with its own printer.

        Unlike serialize(), entries are rendered without the trailing
        newlines the entry dispatcher appends: an Entity yields its
        ``id = value`` line (plus traits), a Comment its ``#`` lines.
        Members render as one line at the trait/variant indent.

        Args:
            node: Any AST node

        Returns:
            FTL source fragment

        Raises:
            UnrecognizedNodeError: If node (or a descendant) has an unknown type
            SerializationDepthError: If nesting exceeds max_depth
        """
        guard = self._new_guard()
        match node:
            case Resource():
                return self._dump_resource(node, guard)
            case Entity():
                return self._dump_entity(node, guard)
            case Comment():
                return self._dump_comment(node)
            case Section():
                return self._dump_section(node, guard)
            case JunkEntry():
                return ""
            case TextElement() | Placeable():
                return self._dump_element(node, guard)
            case Member():
                return self._dump_members((node,), MEMBER_INDENT, guard)
            case KeyValueArg():
                return self._dump_call_args((node,), guard)
            case _:
                return self._dump_expression(node, guard)

    def _dump_resource(self, resource: Resource, guard: DepthGuard) -> str:
        parts: list[str] = []
        if resource.comment is not None:
            parts.append(self._dump_comment(resource.comment) + "\n\n")
        parts.extend(self._dump_entry(entry, guard) for entry in resource.body)
        return "".join(parts)

    def _dump_entry(self, entry: Entry, guard: DepthGuard) -> str:
        """Serialize a body entry, appending its separator newlines."""
        match entry:
            case Entity():
                return self._dump_entity(entry, guard) + "\n"
            case Comment():
                return self._dump_comment(entry) + "\n\n"
            case Section():
                return self._dump_section(entry, guard) + "\n"
            case JunkEntry():
                logger.debug("Dropping junk entry (%d chars)", len(entry.content))
                return ""
            case _:
                raise UnrecognizedNodeError(ErrorTemplate.unrecognized_entry(entry))

    def _dump_entity(self, entity: Entity, guard: DepthGuard) -> str:
        """Serialize Entity.

        An entity without value still gets ``" = "``; traits follow on
        their own lines.
        """
        prefix = ""
        if entity.comment is not None:
            prefix = self._dump_comment(entity.comment) + "\n"

        value = self._dump_pattern(entity.value, guard)
        line = f"{entity.id.name} = {value}"

        if entity.traits:
            traits = self._dump_members(entity.traits, MEMBER_INDENT, guard)
            return f"{prefix}{line}\n{traits}"
        return f"{prefix}{line}"

    def _dump_comment(self, comment: Comment) -> str:
        return COMMENT_PREFIX + comment.content.replace("\n", "\n" + COMMENT_PREFIX)

    def _dump_section(self, section: Section, guard: DepthGuard) -> str:
        """Serialize Section header and its nested entries."""
        with guard:
            parts: list[str] = []
            if section.comment is not None:
                parts.append(self._dump_comment(section.comment) + "\n")
            parts.append(f"[[ {self._dump_keyword(section.key)} ]]\n\n")
            parts.extend(self._dump_entry(entry, guard) for entry in section.body)
            return "".join(parts)

    def _dump_keyword(self, keyword: Keyword) -> str:
        if keyword.namespace:
            return f"{keyword.namespace}/{keyword.name}"
        return keyword.name

    def _dump_pattern(self, pattern: AnyPattern | None, guard: DepthGuard) -> str:
        """Serialize Pattern elements, or a quoted literal verbatim."""
        match pattern:
            case None:
                return ""
            case QuotedPattern():
                return f'"{pattern.source}"'
            case Pattern():
                return "".join(self._dump_element(elem, guard) for elem in pattern.elements)
            case _:
                raise UnrecognizedNodeError(ErrorTemplate.unrecognized_pattern(pattern))

    def _dump_element(self, element: PatternElement, guard: DepthGuard) -> str:
        """Serialize one pattern element.

        Text with line breaks starts on a new line and every physical line
        becomes its own ``  | `` continuation line.
        """
        match element:
            case TextElement():
                if "\n" in element.value:
                    return TEXT_CONTINUATION + element.value.replace("\n", TEXT_CONTINUATION)
                return element.value
            case Placeable():
                return self._dump_placeable(element, guard)
            case _:
                raise UnrecognizedNodeError(ErrorTemplate.unrecognized_element(element))

    def _dump_placeable(self, placeable: Placeable, guard: DepthGuard) -> str:
        source = ARGUMENT_SEPARATOR.join(
            self._dump_expression(expr, guard) for expr in placeable.expressions
        )
        # Select expressions end with a newline: the closing brace goes on its own line.
        if source.endswith("\n"):
            return f"{{ {source}}}"
        return f"{{ {source} }}"

    def _dump_expression(self, expr: Expression, guard: DepthGuard) -> str:
        """Serialize Expression nodes using structural pattern matching."""
        with guard:
            match expr:
                case Identifier() | BuiltinReference() | EntityReference():
                    return expr.name

                case ExternalArgument():
                    return f"${expr.name}"

                case SelectExpression():
                    selector = self._dump_expression(expr.expression, guard)
                    variants = self._dump_members(expr.variants, MEMBER_INDENT, guard)
                    return f"{selector} ->\n{variants}\n"

                case CallExpression():
                    callee = self._dump_expression(expr.callee, guard)
                    args = self._dump_call_args(expr.args, guard)
                    return f"{callee}({args})"

                case Pattern() | QuotedPattern():
                    return self._dump_pattern(expr, guard)

                case Number():
                    return expr.value

                case Keyword():
                    return self._dump_keyword(expr)

                case MemberExpression():
                    obj = self._dump_expression(expr.object, guard)
                    key = self._dump_expression(expr.keyword, guard)
                    return f"{obj}[{key}]"

                case _:
                    raise UnrecognizedNodeError(ErrorTemplate.unrecognized_expression(expr))

    def _dump_call_args(self, args: Iterable[CallArgument], guard: DepthGuard) -> str:
        """Serialize call arguments; named ones as ``name: value``."""
        rendered: list[str] = []
        for arg in args:
            if isinstance(arg, KeyValueArg):
                rendered.append(f"{arg.name}: {self._dump_expression(arg.value, guard)}")
            else:
                rendered.append(self._dump_expression(arg, guard))
        return ARGUMENT_SEPARATOR.join(rendered)

    def _dump_members(self, members: Iterable[Member], indent: int, guard: DepthGuard) -> str:
        """Serialize members one per line, without a trailing newline.

        The default member trades its last indent space for ``*``.
        """
        lines: list[str] = []
        for member in members:
            key = self._dump_expression(member.key, guard)
            value = self._dump_pattern(member.value, guard)
            prefix = " " * (indent - 1) + "*" if member.default else " " * indent
            lines.append(f"{prefix}[{key}] {value}")
        return "\n".join(lines)


def serialize(
    resource: Resource,
    *,
    validate: bool = False,
    max_depth: int | None = None,
) -> str:
    """Serialize Resource to FTL string.

    Convenience function for FTLSerializer.serialize().

    Args:
        resource: Resource AST node
        validate: If True, validate AST before serialization (default: False).
        max_depth: Maximum nesting depth (default: MAX_DEPTH).

    Returns:
        FTL source code

    Raises:
        UnrecognizedNodeError: If a node of an unknown type is reached
        SerializationDepthError: If nesting exceeds max_depth
        SerializationValidationError: If validate=True and AST is invalid

    Example:
        >>> from ftlcanon.syntax import serialize
        >>> from ftlcanon.syntax.ast import Comment, Resource
        >>> serialize(Resource(body=(Comment(content="Menu"),)))
        '# Menu\\n\\n'
    """
    serializer = FTLSerializer(max_depth=max_depth)
    return serializer.serialize(resource, validate=validate)
