"""Convert between AST nodes and their JSON-shaped dict form.

Parsers emit trees as nested mappings tagged with a ``type`` field:

    {"type": "Entity", "id": {"type": "Identifier", "name": "hello"},
     "value": {"type": "Pattern", "elements": [...]}, "traits": [], "comment": null}

from_dict() builds the frozen node classes from that form, to_dict() goes
back. A quoted pattern is a ``Pattern`` mapping flagged with ``quoted``
(``_quoteDelim`` is accepted as well) that carries ``source`` instead of
``elements``.

Python 3.13+.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import MISSING, Field, fields
from typing import Any

from ftlcanon.constants import MAX_DEPTH
from ftlcanon.core.depth_guard import DepthGuard
from ftlcanon.diagnostics import ErrorTemplate, MalformedNodeError, UnrecognizedNodeError
from ftlcanon.enums import NodeType

from .ast import (
    ASTNode,
    BuiltinReference,
    CallExpression,
    Comment,
    Entity,
    EntityReference,
    ExternalArgument,
    Identifier,
    JunkEntry,
    Keyword,
    KeyValueArg,
    Member,
    MemberExpression,
    Number,
    Pattern,
    Placeable,
    QuotedPattern,
    Resource,
    Section,
    SelectExpression,
    TextElement,
)

__all__ = ["from_dict", "load_json", "to_dict"]

logger = logging.getLogger(__name__)

# Field kinds
_NODE = "node"
_OPTIONAL_NODE = "optional_node"
_NODES = "nodes"
_STR = "str"
_OPTIONAL_STR = "optional_str"
_BOOL = "bool"

_OPTIONAL_KINDS = frozenset({_OPTIONAL_NODE, _OPTIONAL_STR})

# Node classes accepted per slot
_ENTRIES: tuple[type, ...] = (Entity, Comment, Section, JunkEntry)
_PATTERNS: tuple[type, ...] = (Pattern, QuotedPattern)
_ELEMENTS: tuple[type, ...] = (TextElement, Placeable)
_EXPRESSIONS: tuple[type, ...] = (
    Identifier,
    BuiltinReference,
    EntityReference,
    ExternalArgument,
    SelectExpression,
    CallExpression,
    Pattern,
    QuotedPattern,
    Number,
    Keyword,
    MemberExpression,
)
_CALL_ARGUMENTS: tuple[type, ...] = (*_EXPRESSIONS, KeyValueArg)
_MEMBERS: tuple[type, ...] = (Member,)

# Slots the serializer renders as expressions; each node there costs a depth level
_EXPRESSION_SLOTS = (_EXPRESSIONS, _CALL_ARGUMENTS)

# (kind, accepted node classes); scalar kinds accept no nodes
type _FieldSpec = tuple[str, tuple[type, ...]]

_SCALAR: tuple[type, ...] = ()

# Node class and field specs per tag. QuotedPattern shares the Pattern tag
# and is selected by the quote flag.
_SCHEMAS: dict[NodeType, tuple[type, dict[str, _FieldSpec]]] = {
    NodeType.RESOURCE: (
        Resource,
        {"body": (_NODES, _ENTRIES), "comment": (_OPTIONAL_NODE, (Comment,))},
    ),
    NodeType.ENTITY: (
        Entity,
        {
            "id": (_NODE, (Identifier,)),
            "value": (_OPTIONAL_NODE, _PATTERNS),
            "traits": (_NODES, _MEMBERS),
            "comment": (_OPTIONAL_NODE, (Comment,)),
        },
    ),
    NodeType.COMMENT: (Comment, {"content": (_STR, _SCALAR)}),
    NodeType.SECTION: (
        Section,
        {
            "key": (_NODE, (Keyword,)),
            "body": (_NODES, _ENTRIES),
            "comment": (_OPTIONAL_NODE, (Comment,)),
        },
    ),
    NodeType.JUNK_ENTRY: (JunkEntry, {"content": (_STR, _SCALAR)}),
    NodeType.PATTERN: (Pattern, {"elements": (_NODES, _ELEMENTS)}),
    NodeType.TEXT_ELEMENT: (TextElement, {"value": (_STR, _SCALAR)}),
    NodeType.PLACEABLE: (Placeable, {"expressions": (_NODES, _EXPRESSIONS)}),
    NodeType.IDENTIFIER: (Identifier, {"name": (_STR, _SCALAR)}),
    NodeType.BUILTIN_REFERENCE: (BuiltinReference, {"name": (_STR, _SCALAR)}),
    NodeType.ENTITY_REFERENCE: (EntityReference, {"name": (_STR, _SCALAR)}),
    NodeType.EXTERNAL_ARGUMENT: (ExternalArgument, {"name": (_STR, _SCALAR)}),
    NodeType.KEYWORD: (
        Keyword,
        {"name": (_STR, _SCALAR), "namespace": (_OPTIONAL_STR, _SCALAR)},
    ),
    NodeType.SELECT_EXPRESSION: (
        SelectExpression,
        {"expression": (_NODE, _EXPRESSIONS), "variants": (_NODES, _MEMBERS)},
    ),
    NodeType.CALL_EXPRESSION: (
        CallExpression,
        {"callee": (_NODE, _EXPRESSIONS), "args": (_NODES, _CALL_ARGUMENTS)},
    ),
    NodeType.KEY_VALUE_ARG: (
        KeyValueArg,
        {"name": (_STR, _SCALAR), "value": (_NODE, _EXPRESSIONS)},
    ),
    NodeType.NUMBER: (Number, {"value": (_STR, _SCALAR)}),
    NodeType.MEMBER_EXPRESSION: (
        MemberExpression,
        {"object": (_NODE, _EXPRESSIONS), "keyword": (_NODE, _EXPRESSIONS)},
    ),
    NodeType.MEMBER: (
        Member,
        {
            "key": (_NODE, _EXPRESSIONS),
            "value": (_OPTIONAL_NODE, _PATTERNS),
            "default": (_BOOL, _SCALAR),
        },
    ),
}

_QUOTED_PATTERN_SCHEMA: tuple[type, dict[str, _FieldSpec]] = (
    QuotedPattern,
    {"source": (_STR, _SCALAR)},
)

# Field specs by node class, for export
_CLASS_SCHEMAS: dict[type, dict[str, _FieldSpec]] = {
    node_class: schema for node_class, schema in (*_SCHEMAS.values(), _QUOTED_PATTERN_SCHEMA)
}

_QUOTE_FLAGS = ("quoted", "_quoteDelim")

# Class-level cache of dataclass fields per node type
_fields_cache: dict[type, dict[str, Field[Any]]] = {}


def _node_fields(node_type: type) -> dict[str, Field[Any]]:
    """Get cached dataclass fields for a node type, keyed by name."""
    if node_type not in _fields_cache:
        _fields_cache[node_type] = {f.name: f for f in fields(node_type)}
    return _fields_cache[node_type]


def _has_default(field: Field[Any]) -> bool:
    return field.default is not MISSING or field.default_factory is not MISSING


def _describe(value: object) -> str:
    return type(value).__name__


def _counts_depth(node_class: type, accepted: tuple[type, ...] | None) -> bool:
    """Whether a node in this slot costs a depth level.

    Mirrors the serializer: sections and nodes rendered as expressions
    count, so a tree the serializer accepts loads and exports at the same
    limit. Patterns count only where they stand as expressions.
    """
    if node_class is Section:
        return True
    if accepted is None:
        return node_class in _EXPRESSIONS
    return accepted in _EXPRESSION_SLOTS and node_class is not KeyValueArg


def _convert_field(
    value: object,
    spec: _FieldSpec,
    tag: str,
    name: str,
    path: tuple[str, ...],
    guard: DepthGuard,
) -> object:
    """Convert one present, non-null field value according to its spec."""
    kind, accepted = spec
    field_path = (*path, name)
    if kind in (_NODE, _OPTIONAL_NODE):
        return _from_dict(value, field_path, guard, accepted)

    if kind == _NODES:
        if not isinstance(value, (list, tuple)):
            reason = f"field '{name}' must be a list, got {_describe(value)}"
            raise MalformedNodeError(ErrorTemplate.malformed_node(tag, reason, path))
        return tuple(
            [
                _from_dict(item, (*field_path, str(i)), guard, accepted)
                for i, item in enumerate(value)
            ]
        )

    expected = bool if kind == _BOOL else str
    if not isinstance(value, expected):
        reason = f"field '{name}' must be a {expected.__name__}, got {_describe(value)}"
        raise MalformedNodeError(ErrorTemplate.malformed_node(tag, reason, path))
    return value


def _build_node(
    data: Mapping[str, Any],
    tag: NodeType,
    node_class: type,
    schema: dict[str, _FieldSpec],
    path: tuple[str, ...],
    guard: DepthGuard,
) -> ASTNode:
    kwargs: dict[str, object] = {}
    for name, field in _node_fields(node_class).items():
        spec = schema[name]
        value = data.get(name)
        if value is None:
            if spec[0] in _OPTIONAL_KINDS:
                kwargs[name] = None
            elif not _has_default(field):
                reason = f"missing required field '{name}'"
                raise MalformedNodeError(ErrorTemplate.malformed_node(tag, reason, path))
            continue
        kwargs[name] = _convert_field(value, spec, tag, name, path, guard)

    node: ASTNode = node_class(**kwargs)
    return node


def _from_dict(
    data: object,
    path: tuple[str, ...],
    guard: DepthGuard,
    accepted: tuple[type, ...] | None = None,
) -> ASTNode:
    if not isinstance(data, Mapping):
        reason = f"expected a mapping, got {_describe(data)}"
        raise MalformedNodeError(ErrorTemplate.malformed_node("AST", reason, path))

    raw_tag = data.get("type")
    try:
        tag = NodeType(raw_tag)
    except ValueError:
        raise UnrecognizedNodeError(ErrorTemplate.unrecognized_tag(raw_tag, path)) from None

    if tag is NodeType.PATTERN and any(data.get(flag) for flag in _QUOTE_FLAGS):
        node_class, schema = _QUOTED_PATTERN_SCHEMA
    else:
        node_class, schema = _SCHEMAS[tag]

    if accepted is not None and node_class not in accepted:
        names = " or ".join(cls.__name__ for cls in accepted)
        reason = f"expected {names} here, got {node_class.__name__}"
        raise MalformedNodeError(ErrorTemplate.malformed_node(tag, reason, path))

    if _counts_depth(node_class, accepted):
        with guard:
            return _build_node(data, tag, node_class, schema, path, guard)
    return _build_node(data, tag, node_class, schema, path, guard)


def from_dict(data: Mapping[str, Any], *, max_depth: int | None = None) -> ASTNode:
    """Build an AST node from its JSON-shaped dict form.

    Args:
        data: Mapping with a ``type`` tag and the node's fields
        max_depth: Maximum section and expression nesting (default: MAX_DEPTH)

    Returns:
        The AST node (any node type, not only Resource)

    Raises:
        UnrecognizedNodeError: If a ``type`` tag is unknown
        MalformedNodeError: If a node is not a mapping, misses a required
            field, or carries a wrong-typed field or a node of the wrong kind
        DepthLimitExceededError: If nesting exceeds max_depth

    Example:
        >>> from_dict({"type": "ExternalArgument", "name": "userName"})
        ExternalArgument(name='userName')
    """
    guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)
    return _from_dict(data, (), guard)


def _export(value: object, accepted: tuple[type, ...], guard: DepthGuard) -> object:
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, tuple):
        return [_to_dict(item, accepted, guard) for item in value]
    return _to_dict(value, accepted, guard)


def _node_to_dict(node: Any, schema: dict[str, _FieldSpec], guard: DepthGuard) -> dict[str, Any]:
    data: dict[str, Any] = {"type": str(node.type)}
    if isinstance(node, QuotedPattern):
        data["quoted"] = True
    for name in _node_fields(type(node)):
        data[name] = _export(getattr(node, name), schema[name][1], guard)
    return data


def _to_dict(node: Any, accepted: tuple[type, ...] | None, guard: DepthGuard) -> dict[str, Any]:
    schema = _CLASS_SCHEMAS.get(type(node))
    if schema is None or not isinstance(getattr(node, "type", None), NodeType):
        raise UnrecognizedNodeError(ErrorTemplate.unrecognized_tag(_describe(node), ()))
    if _counts_depth(type(node), accepted):
        with guard:
            return _node_to_dict(node, schema, guard)
    return _node_to_dict(node, schema, guard)


def to_dict(node: ASTNode, *, max_depth: int | None = None) -> dict[str, Any]:
    """Convert an AST node to its JSON-shaped dict form.

    Args:
        node: Any AST node
        max_depth: Maximum section and expression nesting (default: MAX_DEPTH)

    Returns:
        Nested dicts and lists of plain JSON values

    Raises:
        UnrecognizedNodeError: If an object without a node tag is reached
        DepthLimitExceededError: If nesting exceeds max_depth
    """
    guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)
    return _to_dict(node, None, guard)


def load_json(source: str | bytes, *, max_depth: int | None = None) -> Resource:
    """Load a Resource from a JSON document.

    Args:
        source: JSON text of a ``Resource`` tree
        max_depth: Maximum section and expression nesting (default: MAX_DEPTH)

    Returns:
        Resource AST

    Raises:
        json.JSONDecodeError: If source is not valid JSON
        UnrecognizedNodeError: If a ``type`` tag is unknown
        MalformedNodeError: If the root is not a Resource or a node is malformed
    """
    data = json.loads(source)
    node = from_dict(data, max_depth=max_depth)
    if not isinstance(node, Resource):
        reason = f"root node must be a Resource, got {_describe(node)}"
        raise MalformedNodeError(ErrorTemplate.malformed_node("Resource", reason, ()))
    logger.debug("Loaded resource from JSON: %d entries", len(node.body))
    return node
