"""FTL syntax package.

Provides AST definitions, canonical serialization and dict/JSON loading.
Separate from any parser so that tooling (formatters, migration scripts,
editors) can build or rewrite trees and re-emit source.

Python 3.13+.
"""

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
from .loader import from_dict, load_json, to_dict
from .serializer import (
    FTLSerializer,
    SerializationDepthError,
    SerializationValidationError,
    serialize,
)

__all__ = [
    "ASTNode",
    "AnyPattern",
    "BuiltinReference",
    "CallArgument",
    "CallExpression",
    "Comment",
    "Entity",
    "EntityReference",
    "Entry",
    "Expression",
    "ExternalArgument",
    "FTLSerializer",
    "Identifier",
    "JunkEntry",
    "KeyValueArg",
    "Keyword",
    "Member",
    "MemberExpression",
    "Number",
    "Pattern",
    "PatternElement",
    "Placeable",
    "QuotedPattern",
    "Resource",
    "Section",
    "SelectExpression",
    "SerializationDepthError",
    "SerializationValidationError",
    "TextElement",
    "from_dict",
    "load_json",
    "serialize",
    "to_dict",
]
