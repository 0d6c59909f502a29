"""Enumerations for ftlcanon type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a node tag compares equal to
the plain tag string emitted by upstream parsers.

Python 3.13+.
"""

from enum import StrEnum


class NodeType(StrEnum):
    """Type tag of an FTL AST node.

    Values match the ``type`` field of the JSON-shaped trees produced by
    the parser: str(NodeType.ENTITY) == "Entity"
    """

    RESOURCE = "Resource"

    # Entries
    ENTITY = "Entity"
    COMMENT = "Comment"
    SECTION = "Section"
    JUNK_ENTRY = "JunkEntry"

    # Patterns
    PATTERN = "Pattern"
    TEXT_ELEMENT = "TextElement"
    PLACEABLE = "Placeable"

    # Expressions
    IDENTIFIER = "Identifier"
    BUILTIN_REFERENCE = "BuiltinReference"
    ENTITY_REFERENCE = "EntityReference"
    EXTERNAL_ARGUMENT = "ExternalArgument"
    SELECT_EXPRESSION = "SelectExpression"
    CALL_EXPRESSION = "CallExpression"
    NUMBER = "Number"
    KEYWORD = "Keyword"
    MEMBER_EXPRESSION = "MemberExpression"
    KEY_VALUE_ARG = "KeyValueArg"

    # Variants and traits
    MEMBER = "Member"


__all__ = [
    "NodeType",
]
