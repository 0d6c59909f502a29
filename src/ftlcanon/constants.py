"""Shared constants for ftlcanon.

Centralized configuration constants used by the serializer, the dict
loader and the depth guard. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for serialization/loading
- Layout: Fixed indentation and prefix strings of the FTL output

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Layout
    "MEMBER_INDENT",
    "COMMENT_PREFIX",
    "TEXT_CONTINUATION",
    "ARGUMENT_SEPARATOR",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: serializer (entries, sections, expressions), dict loader.
# Each nested section, placeable, select expression or call argument
# consumes one level. 100 levels is far beyond any hand-written resource.
MAX_DEPTH: int = 100

# ============================================================================
# LAYOUT
# ============================================================================

# Indent width for entity traits and select-expression variants.
# Default members replace the last indent space with "*":
#   "  [key] value"   (regular)
#   " *[key] value"   (default)
MEMBER_INDENT: int = 2

# Marker prepended to every line of a comment.
COMMENT_PREFIX: str = "# "

# Multi-line text blocks start on a new line and every physical line
# becomes an indented "|" continuation line.
TEXT_CONTINUATION: str = "\n  | "

# Separator between placeable expressions and between call arguments.
ARGUMENT_SEPARATOR: str = ", "
