"""Hypothesis strategies for ftlcanon property-based testing.

Usage:
    from tests.strategies import ftl_resources, ftl_entity_nodes
"""

from .ftl import (
    FTL_IDENTIFIER_FIRST_CHARS,
    FTL_IDENTIFIER_REST_CHARS,
    FTL_SAFE_CHARS,
    UNICODE_CHARS,
    ftl_comment_nodes,
    ftl_entity_nodes,
    ftl_expressions,
    ftl_flat_entries,
    ftl_identifiers,
    ftl_junk_nodes,
    ftl_keyword_nodes,
    ftl_leaf_expressions,
    ftl_members,
    ftl_multiline_text,
    ftl_number_nodes,
    ftl_patterns,
    ftl_placeables,
    ftl_quoted_patterns,
    ftl_resources,
    ftl_section_nodes,
    ftl_simple_patterns,
    ftl_single_line_text,
)

__all__ = [
    "FTL_IDENTIFIER_FIRST_CHARS",
    "FTL_IDENTIFIER_REST_CHARS",
    "FTL_SAFE_CHARS",
    "UNICODE_CHARS",
    "ftl_comment_nodes",
    "ftl_entity_nodes",
    "ftl_expressions",
    "ftl_flat_entries",
    "ftl_identifiers",
    "ftl_junk_nodes",
    "ftl_keyword_nodes",
    "ftl_leaf_expressions",
    "ftl_members",
    "ftl_multiline_text",
    "ftl_number_nodes",
    "ftl_patterns",
    "ftl_placeables",
    "ftl_quoted_patterns",
    "ftl_resources",
    "ftl_section_nodes",
    "ftl_simple_patterns",
    "ftl_single_line_text",
]
