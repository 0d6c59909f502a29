"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Node shape errors (unrecognized or malformed AST nodes)
        2000-2999: Traversal errors (depth limits)
        5000-5099: Validation errors (opt-in structural checks)
    """

    # Node shape errors (1000-1999)
    UNRECOGNIZED_ENTRY = 1001
    UNRECOGNIZED_ELEMENT = 1002
    UNRECOGNIZED_EXPRESSION = 1003
    UNRECOGNIZED_TAG = 1004
    MALFORMED_NODE = 1005
    UNRECOGNIZED_PATTERN = 1006

    # Traversal errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001

    # Validation errors (5000-5099)
    VALIDATION_SELECT_NO_DEFAULT = 5001
    VALIDATION_MULTIPLE_DEFAULTS = 5002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (formatters, editors, migration scripts).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        node_type: Python or tag name of the offending node
        node_path: Field path from the root to the offending node
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    node_type: str | None = None
    node_path: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNRECOGNIZED_ENTRY]: Unrecognized entry node: Attribute
              = node: Attribute
              = help: Entries must be Entity, Comment, Section or JunkEntry nodes

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
