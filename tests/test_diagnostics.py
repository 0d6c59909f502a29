"""Tests for the diagnostics package: errors, templates, formatter."""

from __future__ import annotations

import json

import pytest

from ftlcanon.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    FTLError,
    MalformedNodeError,
    OutputFormat,
    SerializationValidationError,
    UnrecognizedNodeError,
)
from ftlcanon.syntax.ast import Identifier

# ============================================================================
# ERRORS
# ============================================================================


class TestErrorHierarchy:
    """Exception classes and their payload."""

    def test_plain_message(self) -> None:
        """String messages carry no diagnostic."""
        error = FTLError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """Diagnostic messages are formatted Rust-style."""
        diagnostic = ErrorTemplate.unrecognized_entry(Identifier(name="x"))
        error = UnrecognizedNodeError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error).startswith(
            "error[UNRECOGNIZED_ENTRY]: Unrecognized entry node: Identifier"
        )

    @pytest.mark.parametrize(
        ("error_class", "builtin"),
        [
            (UnrecognizedNodeError, TypeError),
            (MalformedNodeError, ValueError),
            (SerializationValidationError, ValueError),
        ],
    )
    def test_builtin_bases(self, error_class: type[FTLError], builtin: type[Exception]) -> None:
        """Library errors are catchable as FTLError and their builtin base."""
        assert issubclass(error_class, FTLError)
        assert issubclass(error_class, builtin)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Templates fill code, message and hint."""

    def test_dict_node_named_by_tag(self) -> None:
        """Mappings are reported by their type tag."""
        diagnostic = ErrorTemplate.unrecognized_expression({"type": "Foo"})

        assert diagnostic.code is DiagnosticCode.UNRECOGNIZED_EXPRESSION
        assert diagnostic.node_type == "dict(type='Foo')"

    def test_unrecognized_tag_path(self) -> None:
        """Tag errors carry the node path."""
        diagnostic = ErrorTemplate.unrecognized_tag("Foo", ("body", "2"))

        assert diagnostic.message == "Unrecognized node tag: 'Foo'"
        assert diagnostic.node_path == ("body", "2")

    def test_validation_templates_link_docs(self) -> None:
        """Validation diagnostics carry a help URL."""
        diagnostic = ErrorTemplate.multiple_defaults("Traits", "entity 'a' traits", 3)

        assert diagnostic.code is DiagnosticCode.VALIDATION_MULTIPLE_DEFAULTS
        assert diagnostic.help_url is not None
        assert "3 default members" in diagnostic.message

    def test_str_is_message(self) -> None:
        """str(Diagnostic) is the bare message."""
        diagnostic = ErrorTemplate.max_depth_exceeded(7)

        assert str(diagnostic) == "Maximum nesting depth (7) exceeded"


# ============================================================================
# FORMATTER
# ============================================================================


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust_format(self) -> None:
        """Rust format lists path, node, help and note lines."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.MALFORMED_NODE,
            message="Malformed Entity node: missing required field 'id'",
            hint="Add the field",
            help_url="https://example.org/docs",
            node_type="Entity",
            node_path=("body", "0"),
        )

        assert DiagnosticFormatter().format(diagnostic) == (
            "error[MALFORMED_NODE]: Malformed Entity node: missing required field 'id'\n"
            "  --> body.0\n"
            "  = node: Entity\n"
            "  = help: Add the field\n"
            "  = note: see https://example.org/docs"
        )

    def test_simple_format(self) -> None:
        """Simple format is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        result = formatter.format(ErrorTemplate.max_depth_exceeded(100))

        assert result == "MAX_DEPTH_EXCEEDED: Maximum nesting depth (100) exceeded"

    def test_json_format(self) -> None:
        """JSON format exposes code name and value."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(ErrorTemplate.unrecognized_tag("X", ("body",))))

        assert data["code"] == "UNRECOGNIZED_TAG"
        assert data["code_value"] == DiagnosticCode.UNRECOGNIZED_TAG.value
        assert data["node_path"] == ["body"]
        assert data["severity"] == "error"

    def test_sanitize_truncates(self) -> None:
        """Long messages are truncated when sanitizing."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.MALFORMED_NODE, message="x" * 50)

        assert formatter.format(diagnostic) == "MALFORMED_NODE: " + "x" * 10 + "..."

    def test_color_and_warning(self) -> None:
        """Warnings are colored yellow."""
        formatter = DiagnosticFormatter(color=True)
        diagnostic = Diagnostic(
            code=DiagnosticCode.MALFORMED_NODE, message="m", severity="warning"
        )

        assert formatter.format(diagnostic).startswith("\033[1;33mwarning\033[0m[MALFORMED_NODE]")

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.max_depth_exceeded(1), ErrorTemplate.max_depth_exceeded(2)]

        assert formatter.format_all(diagnostics).count("\n\n") == 1
