"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


def _node_name(node: object) -> str:
    """Name used to report a node: its class for objects, its tag for dicts."""
    if isinstance(node, dict):
        tag = node.get("type")
        return f"dict(type={tag!r})"
    return type(node).__name__


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://github.com/l20n/l20n.js"

    @staticmethod
    def unrecognized_entry(entry: object) -> Diagnostic:
        """Entry node of an unknown type in a resource or section body.

        Args:
            entry: The offending object

        Returns:
            Diagnostic for UNRECOGNIZED_ENTRY
        """
        name = _node_name(entry)
        msg = f"Unrecognized entry node: {name}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_ENTRY,
            message=msg,
            hint="Entries must be Entity, Comment, Section or JunkEntry nodes",
            node_type=name,
        )

    @staticmethod
    def unrecognized_element(element: object) -> Diagnostic:
        """Pattern element of an unknown type.

        Args:
            element: The offending object

        Returns:
            Diagnostic for UNRECOGNIZED_ELEMENT
        """
        name = _node_name(element)
        msg = f"Unrecognized pattern element: {name}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_ELEMENT,
            message=msg,
            hint="Pattern elements must be TextElement or Placeable nodes",
            node_type=name,
        )

    @staticmethod
    def unrecognized_pattern(pattern: object) -> Diagnostic:
        """Entity or member value that is neither Pattern nor QuotedPattern.

        Args:
            pattern: The offending object

        Returns:
            Diagnostic for UNRECOGNIZED_PATTERN
        """
        name = _node_name(pattern)
        msg = f"Unrecognized pattern value: {name}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_PATTERN,
            message=msg,
            hint="Entity and member values must be Pattern or QuotedPattern nodes",
            node_type=name,
        )

    @staticmethod
    def unrecognized_expression(expression: object) -> Diagnostic:
        """Expression node of an unknown type.

        Args:
            expression: The offending object

        Returns:
            Diagnostic for UNRECOGNIZED_EXPRESSION
        """
        name = _node_name(expression)
        msg = f"Unrecognized expression node: {name}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_EXPRESSION,
            message=msg,
            hint=(
                "Expressions must be Identifier, BuiltinReference, EntityReference, "
                "ExternalArgument, SelectExpression, CallExpression, Pattern, "
                "Number, Keyword or MemberExpression nodes"
            ),
            node_type=name,
        )

    @staticmethod
    def unrecognized_tag(tag: object, path: tuple[str, ...]) -> Diagnostic:
        """Dict-shaped node with an unknown ``type`` tag.

        Args:
            tag: The value found in the ``type`` field
            path: Field path from the root to the node

        Returns:
            Diagnostic for UNRECOGNIZED_TAG
        """
        msg = f"Unrecognized node tag: {tag!r}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_TAG,
            message=msg,
            hint="Check that the tree was produced by a compatible parser",
            node_type=str(tag),
            node_path=path,
        )

    @staticmethod
    def malformed_node(tag: str, reason: str, path: tuple[str, ...]) -> Diagnostic:
        """Dict-shaped node that cannot be converted.

        Args:
            tag: Node tag (or a description of the non-mapping value)
            reason: What is wrong with the node
            path: Field path from the root to the node

        Returns:
            Diagnostic for MALFORMED_NODE
        """
        msg = f"Malformed {tag} node: {reason}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_NODE,
            message=msg,
            hint="Every node must be a mapping carrying its type tag and required fields",
            node_type=tag,
            node_path=path,
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Tree nesting deeper than the configured limit.

        Args:
            max_depth: The limit that was hit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting of sections, placeables or select expressions",
        )

    @staticmethod
    def select_no_default(context: str) -> Diagnostic:
        """Select expression without a default variant.

        Args:
            context: Description of the enclosing entity

        Returns:
            Diagnostic for VALIDATION_SELECT_NO_DEFAULT
        """
        msg = f"SelectExpression in {context} has no default variant (requires exactly one *[key])"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_SELECT_NO_DEFAULT,
            message=msg,
            hint="Mark one variant as default",
            help_url=ErrorTemplate._DOCS_BASE,
        )

    @staticmethod
    def multiple_defaults(kind: str, context: str, count: int) -> Diagnostic:
        """Member list with more than one default member.

        Args:
            kind: "SelectExpression" or "Traits"
            context: Description of the enclosing entity
            count: Number of default members found

        Returns:
            Diagnostic for VALIDATION_MULTIPLE_DEFAULTS
        """
        msg = f"{kind} in {context} has {count} default members (allows at most one)"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_MULTIPLE_DEFAULTS,
            message=msg,
            hint="Keep the * marker on a single member",
            help_url=ErrorTemplate._DOCS_BASE,
        )
