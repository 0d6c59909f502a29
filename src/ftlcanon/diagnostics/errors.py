"""ftlcanon exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class FTLError(Exception):
    """Base exception for all ftlcanon errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FTLError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnrecognizedNodeError(FTLError, TypeError):
    """A node of an unknown or misplaced type was found in the tree.

    Indicates a programming error in the producer of the tree, not a
    data-quality issue. Text already rendered is not rolled back, but
    serialize() returns no partial result: the error propagates to the
    caller.
    """


class MalformedNodeError(FTLError, ValueError):
    """A dict-shaped node is missing a field or carries a wrong-typed one."""


class SerializationValidationError(FTLError, ValueError):
    """Raised when AST validation fails during serialization.

    This error indicates the AST structure would produce invalid FTL syntax.
    Common causes:
    - SelectExpression without exactly one default variant
    - Entity traits with more than one default member
    """
