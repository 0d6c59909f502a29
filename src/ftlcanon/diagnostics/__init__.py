"""Diagnostic system for ftlcanon errors.

Provides structured error diagnostics with codes, node paths, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FTLError,
    MalformedNodeError,
    SerializationValidationError,
    UnrecognizedNodeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FTLError",
    "MalformedNodeError",
    "OutputFormat",
    "SerializationValidationError",
    "UnrecognizedNodeError",
]
