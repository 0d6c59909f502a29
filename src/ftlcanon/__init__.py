"""ftlcanon - canonical serializer for FTL localization resources.

Rebuilds FTL source text (comments, sections, entities, patterns,
placeables, select expressions) from a parsed AST. The inverse of a
parser: tooling that edits a tree re-emits valid, stable source.

Public API:
    serialize_ftl - Serialize a Resource AST to FTL source
    load_json - Load a Resource AST from the parser's JSON form

Exceptions:
    FTLError - Base exception class
    UnrecognizedNodeError - Node of an unknown type in the tree
    MalformedNodeError - Dict-shaped node missing or mistyping a field
    SerializationDepthError - Tree nested deeper than max_depth
    SerializationValidationError - Opt-in validation failure

Submodules:
    ftlcanon.syntax.ast - AST node types (Resource, Entity, Section, Pattern, etc.)
    ftlcanon.syntax.serializer - FTLSerializer and fragment rendering
    ftlcanon.syntax.loader - Dict/JSON conversion
    ftlcanon.diagnostics - Error types and diagnostic formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    FTLError,
    MalformedNodeError,
    SerializationValidationError,
    UnrecognizedNodeError,
)
from .syntax import load_json
from .syntax import serialize as serialize_ftl
from .syntax.serializer import SerializationDepthError

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("ftlcanon")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FTLError",
    "MalformedNodeError",
    "SerializationDepthError",
    "SerializationValidationError",
    "UnrecognizedNodeError",
    "__version__",
    "load_json",
    "serialize_ftl",
]
