"""Diagnostic system for keyglot errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogFormatError,
    MessageError,
    MessageReferenceError,
    PlaceholderError,
)
from .templates import ErrorTemplate

__all__ = [
    "CatalogFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "MessageError",
    "MessageReferenceError",
    "PlaceholderError",
]
