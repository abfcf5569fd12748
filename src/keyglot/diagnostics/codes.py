"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for resolution misses.
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
        1000-1999: Reference errors (missing bundles, messages, sub-tree keys)
        2000-2999: Interpolation errors (placeholders left unsubstituted)
        3000-3999: Catalog loading errors
    """

    # Reference errors (1000-1999)
    MESSAGE_NOT_FOUND = 1001
    MESSAGE_NOT_LEAF = 1002
    BUNDLE_NOT_FOUND = 1003

    # Interpolation errors (2000-2999)
    PLACEHOLDER_NOT_PROVIDED = 2001

    # Catalog loading errors (3000-3999)
    CATALOG_NOT_OBJECT = 3001
    CATALOG_TOO_LARGE = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        key: Message key being resolved (None for loading errors)
        locale: Locale active when the error occurred
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    key: str | None = None
    locale: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MESSAGE_NOT_FOUND]: Message 'ui.salvar' not found
              = key: ui.salvar
              = locale: pt-BR
              = help: Check that the key exists in the locale bundle

        Control characters in key and locale are escaped so that
        user-controlled keys cannot forge extra log lines.

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.key is not None:
            lines.append(f"  = key: {_escape(self.key)}")
        if self.locale is not None:
            lines.append(f"  = locale: {_escape(self.locale)}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n")
