"""keyglot exception hierarchy with structured diagnostics.

Resolution never raises these; they are collected and returned as values
by MessageResolver.resolve_with_errors(). Catalog loading stores them in
load results.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageError(Exception):
    """Base exception for all keyglot errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.args == other.args
            and self.diagnostic == other.diagnostic
        )

    def __hash__(self) -> int:
        return hash((type(self), self.args, self.diagnostic))


class MessageReferenceError(MessageError):
    """Key could not be resolved to a string message.

    Covers a missing bundle for the active locale, a missing path, and a
    path that ends on a sub-tree.
    Fallback: the key itself is displayed.
    """


class PlaceholderError(MessageError):
    """Placeholder left unsubstituted.

    Raised (collected) when values were supplied but the placeholder name
    is absent or mapped to None.
    Fallback: the original {{name}} text stays in the output.
    """


class CatalogFormatError(MessageError):
    """Catalog file decoded but does not hold a message tree.

    Recorded in CatalogLoadResult.error; never propagated by load_catalog().
    """
