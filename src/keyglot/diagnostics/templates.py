"""Error message templates for consistent diagnostics.

Centralizes wording so that resolver, interpolation, and loading report
the same condition the same way.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Factory for Diagnostic objects, one static method per condition."""

    @staticmethod
    def message_not_found(key: str, locale: str) -> Diagnostic:
        """Key path does not reach any node in the bundle.

        Args:
            key: The dotted key that was not found
            locale: Locale whose bundle was searched

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=f"Message '{key}' not found",
            key=key,
            locale=locale,
            hint="Check that the key exists in the locale bundle",
        )

    @staticmethod
    def message_not_leaf(key: str, locale: str) -> Diagnostic:
        """Key path ends on a sub-tree instead of a string message.

        Args:
            key: The dotted key naming a sub-tree
            locale: Locale whose bundle was searched

        Returns:
            Diagnostic for MESSAGE_NOT_LEAF
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_LEAF,
            message=f"Key '{key}' names a group of messages, not a message",
            key=key,
            locale=locale,
            hint="Append the remaining segments to reach a string message",
        )

    @staticmethod
    def bundle_not_found(key: str, locale: str) -> Diagnostic:
        """Active locale has no bundle in the catalog.

        Args:
            key: The dotted key being resolved
            locale: Active locale without a bundle

        Returns:
            Diagnostic for BUNDLE_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_NOT_FOUND,
            message=f"No messages loaded for locale '{locale}'",
            key=key,
            locale=locale,
            hint="Load a catalog for this locale or call set_locale() with a loaded one",
        )

    @staticmethod
    def placeholder_not_provided(name: str, key: str, locale: str) -> Diagnostic:
        """Placeholder has no (or a None) value in the supplied values.

        Args:
            name: Trimmed placeholder name
            key: The dotted key being resolved
            locale: Active locale

        Returns:
            Diagnostic for PLACEHOLDER_NOT_PROVIDED
        """
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_NOT_PROVIDED,
            message=f"No value provided for placeholder '{name}'",
            key=key,
            locale=locale,
            hint=f"Pass a value for '{name}' when resolving this key",
            severity="warning",
        )

    @staticmethod
    def catalog_not_object(locale: str, source_path: str) -> Diagnostic:
        """Catalog document does not decode to a JSON object.

        Args:
            locale: Locale being loaded
            source_path: Human-readable path of the catalog file

        Returns:
            Diagnostic for CATALOG_NOT_OBJECT
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_NOT_OBJECT,
            message=f"Catalog '{source_path}' must contain a JSON object at the top level",
            locale=locale,
        )

    @staticmethod
    def catalog_too_large(locale: str, source_path: str, size: int, limit: int) -> Diagnostic:
        """Catalog file exceeds the configured size limit.

        Args:
            locale: Locale being loaded
            source_path: Human-readable path of the catalog file
            size: File size in bytes
            limit: Maximum accepted size in bytes

        Returns:
            Diagnostic for CATALOG_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_TOO_LARGE,
            message=f"Catalog '{source_path}' is {size} bytes (limit: {limit})",
            locale=locale,
        )
