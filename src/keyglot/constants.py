"""Shared constants for keyglot.

This module provides centralized configuration constants used across
the runtime and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Baked-in locale used before any set_locale() call
- Key syntax: Separator for dotted message keys
- Placeholder syntax: Delimiters recognized by the interpolation scanner
- Depth limits: Recursion protection while building message trees
- Input limits: Size constraints for catalog files read from disk

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Key syntax
    "KEY_SEPARATOR",
    # Placeholder syntax
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    "PLACEHOLDER_LINE_BREAKS",
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Logging
    "LOG_TRUNCATE_DEBUG",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Active locale of every fresh LocaleState.
DEFAULT_LOCALE: str = "pt-BR"

# ============================================================================
# KEY SYNTAX
# ============================================================================

# "ui.salvar_apontamento" -> ("ui", "salvar_apontamento")
KEY_SEPARATOR: str = "."

# ============================================================================
# PLACEHOLDER SYNTAX
# ============================================================================

PLACEHOLDER_OPEN: str = "{{"
PLACEHOLDER_CLOSE: str = "}}"

# A placeholder body never spans a line terminator (LF, CR, LINE SEPARATOR,
# PARAGRAPH SEPARATOR); an opening "{{" followed by one before the next "}}"
# is literal text.
PLACEHOLDER_LINE_BREAKS: frozenset[str] = frozenset({"\n", "\r", "\u2028", "\u2029"})

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth accepted when converting raw nested mappings into
# message trees. Real catalogs are 2-4 levels deep; anything past 100 is
# malformed (or self-referencing) data. Deeper sub-trees are dropped and
# therefore behave as resolution misses.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum catalog file size in bytes (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# LOGGING
# ============================================================================

# Debug messages are high-volume; resolved text is truncated to keep logs manageable.
LOG_TRUNCATE_DEBUG: int = 50
