"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating loader call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CatalogSource",
    "LocaleCode",
    "MessageKey",
]

type MessageKey = str
"""Dotted message key (e.g., 'ui.salvar_apontamento')."""

type LocaleCode = str
"""Locale code (e.g., 'pt', 'pt-BR', 'en_US')."""

type CatalogSource = str
"""Raw JSON catalog text as a Python string."""
