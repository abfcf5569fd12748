"""Catalog loading and locale selection.

Submodules:
    types       - PEP 695 type aliases (MessageKey, LocaleCode, CatalogSource)
    loading     - CatalogLoader protocol, PathCatalogLoader, CatalogLoadResult,
                  LoadSummary, load_catalog
    negotiation - negotiate_initial_locale, language_options (Babel-backed)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from keyglot.enums import LoadStatus
from keyglot.localization.loading import (
    CatalogLoader,
    CatalogLoadResult,
    LoadSummary,
    PathCatalogLoader,
    load_catalog,
    parse_catalog_source,
)
from keyglot.localization.negotiation import (
    LanguageOption,
    language_options,
    negotiate_initial_locale,
)
from keyglot.localization.types import CatalogSource, LocaleCode, MessageKey

__all__ = [
    # Eager loading
    "load_catalog",
    "parse_catalog_source",
    # Loader protocol and implementations
    "CatalogLoader",
    "PathCatalogLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "CatalogLoadResult",
    # Locale selection
    "LanguageOption",
    "language_options",
    "negotiate_initial_locale",
    # Type aliases for user code type annotations
    "CatalogSource",
    "LocaleCode",
    "MessageKey",
]
