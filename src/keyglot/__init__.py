"""keyglot - key-based UI message resolution with placeholder interpolation.

Resolves dotted keys (``"ui.salvar_apontamento"``) against nested locale
bundles, substitutes ``{{placeholder}}`` values, and tracks the active
locale. Missing translations never raise: they degrade to the key itself.

Public API:
    MessageResolver - set_locale / get_locale / resolve over a Catalog
    Catalog - Immutable locale -> message tree mapping
    LocaleState - Injectable active-locale cell
    interpolate - Placeholder substitution on a raw template
    load_catalog - Eager loading of JSON catalogs from disk
    MessageValue - Type alias for values accepted by interpolation

Exceptions (returned as values by resolve_with_errors, never raised there):
    MessageError - Base exception class
    MessageReferenceError - Missing bundle, missing key, or key naming a sub-tree
    PlaceholderError - Placeholder left unsubstituted

Submodules:
    keyglot.runtime - Trees, catalog, interpolation, resolver
    keyglot.localization - Catalog loaders and locale negotiation
    keyglot.introspection - Placeholder and key listing
    keyglot.diagnostics - Error types and diagnostic codes
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    MessageError,
    MessageReferenceError,
    PlaceholderError,
)
from .localization import load_catalog
from .runtime import Catalog, LocaleState, MessageResolver, MessageValue, interpolate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("keyglot")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Catalog",
    "LocaleState",
    "MessageError",
    "MessageReferenceError",
    "MessageResolver",
    "MessageValue",
    "PlaceholderError",
    "__version__",
    "interpolate",
    "load_catalog",
]
