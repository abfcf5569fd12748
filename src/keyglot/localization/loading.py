"""Catalog loading infrastructure.

Provides the protocol for catalog loaders, a filesystem implementation
with path-traversal security, result/summary data structures for tracking
load attempts, and load_catalog() for eager loading of every locale.

Components:
    CatalogLoader - Protocol for loading catalog sources (structural typing)
    PathCatalogLoader - Disk-based JSON loader with path-traversal prevention
    CatalogLoadResult - Immutable result of a single locale load attempt
    LoadSummary - Immutable aggregate of all load results
    load_catalog - Load every locale up front into a Catalog

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from keyglot.constants import MAX_SOURCE_SIZE
from keyglot.diagnostics import CatalogFormatError, ErrorTemplate
from keyglot.enums import LoadStatus
from keyglot.localization.types import CatalogSource, LocaleCode
from keyglot.runtime.catalog import Catalog
from keyglot.runtime.tree import Node, build_tree

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogLoader",
    # Concrete loader
    "PathCatalogLoader",
    # Load result types
    "CatalogLoadResult",
    "LoadSummary",
    # Entry point
    "load_catalog",
    "parse_catalog_source",
]

logger = logging.getLogger(__name__)


class CatalogLoader(Protocol):
    """Protocol for loading the catalog source of one locale.

    Any object with load() and describe_path() qualifies; subclasses
    inherit the default describe_path().

    Example:
        >>> class PackageLoader:
        ...     def load(self, locale: str) -> str:
        ...         return importlib.resources.read_text("myapp.locales", f"{locale}.json")
        ...     def describe_path(self, locale: str) -> str:
        ...         return f"myapp/locales/{locale}.json"
    """

    def load(self, locale: LocaleCode) -> CatalogSource:
        """Load the JSON catalog source for a locale.

        Args:
            locale: Locale code (e.g., 'pt-BR', 'en')

        Returns:
            JSON text whose top level is an object

        Raises:
            FileNotFoundError: If no catalog exists for this locale
            OSError: If the catalog cannot be read
        """

    def describe_path(self, locale: LocaleCode) -> str:
        """Return human-readable path for diagnostics.

        Default implementation returns "{locale}.json".
        """
        return f"{locale}.json"


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """Read one JSON catalog per locale from a path template.

    The template must contain "{locale}", e.g. "locales/{locale}.json".
    Locale codes are checked before they reach the filesystem: empty codes,
    ".." and path separators raise ValueError, and the final path must stay
    under root_dir.

    Example:
        >>> loader = PathCatalogLoader("locales/{locale}.json")
        >>> source = loader.load("pt-BR")  # reads locales/pt-BR.json

    Attributes:
        base_path: Path template containing {locale}
        root_dir: Directory every catalog must live under
                  (default: the part of base_path before {locale})
        max_source_size: Largest accepted file in bytes; 0 means unlimited
    """

    base_path: str
    root_dir: str | None = None
    max_source_size: int = MAX_SOURCE_SIZE
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if "{locale}" not in self.base_path:
            msg = f"base_path needs a '{{locale}}' placeholder, got '{self.base_path}'"
            raise ValueError(msg)

        if self.root_dir is not None:
            root = Path(self.root_dir)
        else:
            # "locales/{locale}.json" -> "locales"
            prefix = self.base_path.partition("{locale}")[0].rstrip("/\\")
            root = Path(prefix) if prefix else Path.cwd()
        object.__setattr__(self, "_resolved_root", root.resolve())

    @staticmethod
    def _check_locale(locale: LocaleCode) -> None:
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale or "/" in locale or "\\" in locale:
            msg = f"Locale code '{locale}' must not contain '..' or path separators"
            raise ValueError(msg)

    def describe_path(self, locale: LocaleCode) -> str:
        """Catalog path for locale, as shown in diagnostics."""
        # replace() rather than format(): other braces in the template stay literal
        return self.base_path.replace("{locale}", locale)

    def load(self, locale: LocaleCode) -> CatalogSource:
        """Read the catalog text for locale.

        Raises:
            ValueError: Unsafe locale code, or path outside root_dir
            FileNotFoundError: No catalog file for locale
            OSError: File exists but cannot be read
            CatalogFormatError: File larger than max_source_size
        """
        self._check_locale(locale)

        path = Path(self.describe_path(locale)).resolve()
        if not path.is_relative_to(self._resolved_root):
            msg = (
                f"Path traversal detected: catalog for '{locale}' "
                f"resolves outside {self._resolved_root}"
            )
            raise ValueError(msg)

        if self.max_source_size:
            size = path.stat().st_size
            if size > self.max_source_size:
                raise CatalogFormatError(
                    ErrorTemplate.catalog_too_large(locale, str(path), size, self.max_source_size)
                )

        return path.read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Outcome of loading one locale.

    Attributes:
        locale: Locale code requested
        status: SUCCESS, NOT_FOUND or ERROR
        error: The captured exception when status is ERROR
        source_path: describe_path() of the catalog
        message_count: Messages in the loaded tree (0 unless SUCCESS)
    """

    locale: LocaleCode
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    message_count: int = 0

    @property
    def is_success(self) -> bool:
        return self.status is LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        return self.status is LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        return self.status is LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Every CatalogLoadResult of one load_catalog() call, in request order.

    Example:
        >>> catalog, summary = load_catalog(["pt-BR", "en"], loader)
        >>> for result in summary.get_errors():
        ...     print(result.source_path, result.error)
    """

    results: tuple[CatalogLoadResult, ...]

    def _with_status(self, status: LoadStatus) -> tuple[CatalogLoadResult, ...]:
        return tuple(r for r in self.results if r.status is status)

    @property
    def total_attempted(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return len(self._with_status(LoadStatus.SUCCESS))

    @property
    def not_found(self) -> int:
        return len(self._with_status(LoadStatus.NOT_FOUND))

    @property
    def errors(self) -> int:
        return len(self._with_status(LoadStatus.ERROR))

    @property
    def has_errors(self) -> bool:
        """True if any catalog existed but failed to load."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """True if every requested locale was found and loaded."""
        return self.successful == self.total_attempted

    def get_errors(self) -> tuple[CatalogLoadResult, ...]:
        return self._with_status(LoadStatus.ERROR)

    def get_not_found(self) -> tuple[CatalogLoadResult, ...]:
        return self._with_status(LoadStatus.NOT_FOUND)

    def get_by_locale(self, locale: LocaleCode) -> CatalogLoadResult | None:
        """Result for locale, or None if it was not requested."""
        return next((r for r in self.results if r.locale == locale), None)

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, ok={self.successful}, "
            f"not_found={self.not_found}, errors={self.errors})"
        )


def parse_catalog_source(source: CatalogSource, *, locale: LocaleCode, source_path: str) -> Node:
    """Decode JSON catalog text into a message tree.

    Args:
        source: JSON text
        locale: Locale being loaded (for diagnostics)
        source_path: Human-readable path (for diagnostics)

    Returns:
        Root Node of the bundle

    Raises:
        json.JSONDecodeError: If source is not valid JSON
        RecursionError: If arrays/objects nest deeper than the decoder can follow
        CatalogFormatError: If the top-level JSON value is not an object
    """
    data = json.loads(source)
    if not isinstance(data, Mapping):
        raise CatalogFormatError(ErrorTemplate.catalog_not_object(locale, source_path))
    return build_tree(data)


def _count_messages(node: Node) -> int:
    total = 0
    for child in node.children.values():
        total += _count_messages(child) if isinstance(child, Node) else 1
    return total


def _load_one(locale: LocaleCode, loader: CatalogLoader) -> tuple[CatalogLoadResult, Node | None]:
    source_path = loader.describe_path(locale)
    try:
        source = loader.load(locale)
        tree = parse_catalog_source(source, locale=locale, source_path=source_path)
    except FileNotFoundError:
        # Expected for optional locales
        return CatalogLoadResult(
            locale=locale, status=LoadStatus.NOT_FOUND, source_path=source_path
        ), None
    except (OSError, ValueError, RecursionError, CatalogFormatError) as e:
        # Permission errors, path traversal, invalid JSON/UTF-8, nesting past the
        # interpreter recursion limit, non-object documents
        return CatalogLoadResult(
            locale=locale, status=LoadStatus.ERROR, error=e, source_path=source_path
        ), None
    return CatalogLoadResult(
        locale=locale,
        status=LoadStatus.SUCCESS,
        source_path=source_path,
        message_count=_count_messages(tree),
    ), tree


def load_catalog(
    locales: Iterable[LocaleCode], loader: CatalogLoader
) -> tuple[Catalog, LoadSummary]:
    """Eagerly load every locale into an immutable Catalog.

    Load failures never raise: they are recorded in the returned summary
    and the failed locale is simply absent from the catalog (so resolving
    under it echoes keys).

    Args:
        locales: Locale codes to load, in order (duplicates are loaded once)
        loader: CatalogLoader implementation

    Returns:
        Tuple of (catalog, summary)

    Example:
        >>> loader = PathCatalogLoader("locales/{locale}.json")
        >>> catalog, summary = load_catalog(["pt-BR", "en"], loader)
        >>> resolver = MessageResolver(catalog)
    """
    bundles: dict[LocaleCode, Node] = {}
    results: list[CatalogLoadResult] = []
    for locale in dict.fromkeys(locales):
        result, tree = _load_one(locale, loader)
        results.append(result)
        match result.status:
            case LoadStatus.SUCCESS if tree is not None:
                bundles[locale] = tree
                logger.debug(
                    "Loaded %d message(s) for locale %s from %s",
                    result.message_count,
                    locale,
                    result.source_path,
                )
            case LoadStatus.NOT_FOUND:
                logger.warning("No catalog for locale %s at %s", locale, result.source_path)
            case _:
                logger.error(
                    "Failed to load catalog for locale %s from %s: %s",
                    locale,
                    result.source_path,
                    result.error,
                )

    summary = LoadSummary(tuple(results))
    logger.info("Catalog loaded: %r", summary)
    return Catalog(bundles), summary
