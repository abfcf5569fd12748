"""Catalog - immutable mapping from locale code to message tree.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from keyglot.runtime.tree import Node, build_tree

__all__ = ["Catalog"]

logger = logging.getLogger(__name__)


class Catalog(Mapping[str, Node]):
    """Read-only collection of locale bundles.

    Locale codes are matched exactly: a catalog holding "pt-BR" has no
    bundle for "pt_BR" or "pt". Negotiating a loaded locale from user or
    system preferences is the job of keyglot.localization.negotiate_initial_locale().

    Examples:
        >>> catalog = Catalog.from_mapping({
        ...     "pt-BR": {"ui": {"salvar_apontamento": "Salvar apontamento"}},
        ... })
        >>> catalog.locales
        ('pt-BR',)
        >>> catalog.bundle("pt-BR") is not None
        True
        >>> catalog.bundle("en") is None
        True
    """

    __slots__ = ("_bundles",)

    def __init__(self, bundles: Mapping[str, Node] | None = None) -> None:
        """Create a catalog from already-built trees.

        Args:
            bundles: Locale code -> root Node
        """
        self._bundles: Mapping[str, Node] = MappingProxyType(dict(bundles or {}))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, object]]) -> Catalog:
        """Build a catalog from plain nested mappings.

        No schema validation is performed: entries whose value is not a
        mapping become empty bundles, and non-string leaves are left out
        of the trees (see build_tree()).

        Args:
            raw: Locale code -> nested message mapping

        Returns:
            New Catalog
        """
        bundles: dict[str, Node] = {}
        for locale, messages in raw.items():
            if isinstance(messages, Mapping):
                bundles[locale] = build_tree(messages)
            else:
                logger.warning(
                    "Bundle for locale '%s' is %s, not a mapping; treating as empty",
                    locale,
                    type(messages).__name__,
                )
                bundles[locale] = Node()
        return cls(bundles)

    @property
    def locales(self) -> tuple[str, ...]:
        """Locale codes in insertion order."""
        return tuple(self._bundles)

    def bundle(self, locale: str) -> Node | None:
        """Get the bundle for a locale, or None when the locale is not loaded."""
        return self._bundles.get(locale)

    def __getitem__(self, locale: str) -> Node:
        return self._bundles[locale]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bundles)

    def __len__(self) -> int:
        return len(self._bundles)

    def __repr__(self) -> str:
        return f"Catalog(locales={self.locales!r})"
