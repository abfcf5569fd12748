"""Read-only queries over templates and bundles.

Uses the same scanner as interpolation, so every name reported here is a
name interpolate() would look up.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator

from keyglot.runtime.interpolation import Placeholder, scan_template
from keyglot.runtime.tree import Node, iter_leaves

__all__ = [
    "extract_placeholders",
    "iter_message_keys",
]


def extract_placeholders(template: str) -> frozenset[str]:
    """Names of all non-empty placeholders in a template.

    Example:
        >>> sorted(extract_placeholders("{{ a }} / {{b}} / {{}} / {{a}}"))
        ['a', 'b']
    """
    return frozenset(
        element.name
        for element in scan_template(template)
        if isinstance(element, Placeholder) and element.name
    )


def iter_message_keys(bundle: Node) -> Iterator[str]:
    """Dotted key of every message in a bundle, depth-first in insertion order.

    Example:
        >>> from keyglot.runtime.tree import build_tree
        >>> list(iter_message_keys(build_tree({"ui": {"a": "A", "b": {"c": "C"}}, "d": "D"})))
        ['ui.a', 'ui.b.c', 'd']
    """
    for key, _ in iter_leaves(bundle):
        yield key
