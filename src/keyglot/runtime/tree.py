"""Immutable message trees.

A locale bundle is a recursive tagged variant:

    MessageTree = Leaf(text) | Node(children: name -> MessageTree)

Raw catalog data (nested dicts from JSON or Python literals) is converted
once with build_tree(). Values that are neither strings nor mappings are
left out of the tree, so a key pointing at them is an ordinary resolution
miss rather than a load-time error.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import assert_never

from keyglot.constants import KEY_SEPARATOR, MAX_DEPTH
from keyglot.enums import MissKind

__all__ = [
    "Leaf",
    "MessageTree",
    "Node",
    "build_tree",
    "find_node",
    "iter_leaves",
    "lookup",
    "lookup_with_reason",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Leaf:
    """String message at the end of a key path."""

    text: str


@dataclass(frozen=True, slots=True)
class Node:
    """Group of named children.

    The children mapping is wrapped in a read-only proxy at construction.
    """

    children: Mapping[str, MessageTree] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.children, MappingProxyType):
            object.__setattr__(self, "children", MappingProxyType(dict(self.children)))


type MessageTree = Leaf | Node


def build_tree(raw: Mapping[str, object], *, max_depth: int = MAX_DEPTH) -> Node:
    """Convert nested raw mappings into an immutable Node.

    Args:
        raw: Nested mapping whose leaves should be strings
        max_depth: Deepest level converted; deeper sub-trees are dropped

    Returns:
        Root Node of the bundle

    Example:
        >>> root = build_tree({"ui": {"salvar": "Salvar", "count": 3}})
        >>> lookup(root, "ui.salvar")
        'Salvar'
        >>> lookup(root, "ui.count") is None
        True
    """
    return _build_node(raw, depth=0, max_depth=max_depth, path=())


def _build_node(
    raw: Mapping[str, object], *, depth: int, max_depth: int, path: tuple[str, ...]
) -> Node:
    children: dict[str, MessageTree] = {}
    for name, value in raw.items():
        if not isinstance(name, str):
            continue
        match value:
            case str():
                children[name] = Leaf(value)
            case Mapping():
                if depth + 1 > max_depth:
                    logger.warning(
                        "Dropping sub-tree '%s': nesting exceeds %d levels",
                        ".".join((*path, name)),
                        max_depth,
                    )
                    continue
                children[name] = _build_node(
                    value, depth=depth + 1, max_depth=max_depth, path=(*path, name)
                )
            case _:
                # Non-string leaves are not messages; lookups of them miss.
                continue
    return Node(children)


def find_node(root: Node, segments: Sequence[str]) -> MessageTree | None:
    """Walk segments from root.

    Args:
        root: Bundle root
        segments: Ordered path segments

    Returns:
        The node or leaf at the end of the path, or None if any step
        hits a Leaf or a missing child.
    """
    current: MessageTree = root
    for segment in segments:
        match current:
            case Node(children=children):
                child = children.get(segment)
                if child is None:
                    return None
                current = child
            case Leaf():
                return None
            case _ as unreachable:
                assert_never(unreachable)
    return current


def lookup(root: Node, key: str, *, separator: str = KEY_SEPARATOR) -> str | None:
    """Resolve a dotted key to its message text.

    Args:
        root: Bundle root
        key: Dotted key (e.g. "ui.salvar_apontamento")
        separator: Segment separator

    Returns:
        Message text if the path ends on a Leaf, otherwise None
    """
    result, _ = lookup_with_reason(root, key, separator=separator)
    return result


def lookup_with_reason(
    root: Node, key: str, *, separator: str = KEY_SEPARATOR
) -> tuple[str | None, MissKind | None]:
    """Resolve a dotted key, reporting why it missed.

    Returns:
        (text, None) on success, (None, MissKind) on a miss. The empty key
        is always a miss, even when the bundle has a "" member.
    """
    if not key:
        return None, MissKind.NOT_FOUND
    match find_node(root, key.split(separator)):
        case Leaf(text=text):
            return text, None
        case Node():
            return None, MissKind.NOT_LEAF
        case None:
            return None, MissKind.NOT_FOUND
        case _ as unreachable:
            assert_never(unreachable)


def iter_leaves(root: Node, *, separator: str = KEY_SEPARATOR) -> Iterator[tuple[str, str]]:
    """Yield (dotted_key, text) for every leaf, depth-first in insertion order."""
    yield from _iter_leaves(root, (), separator)


def _iter_leaves(
    node: Node, prefix: tuple[str, ...], separator: str
) -> Iterator[tuple[str, str]]:
    # Recursion is bounded: build_tree() never nests deeper than MAX_DEPTH.
    for name, child in node.children.items():
        path = (*prefix, name)
        match child:
            case Leaf(text=text):
                yield separator.join(path), text
            case Node():
                yield from _iter_leaves(child, path, separator)
            case _ as unreachable:
                assert_never(unreachable)
