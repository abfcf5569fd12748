"""keyglot runtime package.

Provides message trees, the immutable Catalog, the locale state cell,
placeholder interpolation, and the MessageResolver API.

Python 3.13+.
"""

from .catalog import Catalog
from .interpolation import interpolate, scan_template
from .locale_state import LocaleState
from .resolver import MessageResolver
from .tree import Leaf, MessageTree, Node, build_tree, lookup
from .value_types import MessageValue

__all__ = [
    "Catalog",
    "Leaf",
    "LocaleState",
    "MessageResolver",
    "MessageTree",
    "MessageValue",
    "Node",
    "build_tree",
    "interpolate",
    "lookup",
    "scan_template",
]
