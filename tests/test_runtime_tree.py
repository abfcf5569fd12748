"""Message tree construction and lookup tests."""

from types import MappingProxyType

import pytest
from hypothesis import given

from keyglot.enums import MissKind
from keyglot.runtime.tree import (
    Leaf,
    Node,
    build_tree,
    find_node,
    iter_leaves,
    lookup,
    lookup_with_reason,
)
from tests.strategies import message_bundles


@pytest.fixture
def root() -> Node:
    return build_tree({
        "ui": {
            "salvar_apontamento": "Salvar apontamento",
            "secao": {"titulo": "Título"},
        },
        "app": "Plano de Manutenção",
    })


class TestBuildTree:
    """Test conversion of raw mappings into immutable trees."""

    def test_strings_become_leaves(self) -> None:
        """String values become Leaf nodes."""
        tree = build_tree({"a": "A"})
        assert tree.children["a"] == Leaf("A")

    def test_mappings_become_nodes(self) -> None:
        """Nested mappings become Node objects."""
        tree = build_tree({"a": {"b": "B"}})
        assert isinstance(tree.children["a"], Node)

    def test_non_string_leaves_dropped(self) -> None:
        """Numbers, lists and None are not messages."""
        tree = build_tree({"n": 3, "l": ["x"], "z": None, "ok": "fine"})
        assert set(tree.children) == {"ok"}

    def test_non_string_keys_dropped(self) -> None:
        """Only string segments are addressable."""
        tree = build_tree({1: "one", "two": "dois"})  # type: ignore[dict-item]
        assert set(tree.children) == {"two"}

    def test_children_read_only(self) -> None:
        """Node children cannot be mutated."""
        tree = build_tree({"a": "A"})
        assert isinstance(tree.children, MappingProxyType)
        with pytest.raises(TypeError):
            tree.children["b"] = Leaf("B")  # type: ignore[index]

    def test_source_mutation_not_visible(self) -> None:
        """Changing the raw dict after building does not affect the tree."""
        raw = {"a": "A"}
        tree = build_tree(raw)
        raw["a"] = "changed"
        assert lookup(tree, "a") == "A"

    def test_depth_limit_drops_deep_subtrees(self) -> None:
        """Sub-trees deeper than max_depth are dropped."""
        tree = build_tree({"a": {"b": {"c": "C"}}, "top": "T"}, max_depth=1)
        assert lookup(tree, "top") == "T"
        assert lookup(tree, "a.b.c") is None
        assert find_node(tree, ["a"]) == Node({})

    def test_node_wraps_plain_dict(self) -> None:
        """Node built directly from a dict also gets a read-only view."""
        node = Node({"a": Leaf("A")})
        assert isinstance(node.children, MappingProxyType)
        assert node == Node({"a": Leaf("A")})


class TestLookup:
    """Test dotted-path walks."""

    def test_full_path(self, root: Node) -> None:
        """A full path returns the leaf text."""
        assert lookup(root, "ui.salvar_apontamento") == "Salvar apontamento"

    def test_top_level_leaf(self, root: Node) -> None:
        """Single-segment keys work."""
        assert lookup(root, "app") == "Plano de Manutenção"

    def test_deep_path(self, root: Node) -> None:
        """Three-segment keys work."""
        assert lookup(root, "ui.secao.titulo") == "Título"

    def test_missing_segment(self, root: Node) -> None:
        """Unknown segment misses."""
        assert lookup_with_reason(root, "ui.nada") == (None, MissKind.NOT_FOUND)

    def test_prefix_key_is_not_leaf(self, root: Node) -> None:
        """A key naming a sub-tree misses as NOT_LEAF."""
        assert lookup_with_reason(root, "ui") == (None, MissKind.NOT_LEAF)
        assert lookup_with_reason(root, "ui.secao") == (None, MissKind.NOT_LEAF)

    def test_path_through_leaf(self, root: Node) -> None:
        """Walking past a leaf misses."""
        assert lookup_with_reason(root, "app.extra") == (None, MissKind.NOT_FOUND)

    def test_empty_key(self, root: Node) -> None:
        """The empty key is a miss."""
        assert lookup(root, "") is None

    def test_empty_key_ignores_empty_member(self) -> None:
        """A "" member is never reached by the empty key."""
        tree = build_tree({"": "vazio", "a": {"": "interno"}})
        assert lookup_with_reason(tree, "") == (None, MissKind.NOT_FOUND)
        assert lookup(tree, "a.") == "interno"

    def test_trailing_separator(self, root: Node) -> None:
        """A trailing dot adds an empty segment, which misses."""
        assert lookup(root, "ui.salvar_apontamento.") is None

    def test_custom_separator(self, root: Node) -> None:
        """Separator is configurable."""
        assert lookup(root, "ui/secao/titulo", separator="/") == "Título"


class TestIterLeaves:
    """Test leaf enumeration."""

    def test_insertion_order(self, root: Node) -> None:
        """Leaves come depth-first in insertion order."""
        assert list(iter_leaves(root)) == [
            ("ui.salvar_apontamento", "Salvar apontamento"),
            ("ui.secao.titulo", "Título"),
            ("app", "Plano de Manutenção"),
        ]

    def test_empty_tree(self) -> None:
        """Empty tree yields nothing."""
        assert list(iter_leaves(Node())) == []

    @given(bundle=message_bundles())
    def test_every_leaf_resolves(self, bundle: dict[str, object]) -> None:
        """Every enumerated key looks up its own text."""
        tree = build_tree(bundle)
        for key, text in iter_leaves(tree):
            assert lookup(tree, key) == text
