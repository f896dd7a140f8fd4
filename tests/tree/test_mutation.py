"""Tests for removal and the two replacement flavours."""

from __future__ import annotations

from treeops.tree import find_one, remove, replace, replace_only_itself


def test_remove_root(forest, nodes):
    """Test removing a root from the forest."""
    remove(forest, nodes["A"])
    assert forest == [nodes["B"]]


def test_remove_nested(forest, nodes):
    """Test removing a nested node keeps the order of its siblings."""
    a = nodes["A"]
    a.children.append(nodes["B1"])
    remove(forest, nodes["A1"])
    assert [c.text for c in a.children] == ["A2", "B1"]
    assert find_one(forest, lambda n: n is nodes["A1"], "depth-first") is None
    assert find_one(forest, lambda n: n is nodes["A11"], "depth-first") is None


def test_remove_assigns_new_children_list(forest, nodes):
    """Test that a parent gets a fresh list rather than an edited one."""
    before = nodes["A"].children
    remove(forest, nodes["A2"])
    assert nodes["A"].children is not before
    assert [c.text for c in before] == ["A1", "A2"]


def test_remove_root_only_first_occurrence(make):
    """Test that only the first matching root is removed."""
    shared = make("shared")
    other = make("other")
    source = [shared, other, shared]
    remove(source, shared)
    assert source == [other, shared]


def test_remove_nested_drops_every_occurrence(make):
    """Test that all occurrences under the parent are removed."""
    shared = make("shared")
    keep = make("keep")
    parent = make("parent", [shared, keep, shared])
    remove([parent], shared)
    assert parent.children == [keep]


def test_remove_absent_is_noop(forest, nodes, make):
    """Test that removing an unknown node changes nothing."""
    remove(forest, make("stranger"))
    assert forest == [nodes["A"], nodes["B"]]
    assert nodes["A"].children == [nodes["A1"], nodes["A2"]]


def test_remove_uses_identity(make_twin):
    """Test that an equal but distinct node is not removed."""
    root = make_twin("x")
    lookalike = make_twin("x")
    source = [root]
    remove(source, lookalike)
    assert source[0] is root


def test_replace_child(family):
    """Test replace: the replacer keeps its own children."""
    parent, child, grand_child_1, grand_child_2, replacer = family

    replace([parent], child, replacer)

    assert len(parent.children) == 1
    assert parent.children[0] is replacer
    assert len(replacer.children) == 1
    assert replacer.children[0] is grand_child_2


def test_replace_root(family):
    """Test replace on a node from the root list."""
    parent, child, grand_child_1, grand_child_2, replacer = family
    source = [parent]

    replace(source, parent, replacer)

    assert len(source) == 1
    assert source[0] is replacer
    assert replacer.children == [grand_child_2]


def test_replace_absent_is_noop(family, make):
    """Test that replacing an unknown node changes nothing."""
    parent, child, grand_child_1, grand_child_2, replacer = family
    source = [parent]

    replace(source, make("stranger"), replacer)

    assert source == [parent]
    assert parent.children == [child]
    assert replacer.children == [grand_child_2]


def test_replace_only_itself_child(family):
    """Test replace_only_itself: the replacer takes over the subtree."""
    parent, child, grand_child_1, grand_child_2, replacer = family

    replace_only_itself([parent], child, replacer)

    assert len(parent.children) == 1
    assert parent.children[0] is replacer
    assert len(replacer.children) == 2
    assert replacer.children[0] is grand_child_1
    assert replacer.children[1] is grand_child_2


def test_replace_only_itself_root(family):
    """Test replace_only_itself on a node from the root list."""
    parent, child, grand_child_1, grand_child_2, replacer = family
    source = [parent]

    replace_only_itself(source, parent, replacer)

    assert len(source) == 1
    assert source[0] is replacer
    assert len(replacer.children) == 1
    assert replacer.children[0] is child
    assert child.children == [grand_child_1, grand_child_2]


def test_replace_only_itself_absent_is_noop(family, make):
    """Test that the replacer is left alone when the target is missing."""
    parent, child, grand_child_1, grand_child_2, replacer = family

    replace_only_itself([parent], make("stranger"), replacer)

    assert parent.children == [child]
    assert replacer.children == [grand_child_2]


def test_replace_keeps_sibling_order(make):
    """Test that replacement happens in the slot of the target."""
    first, middle, last = make("first"), make("middle"), make("last")
    parent = make("parent", [first, middle, last])
    replacer = make("replacer")

    replace([parent], middle, replacer)

    assert [c.text for c in parent.children] == ["first", "replacer", "last"]
