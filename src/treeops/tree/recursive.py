"""Whole-tree operators working top-down by recursion.

None of these take an order: they always visit a node before its children
and the children left to right.
"""

from __future__ import annotations

from typing import Any, Callable, List, TypeVar

from treeops.tree.protocol import T

R = TypeVar("R")


def for_each(root: T, visit: Callable[[T], Any]) -> None:
    """Call ``visit`` on the root and then on every descendant in preorder."""
    visit(root)
    for child in root.children:
        for_each(child, visit)


def map_tree(root: T, transform: Callable[[T], R]) -> R:
    """
    Convert a tree into another tree of the same shape.

    ``transform`` is applied to each node and must return a node whose
    ``children`` list can be appended to. Mapped children are appended after
    whatever the returned node already holds.

    Args:
        root: Source tree
        transform: Builds the result node for a single source node

    Returns:
        The result node built for ``root``
    """
    result = transform(root)
    for child in root.children:
        result.children.append(map_tree(child, transform))
    return result


def some(root: T, predicate: Callable[[T], bool]) -> bool:
    """Check whether the root or any descendant satisfies ``predicate``."""
    return bool(predicate(root)) or any(
        some(child, predicate) for child in root.children
    )


def every(root: T, predicate: Callable[[T], bool]) -> bool:
    """Check whether the root and all descendants satisfy ``predicate``."""
    return bool(predicate(root)) and all(
        every(child, predicate) for child in root.children
    )


def flat(root: T, selector: Callable[[T], R]) -> List[R]:
    """Collect ``selector(node)`` for every node in depth-first preorder."""
    collected: List[R] = []
    for_each(root, lambda node: collected.append(selector(node)))
    return collected
