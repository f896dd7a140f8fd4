"""Search and neighbour queries over a forest.

Every lookup compares nodes by identity. Absence is reported as ``None``.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Sequence

from treeops.tree.enumeration import enumerate_nodes, enumerate_reverse
from treeops.tree.protocol import OrderLike, SearchOrder, T


def index_of(nodes: Sequence[T], target: T) -> int:
    """Return the position of ``target`` in ``nodes`` by identity, or -1."""
    for index, node in enumerate(nodes):
        if node is target:
            return index
    return -1


def find_one(
    source: Sequence[T], predicate: Callable[[T], bool], order: OrderLike
) -> Optional[T]:
    """
    Return the first node, in the given order, satisfying ``predicate``.

    Enumeration stops at the first match.

    Args:
        source: Root nodes of the forest
        predicate: Test applied to each node
        order: "depth-first" or "breadth-first"

    Returns:
        The matching node, or None when nothing matches
    """
    for item in enumerate_nodes(source, order):
        if predicate(item):
            return item
    return None


def find_parent(source: Sequence[T], child: T) -> Optional[T]:
    """Return the node whose children contain ``child``, searched depth-first.

    Roots have no parent, so None is returned for them as well as for nodes
    that are not in the forest at all.
    """
    return find_one(
        source,
        lambda node: index_of(node.children, child) != -1,
        SearchOrder.DEPTH_FIRST,
    )


def next_of(source: Sequence[T], target: T, order: OrderLike) -> Optional[T]:
    """Return the node following ``target`` in the forward enumeration."""
    return _following(enumerate_nodes(source, order), target)


def prev_of(source: Sequence[T], target: T, order: OrderLike) -> Optional[T]:
    """Return the node preceding ``target`` in the forward enumeration."""
    return _following(enumerate_reverse(source, order), target)


def _following(iterator: Iterator[T], target: T) -> Optional[T]:
    for item in iterator:
        if item is target:
            return next(iterator, None)
    return None
