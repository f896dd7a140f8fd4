"""Lazy enumeration of the nodes of a forest.

Both directions are generators: every call starts a fresh walk, and a
consumer that stops iterating leaves the rest of the tree untouched.

Breadth-first here means: yield the nodes of the given sequence, then expand
each of them in turn with the same rule. Sibling groups are emitted before
their descendants, but separate subtrees are expanded one after another
instead of being interleaved level by level across the whole forest.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from treeops.tree.protocol import OrderLike, SearchOrder, T, parse_order


def enumerate_nodes(source: Sequence[T], order: OrderLike) -> Iterator[T]:
    """
    Enumerate the nodes of a forest from front to back.

    Args:
        source: Root nodes of the forest
        order: "depth-first" (preorder) or "breadth-first"

    Returns:
        Iterator over the nodes

    Raises:
        ValueError: If ``order`` is unknown. Raised on call, not on first ``next``.
    """
    if parse_order(order) is SearchOrder.DEPTH_FIRST:
        return _depth_first(source)
    return _breadth_first(source)


def enumerate_reverse(source: Sequence[T], order: OrderLike) -> Iterator[T]:
    """
    Enumerate the nodes of a forest from back to front.

    The result is exactly the reverse of ``enumerate_nodes(source, order)``.

    Raises:
        ValueError: If ``order`` is unknown.
    """
    if parse_order(order) is SearchOrder.DEPTH_FIRST:
        return _depth_first_reverse(source)
    return _breadth_first_reverse(source)


def _depth_first(source: Sequence[T]) -> Iterator[T]:
    for item in source:
        yield item
        yield from _depth_first(item.children)


def _depth_first_reverse(source: Sequence[T]) -> Iterator[T]:
    for item in reversed(source):
        yield from _depth_first_reverse(item.children)
        yield item


def _breadth_first(source: Sequence[T]) -> Iterator[T]:
    yield from source
    for item in source:
        yield from _breadth_first(item.children)


def _breadth_first_reverse(source: Sequence[T]) -> Iterator[T]:
    # mirror of _breadth_first: expansions last to first, then the group itself
    for item in reversed(source):
        yield from _breadth_first_reverse(item.children)
    yield from reversed(source)
