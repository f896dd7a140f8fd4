"""In-place structural edits of a forest.

A target is located the same way for every edit: first among the roots by
identity, otherwise through its depth-first parent. Edits on a parent assign
a new ``children`` list instead of editing the existing one. When the target
cannot be located the forest is left unchanged.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from treeops.tree.protocol import T
from treeops.tree.search import find_parent, index_of


def remove(source: List[T], target: T) -> None:
    """
    Remove ``target`` from the forest.

    Among the roots only the first occurrence is removed. Below the roots,
    every occurrence in the parent's children is dropped.

    Args:
        source: Root nodes of the forest, edited in place
        target: Node to remove
    """
    index = index_of(source, target)
    if index != -1:
        del source[index]
        return

    parent = find_parent(source, target)
    if parent is None:
        logging.debug("remove: target not found in forest, nothing to do")
        return
    parent.children = [child for child in parent.children if child is not target]


def replace(source: List[T], target: T, replacer: T) -> None:
    """
    Put ``replacer`` in the slot of ``target``.

    ``replacer`` keeps its own children and the children of ``target`` are
    dropped along with it.

    Args:
        source: Root nodes of the forest, edited in place
        target: Node to replace
        replacer: Node taking the slot
    """
    slot = _locate(source, target)
    if slot is None:
        logging.debug("replace: target not found in forest, nothing to do")
        return
    _fill(source, slot, replacer)


def replace_only_itself(source: List[T], target: T, replacer: T) -> None:
    """
    Put ``replacer`` in the slot of ``target`` and hand it the target's children.

    Whatever children ``replacer`` held before are discarded; the children of
    ``target`` move over in their current order.

    Args:
        source: Root nodes of the forest, edited in place
        target: Node to replace
        replacer: Node taking the slot and the subtree
    """
    slot = _locate(source, target)
    if slot is None:
        logging.debug("replace_only_itself: target not found in forest, nothing to do")
        return
    replacer.children = list(target.children)
    _fill(source, slot, replacer)


# (parent or None for a root, index of the target in that container)
_Slot = Tuple[Optional[T], int]


def _locate(source: List[T], target: T) -> Optional[_Slot]:
    index = index_of(source, target)
    if index != -1:
        return None, index

    parent = find_parent(source, target)
    if parent is None:
        return None
    return parent, index_of(parent.children, target)


def _fill(source: List[T], slot: _Slot, replacer: T) -> None:
    parent, index = slot
    if parent is None:
        source[index] = replacer
        return
    siblings = list(parent.children)
    siblings[index] = replacer
    parent.children = siblings
