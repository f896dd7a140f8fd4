"""
Generic algorithms over caller-owned ordered trees.

A tree is any object with a ``children`` list of objects of the same kind.
This module provides traversal, search and mutation helpers that work on
such objects without looking at any other attribute.
"""

from __future__ import annotations

from treeops.tree.enumeration import enumerate_nodes, enumerate_reverse
from treeops.tree.mutation import remove, replace, replace_only_itself
from treeops.tree.node import TreeNode, dump_forest, load_forest
from treeops.tree.protocol import SearchOrder, Tree, parse_order
from treeops.tree.recursive import every, flat, for_each, map_tree, some
from treeops.tree.search import find_one, find_parent, index_of, next_of, prev_of

__all__ = [
    # protocol
    "Tree",
    "SearchOrder",
    "parse_order",
    # recursive
    "for_each",
    "map_tree",
    "some",
    "every",
    "flat",
    # enumeration
    "enumerate_nodes",
    "enumerate_reverse",
    # search
    "index_of",
    "find_one",
    "find_parent",
    "next_of",
    "prev_of",
    # mutation
    "remove",
    "replace",
    "replace_only_itself",
    # node
    "TreeNode",
    "load_forest",
    "dump_forest",
]
