"""treeops traverses, searches and edits ordered trees of caller-defined nodes."""
from __future__ import annotations

import importlib.metadata

from treeops.tree import (
    SearchOrder,
    enumerate_nodes,
    enumerate_reverse,
    every,
    find_one,
    find_parent,
    flat,
    for_each,
    map_tree,
    next_of,
    prev_of,
    remove,
    replace,
    replace_only_itself,
    some,
)

try:
    __version__ = importlib.metadata.version("treeops")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "SearchOrder",
    "enumerate_nodes",
    "enumerate_reverse",
    "every",
    "find_one",
    "find_parent",
    "flat",
    "for_each",
    "map_tree",
    "next_of",
    "prev_of",
    "remove",
    "replace",
    "replace_only_itself",
    "some",
]
