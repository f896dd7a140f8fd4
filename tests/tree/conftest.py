"""Common fixtures for tree tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest


class Sample:
    """Minimal tree node compared by identity."""

    def __init__(self, text: str = "", children: List["Sample"] | None = None):
        self.text = text
        self.children = children if children is not None else []

    def __repr__(self) -> str:
        return f"Sample({self.text!r})"


@dataclass
class Twin:
    """Tree node compared by value, to catch accidental use of ``==``."""

    text: str
    children: List["Twin"] = field(default_factory=list)


def _texts(nodes) -> List[str]:
    """Texts of the given nodes, in order."""
    return [node.text for node in nodes]


@pytest.fixture
def forest():
    """Two roots with uneven depth.

    A
    ├── A1
    │   └── A11
    └── A2
    B
    └── B1
    """
    a11 = Sample("A11")
    a1 = Sample("A1", [a11])
    a2 = Sample("A2")
    a = Sample("A", [a1, a2])
    b1 = Sample("B1")
    b = Sample("B", [b1])
    return [a, b]


@pytest.fixture
def nodes(forest):
    """Nodes of the ``forest`` fixture keyed by text."""
    by_text = {}
    stack = list(forest)
    while stack:
        node = stack.pop()
        by_text[node.text] = node
        stack.extend(node.children)
    return by_text


@pytest.fixture
def family():
    """Parent, child and two grandchildren, plus a replacer holding the second grandchild."""
    parent = Sample("PARENT")
    child = Sample("CHILD")
    grand_child_1 = Sample("GRAND CHILD 1")
    grand_child_2 = Sample("GRAND CHILD 2")
    parent.children.append(child)
    child.children.extend([grand_child_1, grand_child_2])
    replacer = Sample("REPLACER", [grand_child_2])
    return parent, child, grand_child_1, grand_child_2, replacer


@pytest.fixture
def make():
    """Constructor for identity-compared nodes."""
    return Sample


@pytest.fixture
def make_twin():
    """Constructor for value-compared nodes."""
    return Twin


@pytest.fixture
def texts():
    """Helper turning a node sequence into the list of its texts."""
    return _texts
