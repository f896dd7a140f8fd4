"""Pydantic model for trees loaded from JSON documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, Field, TypeAdapter


class TreeNode(BaseModel):
    """A named node with free-form data and an ordered list of children.

    Pydantic compares models by value, so two distinct nodes with the same
    name and data are ``==``. The tree operations compare by identity and
    are unaffected.
    """

    name: str
    data: Dict[str, Any] = Field(default_factory=dict)
    children: List[TreeNode] = Field(default_factory=list)

    def __repr__(self) -> str:
        return f"TreeNode(name={self.name!r}, children={len(self.children)})"


_forest_adapter = TypeAdapter(List[TreeNode])


def load_forest(path: Path) -> List[TreeNode]:
    """Load a forest from a JSON file.

    A JSON array is read as a list of roots, a single object as a forest
    with one root.

    Args:
        path: Path to the JSON document

    Returns:
        List[TreeNode]: The root nodes

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If the document does not describe a tree
    """
    with open(path, "r", encoding="utf-8") as fp:
        document = json.load(fp)
    if isinstance(document, dict):
        document = [document]
    return _forest_adapter.validate_python(document)


def dump_forest(forest: List[TreeNode], indent: int | None = 2) -> str:
    """Serialise a forest as a JSON array."""
    return _forest_adapter.dump_json(forest, indent=indent).decode("utf-8")
