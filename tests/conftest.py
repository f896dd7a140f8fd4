"""
This is a configuration file for pytest containing customizations and fixtures.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def forest_file(tmp_path) -> Path:
    """Return a JSON file holding a small forest.

    root
    ├── left
    │   └── leaf
    └── right
    other
    """
    document = [
        {
            "name": "root",
            "children": [
                {"name": "left", "children": [{"name": "leaf"}]},
                {"name": "right"},
            ],
        },
        {"name": "other"},
    ]
    path = tmp_path / "forest.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path
