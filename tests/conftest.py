"""Shared pytest fixtures for the schablone test suite.

Provides reusable fixtures for:
- Writing template trees into temporary directories
- A ready-made project template tree
- Source/target path pairs for builds
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping

import pytest


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

TreeSpec = Mapping[str, "str | bytes | None"]


def write_tree(root: Path, tree: TreeSpec) -> Path:
    """Write a template tree below root.

    Keys are root-relative POSIX paths. A ``None`` value creates an empty
    directory, ``str`` and ``bytes`` values create files.
    """
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in tree.items():
        path = root.joinpath(*rel.split("/"))
        if content is None:
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeSpec, str], Path]:
    """Factory writing a template tree under tmp_path/<name>."""

    def _make(tree: TreeSpec, name: str = "source") -> Path:
        return write_tree(tmp_path / name, tree)

    return _make


@pytest.fixture
def project_tree(make_tree) -> Path:
    """A small project template with templated names and contents."""
    return make_tree(
        {
            "{{project}}/{{project}}.md": "# {{title}}\n",
            "{{project}}/src/__init__.py": '"""{{ title }} package."""\n',
            "README.md": "{{ title }} ({{ project }})\n",
            "docs": None,
        }
    )


@pytest.fixture
def target(tmp_path: Path) -> Path:
    """Not yet existing target directory."""
    return tmp_path / "target"


@pytest.fixture
def project_context() -> dict[str, str]:
    return {"project": "acme", "title": "Acme"}
