"""Tests for file output helpers (schablone.rendering.io)."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from schablone.core.errors import FileError
from schablone.rendering.io import atomic_write_bytes


def test_writes_bytes_with_mode(tmp_path: Path):
    path = tmp_path / "out.txt"
    atomic_write_bytes(path, "grüße\n".encode("utf-8"), mode=0o600)

    assert path.read_bytes() == "grüße\n".encode("utf-8")
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_leaves_no_temporary_files(tmp_path: Path):
    atomic_write_bytes(tmp_path / "out.txt", b"data")
    assert [p.name for p in tmp_path.iterdir()] == ["out.txt"]


def test_missing_parent_raises(tmp_path: Path):
    with pytest.raises(FileError) as exc_info:
        atomic_write_bytes(tmp_path / "missing" / "out.txt", b"data")

    assert exc_info.value.path == tmp_path / "missing" / "out.txt"


def test_existing_directory_raises(tmp_path: Path):
    (tmp_path / "taken").mkdir()

    with pytest.raises(FileError):
        atomic_write_bytes(tmp_path / "taken", b"data")

    assert [p.name for p in tmp_path.iterdir()] == ["taken"]


def test_accepts_names_near_the_length_limit(tmp_path: Path):
    path = tmp_path / ("n" * 250 + ".txt")
    atomic_write_bytes(path, b"long")

    assert path.read_bytes() == b"long"
    assert [p.name for p in tmp_path.iterdir()] == [path.name]
