"""File I/O operations for rendering."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..core.errors import FileError


def atomic_write_bytes(path: Path, data: bytes, mode: int = 0o644) -> None:
    """Write bytes to a new file atomically using a temporary file.

    The parent directory must already exist.

    Args:
        path: Destination file path
        data: Content to write
        mode: File permissions (octal)

    Raises:
        FileError: If the file cannot be created or written
    """
    if not path.parent.is_dir():
        raise FileError(path, "parent directory does not exist")

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=".schablone-", dir=str(path.parent))
    except OSError as e:
        raise FileError(path, str(e)) from e

    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    except OSError as e:
        raise FileError(path, str(e)) from e
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
