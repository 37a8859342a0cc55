"""Rendering of file and directory names."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Any, Mapping

from ..core.errors import ProcessingError, RenderError
from .engine import CompiledTemplates

logger = logging.getLogger(__name__)


def template_key(path: Path, source_root: Path) -> str:
    """Return the root-relative POSIX key of a path inside the source tree."""
    return path.relative_to(source_root).as_posix()


def render_pathname(
    path: Path,
    source_root: Path,
    templates: CompiledTemplates,
    context: Mapping[str, Any],
) -> str:
    """Render a path's root-relative name as a one-off template string.

    Used identically for directories and files. The name is never looked up
    in the compiled set.

    Raises:
        ProcessingError: Carrying the path's last component on render failure
    """
    pathname = template_key(path, source_root)
    try:
        rendered = templates.render_string(pathname, context)
    except RenderError as e:
        logger.error(f"Failed to render pathname '{pathname}': {e}")
        raise ProcessingError(path.name) from e
    return rendered


def target_path(target_root: Path, rendered: str, name: str) -> Path:
    """Join a rendered pathname onto the target root.

    Raises:
        ProcessingError: If the rendered path would leave the target root or
            cannot be represented as a file system name
    """
    try:
        os.fsencode(rendered)
    except UnicodeEncodeError as e:
        logger.error(f"Rendered path {rendered!r} is not a valid file name: {e.reason}")
        raise ProcessingError(name) from e

    pure = PurePosixPath(rendered)
    if pure.is_absolute() or ".." in pure.parts:
        logger.error(f"Rendered path '{rendered}' escapes the target directory")
        raise ProcessingError(name)
    return target_root.joinpath(*pure.parts)
