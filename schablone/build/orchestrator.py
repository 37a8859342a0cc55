"""Top-level build entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from ..context import build_context
from ..core.errors import SchabloneError, TargetRootError
from ..core.models import BuildRequest
from ..rendering.engine import compile_templates
from .materializer import FileProcessor, TreeMaterializer

logger = logging.getLogger(__name__)


def create_target_root(target: Path) -> None:
    """Create the target root, which must not exist yet.

    Raises:
        TargetRootError: If the directory exists or cannot be created
    """
    logger.info(f"Creating target directory '{target}'")
    try:
        target.mkdir()
    except OSError as e:
        raise TargetRootError(target, e.strerror or str(e)) from e


def build(
    source_name: Path | str,
    target_name: Path | str,
    inline_params: str | None = None,
    params_file_path: Path | str | None = None,
    dry_run: bool = False,
    file_mode: int = 0o644,
) -> BuildRequest:
    """Build a schablone from a template tree into a new target directory.

    Target-root creation and template compilation failures are fatal and
    raised before anything is rendered. Failures of individual entries are
    logged and skipped, so the target tree may be left partially populated.

    Args:
        source_name: Directory holding the template tree
        target_name: Directory to create for the output
        inline_params: Comma-separated KEY=VALUE pairs, overriding the file
        params_file_path: JSON file with template parameters
        dry_run: Render everything without touching the target tree
        file_mode: File permissions for written files

    Returns:
        The request the tree was materialized with

    Raises:
        TargetRootError: If the target root exists or cannot be created
        CompileError: If any template under the source root is invalid
    """
    source_root = Path(source_name)
    target_root = Path(target_name)

    create_target_root(target_root)

    context = build_context(params_file_path, inline_params)
    templates = compile_templates(source_root)

    request = BuildRequest(
        source_root=source_root,
        target_root=target_root,
        context=context,
        dry_run=dry_run,
        file_mode=file_mode,
    )

    materializer = TreeMaterializer(
        templates,
        request.context,
        dry_run=request.dry_run,
        file_processor=FileProcessor(file_mode=request.file_mode),
    )
    try:
        materializer.process_directory(
            request.source_root, request.source_root, request.target_root
        )
    except SchabloneError as e:
        logger.error(f"Failed to run schablone: {e}")

    logger.info(f"Finished building '{source_root}' into '{target_root}'")
    return request


def new_schablone(name: Path | str) -> Path:
    """Create an empty directory to start a new template tree.

    Raises:
        TargetRootError: If the directory exists or cannot be created
    """
    path = Path(name)
    logger.info(f"Creating schablone directory '{path}'")
    try:
        path.mkdir()
    except OSError as e:
        raise TargetRootError(path, e.strerror or str(e)) from e
    return path
