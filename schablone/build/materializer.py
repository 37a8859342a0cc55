"""Recursive materialization of a template tree.

Every directory and file under the source root is rendered in preorder: a
directory's name is rendered (and the directory created) before any of its
children are visited. A failing entry is logged and skipped; its siblings and
the rest of the tree are still processed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from ..core.errors import FileError, ProcessingError, SchabloneError, TemplateError
from ..rendering.engine import CompiledTemplates
from ..rendering.io import atomic_write_bytes
from ..rendering.paths import render_pathname, target_path, template_key

logger = logging.getLogger(__name__)


class FileProcessor:
    """Renders one template file and writes it to the target tree."""

    def __init__(self, file_mode: int = 0o644) -> None:
        self.file_mode = file_mode

    def process_file(
        self,
        entry: Path,
        source_root: Path,
        target_root: Path,
        templates: CompiledTemplates,
        context: Mapping[str, Any],
        dry_run: bool,
    ) -> Path:
        """Render the file's name and content, then write it unless dry-running.

        Returns:
            Path of the (possibly unwritten) target file

        Raises:
            ProcessingError: If the file name cannot be rendered
            TemplateError: If the content cannot be rendered
            FileError: If the content cannot be encoded or the file cannot be written
        """
        key = template_key(entry, source_root)
        logger.debug(f"Path: {key}")

        rendered_name = render_pathname(entry, source_root, templates, context)
        destination = target_path(target_root, rendered_name, entry.name)

        try:
            content = templates.render_named(key, context)
        except TemplateError as e:
            logger.error(f"Failed to template '{key}': {e}")
            raise

        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.error(f"Rendered content of '{key}' is not valid UTF-8: {e}")
            raise FileError(destination, f"content is not valid UTF-8 ({e.reason})") from e

        if dry_run:
            logger.info(f"[dry-run] Would render {key} → {destination}")
            return destination

        try:
            atomic_write_bytes(destination, data, mode=self.file_mode)
        except FileError as e:
            logger.error(f"Failed to create file '{rendered_name}': {e}")
            raise

        logger.info(f"Rendered {key} → {destination}")
        return destination


class TreeMaterializer:
    """Walks a source tree and materializes it under a target root."""

    def __init__(
        self,
        templates: CompiledTemplates,
        context: Mapping[str, Any],
        *,
        dry_run: bool = False,
        file_processor: FileProcessor | None = None,
    ) -> None:
        self.templates = templates
        self.context = context
        self.dry_run = dry_run
        self.file_processor = file_processor or FileProcessor()

    def process_directory(
        self, directory: Path, source_root: Path, target_root: Path
    ) -> None:
        """Materialize a directory and, recursively, everything below it.

        The source root itself maps onto the already existing target root.

        Raises:
            ProcessingError: If this directory's name cannot be rendered, the
                target directory cannot be created or its entries listed.
                Failures of children are logged and never raised.
        """
        if directory == source_root:
            target_dir = target_root
        else:
            rendered = render_pathname(directory, source_root, self.templates, self.context)
            target_dir = target_path(target_root, rendered, directory.name)
            self._create_directory(target_dir, rendered)

        try:
            children = sorted(directory.iterdir())
        except OSError as e:
            logger.error(f"Failed to list directory '{directory}': {e}")
            raise ProcessingError(directory.name) from e

        for child in children:
            self._visit(child, source_root, target_root)

    def _process_file(self, entry: Path, source_root: Path, target_root: Path) -> None:
        self.file_processor.process_file(
            entry, source_root, target_root, self.templates, self.context, self.dry_run
        )

    def _process_entry(self, entry: Path, source_root: Path, target_root: Path) -> None:
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            logger.error(f"Failed to inspect '{entry}': {e}")
            raise ProcessingError(entry.name) from e

        if is_dir:
            self.process_directory(entry, source_root, target_root)
        else:
            self._process_file(entry, source_root, target_root)

    def _visit(self, entry: Path, source_root: Path, target_root: Path) -> None:
        try:
            self._process_entry(entry, source_root, target_root)
        except SchabloneError as e:
            logger.error(f"Failed to process entry '{entry}': {e}")

    def _create_directory(self, target_dir: Path, rendered: str) -> None:
        if self.dry_run:
            logger.info(f"[dry-run] Would create directory {target_dir}")
            return
        try:
            target_dir.mkdir()
        except (OSError, ValueError) as e:
            logger.error(f"Failed to create directory '{rendered}': {e}")
            raise ProcessingError(rendered) from e
        logger.debug(f"Created directory {target_dir}")
