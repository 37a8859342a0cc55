"""Error types raised while building a schablone."""

from __future__ import annotations

from pathlib import Path


class SchabloneError(Exception):
    """Base class for all schablone errors."""


class FatalBuildError(SchabloneError):
    """Raised for failures that abort the whole build."""


class TemplateError(SchabloneError):
    """A template could not be compiled or rendered."""


class CompileError(TemplateError, FatalBuildError):
    """A file under the source root is not a valid template."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Failed to compile template '{key}': {reason}")


class RenderError(TemplateError):
    """A template string or compiled template failed to render."""


class ProcessingError(SchabloneError):
    """A file or directory name could not be rendered or created."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Failed to process file or directory: {name}")


class FileError(SchabloneError):
    """A target file could not be created or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to create file '{path}': {reason}")


class TargetRootError(FatalBuildError):
    """The target root already exists or cannot be created."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to create directory '{path}': {reason}")
