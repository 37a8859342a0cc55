"""Domain models for a schablone build."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BuildRequest(BaseModel):
    """Everything the materializer needs for one build."""

    model_config = ConfigDict(frozen=True)

    source_root: Path = Field(..., description="Template tree to render")
    target_root: Path = Field(..., description="Freshly created output root")
    context: dict[str, Any] = Field(
        default_factory=dict, description="Merged template parameters"
    )
    dry_run: bool = Field(default=False, description="Render without writing")
    file_mode: int = Field(default=0o644, description="File permissions (octal)")
