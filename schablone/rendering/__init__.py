"""Template compilation and rendering."""

from .engine import CompiledTemplates, compile_templates, create_environment
from .paths import render_pathname, target_path, template_key

__all__ = [
    "CompiledTemplates",
    "compile_templates",
    "create_environment",
    "render_pathname",
    "target_path",
    "template_key",
]
