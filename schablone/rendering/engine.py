"""Template compilation and rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from ..core.errors import CompileError, RenderError

logger = logging.getLogger(__name__)

# Errors an expression can raise while being evaluated against the context
_EVALUATION_ERRORS = (ArithmeticError, LookupError, TypeError, ValueError)


def create_environment(source_root: Path) -> Environment:
    """Create the Jinja2 environment rooted at a template tree.

    Args:
        source_root: Directory holding the template tree

    Returns:
        Environment whose loader resolves root-relative template keys
    """
    return Environment(
        loader=FileSystemLoader(str(source_root), followlinks=True),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class CompiledTemplates:
    """Immutable set of precompiled content templates.

    Templates are keyed by their POSIX path relative to the source root.
    One-off strings such as path names are rendered through the same
    environment but never looked up or stored.
    """

    def __init__(self, environment: Environment, templates: Mapping[str, Template]):
        self._environment = environment
        self._templates = MappingProxyType(dict(templates))

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def keys(self) -> list[str]:
        return list(self._templates)

    def render_string(self, raw_text: str, context: Mapping[str, Any]) -> str:
        """Render a one-off template string.

        Raises:
            RenderError: On invalid syntax or undefined variables
        """
        try:
            result = self._environment.from_string(raw_text).render(context)
        except jinja2.TemplateError as e:
            raise RenderError(f"Failed to render '{raw_text}': {e}") from e
        except _EVALUATION_ERRORS as e:
            raise RenderError(f"Failed to evaluate '{raw_text}': {e}") from e
        logger.debug(f"Render result: {result}")
        return result

    def render_named(self, key: str, context: Mapping[str, Any]) -> str:
        """Render a precompiled template by its root-relative key.

        Raises:
            RenderError: On unknown keys, undefined variables or evaluation errors
        """
        template = self._templates.get(key)
        if template is None:
            raise RenderError(f"Template '{key}' not found")
        try:
            return template.render(context)
        except jinja2.TemplateError as e:
            raise RenderError(f"Failed to template '{key}': {e}") from e
        except _EVALUATION_ERRORS as e:
            raise RenderError(f"Failed to template '{key}': {e}") from e


def compile_templates(source_root: Path) -> CompiledTemplates:
    """Compile every file under the source root into a template set.

    Args:
        source_root: Directory holding the template tree

    Returns:
        Compiled template set keyed by root-relative POSIX paths

    Raises:
        CompileError: If any file is not a valid UTF-8 Jinja2 template
    """
    if not source_root.is_dir():
        raise CompileError(str(source_root), "template directory not found")

    logger.info(f"Parsing schablone from {source_root}")
    environment = create_environment(source_root)

    templates: dict[str, Template] = {}
    for key in environment.list_templates():
        try:
            templates[key] = environment.get_template(key)
        except jinja2.TemplateSyntaxError as e:
            raise CompileError(key, f"line {e.lineno}: {e.message}") from e
        except UnicodeDecodeError as e:
            raise CompileError(key, f"not a UTF-8 text file ({e.reason})") from e

    logger.debug(f"Compiled {len(templates)} template(s): {sorted(templates)}")
    return CompiledTemplates(environment, templates)
