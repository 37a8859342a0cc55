"""Template parameter parsing and merging."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_EMPTY_OBJECT = "{}"


def _read_text(path: Path | str | None) -> str:
    if not path:
        return _EMPTY_OBJECT
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read parameters file '{path}': {e}")
        return _EMPTY_OBJECT


def parse_file(path: Path | str | None) -> dict[str, Any]:
    """Parse a JSON file containing template parameters.

    A missing or unreadable file is treated as an empty object. Malformed JSON,
    or JSON whose top level is not an object, yields an empty context.

    Args:
        path: Path to the JSON parameters file

    Returns:
        Context dictionary with one entry per top-level key
    """
    logger.info(f"Parsing context from file: '{path or ''}'")
    text = _read_text(path)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse JSON parameters from '{path}': {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(
            f"Parameters file '{path}' must contain a JSON object, "
            f"got {type(data).__name__}"
        )
        return {}

    logger.debug(f"Parsed JSON: {data!r}")
    return data


def parse_inline(pairs: str | None) -> dict[str, str]:
    """Parse parameters given as ``KEY1=VALUE1,KEY2=VALUE2,...``.

    Each pair is split on its first ``=`` only, so values may contain ``=``.
    Pairs without ``=`` or without a key are skipped with a warning.

    Args:
        pairs: Comma-separated KEY=VALUE pairs

    Returns:
        Context dictionary with string values
    """
    logger.info(f"Parsing context from parameters: '{pairs or ''}'")
    context: dict[str, str] = {}
    if not pairs:
        return context

    for pair in pairs.split(","):
        key, sep, value = pair.partition("=")
        if not sep or not key:
            logger.warning(f"Invalid key-value pair: {pair!r}")
            continue

        logger.debug(f"Inserting key=value pair: {key}={value}")
        context[key] = value

    return context


def merge(
    file_context: Mapping[str, Any], inline_context: Mapping[str, Any]
) -> dict[str, Any]:
    """Merge file parameters with inline parameters.

    Inline parameters take precedence over file parameters sharing a key.
    """
    context: dict[str, Any] = dict(file_context)
    overridden = sorted(set(file_context) & set(inline_context))
    if overridden:
        logger.debug(f"Inline parameters override file parameters: {overridden}")
    context.update(inline_context)
    return context


def build_context(
    params_file: Path | str | None, inline_params: str | None
) -> dict[str, Any]:
    """Build the final rendering context for a build.

    Returns:
        Context dictionary shared by every render call
    """
    context = merge(parse_file(params_file), parse_inline(inline_params))
    logger.debug(f"Context: {context!r}")
    return context
