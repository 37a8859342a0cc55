"""CLI argument parsers and validators."""

from __future__ import annotations

import logging

import typer


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_log_level(value: str) -> int:
    """Parse a logging level name such as ``INFO`` or ``debug``."""
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Invalid log level: {value!r}")
    return level
