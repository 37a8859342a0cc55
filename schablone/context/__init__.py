"""Template parameter context construction."""

from .builder import build_context, merge, parse_file, parse_inline

__all__ = ["build_context", "merge", "parse_file", "parse_inline"]
