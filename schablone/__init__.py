"""Schablone - build project trees from Jinja2 template directories.

Directory names, file names and file contents of a template tree are all
rendered against one parameter context.
"""

__version__ = "0.3.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
