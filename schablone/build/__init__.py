"""Tree materialization and build orchestration."""

from .materializer import FileProcessor, TreeMaterializer
from .orchestrator import build, new_schablone

__all__ = ["FileProcessor", "TreeMaterializer", "build", "new_schablone"]
