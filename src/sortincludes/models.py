# src/sortincludes/models.py
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class SortConfig:
    """Immutable run options, built once from the command line."""
    ignore_case: bool = False
    verbose: bool = False
    recursive: bool = False

@dataclass(frozen=True)
class FileResult:
    """Outcome of sorting the includes of one file."""
    path: Path
    changed: bool
    lines_before: int
    lines_after: int
