# src/sortincludes/core/ignore.py
import sys
from pathlib import Path
from typing import Iterable, List, Optional
import pathspec
from sortincludes.config import DEFAULT_IGNORE_PATTERNS, IGNORE_FILE_NAME

def _valid_patterns(lines: Iterable[str]) -> List[str]:
    """Drops patterns pathspec cannot parse, warning about each one."""
    valid = []
    for line in lines:
        try:
            pathspec.PathSpec.from_lines("gitwildmatch", [line])
        except ValueError as e:
            print(f"Warning: Ignoring invalid pattern '{line}': {e}", file=sys.stderr)
            continue
        valid.append(line)
    return valid

def load_ignore_spec(root_dir: Path, extra_patterns: Optional[Iterable[str]] = None) -> pathspec.PathSpec:
    """
    Loads rules from <root_dir>/.sortignore and creates a PathSpec object.
    Built-in VCS patterns come first, command-line patterns last.
    A bad pattern is dropped on its own; the remaining rules still apply.
    """
    lines = list(DEFAULT_IGNORE_PATTERNS)

    ignore_file = root_dir / IGNORE_FILE_NAME
    if ignore_file.is_file():
        try:
            with open(ignore_file, "r", encoding="utf-8") as f:
                lines.extend(f.read().splitlines())
        except OSError as e:
            print(f"Warning: Could not read {ignore_file}: {e}", file=sys.stderr)

    if extra_patterns:
        lines.extend(extra_patterns)

    return pathspec.PathSpec.from_lines("gitwildmatch", _valid_patterns(lines))

def is_path_ignored(rel_path: Path, spec: pathspec.PathSpec, is_directory: bool = False) -> bool:
    """Matches a path relative to the scan root; directories get a trailing '/'."""
    candidate = rel_path.as_posix()
    if is_directory:
        candidate += "/"
    return spec.match_file(candidate)
