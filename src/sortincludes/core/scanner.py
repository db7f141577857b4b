# src/sortincludes/core/scanner.py
import sys
import os
from pathlib import Path
from typing import Iterable, Iterator, List

import pathspec

from sortincludes.config import INVALID_FILENAME_CHARS, SOURCE_EXTENSIONS
from sortincludes.core.ignore import is_path_ignored, load_ignore_spec
from sortincludes.models import SortConfig

def match_file(path: Path) -> bool:
    """A regular C/C++ source or header file with a plain filename."""
    if any(c in INVALID_FILENAME_CHARS for c in path.name):
        return False
    return path.suffix in SOURCE_EXTENSIONS and path.is_file()

class FileScanner:
    def __init__(self, config: SortConfig, exclude: Iterable[str] = ()):
        self.config = config
        self.exclude = list(exclude)

    def _warn(self, message: str):
        if self.config.verbose:
            print(message, file=sys.stderr)

    def scan(self, paths: Iterable[str]) -> List[Path]:
        """
        Resolves command-line arguments into an ordered, duplicate-free
        list of files to sort.
        """
        found: List[Path] = []
        for arg in paths:
            path = Path(arg)
            if path.is_dir():
                walker = self._walk(path) if self.config.recursive else self._list(path)
                found.extend(walker)
            elif match_file(path):
                found.append(path)
            else:
                self._warn(f"Unrecognized input '{arg}' will be ignored.")

        # Keep first-seen order
        return list(dict.fromkeys(found))

    def _list(self, directory: Path) -> Iterator[Path]:
        spec = load_ignore_spec(directory, self.exclude)
        try:
            entries = sorted(directory.iterdir())
        except OSError:
            self._warn(f"Cannot open directory '{directory}'")
            return

        for entry in entries:
            if is_path_ignored(entry.relative_to(directory), spec):
                continue
            if match_file(entry):
                yield entry

    def _walk(self, root_dir: Path) -> Iterator[Path]:
        """
        Walks the directory tree, pruning ignored directories,
        and yields matching source files.
        """
        spec: pathspec.PathSpec = load_ignore_spec(root_dir, self.exclude)

        def on_error(error: OSError):
            self._warn(f"Cannot open directory '{error.filename}'")

        for root, dirs, files in os.walk(root_dir, onerror=on_error):
            root_path = Path(root)

            # os.walk only descends into what is left in dirs
            for d in list(dirs):
                dir_rel_path = (root_path / d).relative_to(root_dir)
                if is_path_ignored(dir_rel_path, spec, is_directory=True):
                    dirs.remove(d)
            dirs.sort()

            for f in sorted(files):
                file_abs_path = root_path / f
                if is_path_ignored(file_abs_path.relative_to(root_dir), spec):
                    continue
                if match_file(file_abs_path):
                    yield file_abs_path
