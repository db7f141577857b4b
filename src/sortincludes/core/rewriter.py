# src/sortincludes/core/rewriter.py
import sys
from pathlib import Path
from typing import Iterable, List

from sortincludes.core.sorter import BlockSorter
from sortincludes.models import FileResult, SortConfig

def sort_file(path: Path, config: SortConfig, dry_run: bool = False) -> FileResult:
    """
    Sorts the include blocks of one file in place.
    The file is only written when something changed, so an already
    sorted file keeps its modification time.
    """
    sorter = BlockSorter(config)

    # newline="" keeps each line's original terminator
    mode = "r" if dry_run else "r+"
    with open(path, mode, encoding="utf-8", errors="surrogateescape", newline="") as f:
        lines = f.readlines()
        new_lines, changed = sorter.process(lines)

        if changed and not dry_run:
            f.seek(0)
            f.truncate()
            f.writelines(new_lines)

    return FileResult(
        path=path,
        changed=changed,
        lines_before=len(lines),
        lines_after=len(new_lines),
    )

def sort_files(paths: Iterable[Path], config: SortConfig, dry_run: bool = False) -> List[FileResult]:
    """Sorts each file in turn; a file that cannot be read or written is skipped."""
    results: List[FileResult] = []
    for path in paths:
        try:
            result = sort_file(path, config, dry_run=dry_run)
        except OSError as e:
            if config.verbose:
                print(f"Could not open '{path}': {e}", file=sys.stderr)
            continue

        if result.changed and config.verbose and not dry_run:
            print(f"Sorted includes for '{path}'")
        results.append(result)
    return results
