# src/sortincludes/core/sorter.py
from typing import List, Optional, Tuple

from sortincludes.core.classifier import dedup_key, is_include, sort_key
from sortincludes.models import SortConfig

_TERMINATORS = ("\r\n", "\n", "\r")

def _terminator_of(line: str) -> str:
    for terminator in _TERMINATORS:
        if line.endswith(terminator):
            return terminator
    return ""

class BlockSorter:
    """
    Sorts every run of consecutive #include lines in a file's content.
    Non-include lines are passed through in place.
    """

    def __init__(self, config: Optional[SortConfig] = None):
        self.config = config or SortConfig()

    def process(self, lines: List[str]) -> Tuple[List[str], bool]:
        """
        Returns the rewritten lines and whether any include block changed.
        """
        output: List[str] = []
        pending: List[str] = []
        changed = False

        for line in lines:
            if is_include(line):
                pending.append(line)
                continue
            changed |= self._flush(pending, output)
            pending = []
            output.append(line)

        changed |= self._flush(pending, output)
        return output, changed

    def _flush(self, pending: List[str], output: List[str]) -> bool:
        # A lone include is never reordered or counted as a change
        if len(pending) <= 1:
            output.extend(pending)
            return False

        block, changed = self.resolve_block(pending)
        output.extend(block)
        return changed

    def resolve_block(self, block: List[str]) -> Tuple[List[str], bool]:
        """
        Drops duplicate includes (first occurrence wins) and sorts the rest.

        The block counts as changed when a duplicate was removed or the
        sort had to correct an actual inversion. Lines with equal keys keep
        their relative order and never count as a change.
        """
        # Only the last line of a file can lack a terminator. Borrow one
        # from the block so a reordered line is not glued to the next.
        unterminated = not _terminator_of(block[-1])
        if unterminated:
            newline = next((_terminator_of(line) for line in block if _terminator_of(line)), "\n")
            block = block[:-1] + [block[-1] + newline]

        seen = set()
        unique: List[str] = []
        for line in block:
            key = dedup_key(line)
            if key in seen:
                continue
            seen.add(key)
            unique.append(line)

        keys = [sort_key(line, self.config.ignore_case) for line in unique]
        inverted = any(a > b for a, b in zip(keys, keys[1:]))
        changed = inverted or len(unique) < len(block)

        if inverted:
            unique = [line for _, line in sorted(zip(keys, unique), key=lambda pair: pair[0])]

        if unterminated:
            last = unique[-1]
            unique[-1] = last[: len(last) - len(_terminator_of(last))]

        return unique, changed
