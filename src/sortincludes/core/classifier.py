# src/sortincludes/core/classifier.py
import re

INCLUDE_RE = re.compile(r'^\s*#include\s+[<"]')

# Only the directive's own literal counts, never later text on the line.
_DELIMITED_RE = re.compile(r'^\s*#include\s+(?:<([^>]*)>|"([^"]*)")')
_UNTERMINATED_RE = re.compile(r'^\s*#include\s+[<"](.*)')

def is_include(line: str) -> bool:
    """True if the line is an #include directive using <...> or "..."."""
    return INCLUDE_RE.match(line) is not None

def sort_key(line: str, ignore_case: bool = False) -> str:
    """Key used to order include lines: the line without leading whitespace."""
    key = line.lstrip()
    return key.lower() if ignore_case else key

def dedup_key(line: str) -> str:
    """
    Returns the header path between the include delimiters.
    A missing closing delimiter falls back to the rest of the line,
    so malformed includes still dedup against identical ones.
    """
    match = _DELIMITED_RE.match(line)
    if match:
        return match.group(1) if match.group(1) is not None else match.group(2)

    match = _UNTERMINATED_RE.match(line)
    if match:
        return match.group(1).rstrip()
    return line.strip()
