# src/sortincludes/config.py

VERSION = "0.1.0"

SOURCE_EXTENSIONS = {".c", ".h", ".cpp", ".hpp"}

# Characters that may not appear in the filename portion of a target
INVALID_FILENAME_CHARS = set('\\/:*?"<>|')

IGNORE_FILE_NAME = ".sortignore"

DEFAULT_IGNORE_PATTERNS = [
    ".git/",
    ".svn/",
    ".hg/",
]
