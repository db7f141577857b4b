# src/sortincludes/cli.py
import sys
import argparse

# Module imports
from sortincludes.config import VERSION
from sortincludes.core.rewriter import sort_files
from sortincludes.core.scanner import FileScanner
from sortincludes.models import SortConfig

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="sortincludes",
        description="Sort consecutive #include lines in C/C++ source files in place, dropping duplicates."
    )
    parser.add_argument("paths", nargs="*", help="Files and/or directories to process")
    parser.add_argument("-i", "--ignore-case", action="store_true", help="Compare include lines case-insensitively")
    parser.add_argument("-r", "--recursive", action="store_true", help="Descend into subdirectories")
    parser.add_argument("-v", "--verbose", action="store_true", help="Report sorted files and warnings")
    parser.add_argument(
        "-e", "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern to skip while scanning directories (repeatable)"
    )
    parser.add_argument("--check", action="store_true", help="Don't write; exit 1 if any file would change")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        if not args.paths:
            print("Error: No input files or directories given.", file=sys.stderr)
            sys.exit(1)

        config = SortConfig(
            ignore_case=args.ignore_case,
            verbose=args.verbose,
            recursive=args.recursive,
        )

        # 2. Discovery
        scanner = FileScanner(config, exclude=args.exclude)
        files = scanner.scan(args.paths)

        if not files:
            if config.verbose:
                print("No matching files found.")
            return

        # 3. Sorting
        results = sort_files(files, config, dry_run=args.check)
        changed = [r for r in results if r.changed]

        if args.check:
            for r in changed:
                print(f"Would sort includes for '{r.path}'")

        if config.verbose:
            print(f"Processed {len(results)} file(s), {len(changed)} changed.")

        if args.check and changed:
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
