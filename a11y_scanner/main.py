"""Single-file accessibility scan CLI.

Usage: a11y-scan <file-path> [--structured]

Exit codes: 0 no violations, 3 violations found, 1 execution error.
"""

import argparse
import sys
from typing import List, Optional

from a11y_scanner.classifier import SUPPORTED_EXTENSIONS
from a11y_scanner.engine import scan_file
from a11y_scanner.errors import ScanError
from a11y_scanner.report import format_human, format_structured

EXIT_CLEAN = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_VIOLATIONS = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="a11y-scan",
        description=(
            "Analyze a file for accessibility violations. "
            f"Supports: {', '.join(SUPPORTED_EXTENSIONS)}"
        ),
        epilog=(
            "Exit codes: 0 = no violations, 3 = violations found, "
            "1 = error (file not found, etc.)"
        ),
    )
    parser.add_argument("file_path", nargs="?", help="file to analyze")
    parser.add_argument(
        "--structured", "--json",
        dest="structured",
        action="store_true",
        help="output results as JSON for CI/CD integration",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args, _ = parser.parse_known_args(argv)

    if not args.file_path:
        parser.print_help()
        sys.exit(EXIT_CLEAN)

    try:
        result = scan_file(args.file_path)
    except ScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    if args.structured:
        print(format_structured(result))
    else:
        print(format_human(result))

    sys.exit(EXIT_VIOLATIONS if result.has_violations else EXIT_CLEAN)


if __name__ == "__main__":
    main()
