"""
Entry point for the lpvet command.

Usage:
    lpvet f.lp [f.lp...]
    lpvet --warn f.lp [f.lp...]
    python -m lpvet.cli --warn f.lp

Exit status: 0 if nothing was issued, 1 if any error or warning was
issued, 2 on a usage error. Unreadable or malformed files are reported
but do not change the exit status.
"""

import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from ..api import vet_file
from ..config import load_settings
from .reporter import DiagnosticReporter

USAGE = "usage: lpvet f.lp [f.lp...]"
OPTIONS_HELP = "  -warn, --warn\n        issue warnings in addition to errors"

EXIT_OK = 0
EXIT_ISSUED = 1
EXIT_USAGE = 2

_WARN_FLAGS = ("-warn", "--warn")
_BOOL_VALUES = {"1": True, "t": True, "true": True, "0": False, "f": False, "false": False}


class UsageError(Exception):
    """Bad command line."""
    pass


def parse_args(args: List[str], issue_warnings: bool = False):
    """
    Split the command line into (issue_warnings, paths).

    Options are only recognized before the first path.
    """
    paths: List[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--":
            paths.extend(args[i + 1:])
            break
        if not arg.startswith("-") or arg == "-":
            paths.extend(args[i:])
            break

        name, _, value = arg.partition("=")
        if name in _WARN_FLAGS:
            if not value:
                issue_warnings = True
            elif value.lower() in _BOOL_VALUES:
                issue_warnings = _BOOL_VALUES[value.lower()]
            else:
                raise UsageError(f"invalid boolean value {value!r} for {name}")
        elif name in ("-h", "--help", "-help"):
            raise UsageError("")
        else:
            raise UsageError(f"flag provided but not defined: {arg}")
        i += 1

    if not paths:
        raise UsageError("")
    return issue_warnings, paths


def usage(message: str = "") -> int:
    if message:
        print(message, file=sys.stderr)
    print(USAGE, file=sys.stderr)
    print(OPTIONS_HELP, file=sys.stderr)
    return EXIT_USAGE


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    try:
        settings = load_settings()
    except ValidationError as e:
        return usage(f"invalid configuration: {e}")
    logging.basicConfig(level=settings.log_level, format="%(name)s: %(message)s")

    args = sys.argv[1:] if argv is None else argv
    try:
        issue_warnings, paths = parse_args(args, issue_warnings=settings.issue_warnings)
    except UsageError as e:
        return usage(str(e))

    reporter = DiagnosticReporter()
    issued = False
    for path in paths:
        result = vet_file(path, issue_warnings=issue_warnings)
        reporter.report(result)
        issued = issued or result.issued

    return EXIT_ISSUED if issued else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
