from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .console import RichLogger
from .input_sources import InputError, SourceNotFoundError, validate_source
from .results import ResultReporter, ResultWriter
from .scanner import Scanner

EXIT_OK = 0
EXIT_FAILURE = 1


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="phrasehunter",
        description=(
            "Find phrases wrapped as @[static#...] or @[static-header#...] that also "
            "appear unwrapped elsewhere in the same file, ignoring HTML-like tags."
        ),
    )
    ap.add_argument("path", help="Path to the text file to scan.")
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON on stdout (logs go to stderr).",
    )
    ap.add_argument(
        "--output",
        help="Also write the JSON report to this file.",
    )
    ap.add_argument(
        "--keep-tags",
        action="store_true",
        help="Do not blank out <...> spans before searching.",
    )
    ap.add_argument(
        "--encoding",
        help="Text encoding of the file (default: detect BOM, else UTF-8).",
    )
    ap.add_argument(
        "--fail-on-unwrapped",
        action="store_true",
        help="Exit with status 1 when any unwrapped occurrence is found.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Verbose debug logs")
    return ap


def run_scan(args) -> int:
    console = Console(stderr=args.json)
    logger = RichLogger(console=console, verbose=args.verbose)

    try:
        source = validate_source(args.path)
    except SourceNotFoundError as exc:
        logger.error(str(exc))
        return EXIT_FAILURE

    logger.info(f"Searching for unwrapped phrases in: '{source}'")
    scanner = Scanner(logger=logger, strip_tags=not args.keep_tags, encoding=args.encoding)
    try:
        store, summary = scanner.run(source)
    except InputError as exc:
        logger.error(str(exc))
        return EXIT_FAILURE

    if args.json:
        ResultReporter(Console()).report_json(store, summary)
    else:
        ResultReporter(console).report(store)

    if args.output:
        try:
            ResultWriter(Path(args.output), logger).write(store, summary)
        except (OSError, ValueError) as exc:
            logger.error(f"Failed to write report {args.output}: {exc}")
            return EXIT_FAILURE

    if args.fail_on_unwrapped and store:
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    return run_scan(args)


if __name__ == "__main__":
    sys.exit(main())
