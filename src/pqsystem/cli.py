"""
Command line entry point for the pq-system decision procedure.

Strings starting with a hyphen look like options to argparse; put them
after ``--``::

    pqsystem decide -- -p-q-- pq- xyz
"""

from __future__ import annotations

import argparse
import json
import sys
from importlib.metadata import PackageNotFoundError, version

from loguru import logger

from .classifier import classify_all
from .inputs import load_inputs
from .logging import configure_logging
from .render import render_table

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pqsystem",
        description="pq-system CLI: decide validity, axiom and theorem membership.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the installed pqsystem version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Emit logs to stderr (-v for INFO, -vv for DEBUG).",
    )
    parser.add_argument(
        "--log-level",
        help="Explicit log level (overrides -v).",
    )
    subparsers = parser.add_subparsers(dest="command")
    decide = subparsers.add_parser(
        "decide",
        help="Classify candidate strings of the pq-system.",
        epilog="Put strings starting with '-' after '--'.",
    )
    decide.add_argument(
        "--file",
        help="Text file with one candidate string per line (read after positional strings).",
    )
    decide.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON array instead of a table.",
    )
    decide.add_argument(
        "strings",
        nargs="*",
        help="Candidate strings.",
    )
    return parser


def _tolerate_unencodable_output() -> None:
    """Escape characters stdout cannot encode, such as surrogate-escaped argv bytes."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="backslashreplace")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, verbosity=args.verbose)

    if args.version:
        try:
            print(version("pqsystem"))
        except PackageNotFoundError:
            print("pqsystem (not installed)")
        return 0

    if args.command == "decide":
        if not args.strings and args.file is None:
            parser.error("decide requires at least one string or --file")

        texts = list(args.strings)
        if args.file is not None:
            try:
                texts.extend(load_inputs(args.file))
            except (FileNotFoundError, UnicodeDecodeError) as exc:
                logger.error(f"Failed to load input file: {exc}")
                return 1

        results = classify_all(texts)
        _tolerate_unencodable_output()
        if args.json:
            print(json.dumps([r.model_dump(mode="json") for r in results], ensure_ascii=False, indent=2))
        else:
            print(render_table(results), end="")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
