"""Command-line interface for xdrgen."""

import argparse
import logging
import os
import sys
import time
from datetime import date
from pathlib import Path

from rich.logging import RichHandler

from .closure import ROOT_MAIN_TYPES
from .config import MAIN_FILE_NAME_ENV
from .errors import XdrGenError
from .generator import XdrGenerator


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the xdrgen CLI."""
    ap = argparse.ArgumentParser(
        prog="xdrgen",
        description="Generate a Rust XDR crate from a parsed XDR schema",
    )
    ap.add_argument("input", help="Input YAML schema file")
    ap.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    ap.add_argument(
        "-o",
        "--output",
        default=Path.cwd() / "generated",
        help="Output directory (relative to invocation directory)",
    )
    ap.add_argument(
        "--main-file",
        default=os.environ.get(MAIN_FILE_NAME_ENV),
        metavar="NAME",
        help=f"Generated file name inside the output directory (also: {MAIN_FILE_NAME_ENV} env var)",
    )
    ap.add_argument(
        "-r",
        "--root",
        action="append",
        dest="roots",
        metavar="TYPE",
        help="Always-compiled root type, may be repeated "
        f"(default: {', '.join(ROOT_MAIN_TYPES)})",
    )
    ap.add_argument(
        "--no-static",
        action="store_true",
        help="Do not copy the static runtime files",
    )
    ap.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        metavar="YYYY-MM-DD",
        help="Generation date stamped into the header (default: today)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Main entry point for xdrgen CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    start_time = time.time()

    args = build_parser().parse_args(argv)

    # Setup logging
    log = logging.getLogger("xdrgen")
    log_level = logging.DEBUG if args.debug else logging.INFO
    log.handlers = [RichHandler(rich_tracebacks=True, show_path=False, show_time=False)]
    log.setLevel(log_level)

    try:
        xdr_gen = XdrGenerator(
            args.output,
            main_file_name=args.main_file,
            roots=args.roots or ROOT_MAIN_TYPES,
            generated_on=args.date,
        )
        xdr_gen.generate_from_file(args.input, copy_static=not args.no_static)
    except (XdrGenError, FileNotFoundError, RuntimeError) as e:
        log.error(f"Generation failed: {e}")
        if args.debug:
            raise
        return 1

    end_time = time.time()
    log.debug(f"Done after {end_time - start_time:.2f} seconds.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
