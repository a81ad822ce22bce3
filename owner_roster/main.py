"""
Command-line entry point for owner roster extraction.

Examples:
  owner-roster                              # input.html -> owners/owner_data.json
  owner-roster --input a.html b.html        # several pages, one JSON object
  owner-roster --output-dir out --no-print
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from owner_roster.config import get_settings
from owner_roster.exceptions import OwnerInputError
from owner_roster.services.owner_document import (
    merge_owner_documents,
    process_owner_html,
    write_owner_document,
)
from owner_roster.utils.logging_config import configure_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Resolve property owner names into a typed owner roster")
    parser.add_argument(
        "--input",
        nargs="+",
        type=Path,
        default=[settings.input_path],
        help=f"Property page HTML file(s) (default: {settings.input_path})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.output_dir,
        help=f"Directory for {settings.output_file} (default: {settings.output_dir})",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", default=None, help="Also log to logs/<LOG_FILE>")
    parser.add_argument(
        "--print",
        dest="print_json",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Print the resulting JSON to stdout",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logger(level=args.log_level, log_file=args.log_file)
    settings = get_settings()

    try:
        # Each page is an independent pipeline run with its own dedup set
        documents = [process_owner_html(path) for path in args.input]
    except OwnerInputError as e:
        logger.error(str(e))
        return 1

    document = merge_owner_documents(documents)
    write_owner_document(document, args.output_dir / settings.output_file)

    if args.print_json:
        print(json.dumps(document, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
