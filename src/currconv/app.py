# src/currconv/app.py
"""
Application Entry Point - Command Line Converter

This module serves as the composition root for currconv. It configures
logging from settings, loads the rate snapshot once and converts the
amount given on the command line.

    currconv 100 USD CAD
    currconv 100 EUR USD --rates-file ./rates.json

Exit codes: 0 on success, 1 when the rates file cannot be loaded,
2 when the conversion request is rejected or the arguments are invalid.

Files that USE this module:
- currconv.__main__ (python -m currconv)
- the currconv console script (pyproject.toml)

Files that this module USES:
- currconv.shared.logging_conf (setup_logging for logging configuration)
- currconv.config (settings for rates file and logging)
- currconv.adapters.persistence.rates_file (load_rate_table)
- currconv.application.converter (convert)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line argument parsing
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import Optional, Sequence  # Type hints

from currconv import __version__
from currconv.shared.logging_conf import setup_logging  # Configure logging with file rotation
from currconv.shared.validators import parse_amount  # Parse the AMOUNT argument
from currconv.adapters.persistence.rates_file import load_rate_table  # Rate snapshot loader
from currconv.application.converter import convert  # Validate-then-convert business logic
from currconv.domain.errors import RateTableError  # Malformed or unreadable rate data


EXIT_OK = 0
EXIT_RATES_UNAVAILABLE = 1
EXIT_INVALID_REQUEST = 2

INVALID_REQUEST_MESSAGE = "Invalid conversion request"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="currconv",
        description="Convert an amount between currencies using an offline rate snapshot.",
    )
    parser.add_argument("amount", help="amount in the source currency (0 to 10000)")
    parser.add_argument("source", help="source currency code, e.g. USD")
    parser.add_argument("target", help="target currency code, e.g. CAD")
    parser.add_argument(
        "--rates-file",
        default=None,
        help="JSON rate snapshot (default: RATES_FILE or the bundled snapshot)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run a single conversion from command line arguments.

    This function:
    1. Sets up logging from settings
    2. Loads the rate table (argument, then RATES_FILE, then bundled snapshot)
    3. Converts the amount and prints the raw result to stdout

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    # Import settings here so a broken .env surfaces after --help/--version
    from currconv.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_console=settings.log_console,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)

    amount = parse_amount(args.amount)
    if amount is None:
        logger.warning("Amount %r is not a number", args.amount)
        print(INVALID_REQUEST_MESSAGE, file=sys.stderr)
        return EXIT_INVALID_REQUEST

    try:
        table = load_rate_table(args.rates_file or settings.rates_file)
    except RateTableError as e:
        logger.error("Rate table unavailable: %s", e)
        print(f"Cannot load rates: {e}", file=sys.stderr)
        return EXIT_RATES_UNAVAILABLE

    result = convert(amount, args.source, args.target, table)
    if not result.ok:
        logger.warning("Conversion rejected: %s", result.reason)
        print(INVALID_REQUEST_MESSAGE, file=sys.stderr)
        return EXIT_INVALID_REQUEST

    logger.info("Converted %s %s -> %s %s", amount, args.source, result.value, args.target)
    print(result.value)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
