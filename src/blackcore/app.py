# src/blackcore/app.py
"""
Application Entry Point - Command-line Unit Converter

Composition root for the `blackcore-unit` console script. Parses an amount
and its denomination (or a fiat amount and rate), then prints the value in
another denomination, at a fiat rate, in every denomination, or as the
canonical JSON record.

    blackcore-unit 1.3                     # 130000000 (default: ratoshis)
    blackcore-unit 1.3 --to mBLK           # 1300.0
    blackcore-unit 100 --fiat-rate 350 --to uBLK
    blackcore-unit 150 --code uBLK --json  # {"amount":0.00015,"code":"BLK"}

Files that USE this module:
- blackcore.__main__ (python -m blackcore)
- pyproject.toml (blackcore-unit console script)
- tests.test_app (unit tests)

Files that this module USES:
- blackcore.config (settings for logging and default output code)
- blackcore.shared.logging_conf (setup_logging for logging configuration)
- blackcore.domain (Unit, Denomination table, DomainError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command-line argument parsing
import logging  # Standard library for logging messages and errors
import sys  # Standard streams
from decimal import Decimal, InvalidOperation  # Exact parsing of numeric arguments
from typing import Optional, Sequence  # Type hints

from blackcore.config import settings  # Environment-driven configuration
from blackcore.domain import DENOMINATIONS, DomainError, Unit  # Value type and errors
from blackcore.shared.logging_conf import setup_logging  # Configure logging with file rotation

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DOMAIN_ERROR = 2


def _decimal_arg(text: str) -> Decimal:
    """argparse type for amounts and rates; keeps the exact decimal text."""
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the blackcore-unit command."""
    codes = ", ".join(DENOMINATIONS)
    parser = argparse.ArgumentParser(
        prog="blackcore-unit",
        description=f"Convert BLK amounts between denominations ({codes}) and fiat.",
    )
    parser.add_argument("amount", type=_decimal_arg, help="amount to convert")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--code", default="BLK", help="denomination of AMOUNT (default: BLK)")
    source.add_argument(
        "--fiat-rate", type=_decimal_arg, help="treat AMOUNT as fiat at this BLK/fiat rate"
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--to", dest="target", help="output denomination (default: BLACKCORE_DEFAULT_CODE)"
    )
    target.add_argument("--at-rate", type=_decimal_arg, help="output fiat value at this rate")
    target.add_argument("--all", action="store_true", help="print every denomination")
    target.add_argument("--json", action="store_true", help="print the canonical JSON record")
    return parser


def _render(unit: Unit, args: argparse.Namespace) -> str:
    if args.json:
        return unit.to_json()
    if args.all:
        return "\n".join(f"{code}: {unit.to(code)}" for code in DENOMINATIONS)
    if args.at_rate is not None:
        return str(unit.at_rate(args.at_rate))
    return str(unit.to(args.target or settings.default_code))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the converter.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 2 on an invalid code, rate or amount
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    try:
        if args.fiat_rate is not None:
            unit = Unit.from_fiat(args.amount, args.fiat_rate)
        else:
            unit = Unit(args.amount, args.code)
        output = _render(unit, args)
    except DomainError as e:
        logger.error("Conversion failed: %s (type: %s)", e, type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_DOMAIN_ERROR

    logger.debug("Converted %s -> %s", unit, output)
    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
