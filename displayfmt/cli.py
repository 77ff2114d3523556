"""
displayfmt command line

Format numbers, currency amounts and percentages from the terminal.

Usage:
    displayfmt number 1500 --compact            # 1.5K
    displayfmt number 1234567                   # 1,234,567
    displayfmt currency 1500000 --compact       # $1.50M
    displayfmt currency 1000 --code USDC        # 1,000.00 USDC
    displayfmt percent 0.1234                   # 12.34%

Or directly:
    python -m displayfmt percent 0.5 --min 2
"""
import argparse
import sys
from typing import Optional, Sequence

from displayfmt.config import get_settings
from displayfmt.exceptions import FormatterError
from displayfmt.formatters import (
    format_currency_compact,
    format_currency_full,
    format_number_compact,
    format_number_full,
    format_percentage,
    )
from displayfmt.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def _options(args: argparse.Namespace) -> dict:
    options = {}
    if args.min is not None:
        options["minimum_fraction_digits"] = args.min
    if args.max is not None:
        options["maximum_fraction_digits"] = args.max
    return options


def cmd_number(args: argparse.Namespace) -> str:
    """Format a plain number."""
    formatter = format_number_compact if args.compact else format_number_full
    return formatter(args.value, _options(args))


def cmd_currency(args: argparse.Namespace) -> str:
    """Format a currency amount."""
    formatter = format_currency_compact if args.compact else format_currency_full
    return formatter(args.value, args.code, _options(args))


def cmd_percent(args: argparse.Namespace) -> str:
    """Format a percentage."""
    return format_percentage(args.value, _options(args))


def _add_digit_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--min", type=int, default=None, help="Minimum fraction digits")
    parser.add_argument("--max", type=int, default=None, help="Maximum fraction digits")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="displayfmt",
        description="Format numbers, currency amounts and percentages for display",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  displayfmt number 1500 --compact
  displayfmt currency 1500000 --compact
  displayfmt currency -1000 --code DAI
  displayfmt percent 0.00009
        """
        )
    parser.add_argument("--log-level", default=None, help="Override DISPLAYFMT_LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # number
    number_parser = subparsers.add_parser("number", help="Format a number")
    number_parser.add_argument("value", help="Number or numeric string (e.g. 1.5e3)")
    number_parser.add_argument("--compact", action="store_true", help="Use K/M/B/T suffixes")
    _add_digit_arguments(number_parser)
    number_parser.set_defaults(handler=cmd_number)

    # currency
    currency_parser = subparsers.add_parser("currency", help="Format a currency amount")
    currency_parser.add_argument("value", help="Number or numeric string")
    currency_parser.add_argument("--code", default="USD", help="Currency code (default: USD)")
    currency_parser.add_argument("--compact", action="store_true", help="Use K/M/B/T suffixes")
    _add_digit_arguments(currency_parser)
    currency_parser.set_defaults(handler=cmd_currency)

    # percent
    percent_parser = subparsers.add_parser("percent", help="Format a decimal fraction as a percentage")
    percent_parser.add_argument("value", help="Decimal fraction (0.5 for 50%%)")
    _add_digit_arguments(percent_parser)
    percent_parser.set_defaults(handler=cmd_percent)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level or settings.LOG_LEVEL, json_output=settings.LOG_JSON)

    if not args.command:
        parser.print_help()
        return 0

    logger.debug("Formatting value", command=args.command, value=args.value)
    try:
        print(args.handler(args))
    except FormatterError as e:
        print(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
