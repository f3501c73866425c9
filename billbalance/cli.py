"""
Command-line interface for Bill Balance.

Usage:
    balance compute 1250.00                 # Spendable until the next reset (day 18)
    balance compute 1250.00 -r 25 -v        # Custom reset day, show pending bills
    balance adjust Phone --amount 12.50     # Change one bill
    balance list --amount --day-paid        # Show every bill
    balance edit                            # Open the payments file in $EDITOR
"""

import argparse
import sys
from datetime import date
from typing import Callable, Optional, Sequence

import pydantic

from billbalance import __version__
from billbalance.config import Settings, get_settings
from billbalance.ledger import PaymentNotFoundError
from billbalance.observability import configure_logging, get_logger
from billbalance.orchestrator import BalanceFlow, create_app_components
from billbalance.services.editor import EditorError
from billbalance.services.storage import StorageError
from billbalance.validation import (
    ValidationError,
    parse_amount,
    parse_balance,
    parse_day,
)


logger = get_logger(__name__)


def _argument_type(parser: Callable, *args) -> Callable[[str], object]:
    """Adapt a validator so argparse reports its message as a usage error."""
    def convert(text: str):
        try:
            return parser(text, *args)
        except ValidationError as e:
            raise argparse.ArgumentTypeError(e.message) from e
    convert.__name__ = parser.__name__
    return convert


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"`{text}` isn't a YYYY-MM-DD date") from None


def build_parser(default_reset_day: int = 18) -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="balance",
        description="Track monthly bills and work out what is left to spend.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    compute = subparsers.add_parser(
        "compute", help="Compute the balance left at the next reset day"
    )
    compute.add_argument(
        "balance",
        type=_argument_type(parse_balance),
        help="Current balance of your account",
    )
    compute.add_argument(
        "-r", "--reset-day",
        type=_argument_type(parse_day, "reset_day"),
        default=default_reset_day,
        help=f"Day your bill cycle resets, normally pay day (default: {default_reset_day})",
    )
    compute.add_argument(
        "--date",
        dest="today",
        type=_iso_date,
        default=None,
        help="Compute as if today were this date (default: today, UTC)",
    )
    compute.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Also list the bills still to come out",
    )

    adjust = subparsers.add_parser("adjust", help="Adjust a bill")
    adjust.add_argument("name", help="Bill to adjust")
    adjust.add_argument(
        "-a", "--amount",
        type=_argument_type(parse_amount),
        default=None,
        help="New bill amount",
    )
    adjust.add_argument(
        "-d", "--day-paid",
        type=_argument_type(parse_day, "day_paid"),
        default=None,
        help="New day that the bill is paid on (1-28)",
    )

    list_parser = subparsers.add_parser("list", help="List all the bills")
    list_parser.add_argument(
        "-a", "--amount",
        action="store_true",
        help="Include the bill amount in the output",
    )
    list_parser.add_argument(
        "-d", "--day-paid",
        action="store_true",
        help="Include the day the bill is paid in the output",
    )

    subparsers.add_parser("edit", help="Edit the bill file in your editor")

    return parser


def _run_compute(flow: BalanceFlow, args: argparse.Namespace) -> None:
    projection = flow.compute(args.balance, args.reset_day, today=args.today)
    symbol = flow.currency_symbol

    if args.verbose:
        for payment in projection.pending:
            print(f"  {payment.name} {symbol}{payment.amount} (day {payment.day_paid})")
        print(f"Pending: {symbol}{projection.pending_total}")

    print(f"{symbol}{projection.remaining}")


def _run_adjust(flow: BalanceFlow, args: argparse.Namespace) -> None:
    payment = flow.adjust(args.name, amount=args.amount, day_paid=args.day_paid)
    print(payment.describe(flow.currency_symbol))


def _run_list(flow: BalanceFlow, args: argparse.Namespace) -> None:
    for line in flow.list_payments(show_amount=args.amount, show_day_paid=args.day_paid):
        print(line)


def _run_edit(flow: BalanceFlow, args: argparse.Namespace) -> None:
    flow.edit()


COMMANDS = {
    "compute": _run_compute,
    "adjust": _run_adjust,
    "list": _run_list,
    "edit": _run_edit,
}


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    """
    Entry point. Returns the process exit status.

    Usage errors return 2 (argparse's status); runtime failures return 1.
    """
    if settings is None:
        try:
            settings = get_settings()
        except pydantic.ValidationError as e:
            print(f"error: invalid settings: {e}", file=sys.stderr)
            return 1

    configure_logging(settings.log_level, settings.json_logs)

    parser = build_parser(settings.default_reset_day)
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits on --help/--version (0) and usage errors (2).
        return e.code if isinstance(e.code, int) else 1

    flow = create_app_components(settings)

    try:
        COMMANDS[args.command](flow, args)
    except PaymentNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except (StorageError, EditorError) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
