"""Command-line interface for wallet valuation."""
from __future__ import annotations

import argparse
import asyncio
import sys

from .balances import JsonFileBalanceSource
from .config import load_config
from .logging_setup import configure_logging
from .services import WalletBoard


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="wallet-valuation",
        description="Rank wallet balances and convert token amounts",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("prices", help="Show the current price for every token")

    balances_parser = sub.add_parser("balances", help="Show ranked balances with USD values")
    balances_parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="JSON file of balances (overrides config)",
    )

    convert_parser = sub.add_parser("convert", help="Convert an amount between tokens")
    convert_parser.add_argument("amount", help="Amount of the source token")
    convert_parser.add_argument("from_token", help="Token to convert from")
    convert_parser.add_argument("to_token", help="Token to convert to")

    return parser


async def _run(args: argparse.Namespace) -> None:
    """Execute the selected command."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    board = WalletBoard(config)

    if args.command == "prices":
        print(board.format_prices(await board.prices()))
    elif args.command == "balances":
        if not args.file and not config.balances.path:
            print("No balances file given and balances.path is not configured.")
            sys.exit(1)
        source = JsonFileBalanceSource(args.file) if args.file else None
        print(board.format_rows(await board.rows(source)))
    elif args.command == "convert":
        converted = await board.quote(args.amount, args.from_token, args.to_token)
        print(converted or "Enter a positive amount to convert.")
    else:
        build_parser().print_help()
        sys.exit(1)


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    asyncio.run(_run(args))
