from __future__ import annotations

import argparse
import logging
import sys

from basketprice.basket import Basket
from basketprice.config import load_table, load_table_module
from basketprice.errors import ConfigError, UnknownItemError
from basketprice.formatting import format_receipt, format_scenario_results, format_table
from basketprice.scenarios import run_scenarios
from basketprice.table import PricingTable

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="basketprice",
        description="basketprice: price a basket of items with quantity discounts",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--config", default=None, help="YAML or JSON pricing table file"
    )
    source.add_argument(
        "--table-module",
        default=None,
        help="Python module with define_table()",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command")

    total = sub.add_parser("total", help="Print the total price of a basket")
    total.add_argument("items", nargs="*", metavar="ITEM", help="Item name")

    receipt = sub.add_parser("receipt", help="Print an itemized receipt")
    receipt.add_argument("items", nargs="*", metavar="ITEM", help="Item name")

    sub.add_parser("table", help="Show the pricing table")
    sub.add_parser("demo", help="Run the reference baskets and report PASSED/NOT PASSED")

    return parser


def resolve_table(args: argparse.Namespace) -> PricingTable:
    """Pick the pricing table named on the command line, or the default one."""
    if args.config:
        return load_table(args.config)
    if args.table_module:
        return load_table_module(args.table_module)
    return PricingTable.default()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        table = resolve_table(args)
    except (FileNotFoundError, ConfigError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "table":
        print(format_table(table))
        return

    if args.command == "demo":
        results = run_scenarios(table=table)
        print(format_scenario_results(results))
        if not all(r.passed for r in results):
            sys.exit(1)
        return

    basket = Basket.from_items(args.items)
    try:
        if args.command == "total":
            print(basket.total(table))
        else:
            print(format_receipt(basket.price(table)))
    except UnknownItemError as e:
        logger.debug("Basket rejected: %r", basket)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
