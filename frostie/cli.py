"""CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import date

from dotenv import load_dotenv

from .categories import get_categories
from .config import load_config
from .foodkeeper import FOODKEEPER_DATA, calculate_expiration_date, find_best_food_match
from .items import (
    create_freezer_item_from_parsed_text,
    days_until_expiration,
    expiration_status,
)
from .textparse import create_parser


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="frostie",
        description="Frostie freezer inventory: parse item descriptions and estimate shelf life",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML config file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Parse an item description")
    parse_parser.add_argument("text", nargs="+", help="Item description")
    parse_parser.add_argument("--json", action="store_true", help="Output JSON")
    parse_parser.add_argument(
        "--days", type=int, default=None,
        help="Default expiration horizon in days",
    )
    parse_parser.add_argument(
        "--offline", action="store_true",
        help="Use only the rule-based parser",
    )

    # lookup
    lookup_parser = sub.add_parser(
        "lookup", help="Look up FoodKeeper shelf life for a food"
    )
    lookup_parser.add_argument("name", nargs="+", help="Food name")

    # categories
    sub.add_parser("categories", help="List item categories")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    load_dotenv()
    config = load_config(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "parse":
            asyncio.run(_cmd_parse(config, args))
        case "lookup":
            _cmd_lookup(" ".join(args.name))
        case "categories":
            for category in get_categories():
                print(category)


async def _cmd_parse(config, args) -> None:
    if args.offline:
        config.parser.backend = "none"
    days = args.days if args.days is not None else config.parser.default_expiration_days
    if days <= 0:
        print("--days must be a positive number of days.", file=sys.stderr)
        sys.exit(2)

    text = " ".join(args.text)
    item = await create_freezer_item_from_parsed_text(
        text,
        parser=create_parser(config),
        default_expiration_days=days,
    )

    if args.json:
        print(json.dumps(item.to_dict(), ensure_ascii=False, indent=2))
        return

    left = days_until_expiration(item)
    print(f"{item.name} x{item.quantity}")
    print(f"  Category:   {item.category}")
    if item.size:
        print(f"  Size:       {item.size}")
    print(f"  Expires:    {item.expiration_date.isoformat()} ({expiration_status(left)})")
    if item.tags:
        print(f"  Tags:       {', '.join('#' + t for t in item.tags)}")


def _cmd_lookup(name: str) -> None:
    food = find_best_food_match(name)
    if food is None:
        print(f"No FoodKeeper entry matches {name!r}.")
        return

    info = FOODKEEPER_DATA[food]
    expires = calculate_expiration_date(name, info.category)
    left = (expires - date.today()).days
    print(f"{name!r} -> {food!r} ({info.category})")
    print(f"  Freezer life: {info.min_months:g}-{info.max_months:g} months")
    print(f"  Estimated expiry: {expires.isoformat()} ({left} days)")


if __name__ == "__main__":
    main()
