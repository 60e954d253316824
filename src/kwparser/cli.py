"""
CLI entrypoint for kwparser.

Provides command-line interface for keyword parsing and product matching.
"""

import sys
import json
import argparse
import yaml
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from kwparser.classify import Parser, Keywords
from kwparser.config import (
    Settings,
    load_config,
    load_products,
    prefixes_from_env,
    resolve_settings,
)


def print_keywords(keywords: Keywords) -> None:
    """Print parsed keywords to console."""
    print("\n" + "=" * 60)
    print("PARSED KEYWORDS")
    print("=" * 60)

    for bucket in ("positive", "negative", "other"):
        values = getattr(keywords, bucket)
        print(f"\n{bucket.capitalize()} ({len(values)}):")
        for value in values:
            print(f"   {value!r}")


def print_matches(products: List[str], matches: List[str]) -> None:
    """Print product matching summary to console."""
    print("\n" + "=" * 60)
    print("MATCH SUMMARY")
    print("=" * 60)

    print(f"\nProducts checked: {len(products)}")
    print(f"[OK] Matched: {len(matches)}")
    print(f"[INFO] Filtered out: {len(products) - len(matches)}")

    print("\n" + "-" * 60)
    print("MATCHED PRODUCTS:")
    print("-" * 60)

    for product in matches:
        print(f"   {product}")


def build_settings(args) -> Settings:
    """
    Resolve settings from config file, environment and flags.

    Raises:
        FileNotFoundError: If a referenced file doesn't exist
        ValueError: If a file has invalid content
        yaml.YAMLError: If a YAML file cannot be parsed
    """
    config = load_config(args.config) if args.config else None

    products = None
    if getattr(args, "products", None):
        products = load_products(args.products)
    if getattr(args, "product", None):
        products = (products or []) + args.product

    return resolve_settings(
        config=config,
        env=prefixes_from_env(),
        positive=args.positive,
        negative=args.negative,
        retain_prefix=args.retain_prefix,
        products=products,
    )


def make_parser(args, settings: Settings) -> Parser:
    parser = Parser(args.input, settings.prefixes)
    parser.should_retain_prefix(settings.retain_prefix)
    return parser


def parse_command(args) -> int:
    """
    Execute the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        settings = build_settings(args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"[ERROR] Failed to load configuration: {e}")
        return 1

    keywords = make_parser(args, settings).parse()

    if args.json:
        print(json.dumps(keywords.to_dict(), indent=2, ensure_ascii=False))
        return 0

    print(
        f"[INFO] Prefixes: positive={settings.prefixes.positive!r} "
        f"negative={settings.prefixes.negative!r} "
        f"(retain_prefix={settings.retain_prefix})"
    )
    print_keywords(keywords)
    return 0


def match_command(args) -> int:
    """
    Execute the match command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        settings = build_settings(args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"[ERROR] Failed to load configuration: {e}")
        return 1

    if not settings.products:
        print("[ERROR] No products to match (use --products, --product or a config file)")
        return 1

    parser = make_parser(args, settings)
    keywords = parser.parse()
    matches = parser.match_products(settings.products, keywords)

    if args.json:
        payload = {"keywords": keywords.to_dict(), "matches": matches}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    print(f"[INFO] Loaded {len(settings.products)} product(s)")
    print_matches(settings.products, matches)
    return 0


def add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "input",
        type=str,
        help='Comma-delimited keywords (e.g. "+foo,-bar,+baz")',
    )

    subparser.add_argument(
        "--positive",
        type=str,
        metavar="PREFIX",
        help="Positive keyword prefix (default: +)",
    )

    subparser.add_argument(
        "--negative",
        type=str,
        metavar="PREFIX",
        help="Negative keyword prefix (default: -)",
    )

    subparser.add_argument(
        "--retain-prefix",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Keep prefixes on parsed keywords (--no-retain-prefix strips them)",
    )

    subparser.add_argument(
        "--config",
        type=str,
        help="Path to YAML configuration file",
    )

    subparser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )


def main(argv=None):
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="kwparser - Positive/negative keyword parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse keywords
  kwparser parse "+foo,-bar,+baz,bak"

  # Custom prefixes
  kwparser parse "yes!!foo,no!!bar" --positive "yes!!" --negative "no!!"

  # Match products
  kwparser match "-youth,+hoodie,+hat" --products products.txt

Environment Variables:
  KWP_POSITIVE_PREFIX    Positive keyword prefix (default: +)
  KWP_NEGATIVE_PREFIX    Negative keyword prefix (default: -)
  KWP_RETAIN_PREFIX      Keep prefixes on parsed keywords (true/false)
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse keywords into positive, negative and other",
    )
    add_common_arguments(parse_parser)

    # match command
    match_parser = subparsers.add_parser(
        "match",
        help="Filter products by keywords",
    )
    add_common_arguments(match_parser)

    match_parser.add_argument(
        "--products",
        type=str,
        metavar="FILE",
        help="Product list (YAML list or one product per line)",
    )

    match_parser.add_argument(
        "--product",
        type=str,
        action="append",
        metavar="NAME",
        help="Product name to match (repeatable)",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "parse":
            return parse_command(args)
        elif args.command == "match":
            return match_command(args)
    except KeyboardInterrupt:
        print("\n\n[INTERRUPTED] Cancelled by user")
        return 130

    print(f"[ERROR] Unknown command: {args.command}")
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
