"""CLI entry point for exchange rate lookups.

Usage:
    python -m scripts.fetch_rate --date 2010-06-25 --currency USD [--to GBP] \
        [--base-url http://data.fixer.io/api/] [--keys-file etc/access_keys.properties | --key-env FIXER_IO_ACCESS_KEY] [--mock]
"""

import argparse
import logging
import sys
from datetime import datetime

from xrate import RateError, create_client

DEFAULT_BASE_URL = "http://data.fixer.io/api/"

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up a historical exchange rate")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Rate service base URL")
    parser.add_argument("--date", required=True, help="Date in YYYY-MM-DD format")
    parser.add_argument("--currency", required=True, help="Currency code to look up")
    parser.add_argument("--to", help="Express the rate in this currency instead of the base")
    keys = parser.add_mutually_exclusive_group()
    keys.add_argument("--keys-file", help="Properties file holding the fixer_io key")
    keys.add_argument("--key-env", help="Environment variable holding the access key")
    parser.add_argument("--mock", action="store_true", help="Use mock rates (no network)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        date = datetime.strptime(args.date, "%Y-%m-%d")
    except ValueError:
        logger.error("Invalid date %r, expected YYYY-MM-DD", args.date)
        return 1

    try:
        client = create_client(
            args.base_url, keys_file=args.keys_file, key_env=args.key_env, mock=args.mock
        )
        if args.to:
            rate = client.rate_between(args.currency, args.to, date.year, date.month, date.day)
            label = f"{args.currency}/{args.to}"
        else:
            rate = client.rate_against_base(args.currency, date.year, date.month, date.day)
            label = args.currency
    except RateError as e:
        logger.error("%s", e)
        return 1

    logger.info("Rate %s on %s: %s", label, args.date, rate)
    print(rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())
