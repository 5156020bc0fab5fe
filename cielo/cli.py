#!/usr/bin/env python3
"""Command line access to the Cielo feed"""

import argparse
import asyncio
import sys
from typing import List, Optional

import httpx

from .errors import CieloError
from .logging_config import setup_logging
from .providers.cielo import CieloProvider
from .types import FeedRequest, TxType, parse_chain


def request_from_args(args: argparse.Namespace) -> FeedRequest:
    """Build a FeedRequest from parsed ``feed`` arguments."""
    return FeedRequest(
        wallet=args.wallet,
        limit=args.limit,
        list_id=args.list_id,
        chains=[parse_chain(chain) for chain in args.chains] if args.chains else None,
        tx_types=[TxType(tx_type) for tx_type in args.tx_types] if args.tx_types else None,
        tokens=args.tokens or None,
        min_usd=args.min_usd,
        new_trades=args.new_trades,
        start_from=args.start_from,
        from_timestamp=args.from_timestamp,
        to_timestamp=args.to_timestamp,
    )


async def cli_feed(request: FeedRequest, api_key: Optional[str] = None) -> int:
    """Fetch the feed and print the body."""
    async with CieloProvider(api_key=api_key) as provider:
        response = await provider.get_feed(request)

    print(response.text)
    if not response.ok:
        print(f"❌ Cielo returned HTTP {response.status_code}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cielo", description="Cielo feed CLI")
    parser.add_argument("--log-level", help="Logging level (default: from settings)")
    subparsers = parser.add_subparsers(dest="command")

    feed_parser = subparsers.add_parser("feed", help="Fetch a wallet's transaction feed")
    feed_parser.add_argument("wallet", help="Wallet address")
    feed_parser.add_argument("--limit", type=int, help="Max transactions to return")
    feed_parser.add_argument("--list", dest="list_id", type=int, help="List id to filter by")
    feed_parser.add_argument(
        "--chain", dest="chains", action="append",
        help="Chain slug, repeatable (solana, ethereum, or any EVM chain e.g. polygon)",
    )
    feed_parser.add_argument(
        "--tx-type", dest="tx_types", action="append",
        choices=[tx_type.value for tx_type in TxType],
        help="Transaction type, repeatable",
    )
    feed_parser.add_argument("--token", dest="tokens", action="append", help="Token address or symbol, repeatable")
    feed_parser.add_argument("--min-usd", type=int, help="Minimum USD value")
    feed_parser.add_argument(
        "--new-trades", action=argparse.BooleanOptionalAction, default=None,
        help="Only new trades (--no-new-trades to exclude them)",
    )
    feed_parser.add_argument("--start-from", help="Paging cursor from a previous response")
    feed_parser.add_argument("--from-timestamp", type=int, help="UTC epoch lower bound")
    feed_parser.add_argument("--to-timestamp", type=int, help="UTC epoch upper bound")
    feed_parser.add_argument("--api-key", help="Cielo API key (default: CIELO_API_KEY)")
    feed_parser.add_argument("--print-url", action="store_true", help="Print the request URL and exit")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.log_level)

    try:
        request = request_from_args(args)
        if args.print_url:
            print(CieloProvider(api_key=args.api_key).build_url(request))
            return 0
        return asyncio.run(cli_feed(request, api_key=args.api_key))
    except (CieloError, httpx.HTTPError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
