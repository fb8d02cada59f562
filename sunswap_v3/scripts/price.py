#!/usr/bin/env python
"""
Token price from the Sun open API

Symbols resolve through the mainnet token registry; addresses are passed
through unchanged.

Usage:
  sunswap-price TRX
  sunswap-price TSSMHYeV2uE9qYH95DqyoCuNCzEL1NvU3S --currency USD
"""
import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

from ..data.price_client import PriceClient
from ..data.tokens import get_token
from ..schemas import PriceResult
from .common import run, setup_logging

logger = logging.getLogger(__name__)


def handle_price(args: argparse.Namespace, client: Optional[PriceClient] = None) -> PriceResult:
    token = get_token(args.token, "mainnet")
    logger.info("Fetching %s price for %s from Sun open API", args.currency.upper(), args.token)

    owned = client is None
    client = client or PriceClient()
    try:
        quote = client.get_token_price(token.address, args.currency)
    finally:
        if owned:
            client.close()

    last_updated_iso = None
    if quote.last_updated is not None:
        last_updated_iso = datetime.fromtimestamp(quote.last_updated / 1000, tz=timezone.utc).isoformat()

    symbol = args.token if token.symbol == "UNKNOWN" else token.symbol
    logger.info("1 %s = %s %s", symbol, quote.price, quote.currency)
    return PriceResult(
        token_symbol=symbol,
        token_address=quote.address,
        currency=quote.currency,
        price=str(quote.price),
        last_updated=quote.last_updated,
        last_updated_iso=last_updated_iso,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sunswap-price",
        description="Token price from the Sun open API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Usage:", 1)[1],
    )
    parser.add_argument("token", help="Token symbol (TRX, USDT) or TRC20 address")
    parser.add_argument("--currency", default="USD", help="Quote currency (default: USD)")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[PriceClient] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    return run(lambda a: handle_price(a, client), args)


if __name__ == "__main__":
    sys.exit(main())
