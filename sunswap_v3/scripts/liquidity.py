#!/usr/bin/env python
"""
SunSwap V2 liquidity calculator

Balances a deposit against a pair's reserves and estimates what burning
LP tokens returns. Reserves and LP supply are raw on-chain integers
(getReserves / totalSupply); token and LP amounts are human units.

Usage:
  sunswap-liquidity add TRX USDT 100 20 --reserve-a 5000000000 --reserve-b 1000000000
  sunswap-liquidity remove TRX USDT 0.5 --reserve-a 5000000000 --reserve-b 1000000000 --total-supply 2000000000000000000
"""
import argparse
import logging
import sys
from typing import List, Optional

from ..constants import LP_DECIMALS
from ..data.types import PairReserves
from ..math import (
    apply_slippage,
    expected_amounts_for_lp,
    from_raw,
    optimal_amounts,
    to_raw,
    unused_amounts,
)
from ..schemas import AddLiquidityResult, PairTokenAmounts, RemoveLiquidityResult, TokenAmount
from .common import add_common_args, resolve_token, run, setup_logging

logger = logging.getLogger(__name__)


def handle_add(args: argparse.Namespace) -> AddLiquidityResult:
    token_a = resolve_token(args.token_a, args.network, args.decimals_a)
    token_b = resolve_token(args.token_b, args.network, args.decimals_b)
    desired_a = to_raw(args.amount_a, token_a.decimals)
    desired_b = to_raw(args.amount_b, token_b.decimals)

    reserves = PairReserves(reserve_a=args.reserve_a, reserve_b=args.reserve_b)
    if reserves.is_empty:
        logger.info("Pair has no reserves; the deposit sets the initial price")

    result = optimal_amounts(desired_a, desired_b, reserves.reserve_a, reserves.reserve_b)
    unused_a, unused_b = unused_amounts(desired_a, desired_b, result)
    if result.was_adjusted:
        logger.warning(
            "Amounts adjusted to the pool ratio: %s %s, %s %s unused",
            from_raw(unused_a, token_a.decimals), token_a.symbol,
            from_raw(unused_b, token_b.decimals), token_b.symbol
        )

    sides = []
    for token, desired, optimal, unused in (
        (token_a, desired_a, result.amount0, unused_a),
        (token_b, desired_b, result.amount1, unused_b),
    ):
        minimum = apply_slippage(optimal, args.slippage)
        sides.append(PairTokenAmounts(
            symbol=token.symbol,
            desired=from_raw(desired, token.decimals),
            optimal=from_raw(optimal, token.decimals),
            optimal_raw=str(optimal),
            minimum=from_raw(minimum, token.decimals),
            minimum_raw=str(minimum),
            unused=from_raw(unused, token.decimals),
        ))

    return AddLiquidityResult(
        token_a=sides[0],
        token_b=sides[1],
        was_adjusted=result.was_adjusted,
        new_pool=reserves.is_empty,
        slippage=args.slippage,
    )


def handle_remove(args: argparse.Namespace) -> RemoveLiquidityResult:
    token_a = resolve_token(args.token_a, args.network, args.decimals_a)
    token_b = resolve_token(args.token_b, args.network, args.decimals_b)
    lp_amount = to_raw(args.lp_amount, LP_DECIMALS)
    reserves = PairReserves(args.reserve_a, args.reserve_b, args.total_supply)

    expected_a, expected_b = expected_amounts_for_lp(
        lp_amount, reserves.reserve_a, reserves.reserve_b, reserves.total_supply
    )
    share = lp_amount * 100 / reserves.total_supply
    logger.info("Burning %s LP (%.4f%% of supply)", from_raw(lp_amount, LP_DECIMALS), share)

    return RemoveLiquidityResult(
        lp_to_remove=from_raw(lp_amount, LP_DECIMALS),
        share_percent=share,
        expected_token_a=TokenAmount(
            symbol=token_a.symbol,
            amount=from_raw(expected_a, token_a.decimals),
            raw=str(expected_a),
            minimum=from_raw(apply_slippage(expected_a, args.slippage), token_a.decimals),
        ),
        expected_token_b=TokenAmount(
            symbol=token_b.symbol,
            amount=from_raw(expected_b, token_b.decimals),
            raw=str(expected_b),
            minimum=from_raw(apply_slippage(expected_b, args.slippage), token_b.decimals),
        ),
        slippage=args.slippage,
    )


def _add_pair_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--reserve-a", type=int, required=True, help="Token A reserve (raw)")
    parser.add_argument("--reserve-b", type=int, required=True, help="Token B reserve (raw)")
    parser.add_argument("--decimals-a", type=int, help="Override token A decimals")
    parser.add_argument("--decimals-b", type=int, help="Override token B decimals")
    add_common_args(parser)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sunswap-liquidity",
        description="SunSwap V2 liquidity calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Usage:", 1)[1],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Optimal deposit for the pair ratio")
    add.add_argument("token_a", help="Token A symbol or address")
    add.add_argument("token_b", help="Token B symbol or address")
    add.add_argument("amount_a", help="Token A amount (human units)")
    add.add_argument("amount_b", help="Token B amount (human units)")
    _add_pair_args(add)
    add.set_defaults(handler=handle_add)

    remove = subparsers.add_parser("remove", help="Tokens returned for burning LP")
    remove.add_argument("token_a", help="Token A symbol or address")
    remove.add_argument("token_b", help="Token B symbol or address")
    remove.add_argument("lp_amount", help="LP tokens to burn (human units, 18 decimals)")
    remove.add_argument("--total-supply", type=int, required=True, help="Pair LP total supply (raw)")
    _add_pair_args(remove)
    remove.set_defaults(handler=handle_remove)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    return run(args.handler, args)


if __name__ == "__main__":
    sys.exit(main())
