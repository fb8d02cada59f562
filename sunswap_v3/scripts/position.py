#!/usr/bin/env python
"""
SunSwap V3 position calculator

Sizes a concentrated-liquidity position against a caller-supplied pool
price: liquidity minted for a deposit, amounts returned by a withdrawal,
and the initial price of a new pool.

Usage:
  sunswap-position add USDT TRX 100 500 --fee 3000 --tick-lower -600 --tick-upper 600 --current-tick 0
  sunswap-position remove --liquidity 123456789 --fee 3000 --tick-lower -600 --tick-upper 600 --sqrt-price 79228162514264337593543950336 --percent 50
  sunswap-position init-price 100 500 --decimals0 6 --decimals1 6
"""
import argparse
import logging
import sys
from typing import List, Optional

from ..constants import UINT128_MAX
from ..data.tokens import sort_tokens
from ..errors import InvalidAmount
from ..math import (
    align_tick_range,
    apply_slippage,
    from_raw,
    get_amounts_for_liquidity,
    get_liquidity_for_amounts,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
    initial_sqrt_price_from_amounts,
    liquidity_for_percent,
    sqrt_price_x96_to_price,
    tick_to_price,
    to_raw,
    validate_tick_range,
)
from ..schemas import (
    AddPositionResult,
    InitPriceResult,
    PositionTokenEstimate,
    RemovePositionResult,
    TokenAmount,
)
from .common import (
    add_common_args,
    add_pool_price_args,
    fee_label,
    pool_state,
    resolve_token,
    run,
    setup_logging,
)

logger = logging.getLogger(__name__)


def position_status(sqrt_price_x96: int, sqrt_lower: int, sqrt_upper: int) -> str:
    """Where the pool price sits relative to the range"""
    if sqrt_price_x96 <= sqrt_lower:
        return "below-range"
    if sqrt_price_x96 >= sqrt_upper:
        return "above-range"
    return "in-range"


def _estimate(symbol: str, desired: int, estimated: int, decimals: int, slippage: float) -> PositionTokenEstimate:
    minimum = apply_slippage(estimated, slippage)
    return PositionTokenEstimate(
        symbol=symbol,
        desired=from_raw(desired, decimals),
        estimated=from_raw(estimated, decimals),
        estimated_raw=str(estimated),
        minimum=from_raw(minimum, decimals),
        minimum_raw=str(minimum),
    )


def _amount(symbol: str, raw: int, decimals: int, slippage: Optional[float] = None) -> TokenAmount:
    minimum = None
    if slippage is not None:
        minimum = from_raw(apply_slippage(raw, slippage), decimals)
    return TokenAmount(symbol=symbol, amount=from_raw(raw, decimals), raw=str(raw), minimum=minimum)


def handle_add(args: argparse.Namespace) -> AddPositionResult:
    token_a = resolve_token(args.token_a, args.network, args.decimals_a)
    token_b = resolve_token(args.token_b, args.network, args.decimals_b)
    amount_a = to_raw(args.amount_a, token_a.decimals)
    amount_b = to_raw(args.amount_b, token_b.decimals)

    token0, token1, swapped = sort_tokens(token_a, token_b, args.network)
    amount0, amount1 = (amount_b, amount_a) if swapped else (amount_a, amount_b)
    if token0.is_trx or token1.is_trx:
        logger.info("TRX is deposited as WTRX in V3 pools")

    pool = pool_state(args)
    tick_lower, tick_upper = align_tick_range(args.tick_lower, args.tick_upper, pool.tick_spacing)
    ticks_adjusted = (tick_lower, tick_upper) != (args.tick_lower, args.tick_upper)
    if ticks_adjusted:
        logger.warning(
            "Ticks aligned to spacing %d: [%d, %d] -> [%d, %d]",
            pool.tick_spacing, args.tick_lower, args.tick_upper, tick_lower, tick_upper
        )

    sqrt_price_x96 = pool.sqrt_price_x96
    sqrt_lower = get_sqrt_ratio_at_tick(tick_lower)
    sqrt_upper = get_sqrt_ratio_at_tick(tick_upper)

    liquidity = get_liquidity_for_amounts(sqrt_price_x96, sqrt_lower, sqrt_upper, amount0, amount1)
    est0, est1 = get_amounts_for_liquidity(sqrt_price_x96, sqrt_lower, sqrt_upper, liquidity)
    logger.info("Estimated liquidity: %d", liquidity)
    logger.info("%s: %s -> ~%s", token0.symbol, from_raw(amount0, token0.decimals), from_raw(est0, token0.decimals))
    logger.info("%s: %s -> ~%s", token1.symbol, from_raw(amount1, token1.decimals), from_raw(est1, token1.decimals))

    return AddPositionResult(
        fee=fee_label(args.fee),
        tick_spacing=pool.tick_spacing,
        tick_lower=tick_lower,
        tick_upper=tick_upper,
        price_lower=tick_to_price(tick_lower, token0.decimals, token1.decimals),
        price_upper=tick_to_price(tick_upper, token0.decimals, token1.decimals),
        ticks_adjusted=ticks_adjusted,
        current_tick=pool.tick,
        sqrt_price_x96=str(sqrt_price_x96),
        status=position_status(sqrt_price_x96, sqrt_lower, sqrt_upper),
        estimated_liquidity=str(liquidity),
        token0=_estimate(token0.symbol, amount0, est0, token0.decimals, args.slippage),
        token1=_estimate(token1.symbol, amount1, est1, token1.decimals, args.slippage),
        swapped=swapped,
        slippage=args.slippage,
    )


def handle_remove(args: argparse.Namespace) -> RemovePositionResult:
    if args.liquidity <= 0:
        raise InvalidAmount("Position has no liquidity")

    pool = pool_state(args)
    validate_tick_range(args.tick_lower, args.tick_upper, pool.tick_spacing)

    liquidity_to_remove = liquidity_for_percent(args.liquidity, args.percent)
    logger.info("Removing %d%%: %d liquidity", args.percent, liquidity_to_remove)

    sqrt_price_x96 = pool.sqrt_price_x96
    sqrt_lower = get_sqrt_ratio_at_tick(args.tick_lower)
    sqrt_upper = get_sqrt_ratio_at_tick(args.tick_upper)

    amount0, amount1 = get_amounts_for_liquidity(sqrt_price_x96, sqrt_lower, sqrt_upper, liquidity_to_remove)
    remaining = args.liquidity - liquidity_to_remove
    rem0, rem1 = get_amounts_for_liquidity(sqrt_price_x96, sqrt_lower, sqrt_upper, remaining)

    return RemovePositionResult(
        fee=fee_label(args.fee),
        tick_lower=args.tick_lower,
        tick_upper=args.tick_upper,
        percent=args.percent,
        liquidity_to_remove=str(liquidity_to_remove),
        expected_token0=_amount("token0", amount0, args.decimals0, args.slippage),
        expected_token1=_amount("token1", amount1, args.decimals1, args.slippage),
        remaining_liquidity=str(remaining),
        remaining_token0=_amount("token0", rem0, args.decimals0),
        remaining_token1=_amount("token1", rem1, args.decimals1),
        collect_amount_max=str(UINT128_MAX),
        slippage=args.slippage,
    )


def handle_init_price(args: argparse.Namespace) -> InitPriceResult:
    amount0 = to_raw(args.amount0, args.decimals0)
    amount1 = to_raw(args.amount1, args.decimals1)

    sqrt_price_x96 = initial_sqrt_price_from_amounts(amount0, args.decimals0, amount1, args.decimals1)
    tick = get_tick_at_sqrt_ratio(sqrt_price_x96)
    logger.info("Initial sqrtPriceX96: %d (tick %d)", sqrt_price_x96, tick)

    return InitPriceResult(
        sqrt_price_x96=str(sqrt_price_x96),
        tick=tick,
        price=sqrt_price_x96_to_price(sqrt_price_x96, args.decimals0, args.decimals1),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sunswap-position",
        description="SunSwap V3 position calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Usage:", 1)[1],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Liquidity and amounts for a new deposit")
    add.add_argument("token_a", help="Token A symbol or address")
    add.add_argument("token_b", help="Token B symbol or address")
    add.add_argument("amount_a", help="Token A amount (human units)")
    add.add_argument("amount_b", help="Token B amount (human units)")
    add.add_argument("--fee", type=int, required=True, help="Fee tier (100, 500, 3000, 10000)")
    add.add_argument("--tick-lower", type=int, required=True, help="Lower tick")
    add.add_argument("--tick-upper", type=int, required=True, help="Upper tick")
    add.add_argument("--decimals-a", type=int, help="Override token A decimals")
    add.add_argument("--decimals-b", type=int, help="Override token B decimals")
    add_pool_price_args(add)
    add_common_args(add)
    add.set_defaults(handler=handle_add)

    remove = subparsers.add_parser("remove", help="Amounts returned by a withdrawal")
    remove.add_argument("--liquidity", type=int, required=True, help="Position liquidity")
    remove.add_argument("--fee", type=int, required=True, help="Fee tier (100, 500, 3000, 10000)")
    remove.add_argument("--tick-lower", type=int, required=True, help="Position lower tick")
    remove.add_argument("--tick-upper", type=int, required=True, help="Position upper tick")
    remove.add_argument("--percent", type=int, default=100, help="Percentage to remove (default: 100)")
    remove.add_argument("--decimals0", type=int, default=6, help="token0 decimals (default: 6)")
    remove.add_argument("--decimals1", type=int, default=6, help="token1 decimals (default: 6)")
    add_pool_price_args(remove)
    add_common_args(remove)
    remove.set_defaults(handler=handle_remove)

    init = subparsers.add_parser("init-price", help="Initial sqrtPriceX96 for a new pool")
    init.add_argument("amount0", help="token0 amount (human units)")
    init.add_argument("amount1", help="token1 amount (human units)")
    init.add_argument("--decimals0", type=int, default=6, help="token0 decimals (default: 6)")
    init.add_argument("--decimals1", type=int, default=6, help="token1 decimals (default: 6)")
    init.set_defaults(handler=handle_init_price)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    return run(args.handler, args)


if __name__ == "__main__":
    sys.exit(main())
