"""
Shared plumbing for the command-line skills

Logging setup, JSON output, error reporting and the argument helpers the
position and liquidity scripts have in common.
"""
import argparse
import dataclasses
import logging
import sys
from typing import Callable, Optional

from pydantic import BaseModel

from ..config import settings
from ..constants import FEE_TIERS
from ..data.price_client import PriceClientError
from ..data.tokens import UnknownTokenError, get_token
from ..data.types import PoolState, Token
from ..errors import SunSwapMathError
from ..math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio, get_tick_spacing_for_fee
from ..schemas import ErrorResult

logger = logging.getLogger(__name__)

# Errors reported as {"success": false, ...}; anything else is a bug and propagates
HANDLED_ERRORS = (SunSwapMathError, PriceClientError, UnknownTokenError)


def setup_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr; stdout carries only the JSON result"""
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def emit(result: BaseModel) -> None:
    print(result.model_dump_json(by_alias=True, indent=2, exclude_none=True))


def run(handler: Callable[[argparse.Namespace], BaseModel], args: argparse.Namespace) -> int:
    """Run a subcommand handler and print its result

    Returns:
        process exit code (0 on success, 1 on a handled error)
    """
    try:
        result = handler(args)
    except HANDLED_ERRORS as e:
        logger.error("Error: %s", e)
        emit(ErrorResult(error=str(e), error_type=type(e).__name__))
        return 1

    emit(result)
    return 0


def fee_label(fee: int) -> str:
    """'3000 (0.3%)'"""
    return f"{fee} ({FEE_TIERS[fee]})" if fee in FEE_TIERS else str(fee)


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--network", default=settings.DEFAULT_NETWORK,
                        help=f"Network for token lookups (default: {settings.DEFAULT_NETWORK})")
    parser.add_argument("--slippage", type=float, default=settings.DEFAULT_SLIPPAGE,
                        help=f"Slippage tolerance %% (default: {settings.DEFAULT_SLIPPAGE})")


def add_pool_price_args(parser: argparse.ArgumentParser) -> None:
    """Current pool price, given either as sqrtPriceX96 or as a tick"""
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--sqrt-price", type=int, help="Pool sqrtPriceX96 (slot0)")
    group.add_argument("--current-tick", type=int, help="Pool tick (slot0)")


def pool_state(args: argparse.Namespace) -> PoolState:
    """Pool slot0 from --fee and --sqrt-price or --current-tick"""
    tick_spacing = get_tick_spacing_for_fee(args.fee)
    if args.sqrt_price is not None:
        sqrt_price_x96, tick = args.sqrt_price, get_tick_at_sqrt_ratio(args.sqrt_price)
    else:
        sqrt_price_x96, tick = get_sqrt_ratio_at_tick(args.current_tick), args.current_tick
    return PoolState(sqrt_price_x96=sqrt_price_x96, tick=tick, fee=args.fee, tick_spacing=tick_spacing)


def resolve_token(value: str, network: str, decimals: Optional[int] = None) -> Token:
    """Registry lookup with an optional decimals override"""
    token = get_token(value, network)
    if decimals is not None and decimals != token.decimals:
        logger.info("Using %d decimals for %s (registry: %d)", decimals, token.symbol, token.decimals)
        token = dataclasses.replace(token, decimals=decimals)
    return token
