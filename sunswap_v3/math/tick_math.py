"""
Tick Math - Tick <-> sqrtPriceX96 conversion

Integer-only port of the concentrated-liquidity TickMath library used by
SunSwap V3 pools, so results match the on-chain contract bit for bit.

References:
- Uniswap V3 Core: contracts/libraries/TickMath.sol
- Whitepaper Section 6.1: Ticks and Tick Spacing

Formulas:
    price = 1.0001^tick
    sqrtPriceX96 = sqrt(price) * 2^96
"""

from typing import Optional, Tuple

from ..constants import (
    Q128,
    MIN_TICK,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MAX_SQRT_RATIO,
    UINT256_MAX,
    TICK_SPACINGS,
)
from ..errors import InvalidRange, InvalidTickSpacing, SqrtPriceOutOfBounds, TickOutOfBounds


# Q128.128 value of 1/sqrt(1.0001)^(2^0), used when bit 0 of |tick| is set
_SQRT_RATIO_BIT0: int = 0xfffcb933bd6fad37aa2d162d1a594001

# Q128.128 values of 1/sqrt(1.0001)^(2^i), indexed by bit position i = 1..19
_SQRT_RATIO_MULTIPLIERS: Tuple[int, ...] = (
    0xfff97272373d413259a46990580e213a,  # 0x2
    0xfff2e50f5f656932ef12357cf3c7fdcc,  # 0x4
    0xffe5caca7e10e4e61c3624eaa0941cd0,  # 0x8
    0xffcb9843d60f6159c9db58835c926644,  # 0x10
    0xff973b41fa98c081472e6896dfb254c0,  # 0x20
    0xff2ea16466c96a3843ec78b326b52861,  # 0x40
    0xfe5dee046a99a2a811c461f1969c3053,  # 0x80
    0xfcbe86c7900a88aedcffc83b479aa3a4,  # 0x100
    0xf987a7253ac413176f2b074cf7815e54,  # 0x200
    0xf3392b0822b70005940c7a398e4b70f3,  # 0x400
    0xe7159475a2c29b7443b29c7fa6e889d9,  # 0x800
    0xd097f3bdfd2022b8845ad8f792aa5825,  # 0x1000
    0xa9f746462d870fdf8a65dc1f90e061e5,  # 0x2000
    0x70d869a156d2a1b890bb3df62baf32f7,  # 0x4000
    0x31be135f97d08fd981231505542fcfa6,  # 0x8000
    0x9aa508b5b7a84e1c677de54f3e99bc9,   # 0x10000
    0x5d6af8dedb81196699c329225ee604,    # 0x20000
    0x2216e584f5fa1ea926041bedfe98,      # 0x40000
    0x48a170391f7dc42444e8fa2,           # 0x80000
)


def _check_tick(tick: int) -> None:
    if tick < MIN_TICK or tick > MAX_TICK:
        raise TickOutOfBounds(f"Tick {tick} out of bounds [{MIN_TICK}, {MAX_TICK}]")


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """Compute sqrtPriceX96 for a tick

    Binary exponentiation over the bits of |tick| using the precomputed
    Q128.128 table, then conversion to Q64.96 rounding up.

    Args:
        tick: Tick index (-887272 ~ 887272)

    Returns:
        sqrtPriceX96 (Q64.96)

    Raises:
        TickOutOfBounds: tick outside the valid range
    """
    _check_tick(tick)

    abs_tick = abs(tick)
    ratio = _SQRT_RATIO_BIT0 if abs_tick & 0x1 else Q128

    for bit, multiplier in enumerate(_SQRT_RATIO_MULTIPLIERS, start=1):
        if abs_tick & (1 << bit):
            ratio = (ratio * multiplier) >> 128

    # The table encodes 1/sqrt(1.0001)^|tick|; invert for the upper half
    if tick > 0:
        ratio = UINT256_MAX // ratio

    # Q128.128 -> Q64.96, rounding up
    return (ratio >> 32) + (1 if ratio % (1 << 32) else 0)


def get_tick_at_sqrt_ratio(sqrt_price_x96: int) -> int:
    """Greatest tick whose sqrt ratio is <= sqrt_price_x96

    Args:
        sqrt_price_x96: sqrtPriceX96 (Q64.96)

    Returns:
        Tick index

    Raises:
        SqrtPriceOutOfBounds: price outside [MIN_SQRT_RATIO, MAX_SQRT_RATIO)
    """
    if sqrt_price_x96 < MIN_SQRT_RATIO or sqrt_price_x96 >= MAX_SQRT_RATIO:
        raise SqrtPriceOutOfBounds(
            f"sqrtPriceX96 {sqrt_price_x96} out of bounds [{MIN_SQRT_RATIO}, {MAX_SQRT_RATIO})"
        )

    # ratio(low) <= sqrt_price_x96 < ratio(high)
    low, high = MIN_TICK, MAX_TICK
    while high - low > 1:
        mid = (low + high) // 2
        if get_sqrt_ratio_at_tick(mid) <= sqrt_price_x96:
            low = mid
        else:
            high = mid
    return low


def tick_to_price(tick: int, decimals0: int = 6, decimals1: int = 6) -> float:
    """Tick -> human-readable price (token1 per token0)

    price = 1.0001^tick * 10^(decimals0 - decimals1)
    """
    return 1.0001 ** tick * (10 ** (decimals0 - decimals1))


def nearest_usable_tick(tick: int, tick_spacing: int) -> int:
    """Round a tick to the nearest multiple of the tick spacing

    Halves round up (toward +inf), so -30 with spacing 60 gives 0.
    The result is clamped to [MIN_TICK, MAX_TICK].

    Args:
        tick: Tick to round
        tick_spacing: Pool tick spacing (e.g. 60 for the 0.3% tier)

    Returns:
        Rounded tick

    Raises:
        InvalidTickSpacing: tick_spacing is not positive
    """
    if tick_spacing <= 0:
        raise InvalidTickSpacing(f"Tick spacing must be positive: {tick_spacing}")

    # floor(tick / spacing + 1/2) in exact integer arithmetic
    rounded = (2 * tick + tick_spacing) // (2 * tick_spacing) * tick_spacing
    return max(MIN_TICK, min(MAX_TICK, rounded))


def get_tick_spacing_for_fee(fee_tier: int) -> int:
    """Tick spacing for a fee tier (100, 500, 3000, 10000)"""
    if fee_tier not in TICK_SPACINGS:
        valid = ", ".join(str(fee) for fee in TICK_SPACINGS)
        raise InvalidTickSpacing(f"Invalid fee: {fee_tier}. Valid: {valid}")
    return TICK_SPACINGS[fee_tier]


def validate_tick_range(
    tick_lower: int,
    tick_upper: int,
    tick_spacing: Optional[int] = None
) -> None:
    """Reject a price range before any liquidity math runs

    Raises:
        TickOutOfBounds: either tick outside [MIN_TICK, MAX_TICK]
        InvalidRange: tick_lower >= tick_upper, or a tick not on the spacing grid
        InvalidTickSpacing: tick_spacing is not positive
    """
    _check_tick(tick_lower)
    _check_tick(tick_upper)

    if tick_lower >= tick_upper:
        raise InvalidRange(
            f"tickLower ({tick_lower}) must be less than tickUpper ({tick_upper})"
        )

    if tick_spacing is None:
        return
    if tick_spacing <= 0:
        raise InvalidTickSpacing(f"Tick spacing must be positive: {tick_spacing}")
    for tick in (tick_lower, tick_upper):
        if tick % tick_spacing != 0:
            raise InvalidRange(f"Tick {tick} is not a multiple of tick spacing {tick_spacing}")


def align_tick_range(tick_lower: int, tick_upper: int, tick_spacing: int) -> Tuple[int, int]:
    """Snap misaligned range bounds to usable ticks, then validate the range

    Bounds already on the spacing grid are left untouched.

    Returns:
        (tick_lower, tick_upper) aligned to tick_spacing
    """
    if tick_spacing <= 0:
        raise InvalidTickSpacing(f"Tick spacing must be positive: {tick_spacing}")

    if tick_lower % tick_spacing != 0:
        tick_lower = nearest_usable_tick(tick_lower, tick_spacing)
    if tick_upper % tick_spacing != 0:
        tick_upper = nearest_usable_tick(tick_upper, tick_spacing)

    validate_tick_range(tick_lower, tick_upper, tick_spacing)
    return tick_lower, tick_upper
