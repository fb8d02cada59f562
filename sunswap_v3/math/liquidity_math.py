"""
Liquidity Math - liquidity <-> token amounts

Concentrated-liquidity conversions between a position's token amounts and
its liquidity for a given price range.

References:
- Uniswap V3 Periphery: contracts/libraries/LiquidityAmounts.sol
- Whitepaper Section 6.2.1: Concentrated Liquidity

Formulas:
    L = dy / (sqrtP_upper - sqrtP_lower)              # token1 side
    L = dx * sqrtP_lower * sqrtP_upper / (sqrtP_upper - sqrtP_lower)  # token0 side

Every division floors: minted liquidity and returned amounts are lower
bounds the pool can always honour.
"""

from typing import Tuple

from ..constants import Q96
from ..errors import InvalidAmount, InvalidRange


def _ordered(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int) -> Tuple[int, int]:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        return sqrt_ratio_b_x96, sqrt_ratio_a_x96
    return sqrt_ratio_a_x96, sqrt_ratio_b_x96


def _require_width(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int) -> None:
    if sqrt_ratio_b_x96 <= sqrt_ratio_a_x96:
        raise InvalidRange("Price range is empty: lower and upper sqrt prices are equal")


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise InvalidAmount(f"{name} must be non-negative: {value}")


def get_liquidity_for_amount0(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int
) -> int:
    """Maximum liquidity that amount0 of token0 can provide in [a, b]

    L = amount0 * (sqrtA * sqrtB / Q96) / (sqrtB - sqrtA)
    """
    _require_non_negative(amount0=amount0)
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    _require_width(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    intermediate = sqrt_ratio_a_x96 * sqrt_ratio_b_x96 // Q96
    return amount0 * intermediate // (sqrt_ratio_b_x96 - sqrt_ratio_a_x96)


def get_liquidity_for_amount1(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount1: int
) -> int:
    """Maximum liquidity that amount1 of token1 can provide in [a, b]

    L = amount1 * Q96 / (sqrtB - sqrtA)
    """
    _require_non_negative(amount1=amount1)
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    _require_width(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    return amount1 * Q96 // (sqrt_ratio_b_x96 - sqrt_ratio_a_x96)


def get_liquidity_for_amounts(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int
) -> int:
    """Maximum liquidity mintable from amount0/amount1 at the current price

    Price at or below the range: bounded by amount0 alone (position is all
    token0). At or above: bounded by amount1 alone. Inside: the smaller of
    the two single-sided liquidities.

    Args:
        sqrt_ratio_x96: Current sqrtPriceX96
        sqrt_ratio_a_x96: sqrtPriceX96 at one range bound
        sqrt_ratio_b_x96: sqrtPriceX96 at the other range bound
        amount0: token0 raw amount
        amount1: token1 raw amount

    Returns:
        Liquidity

    Raises:
        InvalidRange: the two bounds are equal
        InvalidAmount: a negative amount
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    _require_width(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_ratio_a_x96:
        return get_liquidity_for_amount0(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount0)

    if sqrt_ratio_x96 < sqrt_ratio_b_x96:
        liquidity0 = get_liquidity_for_amount0(sqrt_ratio_x96, sqrt_ratio_b_x96, amount0)
        liquidity1 = get_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_x96, amount1)
        return min(liquidity0, liquidity1)

    return get_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount1)


def get_amount0_for_liquidity(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> int:
    """token0 held by liquidity over [a, b], rounded down

    amount0 = L * Q96 * (sqrtB - sqrtA) / sqrtB / sqrtA
    """
    _require_non_negative(liquidity=liquidity)
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    _require_width(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    numerator = (liquidity << 96) * (sqrt_ratio_b_x96 - sqrt_ratio_a_x96)
    return numerator // sqrt_ratio_b_x96 // sqrt_ratio_a_x96


def get_amount1_for_liquidity(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> int:
    """token1 held by liquidity over [a, b], rounded down

    amount1 = L * (sqrtB - sqrtA) / Q96
    """
    _require_non_negative(liquidity=liquidity)
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    _require_width(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    return liquidity * (sqrt_ratio_b_x96 - sqrt_ratio_a_x96) // Q96


def get_amounts_for_liquidity(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> Tuple[int, int]:
    """Token amounts represented by liquidity at the current price

    Below the range the position is all token0, above it all token1,
    inside it holds both.

    Args:
        sqrt_ratio_x96: Current sqrtPriceX96
        sqrt_ratio_a_x96: sqrtPriceX96 at one range bound
        sqrt_ratio_b_x96: sqrtPriceX96 at the other range bound
        liquidity: Position liquidity

    Returns:
        (amount0, amount1)
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    _require_width(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_ratio_a_x96:
        return get_amount0_for_liquidity(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity), 0

    if sqrt_ratio_x96 < sqrt_ratio_b_x96:
        amount0 = get_amount0_for_liquidity(sqrt_ratio_x96, sqrt_ratio_b_x96, liquidity)
        amount1 = get_amount1_for_liquidity(sqrt_ratio_a_x96, sqrt_ratio_x96, liquidity)
        return amount0, amount1

    return 0, get_amount1_for_liquidity(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity)


def liquidity_for_percent(liquidity: int, percent: int) -> int:
    """Share of a position's liquidity to withdraw, rounded down

    Raises:
        InvalidAmount: negative liquidity or percent outside [0, 100]
    """
    _require_non_negative(liquidity=liquidity)
    if percent < 0 or percent > 100:
        raise InvalidAmount(f"Percent must be between 0 and 100: {percent}")
    return liquidity * percent // 100
