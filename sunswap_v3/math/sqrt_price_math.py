"""
Sqrt Price Math - sqrtPriceX96 helpers

SunSwap V3 stores prices as sqrtPriceX96 = sqrt(price) * 2^96.
A brand-new pool has no price yet, so the first depositor's amount ratio
defines it; that computation needs an exact integer square root because
float sqrt loses precision long before 2^192.
"""

from ..constants import Q96, Q192
from ..errors import DivisionByZero, InvalidAmount


def isqrt(n: int) -> int:
    """Integer square root, floor(sqrt(n))

    Newton's method starting from n. Each step x' = (x + n // x) // 2;
    the iteration stops as soon as the next guess is not smaller than the
    current one, at which point x is the floor of the true root.

    Raises:
        InvalidAmount: n is negative
    """
    if n < 0:
        raise InvalidAmount(f"Negative sqrt input: {n}")
    if n == 0:
        return 0

    x = n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def initial_sqrt_price_from_amounts(
    amount0: int,
    decimals0: int,
    amount1: int,
    decimals1: int
) -> int:
    """Initial sqrtPriceX96 for a pool bootstrapped with the given deposit

    sqrtPriceX96 = sqrt(amount1 * 10^decimals0 * 2^192 / (amount0 * 10^decimals1))

    Args:
        amount0: token0 raw amount
        decimals0: token0 decimals
        amount1: token1 raw amount
        decimals1: token1 decimals

    Returns:
        sqrtPriceX96 implied by the deposit ratio

    Raises:
        DivisionByZero: amount0 is zero
        InvalidAmount: a negative amount
    """
    if amount0 < 0 or amount1 < 0:
        raise InvalidAmount(f"Amounts must be non-negative: {amount0}, {amount1}")

    numerator = amount1 * (10 ** decimals0) * Q192
    denominator = amount0 * (10 ** decimals1)
    if denominator == 0:
        raise DivisionByZero("Cannot compute price with zero amount0")

    return isqrt(numerator // denominator)


def sqrt_price_x96_to_price(
    sqrt_price_x96: int,
    decimals0: int = 6,
    decimals1: int = 6
) -> float:
    """sqrtPriceX96 -> human-readable price (token1 per token0)

    price = (sqrtPriceX96 / 2^96)^2 * 10^(decimals0 - decimals1)
    """
    sqrt_price = sqrt_price_x96 / Q96
    return sqrt_price ** 2 * (10 ** (decimals0 - decimals1))
