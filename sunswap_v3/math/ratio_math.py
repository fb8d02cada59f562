"""
Ratio Math - SunSwap V2 constant-product pools

Liquidity added to a V2 pair must match the pair's reserve ratio; whatever
does not fit stays with the caller. Removing LP tokens returns a pro-rata
share of both reserves.

References:
- Uniswap V2 Periphery: UniswapV2Router02._addLiquidity
- Uniswap V2 Core: UniswapV2Pair.burn
"""

from typing import NamedTuple, Tuple

from ..errors import DivisionByZero, InvalidAmount


class OptimalAmounts(NamedTuple):
    """Amounts that preserve the pool ratio"""
    amount0: int
    amount1: int
    was_adjusted: bool


def optimal_amounts(
    desired0: int,
    desired1: int,
    reserve0: int,
    reserve1: int
) -> OptimalAmounts:
    """Largest pair of amounts within (desired0, desired1) at the pool ratio

    An empty pool keeps the desired amounts: the first depositor sets the
    price. Otherwise desired0 is kept and token1 is trimmed if possible;
    only when token1 is the binding side is token0 trimmed instead.

    Args:
        desired0: token0 raw amount the caller is willing to deposit
        desired1: token1 raw amount the caller is willing to deposit
        reserve0: pool token0 reserve
        reserve1: pool token1 reserve

    Returns:
        OptimalAmounts(amount0, amount1, was_adjusted)

    Raises:
        InvalidAmount: a negative input
        DivisionByZero: exactly one reserve is zero
    """
    for name, value in (("desired0", desired0), ("desired1", desired1),
                        ("reserve0", reserve0), ("reserve1", reserve1)):
        if value < 0:
            raise InvalidAmount(f"{name} must be non-negative: {value}")

    if reserve0 == 0 and reserve1 == 0:
        return OptimalAmounts(desired0, desired1, False)

    if reserve0 == 0 or reserve1 == 0:
        raise DivisionByZero(
            f"Pool has a zero reserve on one side: reserve0={reserve0}, reserve1={reserve1}"
        )

    optimal1 = desired0 * reserve1 // reserve0
    if optimal1 <= desired1:
        return OptimalAmounts(desired0, optimal1, optimal1 != desired1)

    optimal0 = desired1 * reserve0 // reserve1
    return OptimalAmounts(optimal0, desired1, optimal0 != desired0)


def unused_amounts(desired0: int, desired1: int, result: OptimalAmounts) -> Tuple[int, int]:
    """Leftover (desired - actual) per token that the caller must not spend"""
    return desired0 - result.amount0, desired1 - result.amount1


def expected_amounts_for_lp(
    lp_amount: int,
    reserve0: int,
    reserve1: int,
    total_supply: int
) -> Tuple[int, int]:
    """Token amounts returned when burning lp_amount LP tokens

    amount_i = lp_amount * reserve_i / total_supply (floored)

    Raises:
        DivisionByZero: total_supply is zero
        InvalidAmount: negative input or lp_amount above total_supply
    """
    if lp_amount < 0 or reserve0 < 0 or reserve1 < 0:
        raise InvalidAmount("LP amount and reserves must be non-negative")
    if total_supply == 0:
        raise DivisionByZero("Pair has zero LP total supply")
    if lp_amount > total_supply:
        raise InvalidAmount(f"LP amount {lp_amount} exceeds total supply {total_supply}")

    return lp_amount * reserve0 // total_supply, lp_amount * reserve1 // total_supply
