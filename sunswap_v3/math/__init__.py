"""
Math layer for SunSwap liquidity

Integer-precision math functions:
- tick_math: Tick <-> sqrtPriceX96, usable ticks, range validation
- sqrt_price_math: integer sqrt and pool bootstrap price
- liquidity_math: V3 liquidity <-> token amounts
- ratio_math: V2 ratio balancing and LP burn estimates
- convert: raw <-> human amounts, slippage minimums
"""

from .tick_math import (
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
    tick_to_price,
    nearest_usable_tick,
    get_tick_spacing_for_fee,
    validate_tick_range,
    align_tick_range,
)
from .sqrt_price_math import (
    isqrt,
    initial_sqrt_price_from_amounts,
    sqrt_price_x96_to_price,
)
from .liquidity_math import (
    get_liquidity_for_amount0,
    get_liquidity_for_amount1,
    get_liquidity_for_amounts,
    get_amount0_for_liquidity,
    get_amount1_for_liquidity,
    get_amounts_for_liquidity,
    liquidity_for_percent,
)
from .ratio_math import (
    OptimalAmounts,
    optimal_amounts,
    unused_amounts,
    expected_amounts_for_lp,
)
from .convert import (
    to_raw,
    from_raw,
    apply_slippage,
)
