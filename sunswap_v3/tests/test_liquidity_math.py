"""
Liquidity Math tests

Liquidity <-> amount conversions over a price range.
"""

import pytest

from ..math.liquidity_math import (
    get_liquidity_for_amount0,
    get_liquidity_for_amount1,
    get_liquidity_for_amounts,
    get_amount0_for_liquidity,
    get_amount1_for_liquidity,
    get_amounts_for_liquidity,
    liquidity_for_percent,
)
from ..math.tick_math import get_sqrt_ratio_at_tick, get_tick_spacing_for_fee, validate_tick_range
from ..constants import Q96
from ..errors import InvalidAmount, InvalidRange


SQRT_A = get_sqrt_ratio_at_tick(-600)
SQRT_B = get_sqrt_ratio_at_tick(600)


class TestSingleSidedLiquidity:
    """get_liquidity_for_amount0, get_liquidity_for_amount1"""

    def test_amount0_formula(self):
        expected = 10 ** 6 * (SQRT_A * SQRT_B // Q96) // (SQRT_B - SQRT_A)
        assert get_liquidity_for_amount0(SQRT_A, SQRT_B, 10 ** 6) == expected

    def test_amount1_formula(self):
        expected = 10 ** 6 * Q96 // (SQRT_B - SQRT_A)
        assert get_liquidity_for_amount1(SQRT_A, SQRT_B, 10 ** 6) == expected

    def test_bounds_are_ordered(self):
        assert get_liquidity_for_amount0(SQRT_B, SQRT_A, 10 ** 6) == get_liquidity_for_amount0(SQRT_A, SQRT_B, 10 ** 6)
        assert get_liquidity_for_amount1(SQRT_B, SQRT_A, 10 ** 6) == get_liquidity_for_amount1(SQRT_A, SQRT_B, 10 ** 6)

    def test_zero_amount(self):
        assert get_liquidity_for_amount0(SQRT_A, SQRT_B, 0) == 0
        assert get_liquidity_for_amount1(SQRT_A, SQRT_B, 0) == 0

    def test_equal_bounds(self):
        with pytest.raises(InvalidRange):
            get_liquidity_for_amount0(SQRT_A, SQRT_A, 10 ** 6)
        with pytest.raises(InvalidRange):
            get_liquidity_for_amount1(SQRT_A, SQRT_A, 10 ** 6)

    def test_negative_amount(self):
        with pytest.raises(InvalidAmount):
            get_liquidity_for_amount0(SQRT_A, SQRT_B, -1)
        with pytest.raises(InvalidAmount):
            get_liquidity_for_amount1(SQRT_A, SQRT_B, -1)


class TestAmountsForLiquidity:
    """get_amount0_for_liquidity, get_amount1_for_liquidity"""

    def test_amount0_formula(self):
        liquidity = 10 ** 18
        expected = ((liquidity << 96) * (SQRT_B - SQRT_A) // SQRT_B) // SQRT_A
        assert get_amount0_for_liquidity(SQRT_A, SQRT_B, liquidity) == expected

    def test_amount1_formula(self):
        liquidity = 10 ** 18
        assert get_amount1_for_liquidity(SQRT_A, SQRT_B, liquidity) == liquidity * (SQRT_B - SQRT_A) // Q96

    def test_round_down(self):
        """Amounts never exceed what minted the liquidity"""
        liquidity = get_liquidity_for_amount1(SQRT_A, SQRT_B, 10 ** 6)
        assert get_amount1_for_liquidity(SQRT_A, SQRT_B, liquidity) <= 10 ** 6
        liquidity = get_liquidity_for_amount0(SQRT_A, SQRT_B, 10 ** 6)
        assert get_amount0_for_liquidity(SQRT_A, SQRT_B, liquidity) <= 10 ** 6

    def test_negative_liquidity(self):
        with pytest.raises(InvalidAmount):
            get_amount0_for_liquidity(SQRT_A, SQRT_B, -1)
        with pytest.raises(InvalidAmount):
            get_amount1_for_liquidity(SQRT_A, SQRT_B, -1)


class TestLiquidityForAmounts:
    """get_liquidity_for_amounts / get_amounts_for_liquidity price regimes"""

    def test_in_range_roundtrip(self):
        amount0 = amount1 = 1000000
        liquidity = get_liquidity_for_amounts(Q96, SQRT_A, SQRT_B, amount0, amount1)
        assert liquidity > 0

        got0, got1 = get_amounts_for_liquidity(Q96, SQRT_A, SQRT_B, liquidity)
        assert got0 > 0 and got1 > 0
        assert got0 <= amount0
        assert got1 <= amount1

    def test_in_range_uses_binding_side(self):
        liquidity = get_liquidity_for_amounts(Q96, SQRT_A, SQRT_B, 10 ** 6, 10 ** 9)
        assert liquidity == get_liquidity_for_amount0(Q96, SQRT_B, 10 ** 6)

        liquidity = get_liquidity_for_amounts(Q96, SQRT_A, SQRT_B, 10 ** 9, 10 ** 6)
        assert liquidity == get_liquidity_for_amount1(SQRT_A, Q96, 10 ** 6)

    @pytest.mark.parametrize("amount0,amount1", [(10 ** 6, 10 ** 6), (1, 10 ** 18), (10 ** 18, 1), (12345, 67890)])
    def test_roundtrip_never_overshoots(self, amount0, amount1):
        sqrt_price = get_sqrt_ratio_at_tick(123)
        liquidity = get_liquidity_for_amounts(sqrt_price, SQRT_A, SQRT_B, amount0, amount1)
        got0, got1 = get_amounts_for_liquidity(sqrt_price, SQRT_A, SQRT_B, liquidity)
        assert got0 <= amount0
        assert got1 <= amount1

    def test_below_range_only_token0(self):
        sqrt_below = get_sqrt_ratio_at_tick(-1200)
        liquidity = get_liquidity_for_amounts(sqrt_below, SQRT_A, SQRT_B, 10 ** 6, 10 ** 6)
        amount0, amount1 = get_amounts_for_liquidity(sqrt_below, SQRT_A, SQRT_B, liquidity)
        assert amount0 > 0
        assert amount1 == 0

    def test_above_range_only_token1(self):
        sqrt_above = get_sqrt_ratio_at_tick(1200)
        liquidity = get_liquidity_for_amounts(sqrt_above, SQRT_A, SQRT_B, 10 ** 6, 10 ** 6)
        amount0, amount1 = get_amounts_for_liquidity(sqrt_above, SQRT_A, SQRT_B, liquidity)
        assert amount0 == 0
        assert amount1 > 0

    def test_price_at_lower_bound_is_below(self):
        liquidity = get_liquidity_for_amounts(SQRT_A, SQRT_A, SQRT_B, 10 ** 6, 10 ** 6)
        assert liquidity == get_liquidity_for_amount0(SQRT_A, SQRT_B, 10 ** 6)
        assert get_amounts_for_liquidity(SQRT_A, SQRT_A, SQRT_B, liquidity)[1] == 0

    def test_price_at_upper_bound_is_above(self):
        liquidity = get_liquidity_for_amounts(SQRT_B, SQRT_A, SQRT_B, 10 ** 6, 10 ** 6)
        assert liquidity == get_liquidity_for_amount1(SQRT_A, SQRT_B, 10 ** 6)
        assert get_amounts_for_liquidity(SQRT_B, SQRT_A, SQRT_B, liquidity)[0] == 0

    def test_bounds_are_ordered(self):
        forward = get_liquidity_for_amounts(Q96, SQRT_A, SQRT_B, 10 ** 6, 10 ** 6)
        reverse = get_liquidity_for_amounts(Q96, SQRT_B, SQRT_A, 10 ** 6, 10 ** 6)
        assert forward == reverse

    def test_equal_bounds(self):
        with pytest.raises(InvalidRange):
            get_liquidity_for_amounts(Q96, SQRT_A, SQRT_A, 10 ** 6, 10 ** 6)
        with pytest.raises(InvalidRange):
            get_amounts_for_liquidity(Q96, SQRT_A, SQRT_A, 10 ** 6)

    def test_zero_liquidity(self):
        assert get_amounts_for_liquidity(Q96, SQRT_A, SQRT_B, 0) == (0, 0)

    def test_end_to_end_fee_3000(self):
        """0.3% pool, range [-60, 60], price 1, one token of each side"""
        tick_lower, tick_upper = -60, 60
        validate_tick_range(tick_lower, tick_upper, get_tick_spacing_for_fee(3000))

        sqrt_lower = get_sqrt_ratio_at_tick(tick_lower)
        sqrt_upper = get_sqrt_ratio_at_tick(tick_upper)
        liquidity = get_liquidity_for_amounts(Q96, sqrt_lower, sqrt_upper, 1000000, 1000000)
        assert liquidity > 0

        amount0, amount1 = get_amounts_for_liquidity(Q96, sqrt_lower, sqrt_upper, liquidity)
        assert 0 < amount0 <= 1000000
        assert 0 < amount1 <= 1000000


class TestLiquidityForPercent:
    """liquidity_for_percent"""

    @pytest.mark.parametrize("liquidity,percent,expected", [
        (1000, 100, 1000),
        (1000, 50, 500),
        (1000, 0, 0),
        (999, 33, 329),
        (1, 50, 0),
    ])
    def test_share(self, liquidity, percent, expected):
        assert liquidity_for_percent(liquidity, percent) == expected

    @pytest.mark.parametrize("percent", [-1, 101])
    def test_percent_out_of_range(self, percent):
        with pytest.raises(InvalidAmount):
            liquidity_for_percent(1000, percent)

    def test_negative_liquidity(self):
        with pytest.raises(InvalidAmount):
            liquidity_for_percent(-1, 50)
