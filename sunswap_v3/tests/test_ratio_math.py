"""
Ratio Math tests

V2 deposit balancing and LP burn estimates.
"""

import pytest

from ..math.ratio_math import (
    OptimalAmounts,
    optimal_amounts,
    unused_amounts,
    expected_amounts_for_lp,
)
from ..errors import DivisionByZero, InvalidAmount


class TestOptimalAmounts:
    """optimal_amounts"""

    def test_new_pool_keeps_desired(self):
        assert optimal_amounts(100, 200, 0, 0) == (100, 200, False)

    def test_balanced_input(self):
        assert optimal_amounts(100, 100, 1000, 1000) == (100, 100, False)

    def test_trims_token1_first(self):
        assert optimal_amounts(100, 100, 2000, 1000) == (100, 50, True)

    def test_trims_token0_when_token1_binds(self):
        assert optimal_amounts(100, 100, 1000, 2000) == (50, 100, True)

    def test_exact_ratio_large_numbers(self):
        result = optimal_amounts(100000000, 50000000, 1000000000000, 500000000000)
        assert result == (100000000, 50000000, False)

    def test_returns_named_tuple(self):
        result = optimal_amounts(100, 100, 2000, 1000)
        assert isinstance(result, OptimalAmounts)
        assert result.amount0 == 100
        assert result.amount1 == 50
        assert result.was_adjusted is True

    def test_never_exceeds_desired(self):
        for reserves in [(7, 3), (3, 7), (10 ** 12, 1), (1, 10 ** 12)]:
            amount0, amount1, _ = optimal_amounts(12345, 6789, *reserves)
            assert amount0 <= 12345
            assert amount1 <= 6789

    def test_rounds_down(self):
        # 100 * 1 / 3 = 33.33 -> 33
        assert optimal_amounts(100, 100, 3, 1) == (100, 33, True)

    @pytest.mark.parametrize("reserve0,reserve1", [(0, 1000), (1000, 0)])
    def test_one_sided_reserve(self, reserve0, reserve1):
        with pytest.raises(DivisionByZero):
            optimal_amounts(100, 100, reserve0, reserve1)

    def test_negative_input(self):
        with pytest.raises(InvalidAmount):
            optimal_amounts(-1, 100, 1000, 1000)


class TestUnusedAmounts:
    """unused_amounts"""

    def test_trimmed_side(self):
        result = optimal_amounts(100, 100, 2000, 1000)
        assert unused_amounts(100, 100, result) == (0, 50)

    def test_nothing_unused(self):
        result = optimal_amounts(100, 200, 0, 0)
        assert unused_amounts(100, 200, result) == (0, 0)


class TestExpectedAmountsForLp:
    """expected_amounts_for_lp"""

    def test_pro_rata(self):
        assert expected_amounts_for_lp(10, 1000, 2000, 100) == (100, 200)

    def test_full_supply(self):
        assert expected_amounts_for_lp(100, 1000, 2000, 100) == (1000, 2000)

    def test_rounds_down(self):
        assert expected_amounts_for_lp(1, 10, 20, 3) == (3, 6)

    def test_zero_supply(self):
        with pytest.raises(DivisionByZero):
            expected_amounts_for_lp(0, 0, 0, 0)

    def test_exceeds_supply(self):
        with pytest.raises(InvalidAmount):
            expected_amounts_for_lp(101, 1000, 2000, 100)

    def test_negative_lp(self):
        with pytest.raises(InvalidAmount):
            expected_amounts_for_lp(-1, 1000, 2000, 100)
