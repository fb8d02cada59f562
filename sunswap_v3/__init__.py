"""
SunSwap Liquidity Calculator

Integer-precision SunSwap V3 concentrated-liquidity math and V2 ratio
balancing, with thin command-line skills that print JSON for an agent.
"""

__version__ = "0.1.0"

from .constants import Q96, Q192, MIN_TICK, MAX_TICK, FEE_TIERS, TICK_SPACINGS
from .errors import (
    SunSwapMathError,
    TickOutOfBounds,
    SqrtPriceOutOfBounds,
    InvalidTickSpacing,
    InvalidRange,
    InvalidAmount,
    DivisionByZero,
)
