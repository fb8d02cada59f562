"""
Typed errors raised by the SunSwap math layer.

Every error is a contract violation by the caller; nothing here is retried.
All of them derive from ValueError so callers that only know about bad
arguments still catch them.
"""


class SunSwapMathError(ValueError):
    """Base class for liquidity math errors"""
    pass


class TickOutOfBounds(SunSwapMathError):
    """Tick outside [MIN_TICK, MAX_TICK]"""
    pass


class SqrtPriceOutOfBounds(TickOutOfBounds):
    """sqrtPriceX96 outside [MIN_SQRT_RATIO, MAX_SQRT_RATIO)"""
    pass


class InvalidTickSpacing(SunSwapMathError):
    """Fee tier without a known tick spacing, or a non-positive spacing"""
    pass


class InvalidRange(SunSwapMathError):
    """Price range whose lower bound is not strictly below the upper bound,
    or whose bounds are not usable ticks for the pool"""
    pass


class InvalidAmount(SunSwapMathError):
    """Negative amount, liquidity or percentage"""
    pass


class DivisionByZero(SunSwapMathError, ZeroDivisionError):
    """Price or ratio computation with a zero denominator"""
    pass
