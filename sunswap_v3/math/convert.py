"""
Amount conversion helpers

raw <-> human token amounts and slippage-protected minimums.
"""

import math
from typing import Union

from ..errors import InvalidAmount


def to_raw(amount: Union[str, int], decimals: int) -> int:
    """Human amount string -> raw integer amount

    Extra fractional digits beyond `decimals` are truncated, never rounded.

    >>> to_raw("0.5", 6)
    500000
    """
    text = str(amount).strip()
    if not text:
        raise InvalidAmount("Empty amount")
    if text.startswith("-"):
        raise InvalidAmount(f"Amount must be non-negative: {text}")

    whole, _, frac = text.partition(".")
    whole = whole or "0"
    frac = frac[:decimals].ljust(decimals, "0")

    digits = whole + frac
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidAmount(f"Invalid amount: {text}")
    return int(digits)


def from_raw(raw: Union[str, int], decimals: int) -> str:
    """Raw integer amount -> fixed-point string with `decimals` digits

    >>> from_raw(100000000, 6)
    '100.000000'
    """
    value = int(raw)
    sign = "-" if value < 0 else ""
    value = abs(value)

    divisor = 10 ** decimals
    whole = value // divisor
    if decimals == 0:
        return f"{sign}{whole}"
    frac = str(value % divisor).zfill(decimals)
    return f"{sign}{whole}.{frac}"


def apply_slippage(amount: int, slippage_pct: float) -> int:
    """Minimum acceptable amount for a slippage tolerance in percent

    min = amount * floor((1 - slippage / 100) * 10000) / 10000
    """
    if slippage_pct < 0 or slippage_pct > 100:
        raise InvalidAmount(f"Slippage must be between 0 and 100: {slippage_pct}")

    factor = math.floor((1 - slippage_pct / 100) * 10000)
    return int(amount) * factor // 10000
