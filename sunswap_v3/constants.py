"""
SunSwap constants

Fixed-point and protocol constants shared by the math layer and the scripts:
- Q96 / Q192: sqrtPriceX96 encoding (2^96, 2^192)
- MIN_TICK / MAX_TICK and the matching sqrt ratio bounds
- FEE_TIERS / TICK_SPACINGS: SunSwap V3 fee tiers and their tick spacing
- TRON networks and the native TRX pseudo-address
"""

from typing import Dict

# Fixed-point encoding
Q96: int = 2 ** 96
Q128: int = 2 ** 128
Q192: int = 2 ** 192

# Tick range
MIN_TICK: int = -887272
MAX_TICK: int = 887272

# get_sqrt_ratio_at_tick(MIN_TICK) / get_sqrt_ratio_at_tick(MAX_TICK)
MIN_SQRT_RATIO: int = 4295128739
MAX_SQRT_RATIO: int = 1461446703485210103287273052203988822378723970342

UINT256_MAX: int = 2 ** 256 - 1
# Sentinel passed to collect() meaning "everything available"
UINT128_MAX: int = 2 ** 128 - 1

# Fee tiers (hundredths of a bip)
FEE_TIERS: Dict[int, str] = {
    100: "0.01%",
    500: "0.05%",
    3000: "0.3%",
    10000: "1%",
}

TICK_SPACINGS: Dict[int, int] = {
    100: 1,
    500: 10,
    3000: 60,
    10000: 200,
}

# V2 pair LP tokens always use 18 decimals
LP_DECIMALS: int = 18

# Native TRX pseudo-address used by SunSwap routers
TRX_ADDRESS: str = "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb"

NETWORKS = ("mainnet", "nile")
