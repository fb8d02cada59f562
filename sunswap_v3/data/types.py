"""
SunSwap data types

Plain dataclasses for the values the scripts pass into the math layer.
All on-chain numbers are int to keep full precision.
"""

from dataclasses import dataclass

from ..constants import TRX_ADDRESS


@dataclass(frozen=True)
class Token:
    """TRC20 token (or native TRX)"""
    symbol: str
    address: str  # base58 contract address
    decimals: int

    @property
    def is_trx(self) -> bool:
        return self.address == TRX_ADDRESS or self.symbol == "TRX"

    @classmethod
    def from_dict(cls, symbol: str, data: dict) -> "Token":
        return cls(
            symbol=symbol,
            address=data["address"],
            decimals=int(data["decimals"]),
        )


@dataclass(frozen=True)
class PoolState:
    """SunSwap V3 pool slot0 snapshot

    - sqrt_price_x96: current sqrt price (Q64.96)
    - tick: current tick
    - fee: fee tier (100, 500, 3000, 10000)
    - tick_spacing: spacing for the fee tier
    """
    sqrt_price_x96: int
    tick: int
    fee: int
    tick_spacing: int


@dataclass(frozen=True)
class PairReserves:
    """SunSwap V2 pair reserves, oriented as (token A, token B)"""
    reserve_a: int
    reserve_b: int
    total_supply: int = 0

    @property
    def is_empty(self) -> bool:
        return self.reserve_a == 0 and self.reserve_b == 0
