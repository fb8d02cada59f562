"""
Result Schemas using Pydantic

JSON payloads printed on stdout by the command-line skills. Field names are
snake_case in Python and camelCase on the wire (dump with by_alias=True).
Raw on-chain integers are carried as decimal strings.
"""
from pydantic import BaseModel, Field
from typing import Optional


class TokenAmount(BaseModel):
    """Token amount in human and raw units"""
    symbol: str = Field(..., description="Token symbol")
    amount: str = Field(..., description="Human-readable amount")
    raw: str = Field(..., description="Amount in the token's smallest unit")
    minimum: Optional[str] = Field(default=None, description="Slippage-adjusted minimum (human)")

    class Config:
        json_schema_extra = {
            "example": {
                "symbol": "USDT",
                "amount": "1.000000",
                "raw": "1000000",
                "minimum": "0.950000"
            }
        }


class PositionTokenEstimate(BaseModel):
    """Desired vs. estimated deposit for one side of a V3 position"""
    symbol: str = Field(..., description="Token symbol")
    desired: str = Field(..., description="Desired deposit (human)")
    estimated: str = Field(..., description="Amount the mint is expected to pull (human)")
    estimated_raw: str = Field(..., serialization_alias="estimatedRaw", description="Estimated amount (raw)")
    minimum: str = Field(..., description="Slippage-adjusted minimum (human)")
    minimum_raw: str = Field(..., serialization_alias="minimumRaw", description="Slippage-adjusted minimum (raw)")


class AddPositionResult(BaseModel):
    """Output of `sunswap-position add`"""
    action: str = Field(default="addPosition", description="Action name")
    fee: str = Field(..., description="Fee tier with label, e.g. '3000 (0.3%)'")
    tick_spacing: int = Field(..., serialization_alias="tickSpacing", description="Tick spacing of the fee tier")
    tick_lower: int = Field(..., serialization_alias="tickLower", description="Aligned lower tick")
    tick_upper: int = Field(..., serialization_alias="tickUpper", description="Aligned upper tick")
    price_lower: float = Field(..., serialization_alias="priceLower", description="token1 per token0 at the lower tick")
    price_upper: float = Field(..., serialization_alias="priceUpper", description="token1 per token0 at the upper tick")
    ticks_adjusted: bool = Field(..., serialization_alias="ticksAdjusted", description="Whether a tick was moved to the spacing grid")
    current_tick: int = Field(..., serialization_alias="currentTick", description="Pool tick")
    sqrt_price_x96: str = Field(..., serialization_alias="sqrtPriceX96", description="Pool sqrt price (Q64.96)")
    status: str = Field(..., description="Position vs. current price: below, in-range or above")
    estimated_liquidity: str = Field(..., serialization_alias="estimatedLiquidity", description="Liquidity the deposit mints")
    token0: PositionTokenEstimate = Field(..., description="token0 side")
    token1: PositionTokenEstimate = Field(..., description="token1 side")
    swapped: bool = Field(..., description="Whether TOKEN_B sorted before TOKEN_A")
    slippage: float = Field(..., description="Slippage tolerance (%)")

    class Config:
        json_schema_extra = {
            "example": {
                "action": "addPosition",
                "fee": "3000 (0.3%)",
                "tickSpacing": 60,
                "tickLower": -60,
                "tickUpper": 60,
                "priceLower": 0.994018,
                "priceUpper": 1.006018,
                "ticksAdjusted": False,
                "currentTick": 0,
                "sqrtPriceX96": "79228162514264337593543950336",
                "status": "in-range",
                "estimatedLiquidity": "333850249",
                "token0": {
                    "symbol": "USDT",
                    "desired": "1.000000",
                    "estimated": "0.999999",
                    "estimatedRaw": "999999",
                    "minimum": "0.949999",
                    "minimumRaw": "949999"
                },
                "token1": {
                    "symbol": "USDD",
                    "desired": "1.000000",
                    "estimated": "0.999999",
                    "estimatedRaw": "999999",
                    "minimum": "0.949999",
                    "minimumRaw": "949999"
                },
                "swapped": False,
                "slippage": 5.0
            }
        }


class RemovePositionResult(BaseModel):
    """Output of `sunswap-position remove`"""
    action: str = Field(default="decreaseLiquidity", description="Action name")
    fee: str = Field(..., description="Fee tier with label")
    tick_lower: int = Field(..., serialization_alias="tickLower", description="Lower tick")
    tick_upper: int = Field(..., serialization_alias="tickUpper", description="Upper tick")
    percent: int = Field(..., description="Share of the position removed (%)")
    liquidity_to_remove: str = Field(..., serialization_alias="liquidityToRemove", description="Liquidity passed to decreaseLiquidity")
    expected_token0: TokenAmount = Field(..., serialization_alias="expectedToken0", description="token0 returned")
    expected_token1: TokenAmount = Field(..., serialization_alias="expectedToken1", description="token1 returned")
    remaining_liquidity: str = Field(..., serialization_alias="remainingLiquidity", description="Liquidity left in the position")
    remaining_token0: TokenAmount = Field(..., serialization_alias="remainingToken0", description="token0 still in the position")
    remaining_token1: TokenAmount = Field(..., serialization_alias="remainingToken1", description="token1 still in the position")
    collect_amount_max: str = Field(..., serialization_alias="collectAmountMax", description="amountMax for collect() (uint128 max)")
    slippage: float = Field(..., description="Slippage tolerance (%)")


class InitPriceResult(BaseModel):
    """Output of `sunswap-position init-price`"""
    action: str = Field(default="initPrice", description="Action name")
    sqrt_price_x96: str = Field(..., serialization_alias="sqrtPriceX96", description="Initial sqrt price (Q64.96)")
    tick: int = Field(..., description="Tick of the initial price")
    price: float = Field(..., description="Human token1-per-token0 price")

    class Config:
        json_schema_extra = {
            "example": {
                "action": "initPrice",
                "sqrtPriceX96": "79228162514264337593543950336",
                "tick": 0,
                "price": 1.0
            }
        }


class PairTokenAmounts(BaseModel):
    """One side of a V2 add: desired, optimal, minimum and unused amounts"""
    symbol: str = Field(..., description="Token symbol")
    desired: str = Field(..., description="Desired deposit (human)")
    optimal: str = Field(..., description="Deposit matching the pool ratio (human)")
    optimal_raw: str = Field(..., serialization_alias="optimalRaw", description="Optimal deposit (raw)")
    minimum: str = Field(..., description="Slippage-adjusted minimum (human)")
    minimum_raw: str = Field(..., serialization_alias="minimumRaw", description="Slippage-adjusted minimum (raw)")
    unused: str = Field(..., description="Desired amount left out of the deposit (human)")


class AddLiquidityResult(BaseModel):
    """Output of `sunswap-liquidity add`"""
    action: str = Field(default="addLiquidity", description="Action name")
    token_a: PairTokenAmounts = Field(..., serialization_alias="tokenA", description="Token A side")
    token_b: PairTokenAmounts = Field(..., serialization_alias="tokenB", description="Token B side")
    was_adjusted: bool = Field(..., serialization_alias="wasAdjusted", description="Whether the desired amounts were trimmed")
    new_pool: bool = Field(..., serialization_alias="newPool", description="Pair has no reserves yet")
    slippage: float = Field(..., description="Slippage tolerance (%)")


class RemoveLiquidityResult(BaseModel):
    """Output of `sunswap-liquidity remove`"""
    action: str = Field(default="removeLiquidity", description="Action name")
    lp_to_remove: str = Field(..., serialization_alias="lpToRemove", description="LP tokens burned (human, 18 decimals)")
    share_percent: float = Field(..., serialization_alias="sharePercent", description="Share of the total LP supply burned (%)")
    expected_token_a: TokenAmount = Field(..., serialization_alias="expectedTokenA", description="Token A returned")
    expected_token_b: TokenAmount = Field(..., serialization_alias="expectedTokenB", description="Token B returned")
    slippage: float = Field(..., description="Slippage tolerance (%)")


class PriceResult(BaseModel):
    """Output of `sunswap-price`"""
    token_symbol: str = Field(..., serialization_alias="tokenSymbol", description="Token symbol (or the input)")
    token_address: str = Field(..., serialization_alias="tokenAddress", description="Token contract address")
    currency: str = Field(..., description="Quote currency")
    price: str = Field(..., description="Price as a decimal string")
    last_updated: Optional[int] = Field(default=None, serialization_alias="lastUpdated", description="Quote timestamp (unix ms)")
    last_updated_iso: Optional[str] = Field(default=None, serialization_alias="lastUpdatedISO", description="Quote timestamp (ISO 8601, UTC)")

    class Config:
        json_schema_extra = {
            "example": {
                "tokenSymbol": "SUN",
                "tokenAddress": "TSSMHYeV2uE9qYH95DqyoCuNCzEL1NvU3S",
                "currency": "USD",
                "price": "0.0215",
                "lastUpdated": 1700000000000,
                "lastUpdatedISO": "2023-11-14T22:13:20+00:00"
            }
        }


class ErrorResult(BaseModel):
    """Failure payload printed before a non-zero exit"""
    success: bool = Field(default=False, description="Always false")
    error: str = Field(..., description="Error message")
    error_type: str = Field(..., serialization_alias="errorType", description="Exception class name")
