"""
Data layer for the SunSwap calculator

Token registry, Sun price API client and plain data types
"""

from .types import Token, PoolState, PairReserves
from .tokens import UnknownTokenError, get_token, pair_address, sort_tokens
from .price_client import PriceClient, PriceClientConfig, PriceClientError, PriceQuote
